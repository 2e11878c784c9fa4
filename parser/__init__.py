# parser/__init__.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Input parsing components: declaration header and schedule lines

"""Input parsing for timestamp-ordering validation.

Core Functions:
    parse_declarations: Reads the three header lines into object names and
        transaction timestamps
    parse_schedule: Splits a schedule line into its label and the ordered
        operations it contains
    tokenize_operations: Scans an operation stream, skipping anything that
        is not a read, write or commit

Example:
    >>> from parser import parse_schedule
    >>> schedule = parse_schedule("E1-r1(A) w2(A) c")
    >>> [str(op) for op in schedule.operations]
    ['r1(A)', 'w2(A)', 'c']
"""

from .exceptions import (
    ParseError,
    MalformedScheduleLine,
    MissingDeclarationLine,
    UnparseableTimestamp,
    TransactionCountMismatch,
    InvalidTransactionName,
    DuplicateDeclaration,
)
from .header import Declarations, parse_declarations, split_names
from .schedule import parse_schedule, tokenize_operations

__all__ = [
    "parse_declarations",
    "parse_schedule",
    "tokenize_operations",
    "split_names",
    "Declarations",
    "ParseError",
    "MalformedScheduleLine",
    "MissingDeclarationLine",
    "UnparseableTimestamp",
    "TransactionCountMismatch",
    "InvalidTransactionName",
    "DuplicateDeclaration",
]

__version__ = "1.0.0"
__description__ = "Declaration and schedule parsing for timestamp-ordering validation"
