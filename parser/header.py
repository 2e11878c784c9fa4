# parser/header.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Declaration header parsing: objects, transactions and their timestamps

"""Parsing of the three declaration lines that open every input.

    Line 1: object names              A, B, C, D;
    Line 2: transaction names         t1, t2, t3, t4;
    Line 3: timestamps, by position   8, 9, 1, 4;

Entries are separated by commas or semicolons; surrounding whitespace and
empty entries are ignored.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from model.data_object import DataObjectRegistry
from model.transaction_table import TransactionTimestampTable
from .exceptions import (
    DuplicateDeclaration,
    InvalidTransactionName,
    MissingDeclarationLine,
    TransactionCountMismatch,
    UnparseableTimestamp,
)
from utils.logger import get_logger

DECLARATION_LINE_COUNT = 3


@dataclass(frozen=True)
class Declarations:
    """Objects and transaction timestamps declared by an input header."""

    object_names: Tuple[str, ...]
    timestamps: Dict[int, int]

    def build_registry(self) -> DataObjectRegistry:
        return DataObjectRegistry(self.object_names)

    def build_transaction_table(self) -> TransactionTimestampTable:
        return TransactionTimestampTable(self.timestamps)


def split_names(line: str) -> List[str]:
    """Split a declaration line on ``,`` and ``;``, dropping empty entries."""
    return [part.strip() for part in line.replace(";", ",").split(",") if part.strip()]


def parse_transaction_id(name: str) -> int:
    """Extract the numeric id from a transaction name such as ``t12``.

    Raises:
        InvalidTransactionName: The name has no integer after its first character
    """
    try:
        return int(name[1:])
    except ValueError:
        raise InvalidTransactionName(name) from None


def parse_timestamp(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise UnparseableTimestamp(token) from None


def parse_declarations(lines: Sequence[str]) -> Declarations:
    """Parse the first three input lines into declarations.

    Args:
        lines: All input lines; only the first three are read

    Returns:
        Declarations holding object names and ``{transaction_id: timestamp}``

    Raises:
        MissingDeclarationLine: Fewer than three lines are present
        InvalidTransactionName: A transaction name is not ``t<digits>``
        UnparseableTimestamp: A timestamp is not an integer
        TransactionCountMismatch: Lines 2 and 3 differ in length
        DuplicateDeclaration: An object or transaction is declared twice
    """
    logger = get_logger()

    if len(lines) < DECLARATION_LINE_COUNT:
        raise MissingDeclarationLine(len(lines))

    object_names = split_names(lines[0])
    seen = set()
    for name in object_names:
        if name in seen:
            raise DuplicateDeclaration("object", name)
        seen.add(name)

    transaction_ids = [parse_transaction_id(name) for name in split_names(lines[1])]
    timestamp_values = [parse_timestamp(token) for token in split_names(lines[2])]

    if len(transaction_ids) != len(timestamp_values):
        raise TransactionCountMismatch(len(transaction_ids), len(timestamp_values))

    timestamps: Dict[int, int] = {}
    for transaction_id, timestamp in zip(transaction_ids, timestamp_values):
        if transaction_id in timestamps:
            raise DuplicateDeclaration("transaction", f"t{transaction_id}")
        timestamps[transaction_id] = timestamp

    logger.debug(
        f"Declared {len(object_names)} objects and {len(timestamps)} transactions"
    )
    return Declarations(tuple(object_names), timestamps)
