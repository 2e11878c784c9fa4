# model/__init__.py

"""
Declaration tables and operation types for timestamp-ordering validation:
per-object RTS/WTS state, the transaction timestamp table and the parsed
operations a schedule is made of. No protocol logic lives here.
"""

from .data_object import DataObjectState, DataObjectRegistry
from .transaction_table import TransactionTimestampTable
from .operation import Operation, OperationKind, ParsedSchedule
from .exceptions import UnknownObject, UnknownTransaction

__all__ = [
    "DataObjectState",
    "DataObjectRegistry",
    "TransactionTimestampTable",
    "Operation",
    "OperationKind",
    "ParsedSchedule",
    "UnknownObject",
    "UnknownTransaction",
]
