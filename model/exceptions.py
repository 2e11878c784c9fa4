# model/exceptions.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Lookup failures for undeclared data objects and transactions

"""Exceptions raised by the declaration tables.

Both errors mean the input references a name that the header never
declared. The data model is inconsistent at that point, so the whole run
is aborted rather than the single schedule being skipped.
"""


class UnknownObject(LookupError):
    """Raised when a schedule references a data object that was never declared."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown data object: '{name}'")


class UnknownTransaction(LookupError):
    """Raised when a schedule references a transaction that was never declared."""

    def __init__(self, transaction_id: int):
        self.transaction_id = transaction_id
        super().__init__(f"Unknown transaction: t{transaction_id}")
