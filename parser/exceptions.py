# parser/exceptions.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Custom exceptions for input header and schedule line parsing

"""Domain-specific exceptions for schedule input processing.

All exceptions derive from :class:`ParseError`. Header errors are fatal for
the whole run because the declarations are structurally required; a
malformed schedule line only costs that one schedule.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Base class for errors raised while reading declarations or schedules."""

    pass


class MalformedScheduleLine(ParseError):
    """Raised when a schedule line has no ``-`` between its label and operations."""

    def __init__(self, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Schedule line is missing the '-' separator{where}: {line!r}")


class MissingDeclarationLine(ParseError):
    """Raised when the input has fewer than the three header lines."""

    def __init__(self, found: int):
        self.found = found
        super().__init__(
            f"Expected 3 declaration lines (objects, transactions, timestamps), found {found}"
        )


class UnparseableTimestamp(ParseError):
    """Raised when a timestamp token on line 3 is not an integer."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Timestamp is not an integer: {token!r}")


class TransactionCountMismatch(ParseError):
    """Raised when lines 2 and 3 declare different numbers of entries."""

    def __init__(self, transactions: int, timestamps: int):
        self.transactions = transactions
        self.timestamps = timestamps
        super().__init__(
            f"{transactions} transactions declared but {timestamps} timestamps given"
        )


class InvalidTransactionName(ParseError):
    """Raised when a transaction name is not of the form ``t<digits>``."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid transaction name: {token!r} (expected t<digits>)")


class DuplicateDeclaration(ParseError):
    """Raised when an object name or transaction id is declared twice."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Duplicate {kind} declaration: {name!r}")
