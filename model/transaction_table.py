# model/transaction_table.py

"""
Transaction timestamp table.

Maps each declared transaction id to the logical timestamp it was assigned
in the input header. Built once per run and shared read-only by every
schedule evaluation.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Iterator, Mapping

from .exceptions import UnknownTransaction


class TransactionTimestampTable:
    def __init__(self, timestamps: Mapping[int, int]):
        self._timestamps = MappingProxyType(dict(timestamps))

    def get(self, transaction_id: int) -> int:
        """
        Timestamp of ``transaction_id``.
        Raises UnknownTransaction if the id was never declared.
        """
        try:
            return self._timestamps[transaction_id]
        except KeyError:
            raise UnknownTransaction(transaction_id) from None

    def as_mapping(self) -> Mapping[int, int]:
        """
        Read-only view of ``{transaction_id: timestamp}``.
        """
        return self._timestamps

    def __getitem__(self, transaction_id: int) -> int:
        return self.get(transaction_id)

    def __contains__(self, transaction_id: object) -> bool:
        return transaction_id in self._timestamps

    def __iter__(self) -> Iterator[int]:
        return iter(self._timestamps)

    def __len__(self) -> int:
        return len(self._timestamps)

    def __str__(self) -> str:
        items = ", ".join(f"t{tid}={ts}" for tid, ts in self._timestamps.items())
        return f"[{items}]"

    __repr__ = __str__
