# model/operation.py

"""
Operation
=========

One parsed step of a schedule: a read or write of a data object by a
transaction, or a bare commit marker. Source order is the only
sequencing information a schedule carries.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class OperationKind(Enum):
    READ = "read"
    WRITE = "write"
    COMMIT = "commit"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Operation:
    kind: OperationKind
    transaction_id: Optional[int] = None
    object_name: Optional[str] = None

    @classmethod
    def read(cls, transaction_id: int, object_name: str) -> Operation:
        return cls(OperationKind.READ, transaction_id, object_name)

    @classmethod
    def write(cls, transaction_id: int, object_name: str) -> Operation:
        return cls(OperationKind.WRITE, transaction_id, object_name)

    @classmethod
    def commit(cls) -> Operation:
        return cls(OperationKind.COMMIT)

    @property
    def is_access(self) -> bool:
        """True for reads and writes, False for commits."""
        return self.kind is not OperationKind.COMMIT

    def __str__(self) -> str:
        if self.kind is OperationKind.COMMIT:
            return "c"
        prefix = "r" if self.kind is OperationKind.READ else "w"
        return f"{prefix}{self.transaction_id}({self.object_name})"


@dataclass(frozen=True, slots=True)
class ParsedSchedule:
    """A labelled operation sequence ready for evaluation."""

    schedule_id: str
    operations: Tuple[Operation, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.operations)

    def __str__(self) -> str:
        return f"{self.schedule_id}-" + " ".join(str(op) for op in self.operations)
