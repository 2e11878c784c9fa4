# core/reporter.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Aggregation of verdicts and per-object operation histories across a run

"""Outcome reporting.

The reporter accumulates, in evaluation order, one verdict per schedule
and one append-only history per data object listing every admitted read
or write as ``<schedule_id>,<read|write>,<moment>``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from model.operation import OperationKind
from .verdict import Outcome, ScheduleResult


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One admitted operation on a data object."""

    schedule_id: str
    kind: OperationKind
    moment: int
    object_name: str

    def __str__(self) -> str:
        return f"{self.schedule_id},{self.kind.value},{self.moment}"


class OutcomeReporter:
    """Collects verdicts, per-object logs and skipped schedule lines.

    Args:
        object_names: Declared objects; fixes the order of :meth:`object_logs`
    """

    def __init__(self, object_names: Iterable[str] = ()):
        self.results: List[ScheduleResult] = []
        self.skipped: List[Tuple[int, str]] = []
        self._logs: Dict[str, List[LogEntry]] = {name: [] for name in object_names}

    def record(self, result: ScheduleResult, entries: Iterable[LogEntry]) -> None:
        """Append a schedule's verdict and its admitted operations."""
        self.results.append(result)
        for entry in entries:
            self._logs.setdefault(entry.object_name, []).append(entry)

    def record_skipped(self, line_number: int, reason: str) -> None:
        self.skipped.append((line_number, reason))

    def verdict_lines(self) -> List[str]:
        return [str(result) for result in self.results]

    def object_log(self, name: str) -> List[str]:
        """History lines for ``name``; empty if nothing was admitted on it."""
        return [str(entry) for entry in self._logs.get(name, [])]

    def object_logs(self) -> Dict[str, List[str]]:
        """History lines for every declared object, in declaration order."""
        return {name: self.object_log(name) for name in self._logs}

    @property
    def ok_count(self) -> int:
        return sum(1 for r in self.results if r.outcome is Outcome.OK)

    @property
    def rollback_count(self) -> int:
        return sum(1 for r in self.results if r.outcome is Outcome.ROLLBACK)

    def __len__(self) -> int:
        return len(self.results)
