# core/verdict.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Terminal verdicts of a schedule evaluation

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Outcome(Enum):
    """Terminal state of one schedule under Basic Timestamp Ordering.

    A rollback is an expected protocol result, not an error: the schedule
    is reported and the run moves on to the next one.

    Values:
        OK: Every operation was admitted
        ROLLBACK: An operation was denied and the schedule stopped there
    """

    OK = auto()
    ROLLBACK = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ScheduleResult:
    """Verdict for one schedule line.

    ``moment`` is the zero-based position, commits included, of the
    operation that was denied. It is None for OK results.
    """

    schedule_id: str
    outcome: Outcome
    moment: Optional[int] = None

    def __post_init__(self):
        if self.outcome is Outcome.ROLLBACK and self.moment is None:
            raise ValueError("A rollback verdict needs the moment it happened")
        if self.outcome is Outcome.OK and self.moment is not None:
            raise ValueError("An OK verdict carries no moment")

    @classmethod
    def ok(cls, schedule_id: str) -> ScheduleResult:
        return cls(schedule_id, Outcome.OK)

    @classmethod
    def rolled_back_at(cls, schedule_id: str, moment: int) -> ScheduleResult:
        return cls(schedule_id, Outcome.ROLLBACK, moment)

    @property
    def is_ok(self) -> bool:
        return self.outcome is Outcome.OK

    def __str__(self) -> str:
        """Render as a verdict line: ``E1-OK`` or ``E2-ROLLBACK-1``."""
        if self.outcome is Outcome.OK:
            return f"{self.schedule_id}-OK"
        return f"{self.schedule_id}-ROLLBACK-{self.moment}"
