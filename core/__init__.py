# core/__init__.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Core module public API for timestamp-ordering validation

"""Core components for Basic Timestamp-Ordering schedule validation.

Given declared data objects, transactions with fixed logical timestamps and
one or more interleaved schedules, the core decides for every schedule
whether it completes under timestamp ordering or must roll back, and at
which moment. It also keeps, per data object, the history of reads and
writes that were admitted.

Primary Components:
    TimestampOrderingEvaluator: Applies the read/write admission rules
    ScheduleEvaluation: Per-schedule state machine with a logical moment clock
    ScheduleResult, Outcome: Terminal verdicts (OK or ROLLBACK at a moment)
    OutcomeReporter, LogEntry: Verdict lines and per-object histories
    TimestampScheduler, run_schedules: Whole-run orchestration

Example:
    >>> from core import run_schedules
    >>> reporter = run_schedules(["A", "t1, t2", "5, 10", "E2-w2(A) r1(A) c"])
    >>> reporter.verdict_lines()
    ['E2-ROLLBACK-1']
"""

from .verdict import Outcome, ScheduleResult
from .reporter import LogEntry, OutcomeReporter
from .evaluator import ScheduleEvaluation, TimestampOrderingEvaluator
from .scheduler import TimestampScheduler, run_schedules

__all__ = [
    "Outcome",
    "ScheduleResult",
    "LogEntry",
    "OutcomeReporter",
    "ScheduleEvaluation",
    "TimestampOrderingEvaluator",
    "TimestampScheduler",
    "run_schedules",
]

__version__ = "1.0.0"
__description__ = "Core components for timestamp-ordering schedule validation"
