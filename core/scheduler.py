# core/scheduler.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Run orchestration: declarations in, verdicts and object histories out

"""Timestamp scheduler.

Ties the pieces together for one run: the transaction table is built
once from the declarations and shared, the registry is reset for every
schedule, and each non-blank schedule line is parsed, evaluated and
recorded in an :class:`OutcomeReporter`. No file or console I/O happens
here.
"""

from __future__ import annotations
from typing import Iterable, Optional, Sequence

from parser import parse_declarations, parse_schedule
from parser.exceptions import MalformedScheduleLine
from parser.header import DECLARATION_LINE_COUNT, Declarations
from .evaluator import TimestampOrderingEvaluator
from .reporter import OutcomeReporter
from .verdict import ScheduleResult
from utils.logger import get_logger


class TimestampScheduler:
    """Evaluates schedule lines against a fixed set of declarations.

    Attributes:
        declarations: Objects and transaction timestamps of this run
        evaluator: Timestamp-ordering evaluator owning the registry
    """

    def __init__(self, declarations: Declarations):
        self.declarations = declarations
        self.registry = declarations.build_registry()
        self.transactions = declarations.build_transaction_table()
        self.evaluator = TimestampOrderingEvaluator(self.registry, self.transactions)

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> TimestampScheduler:
        """Build a scheduler from the header lines of an input."""
        return cls(parse_declarations(lines))

    def evaluate_line(self, line: str, line_number: Optional[int] = None) -> ScheduleResult:
        """Parse and evaluate a single schedule line, discarding its log."""
        result, _ = self.evaluator.evaluate(parse_schedule(line, line_number))
        return result

    def run(self, schedule_lines: Iterable[str], first_line_number: int = 1) -> OutcomeReporter:
        """Evaluate schedule lines in order.

        Blank lines are skipped. A line without the ``-`` separator is
        recorded as skipped and produces no verdict. Unknown objects or
        transactions propagate and abort the run.

        Args:
            schedule_lines: Schedule lines in input order
            first_line_number: Input line number of the first schedule line

        Returns:
            Reporter holding verdicts, object histories and skipped lines

        Raises:
            UnknownObject: A schedule reached an undeclared object
            UnknownTransaction: A schedule reached an undeclared transaction
        """
        logger = get_logger()
        reporter = OutcomeReporter(self.declarations.object_names)

        for line_number, line in enumerate(schedule_lines, start=first_line_number):
            if not line.strip():
                continue

            try:
                schedule = parse_schedule(line, line_number)
            except MalformedScheduleLine as e:
                logger.warning(f"Skipping schedule: {e}")
                reporter.record_skipped(line_number, str(e))
                continue

            result, entries = self.evaluator.evaluate(schedule)
            reporter.record(result, entries)
            logger.schedule_verdict(str(result))

        return reporter


def run_schedules(lines: Sequence[str]) -> OutcomeReporter:
    """Evaluate a complete input: three declaration lines then schedules.

    Args:
        lines: Every line of the input, header included

    Returns:
        Reporter for the whole run

    Raises:
        ParseError: The declaration header is invalid
        UnknownObject: A schedule reached an undeclared object
        UnknownTransaction: A schedule reached an undeclared transaction
    """
    logger = get_logger()
    scheduler = TimestampScheduler.from_lines(lines)
    schedule_lines = lines[DECLARATION_LINE_COUNT:]

    logger.run_start(
        ", ".join(scheduler.declarations.object_names),
        str(scheduler.transactions),
        sum(1 for line in schedule_lines if line.strip()),
    )

    reporter = scheduler.run(schedule_lines, first_line_number=DECLARATION_LINE_COUNT + 1)
    logger.run_summary(
        len(reporter), reporter.ok_count, reporter.rollback_count, len(reporter.skipped)
    )
    return reporter
