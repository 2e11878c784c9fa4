# core/evaluator.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Basic Timestamp-Ordering admission rules and per-schedule state machine

"""Timestamp-ordering evaluator.

Each schedule is walked operation by operation against the shared
transaction timestamp table and a freshly reset data object registry.
A logical clock, the *moment*, starts at 0 and advances by one for every
processed operation, commits included.

Admission rules (TS = timestamp of the acting transaction):

    read  X:  TS < WTS(X)                 -> rollback
              otherwise RTS(X) = max(RTS(X), TS)
    write X:  TS < RTS(X) or TS < WTS(X)  -> rollback
              otherwise WTS(X) = TS

The first denial ends the schedule. The denied operation neither mutates
state nor produces a log entry.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

from model.data_object import DataObjectRegistry
from model.operation import Operation, OperationKind, ParsedSchedule
from model.transaction_table import TransactionTimestampTable
from .reporter import LogEntry
from .verdict import ScheduleResult
from utils.logger import get_logger


class ScheduleEvaluation:
    """State machine for a single schedule.

    Resets the registry on construction, then accepts operations through
    :meth:`process` until a denial makes it terminal or the caller runs out
    of operations and calls :meth:`finalize`.

    Attributes:
        schedule_id: Label of the schedule being evaluated
        moment: Position of the next operation to process
        entries: Log entries of admitted reads and writes, in order
        result: Terminal verdict, None while the evaluation is running
    """

    def __init__(
        self,
        schedule_id: str,
        registry: DataObjectRegistry,
        transactions: TransactionTimestampTable,
    ):
        self.schedule_id = schedule_id
        self.registry = registry
        self.transactions = transactions
        self.moment = 0
        self.entries: List[LogEntry] = []
        self.result: Optional[ScheduleResult] = None

        self.registry.reset()

    def is_terminal(self) -> bool:
        return self.result is not None

    def process(self, operation: Operation) -> bool:
        """Apply one operation at the current moment.

        Args:
            operation: Next operation of the schedule

        Returns:
            True if evaluation may continue, False once rolled back

        Raises:
            RuntimeError: The evaluation already reached a verdict
            UnknownTransaction: The operation names an undeclared transaction
            UnknownObject: The operation names an undeclared object
        """
        if self.is_terminal():
            raise RuntimeError(
                f"Schedule {self.schedule_id} already finished as {self.result}"
            )

        if operation.kind is OperationKind.COMMIT:
            get_logger().commit_seen(self.moment)
            self.moment += 1
            return True

        admitted = self._admit(operation)
        if not admitted:
            self.result = ScheduleResult.rolled_back_at(self.schedule_id, self.moment)
            return False

        self.moment += 1
        return True

    def _admit(self, operation: Operation) -> bool:
        """Check and apply the TO rule for a read or write."""
        logger = get_logger()

        timestamp = self.transactions.get(operation.transaction_id)
        state = self.registry.get(operation.object_name)

        if operation.kind is OperationKind.READ:
            if timestamp < state.write_timestamp:
                logger.operation_denied(self.moment, str(operation), timestamp, str(state))
                return False
            self.registry.set_read_timestamp(
                state.name, max(state.read_timestamp, timestamp)
            )
        else:
            if timestamp < state.read_timestamp or timestamp < state.write_timestamp:
                logger.operation_denied(self.moment, str(operation), timestamp, str(state))
                return False
            self.registry.set_write_timestamp(state.name, timestamp)

        self.entries.append(
            LogEntry(self.schedule_id, operation.kind, self.moment, state.name)
        )
        logger.operation_admitted(self.moment, str(operation), timestamp, str(state))
        return True

    def finalize(self) -> ScheduleResult:
        """Return the verdict, settling on OK if no operation was denied."""
        if self.result is None:
            self.result = ScheduleResult.ok(self.schedule_id)
        return self.result


class TimestampOrderingEvaluator:
    """Evaluates whole schedules against one registry and transaction table.

    The transaction table is shared read-only; the registry belongs to the
    evaluator and is reset at the start of every schedule, so evaluating
    the same schedule twice always gives the same verdict.
    """

    def __init__(
        self, registry: DataObjectRegistry, transactions: TransactionTimestampTable
    ):
        self.registry = registry
        self.transactions = transactions

    def begin(self, schedule_id: str) -> ScheduleEvaluation:
        return ScheduleEvaluation(schedule_id, self.registry, self.transactions)

    def evaluate(
        self, schedule: ParsedSchedule
    ) -> Tuple[ScheduleResult, List[LogEntry]]:
        """Run a schedule to its verdict.

        Args:
            schedule: Parsed schedule to evaluate

        Returns:
            The verdict and the log entries of every admitted operation
        """
        get_logger().schedule_start(schedule.schedule_id, len(schedule))
        evaluation = self.begin(schedule.schedule_id)
        self._run(evaluation, schedule.operations)
        return evaluation.finalize(), evaluation.entries

    @staticmethod
    def _run(evaluation: ScheduleEvaluation, operations: Iterable[Operation]) -> None:
        for operation in operations:
            if not evaluation.process(operation):
                break
