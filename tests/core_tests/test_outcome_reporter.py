# tests/core_tests/test_outcome_reporter.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Test suite for verdict formatting and per-object history aggregation

"""Test suite for ScheduleResult and OutcomeReporter."""

import pytest
from core.reporter import LogEntry, OutcomeReporter
from core.verdict import Outcome, ScheduleResult
from model.operation import OperationKind


class TestScheduleResult:
    def test_ok_line(self):
        assert str(ScheduleResult.ok("E1")) == "E1-OK"

    def test_rollback_line(self):
        result = ScheduleResult.rolled_back_at("E_2", 0)

        assert str(result) == "E_2-ROLLBACK-0"
        assert result.outcome is Outcome.ROLLBACK
        assert not result.is_ok

    def test_rollback_requires_moment(self):
        with pytest.raises(ValueError):
            ScheduleResult("E1", Outcome.ROLLBACK)

    def test_ok_rejects_moment(self):
        with pytest.raises(ValueError):
            ScheduleResult("E1", Outcome.OK, 3)


class TestOutcomeReporter:
    def setup_method(self):
        self.reporter = OutcomeReporter(["A", "B", "C"])

    def test_log_entry_line(self):
        entry = LogEntry("E_1", OperationKind.WRITE, 7, "D")

        assert str(entry) == "E_1,write,7"

    def test_verdicts_keep_input_order(self):
        self.reporter.record(ScheduleResult.rolled_back_at("E2", 1), [])
        self.reporter.record(ScheduleResult.ok("E1"), [])

        assert self.reporter.verdict_lines() == ["E2-ROLLBACK-1", "E1-OK"]
        assert len(self.reporter) == 2
        assert self.reporter.ok_count == 1
        assert self.reporter.rollback_count == 1

    def test_object_logs_are_append_only_across_schedules(self):
        self.reporter.record(
            ScheduleResult.ok("E1"),
            [
                LogEntry("E1", OperationKind.READ, 0, "A"),
                LogEntry("E1", OperationKind.WRITE, 1, "B"),
                LogEntry("E1", OperationKind.WRITE, 2, "A"),
            ],
        )
        self.reporter.record(
            ScheduleResult.rolled_back_at("E2", 1),
            [LogEntry("E2", OperationKind.READ, 0, "A")],
        )

        assert self.reporter.object_log("A") == ["E1,read,0", "E1,write,2", "E2,read,0"]
        assert self.reporter.object_log("B") == ["E1,write,1"]

    def test_every_declared_object_has_a_log(self):
        logs = self.reporter.object_logs()

        assert list(logs) == ["A", "B", "C"]
        assert all(lines == [] for lines in logs.values())

    def test_unknown_object_log_is_empty(self):
        assert self.reporter.object_log("Z") == []

    def test_skipped_lines(self):
        self.reporter.record_skipped(5, "missing separator")

        assert self.reporter.skipped == [(5, "missing separator")]
        assert self.reporter.verdict_lines() == []
