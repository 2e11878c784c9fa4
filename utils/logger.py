# utils/logger.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Logging utility for schedule validation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for schedule validation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class ScheduleLogger:
    """Centralized logger for timestamp-ordering runs with structured output."""

    def __init__(self, name: str = "tempora", level: LogLevel = LogLevel.INFO):
        """Initialize the schedule logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(ScheduleFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for timestamp-ordering events
    def run_start(self, objects: str, transactions: str, schedule_count: int):
        """Log run initialization."""
        self.info("=== Starting Timestamp-Ordering Validation ===")
        self.info(f"Data objects: {objects}")
        self.info(f"Transaction timestamps: {transactions}")
        self.info(f"Schedules to evaluate: {schedule_count}")

    def schedule_start(self, schedule_id: str, operation_count: int):
        """Log the beginning of one schedule evaluation."""
        self.debug(f"--- Schedule {schedule_id} ({operation_count} operations) ---")

    def operation_admitted(self, moment: int, operation: str, timestamp: int, state: str):
        """Log an admitted read or write."""
        self.debug(f"    🟢 [{moment}] {operation} TS={timestamp} admitted → {state}")

    def operation_denied(self, moment: int, operation: str, timestamp: int, state: str):
        """Log the denial that ends a schedule."""
        self.debug(f"    🔴 [{moment}] {operation} TS={timestamp} denied against {state}")

    def commit_seen(self, moment: int):
        """Log a commit marker."""
        self.debug(f"    [{moment}] c")

    def schedule_verdict(self, verdict_line: str):
        """Log the verdict line of one schedule."""
        self.info(f"{verdict_line}")

    def run_summary(self, evaluated: int, ok: int, rolled_back: int, skipped: int = 0):
        """Log final run statistics."""
        self.info(
            f"\n>>> {evaluated} schedules evaluated: {ok} OK, "
            f"{rolled_back} ROLLBACK, {skipped} skipped <<<"
        )

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.debug(f"✅ {message}" if message else "✅ Validation successful")
        else:
            self.error(f"❌ {message}" if message else "❌ Validation failed")


class ScheduleFormatter(logging.Formatter):
    """Custom formatter with clean output for the command line."""

    def format(self, record):
        # For INFO level, show message only (clean output)
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[ScheduleLogger] = None


def get_logger(name: str = "tempora") -> ScheduleLogger:
    """Get or create the global schedule logger instance.

    Args:
        name: Logger name (default: "tempora")

    Returns:
        ScheduleLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = ScheduleLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
