#!/usr/bin/env python3
# run_scheduler.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Command-line interface for timestamp-ordering schedule validation

import sys
import argparse
from pathlib import Path

from core.reporter import OutcomeReporter
from core.scheduler import TimestampScheduler, run_schedules
from model.exceptions import UnknownObject, UnknownTransaction
from parser import parse_declarations, parse_schedule
from parser.exceptions import ParseError
from parser.header import DECLARATION_LINE_COUNT
from utils.example_input import write_example_input
from utils.input_reader import InputFileError, read_input
from utils.logger import configure_logging, get_logger
from utils.output_writer import clear_outputs, write_report

DEFAULT_INPUT_FILE = "in.txt"
DEFAULT_OUTPUT_FILE = "out.txt"


def validate_input(lines) -> int:
    """Parse the header and every schedule line without evaluating.

    Args:
        lines: All input lines

    Returns:
        Number of malformed schedule lines found

    Raises:
        ParseError: The declaration header is invalid
    """
    logger = get_logger()
    scheduler = TimestampScheduler.from_lines(lines)
    logger.validation_result(
        True,
        f"Header declares {len(scheduler.registry)} objects "
        f"and {len(scheduler.transactions)} transactions",
    )

    malformed = 0
    for line_number, line in enumerate(
        lines[DECLARATION_LINE_COUNT:], start=DECLARATION_LINE_COUNT + 1
    ):
        if not line.strip():
            continue
        try:
            schedule = parse_schedule(line, line_number)
        except ParseError as e:
            malformed += 1
            logger.validation_result(False, str(e))
            continue

        undeclared = sorted(
            {op.object_name for op in schedule.operations
             if op.is_access and op.object_name not in scheduler.registry}
        )
        if undeclared:
            logger.warning(
                f"Schedule {schedule.schedule_id} references undeclared objects: "
                f"{', '.join(undeclared)}"
            )
        logger.validation_result(
            True, f"Schedule {schedule.schedule_id}: {len(schedule)} operations"
        )

    return malformed


def print_summary(reporter: OutcomeReporter) -> None:
    """Print a per-schedule and per-object breakdown of a finished run."""
    print("\n📋 Schedules:")
    for result in reporter.results:
        mark = "✅" if result.is_ok else "❌"
        print(f"  {mark} {result}")

    for line_number, reason in reporter.skipped:
        print(f"  ⚠️  line {line_number} skipped: {reason}")

    print("\n📊 Admitted operations per object:")
    for name, lines in reporter.object_logs().items():
        print(f"  {name}: {len(lines)}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tempora Basic Timestamp-Ordering Schedule Validator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_scheduler.py
  python run_scheduler.py -i in.txt -o out.txt --log-dir logs
  python run_scheduler.py -i in.txt --debug
  python run_scheduler.py -i in.txt --validate-only

Input file format:
  A, B, C, D;                          data objects
  t1, t2, t3, t4;                      transactions
  8, 9, 1, 4;                          timestamps, by position
  E_1-r1(A) r4(A) r3(A) r2(A) c        one schedule per line
        """,
    )

    parser.add_argument(
        "-i", "--input", type=Path, default=Path(DEFAULT_INPUT_FILE),
        help=f"Path to the input file (default: {DEFAULT_INPUT_FILE})",
    )

    parser.add_argument(
        "-o", "--output", type=Path, default=Path(DEFAULT_OUTPUT_FILE),
        help=f"Path to the verdict file (default: {DEFAULT_OUTPUT_FILE})",
    )

    parser.add_argument(
        "--log-dir", type=Path, default=Path("."),
        help="Directory for per-object history files <object>.txt (default: .)",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--validate-only", action="store_true",
        help="Only validate the input file format",
    )

    parser.add_argument(
        "--no-example", action="store_true",
        help="Do not create an example input file when the input is missing",
    )

    parser.add_argument(
        "--summary", action="store_true", help="Print a breakdown after the run"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the schedule validator.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        try:
            lines = read_input(args.input)
        except FileNotFoundError:
            logger.error(f"Input file '{args.input}' not found.")
            if not args.no_example:
                write_example_input(args.input)
                print(f"Example file created at '{args.input}'. Please run the program again.")
            return 1

        if args.validate_only:
            malformed = validate_input(lines)
            if malformed:
                logger.error(f"{malformed} malformed schedule line(s)")
                return 2
            print("✅ Input validation successful.")
            return 0

        # Outputs of a previous run never survive an aborted one
        declarations = parse_declarations(lines)
        clear_outputs(args.output, args.log_dir, declarations.object_names)

        reporter = run_schedules(lines)
        write_report(reporter, args.output, args.log_dir)

        print(f"Processing complete. Results saved to '{args.output}'.")
        print(f"Object history files written to '{args.log_dir}'.")

        if args.summary:
            print_summary(reporter)

        return 0

    except InputFileError as e:
        logger.error(f"Input file error: {e}")
        return 1

    except ParseError as e:
        logger.error(f"Input parsing error: {e}")
        return 2

    except (UnknownObject, UnknownTransaction) as e:
        logger.error(f"Inconsistent input: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Run interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
