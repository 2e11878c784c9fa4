# parser/schedule.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Schedule line decoding into labelled operation sequences

"""Schedule line parsing.

A schedule line has the form ``<id>-<operations>``. The label is everything
before the first ``-``; the remainder is scanned by :class:`ScheduleLexer`
into an ordered tuple of :class:`Operation` values.
"""

from typing import List, Optional

from model.operation import Operation, ParsedSchedule
from .exceptions import MalformedScheduleLine
from .lexer import ScheduleLexer
from utils.logger import get_logger

SCHEDULE_SEPARATOR = "-"


def tokenize_operations(text: str) -> List[Operation]:
    """Scan an operation stream into operations, in source order.

    Unrecognized spans are skipped silently.

    Args:
        text: Operation part of a schedule line, e.g. ``"r1(A) w2(A) c"``

    Returns:
        Parsed operations in the order they appear
    """
    operations = []
    for token in ScheduleLexer().tokenize(text):
        if token.type == "READ":
            operations.append(Operation.read(*token.value))
        elif token.type == "WRITE":
            operations.append(Operation.write(*token.value))
        else:
            operations.append(Operation.commit())
    return operations


def parse_schedule(line: str, line_number: Optional[int] = None) -> ParsedSchedule:
    """Parse a schedule line into its label and operation sequence.

    Args:
        line: Raw schedule line, e.g. ``"E1-r1(A) w2(A) c"``
        line_number: 1-based input line number, used in error messages

    Returns:
        ParsedSchedule with the stripped label and the operations

    Raises:
        MalformedScheduleLine: The line contains no ``-`` separator
    """
    logger = get_logger()

    if SCHEDULE_SEPARATOR not in line:
        raise MalformedScheduleLine(line.strip(), line_number)

    label, operations_text = line.split(SCHEDULE_SEPARATOR, 1)
    schedule_id = label.strip()
    operations = tokenize_operations(operations_text.strip())

    logger.debug(f"Parsed schedule {schedule_id!r}: {len(operations)} operations")
    return ParsedSchedule(schedule_id, tuple(operations))
