# utils/input_reader.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Line-oriented input file reader for declarations and schedules

from pathlib import Path
from typing import List, Union

from utils.logger import get_logger


class InputFileError(Exception):
    """Exception raised when the input file cannot be read."""

    pass


def read_input(filepath: Union[str, Path]) -> List[str]:
    """Read every line of an input file, without line terminators.

    Expected format:
        A, B, C, D;
        t1, t2, t3, t4;
        8, 9, 1, 4;
        E_1-r1(A) r4(A) r3(A) r3(B) r2(A) c

    Args:
        filepath: Path to the input file

    Returns:
        The file's lines in order

    Raises:
        FileNotFoundError: If the file does not exist
        InputFileError: If the file exists but cannot be decoded or read
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {filepath}")

    logger.debug(f"Reading input file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            lines = file.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Error reading input file {filepath}: {e}")

    logger.debug(f"Read {len(lines)} lines from {filepath}")
    return lines
