# utils/__init__.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Utility module exports

from .input_reader import read_input, InputFileError
from .example_input import EXAMPLE_INPUT_LINES, write_example_input
from .schedule_generator import generate_schedule_input, write_schedule_input

__all__ = [
    "read_input",
    "InputFileError",
    "EXAMPLE_INPUT_LINES",
    "write_example_input",
    "generate_schedule_input",
    "write_schedule_input",
]
