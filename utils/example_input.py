# utils/example_input.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Documented example dataset written when no input file is available

from pathlib import Path
from typing import Union

from utils.logger import get_logger

# Four objects, four transactions (t1=8, t2=9, t3=1, t4=4) and nine schedules.
# Expected verdicts: E_1-OK, E_2-ROLLBACK-2, E_3-OK, E_4-ROLLBACK-12,
# E_5-ROLLBACK-13, E_6-ROLLBACK-5, E_7-ROLLBACK-6, E_8-ROLLBACK-5, E_9-ROLLBACK-4
EXAMPLE_INPUT_LINES = (
    "A, B, C, D;",
    "t1, t2, t3, t4;",
    "8, 9, 1, 4;",
    "E_1-r1(A) r4(A) r3(A) r3(B) r2(A) c",
    "E_2-r1(A) c w4(A) r2(A) r3(C) c",
    "E_3-w4(B) r1(B) r2(B) c r4(A) r3(A) r3(D) w3(D) r2(D) r2(B) c",
    "E_4-w4(B) r1(B) r2(B) c r4(A) r3(A) r3(D) w3(D) r4(D) w4(D) r2(C) w1(D) w3(D) c r3(C) r3(B) r2(A) c",
    "E_5-w4(B) r1(B) r2(B) c r4(A) r3(A) r3(D) w3(D) r4(D) w4(D) r2(C) w1(D) c w3(D) r3(C) r3(B) r2(A) c",
    "E_6-r1(A) r2(A) w2(B) w3(C) c w3(B) w4(A) w4(B) c",
    "E_7-w1(A) r2(B) r1(B) w2(B) r1(A) c w3(B) w4(A) w2(B) c",
    "E_8-w1(A) r2(B) r1(B) w2(B) r1(A) w3(B) w4(A) w2(B) c",
    "E_9-w1(A) r2(B) r1(B) r1(A) w3(B) w4(A) w2(B) c",
)


def write_example_input(filepath: Union[str, Path]) -> Path:
    """Write the example dataset to ``filepath``, replacing any existing file."""
    path = Path(filepath)
    get_logger().info(f"Creating example input file '{path}'...")
    with open(path, "w", encoding="utf-8") as file:
        file.write("\n".join(EXAMPLE_INPUT_LINES) + "\n")
    return path
