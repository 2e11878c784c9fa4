# parser/lexer.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Lexical analyzer for schedule operation streams using SLY

"""Lexical analyzer for the operation part of a schedule line.

Supported Tokens:
- READ:   r<digits>(<name>)  value is (transaction_id, object_name)
- WRITE:  w<digits>(<name>)  value is (transaction_id, object_name)
- COMMIT: c                  value is "c"

Operations need not be separated by whitespace. Any character at which no
token starts is skipped, and scanning resumes at the next character, so
junk between operations never rejects the line.
"""

from sly import Lexer
from utils.logger import get_logger


def _split_access(text: str):
    """Decode ``r12(A)`` / ``w12(A)`` into ``(12, "A")``."""
    open_paren = text.index("(")
    return int(text[1:open_paren]), text[open_paren + 1 : -1]


class ScheduleLexer(Lexer):
    """SLY-based lexer for schedule operation streams.

    Patterns are tried in the order READ, WRITE, COMMIT at each position,
    which decides ties such as ``r1(c)`` (a read of object ``c``).

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {"READ", "WRITE", "COMMIT"}

    ignore = " \t\r\n"

    @_(r"r\d+\(\w+\)")
    def READ(self, t):
        t.value = _split_access(t.value)
        return t

    @_(r"w\d+\(\w+\)")
    def WRITE(self, t):
        t.value = _split_access(t.value)
        return t

    COMMIT = r"c"

    def error(self, t):
        """Skip a character that starts no operation.

        Returns None so that SLY emits nothing for the skipped character.
        """
        get_logger().debug(f"Skipping unrecognized character '{t.value[0]}' at position {self.index}")
        self.index += 1
