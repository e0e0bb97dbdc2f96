import math
from typing import List, Optional, TextIO

OPERATIONS = ("add", "subtract", "multiply", "divide", "clear", "undo", "exit", "history")


class TokenReader:
    """
    Reads whitespace-separated tokens from a text stream, one line at a time,
    so "add 5" on a single line and "add" / "5" on two lines read the same.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._pending: List[str] = []
        self.exhausted = False

    def next_token(self) -> Optional[str]:
        """Return the next token, or None once the stream is exhausted."""
        while not self._pending:
            line = self.stream.readline()
            if not line:
                self.exhausted = True
                return None
            self._pending = line.split()
        return self._pending.pop(0)

    def discard_line(self):
        """Drop whatever is left of the current input line."""
        self._pending = []


def normalize_operation(token: str) -> str:
    """
    Normalize an operation name typed by the user.

    Raises:
        ValueError: if the token does not name a known operation.
    """
    operation = token.strip().lower()
    if operation not in OPERATIONS:
        raise ValueError(f"Invalid operation '{token}'")
    return operation


def parse_value(token: str) -> float:
    """
    Parse a numeric operand. Only finite numbers are accepted.

    Raises:
        ValueError: if the token is not a finite number.
    """
    try:
        value = float(token)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid value '{token}'") from None
    if not math.isfinite(value):
        raise ValueError(f"Invalid value '{token}'")
    return value


def format_result(value: float) -> str:
    # six significant digits: 15, 3.33333, 1e+06
    return f"{value:g}"
