"""Text rendering of Lispy values.

`to_str` gives the canonical form used for results; `colorize` wraps the same
text in ANSI colours for the interactive prompt.
"""

from __future__ import annotations

import sys
from typing import TextIO

from lispy.types import Error, Expr, Function, Number, Symbol, Value

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_NUMBER = "\033[96m"
COLOR_SYMBOL = "\033[94m"
COLOR_FUNCTION = "\033[95m"
COLOR_ERROR = "\033[91m"

FUNCTION_PLACEHOLDER = "<function>"
ERROR_PREFIX = "Error: "


def to_str(value: Value, color: bool = False) -> str:
    match value:
        case Number():
            return _paint(str(value.value), COLOR_NUMBER, color)
        case Error():
            return _paint(ERROR_PREFIX + value.message, COLOR_ERROR, color)
        case Symbol():
            return _paint(value.name, COLOR_SYMBOL, color)
        case Function():
            return _paint(FUNCTION_PLACEHOLDER, COLOR_FUNCTION, color)
        case Expr():
            inner = " ".join(to_str(c, color) for c in value.cells)
            return f"{value.open}{inner}{value.close}"
    raise TypeError(f"cannot print {value!r}")


def colorize(value: Value) -> str:
    return to_str(value, color=True)


def _paint(text: str, code: str, color: bool) -> str:
    return f"{code}{text}{RESET}" if color else text


def print_value(value: Value, file: TextIO | None = None, color: bool = False) -> None:
    """Write `value` followed by a newline."""
    out = file if file is not None else sys.stdout
    out.write(to_str(value, color) + "\n")
