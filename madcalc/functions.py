"""Single-value functions offered by the shell: sqrt, pow2 and cube.

Each takes the raw argument text as typed after the command keyword.
"""

from __future__ import annotations

import math
import re

from madcalc.errors import NegativeRadicand, NotANumber

# Decimal numbers with optional exponent, plus the spelled-out NaN and
# Infinity. ASCII digits only; no underscores, no lowercase "inf"/"nan".
_NUMBER_RE = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)[fFdD]?",
    re.ASCII,
)
# Control characters and space are trimmed; Unicode spaces are not.
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))


def parse_argument(function: str, text: str) -> float:
    """Convert a trimmed argument string to a float.

    Args:
        function: Command name, used in the error.
        text: Argument text, surrounding whitespace allowed.

    Raises:
        NotANumber: The text is empty or not a decimal number.
    """
    stripped = text.strip(_TRIM_CHARS)
    if not _NUMBER_RE.fullmatch(stripped):
        raise NotANumber(function, text)
    return float(stripped.rstrip("fFdD"))


def square_root(text: str) -> float:
    """Square root of the number in ``text``.

    Raises:
        NotANumber: ``text`` is not a number.
        NegativeRadicand: The number is below zero.
    """
    n = parse_argument("sqrt", text)
    if n < 0:
        raise NegativeRadicand("sqrt", text)
    return math.sqrt(n)


def power_of_two(text: str) -> float:
    """The number in ``text`` squared."""
    n = parse_argument("pow2", text)
    return n * n


def cube(text: str) -> float:
    """The number in ``text`` cubed."""
    n = parse_argument("cube", text)
    return n * n * n


# Shell keyword -> function
FUNCTIONS = {
    "sqrt": square_root,
    "pow2": power_of_two,
    "cube": cube,
}
