"""madcalc — arithmetic expression calculator.

Evaluates expressions built from numbers, + - * /, unary signs and
parentheses with the usual precedence, plus sqrt/pow2/cube shell commands.

Usage:
    python -m madcalc eval "2 + 3 * 4"   # 14.0
    python -m madcalc repl               # Interactive shell

    >>> from madcalc import evaluate
    >>> evaluate("(2 + 3) * 4")
    20.0
"""

from madcalc.errors import (
    ErrorKind,
    InvalidNumberLiteral,
    MismatchedParentheses,
    ParseError,
    UnexpectedCharacter,
)
from madcalc.evaluator import evaluate, try_evaluate

__all__ = [
    "ErrorKind",
    "InvalidNumberLiteral",
    "MismatchedParentheses",
    "ParseError",
    "UnexpectedCharacter",
    "evaluate",
    "try_evaluate",
]
