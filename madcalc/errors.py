"""Error taxonomy for madcalc.

Parse errors come from the expression evaluator; function argument errors
come from the single-value functions (sqrt, pow2, cube). Both families derive
from ValueError and carry an ErrorKind so callers can tell them apart without
matching on message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Classification of every failure madcalc can report."""

    MISMATCHED_PARENTHESES = "mismatched-parentheses"
    UNEXPECTED_CHARACTER = "unexpected-character"
    INVALID_NUMBER_LITERAL = "invalid-number-literal"
    NOT_A_NUMBER = "not-a-number"
    NEGATIVE_RADICAND = "negative-radicand"


def describe_char(char: Optional[str]) -> str:
    """Printable form of a cursor character; None is the end of input."""
    if char is None:
        return "end of input"
    return repr(char)


class ParseError(ValueError):
    """Base class for failures while evaluating an expression.

    Attributes:
        kind: ErrorKind of the failure.
        position: Index into the whitespace-stripped input where scanning stopped.
        char: Character under the cursor at that point, or None at end of input.
    """

    kind: ErrorKind

    def __init__(self, message: str, position: int, char: Optional[str] = None):
        super().__init__(message)
        self.position = position
        self.char = char


class MismatchedParentheses(ParseError):
    """An opening '(' was never closed."""

    kind = ErrorKind.MISMATCHED_PARENTHESES

    def __init__(self, position: int, char: Optional[str] = None):
        super().__init__(
            f"Mismatched parentheses: expected ')' at position {position}, "
            f"found {describe_char(char)}",
            position,
            char,
        )


class UnexpectedCharacter(ParseError):
    """A character the grammar cannot use at this point."""

    kind = ErrorKind.UNEXPECTED_CHARACTER

    def __init__(self, position: int, char: Optional[str] = None):
        super().__init__(
            f"Unexpected: {describe_char(char)} at position {position}",
            position,
            char,
        )


class InvalidNumberLiteral(ParseError):
    """A run of digits and dots that float() rejects, e.g. '1.2.3'."""

    kind = ErrorKind.INVALID_NUMBER_LITERAL

    def __init__(self, literal: str, position: int):
        super().__init__(
            f"Invalid number literal {literal!r} at position {position}",
            position,
            literal[:1] or None,
        )
        self.literal = literal


class FunctionArgumentError(ValueError):
    """Base class for bad arguments to sqrt, pow2 and cube."""

    kind: ErrorKind

    def __init__(self, message: str, function: str, argument: str):
        super().__init__(message)
        self.function = function
        self.argument = argument


class NotANumber(FunctionArgumentError):
    """The argument string does not convert to a float."""

    kind = ErrorKind.NOT_A_NUMBER

    def __init__(self, function: str, argument: str):
        super().__init__(
            f"{function} needs a number, got {argument!r}", function, argument
        )


class NegativeRadicand(FunctionArgumentError):
    """Square root of a negative number."""

    kind = ErrorKind.NEGATIVE_RADICAND

    def __init__(self, function: str, argument: str):
        super().__init__(
            "Cannot calculate square root of a negative number", function, argument
        )
