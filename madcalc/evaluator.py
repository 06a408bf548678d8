"""Operator-precedence evaluator for arithmetic expressions.

Grammar (left-associative at each level):

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := '+' factor | '-' factor | '(' expression ')' | number
    number     := run of digits and '.' handed to float()

The rules are evaluated in one forward loop. Each open parenthesis pushes a
_Group holding the partial sum and product of the enclosing level, so nesting
depth is limited by input length and not by the interpreter's stack.
Evaluation streams: nothing is kept once evaluate() returns.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from madcalc.errors import (
    InvalidNumberLiteral,
    MismatchedParentheses,
    ParseError,
    UnexpectedCharacter,
)
from madcalc.models import Evaluation

# ASCII only: non-breaking and other Unicode spaces are not separators.
_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)
_NUMBER_CHARS = frozenset("0123456789.")
# Checked in this order after every factor: term operators bind first.
_OPERATORS = ("*", "/", "+", "-")


class Cursor:
    """Forward-only scan state over one whitespace-stripped input string.

    ``char`` is always the character at ``pos``, or None once ``pos`` has run
    past the end. A cursor belongs to a single evaluate() call.
    """

    def __init__(self, text: str):
        self.text = _WHITESPACE_RE.sub("", text)
        self.pos = -1
        self.char: Optional[str] = None
        self.advance()

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def advance(self) -> None:
        """Move one character forward."""
        self.pos += 1
        self.char = self.text[self.pos] if self.pos < len(self.text) else None

    def eat(self, expected: str) -> bool:
        """Consume ``expected`` if it is under the cursor.

        Stray spaces are skipped first, although the constructor has already
        removed all whitespace.
        """
        while self.char == " ":
            self.advance()
        if self.char == expected:
            self.advance()
            return True
        return False


def _divide(dividend: float, divisor: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity and 0/0 is NaN."""
    if divisor == 0.0:
        if dividend == 0.0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor


def _apply(left: float, op: str, right: float) -> float:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    return _divide(left, right)


class _Group:
    """Running sum and product of one parenthesis level.

    ``negate`` is the unary sign that applies to the whole group once its
    closing ')' is consumed.
    """

    __slots__ = ("negate", "total", "add_op", "product", "mul_op")

    def __init__(self, negate: bool = False):
        self.negate = negate
        self.total = 0.0
        self.add_op: Optional[str] = None
        self.product = 0.0
        self.mul_op: Optional[str] = None

    def add_factor(self, value: float) -> None:
        if self.mul_op is None:
            self.product = value
        else:
            self.product = _apply(self.product, self.mul_op, value)
            self.mul_op = None

    def add_operator(self, op: str) -> None:
        if op in ("*", "/"):
            self.mul_op = op
        else:
            self._close_term()
            self.add_op = op

    def _close_term(self) -> None:
        if self.add_op is None:
            self.total = self.product
        else:
            self.total = _apply(self.total, self.add_op, self.product)
            self.add_op = None

    def result(self) -> float:
        self._close_term()
        return self.total


def _signs(cursor: Cursor) -> bool:
    """Consume a run of unary signs; True when they negate."""
    negate = False
    while True:
        if cursor.eat("+"):
            continue
        if cursor.eat("-"):
            negate = not negate
            continue
        return negate


def _operator(cursor: Cursor) -> Optional[str]:
    for op in _OPERATORS:
        if cursor.eat(op):
            return op
    return None


def _number(cursor: Cursor) -> float:
    start = cursor.pos
    while cursor.char is not None and cursor.char in _NUMBER_CHARS:
        cursor.advance()
    literal = cursor.text[start:cursor.pos]
    try:
        return float(literal)
    except ValueError:
        raise InvalidNumberLiteral(literal, start) from None


def _expression(cursor: Cursor) -> float:
    stack: list[_Group] = []
    group = _Group()
    while True:
        negate = _signs(cursor)
        if cursor.eat("("):
            stack.append(group)
            group = _Group(negate)
            continue
        if cursor.char is None or cursor.char not in _NUMBER_CHARS:
            raise UnexpectedCharacter(cursor.pos, cursor.char)
        value = _number(cursor)
        if negate:
            value = -value

        # Fold the factor in, then close as many groups as the input allows.
        while True:
            group.add_factor(value)
            op = _operator(cursor)
            if op is not None:
                group.add_operator(op)
                break
            value = group.result()
            if not stack:
                return value
            if not cursor.eat(")"):
                raise MismatchedParentheses(cursor.pos, cursor.char)
            if group.negate:
                value = -value
            group = stack.pop()


def evaluate(text: str) -> float:
    """Evaluate an arithmetic expression and return its value.

    Whitespace anywhere in ``text`` is ignored. Division by zero follows IEEE
    rules and returns an infinity or NaN rather than raising.

    Args:
        text: Expression such as ``"2 + 3 * (4 - 1)"``.

    Returns:
        The value as a float.

    Raises:
        MismatchedParentheses: A '(' has no matching ')'.
        UnexpectedCharacter: A character the grammar cannot accept, including
            anything left over after a complete expression.
        InvalidNumberLiteral: A digit/dot run float() rejects, e.g. '1.2.3'.
    """
    cursor = Cursor(text)
    value = _expression(cursor)
    if not cursor.at_end:
        raise UnexpectedCharacter(cursor.pos, cursor.char)
    return value


def try_evaluate(text: str) -> Evaluation:
    """Evaluate ``text`` and return an Evaluation instead of raising."""
    try:
        return Evaluation(expression=text, value=evaluate(text))
    except ParseError as e:
        return Evaluation(expression=text, error=e)
