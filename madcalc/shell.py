"""Interactive shell for madcalc.

One input line is one command:

    exit            leave the shell
    sqrt <number>   square root
    pow2 <number>   square
    cube <number>   cube
    anything else   evaluated as an arithmetic expression
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from madcalc.environment import Settings, load_settings
from madcalc.errors import (
    ErrorKind,
    FunctionArgumentError,
    NegativeRadicand,
    ParseError,
)
from madcalc.evaluator import evaluate
from madcalc.functions import FUNCTIONS

GREETING = "Welcome to Mad Calc!"
USAGE = (
    "Enter a mathematical expression (with parentheses), 'sqrt <number>', "
    "'pow2 <number>', 'cube <number>', or type 'exit' to quit:"
)
GOODBYE = "Goodbye!"

_PARSE_MESSAGES = {
    ErrorKind.MISMATCHED_PARENTHESES: "Oops! Your parentheses don't match. Please check and try again.",
    ErrorKind.UNEXPECTED_CHARACTER: (
        "Hmm, I see something I don't understand. Please use only numbers, "
        "+, -, *, /, parentheses, square root (sqrt), power of two (pow2), "
        "and cube (cube) operations."
    ),
}
_INVALID_EXPRESSION = "Oops! That doesn't look like a valid expression. Please try again."
_NEGATIVE_SQRT = "I can only calculate the square root of positive numbers!"


@dataclass
class Reply:
    """The shell's answer to one line."""

    text: str
    ok: bool = True
    done: bool = False


def format_number(value: float) -> str:
    """Finite values print as Python floats; the rest as Infinity, -Infinity, NaN."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)


def format_answer(value: float, settings: Settings) -> str:
    prefix = "🎉 " if settings.emoji else ""
    return f"{prefix}The answer is: {format_number(value)}"


def parse_error_message(error: ParseError) -> str:
    """User-facing message for an expression error."""
    return _PARSE_MESSAGES.get(error.kind, _INVALID_EXPRESSION)


def function_error_message(error: FunctionArgumentError) -> str:
    """User-facing message for a bad sqrt/pow2/cube argument."""
    if isinstance(error, NegativeRadicand):
        return _NEGATIVE_SQRT
    name = error.function
    return f"Oops! '{name}' needs a number. Please try again with '{name} <number>'."


def _split_command(line: str) -> tuple[Optional[str], str]:
    """Return (function keyword, argument) or (None, line) for expressions."""
    stripped = line.strip()
    lowered = stripped.lower()
    for name in FUNCTIONS:
        if lowered.startswith(f"{name} "):
            return name, stripped[len(name) + 1:]
    return None, line


class Shell:
    """Dispatches shell lines to the evaluator and the single-value functions."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or load_settings()

    def handle(self, line: str) -> Reply:
        """Process one input line and return the reply to print."""
        if line.strip().lower() == "exit":
            return Reply(GOODBYE, done=True)

        name, argument = _split_command(line)
        if name is not None:
            try:
                value = FUNCTIONS[name](argument)
            except FunctionArgumentError as e:
                return Reply(function_error_message(e), ok=False)
            return Reply(format_answer(value, self.settings))

        try:
            value = evaluate(line)
        except ParseError as e:
            return Reply(parse_error_message(e), ok=False)
        return Reply(format_answer(value, self.settings))

    def run(self, console: Console, read: Optional[Callable[[str], str]] = None) -> None:
        """Read-evaluate-print until 'exit' or end of input.

        Args:
            console: Rich Console replies are printed to.
            read: Line reader taking the prompt; defaults to console.input.
        """
        read = read or console.input
        console.print(GREETING)
        console.print(escape(USAGE))

        while True:
            try:
                line = read(escape(self.settings.prompt))
            except EOFError:
                console.print(GOODBYE)
                return
            reply = self.handle(line)
            style = "green" if reply.ok else "yellow"
            if reply.done:
                style = "bold"
            console.print(f"[{style}]{escape(reply.text)}[/{style}]")
            if reply.done:
                return
