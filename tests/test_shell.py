"""Tests for shell command dispatch, messages and the read loop."""

import io

import pytest
from rich.console import Console

from madcalc.environment import Settings
from madcalc.shell import GOODBYE, GREETING, Shell


@pytest.fixture
def shell():
    return Shell(Settings())


@pytest.fixture
def plain_shell():
    return Shell(Settings(emoji=False))


# --- Expressions ---

def test_expression_answer(shell):
    reply = shell.handle("2 + 3")
    assert reply.ok
    assert not reply.done
    assert reply.text == "🎉 The answer is: 5.0"


def test_plain_answer(plain_shell):
    assert plain_shell.handle("(2+3)*4").text == "The answer is: 20.0"


@pytest.mark.parametrize("line, answer", [
    ("1/0", "The answer is: Infinity"),
    ("-1/0", "The answer is: -Infinity"),
    ("0/0", "The answer is: NaN"),
    ("1/4", "The answer is: 0.25"),
])
def test_non_finite_answers(plain_shell, line, answer):
    assert plain_shell.handle(line).text == answer


def test_deeply_nested_expression(plain_shell):
    depth = 5000
    reply = plain_shell.handle("(" * depth + "7" + ")" * depth)
    assert reply.ok
    assert reply.text == "The answer is: 7.0"


def test_deeply_nested_missing_paren_message(plain_shell):
    reply = plain_shell.handle("(" * 5000 + "7")
    assert not reply.ok
    assert reply.text.startswith("Oops! Your parentheses don't match.")


def test_mismatched_parentheses_message(shell):
    reply = shell.handle("(2+3")
    assert not reply.ok
    assert reply.text == "Oops! Your parentheses don't match. Please check and try again."


def test_unexpected_character_message(shell):
    reply = shell.handle("2+)")
    assert not reply.ok
    assert reply.text.startswith("Hmm, I see something I don't understand.")


def test_invalid_literal_message(shell):
    reply = shell.handle("1.2.3")
    assert not reply.ok
    assert reply.text == "Oops! That doesn't look like a valid expression. Please try again."


# --- Functions ---

@pytest.mark.parametrize("line, answer", [
    ("sqrt 16", "The answer is: 4.0"),
    ("  SQRT 16  ", "The answer is: 4.0"),
    ("pow2 -3", "The answer is: 9.0"),
    ("Cube 3", "The answer is: 27.0"),
    ("cube -3", "The answer is: -27.0"),
])
def test_function_commands(plain_shell, line, answer):
    assert plain_shell.handle(line).text == answer


def test_sqrt_negative_message(shell):
    reply = shell.handle("sqrt -4")
    assert not reply.ok
    assert reply.text == "I can only calculate the square root of positive numbers!"


@pytest.mark.parametrize("name", ["sqrt", "pow2", "cube"])
def test_function_not_a_number_message(shell, name):
    reply = shell.handle(f"{name} abc")
    assert not reply.ok
    assert reply.text == f"Oops! '{name}' needs a number. Please try again with '{name} <number>'."


def test_keyword_without_argument_is_an_expression(shell):
    """'sqrt' with no trailing space is not a command and fails to parse."""
    reply = shell.handle("sqrt")
    assert not reply.ok
    assert reply.text.startswith("Hmm")


# --- exit ---

@pytest.mark.parametrize("line", ["exit", "EXIT", "  Exit  "])
def test_exit(shell, line):
    reply = shell.handle(line)
    assert reply.done
    assert reply.text == GOODBYE


# --- Read loop ---

def _reader(lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return read


def test_run_until_exit(plain_shell):
    buf = io.StringIO()
    console = Console(file=buf, width=200, color_system=None)
    plain_shell.run(console, read=_reader(["2+3", "sqrt -4", "exit", "9*9"]))
    output = buf.getvalue()
    assert GREETING in output
    assert "The answer is: 5.0" in output
    assert "square root of positive numbers" in output
    assert output.rstrip().endswith(GOODBYE)
    assert "81.0" not in output


def test_run_until_end_of_input(plain_shell):
    buf = io.StringIO()
    console = Console(file=buf, width=200, color_system=None)
    plain_shell.run(console, read=_reader(["pow2 4"]))
    output = buf.getvalue()
    assert "The answer is: 16.0" in output
    assert output.rstrip().endswith(GOODBYE)


def test_run_passes_prompt():
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        return "exit"

    Shell(Settings(prompt="calc> ")).run(Console(file=io.StringIO(), color_system=None), read=read)
    assert prompts == ["calc> "]
