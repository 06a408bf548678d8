"""CLI for madcalc.

Usage:
    python -m madcalc eval "2 + 3 * 4"        # Evaluate one expression
    python -m madcalc eval "(2+3" --json      # Machine-readable result
    python -m madcalc sqrt 16                 # Square root
    python -m madcalc pow2 3                  # Square
    python -m madcalc cube 3                  # Cube
    python -m madcalc repl                    # Interactive shell
"""

from __future__ import annotations

from typing import Callable

import typer
from rich.console import Console
from rich.markup import escape

from madcalc.environment import load_settings
from madcalc.errors import FunctionArgumentError
from madcalc.evaluator import Cursor, try_evaluate
from madcalc.functions import cube, power_of_two, square_root
from madcalc.shell import Shell, format_answer, function_error_message, parse_error_message

app = typer.Typer(
    name="madcalc",
    help="Arithmetic expression calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '2 + 3 * 4'. Use -- before a leading '-'."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the normalized input and error details"),
) -> None:
    """Evaluate an arithmetic expression."""
    if verbose:
        console.print(f"  [dim]Input: {escape(Cursor(expression).text)}[/dim]")

    result = try_evaluate(expression)

    if as_json:
        out.print_json(result.to_json())
    elif result.ok:
        out.print(escape(format_answer(result.value, load_settings())))
    else:
        console.print(f"[red]{escape(parse_error_message(result.error))}[/red]")

    if not result.ok:
        if verbose:
            console.print(f"  [dim]{result.kind}: {escape(str(result.error))}[/dim]")
        raise typer.Exit(1)


def _run_function(func: Callable[[str], float], number: str) -> None:
    try:
        value = func(number)
    except FunctionArgumentError as e:
        console.print(f"[red]{escape(function_error_message(e))}[/red]")
        raise typer.Exit(1)
    out.print(escape(format_answer(value, load_settings())))


@app.command("sqrt")
def cmd_sqrt(
    number: str = typer.Argument(help="Non-negative number"),
) -> None:
    """Square root of a number."""
    _run_function(square_root, number)


@app.command("pow2")
def cmd_pow2(
    number: str = typer.Argument(help="Number to square"),
) -> None:
    """Square of a number."""
    _run_function(power_of_two, number)


@app.command("cube")
def cmd_cube(
    number: str = typer.Argument(help="Number to cube"),
) -> None:
    """Cube of a number."""
    _run_function(cube, number)


@app.command("repl")
def cmd_repl() -> None:
    """Start the interactive shell."""
    Shell(load_settings()).run(out)


if __name__ == "__main__":
    app()
