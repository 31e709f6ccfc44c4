"""Terminal front end for the calculator.

Usage:
    pocketcalc eval "5+2^3="          # Feed keys, print the display
    pocketcalc eval "9*3" --equals    # Press = after the keys
    pocketcalc repl                   # Interactive keypad on stdin
"""

from __future__ import annotations

import sys

import typer
from rich.console import Console

from pocketcalc.config import DisplayPolicy
from pocketcalc.core import Calculator
from pocketcalc.exceptions import CalculatorError
from pocketcalc.log import setup_default_logging

app = typer.Typer(
    name="pocketcalc",
    help="Four-function calculator with exponentiation",
    no_args_is_help=True,
)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

QUIT_WORDS = frozenset({"q", "quit", "exit"})


def _new_session() -> Calculator:
    try:
        policy = DisplayPolicy.from_env()
    except CalculatorError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {e}", markup=True)
        raise typer.Exit(2) from e
    return Calculator(policy=policy)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="Logging level"),
) -> None:
    """Four-function calculator with exponentiation."""
    setup_default_logging(log_level)


@app.command("eval")
def cmd_eval(
    keys: str = typer.Argument(help="Keys to press, one character each (e.g. '5+3=')"),
    equals: bool = typer.Option(False, "--equals", "-e", help="Press = after the keys"),
) -> None:
    """Feed a key sequence to a fresh calculator and print its display."""
    calc = _new_session().feed(keys)
    if equals:
        calc.press("=")

    console.print(calc.display, markup=False)
    if calc.state.is_error:
        raise typer.Exit(1)


@app.command("repl")
def cmd_repl() -> None:
    """Read key sequences line by line and print the display after each."""
    calc = _new_session()
    console.print(calc.display, markup=False)

    for line in sys.stdin:
        keys = line.strip()
        if keys.lower() in QUIT_WORDS:
            break
        calc.feed(keys)
        console.print(calc.display, markup=False)
