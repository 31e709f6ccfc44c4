"""
Four-function calculator (plus exponentiation) built on a pure state machine.

The engine functions take an immutable ``CalculatorState`` and return the
next one. ``Calculator`` wraps them in a session for front ends.

Example:
    >>> state = initial()
    >>> for digit in "12":
    ...     state = input_digit(state, digit)
    >>> state = input_operator(state, "×")
    >>> state = input_digit(state, "3")
    >>> evaluate(state).display_value
    '36'
"""

from pocketcalc.config import DEFAULT_POLICY, DisplayPolicy
from pocketcalc.core import Calculator
from pocketcalc.engine import (
    clear_all,
    clear_entry,
    evaluate,
    input_decimal_point,
    input_digit,
    input_operator,
)
from pocketcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
)
from pocketcalc.formatting import format_result, render_display
from pocketcalc.keys import Action, map_key_to_action
from pocketcalc.operations import (
    add,
    divide,
    exponentiate,
    multiply,
    subtract,
)
from pocketcalc.state import (
    DIVISION_BY_ZERO,
    ERROR_DISPLAYS,
    INVALID_OPERATION,
    RESULT_TOO_LARGE,
    CalculatorState,
    initial,
)

__all__ = [
    "DEFAULT_POLICY",
    "DIVISION_BY_ZERO",
    "ERROR_DISPLAYS",
    "INVALID_OPERATION",
    "RESULT_TOO_LARGE",
    "Action",
    "Calculator",
    "CalculatorError",
    "CalculatorState",
    "DisplayPolicy",
    "DivisionByZeroError",
    "InvalidInputError",
    "add",
    "clear_all",
    "clear_entry",
    "divide",
    "evaluate",
    "exponentiate",
    "format_result",
    "initial",
    "input_decimal_point",
    "input_digit",
    "input_operator",
    "map_key_to_action",
    "multiply",
    "render_display",
    "subtract",
]

__version__ = "0.1.0"
