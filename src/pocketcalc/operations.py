"""Raw binary operations with IEEE-754 floating-point semantics.

Unlike a checked arithmetic library these functions do not reject NaN or
infinite results: overflow and undefined results flow through as ``inf`` and
``nan`` so the formatting policy can turn them into display states. Division
by zero is the one case that raises, because it has its own error display.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pocketcalc.exceptions import DivisionByZeroError

if TYPE_CHECKING:
    from collections.abc import Callable


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a
    """
    return a + b


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Identity: subtract(a, 0) == a
        - Self-inverse: subtract(a, a) == 0 (for finite a)
    """
    return a - b


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers. Overflow yields an infinity.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
    """
    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        DivisionByZeroError: If b is zero
    """
    if b == 0:
        raise DivisionByZeroError(a)
    return a / b


def exponentiate(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent.

    Follows IEEE-754 ``pow`` rather than raising like ``math.pow``:

        - 0 ** 0 == 1
        - 0 ** negative == inf
        - negative ** non-integer == nan
        - magnitude overflow == inf (signed for a negative base and odd exponent)

    Args:
        base: The base number
        exponent: The exponent

    Returns:
        base raised to the power of exponent
    """
    if base == 0 and exponent < 0:
        return math.inf

    try:
        return math.pow(base, exponent)
    except ValueError:
        # math.pow rejects a negative base with a non-integer exponent
        return math.nan
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer() and value % 2 == 1


BINARY_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": add,
    "-": subtract,
    "×": multiply,
    "÷": divide,
    "^": exponentiate,
}
