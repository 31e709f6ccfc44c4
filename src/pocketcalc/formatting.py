"""Numeric formatting policy for calculator results.

``format_result`` is a single ordered pipeline:

    NaN check -> infinity check -> tiny magnitude check -> rounding -> length check

so the same float always produces the same text regardless of how the host
platform prints floats.
"""

from __future__ import annotations

import math
from decimal import Decimal

from pocketcalc.config import DEFAULT_POLICY, DisplayPolicy
from pocketcalc.state import ERROR_DISPLAYS, INVALID_OPERATION, RESULT_TOO_LARGE


def format_result(value: float, policy: DisplayPolicy = DEFAULT_POLICY) -> tuple[str, bool]:
    """
    Turn a raw result into display text.

    Args:
        value: Raw floating-point result of an operation
        policy: Rounding and length thresholds

    Returns:
        A ``(display_value, is_error)`` pair

    Example:
        >>> format_result(0.1 + 0.2)
        ('0.3', False)
        >>> format_result(1e-10)
        ('1.0000e-10', False)
        >>> format_result(float("inf"))
        ('Result too large', True)
    """
    value = float(value)
    if math.isnan(value):
        return INVALID_OPERATION, True
    if math.isinf(value):
        return RESULT_TOO_LARGE, True

    if value != 0 and abs(value) < policy.small_threshold:
        return to_exponential(value, policy.small_exponent_digits), False

    rounded = round(value, policy.decimal_places)
    text = to_plain(rounded)
    if count_digits(text) > policy.max_digits:
        return to_exponential(rounded, policy.exponent_digits), False
    return text, False


def render_display(display_value: str, policy: DisplayPolicy = DEFAULT_POLICY) -> str:
    """
    Text a front end should paint for ``display_value``.

    Entries typed by the user are never length-checked by the engine, so an
    overlong numeric entry is shown in exponential form here. Error displays
    and anything already in exponent form pass through.
    """
    if display_value in ERROR_DISPLAYS:
        return display_value
    if len(display_value) <= policy.max_digits or "e" in display_value:
        return display_value

    try:
        number = float(display_value)
    except ValueError:
        return display_value
    if not math.isfinite(number):
        return display_value
    return to_exponential(number, policy.exponent_digits)


def to_plain(value: float) -> str:
    """Render a finite float as positional decimal text, never in exponent form."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def to_exponential(value: float, digits: int) -> str:
    """
    Render value as ``<mantissa>e<sign><exponent>`` with a minimal exponent.

    ``to_exponential(12345.6, 2)`` gives ``'1.23e+4'``.
    """
    mantissa, exponent = f"{value:.{digits}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def count_digits(text: str) -> int:
    """
    Number of digits in a plain decimal string.

    Only digits count toward the display limit: a leading minus sign and the
    decimal point do not, so "-123456789012" is twelve digits and stays in
    plain form rather than switching to exponent notation.
    """
    return sum(ch.isdigit() for ch in text)
