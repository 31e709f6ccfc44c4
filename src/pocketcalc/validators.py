"""Input validation and normalization for engine inputs."""

from __future__ import annotations

from typing import Any

from pocketcalc.exceptions import InvalidInputError

DIGITS = frozenset("0123456789")

# Canonical operator symbols, in keypad order.
OPERATORS = ("+", "-", "×", "÷", "^")

OPERATOR_ALIASES = {
    "*": "×",
    "x": "×",
    "X": "×",
    "/": "÷",
}


def validate_digit(digit: Any) -> str:
    """
    Validate a single keypad digit.

    Args:
        digit: A one-character string '0'-'9', or an int 0-9

    Returns:
        The digit as a one-character string

    Raises:
        InvalidInputError: If digit is not a single decimal digit
    """
    if isinstance(digit, bool):
        raise InvalidInputError(digit, "Expected digit, got bool")

    if isinstance(digit, int):
        if not 0 <= digit <= 9:
            raise InvalidInputError(digit, "Digit out of range 0-9")
        return str(digit)

    if not isinstance(digit, str):
        raise InvalidInputError(digit, f"Expected digit, got {type(digit).__name__}")

    if len(digit) != 1 or digit not in DIGITS:
        raise InvalidInputError(digit, "Not a single digit")

    return digit


def normalize_operator(op: Any) -> str | None:
    """Return the canonical symbol for op, or None if it is not an operator."""
    if not isinstance(op, str):
        return None
    op = OPERATOR_ALIASES.get(op, op)
    if op in OPERATORS:
        return op
    return None


def validate_operator(op: Any) -> str:
    """
    Validate an operator and normalize its aliases.

    Raises:
        InvalidInputError: If op is not one of + - × ÷ ^ or an alias
    """
    canonical = normalize_operator(op)
    if canonical is None:
        raise InvalidInputError(op, "Unknown operator")
    return canonical


def validate_positive_int(value: Any, name: str = "value", allow_zero: bool = False) -> int:
    """
    Validate a positive integer setting.

    Args:
        value: The value to validate
        name: Setting name used in the error message
        allow_zero: Whether zero is considered valid

    Raises:
        InvalidInputError: If value is not an integer or not positive
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(value, f"{name} must be an integer")

    if allow_zero:
        if value < 0:
            raise InvalidInputError(value, f"{name} must be non-negative")
    elif value <= 0:
        raise InvalidInputError(value, f"{name} must be positive")

    return value
