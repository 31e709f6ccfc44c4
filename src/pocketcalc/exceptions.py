"""Custom exceptions for the pocketcalc package.

Calculator failures (division by zero, overflow, undefined results) are
display states, not exceptions. These classes signal caller misuse: feeding
the engine something that is not a digit, operator or known action.
"""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all pocketcalc errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised by the raw division operation when the divisor is zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class InvalidInputError(CalculatorError):
    """Raised when an input is not something the calculator understands."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason
