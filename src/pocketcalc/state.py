"""Immutable calculator state record."""

from __future__ import annotations

from dataclasses import dataclass

DIVISION_BY_ZERO = "Error"
INVALID_OPERATION = "Invalid operation"
RESULT_TOO_LARGE = "Result too large"

ERROR_DISPLAYS = frozenset({DIVISION_BY_ZERO, INVALID_OPERATION, RESULT_TOO_LARGE})


@dataclass(frozen=True)
class CalculatorState:
    """
    Snapshot of everything the calculator knows.

    Transitions never mutate a state; they build a new one with
    ``dataclasses.replace``.

    Attributes:
        display_value: Current entry text, or one of the error displays
        previous_operand: Left operand waiting for an operator, if any
        operator: Pending operator symbol, if any
        waiting_for_operand: An operator was just chosen; the next digit
            starts the second operand
        calculation_complete: The last input was a successful evaluation
        is_error: display_value holds an error display
    """

    display_value: str = "0"
    previous_operand: float | None = None
    operator: str | None = None
    waiting_for_operand: bool = False
    calculation_complete: bool = False
    is_error: bool = False

    @property
    def operand(self) -> float:
        """Numeric value of the current entry (NaN for an error display)."""
        try:
            return float(self.display_value)
        except ValueError:
            return float("nan")

    @property
    def has_pending_operation(self) -> bool:
        return self.previous_operand is not None and self.operator is not None

    def __str__(self) -> str:
        if self.has_pending_operation:
            return f"{self.previous_operand:g} {self.operator} [{self.display_value}]"
        return f"[{self.display_value}]"


def initial() -> CalculatorState:
    """Return the state a calculator starts in."""
    return CalculatorState()
