"""Pure state-transition functions for the calculator.

Every function takes a :class:`CalculatorState` and returns the next one.
Nothing here keeps state between calls, performs I/O or raises for
arithmetic failures: division by zero, overflow and undefined results become
error displays. Only caller misuse (a non-digit passed as a digit, an unknown
operator) raises :class:`InvalidInputError`.

Evaluation is strictly left to right. Choosing a new operator while a
complete binary operation is pending evaluates it first, so
``5 + 2 ^ 3 =`` shows ``343``.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from pocketcalc.config import DEFAULT_POLICY, DisplayPolicy
from pocketcalc.exceptions import DivisionByZeroError
from pocketcalc.formatting import format_result
from pocketcalc.operations import BINARY_OPERATIONS
from pocketcalc.state import DIVISION_BY_ZERO, CalculatorState, initial
from pocketcalc.validators import normalize_operator, validate_digit, validate_operator

logger = logging.getLogger(__name__)


def input_digit(state: CalculatorState, digit: str | int) -> CalculatorState:
    """
    Type one digit.

    After an error or a finished calculation the digit starts a fresh entry
    and all pending context is dropped.

    Raises:
        InvalidInputError: If digit is not '0'-'9'
    """
    digit = validate_digit(digit)

    if state.is_error or state.calculation_complete:
        return replace(initial(), display_value=digit)
    if state.waiting_for_operand:
        return replace(state, display_value=digit, waiting_for_operand=False)
    if state.display_value == "0":
        return replace(state, display_value=digit)
    return replace(state, display_value=state.display_value + digit)


def input_decimal_point(state: CalculatorState) -> CalculatorState:
    """Type a decimal point. A second point in the same entry is ignored."""
    if state.is_error or state.calculation_complete:
        return replace(initial(), display_value="0.")
    if state.waiting_for_operand:
        return replace(state, display_value="0.", waiting_for_operand=False)
    if "." in state.display_value:
        return state
    return replace(state, display_value=state.display_value + ".")


def input_operator(
    state: CalculatorState, op: str, *, policy: DisplayPolicy = DEFAULT_POLICY
) -> CalculatorState:
    """
    Choose a binary operator.

    If a full operation is already pending (operand, operator and a typed
    second operand) it is evaluated first and its result becomes the new
    left operand. Choosing an operator twice in a row just replaces it.

    When that chained evaluation fails the error display stays up, but the
    new operator is still recorded with a NaN left operand; clearing the
    entry and finishing the operation then shows "Invalid operation".

    Raises:
        InvalidInputError: If op is not one of + - × ÷ ^ or an alias
    """
    op = validate_operator(op)

    if state.is_error:
        return state

    if state.has_pending_operation and not state.waiting_for_operand:
        state = evaluate(state, policy=policy)

    return replace(
        state,
        previous_operand=state.operand,
        operator=op,
        waiting_for_operand=True,
        calculation_complete=False,
    )


def evaluate(state: CalculatorState, *, policy: DisplayPolicy = DEFAULT_POLICY) -> CalculatorState:
    """
    Apply the pending operator to the pending operand and the current entry.

    Returns the state unchanged when there is nothing to evaluate, when the
    state is already an error, or when the pending operator is not
    recognized.
    """
    if state.is_error or not state.has_pending_operation:
        return state

    op = normalize_operator(state.operator)
    if op is None:
        logger.debug("ignoring unrecognized operator %r", state.operator)
        return state

    a = state.previous_operand
    b = state.operand
    try:
        raw = BINARY_OPERATIONS[op](a, b)
    except DivisionByZeroError:
        display, is_error = DIVISION_BY_ZERO, True
    else:
        display, is_error = format_result(raw, policy)

    if is_error:
        logger.debug("%g %s %g produced error display %r", a, op, b, display)
    else:
        logger.debug("%g %s %g = %s", a, op, b, display)

    return replace(
        state,
        display_value=display,
        previous_operand=None,
        operator=None,
        waiting_for_operand=False,
        calculation_complete=not is_error,
        is_error=is_error,
    )


def clear_entry(state: CalculatorState) -> CalculatorState:
    """Reset the current entry to "0", keeping any pending operation."""
    return replace(state, display_value="0", is_error=False, calculation_complete=False)


def clear_all() -> CalculatorState:
    """Discard everything and return to the initial state."""
    return initial()
