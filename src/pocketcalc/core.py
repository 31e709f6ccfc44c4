"""Calculator session holding the current state between inputs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pocketcalc import engine
from pocketcalc.config import DEFAULT_POLICY, DisplayPolicy
from pocketcalc.exceptions import CalculatorError, InvalidInputError
from pocketcalc.formatting import render_display
from pocketcalc.keys import (
    CLEAR,
    CLEAR_ALL,
    DECIMAL,
    DIGIT,
    EQUALS,
    OPERATOR,
    Action,
    map_key_to_action,
)
from pocketcalc.state import CalculatorState, initial

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class Calculator:
    """
    A stateful front for the pure engine.

    The session owns the "current state" slot a user interface needs,
    serializes inputs through the engine and keeps every previous state so
    inputs can be undone.

    Example:
        >>> calc = Calculator()
        >>> calc.feed("5+2^3=").display
        '343'
        >>> calc.undo().display
        '3'
    """

    def __init__(
        self, state: CalculatorState | None = None, policy: DisplayPolicy | None = None
    ) -> None:
        """
        Initialize a session.

        Args:
            state: Starting state (default: the initial state)
            policy: Display policy for evaluation and rendering
        """
        self._state = state if state is not None else initial()
        self._policy = policy if policy is not None else DEFAULT_POLICY
        self._history: list[CalculatorState] = []

    @property
    def state(self) -> CalculatorState:
        """Current calculator state."""
        return self._state

    @property
    def display(self) -> str:
        """Text to show for the current state."""
        return render_display(self._state.display_value, self._policy)

    @property
    def history(self) -> list[CalculatorState]:
        """States preceding the current one, oldest first."""
        return self._history.copy()

    def _apply(self, action: Action) -> CalculatorState:
        kind = action.kind
        if kind == DIGIT:
            return engine.input_digit(self._state, action.value)
        if kind == DECIMAL:
            return engine.input_decimal_point(self._state)
        if kind == OPERATOR:
            return engine.input_operator(self._state, action.value, policy=self._policy)
        if kind == EQUALS:
            return engine.evaluate(self._state, policy=self._policy)
        if kind == CLEAR:
            return engine.clear_entry(self._state)
        if kind == CLEAR_ALL:
            return engine.clear_all()
        raise InvalidInputError(kind, "Unknown action")

    def dispatch(self, action: Action) -> Calculator:
        """Apply one action and record the state it replaced."""
        new_state = self._apply(action)
        logger.debug("%s -> %s", action, new_state)
        self._history.append(self._state)
        self._state = new_state
        return self

    def press(self, key: str, *, ctrl: bool = False, meta: bool = False, alt: bool = False) -> Calculator:
        """Press a key; keys without a calculator action are ignored."""
        action = map_key_to_action(key, ctrl=ctrl, meta=meta, alt=alt)
        if action is None:
            logger.debug("ignoring key %r", key)
            return self
        return self.dispatch(action)

    def feed(self, keys: Iterable[str]) -> Calculator:
        """Press each key in order. A string is fed one character at a time."""
        for key in keys:
            self.press(key)
        return self

    def undo(self) -> Calculator:
        """
        Restore the state before the last dispatched action.

        Raises:
            CalculatorError: If there is nothing to undo
        """
        if not self._history:
            raise CalculatorError("Nothing to undo")
        self._state = self._history.pop()
        return self

    def reset(self) -> Calculator:
        """Return to the initial state and forget history."""
        self._state = engine.clear_all()
        self._history.clear()
        return self

    def __repr__(self) -> str:
        return f"Calculator(display={self._state.display_value!r}, history_len={len(self._history)})"
