"""Mapping of physical keys to calculator actions."""

from __future__ import annotations

from dataclasses import dataclass

from pocketcalc.validators import DIGITS, normalize_operator

DIGIT = "digit"
DECIMAL = "decimal"
OPERATOR = "operator"
EQUALS = "equals"
CLEAR = "clear"
CLEAR_ALL = "clear_all"

_NAMED_KEYS = {
    ".": DECIMAL,
    "Decimal": DECIMAL,
    "=": EQUALS,
    "Enter": EQUALS,
    "Escape": CLEAR,
    "Esc": CLEAR,
    "Delete": CLEAR_ALL,
}


@dataclass(frozen=True)
class Action:
    """A discrete calculator input: what kind, and for digits/operators which one."""

    kind: str
    value: str | None = None


def map_key_to_action(
    key: str, *, ctrl: bool = False, meta: bool = False, alt: bool = False
) -> Action | None:
    """
    Translate a key name into an :class:`Action`.

    Keys pressed together with Ctrl, Meta or Alt belong to the host
    application and are ignored, as is anything the calculator has no
    button for.

    Example:
        >>> map_key_to_action("*")
        Action(kind='operator', value='×')
        >>> map_key_to_action("5", ctrl=True) is None
        True
    """
    if ctrl or meta or alt:
        return None

    if len(key) == 1 and key in DIGITS:
        return Action(DIGIT, key)

    kind = _NAMED_KEYS.get(key)
    if kind is not None:
        return Action(kind)

    op = normalize_operator(key)
    if op is not None:
        return Action(OPERATOR, op)

    return None
