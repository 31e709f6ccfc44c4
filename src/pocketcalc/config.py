"""Display policy settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from pocketcalc.exceptions import InvalidInputError
from pocketcalc.validators import validate_positive_int

ENV_PREFIX = "POCKETCALC_"


@dataclass(frozen=True)
class DisplayPolicy:
    """Thresholds used when turning a raw result into display text."""

    decimal_places: int = 8
    small_threshold: float = 1e-5
    small_exponent_digits: int = 4
    max_digits: int = 12
    exponent_digits: int = 6

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DisplayPolicy:
        """
        Build a policy, overriding defaults from ``POCKETCALC_*`` variables.

        Recognized variables: ``POCKETCALC_DECIMAL_PLACES``,
        ``POCKETCALC_MAX_DIGITS`` and ``POCKETCALC_EXPONENT_DIGITS``. Decimal
        places may be zero (round to whole numbers); the others must be
        positive.

        Raises:
            InvalidInputError: If a variable is not an integer or is out of range
        """
        if environ is None:
            environ = os.environ

        overrides: dict[str, int] = {}
        for field_name in ("decimal_places", "max_digits", "exponent_digits"):
            raw = environ.get(ENV_PREFIX + field_name.upper())
            if raw is None:
                continue
            try:
                value = int(raw)
            except ValueError as e:
                raise InvalidInputError(raw, f"{field_name} must be an integer") from e
            overrides[field_name] = validate_positive_int(
                value, field_name, allow_zero=field_name == "decimal_places"
            )

        return cls(**overrides)


DEFAULT_POLICY = DisplayPolicy()
