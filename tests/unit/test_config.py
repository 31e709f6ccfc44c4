"""Unit tests for the display policy configuration."""

import pytest

from pocketcalc import DEFAULT_POLICY, DisplayPolicy, InvalidInputError


class TestDisplayPolicy:
    """Tests for DisplayPolicy."""

    def test_defaults(self):
        policy = DisplayPolicy()
        assert policy.decimal_places == 8
        assert policy.small_threshold == 1e-5
        assert policy.small_exponent_digits == 4
        assert policy.max_digits == 12
        assert policy.exponent_digits == 6

    def test_default_policy_is_defaults(self):
        assert DEFAULT_POLICY == DisplayPolicy()

    def test_from_empty_env(self):
        assert DisplayPolicy.from_env({}) == DisplayPolicy()

    def test_from_env_overrides(self):
        policy = DisplayPolicy.from_env(
            {
                "POCKETCALC_DECIMAL_PLACES": "4",
                "POCKETCALC_MAX_DIGITS": "15",
                "POCKETCALC_EXPONENT_DIGITS": "3",
                "UNRELATED": "x",
            }
        )
        assert policy == DisplayPolicy(decimal_places=4, max_digits=15, exponent_digits=3)

    def test_from_process_env(self, monkeypatch):
        monkeypatch.setenv("POCKETCALC_MAX_DIGITS", "10")
        assert DisplayPolicy.from_env().max_digits == 10

    @pytest.mark.parametrize("raw", ["abc", "1.5", "0", "-3"])
    def test_rejects_bad_values(self, raw):
        with pytest.raises(InvalidInputError):
            DisplayPolicy.from_env({"POCKETCALC_MAX_DIGITS": raw})

    def test_zero_decimal_places_allowed(self):
        policy = DisplayPolicy.from_env({"POCKETCALC_DECIMAL_PLACES": "0"})
        assert policy.decimal_places == 0

    def test_negative_decimal_places_rejected(self):
        with pytest.raises(InvalidInputError):
            DisplayPolicy.from_env({"POCKETCALC_DECIMAL_PLACES": "-1"})

    @pytest.mark.parametrize("name", ["POCKETCALC_MAX_DIGITS", "POCKETCALC_EXPONENT_DIGITS"])
    def test_zero_limits_rejected(self, name):
        with pytest.raises(InvalidInputError):
            DisplayPolicy.from_env({name: "0"})
