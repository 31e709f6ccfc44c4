"""Pytest configuration and shared fixtures."""

import os
from dataclasses import replace

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator session."""
    from pocketcalc import Calculator

    return Calculator()


@pytest.fixture
def make_state():
    """Build a state from the initial one with the given fields overridden."""
    from pocketcalc import initial

    def _make(**overrides):
        return replace(initial(), **overrides)

    return _make


@pytest.fixture
def error_states(make_state):
    """One state per error display."""
    from pocketcalc import ERROR_DISPLAYS

    return [make_state(display_value=text, is_error=True) for text in sorted(ERROR_DISPLAYS)]
