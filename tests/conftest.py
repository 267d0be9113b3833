"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def calculator():
    """Provide a Calculator instance."""
    from ci_calculator import Calculator

    return Calculator()


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting test numbers."""
    return [
        0,
        1,
        -1,
        0.5,
        -0.5,
        100,
        -100,
        1e10,
        -1e10,
        1e-10,
        -1e-10,
        0.1 + 0.2,  # Floating point edge case
    ]
