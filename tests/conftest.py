"""Pytest configuration and shared fixtures."""

import os

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
    """Provide a fresh Calculator instance."""
    from bigcalc import Calculator

    return Calculator()


@pytest.fixture
def calculator_with_value():
    """Provide a Calculator initialized with 100."""
    from bigcalc import Calculator

    return Calculator(100)


@pytest.fixture
def sample_numerals():
    """Provide a set of interesting decimal numerals."""
    return [
        "0",
        "1",
        "-1",
        "9",
        "10",
        "999999999",
        "1000000000",
        "-1000000000",
        "123456789012345678901234567890",
        "-98765432109876543210",
        "3659535532566681673026857047264590495633096120170316011130546064934049533282760410899967541",
    ]
