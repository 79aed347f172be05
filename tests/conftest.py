"""
Pytest configuration and shared fixtures for mathfn tests.
"""

import pytest

from mathfn import MATH_FUNCTIONS
from mathfn.config import reset_config
from mathfn.runtime.stdlib.random import get_random_source, reset_random_source


@pytest.fixture(autouse=True)
def _restore_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def call():
    """Fixture to invoke a published operation with host values."""

    def _call(name: str, *values):
        return MATH_FUNCTIONS[name](list(values))

    return _call


@pytest.fixture
def fresh_random():
    """Fixture providing a newly created process-wide random source."""
    reset_random_source()
    yield get_random_source()
    reset_random_source()
