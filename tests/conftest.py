"""
Pytest configuration og shared fixtures.
"""

import pytest

from windrive.dependencies import reset_singletons


@pytest.fixture(autouse=True)
def clean_singletons():
    """Automatically reset singletons before hver test."""
    reset_singletons()
    yield
    reset_singletons()
