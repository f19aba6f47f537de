"""Shared test configuration and pytest markers."""

import pytest

from services.matching.registry import clear as clear_registry


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI app end to end against the bundled sample data"
    )


@pytest.fixture
def fresh_registry():
    """Rebuild the matching service around a test."""
    clear_registry()
    yield
    clear_registry()
