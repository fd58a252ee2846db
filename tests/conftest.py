"""Pytest configuration and fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults so captured events are not filtered."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
