"""Pytest configuration and shared fixtures."""

import pytest
import structlog
from datetime import date


@pytest.fixture
def independence_day() -> date:
    return date(1947, 8, 15)


@pytest.fixture
def republic_day() -> date:
    return date(1950, 1, 26)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep structlog configuration from leaking between tests."""
    yield
    structlog.reset_defaults()
