"""
Pytest configuration and fixtures for ff-query tests.
"""

from uuid import UUID

import pytest

from ff_query import CaptureLogger, Query, reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from FF_QUERY_* variables in the environment."""
    for var in ("FF_QUERY_DEBUG", "FF_QUERY_LOG_FORMAT", "FF_QUERY_LOG_COLORS"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def orders():
    """Base query over the orders table."""
    return Query("select * from orders")


@pytest.fixture
def capture_logger():
    """Logger recording every entry for assertions."""
    return CaptureLogger("test.query")


@pytest.fixture
def order_id():
    return UUID("0d8c2e4a-8f0b-4b3e-9d3c-5a1f3c2b7e61")
