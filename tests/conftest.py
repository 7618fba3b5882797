"""Pytest configuration and fixtures."""

import pytest

from steadyfind.config import reset_settings
from tests.fixtures.browser_fixtures import clock, finder, site  # noqa: F401


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep environment overrides and the settings singleton out of other tests."""
    for name in ("STEADYFIND_MAX_APP_WAIT_MS", "STEADYFIND_LATENCY_FACTOR", "STEADYFIND_ENV"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
