"""
Shared fixtures.

Settings are cached process-wide, so every test starts from a clean
environment and an empty cache.
"""

import pytest
import respx

from fxratesapi.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("FX_RATES_API_KEY", "FX_RATES_API_BASE_URL", "HTTP_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def timeseries_body():
    """Three days of EUR/GBP rates; GBP is missing on the second day."""
    return {
        "success": True,
        "base": "USD",
        "rates": {
            "2018-06-01": {"EUR": 0.85, "GBP": 0.75},
            "2018-06-02": {"EUR": 0.87},
            "2018-06-03": {"EUR": 0.86, "GBP": 0.76},
        },
    }


@pytest.fixture(autouse=True)
def isolated_respx_router():
    """Routes must be registered on the router of the active mock."""
    yield
    assert not respx.routes, "route registered on respx's global router"
