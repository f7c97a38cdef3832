# tests/conftest.py

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from solpath import Coordinate
from solpath.core.config import load_defaults

LA = ZoneInfo("America/Los_Angeles")
SF = Coordinate(37.7749, -122.4194)


@pytest.fixture(autouse=True)
def fresh_defaults(monkeypatch):
    """Environment-driven defaults are cached; isolate every test from them."""
    for name in ("SOLPATH_POINT_COUNT", "SOLPATH_X_INSET", "SOLPATH_Y_BASE", "SOLPATH_TOP_MARGIN", "SOLPATH_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    load_defaults.cache_clear()
    yield
    load_defaults.cache_clear()


@pytest.fixture
def sf():
    return SF


@pytest.fixture
def sf_solstice_day():
    """San Francisco, 2024-06-21 (weather-provider style times, PDT)."""
    sunrise = datetime(2024, 6, 21, 5, 48, tzinfo=LA)
    sunset = datetime(2024, 6, 21, 20, 35, tzinfo=LA)
    return sunrise, sunset
