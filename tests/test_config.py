# tests/test_config.py

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

import solpath
from solpath.core.config import DEFAULT_POINT_COUNT, load_defaults

LA = ZoneInfo("America/Los_Angeles")

def test_defaults_without_environment():
    d = load_defaults()
    assert d.point_count == DEFAULT_POINT_COUNT == 50
    assert d.layout == solpath.ArcLayout()
    assert d.workers is None

def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SOLPATH_POINT_COUNT", "12")
    monkeypatch.setenv("SOLPATH_X_INSET", "0.2")
    monkeypatch.setenv("SOLPATH_Y_BASE", "0.9")
    monkeypatch.setenv("SOLPATH_TOP_MARGIN", "0.05")
    monkeypatch.setenv("SOLPATH_WORKERS", "3")
    load_defaults.cache_clear()

    d = load_defaults()
    assert d.point_count == 12
    assert d.layout == solpath.ArcLayout(x_inset=0.2, y_base=0.9, top_margin=0.05)
    assert d.workers == 3

def test_malformed_values_fall_back(monkeypatch, caplog):
    monkeypatch.setenv("SOLPATH_POINT_COUNT", "many")
    monkeypatch.setenv("SOLPATH_X_INSET", "0.7")
    monkeypatch.setenv("SOLPATH_WORKERS", "0")
    load_defaults.cache_clear()

    with caplog.at_level(logging.WARNING, logger="solpath.core.config"):
        d = load_defaults()

    assert d.point_count == 50
    assert d.layout.x_inset == 0.1
    assert d.workers is None
    assert "SOLPATH_POINT_COUNT" in caplog.text
    assert "SOLPATH_X_INSET" in caplog.text

def test_inconsistent_layout_falls_back(monkeypatch):
    monkeypatch.setenv("SOLPATH_Y_BASE", "0.2")
    monkeypatch.setenv("SOLPATH_TOP_MARGIN", "0.5")
    load_defaults.cache_clear()
    assert load_defaults().layout == solpath.ArcLayout()

def test_sampler_uses_environment_point_count(monkeypatch, sf):
    monkeypatch.setenv("SOLPATH_POINT_COUNT", "10")
    load_defaults.cache_clear()
    sunrise = datetime(2024, 3, 20, 7, 10, tzinfo=LA)
    sunset = datetime(2024, 3, 20, 19, 10, tzinfo=LA)
    assert len(solpath.generate_sun_path_samples(sf, "America/Los_Angeles", sunrise, sunset)) == 11
    # an explicit argument wins
    assert len(solpath.generate_sun_path_samples(sf, "America/Los_Angeles", sunrise, sunset, point_count=4)) == 5
