# tests/test_plot_path.py

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

import solpath
from solpath.diagnostics import plot_path

LA = ZoneInfo("America/Los_Angeles")

def test_plot_samples_writes_png(tmp_path, sf, sf_solstice_day):
    pytest.importorskip("matplotlib")
    sunrise, sunset = sf_solstice_day
    samples = solpath.generate_sun_path_samples(sf, "America/Los_Angeles", sunrise, sunset, point_count=20)

    out = plot_path.plot_samples(samples, str(tmp_path / "arc.png"), title="SF")
    assert (tmp_path / "arc.png").stat().st_size > 0
    assert out.endswith("arc.png")

def test_plot_main(tmp_path, capsys):
    pytest.importorskip("matplotlib")
    out = tmp_path / "main.png"
    rc = plot_path.main([
        "--lat", "37.7749", "--lon", "-122.4194", "--tz", "America/Los_Angeles",
        "--sunrise", "2024-06-21T05:48:00-07:00", "--sunset", "2024-06-21T20:35:00-07:00",
        "--points", "10", "--out", str(out),
    ])
    assert rc == 0
    assert out.exists()
