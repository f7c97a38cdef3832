# tests/test_layout.py

import pytest

from solpath import ArcLayout
from solpath.engines.layout import arc_point

def test_default_layout_corners():
    layout = ArcLayout()
    assert arc_point(layout, 0.0, 0.0, 60.0) == pytest.approx((0.1, 0.85))
    assert arc_point(layout, 1.0, 0.0, 60.0) == pytest.approx((0.9, 0.85))
    assert arc_point(layout, 0.5, 60.0, 60.0) == pytest.approx((0.5, 0.1))

def test_sine_height_mapping():
    layout = ArcLayout()
    x, y = arc_point(layout, 0.25, 30.0, 90.0)
    # sin(30)/sin(90) = 0.5 of the 0.75 available height
    assert x == pytest.approx(0.3)
    assert y == pytest.approx(0.85 - 0.375)

def test_below_horizon_sits_on_baseline():
    assert arc_point(ArcLayout(), 0.0, -3.0, 45.0)[1] == pytest.approx(0.85)

def test_never_above_top_margin():
    # altitude above the reference peak would overshoot; it is clamped
    assert arc_point(ArcLayout(), 0.5, 80.0, 40.0)[1] == pytest.approx(0.1)

def test_peak_not_above_horizon():
    assert arc_point(ArcLayout(), 0.5, 10.0, 0.0)[1] == pytest.approx(0.85)
    assert arc_point(ArcLayout(), 0.5, 10.0, -5.0)[1] == pytest.approx(0.85)

def test_pixel_layout():
    layout = ArcLayout(width=320.0, height=160.0, x_inset=0.05, y_base=0.9, top_margin=0.2)
    x, y = arc_point(layout, 0.5, 45.0, 45.0)
    assert x == pytest.approx(160.0)
    assert y == pytest.approx(32.0)

@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0.0},
        {"height": -1.0},
        {"x_inset": 0.5},
        {"x_inset": -0.1},
        {"y_base": 0.05, "top_margin": 0.1},
        {"y_base": 1.2},
    ],
)
def test_invalid_layouts(kwargs):
    with pytest.raises(ValueError):
        ArcLayout(**kwargs)
