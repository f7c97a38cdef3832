# tests/test_horizontal.py

import math

import pytest
from solpath.reference.horizontal import equatorial_to_horizontal

r = math.radians

def test_meridian_transit_north_hemisphere():
    c = equatorial_to_horizontal(r(37.77), r(23.44), 0.0)
    assert c.altitude_deg == pytest.approx(90.0 - 37.77 + 23.44, abs=1e-9)
    assert c.azimuth_deg == pytest.approx(180.0, abs=1e-9)

def test_meridian_transit_south_hemisphere_is_due_north():
    c = equatorial_to_horizontal(r(-33.87), 0.0, 0.0)
    assert c.altitude_deg == pytest.approx(90.0 - 33.87, abs=1e-9)
    assert c.azimuth_deg == pytest.approx(0.0, abs=1e-9)

def test_equator_equinox_rise_and_set_directions():
    morning = equatorial_to_horizontal(0.0, 0.0, -math.pi / 2)
    evening = equatorial_to_horizontal(0.0, 0.0, math.pi / 2)

    assert morning.altitude_deg == pytest.approx(0.0, abs=1e-9)
    assert morning.azimuth_deg == pytest.approx(90.0, abs=1e-9)
    assert evening.azimuth_deg == pytest.approx(270.0, abs=1e-9)

def test_azimuth_range_and_altitude_range():
    for lat in range(-90, 91, 15):
        for dec in (-23.44, -10.0, 0.0, 12.5, 23.44):
            for h in range(-720, 721, 37):
                c = equatorial_to_horizontal(r(lat), r(dec), r(h))
                assert 0.0 <= c.azimuth_rad < 2.0 * math.pi
                assert -math.pi / 2 <= c.altitude_rad <= math.pi / 2
