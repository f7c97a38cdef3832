"""
solpath.engines.position
------------------------
Single-instant solar position: Julian Day -> ephemeris -> hour angle ->
horizon -> refraction. Pure function of (instant, coordinate, zone).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import datetime

from ..core.time import TimeZoneLike, resolve_timezone, utc_hours
from ..core.types import Coordinate, SunPosition
from ..reference.horizontal import HorizontalCoordinates, equatorial_to_horizontal
from ..reference.julian import julian_century, julian_day
from ..reference.refraction import apparent_altitude_deg
from ..reference.sidereal import hour_angle_rad
from ..reference.solar import SolarEquatorial, solar_equatorial


@dataclass(frozen=True)
class PositionTrace:
    """Intermediate quantities of one position computation (for `explain`)."""
    jd: float
    T: float
    utc_hours: float
    equatorial: SolarEquatorial
    hour_angle_rad: float
    geometric: HorizontalCoordinates
    position: SunPosition


def trace_sun_position(instant: datetime, coordinate: Coordinate, tz: TimeZoneLike) -> PositionTrace:
    zone = resolve_timezone(tz)
    jd = julian_day(instant, zone)
    T = julian_century(jd)
    ut = utc_hours(instant)

    eq = solar_equatorial(T)
    H = hour_angle_rad(jd, coordinate.longitude_deg, eq.right_ascension_rad, ut)
    geo = equatorial_to_horizontal(math.radians(coordinate.latitude_deg), eq.declination_rad, H)

    position = SunPosition(
        altitude_deg=apparent_altitude_deg(geo.altitude_deg),
        azimuth_deg=geo.azimuth_deg,
    )
    return PositionTrace(
        jd=jd,
        T=T,
        utc_hours=ut,
        equatorial=eq,
        hour_angle_rad=H,
        geometric=geo,
        position=position,
    )


def sun_position(instant: datetime, coordinate: Coordinate, tz: TimeZoneLike) -> SunPosition:
    """Apparent altitude/azimuth (degrees) of the Sun at `instant`."""
    return trace_sun_position(instant, coordinate, tz).position
