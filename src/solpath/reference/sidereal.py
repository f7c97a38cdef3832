from __future__ import annotations

import math

from .julian import J2000


def gmst_hours(jd: float, utc_hours: float) -> float:
    """
    Greenwich Mean Sidereal Time in hours (not wrapped):
      GMST = 6.697374558 + 0.06570982441908 (JD - 2451545.0) + 1.00273790935 UT
    """
    return 6.697374558 + 0.06570982441908 * (jd - J2000) + 1.00273790935 * utc_hours


def lmst_hours(gmst: float, longitude_deg_east: float) -> float:
    """Local Mean Sidereal Time, truncating remainder by 24h (sign follows GMST + lon/15)."""
    return math.fmod(gmst + longitude_deg_east / 15.0, 24.0)


def hour_angle_rad(jd: float, longitude_deg_east: float, right_ascension_rad: float, utc_hours: float) -> float:
    """Hour angle H = LMST*15 deg - alpha (radians, not wrapped)."""
    lmst = lmst_hours(gmst_hours(jd, utc_hours), longitude_deg_east)
    return math.radians(lmst * 15.0) - right_ascension_rad
