from __future__ import annotations

import math
from datetime import datetime

from ..core.time import TimeZoneLike, day_fraction_utc, local_date, resolve_timezone

J2000 = 2451545.0  # JD at J2000.0
DAYS_PER_CENTURY = 36525.0


def julian_day_from_parts(year: int, month: int, day: int, day_fraction: float = 0.0) -> float:
    """
    Gregorian calendar date (+ fraction of day) -> Julian Day (Meeus 7.1).

    January and February count as months 13 and 14 of the previous year.
    """
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100.0)
    b = 2 - a + math.floor(a / 4.0)
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + b
        - 1524.5
        + day_fraction
    )


def julian_day(instant: datetime, tz: TimeZoneLike) -> float:
    """
    Julian Day for an instant.

    The calendar date is taken in the observer's zone ``tz``; the fractional
    part is always the UTC time of day. Raises TimezoneResolutionError when
    ``tz`` cannot be resolved.
    """
    zone = resolve_timezone(tz)
    d = local_date(instant, zone)
    return julian_day_from_parts(d.year, d.month, d.day, day_fraction_utc(instant))


def julian_century(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - J2000) / DAYS_PER_CENTURY
