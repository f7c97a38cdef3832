from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from .core.config import load_defaults
from .core.time import TimeZoneLike, require_aware
from .core.types import ArcLayout, Coordinate, DaySolarReference, PathSample, SolarPathData, SunPosition
from .engines.noon import find_true_solar_noon
from .engines.position import sun_position, trace_sun_position
from .engines.sampler import sample_sun_path, solar_path_data


def calculate_sun_position(instant: datetime, coordinate: Coordinate, timezone_id: TimeZoneLike) -> SunPosition:
    """
    Apparent solar altitude/azimuth for an instant at a location.

    Raises TimezoneResolutionError if `timezone_id` is not a known IANA zone.
    """
    return sun_position(instant, coordinate, timezone_id)


def _day(sunrise: datetime, sunset: datetime, solar_noon: Optional[datetime]) -> DaySolarReference:
    require_aware(sunrise)
    require_aware(sunset)
    if solar_noon is None:
        return DaySolarReference.from_sunrise_sunset(sunrise, sunset)
    require_aware(solar_noon)
    return DaySolarReference(sunrise=sunrise, sunset=sunset, solar_noon=solar_noon)


def calculate_solar_path(
    instant: datetime,
    coordinate: Coordinate,
    timezone_id: TimeZoneLike,
    sunrise: datetime,
    sunset: datetime,
    solar_noon: Optional[datetime] = None,
) -> SolarPathData:
    """
    Current, sunrise, noon and sunset positions plus progress ratios.

    `solar_noon` defaults to the sunrise/sunset midpoint. Inverted or empty
    daylight windows are not errors: sun_progress is then 0.5.
    """
    return solar_path_data(instant, coordinate, timezone_id, _day(sunrise, sunset, solar_noon))


def generate_sun_path_samples(
    coordinate: Coordinate,
    timezone_id: TimeZoneLike,
    sunrise: datetime,
    sunset: datetime,
    solar_noon: Optional[datetime] = None,
    point_count: Optional[int] = None,
    *,
    layout: Optional[ArcLayout] = None,
    workers: Optional[int] = None,
) -> Tuple[PathSample, ...]:
    """
    point_count + 1 samples evenly spaced in time from sunrise to sunset.

    Each sample unpacks as (x, y, SunPosition) in `layout` coordinates (unit
    square by default). Unset arguments come from the environment defaults
    (see solpath.core.config). Empty if sunset <= sunrise.
    """
    defaults = load_defaults()
    return sample_sun_path(
        coordinate,
        timezone_id,
        _day(sunrise, sunset, solar_noon),
        point_count=defaults.point_count if point_count is None else point_count,
        layout=defaults.layout if layout is None else layout,
        workers=defaults.workers if workers is None else workers,
    )


def true_solar_noon(coordinate: Coordinate, timezone_id: TimeZoneLike, sunrise: datetime, sunset: datetime) -> datetime:
    """Instant of maximum altitude between sunrise and sunset (needs scipy)."""
    return find_true_solar_noon(coordinate, timezone_id, sunrise, sunset)


def explain(instant: datetime, coordinate: Coordinate, timezone_id: TimeZoneLike) -> Dict[str, Any]:
    """Intermediate quantities of the position pipeline, in degrees where angular."""
    tr = trace_sun_position(instant, coordinate, timezone_id)
    eq = tr.equatorial
    return {
        "jd": tr.jd,
        "julian_century": tr.T,
        "utc_hours": tr.utc_hours,
        "true_longitude_deg": math.degrees(eq.true_longitude_rad) % 360.0,
        "obliquity_deg": math.degrees(eq.obliquity_rad),
        "eccentricity": eq.eccentricity,
        "right_ascension_deg": eq.right_ascension_deg,
        "declination_deg": eq.declination_deg,
        "hour_angle_deg": math.degrees(tr.hour_angle_rad),
        "geometric_altitude_deg": tr.geometric.altitude_deg,
        "apparent_altitude_deg": tr.position.altitude_deg,
        "azimuth_deg": tr.position.azimuth_deg,
    }
