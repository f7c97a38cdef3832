"""
solpath.engines.sampler
-----------------------
Combines single-instant positions into day-level path data and samples the
sunrise..sunset window into a polyline for the sun-path arc.

Stateless: every call recomputes from its inputs.
"""

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple
from zoneinfo import ZoneInfo

from ..core.time import TimeZoneLike, require_aware, resolve_timezone
from ..core.types import (
    ArcLayout,
    Coordinate,
    DaySolarReference,
    PathSample,
    SolarPathData,
    SunPosition,
)
from ..reference.angles import clamp
from .layout import arc_point
from .position import sun_position

logger = logging.getLogger(__name__)

# Policy, not a computed value: with sunset <= sunrise (bad upstream data,
# polar day/night) the sun is drawn mid-arc instead of failing.
DEGENERATE_SUN_PROGRESS = 0.5


def sun_progress(now: datetime, sunrise: datetime, sunset: datetime) -> float:
    """Elapsed daylight fraction, clamped to [0, 1]."""
    total = (sunset - sunrise).total_seconds()
    if total <= 0:
        logger.debug("sunset %s <= sunrise %s; using neutral progress %s", sunset, sunrise, DEGENERATE_SUN_PROGRESS)
        return DEGENERATE_SUN_PROGRESS
    return clamp((now - sunrise).total_seconds() / total, 0.0, 1.0)


def altitude_progress(current_altitude_deg: float, max_daily_altitude_deg: float) -> float:
    """Current altitude relative to the day's peak, clamped to [0, 1]; 0 if the peak is not above the horizon."""
    if max_daily_altitude_deg <= 0.0:
        return 0.0
    return clamp(current_altitude_deg / max_daily_altitude_deg, 0.0, 1.0)


@dataclass(frozen=True)
class _DayPositions:
    sunrise: SunPosition
    solar_noon: SunPosition
    sunset: SunPosition


def _day_positions(coordinate: Coordinate, zone: ZoneInfo, day: DaySolarReference) -> _DayPositions:
    return _DayPositions(
        sunrise=sun_position(day.sunrise, coordinate, zone),
        solar_noon=sun_position(day.solar_noon, coordinate, zone),
        sunset=sun_position(day.sunset, coordinate, zone),
    )


def _path_data(instant: datetime, current: SunPosition, day: DaySolarReference, ref: _DayPositions) -> SolarPathData:
    max_alt = ref.solar_noon.altitude_deg
    return SolarPathData(
        current_position=current,
        sunrise_position=ref.sunrise,
        solar_noon_position=ref.solar_noon,
        sunset_position=ref.sunset,
        sun_progress=sun_progress(instant, day.sunrise, day.sunset),
        altitude_progress=altitude_progress(current.altitude_deg, max_alt),
        max_daily_altitude=max_alt,
        true_solar_noon=day.solar_noon,
    )


def solar_path_data(instant: datetime, coordinate: Coordinate, tz: TimeZoneLike, day: DaySolarReference) -> SolarPathData:
    """Positions for now/sunrise/noon/sunset plus the two progress ratios."""
    zone = resolve_timezone(tz)
    require_aware(instant)
    current = sun_position(instant, coordinate, zone)
    return _path_data(instant, current, day, _day_positions(coordinate, zone, day))


def sample_instants(sunrise: datetime, sunset: datetime, point_count: int) -> List[Tuple[int, float, datetime]]:
    """(index, t, instant) for t = i/point_count, i = 0..point_count. Empty if sunset <= sunrise."""
    if point_count < 1:
        raise ValueError(f"point_count must be >= 1, got {point_count}")
    span = sunset - sunrise
    if span.total_seconds() <= 0:
        return []
    out = []
    for i in range(point_count + 1):
        t = i / point_count
        # the last sample is exactly sunset, not sunrise + 1.0*span rounded
        instant = sunset if i == point_count else sunrise + span * t
        out.append((i, t, instant))
    return out


def sample_sun_path(
    coordinate: Coordinate,
    tz: TimeZoneLike,
    day: DaySolarReference,
    *,
    point_count: int,
    layout: ArcLayout,
    workers: Optional[int] = None,
) -> Tuple[PathSample, ...]:
    """
    Sample the daylight window into point_count + 1 arc points, ordered by t.

    With workers > 1 the samples are computed on a thread pool; the result is
    still assembled in index order.
    """
    zone = resolve_timezone(tz)
    instants = sample_instants(day.sunrise, day.sunset, point_count)
    if not instants:
        logger.debug("Empty daylight window (%s .. %s); no path samples", day.sunrise, day.sunset)
        return ()

    ref = _day_positions(coordinate, zone, day)

    def one(item: Tuple[int, float, datetime]) -> PathSample:
        i, t, instant = item
        current = sun_position(instant, coordinate, zone)
        data = _path_data(instant, current, day, ref)
        x, y = arc_point(layout, data.sun_progress, current.altitude_deg, data.max_daily_altitude)
        return PathSample(index=i, t=t, instant=instant, x=x, y=y, position=current)

    if workers is not None and workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            samples = list(pool.map(one, instants))
        samples.sort(key=lambda s: s.index)
    else:
        samples = [one(item) for item in instants]
    return tuple(samples)
