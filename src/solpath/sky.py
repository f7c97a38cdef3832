"""Sky condition and golden-hour windows derived from sunrise/sunset instants."""

from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Tuple

from .core.time import TimeZoneLike, require_aware, resolve_timezone
from .reference.angles import compass_heading

logger = logging.getLogger(__name__)

DEFAULT_TWILIGHT = timedelta(minutes=30)
GOLDEN_HOUR = timedelta(hours=1)


class SkyCondition(str, enum.Enum):
    NIGHT = "night"
    SUNRISE = "sunrise"
    DAYLIGHT = "daylight"
    SUNSET = "sunset"


def classify_sky(
    now: datetime,
    sunrise: datetime,
    sunset: datetime,
    tz: TimeZoneLike,
    *,
    twilight: timedelta = DEFAULT_TWILIGHT,
) -> SkyCondition:
    """
    Night / sunrise / daylight / sunset for the display background.

    Sunrise and sunset conditions span +/- `twilight` around each event.
    With sunrise >= sunset (polar day/night or bad data) the decision falls
    back to local noon +/- 6 hours in `tz`.
    """
    require_aware(now)
    require_aware(sunrise)
    require_aware(sunset)
    if not sunrise < sunset:
        zone = resolve_timezone(tz)
        local = now.astimezone(zone)
        noon = datetime.combine(local.date(), time(12, 0), tzinfo=zone)
        logger.debug("Invalid sunrise/sunset (%s >= %s); classifying against local noon", sunrise, sunset)
        if abs(local - noon) > timedelta(hours=6):
            return SkyCondition.NIGHT
        return SkyCondition.DAYLIGHT

    if now < sunrise - twilight or now > sunset + twilight:
        return SkyCondition.NIGHT
    if now < sunrise + twilight:
        return SkyCondition.SUNRISE
    if now >= sunset - twilight:
        return SkyCondition.SUNSET
    return SkyCondition.DAYLIGHT


@dataclass(frozen=True)
class GoldenHours:
    morning: Tuple[datetime, datetime]
    evening: Tuple[datetime, datetime]


def golden_hours(sunrise: datetime, sunset: datetime, *, length: timedelta = GOLDEN_HOUR) -> GoldenHours:
    """First hour after sunrise and last hour before sunset."""
    return GoldenHours(morning=(sunrise, sunrise + length), evening=(sunset - length, sunset))


__all__ = ["SkyCondition", "classify_sky", "GoldenHours", "golden_hours", "compass_heading"]
