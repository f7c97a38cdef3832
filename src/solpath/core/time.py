from __future__ import annotations
import logging
from datetime import date, datetime, timezone
from functools import lru_cache
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import TimezoneResolutionError

logger = logging.getLogger(__name__)

TimeZoneLike = Union[str, ZoneInfo]


@lru_cache(maxsize=256)
def _zone(tz_id: str) -> ZoneInfo:
    return ZoneInfo(tz_id)


def resolve_timezone(tz: TimeZoneLike) -> ZoneInfo:
    """
    Resolve an IANA identifier ("America/Los_Angeles") to a ZoneInfo.

    There is no fallback zone: substituting UTC or the host zone would
    silently shift the civil date used for the Julian Day.
    """
    if isinstance(tz, ZoneInfo):
        return tz
    if not isinstance(tz, str) or not tz.strip():
        logger.error("Invalid or unknown IANA timezone identifier: %r", tz)
        raise TimezoneResolutionError(tz, "empty or not a string")
    try:
        return _zone(tz)
    except ZoneInfoNotFoundError as e:
        logger.error("Invalid or unknown IANA timezone identifier: %r", tz)
        raise TimezoneResolutionError(tz) from e
    except (ValueError, OSError) as e:
        # zoneinfo rejects malformed keys (absolute paths, "..") with ValueError
        logger.error("Error loading timezone %r: %s", tz, e)
        raise TimezoneResolutionError(tz, str(e)) from e


def require_aware(instant: datetime) -> datetime:
    """Instants must be timezone-aware; naive datetimes are ambiguous."""
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValueError("datetime must be timezone-aware")
    return instant


def local_date(instant: datetime, tz: TimeZoneLike) -> date:
    """Civil calendar date of the instant in the given zone."""
    return require_aware(instant).astimezone(resolve_timezone(tz)).date()


def utc_hours(instant: datetime) -> float:
    """UTC time of day as decimal hours in [0, 24)."""
    u = require_aware(instant).astimezone(timezone.utc)
    return u.hour + u.minute / 60.0 + u.second / 3600.0 + u.microsecond / 3_600_000_000.0


def day_fraction_utc(instant: datetime) -> float:
    """UTC time of day as a fraction of a day in [0, 1)."""
    return utc_hours(instant) / 24.0
