"""
solpath.engines.noon
--------------------
True solar noon: the instant of maximum apparent altitude between sunrise
and sunset. The weather provider only supplies the sunrise/sunset midpoint,
which can be off by several minutes (equation of time, zone offset).
"""

from __future__ import annotations
from datetime import datetime, timedelta

from ..core.time import TimeZoneLike, require_aware, resolve_timezone
from ..core.types import Coordinate
from .position import sun_position


def _need_scipy():
    try:
        import scipy.optimize as opt
        return opt
    except ImportError as e:
        raise RuntimeError('Need scipy. Install: pip install "solpath[diagnostics]"') from e


def find_true_solar_noon(
    coordinate: Coordinate,
    tz: TimeZoneLike,
    sunrise: datetime,
    sunset: datetime,
    *,
    tolerance_seconds: float = 1.0,
) -> datetime:
    """
    Instant of maximum apparent altitude in [sunrise, sunset].

    Bounded scalar minimization of -altitude over seconds since sunrise.
    If sunset <= sunrise the window is empty and sunrise is returned.
    """
    opt = _need_scipy()
    zone = resolve_timezone(tz)
    require_aware(sunrise)
    require_aware(sunset)

    span = (sunset - sunrise).total_seconds()
    if span <= 0:
        return sunrise

    def neg_altitude(offset_s: float) -> float:
        instant = sunrise + timedelta(seconds=float(offset_s))
        return -sun_position(instant, coordinate, zone).altitude_deg

    res = opt.minimize_scalar(
        neg_altitude,
        bounds=(0.0, span),
        method="bounded",
        options={"xatol": tolerance_seconds},
    )
    return sunrise + timedelta(seconds=float(res.x))
