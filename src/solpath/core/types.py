from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterator, Tuple

from .errors import InvalidCoordinateError

@dataclass(frozen=True)
class Coordinate:
    """Observer location in degrees (longitude positive East)."""
    latitude_deg: float
    longitude_deg: float

    def __post_init__(self) -> None:
        lat, lon = self.latitude_deg, self.longitude_deg
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise InvalidCoordinateError(f"coordinate must be finite, got ({lat}, {lon})")
        if not -90.0 <= lat <= 90.0:
            raise InvalidCoordinateError(f"latitude out of range [-90, 90]: {lat}")
        if not -180.0 <= lon <= 180.0:
            raise InvalidCoordinateError(f"longitude out of range [-180, 180]: {lon}")

@dataclass(frozen=True)
class SunPosition:
    """Apparent altitude (refraction corrected) and azimuth clockwise from true North."""
    altitude_deg: float
    azimuth_deg: float

    @property
    def is_above_horizon(self) -> bool:
        return self.altitude_deg > 0.0

    @property
    def heading(self) -> str:
        from ..reference.angles import compass_heading
        return compass_heading(self.azimuth_deg)

@dataclass(frozen=True)
class SolarPathData:
    current_position: SunPosition
    sunrise_position: SunPosition
    solar_noon_position: SunPosition
    sunset_position: SunPosition
    sun_progress: float       # elapsed daylight fraction in [0, 1]
    altitude_progress: float  # current altitude / max_daily_altitude in [0, 1]
    max_daily_altitude: float # apparent altitude at solar noon (degrees)
    true_solar_noon: datetime

@dataclass(frozen=True)
class DaySolarReference:
    """
    Sunrise, sunset and solar noon for one civil day, as supplied by the
    weather-data collaborator. Ordering is trusted, not validated.
    """
    sunrise: datetime
    sunset: datetime
    solar_noon: datetime

    @classmethod
    def from_sunrise_sunset(cls, sunrise: datetime, sunset: datetime) -> "DaySolarReference":
        """Midpoint noon, the approximation used by the weather provider."""
        return cls(sunrise=sunrise, sunset=sunset, solar_noon=sunrise + (sunset - sunrise) / 2)

    @property
    def daylight(self) -> timedelta:
        return self.sunset - self.sunrise

    @property
    def daylight_seconds(self) -> float:
        return self.daylight.total_seconds()

@dataclass(frozen=True)
class ArcLayout:
    """
    Visualization rectangle for the sun-path arc.

    x_inset:    horizontal inset of the sunrise/sunset points (fraction of width)
    y_base:     horizon line (fraction of height from the top)
    top_margin: highest allowed point (fraction of height from the top)
    """
    width: float = 1.0
    height: float = 1.0
    x_inset: float = 0.1
    y_base: float = 0.85
    top_margin: float = 0.1

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"layout size must be positive, got {self.width}x{self.height}")
        if not 0.0 <= self.x_inset < 0.5:
            raise ValueError(f"x_inset must be in [0, 0.5): {self.x_inset}")
        if not 0.0 <= self.top_margin < self.y_base <= 1.0:
            raise ValueError(
                f"need 0 <= top_margin < y_base <= 1, got top_margin={self.top_margin}, y_base={self.y_base}"
            )

    @property
    def baseline(self) -> float:
        return self.height * self.y_base

    @property
    def available_height(self) -> float:
        return self.height * (self.y_base - self.top_margin)

@dataclass(frozen=True)
class PathSample:
    """One point of the sampled sun path. Unpacks as (x, y, position)."""
    index: int
    t: float
    instant: datetime
    x: float
    y: float
    position: SunPosition

    def __iter__(self) -> Iterator[object]:
        return iter((self.x, self.y, self.position))

    def as_tuple(self) -> Tuple[float, float, SunPosition]:
        return (self.x, self.y, self.position)
