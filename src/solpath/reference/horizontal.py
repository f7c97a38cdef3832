from __future__ import annotations

import math
from dataclasses import dataclass

from .angles import wrap_rad


@dataclass(frozen=True)
class HorizontalCoordinates:
    """Geometric (airless) horizontal coordinates, radians."""
    altitude_rad: float
    azimuth_rad: float  # [0, 2pi), clockwise from North

    @property
    def altitude_deg(self) -> float: return math.degrees(self.altitude_rad)
    @property
    def azimuth_deg(self) -> float: return math.degrees(self.azimuth_rad)


def equatorial_to_horizontal(lat_rad: float, declination_rad: float, hour_angle_rad: float) -> HorizontalCoordinates:
    """
    Project (dec, H) onto the observer's horizon.

      sin h = sin(phi) sin(dec) + cos(phi) cos(dec) cos(H)
      A_s   = atan2(sin H, cos H sin(phi) - tan(dec) cos(phi))

    A_s is measured from South; adding pi gives azimuth from North.
    """
    sin_lat, cos_lat = math.sin(lat_rad), math.cos(lat_rad)
    sin_h = sin_lat * math.sin(declination_rad) + cos_lat * math.cos(declination_rad) * math.cos(hour_angle_rad)
    # rounding can push |sin h| a hair above 1 at the poles
    altitude = math.asin(max(-1.0, min(1.0, sin_h)))

    azimuth_south = math.atan2(
        math.sin(hour_angle_rad),
        math.cos(hour_angle_rad) * sin_lat - math.tan(declination_rad) * cos_lat,
    )
    return HorizontalCoordinates(altitude_rad=altitude, azimuth_rad=wrap_rad(azimuth_south + math.pi))
