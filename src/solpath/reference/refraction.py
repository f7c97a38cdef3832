from __future__ import annotations

import math

from .angles import clamp

# Regime boundaries (degrees of geometric altitude)
NO_REFRACTION_ABOVE_DEG = 85.0
TANGENT_SERIES_ABOVE_DEG = 5.0
HORIZON_POLY_ABOVE_DEG = -0.575


def refraction_correction_deg(altitude_deg: float) -> float:
    """
    Atmospheric refraction R (degrees) to add to a geometric altitude h.

      h > 85         : 0
      5 < h <= 85    : (58.1/tan h - 0.07/tan^3 h + 0.000086/tan^5 h) / 3600
      -0.575 < h <= 5: (1735 + h(-518.2 + h(103.4 + h(-12.79 + h 0.711)))) / 3600
      h <= -0.575    : -20.774 / tan h / 3600

    The last branch is the simplified below-horizon form. It is imprecise near
    the horizon and is kept as-is: rendered positions depend on it.
    """
    h = altitude_deg
    if h > NO_REFRACTION_ABOVE_DEG:
        return 0.0
    if h > TANGENT_SERIES_ABOVE_DEG:
        t = math.tan(math.radians(h))
        return (58.1 / t - 0.07 / t**3 + 0.000086 / t**5) / 3600.0
    if h > HORIZON_POLY_ABOVE_DEG:
        return (1735.0 + h * (-518.2 + h * (103.4 + h * (-12.79 + h * 0.711)))) / 3600.0
    return -20.774 / math.tan(math.radians(h)) / 3600.0


def apparent_altitude_deg(geometric_altitude_deg: float) -> float:
    """Geometric altitude + refraction, clamped to [-90, 90]."""
    return clamp(geometric_altitude_deg + refraction_correction_deg(geometric_altitude_deg), -90.0, 90.0)
