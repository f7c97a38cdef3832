from __future__ import annotations

import math
from math import fmod


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

TAU = 2.0 * math.pi

def wrap_rad(x_rad: float) -> float:
    """Wrap radians to [0, 2*pi)."""
    y = fmod(x_rad, TAU)
    if y < 0:
        y += TAU
    # fmod of a tiny negative can round back up to TAU
    if y >= TAU:
        y -= TAU
    return y

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    if y >= 360.0:
        y -= 360.0
    return y

def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / 3600.0

def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))

def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


# ------------------------------------------------------------
# Compass
# ------------------------------------------------------------

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

def compass_heading(azimuth_deg: float) -> str:
    """16-point compass label for an azimuth (0 = N, clockwise)."""
    index = int(wrap_deg(azimuth_deg) / 22.5 + 0.5) % 16
    return COMPASS_POINTS[index]
