"""solpath public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    calculate_sun_position,
    calculate_solar_path,
    generate_sun_path_samples,
    true_solar_noon,
    explain,
)
from .core.errors import SolpathError, TimezoneResolutionError, InvalidCoordinateError
from .core.types import (
    ArcLayout,
    Coordinate,
    DaySolarReference,
    PathSample,
    SolarPathData,
    SunPosition,
)
from .sky import SkyCondition, classify_sky, golden_hours

__all__ = [
    "calculate_sun_position",
    "calculate_solar_path",
    "generate_sun_path_samples",
    "true_solar_noon",
    "explain",
    "SolpathError",
    "TimezoneResolutionError",
    "InvalidCoordinateError",
    "ArcLayout",
    "Coordinate",
    "DaySolarReference",
    "PathSample",
    "SolarPathData",
    "SunPosition",
    "SkyCondition",
    "classify_sky",
    "golden_hours",
]
