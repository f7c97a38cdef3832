from __future__ import annotations
import math
from typing import Tuple

from ..core.types import ArcLayout
from ..reference.angles import lerp


def arc_point(layout: ArcLayout, sun_progress: float, altitude_deg: float, max_altitude_deg: float) -> Tuple[float, float]:
    """
    Map (daylight progress, apparent altitude) onto the arc rectangle.

    x runs linearly from the left inset to the right inset with time.
    Height uses sin(alt)/sin(max_alt) rather than a linear scale: altitude
    changes slowly near noon and fast near the horizon, and the sine keeps
    that shape instead of drawing a symmetric parabola.
    y grows downwards (screen convention) and never rises above the top margin.
    """
    w = layout.width
    x = lerp(w * layout.x_inset, w * (1.0 - layout.x_inset), sun_progress)

    if max_altitude_deg > 0.0:
        normalized = math.sin(math.radians(max(0.0, altitude_deg))) / math.sin(math.radians(max_altitude_deg))
    else:
        normalized = 0.0

    y = layout.baseline - layout.available_height * normalized
    return x, max(layout.height * layout.top_margin, y)
