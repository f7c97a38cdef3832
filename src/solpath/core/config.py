"""
solpath.core.config

Process-wide defaults, overridable from the environment:

  SOLPATH_POINT_COUNT   samples per sun path (default 50, must be >= 1)
  SOLPATH_X_INSET       horizontal inset of the arc end points (default 0.1)
  SOLPATH_Y_BASE        horizon line, fraction of height from the top (default 0.85)
  SOLPATH_TOP_MARGIN    highest arc point, fraction of height from the top (default 0.1)
  SOLPATH_WORKERS       thread pool size for path sampling (default: serial)

Values are read once; call ``load_defaults.cache_clear()`` after changing the
environment (tests do this).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional, TypeVar

from .types import ArcLayout

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_POINT_COUNT = 50


@dataclass(frozen=True)
class SolpathDefaults:
    point_count: int = DEFAULT_POINT_COUNT
    layout: ArcLayout = ArcLayout()
    workers: Optional[int] = None


def _env(name: str, parse: Callable[[str], T], default: T, valid: Callable[[T], bool]) -> T:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = parse(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a valid value, using %r", name, raw, default)
        return default
    if not valid(value):
        logger.warning("Ignoring %s=%r: out of range, using %r", name, raw, default)
        return default
    return value


@lru_cache(maxsize=1)
def load_defaults() -> SolpathDefaults:
    base = ArcLayout()
    point_count = _env("SOLPATH_POINT_COUNT", int, DEFAULT_POINT_COUNT, lambda n: n >= 1)
    x_inset = _env("SOLPATH_X_INSET", float, base.x_inset, lambda v: 0.0 <= v < 0.5)
    y_base = _env("SOLPATH_Y_BASE", float, base.y_base, lambda v: 0.0 < v <= 1.0)
    top_margin = _env("SOLPATH_TOP_MARGIN", float, base.top_margin, lambda v: 0.0 <= v < 1.0)
    workers = _env("SOLPATH_WORKERS", int, None, lambda n: n >= 1)

    try:
        layout = ArcLayout(x_inset=x_inset, y_base=y_base, top_margin=top_margin)
    except ValueError as e:
        logger.warning("Inconsistent arc layout from environment (%s); using defaults", e)
        layout = base

    return SolpathDefaults(point_count=point_count, layout=layout, workers=workers)
