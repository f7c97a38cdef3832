#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

import solpath
from solpath.cli import _parse_instant, _positive_int
from solpath.core.types import PathSample


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "solpath[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "solpath[diagnostics]"') from e


def plot_samples(samples: Sequence[PathSample], out: str, *, title: str = "") -> str:
    """
    Two panels: the arc as drawn (layout coordinates, y down) and the raw
    apparent altitude against daylight progress.
    """
    np = _need_numpy()
    plt = _need_matplotlib()

    xs = np.array([s.x for s in samples])
    ys = np.array([s.y for s in samples])
    ts = np.array([s.t for s in samples])
    alt = np.array([s.position.altitude_deg for s in samples])

    fig, (ax_arc, ax_alt) = plt.subplots(1, 2, figsize=(10.0, 4.0), constrained_layout=True)

    ax_arc.plot(xs, ys, color="tab:orange", lw=1.5)
    ax_arc.scatter(xs, ys, s=6, color="tab:orange")
    ax_arc.set_xlim(0.0, max(1.0, float(xs.max())))
    ax_arc.invert_yaxis()
    ax_arc.set_aspect("equal", adjustable="box")
    ax_arc.set_title("Sun path arc")

    ax_alt.axhline(0.0, color="0.6", lw=0.8)
    ax_alt.plot(ts, alt, color="tab:blue", lw=1.2)
    ax_alt.set_xlabel("Daylight progress")
    ax_alt.set_ylabel("Apparent altitude (deg)")
    ax_alt.grid(True, color="0.88", linewidth=0.7)
    ax_alt.set_title("Altitude")

    if title:
        fig.suptitle(title)
    fig.savefig(out, dpi=120)
    plt.close(fig)
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="solpath plot", description="Plot the sampled sun path for one day.")
    p.add_argument("--lat", type=float, required=True)
    p.add_argument("--lon", type=float, required=True)
    p.add_argument("--tz", required=True, help="IANA timezone identifier")
    p.add_argument("--sunrise", type=_parse_instant, required=True, help="ISO 8601 with offset")
    p.add_argument("--sunset", type=_parse_instant, required=True, help="ISO 8601 with offset")
    p.add_argument("--noon", type=_parse_instant, default=None, help="ISO 8601 with offset (default: midpoint)")
    p.add_argument("--points", type=_positive_int, default=None)
    p.add_argument("--out", default="sun_path.png")
    args = p.parse_args(argv)

    coord = solpath.Coordinate(args.lat, args.lon)
    samples = solpath.generate_sun_path_samples(coord, args.tz, args.sunrise, args.sunset, args.noon, args.points)
    if not samples:
        raise SystemExit("Empty daylight window: nothing to plot")

    out = plot_samples(samples, args.out, title=f"{args.lat:.4f}, {args.lon:.4f} ({args.tz})")
    print(f"wrote {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
