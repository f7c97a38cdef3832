from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import sys
from datetime import datetime


def _parse_instant(s: str) -> datetime:
    """ISO 8601 with an explicit offset (2024-06-21T12:00:00-07:00)."""
    try:
        dt = datetime.fromisoformat(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an ISO 8601 datetime: {s!r}") from e
    if dt.tzinfo is None:
        raise argparse.ArgumentTypeError(f"datetime needs a UTC offset: {s!r}")
    return dt


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _positive_int(s: str) -> int:
    try:
        n = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an integer: {s!r}") from e
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def _location_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")
    p.add_argument("--tz", required=True, help="IANA timezone identifier, e.g. America/Los_Angeles")


def _day_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--sunrise", type=_parse_instant, required=True, help="ISO 8601 with offset")
    p.add_argument("--sunset", type=_parse_instant, required=True, help="ISO 8601 with offset")
    p.add_argument("--noon", type=_parse_instant, default=None, help="Solar noon (default: sunrise/sunset midpoint)")


def _fmt_position(pos) -> str:
    return f"alt {pos.altitude_deg:8.4f} deg   az {pos.azimuth_deg:8.4f} deg ({pos.heading})"


def cmd_position(argv: list[str]) -> int:
    import solpath

    p = argparse.ArgumentParser(prog="solpath position", description="Apparent solar altitude/azimuth at an instant.")
    _location_args(p)
    p.add_argument("--at", type=_parse_instant, default=None, help="ISO 8601 with offset (default: now)")
    p.add_argument("--explain", action="store_true", help="Print intermediate quantities")
    args = p.parse_args(argv)

    at = args.at or datetime.now().astimezone()
    coord = solpath.Coordinate(args.lat, args.lon)
    pos = solpath.calculate_sun_position(at, coord, args.tz)

    print(f"Instant: {at.isoformat()}")
    print(f"Sun    : {_fmt_position(pos)}")
    if args.explain:
        print()
        for k, v in solpath.explain(at, coord, args.tz).items():
            print(f"  {k:<24} = {v:.10f}")
    return 0


def cmd_path(argv: list[str]) -> int:
    import solpath

    p = argparse.ArgumentParser(prog="solpath path", description="Solar path data (positions and progress) for a day.")
    _location_args(p)
    _day_args(p)
    p.add_argument("--at", type=_parse_instant, default=None, help="ISO 8601 with offset (default: now)")
    p.add_argument("--true-noon", action="store_true", help="Search the altitude maximum instead of using --noon")
    args = p.parse_args(argv)

    at = args.at or datetime.now().astimezone()
    coord = solpath.Coordinate(args.lat, args.lon)
    noon = args.noon
    if args.true_noon:
        noon = solpath.true_solar_noon(coord, args.tz, args.sunrise, args.sunset)

    data = solpath.calculate_solar_path(at, coord, args.tz, args.sunrise, args.sunset, noon)

    print(f"Now       : {_fmt_position(data.current_position)}")
    print(f"Sunrise   : {_fmt_position(data.sunrise_position)}")
    print(f"Solar noon: {_fmt_position(data.solar_noon_position)}  at {data.true_solar_noon.isoformat()}")
    print(f"Sunset    : {_fmt_position(data.sunset_position)}")
    print()
    print(f"Sun progress      = {data.sun_progress:.4f}")
    print(f"Altitude progress = {data.altitude_progress:.4f}")
    print(f"Max altitude      = {data.max_daily_altitude:.4f} deg")
    return 0


def cmd_samples(argv: list[str]) -> int:
    import solpath

    p = argparse.ArgumentParser(prog="solpath samples", description="Sample the sun path between sunrise and sunset.")
    _location_args(p)
    _day_args(p)
    p.add_argument("--points", type=_positive_int, default=None, help="Number of intervals (samples = points + 1)")
    p.add_argument("--workers", type=_positive_int, default=None, help="Thread pool size")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    args = p.parse_args(argv)

    coord = solpath.Coordinate(args.lat, args.lon)
    samples = solpath.generate_sun_path_samples(
        coord, args.tz, args.sunrise, args.sunset, args.noon, args.points, workers=args.workers
    )

    if args.json:
        rows = [
            {
                "t": s.t,
                "instant": s.instant.isoformat(),
                "x": s.x,
                "y": s.y,
                "altitude_deg": s.position.altitude_deg,
                "azimuth_deg": s.position.azimuth_deg,
            }
            for s in samples
        ]
        print(json.dumps(rows, indent=2))
        return 0

    print(f"{'i':>3} {'t':>6} {'x':>8} {'y':>8} {'alt':>9} {'az':>9}")
    for s in samples:
        print(f"{s.index:3d} {s.t:6.3f} {s.x:8.4f} {s.y:8.4f} {s.position.altitude_deg:9.4f} {s.position.azimuth_deg:9.4f}")
    return 0


def cmd_sky(argv: list[str]) -> int:
    from solpath.sky import classify_sky, golden_hours

    p = argparse.ArgumentParser(prog="solpath sky", description="Sky condition (night/sunrise/daylight/sunset).")
    p.add_argument("--tz", required=True, help="IANA timezone identifier")
    p.add_argument("--sunrise", type=_parse_instant, required=True)
    p.add_argument("--sunset", type=_parse_instant, required=True)
    p.add_argument("--at", type=_parse_instant, default=None, help="ISO 8601 with offset (default: now)")
    args = p.parse_args(argv)

    at = args.at or datetime.now().astimezone()
    print(f"Sky condition: {classify_sky(at, args.sunrise, args.sunset, args.tz).value}")
    gh = golden_hours(args.sunrise, args.sunset)
    print(f"Golden hour (morning): {gh.morning[0].isoformat()} .. {gh.morning[1].isoformat()}")
    print(f"Golden hour (evening): {gh.evening[0].isoformat()} .. {gh.evening[1].isoformat()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    from solpath.core.errors import SolpathError

    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="solpath", description="Solar position and sun-path toolkit CLI.")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("position", help="Apparent solar altitude/azimuth at an instant.")
    sub.add_parser("path", help="Solar path data (positions and progress) for a day.")
    sub.add_parser("samples", help="Sample the sun path between sunrise and sunset.")
    sub.add_parser("sky", help="Sky condition and golden hours.")
    sub.add_parser("plot", help="Plot the sampled sun path (needs diagnostics extras).")

    args, rest = p.parse_known_args(argv)

    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "position": cmd_position,
        "path": cmd_path,
        "samples": cmd_samples,
        "sky": cmd_sky,
    }

    try:
        if args.cmd == "plot":
            return _run_module_main("solpath.diagnostics.plot_path", rest)
        if args.cmd in commands:
            return commands[args.cmd](rest)
    except SolpathError as e:
        print(f"solpath: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
