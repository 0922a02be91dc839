"""Command that lists which satellites of a TLE file are above the horizon."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TextIO

from orbitprop.conversions import Coordinates, eci_to_look_angles, jday_time
from orbitprop.gravity import Gravity
from orbitprop.initialization import tle_to_sat
from orbitprop.propagator import propagate

_MIN_LINE_LENGTH = 60


@dataclass
class _Tally:
    parsed: int = 0
    errors: int = 0
    above: int = 0
    below: int = 0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="visible-sats",
        description="Report the look angles of the satellites in a TLE file.",
    )
    parser.add_argument("-file", "--file", dest="file", default="",
                        help="Input file to read (required)")
    parser.add_argument("-alt", "--alt", dest="alt", type=float, default=0.0,
                        help="Altitude (required)")
    parser.add_argument("-lon", "--lon", dest="lon", type=float, default=0.0,
                        help="Longitude (required)")
    parser.add_argument("-lat", "--lat", dest="lat", type=float, default=0.0,
                        help="Latitude (required)")
    return parser


def _candidate_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield the trimmed lines that may belong to an element set."""
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith(("//", "#")):
            continue
        if not line.startswith(("1", "2")) or len(line) < _MIN_LINE_LENGTH:
            continue
        yield line


def _format_rfc3339(moment: datetime) -> str:
    moment = moment.astimezone(timezone.utc)
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    return text + "Z"


def _trim(value: float) -> str:
    return f"{value:.9f}".rstrip("0").rstrip(".")


def _format_duration(seconds: float) -> str:
    nanos = seconds * 1e9
    if nanos < 1e3:
        return f"{int(nanos)}ns"
    if nanos < 1e6:
        return _trim(nanos / 1e3) + "µs"
    if nanos < 1e9:
        return _trim(nanos / 1e6) + "ms"
    hours, rest = divmod(seconds, 3600.0)
    minutes, secs = divmod(rest, 60.0)
    text = _trim(secs) + "s"
    if hours or minutes:
        text = f"{int(minutes)}m" + text
    if hours:
        text = f"{int(hours)}h" + text
    return text


def _report(lines: Iterable[str], observer: Coordinates, out: TextIO,
            err: TextIO, clock: Callable[[], datetime] = _utc_now) -> _Tally:
    """Propagate each element set to the present and print its look angles."""
    tally = _Tally()
    candidates = _candidate_lines(lines)
    for line1, line2 in zip(candidates, candidates):
        try:
            sat = tle_to_sat(line1, line2, Gravity.WGS72)
        except (ValueError, ArithmeticError) as exc:
            print(f"could not parse TLE: {exc}", file=err)
            tally.errors += 1
            continue

        tally.parsed += 1
        epoch = sat.tle.epoch_time(clock())
        try:
            position, _ = propagate(sat, clock())
        except (ValueError, ArithmeticError) as exc:
            print(f"could not propagate satellite: {exc}", file=err)
            continue

        look = eci_to_look_angles(position, observer, jday_time(clock()),
                                  sat.gravity_const)
        header = f"{sat.tle.catalog_number}:\n\tepoch {_format_rfc3339(epoch)}\n"
        if look.elevation < 0:
            out.write(header + "\tbelow horizon\n")
            tally.below += 1
            continue
        out.write(header + f"\tazimuth: {look.azimuth:0.2f}\n"
                  f"\televation: {look.elevation:0.2f}\n")
        tally.above += 1
    return tally


def main(argv: list[str] | None = None) -> int:
    """Run the command; exits with status 1 when the input is missing."""
    start = time.perf_counter()
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.file:
        print("All flags are required")
        parser.print_help()
        raise SystemExit(1)

    print(f"Altitude: {args.alt:.2f}")
    print(f"Longitude: {args.lon:.2f}")
    print(f"Latitude: {args.lat:.2f}")
    print(f"File: {args.file}")

    try:
        handle = open(args.file, encoding="utf-8", errors="replace")
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        raise SystemExit(1) from None

    observer = Coordinates(latitude=args.lat, longitude=args.lon, altitude=args.alt)
    with handle:
        tally = _report(handle, observer, sys.stdout, sys.stderr)

    elapsed = _format_duration(time.perf_counter() - start)
    sys.stdout.write(
        f"Execution time: {elapsed}\n"
        f"Tle Parsed:Error: {tally.parsed}:{tally.errors}\n"
        f"Above:Below horizon: {tally.above}:{tally.below}\n"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())