#!/usr/bin/env python3
"""Compute a globe camera pose that frames a set of points.

Workflow:
    1. Read points from --point arguments and/or a JSON file.
    2. Look up ground elevation at the first point (falls back to 0 on failure).
    3. Resolve the UI padding into a zoom-out scale and a center offset.
    4. Print the camera pose (or the fly-to request) as JSON.
    5. Optionally render a PNG preview of the points, their bounding box and the
       shifted camera center.

Example:
    python frame_points.py --point 37.77,-122.42 --point 37.80,-122.27 \
        --padding 0.05 0.05 0.05 0.35 --heading 30
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from shapely.geometry import MultiPoint

from framing.bounds import Point, compute_bounding_extent
from framing.camera import CameraPose
from framing.controller import fly_to_camera
from framing.elevation import ELEVATION_API_URL, ELEVATION_TIMEOUT, OpenElevationClient
from framing.errors import FramingError
from framing.look_at import look_at_with_padding
from framing.padding import NO_PADDING


def parse_point(value: str) -> Point:
    parts = [part.strip() for part in value.split(",")]
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"Expected LAT,LNG[,ALT], got {value!r}")
    try:
        numbers = [float(part) for part in parts]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid coordinate in {value!r}") from exc
    lat, lng = numbers[0], numbers[1]
    if not -90 <= lat <= 90 or not -180 <= lng <= 180:
        raise argparse.ArgumentTypeError(f"Coordinate out of range: {value!r}")
    return Point(lat=lat, lng=lng, alt=numbers[2] if len(numbers) == 3 else 0.0)


def load_points_json(path: Path) -> List[Point]:
    """Read ``[{"lat": .., "lng": .., "alt": ..}, ...]`` or ``{"points": [...]}``."""
    data = json.loads(path.read_text())
    if isinstance(data, dict):
        data = data.get("points", [])
    points: List[Point] = []
    for item in data:
        if isinstance(item, dict):
            point = Point(lat=float(item["lat"]), lng=float(item["lng"]), alt=float(item.get("alt") or 0.0))
        else:
            point = Point(*[float(v) for v in item])
        if not -90 <= point.lat <= 90 or not -180 <= point.lng <= 180:
            raise ValueError(f"Coordinate out of range: {point.lat},{point.lng}")
        points.append(point)
    return points


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Frame a set of geographic points with a globe camera.")
    parser.add_argument(
        "--point",
        dest="points",
        type=parse_point,
        action="append",
        default=[],
        help="Point as LAT,LNG[,ALT]. Repeat for multiple points.",
    )
    parser.add_argument(
        "--points-json",
        type=Path,
        help="JSON file with a list of {lat, lng, alt} objects.",
    )
    parser.add_argument(
        "--heading",
        type=float,
        default=0.0,
        help="Camera heading in degrees clockwise from north (default: %(default)s).",
    )
    parser.add_argument(
        "--padding",
        type=float,
        nargs=4,
        metavar=("TOP", "RIGHT", "BOTTOM", "LEFT"),
        default=list(NO_PADDING),
        help="Fractions of the viewport covered by UI (default: no padding).",
    )
    parser.add_argument(
        "--elevation-url",
        type=str,
        default=ELEVATION_API_URL,
        help="Open-Elevation compatible lookup endpoint (default: ELEVATION_API_URL env var).",
    )
    parser.add_argument(
        "--elevation-timeout",
        type=float,
        default=ELEVATION_TIMEOUT,
        help="Elevation request timeout in seconds (default: %(default)s).",
    )
    parser.add_argument(
        "--no-elevation",
        action="store_true",
        help="Skip the elevation lookup and use ground elevation 0.",
    )
    parser.add_argument(
        "--fly-to",
        action="store_true",
        help="Print the camera animation request instead of the raw pose.",
    )
    parser.add_argument(
        "--preview",
        type=Path,
        help="Write a PNG preview of the framing to this path.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose logging.",
    )
    return parser.parse_args(argv)


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s")


def render_preview(points: Sequence[Point], pose: CameraPose, output_path: Path) -> None:
    extent = compute_bounding_extent(points)
    fig: Figure
    ax: Axes
    fig, ax = plt.subplots(figsize=(8, 8))

    lngs = [p.lng for p in points]
    lats = [p.lat for p in points]
    bbox = MultiPoint(list(zip(lngs, lats))).envelope
    minx, miny, maxx, maxy = bbox.bounds
    pad = max(maxx - minx, maxy - miny, 0.01) * 0.25
    minx = min(minx, pose.center.lng) - pad
    maxx = max(maxx, pose.center.lng) + pad
    miny = min(miny, pose.center.lat) - pad
    maxy = max(maxy, pose.center.lat) + pad

    ax.set_xlim(minx, maxx)
    ax.set_ylim(miny, maxy)
    ax.set_aspect("equal")
    ax.set_title(f"Framing of {len(points)} point(s), heading {pose.heading:g}°, range {pose.range:,.0f} m")

    if bbox.geom_type == "Polygon":
        bx, by = bbox.exterior.xy
        ax.plot(bx, by, color="#555555", linewidth=1.0, linestyle="--", label="Bounding box")

    ax.scatter(lngs, lats, color="#cc6600", zorder=3, label="Points")
    ax.scatter([extent.center_lng], [extent.center_lat], marker="+", s=120, color="#333333", label="Content center")
    ax.scatter([pose.center.lng], [pose.center.lat], marker="x", s=120, color="#0066cc", label="Camera center")
    ax.set_xlabel("Longitude (deg)")
    ax.set_ylabel("Latitude (deg)")
    ax.legend(loc="upper right")
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    logging.info("Framing preview saved to %s", output_path)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.debug)

    points = list(args.points)
    if args.points_json:
        try:
            points.extend(load_points_json(args.points_json))
        except (OSError, ValueError, KeyError, TypeError) as exc:
            print(f"Could not read points from {args.points_json}: {exc}", file=sys.stderr)
            return 2

    elevation = None
    if not args.no_elevation:
        elevation = OpenElevationClient(url=args.elevation_url, timeout=args.elevation_timeout)

    try:
        pose = asyncio.run(look_at_with_padding(points, elevation, heading=args.heading, padding=args.padding))
    except FramingError as exc:
        print(f"Cannot frame points: {exc}", file=sys.stderr)
        return 2

    logging.info(
        "Camera center lat=%.6f lng=%.6f alt=%.1f range=%.1f",
        pose.center.lat,
        pose.center.lng,
        pose.center.altitude,
        pose.range,
    )
    output = asdict(fly_to_camera(pose)) if args.fly_to else asdict(pose)
    print(json.dumps(output, indent=2))

    if args.preview:
        render_preview(points, pose, args.preview)
    return 0


if __name__ == "__main__":
    sys.exit(main())
