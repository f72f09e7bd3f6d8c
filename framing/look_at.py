"""Compute camera poses that frame a set of points on the globe."""
from __future__ import annotations

import inspect
import logging
import math
from typing import Awaitable, Callable, Sequence, Union

from fastapi.concurrency import run_in_threadpool

from framing.bounds import Point, compute_bounding_extent
from framing.camera import EARTH_RADIUS_METERS, MIN_RANGE_METERS, TILT_DEGREES, CameraCenter, CameraPose, slant_range, solve_camera
from framing.padding import NO_PADDING, resolve_padding

LOG = logging.getLogger(__name__)

ElevationLookup = Callable[[float, float], Union[float, None, Awaitable[Union[float, None]]]]


def _is_async_callable(obj: object) -> bool:
    return inspect.iscoroutinefunction(obj) or inspect.iscoroutinefunction(getattr(obj, "__call__", None))


async def call_elevation(lookup: ElevationLookup, lat: float, lng: float):
    """Run ``lookup`` without blocking the event loop and return its raw result.

    Synchronous lookups run in the thread pool. Failures propagate.
    """
    if _is_async_callable(lookup):
        result = lookup(lat, lng)
    else:
        result = await run_in_threadpool(lookup, lat, lng)
    if inspect.isawaitable(result):
        result = await result
    return result


async def fetch_elevation(lookup: ElevationLookup | None, lat: float, lng: float) -> float:
    """Ground elevation in meters at (lat, lng), or 0 when the lookup is unavailable."""
    if lookup is None:
        return 0.0
    try:
        result = await call_elevation(lookup, lat, lng)
    except Exception as exc:  # noqa: BLE001
        LOG.warning("Elevation lookup failed for %s,%s: %s", lat, lng, exc)
        return 0.0
    if result is None:
        LOG.warning("Elevation lookup returned no value for %s,%s", lat, lng)
        return 0.0
    try:
        elevation = float(result)
    except (TypeError, ValueError):
        LOG.warning("Elevation lookup returned a non-numeric value for %s,%s: %r", lat, lng, result)
        return 0.0
    if not math.isfinite(elevation):
        LOG.warning("Elevation lookup returned %s for %s,%s", elevation, lat, lng)
        return 0.0
    return elevation


def average_altitude(points: Sequence[Point], ground_elevation: float) -> float:
    # one ground sample is shared by every point
    return sum(ground_elevation + p.alt for p in points) / len(points)


async def look_at_with_padding(
    points: Sequence[Point],
    elevation: ElevationLookup | None,
    heading: float = 0.0,
    padding: Sequence[float] | None = NO_PADDING,
) -> CameraPose:
    """Frame ``points`` inside the part of the viewport not covered by ``padding``.

    Input errors (no points, unusable padding) are raised before the elevation
    lookup is attempted.
    """
    extent = compute_bounding_extent(points)
    resolution = resolve_padding(padding)

    ground = await fetch_elevation(elevation, points[0].lat, points[0].lng)
    altitude = average_altitude(points, ground)
    LOG.debug("look_at altitude for %s, %s: %s", points[0].lat, points[0].lng, ground)

    return solve_camera(extent, resolution, heading=heading, altitude=altitude)


async def look_at(
    points: Sequence[Point],
    elevation: ElevationLookup | None,
    heading: float = 0.0,
) -> CameraPose:
    """Frame ``points`` using the whole viewport."""
    extent = compute_bounding_extent(points)

    ground = await fetch_elevation(elevation, points[0].lat, points[0].lng)
    altitude = average_altitude(points, ground)

    horizontal_distance = extent.angular_distance * EARTH_RADIUS_METERS * 2
    return CameraPose(
        center=CameraCenter(lat=extent.center_lat, lng=extent.center_lng, altitude=altitude),
        range=max(slant_range(horizontal_distance), MIN_RANGE_METERS),
        tilt=TILT_DEGREES,
        heading=heading,
    )
