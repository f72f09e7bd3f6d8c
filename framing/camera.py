"""Solve the camera pose that frames a bounding extent inside the visible viewport."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from framing.bounds import BoundingExtent
from framing.padding import PaddingResolution

LOG = logging.getLogger(__name__)

EARTH_RADIUS_METERS = 6_371_000.0
METERS_PER_DEGREE = 111_000.0
TILT_DEGREES = 60.0
# a single point (or coincident points) has zero extent
MIN_RANGE_METERS = 500.0
_POLE_EPSILON = 1e-12


@dataclass(frozen=True)
class CameraCenter:
    lat: float
    lng: float
    altitude: float


@dataclass(frozen=True)
class CameraPose:
    center: CameraCenter
    range: float
    tilt: float
    heading: float


def rotate_screen_shift(x: float, y: float, heading: float) -> tuple[float, float]:
    """Rotate a shift given in the heading-0 frame (x east, y north) by ``heading`` degrees."""
    heading_rad = math.radians(heading)
    cos_h = math.cos(heading_rad)
    sin_h = math.sin(heading_rad)
    east = x * cos_h - y * sin_h
    north = x * sin_h + y * cos_h
    return east, north


def meters_to_degrees(east: float, north: float, at_lat: float) -> tuple[float, float]:
    """Convert east/north meters to (lat, lng) degree deltas near ``at_lat``."""
    shift_lat = north / METERS_PER_DEGREE
    cos_lat = math.cos(math.radians(at_lat))
    if abs(cos_lat) < _POLE_EPSILON:
        return shift_lat, 0.0
    return shift_lat, east / (METERS_PER_DEGREE * cos_lat)


def slant_range(horizontal_distance: float, tilt: float = TILT_DEGREES) -> float:
    vertical_distance = horizontal_distance / math.tan(math.radians(tilt))
    return math.sqrt(horizontal_distance**2 + vertical_distance**2)


def solve_camera(
    extent: BoundingExtent,
    resolution: PaddingResolution,
    heading: float = 0.0,
    altitude: float = 0.0,
) -> CameraPose:
    max_distance = extent.angular_distance * EARTH_RADIUS_METERS
    content_horizontal = max_distance * 2
    full_horizontal = content_horizontal * resolution.scale

    offset_geo_x = resolution.offset_x * full_horizontal
    offset_geo_y = resolution.offset_y * full_horizontal

    # content moves right -> camera moves west; content moves down -> camera moves north
    east, north = rotate_screen_shift(-offset_geo_x, offset_geo_y, heading)
    shift_lat, shift_lng = meters_to_degrees(east, north, extent.center_lat)

    camera_range = max(slant_range(full_horizontal), MIN_RANGE_METERS)
    pose = CameraPose(
        center=CameraCenter(
            lat=extent.center_lat + shift_lat,
            lng=extent.center_lng + shift_lng,
            altitude=altitude,
        ),
        range=camera_range,
        tilt=TILT_DEGREES,
        heading=heading,
    )
    LOG.debug(
        "Solved camera: scale=%.3f full_horizontal=%.1fm shift=(%.1fm E, %.1fm N) range=%.1fm",
        resolution.scale,
        full_horizontal,
        east,
        north,
        camera_range,
    )
    return pose
