"""Bounding box and angular extent of a point set."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from shapely.geometry import MultiPoint

from framing.errors import EmptyInputError


@dataclass(frozen=True)
class Point:
    """Geographic position in degrees with an optional altitude offset in meters."""

    lat: float
    lng: float
    alt: float = 0.0


@dataclass(frozen=True)
class BoundingExtent:
    center_lat: float
    center_lng: float
    angular_distance: float  # radians


def haversine(lat1, lng1, lat2, lng2):
    """Great-circle angular distance in radians. Accepts scalars or numpy arrays."""
    lat1, lng1, lat2, lng2 = (np.radians(np.asarray(v, dtype=float)) for v in (lat1, lng1, lat2, lng2))
    dlat = lat2 - lat1
    dlng = lng2 - lng1
    a = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlng / 2) ** 2
    # rounding can push a a hair above 1 for antipodal points
    a = np.clip(a, 0.0, 1.0)
    return 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def compute_bounding_extent(points: Sequence[Point]) -> BoundingExtent:
    """Return the bounding-box center and the largest angular distance from it to any point."""
    if not points:
        raise EmptyInputError("At least one point is required to compute a framing.")

    min_lng, min_lat, max_lng, max_lat = MultiPoint([(p.lng, p.lat) for p in points]).bounds
    center_lat = (min_lat + max_lat) / 2
    center_lng = (min_lng + max_lng) / 2

    lats = np.array([p.lat for p in points], dtype=float)
    lngs = np.array([p.lng for p in points], dtype=float)
    distances = haversine(center_lat, center_lng, lats, lngs)
    return BoundingExtent(
        center_lat=float(center_lat),
        center_lng=float(center_lng),
        angular_distance=float(np.max(distances)),
    )
