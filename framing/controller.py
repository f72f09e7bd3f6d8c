"""On-demand framing that hands camera animations to the globe."""
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from threading import Lock
from typing import Optional, Sequence

from framing.bounds import Point
from framing.camera import CameraCenter, CameraPose
from framing.look_at import ElevationLookup, look_at_with_padding
from framing.padding import NO_PADDING

LOG = logging.getLogger(__name__)

EXTRA_RANGE_METERS = 1000.0
FLY_DURATION_MILLIS = 5000


@dataclass(frozen=True)
class FlyToCamera:
    center: CameraCenter
    range: float
    heading: float
    tilt: float
    roll: float = 0.0
    duration_millis: int = FLY_DURATION_MILLIS


def fly_to_camera(pose: CameraPose) -> FlyToCamera:
    return FlyToCamera(
        center=pose.center,
        range=pose.range + EXTRA_RANGE_METERS,
        heading=pose.heading,
        tilt=pose.tilt,
    )


class FramingController:
    """Recompute framing on demand and drop results superseded by a newer request.

    Layout and marker observers belong to the caller; they call
    :meth:`frame_entities` whenever something that affects framing changes.
    """

    def __init__(self, elevation: ElevationLookup | None) -> None:
        self.elevation = elevation
        self._sequence = itertools.count(1)
        self._latest = 0
        self._lock = Lock()

    def _next_sequence(self) -> int:
        with self._lock:
            self._latest = next(self._sequence)
            return self._latest

    def is_current(self, sequence: int) -> bool:
        with self._lock:
            return sequence == self._latest

    async def frame_entities(
        self,
        points: Sequence[Point],
        padding: Sequence[float] | None = NO_PADDING,
        heading: float = 0.0,
    ) -> Optional[FlyToCamera]:
        if not points:
            return None

        sequence = self._next_sequence()
        pose = await look_at_with_padding(points, self.elevation, heading=heading, padding=padding)
        if not self.is_current(sequence):
            LOG.debug("Discarding stale framing result %d", sequence)
            return None
        return fly_to_camera(pose)
