from typing import List, Optional

from pydantic import BaseModel, Field

from framing.bounds import Point
from framing.controller import FlyToCamera
from framing.camera import CameraPose


class PointIn(BaseModel):
    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lng: float = Field(..., ge=-180, le=180, description="Longitude in degrees")
    alt: float = Field(default=0.0, description="Altitude offset in meters")

    def to_point(self) -> Point:
        return Point(lat=self.lat, lng=self.lng, alt=self.alt)


class FramingRequest(BaseModel):
    points: List[PointIn] = Field(..., description="Points to frame (at least one)")
    heading: float = Field(default=0.0, description="Camera heading in degrees, clockwise from north")
    padding: List[float] = Field(
        default_factory=lambda: [0.0, 0.0, 0.0, 0.0],
        min_length=4,
        max_length=4,
        description="Occluded viewport fractions [top, right, bottom, left]",
    )


class CameraCenterOut(BaseModel):
    lat: float
    lng: float
    altitude: float


class CameraPoseOut(BaseModel):
    center: CameraCenterOut
    range: float
    tilt: float
    heading: float

    @classmethod
    def from_pose(cls, pose: CameraPose) -> "CameraPoseOut":
        return cls(
            center=CameraCenterOut(lat=pose.center.lat, lng=pose.center.lng, altitude=pose.center.altitude),
            range=pose.range,
            tilt=pose.tilt,
            heading=pose.heading,
        )


class FlyToOut(CameraPoseOut):
    roll: float = 0.0
    duration_millis: int

    @classmethod
    def from_camera(cls, camera: FlyToCamera) -> "FlyToOut":
        return cls(
            center=CameraCenterOut(lat=camera.center.lat, lng=camera.center.lng, altitude=camera.center.altitude),
            range=camera.range,
            tilt=camera.tilt,
            heading=camera.heading,
            roll=camera.roll,
            duration_millis=camera.duration_millis,
        )


class PaddingOut(BaseModel):
    padding: List[float]
    mobile: bool


class ElevationOut(BaseModel):
    lat: float
    lng: float
    elevation: Optional[float] = None
