from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from api import models
from api.services.elevation import get_elevation_lookup
from framing.controller import fly_to_camera
from framing.errors import FramingError
from framing.look_at import ElevationLookup, look_at_with_padding
from framing.padding import responsive_padding

LOG = logging.getLogger(__name__)
router = APIRouter()


async def _compute_pose(payload: models.FramingRequest, elevation: ElevationLookup):
    points = [p.to_point() for p in payload.points]
    try:
        return await look_at_with_padding(points, elevation, heading=payload.heading, padding=payload.padding)
    except FramingError as exc:
        LOG.info("Rejected framing request: %s %s", exc, exc.context)
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.post("/look-at", response_model=models.CameraPoseOut)
async def look_at(
    payload: models.FramingRequest,
    elevation: ElevationLookup = Depends(get_elevation_lookup),
) -> models.CameraPoseOut:
    """Camera pose that frames the points in the part of the viewport not covered by padding."""
    pose = await _compute_pose(payload, elevation)
    return models.CameraPoseOut.from_pose(pose)


@router.post("/fly-to", response_model=models.FlyToOut)
async def fly_to(
    payload: models.FramingRequest,
    elevation: ElevationLookup = Depends(get_elevation_lookup),
) -> models.FlyToOut:
    """Camera animation request for framing the points."""
    pose = await _compute_pose(payload, elevation)
    return models.FlyToOut.from_camera(fly_to_camera(pose))


@router.get("/padding", response_model=models.PaddingOut)
async def padding_for_layout(
    viewport_width: float,
    console_width: float = 0.0,
    mobile: bool = False,
) -> models.PaddingOut:
    try:
        padding = responsive_padding(viewport_width, console_width, is_mobile=mobile)
    except FramingError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return models.PaddingOut(padding=list(padding), mobile=mobile)
