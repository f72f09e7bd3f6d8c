from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from api import models
from api.services.elevation import get_elevation_lookup
from framing.errors import ElevationLookupFailure
from framing.look_at import ElevationLookup, call_elevation

LOG = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=models.ElevationOut)
async def read_elevation(
    lat: float,
    lng: float,
    elevation: ElevationLookup = Depends(get_elevation_lookup),
) -> models.ElevationOut:
    """Ground elevation in meters at lat/lng."""
    try:
        value = await call_elevation(elevation, lat, lng)
    except ElevationLookupFailure as exc:
        LOG.warning("Elevation lookup failed for %s,%s: %s", lat, lng, exc)
        raise HTTPException(status_code=502, detail="Elevation lookup failed.") from exc
    return models.ElevationOut(lat=lat, lng=lng, elevation=value)
