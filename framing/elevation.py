"""Ground elevation lookups against an Open-Elevation compatible service."""
from __future__ import annotations

import logging
import os
from typing import Optional

import requests
from fastapi.concurrency import run_in_threadpool

from framing.errors import ElevationLookupFailure

LOG = logging.getLogger(__name__)

ELEVATION_API_URL = os.getenv("ELEVATION_API_URL", "https://api.open-elevation.com/api/v1/lookup")
ELEVATION_TIMEOUT = float(os.getenv("ELEVATION_TIMEOUT", "10"))
HEADERS = {"Accept": "application/json", "User-Agent": "globe-framing/1.0"}


class OpenElevationClient:
    """Awaitable ``(lat, lng) -> meters`` lookup backed by an HTTP elevation API.

    ``lookup`` is the blocking request; awaiting the client runs it in the thread pool.
    """

    def __init__(
        self,
        url: str = ELEVATION_API_URL,
        timeout: float = ELEVATION_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    async def __call__(self, lat: float, lng: float) -> float:
        return await run_in_threadpool(self.lookup, lat, lng)

    def lookup(self, lat: float, lng: float) -> float:
        LOG.debug("Requesting elevation for %s,%s from %s", lat, lng, self.url)
        try:
            response = self.session.get(
                self.url,
                params={"locations": f"{lat},{lng}"},
                headers=HEADERS,
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise ElevationLookupFailure(
                "Elevation request failed.", {"lat": lat, "lng": lng, "error": str(exc)}
            ) from exc
        except ValueError as exc:
            raise ElevationLookupFailure(
                "Elevation service returned invalid JSON.", {"lat": lat, "lng": lng}
            ) from exc
        return _parse_elevation(data, lat, lng)


def _parse_elevation(data: object, lat: float, lng: float) -> float:
    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list) or not results or not isinstance(results[0], dict):
        raise ElevationLookupFailure("Elevation service returned no results.", {"lat": lat, "lng": lng})
    value = results[0].get("elevation")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ElevationLookupFailure(
            "Elevation result is not a number.", {"lat": lat, "lng": lng, "elevation": value}
        ) from exc
