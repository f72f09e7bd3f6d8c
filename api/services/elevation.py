"""Elevation lookup shared by request handlers."""
from __future__ import annotations

from framing.elevation import OpenElevationClient

CLIENT = OpenElevationClient()


def get_elevation_lookup():
    return CLIENT
