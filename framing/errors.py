"""Errors raised while framing a set of points."""
from __future__ import annotations

from typing import Any, Dict, Optional


class FramingError(ValueError):
    """Base class for framing failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class EmptyInputError(FramingError):
    """Raised when there are no points to frame."""


class InvalidPaddingError(FramingError):
    """Raised when padding leaves no visible viewport on an axis."""


class ElevationLookupFailure(FramingError):
    """Raised by elevation clients; absorbed by the engine as elevation 0."""
