"""Turn UI padding fractions into a zoom-out scale and a screen-space center offset.

Padding is ordered (top, right, bottom, left). Each value is the fraction of the
matching viewport dimension covered by UI. Offsets use screen convention: +X is
right, +Y is down.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from framing.errors import InvalidPaddingError

Padding = Tuple[float, float, float, float]

NO_PADDING: Padding = (0.0, 0.0, 0.0, 0.0)
BASE_PADDING = 0.05
CONSOLE_BUFFER = 0.02
DESKTOP_PADDING: Padding = (0.05, 0.05, 0.05, 0.35)


@dataclass(frozen=True)
class PaddingResolution:
    visible_width: float
    visible_height: float
    scale: float
    offset_x: float
    offset_y: float


def normalize_padding(padding: Sequence[float] | None) -> Padding:
    if padding is None:
        return NO_PADDING
    values = tuple(float(v) for v in padding)
    if len(values) != 4:
        raise InvalidPaddingError(
            "Padding must have exactly four values (top, right, bottom, left).",
            {"padding": list(values)},
        )
    for value in values:
        if not math.isfinite(value) or value < 0 or value >= 1:
            raise InvalidPaddingError(
                "Padding values must be fractions in [0, 1).",
                {"padding": list(values)},
            )
    return values  # type: ignore[return-value]


def resolve_padding(padding: Sequence[float] | None = None) -> PaddingResolution:
    """Compute the scale factor and normalized offset of the visible viewport."""
    top, right, bottom, left = normalize_padding(padding)

    visible_width = 1 - left - right
    visible_height = 1 - top - bottom
    if visible_width <= 0 or visible_height <= 0:
        raise InvalidPaddingError(
            "Padding leaves no visible viewport.",
            {
                "padding": [top, right, bottom, left],
                "visible_width": visible_width,
                "visible_height": visible_height,
            },
        )

    return PaddingResolution(
        visible_width=visible_width,
        visible_height=visible_height,
        scale=max(1 / visible_width, 1 / visible_height),
        offset_x=(left - right) / 2,
        offset_y=(top - bottom) / 2,
    )


def responsive_padding(viewport_width: float, console_width: float = 0.0, is_mobile: bool = False) -> Padding:
    """Padding for the current layout given already measured widths in pixels.

    On desktop the console sits on the left, so the left padding grows to cover it
    plus a small buffer. On mobile the console does not overlap the map.
    """
    if viewport_width <= 0:
        raise InvalidPaddingError("Viewport width must be positive.", {"viewport_width": viewport_width})

    left = BASE_PADDING
    if not is_mobile:
        left = max(left, console_width / viewport_width + CONSOLE_BUFFER)
    return normalize_padding((BASE_PADDING, BASE_PADDING, BASE_PADDING, left))
