from __future__ import annotations

import pytest

from framing.errors import InvalidPaddingError
from framing.padding import BASE_PADDING, NO_PADDING, resolve_padding, responsive_padding


def test_zero_padding_has_unit_scale_and_no_offset() -> None:
    resolution = resolve_padding(NO_PADDING)

    assert resolution.scale == 1.0
    assert resolution.offset_x == 0.0
    assert resolution.offset_y == 0.0


def test_none_padding_means_full_viewport() -> None:
    assert resolve_padding(None) == resolve_padding(NO_PADDING)


def test_symmetric_padding_scales_without_offset() -> None:
    resolution = resolve_padding((0.1, 0.2, 0.1, 0.2))

    assert resolution.visible_width == pytest.approx(0.6)
    assert resolution.visible_height == pytest.approx(0.8)
    assert resolution.scale == pytest.approx(1 / 0.6)
    assert resolution.offset_x == pytest.approx(0.0)
    assert resolution.offset_y == pytest.approx(0.0)


def test_asymmetric_padding_offsets_toward_visible_center() -> None:
    resolution = resolve_padding((0.2, 0.0, 0.0, 0.3))

    assert resolution.offset_x == pytest.approx(0.15)
    assert resolution.offset_y == pytest.approx(0.1)
    assert resolution.scale == pytest.approx(max(1 / 0.7, 1 / 0.8))


def test_padding_covering_an_axis_raises() -> None:
    with pytest.raises(InvalidPaddingError) as excinfo:
        resolve_padding((0.0, 0.5, 0.0, 0.6))
    assert excinfo.value.context["visible_width"] == pytest.approx(-0.1)


@pytest.mark.parametrize(
    "padding",
    [
        (0.1, 0.1, 0.1),
        (0.1, 0.1, 0.1, 0.1, 0.1),
        (-0.1, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (float("nan"), 0.0, 0.0, 0.0),
    ],
)
def test_malformed_padding_raises(padding) -> None:
    with pytest.raises(InvalidPaddingError):
        resolve_padding(padding)


def test_desktop_layout_pads_left_for_console() -> None:
    padding = responsive_padding(1000, console_width=330)

    assert padding[:3] == (BASE_PADDING, BASE_PADDING, BASE_PADDING)
    assert padding[3] == pytest.approx(0.35)


def test_narrow_console_keeps_base_padding() -> None:
    assert responsive_padding(1000, console_width=10) == (0.05, 0.05, 0.05, 0.05)


def test_mobile_layout_ignores_console() -> None:
    assert responsive_padding(400, console_width=380, is_mobile=True) == (0.05, 0.05, 0.05, 0.05)


def test_viewport_width_must_be_positive() -> None:
    with pytest.raises(InvalidPaddingError):
        responsive_padding(0, console_width=100)
