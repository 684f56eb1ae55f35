import math

import pytest

from average_color.models.color_model import ARGB32_LITTLE, Color, PixelLayout, Side


def test_crop_rect_fractions() -> None:
    assert Side.TOP.crop_rect(100, 80) == (0.0, 0.0, 100.0, 20.0)
    assert Side.BOTTOM.crop_rect(100, 80) == (0.0, 60.0, 100.0, 80.0)
    assert Side.LEFT.crop_rect(100, 80) == (0.0, 0.0, 25.0, 80.0)
    assert Side.RIGHT.crop_rect(100, 80) == (75.0, 0.0, 100.0, 80.0)


@pytest.mark.parametrize("width", [1, 2, 3, 4, 5, 7, 10, 99, 640])
@pytest.mark.parametrize("height", [1, 2, 3, 9, 480])
def test_crop_box_stays_inside_image(width, height) -> None:
    for side in Side:
        left, top, right, bottom = side.crop_box(width, height)
        assert 0 <= left < right <= width
        assert 0 <= top < bottom <= height


@pytest.mark.parametrize("width", [1, 2, 3, 4, 5, 7, 10, 99, 640])
def test_left_box_covers_first_quarter_columns(width) -> None:
    height = 13
    left, top, right, bottom = Side.LEFT.crop_box(width, height)
    assert (left, top, bottom) == (0, 0, height)
    assert all(x < 0.25 * width for x in range(left, right))
    if right < width:
        assert not right < 0.25 * width


@pytest.mark.parametrize("width", [1, 2, 3, 4, 5, 7, 10, 99, 640])
def test_right_box_starts_at_last_quarter(width) -> None:
    left, top, right, bottom = Side.RIGHT.crop_box(width, 5)
    assert left == math.floor(0.75 * width)
    assert (top, right, bottom) == (0, width, 5)


def test_top_and_bottom_boxes_are_symmetric() -> None:
    assert Side.TOP.crop_box(50, 40) == (0, 0, 50, 10)
    assert Side.BOTTOM.crop_box(50, 40) == (0, 30, 50, 40)


def test_crop_box_of_empty_image_is_empty() -> None:
    left, top, right, bottom = Side.TOP.crop_box(0, 0)
    assert right - left == 0 and bottom - top == 0


def test_side_from_string() -> None:
    assert Side("bottom") is Side.BOTTOM


def test_color_conversions() -> None:
    color = Color.from_rgb8(26, 43, 60)
    assert color.to_rgb8() == (26, 43, 60)
    assert color.to_rgba8() == (26, 43, 60, 255)
    assert color.to_hex() == "#1A2B3C"
    assert color.alpha == 1.0


def test_color_channels_are_clamped() -> None:
    color = Color(1.5, -0.2, 0.5, 2.0)
    assert (color.red, color.green, color.blue, color.alpha) == (1.0, 0.0, 0.5, 1.0)


def test_clear_is_transparent() -> None:
    assert Color.CLEAR.alpha == 0.0
    assert Color.CLEAR.with_alpha(1.0) == Color(0.0, 0.0, 0.0, 1.0)


def test_argb32_little_memory_order() -> None:
    # bytes in memory: blue, green, red, alpha
    assert ARGB32_LITTLE.memory_order() == (2, 1, 0, 3)
    assert ARGB32_LITTLE.dtype == "<u4"


def test_big_endian_layout_reverses_memory_order() -> None:
    layout = PixelLayout(byte_order=">", red_shift=16, green_shift=8, blue_shift=0, alpha_shift=24)
    assert layout.memory_order() == (3, 0, 1, 2)
