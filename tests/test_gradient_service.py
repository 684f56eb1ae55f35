import numpy as np
from PIL import Image

from average_color.models.color_model import Color
from average_color.services.gradient_service import GradientService


def _column(image: Image.Image) -> np.ndarray:
    return np.asarray(image)[:, 0, 0].astype(int)


def test_gradient_covers_bottom_band() -> None:
    image = Image.new("RGB", (10, 200), (255, 255, 255))
    result = GradientService().apply_gradient(image, Color(0.0, 0.0, 0.0), 100)

    column = _column(result)
    assert result.mode == "RGBA"
    assert result.size == (10, 200)
    assert (column[:101] == 255).all()
    assert column[-1] == 0
    assert (np.diff(column[100:]) <= 0).all()


def test_gradient_height_is_clamped_to_image() -> None:
    image = Image.new("RGB", (4, 50), (255, 255, 255))
    result = GradientService().apply_gradient(image, Color(0.0, 0.0, 0.0), 100)

    column = _column(result)
    assert column[0] == 255
    assert column[-1] == 0


def test_zero_height_and_clear_color_leave_image_unchanged() -> None:
    image = Image.new("RGBA", (8, 8), (10, 200, 30, 255))
    service = GradientService()

    for result in (
        service.apply_gradient(image, Color(0.0, 0.0, 0.0), 0),
        service.apply_gradient(image, Color.CLEAR, 100),
    ):
        assert result is not image
        assert np.array_equal(np.asarray(result), np.asarray(image))


def test_input_is_not_mutated() -> None:
    image = Image.new("RGBA", (6, 6), (255, 255, 255, 255))
    before = np.asarray(image).copy()
    GradientService().apply_gradient(image, Color(0.1, 0.2, 0.3), 6)
    assert np.array_equal(np.asarray(image), before)


def test_gradient_strip_alpha_ramp() -> None:
    strip = GradientService().gradient_strip(3, 5, Color.from_rgb8(10, 20, 30))
    arr = np.asarray(strip)
    assert arr.shape == (5, 3, 4)
    assert arr[0, 0].tolist() == [10, 20, 30, 0]
    assert arr[-1, 0].tolist() == [10, 20, 30, 255]


def test_gradient_strip_respects_color_alpha() -> None:
    strip = GradientService().gradient_strip(1, 2, Color(1.0, 0.0, 0.0, 0.5))
    assert np.asarray(strip)[-1, 0, 3] == 128
