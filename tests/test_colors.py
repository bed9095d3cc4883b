import pytest

from utils.colors import hex_to_rgb, is_color_light, get_contrast_color


def test_hex_to_rgb_accepts_short_and_long_forms():
    assert hex_to_rgb("#8B2635") == (139, 38, 53)
    assert hex_to_rgb("#fff") == (255, 255, 255)
    assert hex_to_rgb("000000") == (0, 0, 0)


@pytest.mark.parametrize("color", ["#12", "#GGGGGG", "#1234567"])
def test_hex_to_rgb_rejects_garbage(color):
    with pytest.raises(ValueError):
        hex_to_rgb(color)


@pytest.mark.parametrize("color,light", [
    ("#FFFFFF", True),
    ("#F5F5DC", True),
    ("#D4AF37", True),
    ("#8B2635", False),
    ("#1A1A1A", False),
    ("#000", False),
])
def test_is_color_light(color, light):
    assert is_color_light(color) is light


def test_contrast_color():
    assert get_contrast_color("#F5F5DC") == "#000000"
    assert get_contrast_color("#8B2635") == "#FFFFFF"
