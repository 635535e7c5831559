import pytest

from tuikit.style import (
    BLACK_COLOR,
    BRIGHT_WHITE_COLOR,
    DEFAULT_COLOR,
    HSL,
    RED_COLOR,
    RGB,
    ColorIndex,
    DefaultColor,
    Stroke,
    TrueColor,
    hsl_to_rgb,
    rgb_to_hsl,
)


def test_palette_indices():
    assert BLACK_COLOR == ColorIndex(0)
    assert RED_COLOR == ColorIndex(1)
    assert BRIGHT_WHITE_COLOR == ColorIndex(15)


def test_default_colors_are_equal():
    assert DefaultColor() == DEFAULT_COLOR


def test_rgb_from_hex_documented_example():
    rgb = RGB.from_hex(0x7F9860)
    assert (rgb.red, rgb.green, rgb.blue) == (0x7F, 0x98, 0x60)


def test_rgb_channels_truncate_to_eight_bits():
    assert RGB(0x1FF, 0, 0).red == 0xFF


@pytest.mark.parametrize(
    "hex_value",
    [0xFF0000, 0x00FF00, 0x0000FF, 0xFFFF00, 0x00FFFF, 0xFF00FF, 0xFFFFFF, 0x000000],
)
def test_primary_colors_round_trip(hex_value):
    rgb = RGB.from_hex(hex_value)
    assert hsl_to_rgb(rgb_to_hsl(rgb)) == rgb


def test_hue_out_of_range_is_black():
    assert hsl_to_rgb(HSL(360, 100, 50)) == RGB(0, 0, 0)


@pytest.mark.parametrize("hue", [0, 45, 130, 200, 290, 359])
def test_zero_saturation_is_grey(hue):
    rgb = hsl_to_rgb(HSL(hue, 0, 40))
    assert rgb.red == rgb.green == rgb.blue


def test_pure_red_to_hsl():
    hsl = rgb_to_hsl(RGB.from_hex(0xFF0000))
    assert (hsl.hue, hsl.saturation, hsl.lightness) == (0, 100, 50)


def test_magenta_hue_stays_in_range():
    hsl = rgb_to_hsl(RGB.from_hex(0xFF00FF))
    assert 0 <= hsl.hue < 360


def test_true_color_packs_channels():
    color = TrueColor.from_rgb(RGB(1, 2, 3))
    assert color.value & 0xFF == color.red
    assert (color.value >> 8) & 0xFF == color.green
    assert (color.value >> 16) & 0xFF == color.blue
    assert color.to_rgb() == RGB(1, 2, 3)


def test_true_color_from_hsl_matches_conversion():
    hsl = rgb_to_hsl(RGB.from_hex(0x00FF00))
    assert TrueColor.from_hsl(hsl) == TrueColor.from_rgb(RGB.from_hex(0x00FF00))


def test_stroke_members():
    members = [Stroke(s.value) for s in Stroke]
    assert [s.name for s in members] == ["LIGHT", "HEAVY", "DOUBLE", "DASHED", "BOLD"]