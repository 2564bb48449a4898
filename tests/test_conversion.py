"""Unit tests for HSL → RGB / hex conversion."""

import pytest

from contrast_engine.color_parser import Color
from contrast_engine.conversion import hsl_to_hex, hsl_to_rgb, to_rgb


class TestHex:
    """Test #rrggbb output."""

    def test_white_and_black(self):
        assert hsl_to_hex(Color(0, 0, 100)) == "#ffffff"
        assert hsl_to_hex(Color(0, 0, 0)) == "#000000"

    @pytest.mark.parametrize("color,expected", [
        (Color(0, 100, 50), "#ff0000"),
        (Color(120, 100, 50), "#00ff00"),
        (Color(240, 100, 50), "#0000ff"),
        (Color(249, 67, 24), "#201466"),
    ])
    def test_known_colours(self, color, expected):
        assert hsl_to_hex(color) == expected

    def test_always_lowercase_seven_chars(self):
        for hue in range(0, 360, 15):
            for lightness in (5, 35, 65, 95):
                value = hsl_to_hex(Color(hue, 80, lightness))

                assert len(value) == 7
                assert value.startswith("#")
                assert value == value.lower()


class TestRgb:
    """Test rgb(r, g, b) output."""

    def test_white(self):
        assert hsl_to_rgb(Color(0, 0, 100)) == "rgb(255, 255, 255)"

    def test_brand_blue(self):
        assert hsl_to_rgb(Color(249, 67, 24)) == "rgb(32, 20, 102)"

    def test_channels_in_range(self):
        for hue in range(0, 360, 30):
            for saturation in (0, 50, 100):
                for lightness in (0, 25, 50, 75, 100):
                    assert all(0 <= c <= 255 for c in to_rgb(Color(hue, saturation, lightness)))

    def test_grey_has_equal_channels(self):
        r, g, b = to_rgb(Color(200, 0, 40))

        assert r == g == b == 102
