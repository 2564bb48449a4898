"""Unit tests for the string-level checker functions."""

import pytest

from contrast_engine.checker import (
    check_pair,
    fix_background_for_aaa,
    fix_text_for_aaa,
    get_contrast_badge,
    get_contrast_ratio,
    hsl_to_hex,
    hsl_to_rgb,
    meets_contrast_standard,
    parse_color_to_hsl,
)
from contrast_engine.color_parser import parse

FEDERAL_BLUE = "249 67% 24%"


class TestParseColorToHsl:
    """Test normalising input strings to the canonical triple."""

    @pytest.mark.parametrize("value,expected", [
        ("#ffffff", "0 0% 100%"),
        ("#000", "0 0% 0%"),
        ("rgb(255, 0, 0)", "0 100% 50%"),
        ("hsl(249, 67%, 24%)", FEDERAL_BLUE),
        ("  249 67% 24% ", FEDERAL_BLUE),
    ])
    def test_accepted(self, value, expected):
        assert parse_color_to_hsl(value) == expected

    def test_unparseable(self):
        assert parse_color_to_hsl("not a colour") is None

    @pytest.mark.parametrize("value", [
        "0 0% 0%",
        "249 67% 24%",
        "43 96% 56%",
        "210.5 40.25% 96.1%",
    ])
    def test_round_trip(self, value):
        assert parse_color_to_hsl(parse_color_to_hsl(value)) == value


class TestConversions:
    """Test hex and rgb output from strings."""

    def test_hex(self):
        assert hsl_to_hex("0 0% 100%") == "#ffffff"
        assert hsl_to_hex("0 0% 0%") == "#000000"
        assert hsl_to_hex(FEDERAL_BLUE) == "#201466"

    def test_rgb(self):
        assert hsl_to_rgb("0 0% 100%") == "rgb(255, 255, 255)"

    def test_unparseable_gives_empty_string(self):
        assert hsl_to_hex("nope") == ""
        assert hsl_to_rgb("nope") == ""


class TestContrastFunctions:
    """Test ratio, badge and standard helpers."""

    def test_black_on_white(self):
        assert get_contrast_ratio("#000", "#fff") == pytest.approx(21.0)

    def test_mixed_formats(self):
        assert get_contrast_ratio("#201466", FEDERAL_BLUE) == pytest.approx(1.0, abs=0.02)

    def test_symmetric(self):
        assert get_contrast_ratio(FEDERAL_BLUE, "0 0% 20%") == get_contrast_ratio("0 0% 20%", FEDERAL_BLUE)

    def test_unparseable_is_neutral(self):
        assert get_contrast_ratio("garbage", "#fff") == 1.0

    def test_badges(self):
        assert get_contrast_badge(7.0)["label"] == "AAA"
        assert get_contrast_badge(6.99)["label"] == "AA"
        assert get_contrast_badge(4.4)["label"] == "Fail"

    def test_meets_standard(self):
        assert meets_contrast_standard(4.5, "AA") is True
        assert meets_contrast_standard(4.499, "AA") is False
        assert meets_contrast_standard(7.0, "AAA") is True
        assert meets_contrast_standard(3.0, "AA", "large") is True


class TestFixFunctions:
    """Test the string auto-fix helpers."""

    def test_fix_text(self):
        fixed = fix_text_for_aaa("0 0% 20%", FEDERAL_BLUE)
        color = parse(fixed)

        assert color.hue == 0
        assert color.saturation == 0
        assert color.lightness != 20
        assert get_contrast_ratio(FEDERAL_BLUE, fixed) >= 7.0

    def test_fix_text_already_compliant(self):
        assert fix_text_for_aaa("0 0% 100%", FEDERAL_BLUE) == "0 0% 100%"

    def test_fix_background(self):
        fixed = fix_background_for_aaa("210 40% 60%", "0 0% 100%")
        color = parse(fixed)

        assert (color.hue, color.saturation) == (210, 40)
        assert get_contrast_ratio(fixed, "0 0% 100%") >= 7.0

    def test_fix_accepts_hex_input(self):
        assert parse(fix_text_for_aaa("#333333", "#201466")).lightness > 20

    def test_unparseable_input_echoed(self):
        assert fix_text_for_aaa("nope", FEDERAL_BLUE) == "nope"
        assert fix_background_for_aaa(FEDERAL_BLUE, "nope") == FEDERAL_BLUE

    def test_overflowing_hue_is_unparseable(self):
        huge = "9" * 400 + " 50% 50%"

        assert parse_color_to_hsl(huge) is None
        assert fix_text_for_aaa(huge, "0 0% 100%") == huge
        assert fix_background_for_aaa(huge, "0 0% 100%") == huge
        assert get_contrast_ratio(huge, "0 0% 100%") == 1.0
        assert hsl_to_hex(huge) == ""


class TestCheckPair:
    """Test the structured pair result."""

    def test_white_on_brand_blue(self):
        check = check_pair(FEDERAL_BLUE, "#ffffff")

        assert check.badge.label == "AAA"
        assert check.meets_aa and check.meets_aaa and check.meets_aa_large

    def test_as_dict(self):
        data = check_pair(FEDERAL_BLUE, "0 0% 20%").as_dict()

        assert data["background"]["hex"] == "#201466"
        assert data["text"]["rgb"] == "rgb(51, 51, 51)"
        assert data["badge"]["label"] == "Fail"
        assert data["meets"] == {"AA": False, "AAA": False, "AA_large": False}

    def test_unparseable(self):
        assert check_pair("nope", "#fff") is None
