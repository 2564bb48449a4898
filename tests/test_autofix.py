"""Unit tests for the lightness-only auto-fix search."""

import pytest

from contrast_engine.autofix import (
    adjust_lightness_for_contrast,
    fix_background_for_aaa,
    fix_text_for_aaa,
)
from contrast_engine.color_parser import Color
from contrast_engine.contrast import contrast_ratio

WHITE        = Color(0, 0, 100)
FEDERAL_BLUE = Color(249, 67, 24)

FAILING_PAIRS = [
    (FEDERAL_BLUE, Color(0, 0, 20)),
    (WHITE, Color(0, 0, 80)),
    (WHITE, Color(43, 96, 56)),
    (Color(210, 40, 60), Color(30, 70, 55)),
    (Color(0, 84, 60), Color(120, 50, 45)),
    (Color(180, 20, 35), Color(300, 60, 30)),
]


class TestFixText:
    """Test repairing the text colour against a fixed background."""

    def test_dark_grey_on_brand_blue(self):
        text  = Color(0, 0, 20)
        fixed = fix_text_for_aaa(text, FEDERAL_BLUE)

        assert fixed.hue == 0
        assert fixed.saturation == 0
        assert fixed.lightness > text.lightness
        assert contrast_ratio(FEDERAL_BLUE, fixed) >= 7.0

    def test_closest_passing_lightness(self):
        fixed = fix_text_for_aaa(Color(0, 0, 20), FEDERAL_BLUE)
        one_step_back = fixed.with_lightness(fixed.lightness - 1)

        assert contrast_ratio(FEDERAL_BLUE, one_step_back) < 7.0

    def test_light_grey_on_white_is_darkened(self):
        fixed = fix_text_for_aaa(Color(0, 0, 80), WHITE)

        assert fixed.lightness < 80
        assert contrast_ratio(WHITE, fixed) >= 7.0
        assert contrast_ratio(WHITE, fixed.with_lightness(fixed.lightness + 1)) < 7.0

    def test_passing_pair_unchanged(self):
        text = Color(0, 0, 100)

        assert fix_text_for_aaa(text, FEDERAL_BLUE) is text


class TestFixBackground:
    """Test repairing the background against fixed text."""

    def test_mid_blue_under_white_text(self):
        background = Color(210, 40, 60)
        fixed      = fix_background_for_aaa(background, WHITE)

        assert fixed.hue == 210
        assert fixed.saturation == 40
        assert fixed.lightness < 60
        assert contrast_ratio(fixed, WHITE) >= 7.0
        assert contrast_ratio(fixed.with_lightness(fixed.lightness + 1), WHITE) < 7.0

    def test_passing_pair_unchanged(self):
        assert fix_background_for_aaa(FEDERAL_BLUE, WHITE) is FEDERAL_BLUE


class TestSearchGuarantees:
    """Test properties that hold for every failing pair."""

    @pytest.mark.parametrize("anchor,target", FAILING_PAIRS)
    def test_hue_and_saturation_preserved(self, anchor, target):
        fixed = adjust_lightness_for_contrast(anchor, target)

        assert fixed.hue == target.hue
        assert fixed.saturation == target.saturation

    @pytest.mark.parametrize("anchor,target", FAILING_PAIRS)
    def test_reaches_target_or_extreme(self, anchor, target):
        fixed = adjust_lightness_for_contrast(anchor, target)

        assert contrast_ratio(anchor, fixed) >= 7.0 or fixed.lightness in (0, 100)

    @pytest.mark.parametrize("anchor,target", FAILING_PAIRS)
    def test_idempotent(self, anchor, target):
        fixed = adjust_lightness_for_contrast(anchor, target)

        if contrast_ratio(anchor, fixed) >= 7.0:
            assert adjust_lightness_for_contrast(anchor, fixed) is fixed

    def test_unreachable_returns_extreme(self):
        grey  = Color(0, 0, 50)
        fixed = adjust_lightness_for_contrast(grey, grey)

        # Black gets further from mid grey than white does
        assert fixed.lightness == 0
        assert contrast_ratio(grey, fixed) < 7.0

    def test_custom_minimum(self):
        fixed = adjust_lightness_for_contrast(WHITE, Color(0, 0, 80), minimum=4.5)

        assert 4.5 <= contrast_ratio(WHITE, fixed) < 7.0

    def test_fractional_lightness_input(self):
        fixed = fix_text_for_aaa(Color(0, 0, 20.4), FEDERAL_BLUE)

        assert fixed.lightness == int(fixed.lightness)
        assert contrast_ratio(FEDERAL_BLUE, fixed) >= 7.0
