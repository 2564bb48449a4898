"""Contrast Engine – WCAG colour contrast checks and lightness-only auto-fixes."""
from .color_parser import Color, ColorFormat, classify, parse
from .compliance import DEFAULT_THRESHOLDS, ContrastBadge, Thresholds, contrast_badge, meets_standard
from .contrast import contrast_ratio, is_light_color, optimal_text_color, relative_luminance
from .autofix import adjust_lightness_for_contrast
from .checker import (
    PairCheck,
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
from .tokens import (
    ColorToken,
    TokenEvaluation,
    audit_palette,
    evaluate_token,
    export_palette,
    find_existing_match,
)
from .utils import Settings, build_default_config, load_config

__all__ = [
    "Color",
    "ColorFormat",
    "classify",
    "parse",
    "DEFAULT_THRESHOLDS",
    "ContrastBadge",
    "Thresholds",
    "contrast_badge",
    "meets_standard",
    "contrast_ratio",
    "is_light_color",
    "optimal_text_color",
    "relative_luminance",
    "adjust_lightness_for_contrast",
    "PairCheck",
    "check_pair",
    "fix_background_for_aaa",
    "fix_text_for_aaa",
    "get_contrast_badge",
    "get_contrast_ratio",
    "hsl_to_hex",
    "hsl_to_rgb",
    "meets_contrast_standard",
    "parse_color_to_hsl",
    "ColorToken",
    "TokenEvaluation",
    "audit_palette",
    "evaluate_token",
    "export_palette",
    "find_existing_match",
    "Settings",
    "build_default_config",
    "load_config",
]
