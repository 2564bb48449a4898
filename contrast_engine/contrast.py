"""
contrast.py
───────────
WCAG 2 relative luminance and contrast ratio.

Every higher-level decision (badges, auto-fix, palette audits) is built on
``contrast_ratio``; nothing else in the package computes luminance.
"""

from __future__ import annotations

from .color_parser import Color
from .compliance import DEFAULT_THRESHOLDS, Thresholds
from .conversion import to_rgb_floats

LIGHT_SWATCH_THRESHOLD = 70.0   # lightness (%) above which a swatch needs a dark backdrop


def _linearise(c: float) -> float:
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    """
    WCAG 2.1 relative luminance (0 = absolute black, 1 = absolute white).

    Computed from the unrounded RGB channels so that lightness changes of a
    fraction of a percent still register.
    """
    r, g, b = (_linearise(c) for c in to_rgb_floats(color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(a: Color, b: Color) -> float:
    """``(L_lighter + 0.05) / (L_darker + 0.05)`` – always between 1 and 21."""
    lum_a = relative_luminance(a)
    lum_b = relative_luminance(b)
    lighter, darker = max(lum_a, lum_b), min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def is_light_color(color: Color, threshold: float = LIGHT_SWATCH_THRESHOLD) -> bool:
    """True when a swatch of *color* would vanish on a white page."""
    return color.lightness > threshold


def optimal_text_color(
    background: Color,
    light: Color,
    dark: Color,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> str:
    """
    Pick ``"light"`` or ``"dark"`` text for *background*.

    Light text wins whenever it reaches AAA; otherwise dark text is used
    even if it falls short too, matching how the site styles its cards.
    """
    if contrast_ratio(background, light) >= thresholds.aaa:
        return "light"
    return "dark"
