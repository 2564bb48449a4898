"""
checker.py
──────────
String-in / string-out surface used by the CMS screens, the CLI and the
HTTP handler.

Each function parses its inputs once and then works on ``Color`` values.
Unparseable strings never raise; they fall back to a neutral result that
the caller can render as "no preview".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from . import autofix, conversion
from .color_parser import Color, parse
from .compliance import DEFAULT_THRESHOLDS, ContrastBadge, Thresholds, contrast_badge, meets_standard
from .contrast import contrast_ratio

NO_CONTRAST = 1.0


# ── Parsing / conversion ──────────────────────────────────────────────────────

def parse_color_to_hsl(value: str) -> Optional[str]:
    """Any accepted spelling → canonical ``"H S% L%"``, or ``None``."""
    color = parse(value)
    return color.to_canonical() if color else None


def hsl_to_hex(value: str) -> str:
    color = parse(value)
    return conversion.hsl_to_hex(color) if color else ""


def hsl_to_rgb(value: str) -> str:
    color = parse(value)
    return conversion.hsl_to_rgb(color) if color else ""


# ── Contrast & compliance ─────────────────────────────────────────────────────

def get_contrast_ratio(color_a: str, color_b: str) -> float:
    """WCAG ratio of two colour strings; ``1.0`` if either is unparseable."""
    a, b = parse(color_a), parse(color_b)
    if a is None or b is None:
        return NO_CONTRAST
    return contrast_ratio(a, b)


def get_contrast_badge(ratio: float) -> Dict[str, Any]:
    return contrast_badge(ratio).as_dict()


def meets_contrast_standard(ratio: float, standard: str = "AAA",
                            text_size: str = "normal") -> bool:
    return meets_standard(ratio, standard, text_size)


# ── Auto-fix ──────────────────────────────────────────────────────────────────

def fix_background_for_aaa(background: str, text: str) -> str:
    """Canonical triple of the repaired background (input echoed if unparseable)."""
    bg, fg = parse(background), parse(text)
    if bg is None or fg is None:
        return background
    return autofix.fix_background_for_aaa(bg, fg).to_canonical()


def fix_text_for_aaa(text: str, background: str) -> str:
    """Canonical triple of the repaired text colour (input echoed if unparseable)."""
    fg, bg = parse(text), parse(background)
    if fg is None or bg is None:
        return text
    return autofix.fix_text_for_aaa(fg, bg).to_canonical()


# ── Structured pair check ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class PairCheck:
    """Everything the contrast checker panel shows for one colour pair."""

    background: Color
    text:       Color
    ratio:      float
    badge:      ContrastBadge
    meets_aa:   bool
    meets_aaa:  bool
    meets_aa_large: bool

    def as_dict(self) -> Dict[str, Any]:
        return {
            "background": _views(self.background),
            "text":       _views(self.text),
            "ratio":      round(self.ratio, 2),
            "badge":      self.badge.as_dict(),
            "meets": {
                "AA":       self.meets_aa,
                "AAA":      self.meets_aaa,
                "AA_large": self.meets_aa_large,
            },
        }


def _views(color: Color) -> Dict[str, str]:
    return {
        "hsl": color.to_canonical(),
        "hex": conversion.hsl_to_hex(color),
        "rgb": conversion.hsl_to_rgb(color),
    }


def check_pair(background: str, text: str,
               thresholds: Thresholds = DEFAULT_THRESHOLDS) -> Optional[PairCheck]:
    """Full evaluation of a background / text pair, or ``None`` if unparseable."""
    bg, fg = parse(background), parse(text)
    if bg is None or fg is None:
        return None

    ratio = contrast_ratio(bg, fg)
    return PairCheck(
        background=bg,
        text=fg,
        ratio=ratio,
        badge=contrast_badge(ratio, thresholds),
        meets_aa=meets_standard(ratio, "AA", thresholds=thresholds),
        meets_aaa=meets_standard(ratio, "AAA", thresholds=thresholds),
        meets_aa_large=meets_standard(ratio, "AA", "large", thresholds=thresholds),
    )
