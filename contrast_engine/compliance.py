"""
compliance.py
─────────────
Maps a contrast ratio onto WCAG conformance levels.

The numeric cut-offs live in an immutable ``Thresholds`` value; callers
that need different policy pass their own instance instead of mutating
module state.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Thresholds:
    """Minimum contrast ratios per WCAG level and text size."""

    aa:        float = 4.5
    aaa:       float = 7.0
    aa_large:  float = 3.0
    aaa_large: float = 4.5

    def minimum(self, standard: str, text_size: str = "normal") -> float:
        """Ratio required for *standard* (``AA`` / ``AAA``) at *text_size*."""
        level = standard.upper()
        if level not in ("AA", "AAA"):
            raise ValueError(f"Unknown contrast standard: {standard!r}")
        if text_size not in ("normal", "large"):
            raise ValueError(f"Unknown text size: {text_size!r}")

        if level == "AAA":
            return self.aaa_large if text_size == "large" else self.aaa
        return self.aa_large if text_size == "large" else self.aa


DEFAULT_THRESHOLDS = Thresholds()


@dataclass(frozen=True)
class ContrastBadge:
    """Display label for a ratio plus a CSS class hint for colouring it."""

    label:            str
    style_hint:       str
    meets_large_text: bool

    def as_dict(self) -> dict:
        return {
            "label":            self.label,
            "style_hint":       self.style_hint,
            "meets_large_text": self.meets_large_text,
        }


def contrast_badge(ratio: float, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> ContrastBadge:
    """AAA at ≥ 7, AA at ≥ 4.5, otherwise Fail (boundaries inclusive)."""
    large = ratio >= thresholds.aa_large
    if ratio >= thresholds.aaa:
        return ContrastBadge("AAA", "text-green-600", large)
    if ratio >= thresholds.aa:
        return ContrastBadge("AA", "text-yellow-600", large)
    if large:
        # Still a Fail for body text, but usable for headings
        return ContrastBadge("Fail", "text-orange-600", large)
    return ContrastBadge("Fail", "text-red-600", large)


def meets_standard(
    ratio: float,
    standard: str = "AAA",
    text_size: str = "normal",
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> bool:
    """Inclusive threshold test, e.g. ``meets_standard(4.5, "AA")`` is True."""
    return ratio >= thresholds.minimum(standard, text_size)
