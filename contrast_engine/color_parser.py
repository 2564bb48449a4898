"""
color_parser.py
───────────────
Turns the many textual colour spellings used across the site into one
canonical ``Color`` value.

Accepted shapes, tried in this order:

  • ``#RGB`` / ``#RRGGBB``          (case-insensitive)
  • ``rgb(r, g, b)``                (channels 0–255)
  • ``hsl(h, s%, l%)``              (commas or spaces, optional ``deg``)
  • ``H S% L%``                     (bare triple – the stored token format)

Parsing never raises: anything unrecognised yields ``None`` and the caller
decides what "no preview" looks like.
"""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Convenience type alias
RGBColor = Tuple[int, int, int]

_NUM = r"[-+]?\d+(?:\.\d+)?|[-+]?\.\d+"

_HEX_RE      = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)
_RGB_RE      = re.compile(
    rf"^rgb\(\s*({_NUM})\s*,\s*({_NUM})\s*,\s*({_NUM})\s*\)$", re.IGNORECASE
)
_HSL_RE      = re.compile(
    rf"^hsl\(\s*({_NUM})(?:deg)?\s*(?:,\s*|\s+)({_NUM})%\s*(?:,\s*|\s+)({_NUM})%\s*\)$",
    re.IGNORECASE,
)
_BARE_HSL_RE = re.compile(
    rf"^({_NUM})(?:deg)?\s+({_NUM})%\s+({_NUM})%$", re.IGNORECASE
)


# ── Canonical colour ──────────────────────────────────────────────────────────

def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Color:
    """
    HSL colour: hue in degrees ``[0, 360)``, saturation and lightness in
    percent ``[0, 100]``.

    Values are normalised on construction (hue wraps, the rest clamps), so
    arithmetic on the fields can never produce an illegal colour. Non-finite
    components raise ``ValueError``.
    """

    hue:        float
    saturation: float
    lightness:  float

    def __post_init__(self) -> None:
        parts = (self.hue, self.saturation, self.lightness)
        if not all(math.isfinite(float(v)) for v in parts):
            raise ValueError(f"Colour components must be finite, got {parts!r}")
        hue = float(self.hue) % 360.0
        # Tiny negatives wrap to exactly 360.0 in float arithmetic
        object.__setattr__(self, "hue", 0.0 if hue >= 360.0 else hue)
        object.__setattr__(self, "saturation", _clamp(float(self.saturation), 0.0, 100.0))
        object.__setattr__(self, "lightness", _clamp(float(self.lightness), 0.0, 100.0))

    def with_lightness(self, lightness: float) -> "Color":
        """Same hue and saturation, new lightness."""
        return Color(self.hue, self.saturation, lightness)

    def to_canonical(self) -> str:
        """Stored token form, e.g. ``"249 67% 24%"``."""
        return (
            f"{_format_number(round(self.hue, 2) % 360.0)} "
            f"{_format_number(self.saturation)}% "
            f"{_format_number(self.lightness)}%"
        )

    def __str__(self) -> str:
        return self.to_canonical()


def _format_number(value: float) -> str:
    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0").rstrip(".")


# ── Input classification ──────────────────────────────────────────────────────

class ColorFormat(Enum):
    """The textual shapes a colour can arrive in."""

    HEX      = "hex"
    RGB      = "rgb"
    HSL      = "hsl"
    BARE_HSL = "bare_hsl"


_PATTERNS = (
    (ColorFormat.HEX,      _HEX_RE),
    (ColorFormat.RGB,      _RGB_RE),
    (ColorFormat.HSL,      _HSL_RE),
    (ColorFormat.BARE_HSL, _BARE_HSL_RE),
)


def classify(text: object) -> Optional[Tuple[ColorFormat, re.Match]]:
    """Return the first matching format and its regex match, or ``None``."""
    if not isinstance(text, str):
        return None
    candidate = text.strip()
    for fmt, pattern in _PATTERNS:
        match = pattern.match(candidate)
        if match:
            return fmt, match
    return None


# ── Parsing ───────────────────────────────────────────────────────────────────

def rgb_to_color(r: float, g: float, b: float) -> Color:
    """Convert 0–255 RGB channels (clamped) into a ``Color``."""
    r, g, b = (_clamp(float(c), 0.0, 255.0) / 255.0 for c in (r, g, b))
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return Color(h * 360.0, s * 100.0, l * 100.0)


def hex_to_rgb(hex_str: str) -> Optional[RGBColor]:
    """``#1A2B3C`` / ``#abc`` → ``(26, 43, 60)``; ``None`` if malformed."""
    match = _HEX_RE.match(hex_str.strip()) if isinstance(hex_str, str) else None
    if not match:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def parse(text: object) -> Optional[Color]:
    """Parse any accepted colour spelling into a ``Color`` (or ``None``)."""
    resolved = classify(text)
    if resolved is None:
        return None

    fmt, match = resolved
    if fmt is ColorFormat.HEX:
        rgb = hex_to_rgb(match.group(0))
        return rgb_to_color(*rgb) if rgb else None
    values = [float(g) for g in match.groups()]
    # Overlong digit runs overflow to inf
    if not all(math.isfinite(v) for v in values):
        return None
    if fmt is ColorFormat.RGB:
        return rgb_to_color(*values)

    # Both HSL spellings carry the same three groups
    return Color(*values)
