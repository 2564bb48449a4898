"""
conversion.py
─────────────
HSL → RGB / hex views of a ``Color`` for display.

``colorsys.hls_to_rgb`` is the textbook ``hue2rgb(p, q, t)`` construction
(channels sampled at hue offsets +1/3, 0, −1/3 with ``t`` wrapped into
``[0, 1]``), so we lean on it rather than re-deriving the piecewise formula.
"""

from __future__ import annotations

import colorsys
from typing import Tuple

from .color_parser import Color, RGBColor


def to_rgb_floats(color: Color) -> Tuple[float, float, float]:
    """Unrounded ``(r, g, b)`` channels in ``[0, 1]``."""
    return colorsys.hls_to_rgb(
        color.hue / 360.0,
        color.lightness / 100.0,
        color.saturation / 100.0,
    )


def to_rgb(color: Color) -> RGBColor:
    """Integer ``(r, g, b)`` channels, rounded and clamped to ``[0, 255]``."""
    r, g, b = (max(0, min(255, round(c * 255))) for c in to_rgb_floats(color))
    return r, g, b


def hsl_to_hex(color: Color) -> str:
    """Lowercase ``#rrggbb``."""
    return "#{:02x}{:02x}{:02x}".format(*to_rgb(color))


def hsl_to_rgb(color: Color) -> str:
    """CSS ``rgb(r, g, b)``."""
    return "rgb({}, {}, {})".format(*to_rgb(color))
