"""
autofix.py
──────────
Repairs a failing colour pair by moving one colour's lightness until the
pair reaches a contrast target (AAA by default).

Search model
────────────
  • One colour is the fixed *anchor*, the other the *target* being adjusted.
  • If the anchor is the darker of the two the target is brightened,
    otherwise it is darkened – luminance is monotonic in lightness for a
    fixed hue / saturation, so contrast only grows in that direction.
  • Candidates are whole lightness percentages between the target's current
    lightness and the extreme (0 or 100). A binary search finds the one
    closest to the original that meets the target ratio.
  • If even the extreme falls short, the extreme is returned as the best
    achievable colour.
"""

from __future__ import annotations

import math
from typing import Callable

from .color_parser import Color
from .compliance import DEFAULT_THRESHOLDS
from .contrast import contrast_ratio, relative_luminance


def _direction(anchor: Color, target: Color) -> int:
    """+1 to brighten the target, −1 to darken it."""
    lum_anchor = relative_luminance(anchor)
    lum_target = relative_luminance(target)
    if lum_anchor < lum_target:
        return 1
    if lum_anchor > lum_target:
        return -1
    # Tie: head for whichever extreme separates the pair more
    brighter = contrast_ratio(anchor, target.with_lightness(100))
    darker   = contrast_ratio(anchor, target.with_lightness(0))
    return 1 if brighter >= darker else -1


def _search_up(start: int, meets: Callable[[int], bool]) -> int:
    """Smallest lightness in ``[start, 100]`` that meets, else 100."""
    lo, hi = start, 100
    if not meets(hi):
        return hi
    while lo < hi:
        mid = (lo + hi) // 2
        if meets(mid):
            hi = mid
        else:
            lo = mid + 1
    return lo


def _search_down(start: int, meets: Callable[[int], bool]) -> int:
    """Largest lightness in ``[0, start]`` that meets, else 0."""
    lo, hi = 0, start
    if not meets(lo):
        return lo
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if meets(mid):
            lo = mid
        else:
            hi = mid - 1
    return lo


def adjust_lightness_for_contrast(
    anchor: Color,
    target: Color,
    minimum: float = DEFAULT_THRESHOLDS.aaa,
) -> Color:
    """
    Return *target* with only its lightness changed so that its contrast
    against *anchor* is at least *minimum*.

    A pair that already passes comes back untouched (the same object).
    """
    if contrast_ratio(anchor, target) >= minimum:
        return target

    def meets(lightness: int) -> bool:
        return contrast_ratio(anchor, target.with_lightness(lightness)) >= minimum

    if _direction(anchor, target) > 0:
        lightness = _search_up(min(100, math.ceil(target.lightness)), meets)
    else:
        lightness = _search_down(max(0, math.floor(target.lightness)), meets)
    return target.with_lightness(lightness)


def fix_background_for_aaa(background: Color, text: Color,
                           minimum: float = DEFAULT_THRESHOLDS.aaa) -> Color:
    """Keep the text colour, move the background's lightness."""
    return adjust_lightness_for_contrast(anchor=text, target=background, minimum=minimum)


def fix_text_for_aaa(text: Color, background: Color,
                     minimum: float = DEFAULT_THRESHOLDS.aaa) -> Color:
    """Keep the background, move the text colour's lightness."""
    return adjust_lightness_for_contrast(anchor=background, target=text, minimum=minimum)
