"""
tokens.py
─────────
Audits design-system colour tokens against the site's light and dark text
colours, proposes lightness-only fixes for the ones that fall short and
exports the whole palette as structured data.

Tokens are plain values handed in by the caller – loading and saving them
is somebody else's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from .autofix import fix_background_for_aaa, fix_text_for_aaa
from .color_parser import Color, parse
from .compliance import DEFAULT_THRESHOLDS, ContrastBadge, contrast_badge
from .contrast import contrast_ratio, optimal_text_color
from .conversion import hsl_to_hex, hsl_to_rgb

if TYPE_CHECKING:
    from .utils import Settings

logger = logging.getLogger(__name__)

CATEGORIES = ("surfaces", "interactive", "feedback", "text")
COMPANIONS = (None, "light", "dark")

MATCH_TOLERANCE = 5.0   # lightness points within which an existing token is "the same"
EXPORT_VERSION  = "1.0"


@dataclass(frozen=True)
class ColorToken:
    """A named colour from the design system."""

    label:     str
    value:     str
    css_var:   str           = ""
    category:  str           = "surfaces"
    companion: Optional[str] = None      # text colour this surface is meant to carry
    active:    bool          = True

    @property
    def is_text(self) -> bool:
        return self.category == "text"


@dataclass(frozen=True)
class TokenEvaluation:
    token:            ColorToken
    color:            Optional[Color]
    light_ratio:      Optional[float] = None
    dark_ratio:       Optional[float] = None
    passes:           bool            = False
    fixed_light_text: Optional[Color] = None
    fixed_dark_text:  Optional[Color] = None
    recommendation:   str             = "none"
    # Active text tokens already close to each fix, filled in by audit_palette
    existing_light:   Optional[ColorToken] = None
    existing_dark:    Optional[ColorToken] = None

    @property
    def recommended_fix(self) -> Optional[Color]:
        if self.recommendation == "light":
            return self.fixed_light_text
        if self.recommendation == "dark":
            return self.fixed_dark_text
        return None

    @property
    def existing_match(self) -> Optional[ColorToken]:
        """Existing text token that could stand in for the recommended fix."""
        if self.recommendation == "light":
            return self.existing_light
        if self.recommendation == "dark":
            return self.existing_dark
        return None

    def badge(self, which: str) -> Optional[ContrastBadge]:
        ratio = self.light_ratio if which == "light" else self.dark_ratio
        return contrast_badge(ratio) if ratio is not None else None

    def as_dict(self) -> Dict[str, Any]:
        def _fmt(color: Optional[Color], existing: Optional[ColorToken]) -> Optional[Dict[str, Any]]:
            if color is None:
                return None
            return {
                "hsl":      color.to_canonical(),
                "hex":      hsl_to_hex(color),
                "existing": None if existing is None else {
                    "label": existing.label, "css_var": existing.css_var,
                },
            }

        return {
            "label":          self.token.label,
            "css_var":        self.token.css_var,
            "category":       self.token.category,
            "value":          self.token.value,
            "light_ratio":    None if self.light_ratio is None else round(self.light_ratio, 2),
            "dark_ratio":     None if self.dark_ratio is None else round(self.dark_ratio, 2),
            "passes":         self.passes,
            "recommendation": self.recommendation,
            "fixes": {
                "light_text": _fmt(self.fixed_light_text, self.existing_light),
                "dark_text":  _fmt(self.fixed_dark_text, self.existing_dark),
            },
        }


# ── Evaluation ────────────────────────────────────────────────────────────────

def _shift(original: Color, fixed: Color) -> float:
    return abs(fixed.lightness - original.lightness)


def _pick_fix(color: Color, light: Color, dark: Color,
              fixed_light: Color, fixed_dark: Color, minimum: float) -> str:
    """Prefer a fix that actually reaches *minimum*, then the smaller change."""
    options = [
        ("light", fixed_light, contrast_ratio(fixed_light, light)),
        ("dark",  fixed_dark,  contrast_ratio(fixed_dark, dark)),
    ]
    reaching = [opt for opt in options if opt[2] >= minimum]
    if reaching:
        return min(reaching, key=lambda opt: _shift(color, opt[1]))[0]
    return max(options, key=lambda opt: opt[2])[0]


def evaluate_token(
    token: ColorToken,
    light: Color,
    dark: Color,
    minimum: float = DEFAULT_THRESHOLDS.aaa,
) -> TokenEvaluation:
    """
    Check *token* against the text colours and compute fixes if it fails.

    Surfaces are measured against both text colours and repaired by moving
    the surface; text tokens are measured against the light page
    background and repaired by moving the text.
    """
    color = parse(token.value)
    if color is None:
        logger.warning("Token %r has an unparseable value: %r", token.label, token.value)
        return TokenEvaluation(token=token, color=None, recommendation="unparseable")

    if token.is_text:
        ratio = contrast_ratio(color, light)
        if ratio >= minimum:
            return TokenEvaluation(token=token, color=color, light_ratio=ratio, passes=True)
        fixed = fix_text_for_aaa(color, light, minimum)
        logger.debug("Text token %r fails at %.2f:1, fixed to %s", token.label, ratio, fixed)
        return TokenEvaluation(
            token=token, color=color, light_ratio=ratio,
            fixed_dark_text=fixed, recommendation="dark",
        )

    light_ratio = contrast_ratio(color, light)
    dark_ratio  = contrast_ratio(color, dark)
    if token.companion == "light":
        passes = light_ratio >= minimum
    elif token.companion == "dark":
        passes = dark_ratio >= minimum
    else:
        passes = max(light_ratio, dark_ratio) >= minimum

    if passes:
        return TokenEvaluation(
            token=token, color=color,
            light_ratio=light_ratio, dark_ratio=dark_ratio, passes=True,
        )

    fixed_light = fix_background_for_aaa(color, light, minimum)
    fixed_dark  = fix_background_for_aaa(color, dark, minimum)
    recommendation = token.companion or _pick_fix(
        color, light, dark, fixed_light, fixed_dark, minimum
    )
    logger.debug(
        "Surface token %r fails (light %.2f:1, dark %.2f:1), recommending %s text",
        token.label, light_ratio, dark_ratio, recommendation,
    )
    return TokenEvaluation(
        token=token, color=color,
        light_ratio=light_ratio, dark_ratio=dark_ratio,
        fixed_light_text=fixed_light, fixed_dark_text=fixed_dark,
        recommendation=recommendation,
    )


def _with_existing_matches(ev: TokenEvaluation, tokens: List[ColorToken]) -> TokenEvaluation:
    if ev.fixed_light_text is None and ev.fixed_dark_text is None:
        return ev
    others = [tok for tok in tokens if tok is not ev.token]
    return replace(
        ev,
        existing_light=None if ev.fixed_light_text is None
        else find_existing_match(ev.fixed_light_text, others),
        existing_dark=None if ev.fixed_dark_text is None
        else find_existing_match(ev.fixed_dark_text, others),
    )


def audit_palette(tokens: Iterable[ColorToken], settings: "Settings") -> List[TokenEvaluation]:
    """
    Evaluate every token with the text colours and standard in *settings*.

    Each proposed fix is also matched against the palette's active text
    tokens, so an existing colour can be reused instead of adding a new one.
    """
    tokens  = list(tokens)
    results = [
        _with_existing_matches(
            evaluate_token(tok, settings.light, settings.dark, settings.minimum), tokens,
        )
        for tok in tokens
    ]
    failing = sum(1 for r in results if not r.passes)
    logger.info("Audited %d tokens, %d need attention", len(results), failing)
    return results


def find_existing_match(
    value: Color,
    tokens: Iterable[ColorToken],
    tolerance: float = MATCH_TOLERANCE,
) -> Optional[ColorToken]:
    """First active text token whose lightness is within *tolerance* of *value*."""
    for tok in tokens:
        if not tok.active or not tok.is_text:
            continue
        color = parse(tok.value)
        if color is not None and abs(color.lightness - value.lightness) < tolerance:
            return tok
    return None


# ── Export ────────────────────────────────────────────────────────────────────

def _export_entry(ev: TokenEvaluation, settings: "Settings") -> Dict[str, Any]:
    entry: Dict[str, Any] = {
        "label":              ev.token.label,
        "css_var":            ev.token.css_var,
        "category":           ev.token.category,
        "value":              ev.token.value,
        "hsl":                "",
        "hex":                "",
        "rgb":                "",
        "optimal_text_color": None,
        "contrast_ratio":     None,
        "passes":             ev.passes,
    }
    if ev.color is None:
        return entry

    entry["hsl"] = ev.color.to_canonical()
    entry["hex"] = hsl_to_hex(ev.color)
    entry["rgb"] = hsl_to_rgb(ev.color)
    if ev.token.is_text:
        entry["contrast_ratio"] = round(ev.light_ratio, 2)
    else:
        best = optimal_text_color(ev.color, settings.light, settings.dark, settings.thresholds)
        ratio = ev.light_ratio if best == "light" else ev.dark_ratio
        entry["optimal_text_color"] = best
        entry["contrast_ratio"]     = round(ratio, 2)
    return entry


def export_palette(
    tokens: Iterable[ColorToken],
    settings: "Settings",
    description: str = "Complete colour palette with all design tokens",
) -> Dict[str, Any]:
    """
    Export every token as structured data, grouped by category.

    Each entry carries the hsl / hex / rgb spellings, the text colour that
    reads best on it and the contrast ratio with that text colour. Text
    tokens report their ratio against the light page background instead.
    """
    palette: Dict[str, Any] = {
        "metadata": {
            "export_date": datetime.now(timezone.utc).isoformat(),
            "version":     EXPORT_VERSION,
            "description": description,
            "standard":    settings.standard,
            "light_text":  settings.light.to_canonical(),
            "dark_text":   settings.dark.to_canonical(),
        },
    }
    for category in CATEGORIES:
        palette[category] = {}

    for ev in audit_palette(tokens, settings):
        palette.setdefault(ev.token.category, {})[ev.token.label] = _export_entry(ev, settings)
    return palette
