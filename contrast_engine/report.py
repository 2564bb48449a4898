"""
report.py
─────────
Renders a palette audit as a PDF contrast report.

Layout model
────────────
  • A "cursor" variable ``_y`` tracks the top of the next row to draw,
    measured in ReportLab points from the bottom of the page.
  • Each row subtracts its height from ``_y`` so the cursor moves downward.
  • ``_ensure_space`` starts a new page before a row that would run into
    the footer.

Each row shows the token as a swatch carrying sample text in both text
colours, the two ratios with their badges, and the recommended fix.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from reportlab.lib import colors
from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4, letter
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas as rl_canvas

from .color_parser import Color
from .compliance import contrast_badge
from .conversion import hsl_to_hex
from .contrast import contrast_ratio, is_light_color
from .tokens import TokenEvaluation
from .utils import Settings

logger = logging.getLogger(__name__)

# ── Layout constants ───────────────────────────────────────────────────────────
MARGIN        = 1.80 * cm   # Left / right / bottom margin
HEADER_H      = 2.40 * cm   # Header bar height (first page)
CONT_HEADER_H = 1.40 * cm   # Compact header on continuation pages
FOOTER_H      = 0.90 * cm   # Footer strip height

ROW_H         = 2.10 * cm   # One token row
ROW_GAP       = 0.40 * cm   # Gap between rows
SWATCH_W      = 5.20 * cm   # Colour swatch width
TEXT_GAP      = 0.55 * cm   # Swatch → details gap

FONT          = "Helvetica"
FONT_BOLD     = "Helvetica-Bold"
FONT_ITALIC   = "Helvetica-Oblique"

_BADGE_COLORS = {
    "text-green-600":  colors.Color(0.09, 0.64, 0.29),
    "text-yellow-600": colors.Color(0.79, 0.54, 0.02),
    "text-orange-600": colors.Color(0.92, 0.35, 0.05),
    "text-red-600":    colors.Color(0.86, 0.15, 0.15),
}
_MUTED = colors.Color(0.45, 0.45, 0.45)


def _rl(color: Color) -> HexColor:
    return HexColor(hsl_to_hex(color))


class ContrastReport:
    """
    Build a PDF report from a list of token evaluations.

    Parameters
    ----------
    evaluations : sequence of TokenEvaluation
        Output of ``audit_palette``.
    settings : Settings
        The text colours and standard the audit was run with.
    title : str
        Heading printed in the header bar.
    """

    def __init__(self, evaluations: Sequence[TokenEvaluation], settings: Settings,
                 title: str = "Colour contrast report", page_size: str = "a4") -> None:
        self.evaluations = list(evaluations)
        self.settings    = settings
        self.title       = title
        self.page_size   = A4 if page_size.lower() == "a4" else letter
        self.W, self.H   = self.page_size
        self._c: Optional[rl_canvas.Canvas] = None
        self._y: float = 0.0
        self.pages: int = 0

    # ── Public ────────────────────────────────────────────────────────────────

    def build(self, output_path: str | Path) -> Path:
        """Render the report to *output_path* and return the path."""
        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        self._c = rl_canvas.Canvas(str(out), pagesize=self.page_size)
        self._c.setTitle(self.title)
        self.pages = 0
        self._begin_page(first=True)

        for evaluation in self.evaluations:
            self._ensure_space(ROW_H + ROW_GAP)
            self._draw_row(evaluation)

        self._draw_footer()
        self._c.save()
        logger.info("Wrote contrast report for %d tokens to %s", len(self.evaluations), out)
        return out

    # ── Page management ───────────────────────────────────────────────────────

    def _begin_page(self, first: bool = True) -> None:
        self.pages += 1
        hh = HEADER_H if first else CONT_HEADER_H
        self._draw_header(hh, first)
        self._y = self.H - hh - MARGIN * 0.6

    def _new_page(self) -> None:
        self._draw_footer()
        self._c.showPage()
        self._begin_page(first=False)

    def _ensure_space(self, needed: float) -> None:
        if self._y - needed < FOOTER_H + MARGIN:
            self._new_page()

    # ── Header / footer ───────────────────────────────────────────────────────

    def _draw_header(self, hh: float, first: bool) -> None:
        c = self._c
        bar   = self.settings.dark
        label = self.settings.light
        if contrast_ratio(bar, label) < self.settings.minimum:
            label = Color(0, 0, 100) if bar.lightness < 50 else Color(0, 0, 0)

        c.setFillColor(_rl(bar))
        c.rect(0, self.H - hh, self.W, hh, fill=1, stroke=0)
        c.setFillColor(_rl(label))

        if first:
            c.setFont(FONT_BOLD, 15)
            c.drawString(MARGIN, self.H - hh + 1.30 * cm, self.title)
            passing = sum(1 for e in self.evaluations if e.passes)
            c.setFont(FONT, 9)
            c.drawString(
                MARGIN, self.H - hh + 0.55 * cm,
                f"WCAG {self.settings.standard} (min {self.settings.minimum:g}:1)  \u2013  "
                f"{passing} of {len(self.evaluations)} tokens pass",
            )
        else:
            c.setFont(FONT_BOLD, 10)
            c.drawString(MARGIN, self.H - hh + CONT_HEADER_H * 0.35, self.title)

    def _draw_footer(self) -> None:
        c = self._c
        c.setStrokeColor(_MUTED)
        c.setLineWidth(0.4)
        c.line(MARGIN, FOOTER_H, self.W - MARGIN, FOOTER_H)
        c.setFillColor(_MUTED)
        c.setFont(FONT, 7.5)
        c.drawString(MARGIN, FOOTER_H * 0.40,
                     f"Light text {self.settings.light_text}  |  Dark text {self.settings.dark_text}")
        c.drawRightString(self.W - MARGIN, FOOTER_H * 0.40, f"Page {c.getPageNumber()}")

    # ── Rows ──────────────────────────────────────────────────────────────────

    def _draw_row(self, ev: TokenEvaluation) -> None:
        c = self._c
        top   = self._y
        x_txt = MARGIN + SWATCH_W + TEXT_GAP

        self._draw_swatch(ev, MARGIN, top - ROW_H)

        c.setFillColor(colors.black)
        c.setFont(FONT_BOLD, 10)
        c.drawString(x_txt, top - 0.45 * cm, ev.token.label)
        c.setFillColor(_MUTED)
        c.setFont(FONT, 8)
        details = [ev.token.value]
        if ev.color is not None:
            details.append(hsl_to_hex(ev.color))
        if ev.token.css_var:
            details.append(ev.token.css_var)
        c.drawString(x_txt, top - 0.85 * cm, "  ·  ".join(details))

        if ev.color is None:
            c.setFont(FONT_ITALIC, 8.5)
            c.setFillColor(_BADGE_COLORS["text-red-600"])
            c.drawString(x_txt, top - 1.35 * cm, "Unrecognised colour value – not checked")
            self._y = top - ROW_H - ROW_GAP
            return

        y_ratio = top - 1.35 * cm
        x = x_txt
        if ev.token.is_text:
            ratios = [("on page", ev.light_ratio)]
        else:
            ratios = [("light text", ev.light_ratio), ("dark text", ev.dark_ratio)]
        for caption, ratio in ratios:
            x = self._draw_ratio(x, y_ratio, caption, ratio)

        fix = ev.recommended_fix
        c.setFont(FONT_ITALIC, 8)
        if ev.passes:
            c.setFillColor(_BADGE_COLORS["text-green-600"])
            c.drawString(x_txt, top - 1.80 * cm, "No change needed")
        elif fix is not None:
            suggestion = f"Suggested: {fix.to_canonical()} ({hsl_to_hex(fix)}) for {ev.recommendation} text"
            if ev.existing_match is not None:
                suggestion += f", or reuse {ev.existing_match.label}"
            c.setFillColor(colors.black)
            c.drawString(x_txt, top - 1.80 * cm, suggestion)

        self._y = top - ROW_H - ROW_GAP

    def _draw_swatch(self, ev: TokenEvaluation, x: float, y: float) -> None:
        c = self._c
        if ev.color is None:
            c.setStrokeColor(_MUTED)
            c.setDash(3, 2)
            c.roundRect(x, y, SWATCH_W, ROW_H, 4, fill=0, stroke=1)
            c.setDash()
            return

        # Text tokens are shown as text on the page background
        if ev.token.is_text:
            fill = self.settings.light
            samples: List[Tuple[str, Color]] = [("Aa text", ev.color)]
        else:
            fill = ev.color
            samples = [("Aa light", self.settings.light), ("Aa dark", self.settings.dark)]

        # Pale swatches get an outline so they stand off the white page
        outline = 1 if is_light_color(fill) else 0
        c.setFillColor(_rl(fill))
        c.setStrokeColor(_MUTED)
        c.setLineWidth(0.4)
        c.roundRect(x, y, SWATCH_W, ROW_H, 4, fill=1, stroke=outline)

        c.setFont(FONT_BOLD, 12)
        for i, (label, color) in enumerate(samples):
            c.setFillColor(_rl(color))
            c.drawString(x + 0.40 * cm + i * (SWATCH_W / 2), y + ROW_H / 2 - 0.15 * cm, label)

    def _draw_ratio(self, x: float, y: float, caption: str, ratio: float) -> float:
        """Draw ``caption 7.12:1 AAA`` at *x* and return the next free x."""
        c = self._c
        badge = contrast_badge(ratio, self.settings.thresholds)

        text = f"{caption} {ratio:.2f}:1"
        c.setFillColor(colors.black)
        c.setFont(FONT, 8.5)
        c.drawString(x, y, text)
        x += c.stringWidth(text, FONT, 8.5) + 0.15 * cm

        c.setFillColor(_BADGE_COLORS[badge.style_hint])
        c.setFont(FONT_BOLD, 8.5)
        c.drawString(x, y, badge.label)
        return x + c.stringWidth(badge.label, FONT_BOLD, 8.5) + 0.60 * cm
