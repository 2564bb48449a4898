"""
palette.py
──────────
Pulls candidate brand colours out of a logo so they can be audited like
any other colour token.

Handles transparency by compositing onto white before analysis, so logos
with transparent backgrounds don't skew the palette toward white/grey.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import List

from PIL import Image
from colorthief import ColorThief

from .color_parser import Color, rgb_to_color
from .tokens import ColorToken

logger = logging.getLogger(__name__)


class LogoPalette:
    """Extract brand colours from any raster logo image."""

    def __init__(self, logo_path: str | Path) -> None:
        self.logo_path = Path(logo_path)
        if not self.logo_path.exists():
            raise FileNotFoundError(f"Logo not found: {self.logo_path}")
        self._thief: ColorThief = self._build_thief()

    # ── Setup ─────────────────────────────────────────────────────────────────

    def _build_thief(self) -> ColorThief:
        """Load the image, flatten transparency, and prepare ColorThief."""
        img = Image.open(self.logo_path).convert("RGBA")

        bg = Image.new("RGBA", img.size, (255, 255, 255, 255))
        bg.paste(img, mask=img.split()[3])
        flat = bg.convert("RGB")

        buf = io.BytesIO()
        flat.save(buf, format="PNG")
        buf.seek(0)
        return ColorThief(buf)

    # ── Public API ────────────────────────────────────────────────────────────

    def dominant(self) -> Color:
        """The single most dominant colour."""
        return rgb_to_color(*self._thief.get_color(quality=1))

    def palette(self, count: int = 6) -> List[Color]:
        """Up to *count* distinct colours representing the logo."""
        colors: List[Color] = []
        for rgb in self._thief.get_palette(color_count=max(count, 2), quality=1):
            color = rgb_to_color(*rgb)
            if color not in colors:
                colors.append(color)
        logger.debug("Extracted %d colours from %s", len(colors), self.logo_path)
        return colors[:count]

    def to_tokens(self, count: int = 6) -> List[ColorToken]:
        """Wrap the palette as surface tokens named ``Logo 1`` … ``Logo N``."""
        return [
            ColorToken(label=f"Logo {i}", value=color.to_canonical(), category="surfaces")
            for i, color in enumerate(self.palette(count), start=1)
        ]
