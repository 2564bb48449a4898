"""
utils.py
────────
Palette configuration loading, validation, and convenience helpers.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .color_parser import Color, parse
from .compliance import DEFAULT_THRESHOLDS, Thresholds
from .tokens import CATEGORIES, COMPANIONS, ColorToken


Config = Dict[str, Any]

WHITE        = "0 0% 100%"
FEDERAL_BLUE = "249 67% 24%"


# ── Runtime settings ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Settings:
    """Text colours and policy an audit is run against."""

    light_text: str        = WHITE
    dark_text:  str        = FEDERAL_BLUE
    standard:   str        = "AAA"
    thresholds: Thresholds = field(default=DEFAULT_THRESHOLDS)

    @property
    def light(self) -> Color:
        return parse(self.light_text) or parse(WHITE)

    @property
    def dark(self) -> Color:
        return parse(self.dark_text) or parse(FEDERAL_BLUE)

    @property
    def minimum(self) -> float:
        return self.thresholds.minimum(self.standard)


# ── Config I/O ────────────────────────────────────────────────────────────────

def load_config(path: str | Path) -> Config:
    """
    Load a JSON palette file and return the parsed dict.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is not valid JSON or fails basic schema checks.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    if p.suffix.lower() != ".json":
        raise ValueError(f"Config file must be a .json file, got: {p.suffix}")

    with p.open("r", encoding="utf-8") as fh:
        try:
            cfg = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in config file: {exc}") from exc

    validate_config(cfg)
    return cfg


def validate_config(cfg: Config) -> None:
    if not isinstance(cfg, dict):
        raise ValueError("Config root must be a JSON object.")

    standard = cfg.get("standard", "AAA")
    if not isinstance(standard, str) or standard.upper() not in ("AA", "AAA"):
        raise ValueError(f"'standard' must be 'AA' or 'AAA', got: {standard!r}")

    for key in ("light_text", "dark_text"):
        if key in cfg and parse(cfg[key]) is None:
            raise ValueError(f"'{key}' is not a recognised colour: {cfg[key]!r}")

    tokens = cfg.get("tokens", [])
    if not isinstance(tokens, list):
        raise ValueError("'tokens' must be a JSON array.")
    for i, tok in enumerate(tokens):
        if not isinstance(tok, dict):
            raise ValueError(f"Token {i} must be a JSON object.")
        if not tok.get("label") or not tok.get("value"):
            raise ValueError(f"Token {i} must have a 'label' and a 'value'.")
        if tok.get("category", "surfaces") not in CATEGORIES:
            raise ValueError(
                f"Token '{tok['label']}' has unknown category: {tok.get('category')!r}"
            )
        if tok.get("companion") not in COMPANIONS:
            raise ValueError(
                f"Token '{tok['label']}' has unknown companion: {tok.get('companion')!r}"
            )


def settings_from_config(cfg: Config) -> Settings:
    return Settings(
        light_text=cfg.get("light_text", WHITE),
        dark_text=cfg.get("dark_text", FEDERAL_BLUE),
        standard=cfg.get("standard", "AAA").upper(),
    )


def tokens_from_config(cfg: Config) -> List[ColorToken]:
    return [
        ColorToken(
            label=tok["label"],
            value=tok["value"],
            css_var=tok.get("css_var", ""),
            category=tok.get("category", "surfaces"),
            companion=tok.get("companion"),
            active=bool(tok.get("active", True)),
        )
        for tok in cfg.get("tokens", [])
    ]


# ── Built-in palette ──────────────────────────────────────────────────────────

def build_default_config() -> Config:
    """The site's stock palette, used when no config file is supplied."""
    return {
        "title":      "Design system colours",
        "light_text": WHITE,
        "dark_text":  FEDERAL_BLUE,
        "standard":   "AAA",
        "tokens": [
            {"label": "White Background", "css_var": "--background",  "value": "0 0% 100%",   "category": "surfaces",    "companion": "dark"},
            {"label": "Default Card",     "css_var": "--card",        "value": "249 67% 24%", "category": "surfaces",    "companion": "light"},
            {"label": "Muted Gray",       "css_var": "--muted",       "value": "220 14% 96%", "category": "surfaces",    "companion": "dark"},
            {"label": "Primary Blue",     "css_var": "--primary",     "value": "249 67% 24%", "category": "interactive", "companion": "light"},
            {"label": "Secondary",        "css_var": "--secondary",   "value": "210 40% 94%", "category": "interactive", "companion": "dark"},
            {"label": "Accent",           "css_var": "--accent",      "value": "43 96% 56%",  "category": "interactive", "companion": "dark"},
            {"label": "Destructive Red",  "css_var": "--destructive", "value": "0 84% 60%",   "category": "feedback",    "companion": "light"},
            {"label": "Foreground",       "css_var": "--foreground",  "value": "249 67% 24%", "category": "text"},
            {"label": "Muted Text",       "css_var": "--muted-foreground", "value": "215 16% 47%", "category": "text"},
        ],
    }
