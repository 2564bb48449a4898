#!/usr/bin/env python3
"""
main.py
───────
Contrast Engine – command-line entry point.

Usage examples
──────────────
  # Check a single pair
  python main.py --background "249 67% 24%" --text "#333"

  # Repair the text colour of a failing pair
  python main.py -b "249 67% 24%" -t "0 0% 20%" --fix text

  # Audit a palette file and write a PDF report
  python main.py --config examples/palette.json --report output/contrast.pdf

  # Export a palette as JSON
  python main.py --config examples/palette.json --export output/palette.json

  # Audit the colours of a logo
  python main.py --logo assets/logo.png

  # Guided interactive mode (no arguments)
  python main.py
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from contrast_engine.autofix import fix_background_for_aaa, fix_text_for_aaa
from contrast_engine.checker import check_pair
from contrast_engine.contrast import optimal_text_color
from contrast_engine.conversion import hsl_to_hex
from contrast_engine.tokens import ColorToken, TokenEvaluation, audit_palette, export_palette
from contrast_engine.utils import (
    Settings,
    build_default_config,
    load_config,
    settings_from_config,
    tokens_from_config,
)


# ── CLI definition ─────────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="contrast-engine",
        description=(
            "Check WCAG contrast between colours and repair failing pairs by "
            "adjusting lightness only."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    p.add_argument(
        "--background", "-b",
        metavar="COLOR",
        help='Background colour: "#201466", "rgb(32, 20, 102)", "hsl(249, 67%%, 24%%)" or "249 67%% 24%%".',
    )
    p.add_argument(
        "--text", "-t",
        metavar="COLOR",
        help="Text colour, in any of the formats accepted for --background.",
    )
    p.add_argument(
        "--fix",
        choices=("text", "background"),
        help="Adjust the lightness of this colour until the pair reaches AAA.",
    )
    p.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="Path to a JSON palette file to audit.",
    )
    p.add_argument(
        "--logo", "-l",
        metavar="PATH",
        help="Audit the colours extracted from a logo image (PNG, JPG, …).",
    )
    p.add_argument(
        "--report", "-r",
        metavar="PATH",
        help="Write the palette audit as a PDF report.",
    )
    p.add_argument(
        "--export", "-e",
        metavar="PATH",
        help="Write the palette as structured JSON (hsl, hex, rgb, best text colour, ratio).",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging.",
    )
    return p


# ── Output helpers ─────────────────────────────────────────────────────────────

def _print_pair(background: str, text: str, settings: Settings) -> bool:
    check = check_pair(background, text, settings.thresholds)
    if check is None:
        print("[error] Could not parse one of the colours.", file=sys.stderr)
        return False

    best = optimal_text_color(check.background, settings.light, settings.dark, settings.thresholds)
    print()
    print(f"  Background  {check.background.to_canonical():<16} {hsl_to_hex(check.background)}")
    print(f"  Text        {check.text.to_canonical():<16} {hsl_to_hex(check.text)}")
    print(f"  Contrast    {check.ratio:.2f}:1   [{check.badge.label}]")
    print(
        f"  AA {'✓' if check.meets_aa else '✗'}   "
        f"AAA {'✓' if check.meets_aaa else '✗'}   "
        f"Large text {'✓' if check.meets_aa_large else '✗'}"
    )
    print(f"  Suggested text on this background: {best}")
    return True


def _print_fix(background: str, text: str, target: str) -> None:
    check = check_pair(background, text)
    if check is None:
        return
    if target == "text":
        fixed = fix_text_for_aaa(check.text, check.background)
        ratio = check_pair(background, fixed.to_canonical()).ratio
    else:
        fixed = fix_background_for_aaa(check.background, check.text)
        ratio = check_pair(fixed.to_canonical(), text).ratio
    print(f"\n  Fixed {target:<10}  {fixed.to_canonical():<16} {hsl_to_hex(fixed)}  ({ratio:.2f}:1)")


def _print_audit(results: Sequence[TokenEvaluation]) -> None:
    print()
    for ev in results:
        if ev.color is None:
            print(f"  ✗ {ev.token.label:<20} unrecognised value {ev.token.value!r}")
            continue
        ratios = f"light {ev.light_ratio:5.2f}:1"
        if ev.dark_ratio is not None:
            ratios += f"  dark {ev.dark_ratio:5.2f}:1"
        mark = "✓" if ev.passes else "✗"
        line = f"  {mark} {ev.token.label:<20} {ev.color.to_canonical():<16} {ratios}"
        fix = ev.recommended_fix
        if fix is not None:
            line += f"  → {fix.to_canonical()} ({hsl_to_hex(fix)}) for {ev.recommendation} text"
            if ev.existing_match is not None:
                line += f" (or reuse {ev.existing_match.label})"
        print(line)
    passing = sum(1 for ev in results if ev.passes)
    print(f"\n  {passing} of {len(results)} tokens pass.")


# ── Interactive mode ───────────────────────────────────────────────────────────

def _interactive() -> tuple:
    print()
    print("╔══════════════════════════════════════╗")
    print("║      Contrast Engine  –  Checker     ║")
    print("╚══════════════════════════════════════╝")
    print()
    print("Enter colours as hex, rgb(), hsl() or 'H S% L%'. Press Enter for defaults.\n")

    background = input("  Background colour  [249 67% 24%] : ").strip() or "249 67% 24%"
    text       = input("  Text colour        [0 0% 100%]   : ").strip() or "0 0% 100%"
    fix        = input("  Fix (text / background / Enter)  : ").strip().lower() or None
    if fix not in (None, "text", "background"):
        print(f"  [warning] Unknown fix target '{fix}', skipping.")
        fix = None
    return background, text, fix


# ── Main ───────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args   = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # ── Pair mode ───────────────────────────────────────────────────────────
    if args.background or args.text:
        if not (args.background and args.text):
            parser.error("--background and --text must be given together.")
        if not _print_pair(args.background, args.text, Settings()):
            return 1
        if args.fix:
            _print_fix(args.background, args.text, args.fix)
        print()
        return 0

    # ── Palette mode ────────────────────────────────────────────────────────
    if args.config or args.logo or args.report or args.export:
        try:
            cfg = load_config(args.config) if args.config else build_default_config()
        except (FileNotFoundError, ValueError) as exc:
            print(f"[error] {exc}", file=sys.stderr)
            return 1

        settings = settings_from_config(cfg)
        tokens: List[ColorToken] = tokens_from_config(cfg)

        if args.logo:
            try:
                from contrast_engine.palette import LogoPalette
                tokens = LogoPalette(args.logo).to_tokens()
            except FileNotFoundError as exc:
                print(f"[error] {exc}", file=sys.stderr)
                return 1
            print(f"\n  Extracted {len(tokens)} colours from: {args.logo}")

        results = audit_palette(tokens, settings)
        _print_audit(results)

        if args.report:
            from contrast_engine.report import ContrastReport
            title = cfg.get("title") or "Colour contrast report"
            path  = ContrastReport(results, settings, title=title).build(args.report)
            print(f"  ✓ Report written to {path}\n")

        if args.export:
            out = Path(args.export)
            out.parent.mkdir(parents=True, exist_ok=True)
            description = cfg.get("title") or "Complete colour palette with all design tokens"
            out.write_text(
                json.dumps(export_palette(tokens, settings, description), indent=2),
                encoding="utf-8",
            )
            print(f"  ✓ Palette exported to {out}\n")
        return 0

    # ── Interactive ─────────────────────────────────────────────────────────
    background, text, fix = _interactive()
    if not _print_pair(background, text, Settings()):
        return 1
    if fix:
        _print_fix(background, text, fix)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
