"""
api/check.py
────────────
Vercel Python serverless function – POST /api/check

Backs the CMS contrast checker panel: checks a background / text pair,
optionally repairs one side, or audits a whole list of colour tokens.

Request body (JSON), pair mode:
{
  "background": "249 67% 24%",     // any accepted colour spelling
  "text":       "#333333",
  "fix":        "text"             // optional: "text" or "background"
}

Request body (JSON), palette mode:
{
  "tokens":     [{"label": "Card", "value": "249 67% 24%", "category": "surfaces"}],
  "light_text": "0 0% 100%",       // optional
  "dark_text":  "249 67% 24%",     // optional
  "standard":   "AAA"              // optional
}

Response: application/json
"""

from __future__ import annotations

import json
import logging
import os
import sys
from http.server import BaseHTTPRequestHandler
from typing import Any, Dict, Tuple

# ── Make project root importable so we can use contrast_engine.* ──────────────
_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

from contrast_engine.checker import check_pair, fix_background_for_aaa, fix_text_for_aaa
from contrast_engine.tokens import audit_palette
from contrast_engine.utils import settings_from_config, tokens_from_config, validate_config

logger = logging.getLogger(__name__)

# ── CORS headers sent with every response ─────────────────────────────────────
_CORS = {
    "Access-Control-Allow-Origin":  "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class UnparseableColor(ValueError):
    """A pair request named a colour the parser does not recognise."""


# ── Vercel handler class ───────────────────────────────────────────────────────

class handler(BaseHTTPRequestHandler):

    def log_message(self, fmt, *args):  # silence default access-log noise
        pass

    # ── CORS preflight ─────────────────────────────────────────────────────────
    def do_OPTIONS(self):
        self.send_response(200)
        for k, v in _CORS.items():
            self.send_header(k, v)
        self.end_headers()

    # ── Main POST ──────────────────────────────────────────────────────────────
    def do_POST(self):
        try:
            length = int(self.headers.get("Content-Length", 0))
            body   = self.rfile.read(length)
            data   = json.loads(body)
        except (ValueError, TypeError) as exc:
            self._json(400, {"error": f"Invalid request body: {exc}"})
            return

        try:
            status, payload = _run(data)
        except UnparseableColor as exc:
            self._json(422, {"error": str(exc)})
            return
        except ValueError as exc:
            self._json(400, {"error": str(exc)})
            return
        except Exception as exc:
            logger.exception("Contrast check failed")
            self._json(500, {"error": str(exc)})
            return

        self._json(status, payload)

    # ── Response helper ────────────────────────────────────────────────────────
    def _json(self, code: int, payload: Dict[str, Any]) -> None:
        body = json.dumps(payload).encode()
        self.send_response(code)
        for k, v in _CORS.items():
            self.send_header(k, v)
        self.send_header("Content-Type",   "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


# ── Core logic ─────────────────────────────────────────────────────────────────

def _run(data: Any) -> Tuple[int, Dict[str, Any]]:
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object.")
    if "tokens" in data:
        return 200, _audit(data)
    return 200, _pair(data)


def _pair(data: Dict[str, Any]) -> Dict[str, Any]:
    background = data.get("background", "")
    text       = data.get("text", "")
    fix        = data.get("fix")
    if fix not in (None, "text", "background"):
        raise ValueError(f"'fix' must be 'text' or 'background', got: {fix!r}")

    check = check_pair(background, text)
    if check is None:
        raise UnparseableColor(
            f"Unrecognised colour in pair: background={background!r}, text={text!r}"
        )

    result = check.as_dict()
    if fix == "text":
        result["fixed"] = {"target": "text", "hsl": fix_text_for_aaa(text, background)}
    elif fix == "background":
        result["fixed"] = {"target": "background", "hsl": fix_background_for_aaa(background, text)}
    return result


def _audit(data: Dict[str, Any]) -> Dict[str, Any]:
    validate_config(data)
    settings = settings_from_config(data)
    results  = audit_palette(tokens_from_config(data), settings)
    return {
        "standard": settings.standard,
        "passing":  sum(1 for r in results if r.passes),
        "total":    len(results),
        "tokens":   [r.as_dict() for r in results],
    }
