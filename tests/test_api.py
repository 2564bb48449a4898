"""Tests for the serverless contrast-check handler."""

import json
import threading
from http.server import HTTPServer
from urllib.error import HTTPError
from urllib.request import Request, urlopen

import pytest

from api.check import UnparseableColor, _run, handler


class TestRun:
    """Test request handling without a socket."""

    def test_pair(self):
        status, payload = _run({"background": "249 67% 24%", "text": "#ffffff"})

        assert status == 200
        assert payload["badge"]["label"] == "AAA"
        assert "fixed" not in payload

    def test_pair_with_fix(self):
        _, payload = _run({"background": "249 67% 24%", "text": "0 0% 20%", "fix": "text"})

        assert payload["fixed"]["target"] == "text"
        assert payload["fixed"]["hsl"].startswith("0 0% ")

    def test_unparseable_pair(self):
        with pytest.raises(UnparseableColor):
            _run({"background": "nope", "text": "#fff"})

    def test_overflowing_number_is_unparseable(self):
        with pytest.raises(UnparseableColor):
            _run({"background": "9" * 400 + " 50% 50%", "text": "#fff"})

    def test_bad_fix_target(self):
        with pytest.raises(ValueError):
            _run({"background": "#000", "text": "#fff", "fix": "both"})

    def test_body_must_be_object(self):
        with pytest.raises(ValueError):
            _run(["#000", "#fff"])

    def test_palette(self):
        _, payload = _run({
            "standard": "AA",
            "tokens": [
                {"label": "Card", "value": "249 67% 24%"},
                {"label": "Broken", "value": "var(--x)"},
            ],
        })

        assert payload["standard"] == "AA"
        assert payload["total"] == 2
        assert payload["passing"] == 1
        assert payload["tokens"][1]["recommendation"] == "unparseable"


@pytest.fixture
def server():
    httpd  = HTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_address[1]}"
    httpd.shutdown()
    httpd.server_close()


def _post(url, body: bytes):
    req = Request(url, data=body, method="POST", headers={"Content-Type": "application/json"})
    try:
        with urlopen(req) as resp:
            return resp.status, json.loads(resp.read())
    except HTTPError as exc:
        return exc.code, json.loads(exc.read())


class TestHandler:
    """Test the HTTP surface end to end."""

    def test_ok(self, server):
        status, payload = _post(server, json.dumps({"background": "#000", "text": "#fff"}).encode())

        assert status == 200
        assert payload["ratio"] == 21.0

    def test_invalid_json(self, server):
        status, payload = _post(server, b"{nope")

        assert status == 400
        assert "Invalid request body" in payload["error"]

    def test_unparseable_colour(self, server):
        status, _ = _post(server, json.dumps({"background": "x", "text": "#fff"}).encode())

        assert status == 422

    def test_cors_preflight(self, server):
        with urlopen(Request(server, method="OPTIONS")) as resp:
            assert resp.status == 200
            assert resp.headers["Access-Control-Allow-Origin"] == "*"
