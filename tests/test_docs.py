import sys
from pathlib import Path

from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import app  # noqa: E402
from routes.docs import _parse_endpoints  # noqa: E402


def test_markdown_reference_is_served():
    client = TestClient(app.app)
    resp = client.get("/api/docs")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/markdown")
    assert "### GET /api/guides/search" in resp.text


def test_structured_reference_lists_endpoints():
    client = TestClient(app.app)
    data = client.get("/api/docs/structured").json()

    pairs = {(e["method"], e["path"]) for e in data["endpoints"]}
    assert ("POST", "/api/tips/{id}/helpful") in pairs
    assert ("GET", "/api/recently-viewed") in pairs


def test_parse_endpoints_skips_non_endpoint_headings():
    markdown = "# Title\n### Notes\nignored\n### GET /api/x\nbody line\n"
    assert _parse_endpoints(markdown) == [{"method": "GET", "path": "/api/x", "content": "body line"}]
