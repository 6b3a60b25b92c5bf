"""Serve the guide API reference, kept apart from the data endpoints."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse


DOC_PATH = Path(__file__).resolve().parents[1] / "docs" / "api_reference.md"

try:
    DOC_CONTENT = DOC_PATH.read_text(encoding="utf-8")
except FileNotFoundError as exc:  # pragma: no cover - configuration error
    raise RuntimeError(
        "Missing documentation file at docs/api_reference.md"
    ) from exc

_ENDPOINT_RE = re.compile(r"^(GET|POST|PUT|PATCH|DELETE)\s+(\S+)$")

router = APIRouter(prefix="/api/docs", tags=["documentation"])


@router.get("", response_class=PlainTextResponse, summary="API reference (Markdown)")
async def get_api_reference_markdown() -> PlainTextResponse:
    """Return the API reference as Markdown for human readers."""
    return PlainTextResponse(DOC_CONTENT, media_type="text/markdown; charset=utf-8")


def _parse_endpoints(markdown: str) -> List[Dict[str, str]]:
    """Split on ``### METHOD /path`` headings; other headings are ignored."""
    endpoints: List[Dict[str, str]] = []
    current: Dict[str, str] | None = None
    lines: List[str] = []

    for line in markdown.splitlines():
        if line.startswith("### "):
            if current is not None:
                current["content"] = "\n".join(lines).strip()
                endpoints.append(current)
            current = None
            lines = []
            match = _ENDPOINT_RE.match(line.removeprefix("### ").strip())
            if match:
                current = {"method": match.group(1), "path": match.group(2)}
            continue
        if current is not None:
            lines.append(line)

    if current is not None:
        current["content"] = "\n".join(lines).strip()
        endpoints.append(current)

    return endpoints


@router.get(
    "/structured",
    summary="API reference as structured JSON",
    response_description="One entry per endpoint with its Markdown body.",
)
async def get_api_reference_structured() -> Dict[str, object]:
    """Expose the same documentation as machine-friendly JSON."""
    endpoints = _parse_endpoints(DOC_CONTENT)
    if not endpoints:
        raise HTTPException(status_code=500, detail="Documentation is empty")
    return {"title": "Guide Atlas API", "endpoints": endpoints}
