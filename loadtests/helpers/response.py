"""Response error extraction for load test observability.

Handles the two error shapes the API returns:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Dispatch-core errors (404/409/422/503): {"detail": {"field": ["msg"]}} or {"detail": "msg"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a compact, human-readable message from an API error response."""
    try:
        body = response.json()
    except Exception:
        # Not JSON, return raw text truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    detail = body.get("detail") if isinstance(body, dict) else None

    if isinstance(detail, list):
        parts = []
        for err in detail:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if isinstance(detail, dict):
        return " | ".join(f"{field}: {', '.join(map(str, msgs))}" for field, msgs in detail.items())

    if detail is not None:
        return str(detail)

    return str(body)[:300]
