"""Response inspection for load test observability.

Extension calls fail in two ways. The HTTP call itself fails with a
commercetools error body, or it succeeds and a gateway failure is stored
in a ``<request>Response`` field.

Error bodies, malformed input included, use the commercetools shape:
{"errors": [{"code": "...", "message": "..."}]}
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body.get("errors"), list):
        return " | ".join(f"{err.get('code')}: {err.get('message')}" for err in body["errors"])

    return str(body)[:300]


def stored_failure(actions: list[dict], response_field: str) -> str | None:
    """The gateway error stored in ``response_field``, if the request failed."""
    for action in actions:
        if action.get("name") != response_field or not isinstance(action.get("value"), str):
            continue
        try:
            value = json.loads(action["value"])
        except ValueError:
            return None
        if isinstance(value, dict) and value.get("success") is False:
            return value.get("message") or "unknown gateway error"
    return None
