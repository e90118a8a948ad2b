"""Accessors for commercetools resource documents and their custom fields."""

import json
from typing import Any


def custom_fields(resource: dict | None) -> dict[str, Any]:
    """Custom fields of a resource, or an empty dict when it has none."""
    if not resource:
        return {}
    return (resource.get("custom") or {}).get("fields") or {}


def custom_field(resource: dict | None, name: str) -> Any:
    return custom_fields(resource).get(name)


def parse_json_object(value: str, fallback_key: str) -> dict:
    """Decode a JSON object, or wrap anything else as ``{fallback_key: value}``.

    Request fields may hold a JSON document or a bare string such as a
    nonce or an id; JSON scalars and arrays count as bare strings.
    """
    try:
        parsed = json.loads(value)
    except (TypeError, ValueError):
        return {fallback_key: value}
    if not isinstance(parsed, dict):
        return {fallback_key: value}
    return parsed
