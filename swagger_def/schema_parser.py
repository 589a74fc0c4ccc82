"""Normalize raw property schemas into flat property records.

Handles:
- Missing `type` (rendered as the token "null")
- Non-string `type` values such as ["string", "null"] (compact JSON text)
- Absent, null, "null" and empty descriptions (all treated as no description)
- Source order, or name order with sort_keys
"""

from __future__ import annotations

import json
from typing import Any

# What a JSON query prints for a missing key
NULL_TOKEN = "null"


def _type_token(schema: dict[str, Any]) -> str:
    """Return the declared type of a property schema as a single token."""
    value = schema.get("type")
    if value is None:
        return NULL_TOKEN
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def _normalize_description(value: Any) -> str | None:
    """Collapse every spelling of 'no description' to None."""
    if value is None:
        return None
    if not isinstance(value, str):
        value = json.dumps(value)
    if value.rstrip("\r\n") in ("", NULL_TOKEN):
        return None
    return value


def parse_property(name: str, schema: Any) -> dict[str, Any]:
    """Parse a single property schema."""
    if not isinstance(schema, dict):
        schema = {}
    return {
        "name": name,
        "declared_type": _type_token(schema),
        "description": _normalize_description(schema.get("description")),
    }


def parse_properties(
    properties: dict[str, Any],
    sort_keys: bool = False,
) -> list[dict[str, Any]]:
    """Parse every property of a definition, keeping source order."""
    items = properties.items()
    if sort_keys:
        items = sorted(items, key=lambda item: item[0])
    return [parse_property(name, schema) for name, schema in items]
