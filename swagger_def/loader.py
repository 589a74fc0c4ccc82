"""Load a Swagger/OpenAPI document and look up definitions in it.

Accepts a local JSON file or an http(s) URL. Swagger 2.0 documents keep
their models under `definitions`; OpenAPI 3.x under `components.schemas`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx

DEFAULT_SPEC_PATH = Path("swagger.json")

_URL_PREFIXES = ("http://", "https://")


class DefinitionNotFoundError(KeyError):
    """Raised when the requested definition is not in the document."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"definition '{self.name}' not found"


class SpecStructureError(ValueError):
    """Raised when the document is not shaped like a Swagger/OpenAPI spec."""


def is_url(source: str | Path) -> bool:
    """Return True if the source looks like an http(s) URL."""
    return isinstance(source, str) and source.startswith(_URL_PREFIXES)


def fetch_spec(url: str, client: httpx.Client | None = None) -> dict[str, Any]:
    """Download a spec over HTTP."""
    if client is None:
        with httpx.Client(follow_redirects=True, timeout=30.0) as owned:
            return fetch_spec(url, owned)
    resp = client.get(url)
    resp.raise_for_status()
    return resp.json()


def load_spec(
    source: str | Path | None = None,
    client: httpx.Client | None = None,
) -> dict[str, Any]:
    """Load the spec from a path or URL (default: ./swagger.json)."""
    if source is None:
        source = DEFAULT_SPEC_PATH
    if is_url(source):
        return fetch_spec(str(source), client)
    with open(source, encoding="utf-8") as f:
        return json.load(f)


def get_definitions(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract the named schemas from the spec."""
    if not isinstance(spec, dict):
        raise SpecStructureError("document root is not a JSON object")
    if "definitions" in spec:
        definitions = spec["definitions"] or {}
    else:
        components = spec.get("components") or {}
        if not isinstance(components, dict):
            raise SpecStructureError("'components' is not a JSON object")
        definitions = components.get("schemas") or {}
    if not isinstance(definitions, dict):
        raise SpecStructureError("definitions are not a JSON object")
    return definitions


def get_properties(spec: dict[str, Any], name: str) -> dict[str, Any]:
    """Return the ordered property map of one definition."""
    definitions = get_definitions(spec)
    if name not in definitions:
        raise DefinitionNotFoundError(name)
    definition = definitions[name]
    if not isinstance(definition, dict):
        raise SpecStructureError(f"definition '{name}' is not a JSON object")
    properties = definition.get("properties") or {}
    if not isinstance(properties, dict):
        raise SpecStructureError(f"properties of '{name}' are not a JSON object")
    return properties
