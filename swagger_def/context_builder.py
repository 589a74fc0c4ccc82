"""Build Jinja2 template context from parsed properties.

Resolves each property's Rust type and splits its description into
doc-comment lines. Every field is emitted as Option<...>; the schema's
`required` list is not consulted.
"""

from __future__ import annotations

from typing import Any

from .rust_types import is_primitive, map_type
from .schema_parser import parse_properties

DOC_MARKER = "///"


def format_doc_lines(description: str | None) -> list[str]:
    """Split a description into the lines of a doc comment.

    Blank lines in the middle are kept; trailing line breaks are dropped.
    """
    if not description:
        return []
    text = description.replace("\r\n", "\n").replace("\r", "\n").rstrip("\n")
    if not text:
        return []
    return text.split("\n")


def build_field(prop: dict[str, Any], pub: bool = False) -> dict[str, Any]:
    """Build the template context for one field."""
    return {
        "name": prop["name"],
        "type": map_type(prop["declared_type"]),
        "doc_lines": format_doc_lines(prop["description"]),
        "doc_marker": DOC_MARKER,
        "visibility": "pub " if pub else "",
    }


def build_context(
    properties: dict[str, Any],
    sort_keys: bool = False,
    pub: bool = False,
) -> dict[str, Any]:
    """Build the full template context for one definition.

    `unresolved_count` counts fields whose type was passed through
    unmapped (object, array, references, ...).
    """
    props = parse_properties(properties, sort_keys)
    return {
        "fields": [build_field(p, pub=pub) for p in props],
        "field_count": len(props),
        "unresolved_count": sum(not is_primitive(p["declared_type"]) for p in props),
    }
