"""Map JSON-Schema type tokens to Rust primitives.

Only the three scalar tokens have a Rust counterpart here:
  - string  -> String
  - integer -> i64
  - boolean -> bool

Everything else (object, array, number, a definition name, ...) is passed
through unchanged so the emitted field still reads as a named type that a
human can fix up by hand.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Primitive(str, Enum):
    """Rust primitives with a known JSON-Schema spelling."""

    STRING = "String"
    INTEGER = "i64"
    BOOLEAN = "bool"


_PRIMITIVES: Mapping[str, Primitive] = MappingProxyType({
    "string": Primitive.STRING,
    "integer": Primitive.INTEGER,
    "boolean": Primitive.BOOLEAN,
})


def is_primitive(declared_type: str) -> bool:
    """Return True if the token maps to a known Rust primitive."""
    return declared_type in _PRIMITIVES


def map_type(declared_type: str) -> str:
    """Return the Rust type for a JSON-Schema type token.

    Unknown tokens map to themselves; this never raises.
    """
    primitive = _PRIMITIVES.get(declared_type)
    if primitive is None:
        return declared_type
    return primitive.value
