"""Shared fixtures for swagger_def tests.

Documents are written to a temporary directory so the CLI can be pointed
at them with --spec or run from inside that directory.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

def _user_properties() -> dict[str, Any]:
    return {
        "id": {"type": "integer", "format": "int64", "description": "Unique identifier."},
        "login": {"type": "string", "description": "The user's username"},
        "notes": {"type": "string", "description": None},
        "is_admin": {"type": "boolean", "description": "Whether the user is an admin."},
        "tags": {"type": "array", "items": {"type": "string"}},
        "bio": {"type": "string", "description": "First line.\n\nThird line."},
        "avatar_url": {"type": "string", "description": ""},
        "created": {"description": "null"},
    }


@pytest.fixture
def user_properties() -> dict[str, Any]:
    """Property map of a Gitea-style User definition, in document order."""
    return _user_properties()


@pytest.fixture
def swagger_spec() -> dict[str, Any]:
    """Minimal Swagger 2.0 document."""
    return {
        "swagger": "2.0",
        "info": {"title": "Gitea API", "version": "1.21"},
        "definitions": {
            "User": {
                "type": "object",
                "required": ["id", "login"],
                "properties": _user_properties(),
            },
            "Empty": {"type": "object"},
        },
    }


@pytest.fixture
def openapi_spec() -> dict[str, Any]:
    """Minimal OpenAPI 3.0 document."""
    return {
        "openapi": "3.0.3",
        "info": {"title": "Example", "version": "1.0"},
        "components": {
            "schemas": {
                "Label": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string", "description": "Label name."},
                        "exclusive": {"type": "boolean"},
                    },
                },
            },
        },
    }


@pytest.fixture
def spec_file(tmp_path: Path, swagger_spec: dict[str, Any]) -> Path:
    """swagger.json written to a temporary directory."""
    path = tmp_path / "swagger.json"
    path.write_text(json.dumps(swagger_spec))
    return path


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()
