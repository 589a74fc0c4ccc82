"""Render field templates and write generated output.

Takes the context from context_builder and produces Rust field
declarations, one block per property, in source order.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Iterable, Iterator, TextIO

import jinja2

from .context_builder import build_context

TEMPLATE_DIR = Path(__file__).parent / "templates"
FIELD_TEMPLATE = "field.rs.j2"


def _get_template(name: str = FIELD_TEMPLATE) -> jinja2.Template:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    return env.get_template(name)


def render_fields(context: dict[str, Any]) -> Iterator[str]:
    """Lazily render each field of a context built by build_context."""
    template = _get_template()
    for field in context["fields"]:
        yield template.render(**field)


def emit_fields(
    properties: dict[str, Any],
    sort_keys: bool = False,
    pub: bool = False,
) -> Iterator[str]:
    """Yield one rendered block per property of a definition.

    Each block is zero or more doc-comment lines followed by a single
    `name: Option<Type>,` line.
    """
    context = build_context(properties, sort_keys=sort_keys, pub=pub)
    return render_fields(context)


def write_fields(blocks: Iterable[str], stream: TextIO | None = None) -> None:
    """Write rendered blocks to a stream (default: stdout)."""
    out = stream or sys.stdout
    for block in blocks:
        out.write(block)


def generate(context: dict[str, Any], output: Path | None = None) -> None:
    """Render the fields and write them to stdout or the output file."""
    if output is None:
        write_fields(render_fields(context))
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w") as f:
        write_fields(render_fields(context), f)

    print(
        f"Generated {output} ({context['field_count']} fields,"
        f" {context['unresolved_count']} unresolved types)"
    )
