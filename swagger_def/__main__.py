"""Entry point: python -m swagger_def <Definition>

Reads swagger.json (or --spec), prints Rust fields for one definition.
"""

from __future__ import annotations

import json
from pathlib import Path

import click
import httpx

from . import __version__
from .codegen import generate
from .context_builder import build_context
from .loader import (
    DEFAULT_SPEC_PATH,
    DefinitionNotFoundError,
    SpecStructureError,
    get_properties,
    load_spec,
)


@click.command()
@click.argument("name", required=False, default="")
@click.option(
    "--spec",
    "-s",
    "source",
    default=str(DEFAULT_SPEC_PATH),
    show_default=True,
    envvar="SWAGGER_DEF_SPEC",
    help="Swagger/OpenAPI JSON document, as a path or http(s) URL.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of stdout.",
)
@click.option(
    "--sort-keys",
    is_flag=True,
    help="Emit fields sorted by name instead of in document order.",
)
@click.option("--pub", is_flag=True, help="Prefix each field with 'pub '.")
@click.version_option(version=__version__, prog_name="swagger-def")
def main(name: str, source: str, output: Path | None, sort_keys: bool, pub: bool) -> None:
    """Print Option<...> Rust fields for the definition NAME."""
    if not name:
        raise click.UsageError("missing definition name")

    try:
        spec = load_spec(source)
        properties = get_properties(spec, name)
    except DefinitionNotFoundError as e:
        raise click.ClickException(str(e)) from e
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{source} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise click.ClickException(f"{source} is not UTF-8 text: {e.reason}") from e
    except SpecStructureError as e:
        raise click.ClickException(f"{source}: {e}") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise click.ClickException(f"failed to fetch {source}: {e}") from e
    except OSError as e:
        raise click.ClickException(f"cannot read {source}: {e.strerror or e}") from e

    context = build_context(properties, sort_keys=sort_keys, pub=pub)
    generate(context, output)


if __name__ == "__main__":
    main()
