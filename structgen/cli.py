"""Command-line interface for structgen."""

import sys
from pathlib import Path

import click

from . import __version__
from .log import LEVEL_NAMES, get_logger, resolve_level, setup_logging
from .output.formatter import format_graph_summary
from .render.errors import RenderError
from .render.options import RenderOptions
from .schema.errors import SchemaLoadError, SchemaValidationError

logger = get_logger(__name__)


def _report_schema_error(e: Exception) -> None:
    """Print a load or validation error and exit with code 2."""
    if isinstance(e, SchemaValidationError):
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
    else:
        click.echo(f"Error loading file: {e}", err=True)
    sys.exit(2)


def _validate_log_level(ctx, param, value: str | None) -> int | None:
    """Accept a level name (DEBUG, warn, ...) or a number."""
    if value is None or not value.strip():
        return None
    level = resolve_level(value)
    if level is None:
        raise click.BadParameter(
            f"'{value}' is not a level name ({', '.join(LEVEL_NAMES)}) or number"
        )
    return level


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    envvar="STRUCTGEN_LOG_LEVEL",
    type=str,
    default=None,
    callback=_validate_log_level,
    help="Log level name or number (defaults to STRUCTGEN_LOG_LEVEL or WARNING)",
)
def main(log_level: int | None):
    """structgen: render type graphs as Superstruct validators."""
    setup_logging(log_level)


@main.command("render")
@click.argument("model_file", type=click.Path(exists=True))
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the module to this file instead of stdout",
)
@click.option(
    "--converters",
    envvar="STRUCTGEN_CONVERTERS",
    type=click.Choice(["top-level", "all-objects"]),
    default="top-level",
    help="Which types get conversion helpers (accepted, no effect on output)",
)
def render_cmd(model_file: str, output_file: str | None, converters: str):
    """Render a type graph file as a Superstruct module.

    MODEL_FILE is the path to a YAML or JSON type graph document.

    Exit codes:
      0 - Success
      1 - Render error (e.g. cyclic object references)
      2 - File or schema error
    """
    from .render.runner import render_file

    options = RenderOptions(converters=converters)

    try:
        result = render_file(model_file, options)
    except (SchemaLoadError, SchemaValidationError) as e:
        _report_schema_error(e)
    except RenderError as e:
        click.echo(f"Render error: {e}", err=True)
        sys.exit(1)

    if output_file is None:
        click.echo(result.text, nl=False)
    else:
        out_path = Path(output_file)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(result.text, encoding="utf-8")
        except OSError as e:
            click.echo(f"Error writing file: {e}", err=True)
            sys.exit(2)
        click.echo(f"Generated: {output_file}")

    logger.info(
        "Rendered %d object(s), %d format helper(s)",
        len(result.object_order),
        len(result.formats),
    )
    sys.exit(0)


@main.command()
@click.argument("model_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def check(model_file: str, output_format: str):
    """Load and resolve a type graph file and summarize it.

    MODEL_FILE is the path to a YAML or JSON type graph document.

    Exit codes:
      0 - The document resolves
      2 - File or schema error
    """
    from .graph.builder import build_type_graph
    from .schema.loader import parse_document

    try:
        graph = build_type_graph(parse_document(model_file))
    except (SchemaLoadError, SchemaValidationError) as e:
        _report_schema_error(e)

    click.echo(format_graph_summary(graph, output_format))  # type: ignore
    sys.exit(0)


if __name__ == "__main__":
    main()
