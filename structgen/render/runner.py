"""Render runner that loads, resolves and renders documents."""

from pathlib import Path

from ..graph.builder import build_type_graph
from ..schema.loader import parse_document, parse_document_from_string
from ..schema.models import TypeGraphDocument
from .emitter import RenderResult, render
from .options import RenderOptions


def render_document(
    document: TypeGraphDocument, options: RenderOptions | None = None
) -> RenderResult:
    """Resolve and render a parsed document.

    Raises:
        SchemaValidationError: If a type reference cannot be resolved.
        RenderError: If rendering fails.
    """
    return render(build_type_graph(document), options)


def render_string(text: str, options: RenderOptions | None = None) -> RenderResult:
    """Parse, resolve and render a YAML or JSON string."""
    return render_document(parse_document_from_string(text), options)


def render_file(path: str | Path, options: RenderOptions | None = None) -> RenderResult:
    """Load and render a type graph file.

    Args:
        path: Path to the YAML or JSON document.
        options: Render options.

    Returns:
        The RenderResult.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the document fails validation or resolution.
        RenderError: If rendering fails.
    """
    return render_document(parse_document(path), options)
