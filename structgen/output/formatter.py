"""Output formatting for type graph summaries."""

import json
from typing import Literal

from ..graph.type_graph import TypeGraph
from ..render.formats import collect_formats


def format_graph_summary(
    graph: TypeGraph,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a summary of a resolved type graph.

    Args:
        graph: The resolved type graph.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(graph)
    return _format_text(graph)


def _summarize(graph: TypeGraph) -> dict:
    return {
        "objects": [
            {"name": node.name, "properties": [prop.key for prop in node.properties]}
            for node in graph.objects()
        ],
        "enums": [{"name": node.name, "cases": list(node.cases)} for node in graph.enums()],
        "formats": [fmt.tag for fmt in collect_formats(graph)],
        "top_levels": list(graph.top_levels),
    }


def _format_text(graph: TypeGraph) -> str:
    """Format summary as human-readable text."""
    summary = _summarize(graph)
    lines: list[str] = []

    lines.append("OBJECTS:")
    if summary["objects"]:
        for obj in summary["objects"]:
            lines.append(f"  {obj['name']} ({len(obj['properties'])} properties)")
    else:
        lines.append("  (none)")

    lines.append("")

    lines.append("ENUMS:")
    if summary["enums"]:
        for enum in summary["enums"]:
            lines.append(f"  {enum['name']} ({len(enum['cases'])} cases)")
    else:
        lines.append("  (none)")

    lines.append("")

    lines.append("FORMATS:")
    lines.append(f"  {', '.join(summary['formats']) or '(none)'}")

    # Summary
    lines.append("")
    lines.append(
        f"{len(summary['objects'])} object(s), {len(summary['enums'])} enum(s), "
        f"{len(summary['top_levels'])} top-level(s)"
    )

    return "\n".join(lines)


def _format_json(graph: TypeGraph) -> str:
    """Format summary as JSON."""
    return json.dumps(_summarize(graph), indent=2)
