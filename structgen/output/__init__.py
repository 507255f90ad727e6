"""Output formatting for command-line reports."""

from .formatter import format_graph_summary

__all__ = ["format_graph_summary"]
