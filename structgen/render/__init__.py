"""Rendering of type graphs as Superstruct validator modules."""

from .errors import DependencyCycleError, InvariantViolation, RenderError
from .expression import Expression
from .naming import Name, NameTable, Namespace, assign_names, name_style
from .formats import STRING_FORMAT_REGISTRY, StringFormat, collect_formats
from .type_mapper import TypeMapper
from .ordering import ObjectDeclaration, build_dependency_graph, order_objects
from .options import RenderOptions
from .emitter import Emitter, RenderResult, render
from .runner import render_document, render_file, render_string

__all__ = [
    "DependencyCycleError",
    "InvariantViolation",
    "RenderError",
    "Expression",
    "Name",
    "NameTable",
    "Namespace",
    "assign_names",
    "name_style",
    "STRING_FORMAT_REGISTRY",
    "StringFormat",
    "collect_formats",
    "TypeMapper",
    "ObjectDeclaration",
    "build_dependency_graph",
    "order_objects",
    "RenderOptions",
    "Emitter",
    "RenderResult",
    "render",
    "render_document",
    "render_file",
    "render_string",
]
