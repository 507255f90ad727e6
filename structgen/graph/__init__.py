"""Graph layer for representing resolved type graphs."""

from .node_types import TypeKind
from .type_graph import (
    ArrayType,
    EnumType,
    MapType,
    ObjectProperty,
    ObjectType,
    PrimitiveType,
    TransformedStringType,
    TypeGraph,
    TypeNode,
    UnionType,
)
from .builder import build_type_graph

__all__ = [
    "TypeKind",
    "ArrayType",
    "EnumType",
    "MapType",
    "ObjectProperty",
    "ObjectType",
    "PrimitiveType",
    "TransformedStringType",
    "TypeGraph",
    "TypeNode",
    "UnionType",
    "build_type_graph",
]
