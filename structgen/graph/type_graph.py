"""Resolved type graph nodes and the TypeGraph container."""

from dataclasses import dataclass, field
from typing import Iterator, Union

from .node_types import NAMED_KINDS, TypeKind


# Nodes compare by identity: object types may reference each other cyclically,
# and two structurally equal objects are still distinct declarations.


@dataclass(eq=False)
class PrimitiveType:
    """any, null, bool, integer, double or string."""

    kind: TypeKind

    def children(self) -> tuple["TypeNode", ...]:
        return ()


@dataclass(eq=False)
class ArrayType:
    """An array of `items`."""

    items: "TypeNode"
    kind: TypeKind = field(default=TypeKind.ARRAY, init=False)

    def children(self) -> tuple["TypeNode", ...]:
        return (self.items,)


@dataclass(eq=False)
class MapType:
    """A string-keyed map of `values`."""

    values: "TypeNode"
    kind: TypeKind = field(default=TypeKind.MAP, init=False)

    def children(self) -> tuple["TypeNode", ...]:
        return (self.values,)


@dataclass(eq=False)
class ObjectProperty:
    """A single property of an object type."""

    key: str
    type: "TypeNode"
    optional: bool = False


@dataclass(eq=False)
class ObjectType:
    """A named object type with ordered properties."""

    name: str
    properties: list[ObjectProperty] = field(default_factory=list)
    kind: TypeKind = field(default=TypeKind.OBJECT, init=False)

    def children(self) -> tuple["TypeNode", ...]:
        return tuple(prop.type for prop in self.properties)

    def get_property(self, key: str) -> ObjectProperty | None:
        for prop in self.properties:
            if prop.key == key:
                return prop
        return None


@dataclass(eq=False)
class EnumType:
    """A named enum with ordered string cases."""

    name: str
    cases: tuple[str, ...] = ()
    kind: TypeKind = field(default=TypeKind.ENUM, init=False)

    def children(self) -> tuple["TypeNode", ...]:
        return ()


@dataclass(eq=False)
class UnionType:
    """A union of member types, in declaration order."""

    members: tuple["TypeNode", ...]
    kind: TypeKind = field(default=TypeKind.UNION, init=False)

    def children(self) -> tuple["TypeNode", ...]:
        return self.members


@dataclass(eq=False)
class TransformedStringType:
    """A string constrained by a format tag such as `date` or `uuid`."""

    format: str
    kind: TypeKind = field(default=TypeKind.TRANSFORMED_STRING, init=False)

    def children(self) -> tuple["TypeNode", ...]:
        return ()


TypeNode = Union[
    PrimitiveType,
    ArrayType,
    MapType,
    ObjectType,
    EnumType,
    UnionType,
    TransformedStringType,
]

NamedType = Union[ObjectType, EnumType]


class TypeGraph:
    """A resolved type graph.

    Holds the declared object and enum types in declaration order and the
    top-level types in export order. Every node reachable from either is
    fully resolved.
    """

    def __init__(
        self,
        named_types: list[NamedType] | None = None,
        top_levels: dict[str, TypeNode] | None = None,
    ):
        """Initialize a type graph.

        Args:
            named_types: Declared object and enum types.
            top_levels: Top-level export names mapped to their types.
        """
        self._named_types = list(named_types or [])
        self._top_levels = dict(top_levels or {})

    @property
    def named_types(self) -> list[NamedType]:
        """Declared object and enum types, in declaration order."""
        return list(self._named_types)

    @property
    def top_levels(self) -> dict[str, TypeNode]:
        """Top-level export names mapped to their types, in export order."""
        return dict(self._top_levels)

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def iter_types(self) -> Iterator[TypeNode]:
        """Iterate over every node once, in first-seen order.

        Top-levels are visited first (in order), then declared types; each
        root is walked depth first, children in declaration order.

        Yields:
            Each reachable TypeNode exactly once.
        """
        visited: set[int] = set()
        roots: list[TypeNode] = list(self._top_levels.values()) + list(self._named_types)

        for root in roots:
            stack: list[TypeNode] = [root]
            while stack:
                node = stack.pop()
                if id(node) in visited:
                    continue
                visited.add(id(node))
                yield node
                # Reversed so the first child is visited first
                stack.extend(reversed(node.children()))

    def objects(self) -> list[ObjectType]:
        """Object types in first-seen order."""
        return [t for t in self.iter_types() if isinstance(t, ObjectType)]

    def enums(self) -> list[EnumType]:
        """Enum types in first-seen order."""
        return [t for t in self.iter_types() if isinstance(t, EnumType)]

    def unions(self) -> list[UnionType]:
        """Union types in first-seen order."""
        return [t for t in self.iter_types() if isinstance(t, UnionType)]

    def named(self) -> list[NamedType]:
        """Object and enum types in first-seen order."""
        return [t for t in self.iter_types() if t.kind in NAMED_KINDS]

    def format_tags(self) -> list[str]:
        """Distinct transformed-string format tags, by first occurrence."""
        tags: list[str] = []
        for node in self.iter_types():
            if isinstance(node, TransformedStringType) and node.format not in tags:
                tags.append(node.format)
        return tags

    def get_named_type(self, name: str) -> NamedType | None:
        """Get a declared type by its raw name."""
        for named in self._named_types:
            if named.name == name:
                return named
        return None
