"""Name assignment for types, properties, enum cases and union members.

Every namespace is an explicit allocation table. A render builds one
NameTable and passes it along; there is no module-level naming state.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from ..graph.type_graph import (
    EnumType,
    NamedType,
    ObjectType,
    TransformedStringType,
    TypeGraph,
    TypeNode,
    UnionType,
)
from ..log import get_logger

logger = get_logger(__name__)

# A run of delimiters plus the character after it
_DELIMITER_RUN = re.compile(r"[._\-\s]+.")
_IDENTIFIER_CHAR = re.compile(r"[^0-9A-Za-z_$]")

# Identifier the generated module imports the validator library under
IMPORT_ALIAS = "s"


def name_style(raw: str) -> str:
    """Camel-case a raw name with an underscore prefix.

    The underscore prefix joins the first word to the delimiter rule, so
    `person` becomes `Person` and `date_time string` becomes `DateTimeString`.
    Delimiters are dot, underscore, hyphen and whitespace.
    """
    return _DELIMITER_RUN.sub(lambda m: m.group(0)[-1].upper(), f"_{raw}")


def identity_style(raw: str) -> str:
    return raw


def legalize(identifier: str) -> str:
    """Make a styled name usable as a JavaScript identifier."""
    identifier = _IDENTIFIER_CHAR.sub("", identifier)
    if not identifier or identifier[0].isdigit():
        identifier = f"_{identifier}"
    return identifier


@dataclass(frozen=True)
class Name:
    """An identifier assigned to one entity in one namespace."""

    namespace: str
    identifier: str
    raw: str

    def __str__(self) -> str:
        return self.identifier


class Namespace:
    """An allocation table for one namespace.

    Two raw names that style to the same identifier get distinct results:
    the second gets the suffix 2, the third 3, and so on.
    """

    def __init__(
        self,
        label: str,
        style: Callable[[str], str] = name_style,
        legal: bool = True,
    ):
        self.label = label
        self._style = style
        self._legal = legal
        self._taken: set[str] = set()

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._taken

    def reserve(self, identifier: str) -> Name:
        """Claim an identifier verbatim."""
        self._taken.add(identifier)
        return Name(self.label, identifier, identifier)

    def assign(self, raw: str) -> Name:
        """Style `raw` and claim the first free variant of it."""
        styled = self._style(raw)
        if self._legal:
            styled = legalize(styled)

        candidate = styled
        suffix = 2
        while candidate in self._taken:
            candidate = f"{styled}{suffix}"
            suffix += 1

        if candidate != styled:
            logger.debug("Name '%s' taken in %s, using '%s'", styled, self.label, candidate)

        self._taken.add(candidate)
        return Name(self.label, candidate, raw)


class NameTable:
    """All names assigned during one render."""

    def __init__(self, reserved: Iterable[str] = ()):
        self.types = Namespace("types")
        self.types.reserve(IMPORT_ALIAS)
        for identifier in reserved:
            self.types.reserve(identifier)

        self._type_names: dict[NamedType, Name] = {}
        self._top_level_names: dict[str, Name] = {}
        self._format_names: dict[str, Name] = {}
        self._property_names: dict[ObjectType, dict[str, Name]] = {}
        self._enum_case_names: dict[EnumType, tuple[Name, ...]] = {}
        self._union_member_names: dict[UnionType, tuple[Name, ...]] = {}

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register_format(self, tag: str, identifier: str) -> Name:
        """Bind a format tag to its helper identifier."""
        if tag not in self._format_names:
            self._format_names[tag] = self.types.reserve(identifier)
        return self._format_names[tag]

    def register_type(self, node: NamedType, raw: str | None = None) -> Name:
        """Assign a type name; registering the same node again is a no-op."""
        if node not in self._type_names:
            self._type_names[node] = self.types.assign(raw if raw is not None else node.name)
        return self._type_names[node]

    def register_top_level(self, key: str, node: TypeNode) -> Name:
        """Assign the export name for a top-level.

        A top-level whose key is the name of the object or enum it points to
        shares that declaration's name.
        """
        if key in self._top_level_names:
            return self._top_level_names[key]

        if isinstance(node, (ObjectType, EnumType)) and node.name == key:
            name = self.register_type(node, key)
        else:
            name = self.types.assign(key)

        self._top_level_names[key] = name
        return name

    def register_properties(self, node: ObjectType) -> dict[str, Name]:
        if node not in self._property_names:
            namespace = Namespace(f"properties:{node.name}")
            self._property_names[node] = {
                prop.key: namespace.assign(prop.key) for prop in node.properties
            }
        return self._property_names[node]

    def register_enum_cases(self, node: EnumType) -> tuple[Name, ...]:
        if node not in self._enum_case_names:
            namespace = Namespace(f"enum-cases:{node.name}", identity_style, legal=False)
            self._enum_case_names[node] = tuple(namespace.assign(case) for case in node.cases)
        return self._enum_case_names[node]

    def register_union_members(self, node: UnionType) -> tuple[Name, ...]:
        if node not in self._union_member_names:
            namespace = Namespace("union-members")
            self._union_member_names[node] = tuple(
                namespace.assign(_member_label(member)) for member in node.members
            )
        return self._union_member_names[node]

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def type_name(self, node: NamedType) -> Name | None:
        return self._type_names.get(node)

    def top_level_name(self, key: str) -> Name | None:
        return self._top_level_names.get(key)

    def format_name(self, tag: str) -> Name | None:
        return self._format_names.get(tag)

    def property_name(self, node: ObjectType, key: str) -> Name | None:
        return self._property_names.get(node, {}).get(key)

    def enum_case_names(self, node: EnumType) -> tuple[Name, ...]:
        return self._enum_case_names.get(node, ())

    def union_member_names(self, node: UnionType) -> tuple[Name, ...]:
        return self._union_member_names.get(node, ())


def _member_label(node: TypeNode) -> str:
    """Raw name for a union member: the type's name, format tag or kind."""
    if isinstance(node, (ObjectType, EnumType)):
        return node.name
    if isinstance(node, TransformedStringType):
        return node.format
    return node.kind.value


def assign_names(graph: TypeGraph, helper_names: dict[str, str] | None = None) -> NameTable:
    """Run the naming pass over a type graph.

    Format helpers are bound first so no type can take their names, then
    top-levels in export order, then the remaining object and enum types in
    first-seen order. Properties, enum cases and union members are named in
    their own per-entity namespaces.

    Args:
        graph: The resolved type graph.
        helper_names: Format tag to helper identifier, for every known format.

    Returns:
        The populated NameTable.
    """
    names = NameTable()

    for tag, identifier in (helper_names or {}).items():
        names.register_format(tag, identifier)

    for key, node in graph.top_levels.items():
        names.register_top_level(key, node)

    for node in graph.named():
        names.register_type(node)

    for node in graph.iter_types():
        if isinstance(node, ObjectType):
            names.register_properties(node)
        elif isinstance(node, EnumType):
            names.register_enum_cases(node)
        elif isinstance(node, UnionType):
            names.register_union_members(node)

    return names
