"""Emission of a complete Superstruct module from a type graph."""

import json
from dataclasses import dataclass, field

from ..graph.type_graph import EnumType, ObjectType, TypeGraph
from ..log import get_logger
from .expression import Expression
from .formats import StringFormat, collect_formats, helper_names
from .naming import IMPORT_ALIAS, NameTable, assign_names
from .options import RenderOptions
from .ordering import ObjectDeclaration, order_objects
from .type_mapper import TypeMapper

logger = get_logger(__name__)

S = IMPORT_ALIAS
INDENT = "  "
HEADER = f'import * as {S} from "superstruct";'


@dataclass
class RenderResult:
    """Result of rendering a type graph."""

    text: str
    names: NameTable
    formats: list[StringFormat] = field(default_factory=list)
    object_order: list[str] = field(default_factory=list)
    default_export: str | None = None

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()


class Emitter:
    """Walks a type graph and writes the module, section by section.

    Sections, each emitted once and separated by a blank line: import
    header, pattern constants, format helpers, enums, objects (dependency
    order) and top-level exports with a single default export.
    """

    def __init__(self, graph: TypeGraph, options: RenderOptions | None = None):
        self.graph = graph
        self.options = options or RenderOptions()
        self.names = assign_names(graph, helper_names())
        self.mapper = TypeMapper(self.names)
        self._lines: list[str] = []

    # -------------------------------------------------------------------------
    # Line handling
    # -------------------------------------------------------------------------

    def emit_line(self, text: str = "") -> None:
        """Append text, one output line per embedded newline."""
        self._lines.extend(text.split("\n"))

    def ensure_blank_line(self) -> None:
        """Append a blank line unless output is empty or already ends in one."""
        if self._lines and self._lines[-1] != "":
            self._lines.append("")

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------

    def render(self) -> RenderResult:
        """Render the whole module.

        Returns:
            The RenderResult holding the text and the names used.

        Raises:
            InvariantViolation: If an object or enum is referenced unnamed.
            DependencyCycleError: If object types reference each other cyclically.
        """
        logger.debug("Rendering with converters=%s", self.options.converters)
        self._lines = []

        formats = collect_formats(self.graph)

        self.emit_line(HEADER)
        self.ensure_blank_line()
        self._emit_patterns(formats)
        self._emit_helpers(formats)
        self._emit_enums()
        ordered = self._emit_objects()
        default_export = self._emit_top_levels()

        while self._lines and self._lines[-1] == "":
            self._lines.pop()

        return RenderResult(
            text="\n".join(self._lines) + "\n",
            names=self.names,
            formats=formats,
            object_order=[decl.name.identifier for decl in ordered],
            default_export=default_export,
        )

    def _emit_patterns(self, formats: list[StringFormat]) -> None:
        for fmt in formats:
            declaration = fmt.pattern_declaration()
            if declaration is not None:
                self.emit_line(declaration)
        self.ensure_blank_line()

    def _emit_helpers(self, formats: list[StringFormat]) -> None:
        for fmt in formats:
            self.emit_line(fmt.helper_declaration())
        self.ensure_blank_line()

    def _emit_enums(self) -> None:
        for node in self.graph.enums():
            self.emit_line(
                f"export const {self.names.type_name(node)} = {self._enum_body(node)};"
            )
        self.ensure_blank_line()

    def _enum_body(self, node: EnumType) -> str:
        cases = self.names.enum_case_names(node)
        if not cases:
            return f"{S}.never()"
        literals = ", ".join(f"{S}.literal({json.dumps(case.identifier)})" for case in cases)
        return f"{S}.union([ {literals} ])"

    def _object_body(self, node: ObjectType) -> Expression:
        if not node.properties:
            return Expression.of(f"{S}.object({{}})")

        entries = [
            Expression.of(
                INDENT, json.dumps(prop.key), ": ", self.mapper.map_property(prop, node), ","
            )
            for prop in node.properties
        ]
        return Expression.of(f"{S}.object({{\n", Expression.join("\n", entries), "\n})")

    def _emit_objects(self) -> list[ObjectDeclaration]:
        declarations = [
            ObjectDeclaration(
                name=self.names.type_name(node),
                node=node,
                body=self._object_body(node),
            )
            for node in self.graph.objects()
        ]

        ordered = order_objects(declarations)
        for decl in ordered:
            self.ensure_blank_line()
            self.emit_line(f"export const {decl.name} = {decl.body};")
        self.ensure_blank_line()
        return ordered

    def _emit_top_levels(self) -> str | None:
        """Emit top-level exports; the last top-level becomes the default export."""
        last = None
        for key, node in self.graph.top_levels.items():
            name = self.names.top_level_name(key)
            declared = (
                self.names.type_name(node)
                if isinstance(node, (ObjectType, EnumType))
                else None
            )
            # A top-level that is itself a declaration is already exported
            if declared != name:
                self.emit_line(f"export const {name} = {self.mapper.map_type(node)};")
            last = name

        if last is None:
            return None

        self.ensure_blank_line()
        self.emit_line(f"export default {last};")
        return last.identifier


def render(graph: TypeGraph, options: RenderOptions | None = None) -> RenderResult:
    """Render a type graph as a Superstruct module.

    Args:
        graph: The resolved type graph.
        options: Render options.

    Returns:
        The RenderResult.
    """
    return Emitter(graph, options).render()
