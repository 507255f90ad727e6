"""Tests for module emission."""

import pytest

from structgen.graph.builder import build_type_graph
from structgen.graph.type_graph import TypeGraph
from structgen.render.emitter import HEADER, Emitter, render
from structgen.render.errors import DependencyCycleError
from structgen.render.options import RenderOptions
from structgen.schema.loader import parse_document_from_string


def _render(yaml: str, options: RenderOptions | None = None):
    return render(build_type_graph(parse_document_from_string(yaml)), options)


class TestScenarios:
    def test_person(self, person_graph):
        result = render(person_graph)

        assert result.text == (
            'import * as s from "superstruct";\n'
            "\n"
            "export const Person = s.object({\n"
            '  "name": s.string(),\n'
            '  "age": s.optional(s.integer()),\n'
            "});\n"
            "\n"
            "export default Person;\n"
        )
        assert result.default_export == "Person"

    def test_referenced_object_declared_first(self, linked_graph):
        result = render(linked_graph)

        assert result.object_order == ["B", "A"]
        assert result.text.index("export const B =") < result.text.index("export const A =")
        assert '  "field": B,' in result.lines

    def test_enum_cases_in_order(self):
        result = _render(
            """
types:
  Color:
    kind: enum
    cases: [RED, GREEN, BLUE]
top_levels:
  - Color
"""
        )

        assert (
            'export const Color = s.union([ s.literal("RED"), s.literal("GREEN"), '
            's.literal("BLUE") ]);'
        ) in result.lines
        assert result.lines[-1] == "export default Color;"

    def test_date_helper_shared(self):
        result = _render(
            """
types:
  Trip:
    kind: object
    properties:
      start: date
      end: date
      stops:
        array: date
top_levels:
  Trip: Trip
  Day: date
"""
        )
        text = result.text

        assert text.count("const DATE_REGEXP =") == 1
        assert text.count("export const DateString =") == 1
        assert '  "start": DateString,' in result.lines
        assert '  "end": DateString,' in result.lines
        assert '  "stops": s.array(DateString),' in result.lines
        assert [fmt.tag for fmt in result.formats] == ["date"]
        assert "export const Day = DateString;" in result.lines


class TestSections:
    def test_empty_graph(self):
        result = render(TypeGraph())

        assert result.text == HEADER + "\n"
        assert result.default_export is None

    def test_section_order(self):
        result = _render(
            """
types:
  Shape:
    kind: object
    properties:
      id: uuid
      color: Color
  Color:
    cases: [RED]
top_levels:
  - Shape
"""
        )
        text = result.text

        positions = [
            text.index("import * as s"),
            text.index("const UUID_REGEXP"),
            text.index("export const Uuid ="),
            text.index("export const Color ="),
            text.index("export const Shape ="),
            text.index("export default Shape;"),
        ]
        assert positions == sorted(positions)

    def test_blank_line_between_sections_only(self):
        result = _render(
            """
types:
  A:
    kind: object
    properties:
      id: uuid
      day: date
top_levels:
  - A
"""
        )

        assert result.lines[:7] == [
            'import * as s from "superstruct";',
            "",
            r"const UUID_REGEXP = /^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$/;",
            r"const DATE_REGEXP = /^(\d\d\d\d)-(\d\d)-(\d\d)$/;",
            "",
            'export const Uuid = s.refine(s.string(), "uuid", (value) => UUID_REGEXP.test(value));',
            (
                'export const DateString = s.refine(s.string(), "date string", '
                "(value) => DATE_REGEXP.test(value));"
            ),
        ]
        assert result.lines[7] == ""
        assert result.lines[-1] == "export default A;"

    def test_bool_string_has_no_pattern(self):
        result = _render("top_levels:\n  Flag: bool-string\n")

        assert "REGEXP" not in result.text
        assert "export const BoolString = s.refine(" in result.text
        assert "export const Flag = BoolString;" in result.lines

    def test_unrecognized_format_is_string(self):
        result = _render(
            """
types:
  User:
    kind: object
    properties:
      mail:
        format: email
top_levels:
  - User
"""
        )

        assert '  "mail": s.string(),' in result.lines
        assert "refine" not in result.text
        assert result.formats == []

    def test_property_keys_are_escaped(self):
        result = _render(
            """
types:
  Odd:
    kind: object
    properties:
      'say "hi"': string
      "caf\\u00e9": integer
top_levels:
  - Odd
"""
        )

        assert '  "say \\"hi\\"": s.string(),' in result.lines
        assert '  "caf\\u00e9": s.integer(),' in result.lines

    def test_empty_object_and_enum(self):
        result = _render(
            """
types:
  Empty:
    kind: object
  Nothing:
    kind: enum
top_levels:
  - Empty
  - Nothing
"""
        )

        assert "export const Empty = s.object({});" in result.lines
        assert "export const Nothing = s.never();" in result.lines

    def test_self_referencing_object(self):
        result = _render(
            """
types:
  Node:
    kind: object
    properties:
      value: integer
      children:
        array: Node
top_levels:
  - Node
"""
        )

        assert '  "children": s.array(s.lazy(() => Node)),' in result.lines

    def test_cyclic_objects_raise(self):
        with pytest.raises(DependencyCycleError) as exc_info:
            _render(
                """
types:
  Parent:
    kind: object
    properties:
      children:
        array: Child
  Child:
    kind: object
    properties:
      parent: Parent
top_levels:
  - Parent
"""
            )
        assert exc_info.value.cycle == ["Parent", "Child"]


class TestTopLevels:
    def test_last_top_level_is_default(self):
        result = _render(
            """
types:
  Person:
    kind: object
    properties:
      name: string
top_levels:
  Person: Person
  Tags:
    array: string
  People:
    array: Person
"""
        )

        assert result.text.endswith(
            "});\n"
            "\n"
            "export const Tags = s.array(s.string());\n"
            "export const People = s.array(Person);\n"
            "\n"
            "export default People;\n"
        )
        assert result.text.count("export default") == 1
        assert result.default_export == "People"

    def test_alias_of_declared_type(self):
        result = _render(
            """
types:
  Person:
    kind: object
    properties:
      name: string
top_levels:
  Root: Person
"""
        )

        assert "export const Root = Person;" in result.lines
        assert result.lines[-1] == "export default Root;"

    def test_union_top_level(self):
        result = _render('top_levels:\n  Maybe: [string, "null"]\n')

        assert "export const Maybe = s.union([ s.string(), s.literal(null) ]);" in result.lines

    def test_map_top_level(self):
        result = _render("top_levels:\n  Scores:\n    map: double\n")

        assert "export const Scores = s.record(s.string(), s.number());" in result.lines

    def test_top_level_name_collides_with_type(self):
        result = _render(
            """
types:
  Item:
    kind: object
    properties:
      id: integer
top_levels:
  item:
    array: Item
"""
        )

        assert "export const Item2 = s.object({" in result.lines
        assert "export const Item = s.array(Item2);" in result.lines
        assert result.default_export == "Item"


class TestDeterminism:
    def test_byte_identical_reruns(self, examples_dir):
        from structgen.schema.loader import parse_document

        path = examples_dir / "catalog.yaml"
        first = render(build_type_graph(parse_document(path))).text
        second = render(build_type_graph(parse_document(path))).text

        assert first == second

    def test_emitter_render_twice(self, person_graph):
        emitter = Emitter(person_graph)

        assert emitter.render().text == emitter.render().text

    def test_converters_option_does_not_change_output(self, person_graph):
        top_level = render(person_graph, RenderOptions(converters="top-level")).text
        all_objects = render(person_graph, RenderOptions(converters="all-objects")).text

        assert top_level == all_objects
