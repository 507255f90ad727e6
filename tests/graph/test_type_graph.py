"""Tests for TypeGraph traversal."""

from structgen.graph.node_types import TypeKind
from structgen.graph.type_graph import (
    ArrayType,
    EnumType,
    ObjectProperty,
    ObjectType,
    PrimitiveType,
    TransformedStringType,
    TypeGraph,
    UnionType,
)


def _string():
    return PrimitiveType(TypeKind.STRING)


class TestTypeGraphBasics:
    def test_empty_graph(self):
        graph = TypeGraph()

        assert list(graph.iter_types()) == []
        assert graph.objects() == []
        assert graph.top_levels == {}

    def test_get_named_type(self):
        person = ObjectType("Person")
        graph = TypeGraph([person])

        assert graph.get_named_type("Person") is person
        assert graph.get_named_type("Missing") is None

    def test_nodes_compare_by_identity(self):
        assert ObjectType("Same") != ObjectType("Same")
        assert PrimitiveType(TypeKind.STRING) != PrimitiveType(TypeKind.STRING)

    def test_get_property(self):
        person = ObjectType("Person", [ObjectProperty("name", _string())])

        assert person.get_property("name").key == "name"
        assert person.get_property("age") is None


class TestTypeGraphTraversal:
    def test_top_levels_visited_before_declarations(self):
        first = ObjectType("First")
        second = ObjectType("Second")
        graph = TypeGraph([first, second], {"Root": second})

        assert graph.objects() == [second, first]

    def test_depth_first_property_order(self):
        inner = ObjectType("Inner", [ObjectProperty("x", _string())])
        color = EnumType("Color", ("RED",))
        outer = ObjectType(
            "Outer",
            [
                ObjectProperty("inner", ArrayType(inner)),
                ObjectProperty("color", color),
            ],
        )
        graph = TypeGraph([color, inner, outer], {"Outer": outer})

        assert graph.objects() == [outer, inner]
        assert graph.enums() == [color]
        assert graph.named() == [outer, inner, color]

    def test_cycles_visited_once(self):
        a = ObjectType("A")
        b = ObjectType("B")
        a.properties.append(ObjectProperty("b", b))
        b.properties.append(ObjectProperty("a", a))
        a.properties.append(ObjectProperty("self", a))
        graph = TypeGraph([a, b])

        nodes = list(graph.iter_types())
        assert nodes == [a, b]

    def test_unions(self):
        union = UnionType((_string(), PrimitiveType(TypeKind.NULL)))
        holder = ObjectType("Holder", [ObjectProperty("value", union)])
        graph = TypeGraph([holder])

        assert graph.unions() == [union]

    def test_format_tags_first_occurrence(self):
        date = TransformedStringType("date")
        uuid = TransformedStringType("uuid")
        other_date = TransformedStringType("date")
        holder = ObjectType(
            "Holder",
            [
                ObjectProperty("a", uuid),
                ObjectProperty("b", date),
                ObjectProperty("c", other_date),
            ],
        )
        graph = TypeGraph([holder])

        assert graph.format_tags() == ["uuid", "date"]
