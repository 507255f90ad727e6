"""Mapping from type graph nodes to Superstruct validator expressions."""

from ..graph.node_types import TypeKind
from ..graph.type_graph import ObjectProperty, ObjectType, TypeNode
from .errors import InvariantViolation
from .expression import Expression
from .naming import IMPORT_ALIAS, NameTable

S = IMPORT_ALIAS

PRIMITIVE_VALIDATORS: dict[TypeKind, str] = {
    TypeKind.ANY: f"{S}.any()",
    TypeKind.NULL: f"{S}.literal(null)",
    TypeKind.BOOL: f"{S}.boolean()",
    TypeKind.INTEGER: f"{S}.integer()",
    TypeKind.DOUBLE: f"{S}.number()",
    TypeKind.STRING: f"{S}.string()",
}


class TypeMapper:
    """Builds the validator expression for a type.

    Objects and enums are never inlined: they map to a reference to their
    declaration, which must already be named.
    """

    def __init__(self, names: NameTable):
        self.names = names

    def map_type(self, node: TypeNode, enclosing: ObjectType | None = None) -> Expression:
        """Map a node to its validator expression.

        Args:
            node: Any resolved type node.
            enclosing: The object whose body is being rendered. A reference
                back to it is wrapped in `s.lazy`, since the constant is not
                yet initialized while its own body is evaluated.

        Returns:
            The expression validating values of that type.

        Raises:
            InvariantViolation: If an object or enum has no assigned name, or
                the node kind is unknown.
        """
        kind = node.kind

        if kind in PRIMITIVE_VALIDATORS:
            return Expression.of(PRIMITIVE_VALIDATORS[kind])

        if kind == TypeKind.ARRAY:
            return Expression.of(f"{S}.array(", self.map_type(node.items, enclosing), ")")

        if kind == TypeKind.MAP:
            return Expression.of(
                f"{S}.record({S}.string(), ", self.map_type(node.values, enclosing), ")"
            )

        if kind == TypeKind.UNION:
            members = [self.map_type(member, enclosing) for member in node.members]
            return Expression.of(f"{S}.union([ ", Expression.join(", ", members), " ])")

        if kind in (TypeKind.OBJECT, TypeKind.ENUM):
            name = self.names.type_name(node)
            if name is None:
                raise InvariantViolation(
                    f"{kind.value} type '{node.name}' has no assigned name", kind.value
                )
            if node is enclosing:
                return Expression.of(f"{S}.lazy(() => ", name, ")")
            return Expression.of(name)

        if kind == TypeKind.TRANSFORMED_STRING:
            name = self.names.format_name(node.format)
            if name is None:
                # Unrecognized formats validate as plain strings
                return Expression.of(PRIMITIVE_VALIDATORS[TypeKind.STRING])
            return Expression.of(name)

        raise InvariantViolation(f"Unhandled type kind '{kind}'", str(kind))

    def map_property(
        self, prop: ObjectProperty, enclosing: ObjectType | None = None
    ) -> Expression:
        """Map a property, wrapping optional ones in `s.optional`."""
        if prop.optional:
            return Expression.of(f"{S}.optional(", self.map_type(prop.type, enclosing), ")")
        return self.map_type(prop.type, enclosing)
