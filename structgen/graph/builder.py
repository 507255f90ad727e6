"""Builder for converting a TypeGraphDocument to a resolved TypeGraph."""

from ..log import get_logger
from ..schema.errors import SchemaValidationError
from ..schema.models import TypeGraphDocument, TypeRef
from .node_types import PRIMITIVE_KEYWORDS, STRING_FORMATS, TypeKind
from .type_graph import (
    ArrayType,
    EnumType,
    MapType,
    NamedType,
    ObjectProperty,
    ObjectType,
    PrimitiveType,
    TransformedStringType,
    TypeGraph,
    TypeNode,
    UnionType,
)

logger = get_logger(__name__)


class _Resolver:
    """Resolves type expressions against the declared types.

    Primitive and transformed-string nodes are shared per kind/tag, so the
    resolved graph holds one node for each.
    """

    def __init__(self, declared: dict[str, NamedType]):
        self.declared = declared
        self.errors: list[dict] = []
        self._primitives: dict[TypeKind, PrimitiveType] = {}
        self._formats: dict[str, TransformedStringType] = {}

    def primitive(self, kind: TypeKind) -> PrimitiveType:
        if kind not in self._primitives:
            self._primitives[kind] = PrimitiveType(kind)
        return self._primitives[kind]

    def transformed_string(self, tag: str) -> TransformedStringType:
        if tag not in self._formats:
            self._formats[tag] = TransformedStringType(tag)
        return self._formats[tag]

    def resolve(self, ref: TypeRef, loc: str) -> TypeNode:
        """Resolve a type expression into a node.

        Unresolvable names are recorded in `errors` and resolve to `any`
        so the rest of the document is still checked.
        """
        if ref.array is not None:
            return ArrayType(self.resolve(ref.array, f"{loc}.array"))

        if ref.map is not None:
            return MapType(self.resolve(ref.map, f"{loc}.map"))

        if ref.union is not None:
            return UnionType(
                tuple(
                    self.resolve(member, f"{loc}.union.{i}")
                    for i, member in enumerate(ref.union)
                )
            )

        if ref.format is not None:
            return self.transformed_string(ref.format)

        name = ref.ref or ""

        # Declared names shadow keywords
        if name in self.declared:
            return self.declared[name]
        if name in PRIMITIVE_KEYWORDS:
            return self.primitive(PRIMITIVE_KEYWORDS[name])
        if name in STRING_FORMATS:
            return self.transformed_string(name)

        self.errors.append(
            {
                "loc": loc,
                "msg": f"Unresolved type reference '{name}'",
                "type": "unresolved_reference",
            }
        )
        return self.primitive(TypeKind.ANY)


def build_type_graph(document: TypeGraphDocument) -> TypeGraph:
    """Build a resolved TypeGraph from a TypeGraphDocument.

    Args:
        document: The parsed document.

    Returns:
        A TypeGraph whose nodes are all resolved.

    Raises:
        SchemaValidationError: If any type reference cannot be resolved.
    """
    declared: dict[str, NamedType] = {}

    # Create all named types first so properties can reference any of them
    for name, declaration in document.types.items():
        if declaration.kind == "enum":
            declared[name] = EnumType(name, tuple(declaration.cases))
        else:
            declared[name] = ObjectType(name)

    resolver = _Resolver(declared)

    # Fill in properties (after all named types exist)
    for name, declaration in document.types.items():
        node = declared[name]
        if not isinstance(node, ObjectType):
            continue
        for prop in declaration.properties:
            node.properties.append(
                ObjectProperty(
                    key=prop.name,
                    type=resolver.resolve(prop.type, f"types.{name}.properties.{prop.name}"),
                    optional=prop.optional,
                )
            )

    top_levels: dict[str, TypeNode] = {}
    for name, ref in document.top_levels.items():
        top_levels[name] = resolver.resolve(ref, f"top_levels.{name}")

    if resolver.errors:
        raise SchemaValidationError(
            f"Type resolution failed with {len(resolver.errors)} error(s)",
            resolver.errors,
        )

    logger.debug(
        "Built type graph: %d declared type(s), %d top-level(s)",
        len(declared),
        len(top_levels),
    )
    return TypeGraph(list(declared.values()), top_levels)
