"""Type kind definitions for the type graph."""

from enum import Enum


class TypeKind(str, Enum):
    """Kinds of nodes in the type graph."""

    # Primitives
    ANY = "any"
    NULL = "null"
    BOOL = "bool"
    INTEGER = "integer"
    DOUBLE = "double"
    STRING = "string"

    # Composites
    ARRAY = "array"
    MAP = "map"
    OBJECT = "object"
    ENUM = "enum"
    UNION = "union"
    TRANSFORMED_STRING = "transformed-string"


# Kinds that are declared once under their own name and referenced elsewhere
NAMED_KINDS = frozenset({TypeKind.OBJECT, TypeKind.ENUM})

PRIMITIVE_KEYWORDS: dict[str, TypeKind] = {
    "any": TypeKind.ANY,
    "null": TypeKind.NULL,
    "bool": TypeKind.BOOL,
    "boolean": TypeKind.BOOL,
    "integer": TypeKind.INTEGER,
    "double": TypeKind.DOUBLE,
    "number": TypeKind.DOUBLE,
    "string": TypeKind.STRING,
}

# Format tags that have a validator helper; other tags are plain strings
STRING_FORMATS = (
    "date",
    "time",
    "date-time",
    "uuid",
    "uri",
    "integer-string",
    "bool-string",
)
