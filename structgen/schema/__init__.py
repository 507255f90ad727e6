"""Schema layer for parsing and validating type graph documents."""

from .errors import SchemaLoadError, SchemaValidationError
from .models import Property, TypeDeclaration, TypeGraphDocument, TypeRef
from .loader import parse_document, parse_document_from_string, read_document_data

__all__ = [
    "SchemaLoadError",
    "SchemaValidationError",
    "Property",
    "TypeDeclaration",
    "TypeGraphDocument",
    "TypeRef",
    "read_document_data",
    "parse_document",
    "parse_document_from_string",
]
