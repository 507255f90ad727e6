"""Reading type graph documents from YAML or JSON."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import SchemaLoadError, SchemaValidationError
from .models import TypeGraphDocument


def _decode(text: str, source: str | None = None) -> dict:
    """Decode YAML or JSON text into the raw document mapping.

    JSON is read by the YAML parser, so both formats share this path. An
    empty document decodes to an empty mapping.

    Raises:
        SchemaLoadError: If the text is not YAML/JSON or its root is not a
            mapping.
    """
    where = f" in {source}" if source else ""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML/JSON{where}: {e}", source) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Type graph document{where} must be a mapping of 'types' and "
            f"'top_levels', got {type(data).__name__}",
            source,
        )
    return data


def read_document_data(path: str | Path) -> dict:
    """Read a YAML or JSON type graph file into its raw mapping.

    Args:
        path: Path to the document.

    Returns:
        The decoded mapping, empty for an empty file.

    Raises:
        SchemaLoadError: If the file is missing, unreadable or malformed.
    """
    path = Path(path)

    if not path.is_file():
        reason = "is not a file" if path.exists() else "not found"
        raise SchemaLoadError(f"Type graph document {reason}: {path}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaLoadError(f"Cannot read type graph document: {e}", str(path)) from e

    return _decode(text, str(path))


def parse_document(path: str | Path) -> TypeGraphDocument:
    """Read and validate a type graph file.

    Raises:
        SchemaLoadError: If the file cannot be read or decoded.
        SchemaValidationError: If the data fails validation.
    """
    return _validate_document(read_document_data(path))


def parse_document_from_string(text: str) -> TypeGraphDocument:
    """Validate a type graph given as YAML or JSON text.

    Raises:
        SchemaLoadError: If the text cannot be decoded.
        SchemaValidationError: If the data fails validation.
    """
    return _validate_document(_decode(text))


def _validate_document(data: dict) -> TypeGraphDocument:
    """Validate raw data, flattening pydantic errors to {loc, msg, type}."""
    try:
        return TypeGraphDocument.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Type graph document failed validation with {len(errors)} error(s)", errors
        ) from e
