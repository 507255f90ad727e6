"""Pydantic models for serialized type graph documents."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

_TYPE_REF_FORMS = ("ref", "array", "map", "union", "format")
_PROPERTY_KEYS = ("name", "optional")


def _wrap_property(data):
    """Turn a bare type expression into {type: ...}.

    `name` and `optional` written beside a composite form
    (`{array: string, optional: true}`) belong to the property, not the
    expression.
    """
    if not isinstance(data, dict):
        return {"type": data}
    if "type" in data:
        return data

    expression = dict(data)
    wrapped = {key: expression.pop(key) for key in _PROPERTY_KEYS if key in expression}
    wrapped["type"] = expression
    return wrapped


class TypeRef(BaseModel):
    """A type expression: a keyword or declared name, or a composite form."""

    model_config = ConfigDict(extra="forbid")

    ref: str | None = None
    array: "TypeRef | None" = None
    map: "TypeRef | None" = None
    union: "list[TypeRef] | None" = None
    format: str | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_shorthand(cls, data):
        """Normalize `string` to {ref: string} and `[a, b]` to {union: [a, b]}."""
        # YAML reads a bare `null` as None
        if data is None:
            return {"ref": "null"}
        if isinstance(data, str):
            return {"ref": data}
        if isinstance(data, list):
            return {"union": data}
        return data

    @model_validator(mode="after")
    def check_single_form(self) -> "TypeRef":
        """Ensure exactly one form is given."""
        given = [form for form in _TYPE_REF_FORMS if getattr(self, form) is not None]
        if len(given) != 1:
            raise ValueError(
                f"type expression needs exactly one of {', '.join(_TYPE_REF_FORMS)}, "
                f"got {', '.join(given) or 'none'}"
            )
        return self

    def describe(self) -> str:
        """Short human-readable form, used in error messages."""
        if self.ref is not None:
            return self.ref
        if self.array is not None:
            return f"array<{self.array.describe()}>"
        if self.map is not None:
            return f"map<{self.map.describe()}>"
        if self.union is not None:
            return " | ".join(member.describe() for member in self.union)
        return f"format<{self.format}>"


class Property(BaseModel):
    """A property of an object type."""

    name: str = ""  # Will be set from the key
    type: TypeRef
    optional: bool = False

    @model_validator(mode="before")
    @classmethod
    def normalize_property(cls, data):
        """Allow a bare type expression in place of {type: ...}."""
        return _wrap_property(data)


class TypeDeclaration(BaseModel):
    """A named object or enum type."""

    name: str = ""  # Will be set from the key
    kind: Literal["object", "enum"] = "object"
    properties: list[Property] = Field(default_factory=list)
    cases: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_declaration(cls, data):
        """Normalize property mappings and infer the kind."""
        if not isinstance(data, dict):
            return data

        if "kind" not in data and "cases" in data:
            data["kind"] = "enum"

        # properties: {key: expr} -> [{name: key, type: expr}]
        properties = data.get("properties")
        if isinstance(properties, dict):
            normalized = []
            for key, prop in properties.items():
                normalized.append({**_wrap_property(prop), "name": key})
            data["properties"] = normalized

        return data

    @model_validator(mode="after")
    def check_unique_members(self) -> "TypeDeclaration":
        """Property keys and enum cases must be unique."""
        if self.kind == "enum" and self.properties:
            raise ValueError(f"enum '{self.name}' cannot declare properties")
        if self.kind == "object" and self.cases:
            raise ValueError(f"object '{self.name}' cannot declare cases")

        seen: set[str] = set()
        for prop in self.properties:
            if prop.name in seen:
                raise ValueError(f"duplicate property '{prop.name}' in '{self.name}'")
            seen.add(prop.name)

        if len(set(self.cases)) != len(self.cases):
            raise ValueError(f"duplicate case in enum '{self.name}'")

        return self


class TypeGraphDocument(BaseModel):
    """Root model for a type graph document."""

    types: dict[str, TypeDeclaration] = Field(default_factory=dict)
    top_levels: dict[str, TypeRef] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_document(cls, data):
        """Set declaration names from keys and expand list-form top levels."""
        if not isinstance(data, dict):
            return data

        types = data.get("types", {})
        if isinstance(types, dict):
            for name, declaration in types.items():
                if isinstance(declaration, dict):
                    declaration["name"] = name

        # top_levels: [Person] -> {Person: Person}
        top_levels = data.get("top_levels", {})
        if isinstance(top_levels, list):
            data["top_levels"] = {name: name for name in top_levels}

        return data

    def get_declaration(self, name: str) -> TypeDeclaration | None:
        """Get a declared type by name."""
        return self.types.get(name)

    def get_all_type_names(self) -> list[str]:
        """Get all declared type names, in declaration order."""
        return list(self.types.keys())


TypeRef.model_rebuild()
