"""Validator expressions as sequences of text and name references."""

from dataclasses import dataclass
from typing import Union

from .naming import Name

Part = Union[str, Name]


@dataclass(frozen=True)
class Expression:
    """A validator-construction expression.

    Names are kept as `Name` parts rather than flattened into text so that
    callers can find which declarations an expression refers to.
    """

    parts: tuple[Part, ...] = ()

    @classmethod
    def of(cls, *items: "str | Name | Expression") -> "Expression":
        """Build an expression from text, names and nested expressions."""
        parts: list[Part] = []
        for item in items:
            if isinstance(item, Expression):
                parts.extend(item.parts)
            else:
                parts.append(item)
        return cls(tuple(parts))

    @classmethod
    def join(cls, separator: str, items: list["Expression"]) -> "Expression":
        """Join expressions with a separator, like str.join."""
        joined: list[str | Name | Expression] = []
        for i, item in enumerate(items):
            if i:
                joined.append(separator)
            joined.append(item)
        return cls.of(*joined)

    def references(self) -> list[Name]:
        """Names referenced by this expression, in order of appearance."""
        return [part for part in self.parts if isinstance(part, Name)]

    def render(self) -> str:
        return "".join(str(part) for part in self.parts)

    def __str__(self) -> str:
        return self.render()
