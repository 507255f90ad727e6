"""Helper validators for transformed-string format tags."""

from dataclasses import dataclass

from ..graph.type_graph import TypeGraph
from ..log import get_logger
from .naming import IMPORT_ALIAS, name_style

logger = get_logger(__name__)

# Tags whose helper name ends in "String"
_TEMPORAL_FORMATS = ("date", "time", "date-time")


@dataclass(frozen=True)
class StringFormat:
    """A recognized format tag and how to validate it.

    Formats checked by a regular expression carry `pattern` (a JavaScript
    regex body) and `flags`; the others carry a `predicate` arrow function.
    """

    tag: str
    description: str
    pattern: str | None = None
    flags: str = ""
    predicate: str | None = None

    @property
    def helper_name(self) -> str:
        """Exported helper identifier, e.g. `DateTimeString` for `date-time`."""
        raw = self.tag.replace("-", "_", 1)
        if self.tag in _TEMPORAL_FORMATS:
            raw += "_string"
        return name_style(raw)

    @property
    def pattern_constant(self) -> str | None:
        """Name of the supporting regex constant, e.g. `DATE_TIME_REGEXP`."""
        if self.pattern is None:
            return None
        return f"{self.tag.replace('-', '_').upper()}_REGEXP"

    def pattern_declaration(self) -> str | None:
        if self.pattern is None:
            return None
        return f"const {self.pattern_constant} = /{self.pattern}/{self.flags};"

    def helper_declaration(self) -> str:
        if self.pattern is not None:
            test = f"(value) => {self.pattern_constant}.test(value)"
        else:
            test = self.predicate
        return (
            f"export const {self.helper_name} = "
            f"{IMPORT_ALIAS}.refine({IMPORT_ALIAS}.string(), "
            f"\"{self.description}\", {test});"
        )


STRING_FORMAT_REGISTRY: dict[str, StringFormat] = {
    fmt.tag: fmt
    for fmt in (
        StringFormat(
            tag="date",
            description="date string",
            pattern=r"^(\d\d\d\d)-(\d\d)-(\d\d)$",
        ),
        StringFormat(
            tag="time",
            description="time string",
            pattern=r"^(\d\d):(\d\d):(\d\d)(\.\d+)?(z|[+-]\d\d:\d\d)?$",
            flags="i",
        ),
        StringFormat(
            tag="date-time",
            description="date time string",
            pattern=(
                r"^(\d\d\d\d)-(\d\d)-(\d\d)(t|\s)(\d\d):(\d\d):(\d\d)"
                r"(\.\d+)?(z|[+-]\d\d:\d\d)?$"
            ),
            flags="i",
        ),
        StringFormat(
            tag="uuid",
            description="uuid",
            pattern=r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
        ),
        StringFormat(
            tag="uri",
            description="uri",
            pattern=r"^(https?|ftp):\/\/[^{}]+$",
        ),
        StringFormat(
            tag="integer-string",
            description="integer string",
            pattern=r"^(0|-?[1-9]\d*)$",
        ),
        StringFormat(
            tag="bool-string",
            description="bool string",
            predicate='(value) => value === "true" || value === "false"',
        ),
    )
}


def helper_names() -> dict[str, str]:
    """Format tag to helper identifier, for every recognized format."""
    return {tag: fmt.helper_name for tag, fmt in STRING_FORMAT_REGISTRY.items()}


def get_format(tag: str) -> StringFormat | None:
    return STRING_FORMAT_REGISTRY.get(tag)


def collect_formats(graph: TypeGraph) -> list[StringFormat]:
    """Recognized formats used in the graph, in first-occurrence order.

    Unrecognized tags are skipped; the mapper treats them as plain strings.

    Args:
        graph: The resolved type graph.

    Returns:
        One StringFormat per distinct recognized tag.
    """
    formats: list[StringFormat] = []
    for tag in graph.format_tags():
        fmt = STRING_FORMAT_REGISTRY.get(tag)
        if fmt is None:
            logger.warning("Unrecognized string format '%s', treating as string", tag)
            continue
        formats.append(fmt)
    return formats
