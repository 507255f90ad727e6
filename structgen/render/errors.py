"""Exception classes for rendering."""


class RenderError(Exception):
    """Base exception for rendering errors."""

    pass


class InvariantViolation(RenderError):
    """Raised when the renderer reaches a state a well-formed graph cannot produce.

    For example, mapping an object or enum type that has no assigned name.
    """

    def __init__(self, message: str, kind: str | None = None):
        self.kind = kind
        super().__init__(message)


class DependencyCycleError(RenderError):
    """Raised when two or more object types reference each other cyclically."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        path = " -> ".join(cycle + cycle[:1])
        super().__init__(f"Object types reference each other cyclically: {path}")
