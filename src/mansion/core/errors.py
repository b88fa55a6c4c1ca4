"""Error types raised while building and exploring a mansion map."""

from __future__ import annotations


class MansionError(Exception):
    """Base class for map and traversal failures."""


class AllocationError(MansionError):
    """A room could not be allocated; the map cannot be built."""

    def __init__(self, name: str, cause: BaseException | None = None):
        self.name = name
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to allocate room '{name}'{detail}")


class NoMapError(MansionError):
    """Traversal was requested without a root room."""

    def __init__(self, message: str = "The map was not built correctly; nothing to explore"):
        super().__init__(message)


class TraversalFinishedError(MansionError):
    """A move was submitted after the traversal reached a terminal state."""


__all__ = ["MansionError", "AllocationError", "NoMapError", "TraversalFinishedError"]
