"""Typed domain errors for the word graph.

All errors inherit from WordGraphError and can optionally wrap a root
cause exception for debugging.

Invalid vertex ids passed to the core graph operations are not errors:
those operations answer with None or False. The classes below cover the
remaining failure modes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class WordGraphError(Exception):
    """Base error for the word graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(WordGraphError):
    """Graph construction or structural integrity error."""


@dataclass
class InvalidCapacityError(GraphError):
    """A graph was requested with an initial capacity below 1.

    Attributes:
        capacity: The rejected capacity
    """

    capacity: int = 0


@dataclass
class DuplicateVertexError(GraphError):
    """A vertex name is already indexed and duplicates are disallowed.

    Attributes:
        name: The rejected vertex name
        existing_id: Id the index currently resolves the name to
    """

    name: str = ""
    existing_id: int = -1


@dataclass
class EdgeNotFoundError(GraphError):
    """Weight requested for an edge that does not exist.

    Only raised when a caller breaks the contract of ``edge_weight``,
    so nothing in this package catches it.

    Attributes:
        src: Source vertex id of the missing edge
        dest: Destination vertex id of the missing edge
    """

    src: int = -1
    dest: int = -1


@dataclass
class VertexNotFoundError(WordGraphError):
    """Vertex name not found in the graph.

    Attributes:
        name: The vertex name that was not found
    """

    name: str = ""


@dataclass
class NoRouteFoundError(WordGraphError):
    """No path exists between the requested vertices.

    Attributes:
        departure: Name of the departure vertex
        arrival: Name of the arrival vertex
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class ConfigurationError(WordGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
