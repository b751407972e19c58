"""Immutable domain models for the word graph.

All models are frozen dataclasses with slots for memory efficiency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

# Vertex ids are dense, append-only integers in [0, num_vertices).
Vertex = int
Weight = Union[int, float]


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted edge owned by its source vertex.

    Attributes:
        src: Source vertex id
        dest: Destination vertex id
        weight: Edge weight
    """

    src: Vertex
    dest: Vertex
    weight: Weight

    @property
    def is_loop(self) -> bool:
        """Check if the edge starts and ends at the same vertex."""
        return self.src == self.dest

    def __str__(self) -> str:
        return f"({self.src},{self.dest},{self.weight})"


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a name-level shortest path query.

    Attributes:
        path: Ordered tuple of vertex ids forming the route
        names: Vertex names for each stop of the route
        total_weight: Sum of the (minimum) edge weights along the route
    """

    path: tuple[Vertex, ...]
    total_weight: float
    names: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.path)

    @property
    def num_hops(self) -> int:
        """Return the number of edges traversed by the route."""
        return max(len(self.path) - 1, 0)
