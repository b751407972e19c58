"""Graph ports - Abstraction for name-level routing.

The solver computes minimum-weight paths through a Graph, addressing
vertices by name instead of by id.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import RouteResult
    from ..graph.digraph import Graph


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/route_solver.py
    """

    def solve(self, graph: Graph, departure: str, arrival: str) -> RouteResult:
        """Find the shortest path between two named vertices.

        Args:
            graph: The graph to search.
            departure: Name of the departure vertex.
            arrival: Name of the arrival vertex.

        Returns:
            RouteResult with path, names and total weight.
        """
        ...
