"""Dijkstra Route Solver adapter.

This adapter wraps the id-level shortest path search and adds:
- Name resolution in both directions
- Domain model output (RouteResult)
- Typed errors
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoRouteFoundError, VertexNotFoundError
from ...domain.models import RouteResult, Vertex
from ...graph.digraph import Graph
from ...graph.dijkstra import INF, path_weight, shortest_path


@dataclass
class DijkstraRouteSolver:
    """Route solver addressing vertices by name.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, departure: str, arrival: str) -> RouteResult:
        """Find the shortest path between two named vertices.

        Args:
            graph: The graph to search.
            departure: Name of the departure vertex.
            arrival: Name of the arrival vertex.

        Returns:
            RouteResult with path, names and total weight.

        Raises:
            VertexNotFoundError: If departure or arrival is not in graph.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure, "arrival": arrival},
        )

        src = self._resolve(graph, departure)
        dest = self._resolve(graph, arrival)

        path = shortest_path(graph, src, dest)
        if not path:
            self._logger.warning(
                "No route found",
                extra={"departure": departure, "arrival": arrival},
            )
            raise NoRouteFoundError(
                f"No path from {departure} to {arrival}",
                departure=departure,
                arrival=arrival,
            )

        result = self._to_result(graph, path)
        self._logger.info(
            "Route found",
            extra={
                "departure": departure,
                "arrival": arrival,
                "stops": result.num_stops,
                "total_weight": result.total_weight,
            },
        )
        return result

    def solve_safe(self, graph: Graph, departure: str, arrival: str) -> RouteResult:
        """Find the shortest path, returning an empty result on failure.

        Like solve(), but returns an empty RouteResult with infinite
        weight instead of raising.
        """
        src = graph.name_to_id(departure)
        dest = graph.name_to_id(arrival)
        if src is None or dest is None:
            return RouteResult(path=(), total_weight=INF)

        path = shortest_path(graph, src, dest)
        if not path:
            return RouteResult(path=(), total_weight=INF)

        return self._to_result(graph, path)

    def _resolve(self, graph: Graph, name: str) -> Vertex:
        v = graph.name_to_id(name)
        if v is None:
            raise VertexNotFoundError(f"Vertex not in graph: {name}", name=name)
        return v

    @staticmethod
    def _to_result(graph: Graph, path: list[Vertex]) -> RouteResult:
        names = tuple(graph.id_to_name(v) or "" for v in path)
        return RouteResult(
            path=tuple(path),
            total_weight=path_weight(graph, path),
            names=names,
        )
