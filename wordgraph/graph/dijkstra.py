"""Shortest-path computation using Dijkstra's algorithm.

Vertex selection is a linear scan over the queue of unfinalized
vertices rather than a binary heap, so each selection costs O(V).
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

from ..adapters.collections import FifoQueue
from ..domain.models import Vertex
from ..ports.collections import FifoQueuePort
from .digraph import Graph

logger = logging.getLogger(__name__)

INF = math.inf


def pop_min(unvisited: FifoQueuePort, distance: Sequence[float]) -> Vertex:
    """Remove and return the queued vertex with the smallest distance.

    Ties go to the vertex nearest the front of the queue. The other
    vertices are put back in their original order.

    Raises:
        IndexError: If ``unvisited`` is empty.
    """
    if unvisited.is_empty():
        raise IndexError("pop_min from empty queue")

    pending = [unvisited.dequeue() for _ in range(len(unvisited))]
    min_pos = min(range(len(pending)), key=lambda i: distance[pending[i]])

    for pos, v in enumerate(pending):
        if pos != min_pos:
            unvisited.enqueue(v)

    return pending[min_pos]


def dijkstra(
    graph: Graph, src: Vertex
) -> Optional[Tuple[List[float], List[Optional[Vertex]]]]:
    """Compute single-source shortest distances from ``src``.

    Parameters
    ----------
    graph:
        Graph to search. Multi-edges count with their minimum weight.
    src:
        Source vertex id.

    Returns
    -------
    list[float], list[int | None]
        ``distance[v]`` (``math.inf`` when unreachable) and
        ``predecessor[v]`` (None for ``src`` and unreachable vertices),
        or None if ``src`` is invalid.
    """
    if not graph.is_vertex(src):
        return None

    n = graph.num_vertices
    distance: List[float] = [INF] * n
    predecessor: List[Optional[Vertex]] = [None] * n
    distance[src] = 0

    unvisited = FifoQueue.of(range(n))

    while not unvisited.is_empty():
        current = pop_min(unvisited, distance)

        # everything still queued is unreachable
        if distance[current] == INF:
            break

        for adj in graph.neighbors(current) or []:
            alt = distance[current] + graph.edge_weight(current, adj)
            if alt < distance[adj]:
                distance[adj] = alt
                predecessor[adj] = current

    return distance, predecessor


def shortest_path(graph: Graph, src: Vertex, dest: Vertex) -> Optional[List[Vertex]]:
    """Compute a minimum-weight path from ``src`` to ``dest``.

    Returns:
        The path ``[src, ..., dest]``; ``[src]`` when ``src == dest``;
        an empty list when ``dest`` is unreachable; None when either
        endpoint is invalid.
    """
    if not graph.is_vertex(src) or not graph.is_vertex(dest):
        return None

    result = dijkstra(graph, src)
    assert result is not None
    _, predecessor = result

    if dest == src:
        return [src]

    if predecessor[dest] is None:
        logger.debug("Destination unreachable", extra={"src": src, "dest": dest})
        return []

    path: List[Vertex] = []
    current: Optional[Vertex] = dest
    while current is not None:
        path.append(current)
        current = predecessor[current]

    path.reverse()
    return path


def path_weight(graph: Graph, path: Sequence[Vertex]) -> float:
    """Sum the edge weights along ``path``, minimum weight per hop.

    Raises:
        EdgeNotFoundError: If two consecutive vertices are not joined.
    """
    return sum(graph.edge_weight(u, v) for u, v in zip(path, path[1:]))
