"""Breadth-first and depth-first traversal.

Neighbors are always expanded in ascending id order, so every result
is deterministic for a given set of edges, regardless of the order
those edges were inserted in.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..adapters.collections import FifoQueue, LifoStack, VertexSet
from ..domain.models import Vertex
from ..ports.collections import FifoQueuePort, LifoStackPort, VertexSetPort
from .digraph import Graph

logger = logging.getLogger(__name__)

# Queued between BFS levels; never a valid vertex id.
LEVEL_MARKER: Vertex = -1


def bfs(graph: Graph, start: Vertex) -> Optional[List[Vertex]]:
    """Breadth-first search from ``start``.

    Parameters
    ----------
    graph:
        Graph to traverse.
    start:
        Id of the first vertex to visit.

    Returns
    -------
    list[int] or None
        Every vertex reachable from ``start`` exactly once, in visit
        order with ``start`` first. None if ``start`` is invalid.
    """
    if not graph.is_vertex(start):
        return None

    frontier: FifoQueuePort = FifoQueue()
    discovered: VertexSetPort = VertexSet(graph.num_vertices)
    frontier.enqueue(start)
    discovered.add(start)

    visited: List[Vertex] = []
    while not frontier.is_empty():
        current = frontier.dequeue()
        visited.append(current)

        for adj in graph.neighbors(current) or []:
            if not discovered.contains(adj):
                frontier.enqueue(adj)
                discovered.add(adj)

    logger.debug("BFS complete", extra={"start": start, "visited": len(visited)})
    return visited


def bfs_bounded(
    graph: Graph, start: Vertex, max_distance: int
) -> Optional[List[List[Vertex]]]:
    """Breadth-first search from ``start`` grouped by distance.

    Returns exactly ``max_distance + 1`` groups: group ``k`` holds the
    vertices first discovered ``k`` edges away from ``start``, in
    ascending order. Groups past the reachable set are empty. None if
    ``start`` is invalid or ``max_distance < 1``.
    """
    if not graph.is_vertex(start) or max_distance < 1:
        return None

    frontier: FifoQueuePort = FifoQueue()
    discovered: VertexSetPort = VertexSet(graph.num_vertices)
    frontier.enqueue(start)
    discovered.add(start)
    frontier.enqueue(LEVEL_MARKER)

    levels: List[List[Vertex]] = []
    current_level: List[Vertex] = []
    remaining = max_distance

    while not frontier.is_empty():
        if frontier.peek() == LEVEL_MARKER:
            levels.append(sorted(current_level))
            current_level = []

            remaining -= 1
            if remaining < 0:
                break

            # rotate the marker behind the level just queued
            frontier.dequeue()
            frontier.enqueue(LEVEL_MARKER)
            continue

        current = frontier.dequeue()
        current_level.append(current)

        for adj in graph.neighbors(current) or []:
            if not discovered.contains(adj):
                frontier.enqueue(adj)
                discovered.add(adj)

    logger.debug(
        "Bounded BFS complete",
        extra={"start": start, "max_distance": max_distance, "levels": len(levels)},
    )
    return levels


def dfs(graph: Graph, start: Vertex) -> Optional[List[Vertex]]:
    """Depth-first search from ``start``.

    A vertex may sit on the stack several times but is recorded and
    expanded only once. Neighbors are pushed largest first so the
    smallest id is explored first.

    Returns:
        Reachable vertices in discovery order, ``start`` first; None if
        ``start`` is invalid.
    """
    if not graph.is_vertex(start):
        return None

    frontier: LifoStackPort = LifoStack()
    expanded: VertexSetPort = VertexSet(graph.num_vertices)
    recorded: VertexSetPort = VertexSet(graph.num_vertices)
    frontier.push(start)

    visited: List[Vertex] = []
    while not frontier.is_empty():
        current = frontier.pop()

        if not recorded.contains(current):
            recorded.add(current)
            visited.append(current)

        if not expanded.contains(current):
            expanded.add(current)
            for adj in reversed(graph.neighbors(current) or []):
                frontier.push(adj)

    logger.debug("DFS complete", extra={"start": start, "visited": len(visited)})
    return visited
