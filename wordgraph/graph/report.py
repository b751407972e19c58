"""Plain-text dump of a graph for debugging."""

from __future__ import annotations

from typing import List, Sequence

from .digraph import Graph
from .traversal import bfs, dfs


def _vertex_row(graph: Graph, v: int, items: Sequence[object]) -> str:
    return f"   {v} ({graph.id_to_name(v)}): " + ", ".join(str(item) for item in items)


def describe_graph(graph: Graph, title: str, complete: bool = False) -> str:
    """Render vertex and edge counts, optionally with full per-vertex detail.

    With ``complete`` set, the report also lists every adjacency list in
    stored order followed by the neighbors, BFS order and DFS order of
    each vertex.
    """
    lines: List[str] = [
        f">>Graph: {title}",
        f"  # of vertices: {graph.num_vertices}",
        f"  # of edges:    {graph.num_edges}",
    ]
    if not complete:
        return "\n".join(lines)

    vertices = range(graph.num_vertices)

    lines.append("  Adjacency Lists:")
    lines.extend(_vertex_row(graph, v, graph.edges(v)) for v in vertices)

    lines.append("  Neighbors:")
    lines.extend(_vertex_row(graph, v, graph.neighbors(v)) for v in vertices)

    lines.append("  BFS:")
    lines.extend(_vertex_row(graph, v, bfs(graph, v)) for v in vertices)

    lines.append("  DFS:")
    lines.extend(_vertex_row(graph, v, dfs(graph, v)) for v in vertices)

    return "\n".join(lines)
