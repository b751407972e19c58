"""Top-level package for the word graph project.

A directed, weighted multigraph with named vertices, an ordered name
index, and breadth-first, depth-first and Dijkstra searches.
"""

from .adapters.graph import DijkstraRouteSolver
from .graph import (
    Graph,
    bfs,
    bfs_bounded,
    describe_graph,
    dfs,
    dijkstra,
    path_weight,
    shortest_path,
)

__all__ = [
    "Graph",
    "bfs",
    "bfs_bounded",
    "dfs",
    "dijkstra",
    "shortest_path",
    "path_weight",
    "describe_graph",
    "DijkstraRouteSolver",
]

__version__ = "0.1.0"
