"""Graph core: storage, traversal and shortest paths.

This subpackage holds the adjacency-list graph itself and the
algorithms that run on top of it.
"""

from .digraph import Graph
from .dijkstra import dijkstra, path_weight, pop_min, shortest_path
from .edge_list import EdgeList
from .report import describe_graph
from .traversal import LEVEL_MARKER, bfs, bfs_bounded, dfs

__all__ = [
    "Graph",
    "EdgeList",
    "bfs",
    "bfs_bounded",
    "dfs",
    "dijkstra",
    "shortest_path",
    "path_weight",
    "pop_min",
    "describe_graph",
    "LEVEL_MARKER",
]
