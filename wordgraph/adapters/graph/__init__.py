"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DijkstraRouteSolver: Finds shortest paths between named vertices
"""

from .route_solver import DijkstraRouteSolver

__all__ = ["DijkstraRouteSolver"]
