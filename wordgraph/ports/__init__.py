"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the graph core and the containers
and services it is wired to.
"""

from .collections import FifoQueuePort, LifoStackPort, OrderedIndexPort, VertexSetPort
from .graph import RouteSolverPort

__all__ = [
    # Collaborators
    "OrderedIndexPort",
    "FifoQueuePort",
    "LifoStackPort",
    "VertexSetPort",
    # Routing
    "RouteSolverPort",
]
