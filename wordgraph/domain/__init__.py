"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DuplicateVertexError,
    EdgeNotFoundError,
    GraphError,
    InvalidCapacityError,
    NoRouteFoundError,
    VertexNotFoundError,
    WordGraphError,
)
from .models import Edge, RouteResult, Vertex, Weight

__all__ = [
    # Models
    "Edge",
    "RouteResult",
    "Vertex",
    "Weight",
    # Errors
    "WordGraphError",
    "GraphError",
    "InvalidCapacityError",
    "DuplicateVertexError",
    "EdgeNotFoundError",
    "VertexNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
]
