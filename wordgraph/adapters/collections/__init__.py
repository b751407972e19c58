"""Collection adapters - Frontier queue, stack and vertex set."""

from .frontier import FifoQueue, LifoStack, VertexSet

__all__ = ["FifoQueue", "LifoStack", "VertexSet"]
