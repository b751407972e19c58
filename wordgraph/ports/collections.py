"""Collection ports - Contracts for the containers the graph consumes.

The graph core only relies on these protocols; the concrete containers
live in adapters/index and adapters/collections.
"""

from __future__ import annotations

from typing import Iterator, Optional, Protocol, Tuple

from ..domain.models import Vertex


class OrderedIndexPort(Protocol):
    """Port for the ordered name -> vertex id mapping.

    Implementation: adapters/index/avl_index.py

    Keys are compared by exact codepoint ordering; insert and lookup
    must be logarithmic in the number of keys.
    """

    def insert(self, key: str, vertex: Vertex) -> None:
        """Map ``key`` to ``vertex``, replacing any previous mapping."""
        ...

    def lookup(self, key: str) -> Optional[Vertex]:
        """Return the id mapped to ``key``, or None on an exact miss."""
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[Tuple[str, Vertex]]:
        """Iterate ``(key, id)`` pairs in ascending key order."""
        ...


class FifoQueuePort(Protocol):
    """Port for the frontier queue used by BFS and Dijkstra."""

    def enqueue(self, vertex: Vertex) -> None:
        ...

    def dequeue(self) -> Vertex:
        ...

    def peek(self) -> Vertex:
        ...

    def is_empty(self) -> bool:
        ...

    def contains(self, vertex: Vertex) -> bool:
        ...

    def __len__(self) -> int:
        ...


class LifoStackPort(Protocol):
    """Port for the frontier stack used by DFS."""

    def push(self, vertex: Vertex) -> None:
        ...

    def pop(self) -> Vertex:
        ...

    def is_empty(self) -> bool:
        ...


class VertexSetPort(Protocol):
    """Port for a set over the fixed universe ``[0, N)`` of vertex ids."""

    def add(self, vertex: Vertex) -> None:
        ...

    def contains(self, vertex: Vertex) -> bool:
        ...
