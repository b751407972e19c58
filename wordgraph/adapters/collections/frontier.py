"""Frontier containers for the graph algorithms.

Each algorithm call creates its own containers and drops them before
returning; nothing here is shared between calls.
"""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, List

from ...domain.models import Vertex


@dataclass
class FifoQueue:
    """Growable FIFO queue of vertex ids with O(1) membership test.

    Implements FifoQueuePort.
    """

    _items: Deque[Vertex] = field(default_factory=deque, repr=False)
    _counts: Counter = field(default_factory=Counter, repr=False)

    @classmethod
    def of(cls, vertices: Iterable[Vertex]) -> FifoQueue:
        queue = cls()
        for v in vertices:
            queue.enqueue(v)
        return queue

    def enqueue(self, vertex: Vertex) -> None:
        self._items.append(vertex)
        self._counts[vertex] += 1

    def dequeue(self) -> Vertex:
        """Remove and return the front vertex.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._items:
            raise IndexError("dequeue from empty queue")
        vertex = self._items.popleft()
        self._counts[vertex] -= 1
        if not self._counts[vertex]:
            del self._counts[vertex]
        return vertex

    def peek(self) -> Vertex:
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def contains(self, vertex: Vertex) -> bool:
        return vertex in self._counts

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class LifoStack:
    """LIFO stack of vertex ids. Implements LifoStackPort."""

    _items: List[Vertex] = field(default_factory=list, repr=False)

    def push(self, vertex: Vertex) -> None:
        self._items.append(vertex)

    def pop(self) -> Vertex:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class VertexSet:
    """Set over the fixed universe ``[0, size)`` of vertex ids.

    Implements VertexSetPort with one byte per possible member.
    """

    __slots__ = ("_members", "_count")

    def __init__(self, size: int) -> None:
        self._members = bytearray(size)
        self._count = 0

    def add(self, vertex: Vertex) -> None:
        """Add ``vertex`` to the set.

        Raises:
            IndexError: If ``vertex`` lies outside the universe.
        """
        if not 0 <= vertex < len(self._members):
            raise IndexError(f"vertex {vertex} outside set universe")
        if not self._members[vertex]:
            self._members[vertex] = 1
            self._count += 1

    def contains(self, vertex: Vertex) -> bool:
        return 0 <= vertex < len(self._members) and bool(self._members[vertex])

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, int) and self.contains(vertex)

    def __len__(self) -> int:
        return self._count
