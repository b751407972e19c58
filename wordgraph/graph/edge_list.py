"""Per-vertex edge list kept sorted by destination.

Multi-edges to the same destination are therefore contiguous, which is
what neighbor extraction and minimum-weight lookup rely on.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from operator import attrgetter
from typing import Iterator, List, Optional

from ..domain.models import Edge, Vertex, Weight

_dest = attrgetter("dest")


class EdgeList:
    """Ordered container of the edges leaving one vertex."""

    __slots__ = ("_edges",)

    def __init__(self) -> None:
        self._edges: List[Edge] = []

    def insert(self, edge: Edge) -> int:
        """Insert ``edge`` before every stored edge with ``dest >= edge.dest``.

        A new multi-edge therefore lands ahead of its same-destination
        siblings. Returns the position the edge was stored at.
        """
        pos = bisect_left(self._edges, edge.dest, key=_dest)
        self._edges.insert(pos, edge)
        return pos

    def run(self, dest: Vertex) -> List[Edge]:
        """Return the contiguous run of edges pointing at ``dest``."""
        lo = bisect_left(self._edges, dest, key=_dest)
        hi = bisect_right(self._edges, dest, lo=lo, key=_dest)
        return self._edges[lo:hi]

    def min_weight(self, dest: Vertex) -> Optional[Weight]:
        """Return the smallest weight among edges to ``dest``, or None."""
        run = self.run(dest)
        if not run:
            return None
        return min(edge.weight for edge in run)

    def destinations(self) -> List[Vertex]:
        """Return each distinct destination once, ascending."""
        result: List[Vertex] = []
        for edge in self._edges:
            # sorted by dest, so duplicates can only follow each other
            if not result or result[-1] != edge.dest:
                result.append(edge.dest)
        return result

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"EdgeList({', '.join(str(e) for e in self._edges)})"
