"""Directed, weighted multigraph backed by adjacency lists.

Vertices are dense integer ids handed out in insertion order. Each
vertex owns a name and an EdgeList; an ordered index maps names back
to ids. Loops and multi-edges are allowed; edges are never removed.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..adapters.index import AVLNameIndex
from ..config import get_config
from ..domain.errors import DuplicateVertexError, EdgeNotFoundError, InvalidCapacityError
from ..domain.models import Edge, Vertex, Weight
from ..ports.collections import OrderedIndexPort
from .edge_list import EdgeList


class Graph:
    """Directed graph with named vertices and sorted adjacency lists.

    Usage:
        graph = Graph(capacity=4)
        cat = graph.add_vertex("cat")
        bat = graph.add_vertex("bat")
        graph.add_edge(cat, bat, 1)
        graph.neighbors(cat)  # -> [bat]

    Args:
        capacity: Initial vertex-table size; defaults to
            ``GraphConfig.initial_capacity``. The table doubles on overflow.
        allow_duplicate_names: Whether a name may be added twice; defaults
            to ``GraphConfig.allow_duplicate_names``. When allowed, the
            index resolves the name to the newest vertex.
        index_factory: Builds the name index.

    Raises:
        InvalidCapacityError: If ``capacity`` is below 1.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        allow_duplicate_names: Optional[bool] = None,
        index_factory: Callable[[], OrderedIndexPort] = AVLNameIndex,
    ) -> None:
        if capacity is None or allow_duplicate_names is None:
            config = get_config().graph
            if capacity is None:
                capacity = config.initial_capacity
            if allow_duplicate_names is None:
                allow_duplicate_names = config.allow_duplicate_names

        if capacity < 1:
            raise InvalidCapacityError(
                f"Invalid graph capacity: {capacity}",
                capacity=capacity,
            )

        self._logger = logging.getLogger(__name__)
        self._capacity = capacity
        self._names: List[Optional[str]] = [None] * capacity
        self._adjacency: List[Optional[EdgeList]] = [None] * capacity
        self._num_vertices = 0
        self._num_edges = 0
        self._index = index_factory()
        self.allow_duplicate_names = allow_duplicate_names

    @classmethod
    def create(cls, capacity: int, **kwargs) -> Graph:
        """Create an empty graph with room for ``capacity`` vertices."""
        return cls(capacity=capacity, **kwargs)

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def num_edges(self) -> int:
        return self._num_edges

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._num_vertices

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._index.lookup(name) is not None

    def __repr__(self) -> str:
        return (
            f"Graph(vertices={self._num_vertices}, edges={self._num_edges}, "
            f"capacity={self._capacity})"
        )

    def is_vertex(self, v: Vertex) -> bool:
        """Check if ``v`` is a live vertex id."""
        return 0 <= v < self._num_vertices

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def add_vertex(self, name: str) -> Vertex:
        """Add a vertex called ``name`` and return its id.

        Ids are assigned sequentially from 0. A full vertex table is
        doubled first; existing ids and edge lists are preserved.

        Raises:
            DuplicateVertexError: If duplicates are disallowed and ``name``
                is already indexed.
        """
        existing = self._index.lookup(name)
        if existing is not None:
            if not self.allow_duplicate_names:
                raise DuplicateVertexError(
                    f"Vertex name already in graph: {name}",
                    name=name,
                    existing_id=existing,
                )
            self._logger.warning(
                "Duplicate vertex name shadows earlier vertex",
                extra={"vertex_name": name, "shadowed_id": existing},
            )

        v = self._num_vertices
        if v == self._capacity:
            self._grow()

        self._index.insert(name, v)
        self._names[v] = name
        self._adjacency[v] = EdgeList()
        self._num_vertices += 1
        return v

    def _grow(self) -> None:
        new_capacity = 2 * self._capacity
        extra = new_capacity - self._capacity
        self._names.extend([None] * extra)
        self._adjacency.extend([None] * extra)
        self._logger.debug(
            "Vertex table grown",
            extra={"old_capacity": self._capacity, "new_capacity": new_capacity},
        )
        self._capacity = new_capacity

    def name_to_id(self, name: str) -> Optional[Vertex]:
        """Look up a vertex id by exact name; None if not found."""
        return self._index.lookup(name)

    def id_to_name(self, v: Vertex) -> Optional[str]:
        """Look up a vertex name by id; None if ``v`` is invalid."""
        if not self.is_vertex(v):
            return None
        return self._names[v]

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, src: Vertex, dest: Vertex, weight: Weight) -> bool:
        """Add the directed edge ``src -> dest``.

        The edge is inserted into ``src``'s list before any edge whose
        destination is the same or larger.

        Returns:
            True on success, False (graph unchanged) if either endpoint
            is not a valid vertex id.
        """
        if not self.is_vertex(src) or not self.is_vertex(dest):
            return False

        self._edge_list(src).insert(Edge(src=src, dest=dest, weight=weight))
        self._num_edges += 1
        return True

    def edges(self, v: Vertex) -> Optional[List[Edge]]:
        """Return the edges leaving ``v`` in stored order; None if invalid."""
        if not self.is_vertex(v):
            return None
        return list(self._edge_list(v))

    def neighbors(self, v: Vertex) -> Optional[List[Vertex]]:
        """Return the distinct neighbors of ``v`` in ascending order.

        Each call returns a new list. None if ``v`` is invalid.
        """
        if not self.is_vertex(v):
            return None
        return self._edge_list(v).destinations()

    def edge_weight(self, src: Vertex, dest: Vertex) -> Weight:
        """Return the weight of ``src -> dest``, the minimum over multi-edges.

        Callers must only ask for edges known to exist.

        Raises:
            EdgeNotFoundError: If an endpoint is invalid or no such edge
                exists.
        """
        if not self.is_vertex(src):
            raise EdgeNotFoundError(
                f"Invalid source vertex: {src}", src=src, dest=dest
            )
        if not self.is_vertex(dest):
            raise EdgeNotFoundError(
                f"Invalid destination vertex: {dest}", src=src, dest=dest
            )

        weight = self._edge_list(src).min_weight(dest)
        if weight is None:
            raise EdgeNotFoundError(
                f"No edge found from {src} to {dest}", src=src, dest=dest
            )
        return weight

    def _edge_list(self, v: Vertex) -> EdgeList:
        edge_list = self._adjacency[v]
        assert edge_list is not None
        return edge_list
