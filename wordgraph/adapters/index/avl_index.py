"""AVL-tree name index.

Implements OrderedIndexPort with a height-balanced binary search tree,
giving O(log n) insert and exact-match lookup. Keys are ordered by
plain string comparison (codepoint order).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ...domain.models import Vertex


@dataclass(slots=True)
class _AVLNode:
    key: str
    vertex: Vertex
    height: int = 0
    left: Optional[_AVLNode] = None
    right: Optional[_AVLNode] = None


def _height(node: Optional[_AVLNode]) -> int:
    return node.height if node is not None else -1


def _update(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(node: _AVLNode) -> _AVLNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _AVLNode) -> _AVLNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: _AVLNode) -> _AVLNode:
    _update(node)
    balance = _height(node.left) - _height(node.right)

    if balance > 1:
        assert node.left is not None
        if _height(node.left.left) < _height(node.left.right):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)

    if balance < -1:
        assert node.right is not None
        if _height(node.right.right) < _height(node.right.left):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)

    return node


@dataclass
class AVLNameIndex:
    """Ordered name -> vertex id index backed by an AVL tree.

    Inserting a key that is already present replaces its id, so the
    most recent vertex with a given name is the one lookups resolve.

    Example:
        index = AVLNameIndex()
        index.insert("cat", 0)
        index.lookup("cat")  # -> 0
    """

    _root: Optional[_AVLNode] = field(default=None, repr=False)
    _size: int = field(default=0, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def insert(self, key: str, vertex: Vertex) -> None:
        """Map ``key`` to ``vertex``, replacing any previous mapping.

        Args:
            key: Name to index.
            vertex: Vertex id the name resolves to.
        """
        self._root = self._insert(self._root, key, vertex)

    def _insert(self, node: Optional[_AVLNode], key: str, vertex: Vertex) -> _AVLNode:
        if node is None:
            self._size += 1
            return _AVLNode(key=key, vertex=vertex)

        if key < node.key:
            node.left = self._insert(node.left, key, vertex)
        elif key > node.key:
            node.right = self._insert(node.right, key, vertex)
        else:
            self._logger.debug(
                "Index key remapped",
                extra={"key": key, "old_vertex": node.vertex, "new_vertex": vertex},
            )
            node.vertex = vertex
            return node

        return _rebalance(node)

    def lookup(self, key: str) -> Optional[Vertex]:
        """Return the id mapped to ``key``, or None if absent.

        Args:
            key: Exact name to look up.

        Returns:
            The vertex id, or None on a miss.
        """
        cur = self._root
        while cur is not None:
            if key == cur.key:
                return cur.vertex
            cur = cur.left if key < cur.key else cur.right
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Return the tree height (-1 for an empty index)."""
        return _height(self._root)

    def __iter__(self) -> Iterator[Tuple[str, Vertex]]:
        stack: List[_AVLNode] = []
        cur = self._root
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.key, cur.vertex
            cur = cur.right
