"""Index adapters - Implementations of OrderedIndexPort.

Available implementations:
- AVLNameIndex: Height-balanced BST keyed by vertex name
"""

from .avl_index import AVLNameIndex

__all__ = ["AVLNameIndex"]
