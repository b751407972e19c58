"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Name index (AVL tree)
- Frontier containers (FIFO queue, LIFO stack, vertex set)
- Name-level routing (Dijkstra)
"""
