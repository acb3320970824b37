"""Breadth-first search, graph colouring, and binary tree queries and traversals."""

__version__ = "0.1.0"
__all__ = ["bfs", "colouring", "tree", "tree_queries", "tree_traversals"]