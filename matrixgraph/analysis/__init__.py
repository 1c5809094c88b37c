"""
Graph analysis modules.

This module contains the depth-first and breadth-first traversals.
"""

__all__ = []
