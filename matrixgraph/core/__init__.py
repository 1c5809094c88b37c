"""
Core graph data structures and management.

This module contains the adjacency-matrix graph representation and the
facade class that exposes it together with the traversals.
"""

__all__ = []
