"""
Traversal labels written by depth-first and breadth-first search.
"""

from enum import Enum


class DFSLabel(Enum):
    """Labels assigned during depth-first search."""
    UNEXPLORED = "unexplored"
    VISITED = "visited"
    DISCOVERY = "discovery"
    BACK = "back"


class BFSLabel(Enum):
    """Labels assigned during breadth-first search."""
    UNEXPLORED = "unexplored"
    VISITED = "visited"
    DISCOVERY = "discovery"
    CROSS = "cross"
