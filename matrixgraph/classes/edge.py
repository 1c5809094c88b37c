"""
Edge entity stored in a MatrixGraph.
"""

from typing import Any, Optional, Tuple

from .labels import DFSLabel, BFSLabel
from .vertex import pyvertex


class pyedge:
    """
    An undirected edge between two vertices, holding a user payload.

    The endpoints are kept in the order they were given at insertion;
    the edge does not own them.
    """

    __slots__ = ("_element", "start", "end", "node", "owner", "dfs_label", "bfs_label")

    def __init__(self, start: pyvertex, end: pyvertex, element: Any, owner: Optional[Any] = None):
        self._element = element
        self.start = start
        self.end = end
        self.node = None
        self.owner = owner
        self.dfs_label: Optional[DFSLabel] = None
        self.bfs_label: Optional[BFSLabel] = None

    @property
    def element(self) -> Any:
        return self._element

    @property
    def endpoints(self) -> Tuple[pyvertex, pyvertex]:
        return self.start, self.end

    def is_incident(self, vertex: pyvertex) -> bool:
        return self.start is vertex or self.end is vertex

    def is_self_loop(self) -> bool:
        return self.start is self.end

    def is_live(self) -> bool:
        return self.owner is not None

    def __str__(self) -> str:
        return str(self._element)

    def __repr__(self) -> str:
        return f"pyedge({self._element!r}, {self.start.element!r} - {self.end.element!r})"
