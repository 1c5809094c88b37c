"""
Vertex entity stored in a MatrixGraph.
"""

from typing import Any, Optional

from .labels import DFSLabel, BFSLabel


class pyvertex:
    """
    A graph vertex holding a user payload.

    The index is the vertex's row/column in the adjacency matrix. It is
    assigned once by the graph and never reused.
    """

    __slots__ = ("_element", "_index", "node", "owner", "dfs_label", "bfs_label")

    def __init__(self, element: Any, index: int, owner: Optional[Any] = None):
        """
        Initialize a vertex.

        Args:
            element: Payload stored on the vertex
            index: Adjacency matrix index assigned by the graph
            owner: Graph that owns this vertex
        """
        self._element = element
        self._index = index
        self.node = None
        self.owner = owner
        self.dfs_label: Optional[DFSLabel] = None
        self.bfs_label: Optional[BFSLabel] = None

    @property
    def element(self) -> Any:
        return self._element

    @property
    def index(self) -> int:
        return self._index

    def is_live(self) -> bool:
        """Whether the vertex is still part of a graph."""
        return self.owner is not None

    def __str__(self) -> str:
        return str(self._element)

    def __repr__(self) -> str:
        return f"pyvertex({self._element!r}, index={self._index})"
