"""
Core adjacency-matrix graph data structure.

This module provides the undirected graph engine without traversal logic.
"""

import logging
from typing import Any, Iterator, Optional, Tuple, Union

import numpy as np

from ..classes.edge import pyedge
from ..classes.exceptions import EdgeNotIncidentError, GraphMembershipError
from ..classes.handle_list import pyhandlelist
from ..classes.vertex import pyvertex

logger = logging.getLogger(__name__)


class MatrixGraph:
    """
    Undirected graph backed by an adjacency matrix.

    This class manages the fundamental graph representation. It provides:
    - Vertex and edge sets kept in insertion order
    - A max_index x max_index matrix of edge references
    - Structural queries (endpoints, opposite vertex, adjacency, incidence)
    - Insertion, removal and payload replacement

    Vertex indices are assigned from a counter that only grows, so a removed
    vertex's row and column stay allocated and are never handed out again.
    The edge list is always authoritative; the matrix is rebuilt from it on
    every vertex insertion or removal.
    """

    def __init__(self, eager_edge_clear: bool = True):
        """
        Initialize an empty graph.

        Args:
            eager_edge_clear: Clear the two matrix cells of an edge as soon as
                it is removed. When False the cells are left in place until
                the next vertex insertion or removal rebuilds the matrix.
        """
        self.eager_edge_clear = eager_edge_clear

        self._vertices = pyhandlelist()
        self._edges = pyhandlelist()

        self._max_index = 0
        self._matrix = np.full((0, 0), None, dtype=object)

        logger.debug(f"Initialized MatrixGraph (eager_edge_clear={eager_edge_clear})")

    # ------------------------------------------------------------------
    # Matrix maintenance
    # ------------------------------------------------------------------

    def _rebuild_matrix(self):
        """
        Allocate a fresh max_index x max_index matrix and repopulate it.

        Both symmetric cells are written for every live edge, so entries of
        removed edges never survive a rebuild.
        """
        matrix = np.full((self._max_index, self._max_index), None, dtype=object)

        for edge in self._edges:
            start, end = self.end_vertices(edge)
            matrix[start.index, end.index] = edge
            matrix[end.index, start.index] = edge

        self._matrix = matrix
        logger.debug(f"Rebuilt {self._max_index}x{self._max_index} adjacency matrix "
                     f"from {len(self._edges)} edges")

    def _cell(self, v: pyvertex, w: pyvertex) -> Optional[pyedge]:
        edge = self._matrix[v.index, w.index]
        if edge is None or not edge.is_live():
            # Only reachable when eager_edge_clear is off and a removed edge
            # still occupies the cell.
            return None
        return edge

    def _find_edge(self, v: pyvertex, w: pyvertex) -> Optional[pyedge]:
        """Newest live edge between v and w, the one a rebuild would store."""
        found = None
        for edge in self._edges:
            if (edge.start is v and edge.end is w) or (edge.start is w and edge.end is v):
                found = edge
        return found

    def _check_vertex(self, v: pyvertex):
        if not isinstance(v, pyvertex) or v.owner is not self:
            raise GraphMembershipError(f"Vertex {v!r} is not part of this graph")

    def _check_edge(self, e: pyedge):
        if not isinstance(e, pyedge) or e.owner is not self:
            raise GraphMembershipError(f"Edge {e!r} is not part of this graph")

    # ------------------------------------------------------------------
    # Structural queries
    # ------------------------------------------------------------------

    @property
    def max_index(self) -> int:
        """Number of vertices ever inserted; the matrix side length."""
        return self._max_index

    @property
    def matrix(self) -> np.ndarray:
        """The raw adjacency matrix (read it, do not write it)."""
        return self._matrix

    def end_vertices(self, e: pyedge) -> Tuple[pyvertex, pyvertex]:
        """Return (start, end) exactly as given when the edge was inserted."""
        return e.start, e.end

    def opposite(self, v: pyvertex, e: pyedge) -> pyvertex:
        """
        Get the endpoint of an edge that is not the given vertex.

        Args:
            v: One endpoint of e
            e: Edge incident to v

        Returns:
            The other endpoint (v itself for a self-loop)

        Raises:
            EdgeNotIncidentError: If e does not touch v
        """
        self._check_edge(e)
        start, end = self.end_vertices(e)
        if start is v:
            return end
        if end is v:
            return start
        raise EdgeNotIncidentError(v, e)

    def are_adjacent(self, v: pyvertex, w: pyvertex) -> bool:
        """Whether an edge connects v and w, answered from the matrix."""
        self._check_vertex(v)
        self._check_vertex(w)
        return self._cell(v, w) is not None

    def get_edge(self, v: pyvertex, w: pyvertex) -> Optional[pyedge]:
        """
        Get the edge connecting two vertices in O(1).

        Args:
            v: First vertex
            w: Second vertex

        Returns:
            The connecting edge, or None if the vertices are not adjacent
        """
        self._check_vertex(v)
        self._check_vertex(w)
        return self._cell(v, w)

    def incident_edges(self, v: pyvertex) -> Iterator[pyedge]:
        """
        Iterate over the edges touching v.

        The edge list is scanned lazily, so the scan costs O(E). Each edge is
        yielded once, self-loops included.
        """
        self._check_vertex(v)
        return (edge for edge in self._edges if edge.is_incident(v))

    def degree(self, v: pyvertex) -> int:
        """Number of edges incident to v."""
        return sum(1 for _ in self.incident_edges(v))

    def vertices(self) -> Iterator[pyvertex]:
        """Iterate over live vertices in insertion order."""
        return iter(self._vertices)

    def edges(self) -> Iterator[pyedge]:
        """Iterate over live edges in insertion order."""
        return iter(self._edges)

    def get_vertex_count(self) -> int:
        return len(self._vertices)

    def get_edge_count(self) -> int:
        return len(self._edges)

    def adjacency_array(self) -> np.ndarray:
        """
        Get a boolean view of the adjacency matrix.

        Returns:
            Array of shape (max_index, max_index); rows and columns of removed
            vertices are all False
        """
        live = np.frompyfunc(lambda cell: cell is not None and cell.is_live(), 1, 1)
        if self._max_index == 0:
            return np.zeros((0, 0), dtype=bool)
        return live(self._matrix).astype(bool)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert_vertex(self, element: Any) -> pyvertex:
        """
        Add a vertex, then reallocate and rebuild the whole matrix one size larger.

        Args:
            element: Payload to store

        Returns:
            The new vertex
        """
        vertex = pyvertex(element, self._max_index, owner=self)
        vertex.node = self._vertices.insert_last(vertex)

        self._max_index += 1
        self._rebuild_matrix()

        logger.debug(f"Inserted vertex {vertex!r}")
        return vertex

    def insert_edge(self, v: pyvertex, w: pyvertex, element: Any) -> pyedge:
        """
        Connect two live vertices with a new edge.

        Args:
            v: Start vertex
            w: End vertex
            element: Payload to store

        Returns:
            The new edge

        Raises:
            GraphMembershipError: If v or w is not a live vertex of this graph
        """
        self._check_vertex(v)
        self._check_vertex(w)

        existing = self._cell(v, w)
        if existing is not None:
            logger.warning(f"Vertices {v!r} and {w!r} are already connected by {existing!r}; "
                           f"the matrix will reference the new edge")

        edge = pyedge(v, w, element, owner=self)
        edge.node = self._edges.insert_last(edge)

        self._matrix[v.index, w.index] = edge
        self._matrix[w.index, v.index] = edge

        logger.debug(f"Inserted edge {edge!r}")
        return edge

    def remove_vertex(self, v: pyvertex) -> Any:
        """
        Remove a vertex together with all of its incident edges.

        Args:
            v: Vertex to remove

        Returns:
            The removed vertex's payload
        """
        self._check_vertex(v)

        incident = list(self.incident_edges(v))
        for edge in incident:
            self.remove_edge(edge)

        self._vertices.remove(v.node)
        v.node = None
        v.owner = None

        # max_index is unchanged; the vertex's row and column stay empty.
        self._rebuild_matrix()

        logger.debug(f"Removed vertex {v!r} and {len(incident)} incident edges")
        return v.element

    def remove_edge(self, e: pyedge) -> Any:
        """
        Remove an edge.

        Args:
            e: Edge to remove

        Returns:
            The removed edge's payload
        """
        self._check_edge(e)

        self._edges.remove(e.node)
        e.node = None
        e.owner = None

        start, end = self.end_vertices(e)
        if self._matrix[start.index, end.index] is e:
            # A parallel edge between the same pair takes over the cells.
            replacement = self._find_edge(start, end)
            if replacement is not None or self.eager_edge_clear:
                self._matrix[start.index, end.index] = replacement
                self._matrix[end.index, start.index] = replacement
                logger.debug(f"Matrix cells of {e!r} now reference {replacement!r}")

        logger.debug(f"Removed edge {e!r}")
        return e.element

    def replace(self, item: Union[pyvertex, pyedge], element: Any) -> Any:
        """
        Swap the payload of a vertex or an edge.

        Args:
            item: Vertex or edge of this graph
            element: New payload

        Returns:
            The previous payload
        """
        if isinstance(item, pyvertex):
            self._check_vertex(item)
        elif isinstance(item, pyedge):
            self._check_edge(item)
        else:
            raise TypeError(f"Cannot replace payload of {type(item).__name__}")

        old = item._element
        item._element = element
        return old

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, item) -> bool:
        return isinstance(item, (pyvertex, pyedge)) and item.owner is self

    def __repr__(self) -> str:
        return (f"MatrixGraph(vertices={len(self._vertices)}, edges={len(self._edges)}, "
                f"max_index={self._max_index})")
