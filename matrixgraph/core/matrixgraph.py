"""
Main facade class for adjacency-matrix graphs.

This module provides the pymatrixgraph class that combines the graph engine
with the traversal algorithms behind one object.
"""

import logging
from typing import Any, Iterator, Optional, Tuple, Union

import numpy as np

from ..classes.edge import pyedge
from ..classes.labels import BFSLabel, DFSLabel
from ..classes.vertex import pyvertex
from ..analysis.traversal import GraphTraversal, TraversalResult
from .graph import MatrixGraph

logger = logging.getLogger(__name__)


class pymatrixgraph:
    """
    Main facade class for undirected adjacency-matrix graphs.

    Delegates structure to MatrixGraph and exploration to GraphTraversal.
    """

    def __init__(self, eager_edge_clear: bool = True, annotate: bool = True):
        """
        Initialize an empty graph.

        Args:
            eager_edge_clear: Clear matrix cells as soon as an edge is removed
            annotate: Write traversal labels onto vertices and edges
        """
        self._graph = MatrixGraph(eager_edge_clear=eager_edge_clear)
        self._traversal = GraphTraversal(self._graph, annotate=annotate)

        logger.debug(f"Initialized pymatrixgraph (eager_edge_clear={eager_edge_clear}, "
                     f"annotate={annotate})")

    @property
    def graph(self) -> MatrixGraph:
        return self._graph

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def insert_vertex(self, element: Any) -> pyvertex:
        return self._graph.insert_vertex(element)

    def insert_edge(self, v: pyvertex, w: pyvertex, element: Any) -> pyedge:
        return self._graph.insert_edge(v, w, element)

    def remove_vertex(self, v: pyvertex) -> Any:
        return self._graph.remove_vertex(v)

    def remove_edge(self, e: pyedge) -> Any:
        return self._graph.remove_edge(e)

    def replace(self, item: Union[pyvertex, pyedge], element: Any) -> Any:
        return self._graph.replace(item, element)

    def end_vertices(self, e: pyedge) -> Tuple[pyvertex, pyvertex]:
        return self._graph.end_vertices(e)

    def opposite(self, v: pyvertex, e: pyedge) -> pyvertex:
        return self._graph.opposite(v, e)

    def are_adjacent(self, v: pyvertex, w: pyvertex) -> bool:
        return self._graph.are_adjacent(v, w)

    def get_edge(self, v: pyvertex, w: pyvertex) -> Optional[pyedge]:
        return self._graph.get_edge(v, w)

    def incident_edges(self, v: pyvertex) -> Iterator[pyedge]:
        return self._graph.incident_edges(v)

    def degree(self, v: pyvertex) -> int:
        return self._graph.degree(v)

    def vertices(self) -> Iterator[pyvertex]:
        return self._graph.vertices()

    def edges(self) -> Iterator[pyedge]:
        return self._graph.edges()

    def get_vertex_count(self) -> int:
        return self._graph.get_vertex_count()

    def get_edge_count(self) -> int:
        return self._graph.get_edge_count()

    def adjacency_array(self) -> np.ndarray:
        return self._graph.adjacency_array()

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def dfs(self, source: Optional[pyvertex] = None) -> TraversalResult:
        """Label vertices and edges depth-first (DISCOVERY / BACK)."""
        return self._traversal.dfs(source)

    def bfs(self, source: Optional[pyvertex] = None) -> TraversalResult:
        """Label vertices and edges breadth-first (DISCOVERY / CROSS)."""
        return self._traversal.bfs(source)

    # ========================================================================
    # LABEL ACCESSORS
    # ========================================================================

    def set_label(self, item: Union[pyvertex, pyedge], label: DFSLabel):
        item.dfs_label = label

    def get_label(self, item: Union[pyvertex, pyedge]) -> Optional[DFSLabel]:
        return item.dfs_label

    def set_blabel(self, item: Union[pyvertex, pyedge], label: BFSLabel):
        item.bfs_label = label

    def get_blabel(self, item: Union[pyvertex, pyedge]) -> Optional[BFSLabel]:
        return item.bfs_label

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, item) -> bool:
        return item in self._graph

    def __repr__(self) -> str:
        return f"pymatrixgraph({self._graph!r})"
