"""
Depth-first and breadth-first traversal with edge classification.

This module labels vertices and edges of a MatrixGraph while exploring it.
It only uses the graph's public contract (vertex/edge iteration, incident
edges and opposite vertex lookup).
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..classes.edge import pyedge
from ..classes.exceptions import GraphMembershipError
from ..classes.labels import BFSLabel, DFSLabel
from ..classes.vertex import pyvertex
from ..core.graph import MatrixGraph

logger = logging.getLogger(__name__)

Label = Union[DFSLabel, BFSLabel]


class TraversalResult:
    """
    Labels and bookkeeping produced by a single traversal call.

    Attributes:
        kind: "dfs" or "bfs"
        vertex_labels: Label of every vertex present when the traversal ran
        edge_labels: Label of every edge present when the traversal ran
        order: Vertices in the order they were visited
        parent: Discovery edge used to reach each visited vertex (None for roots)
        roots: Vertices each search tree was started from
        level: BFS distance of each visited vertex from its root
    """

    def __init__(self, kind: str):
        self.kind = kind
        self.vertex_labels: Dict[pyvertex, Label] = {}
        self.edge_labels: Dict[pyedge, Label] = {}
        self.order: List[pyvertex] = []
        self.parent: Dict[pyvertex, Optional[pyedge]] = {}
        self.roots: List[pyvertex] = []
        self.level: Dict[pyvertex, int] = {}
        self._frontiers: Dict[pyvertex, List[List[pyvertex]]] = {}

    def label_of(self, item: Union[pyvertex, pyedge]) -> Label:
        if isinstance(item, pyvertex):
            return self.vertex_labels[item]
        return self.edge_labels[item]

    def edges_labeled(self, label: Label) -> List[pyedge]:
        return [edge for edge, edge_label in self.edge_labels.items() if edge_label is label]

    def discovery_edges(self) -> List[pyedge]:
        """Tree edges, in the order the edges appear in the graph."""
        if self.kind == "dfs":
            return self.edges_labeled(DFSLabel.DISCOVERY)
        return self.edges_labeled(BFSLabel.DISCOVERY)

    def back_edges(self) -> List[pyedge]:
        return self.edges_labeled(DFSLabel.BACK)

    def cross_edges(self) -> List[pyedge]:
        return self.edges_labeled(BFSLabel.CROSS)

    def level_of(self, vertex: pyvertex) -> Optional[int]:
        """BFS level of a vertex, or None if it was not reached."""
        return self.level.get(vertex)

    def levels(self, root: Optional[pyvertex] = None) -> List[List[pyvertex]]:
        """
        Get the BFS frontier lists of one search tree.

        Args:
            root: Root of the tree (defaults to the first root)

        Returns:
            List of levels; level i holds the vertices at distance i from root
        """
        if root is None:
            if not self.roots:
                return []
            root = self.roots[0]
        return [list(frontier) for frontier in self._frontiers.get(root, [])]

    def __repr__(self) -> str:
        return (f"TraversalResult(kind={self.kind!r}, visited={len(self.order)}, "
                f"roots={len(self.roots)})")


class GraphTraversal:
    """
    Depth-first and breadth-first search over a MatrixGraph.

    This class provides methods for:
    - Labeling edges as DISCOVERY or BACK (DFS)
    - Labeling edges as DISCOVERY or CROSS (BFS)
    - Covering every connected component, or only a source's component

    Labels live in the TraversalResult of each call, so repeated or
    interleaved traversals do not disturb each other. With annotate=True
    they are also written to the dfs_label/bfs_label slots of the entities.
    """

    def __init__(self, graph: MatrixGraph, annotate: bool = True):
        """
        Initialize the traversal.

        Args:
            graph: MatrixGraph instance to explore
            annotate: Also write labels onto the vertices and edges
        """
        self.graph = graph
        self.annotate = annotate

    # ------------------------------------------------------------------
    # Label bookkeeping
    # ------------------------------------------------------------------

    def _set_vertex_label(self, result: TraversalResult, vertex: pyvertex, label: Label):
        result.vertex_labels[vertex] = label
        if self.annotate:
            if result.kind == "dfs":
                vertex.dfs_label = label
            else:
                vertex.bfs_label = label

    def _set_edge_label(self, result: TraversalResult, edge: pyedge, label: Label):
        result.edge_labels[edge] = label
        if self.annotate:
            if result.kind == "dfs":
                edge.dfs_label = label
            else:
                edge.bfs_label = label

    def _check_source(self, source: Optional[pyvertex]):
        if source is not None and not (isinstance(source, pyvertex) and source in self.graph):
            raise GraphMembershipError(f"Source vertex {source!r} is not part of this graph")

    def _reset(self, result: TraversalResult, unexplored: Label):
        for vertex in self.graph.vertices():
            self._set_vertex_label(result, vertex, unexplored)
        for edge in self.graph.edges():
            self._set_edge_label(result, edge, unexplored)

    # ------------------------------------------------------------------
    # Depth-first search
    # ------------------------------------------------------------------

    def dfs(self, source: Optional[pyvertex] = None) -> TraversalResult:
        """
        Label the graph depth-first.

        Args:
            source: Explore only the component of this vertex. When omitted,
                a search is started from every still unexplored vertex in
                insertion order.

        Returns:
            TraversalResult with DFSLabel values
        """
        self._check_source(source)
        result = TraversalResult("dfs")
        self._reset(result, DFSLabel.UNEXPLORED)

        if source is not None:
            self._dfs_from(source, result)
        else:
            for vertex in self.graph.vertices():
                if result.vertex_labels[vertex] is DFSLabel.UNEXPLORED:
                    self._dfs_from(vertex, result)

        logger.info(f"DFS completed: visited {len(result.order)} vertices in "
                    f"{len(result.roots)} trees, {len(result.discovery_edges())} discovery "
                    f"and {len(result.back_edges())} back edges")
        return result

    def _dfs_from(self, source: pyvertex, result: TraversalResult):
        """
        Explore the component of source with an explicit stack.

        Each frame holds a vertex and its partially consumed incident-edge
        iterator, which gives the same labeling as the recursive algorithm.
        """
        result.roots.append(source)
        result.parent[source] = None
        self._visit_dfs(source, result)

        stack: List[Tuple[pyvertex, Iterator[pyedge]]] = [
            (source, self.graph.incident_edges(source))
        ]
        while stack:
            vertex, edges = stack[-1]
            for edge in edges:
                if result.edge_labels[edge] is not DFSLabel.UNEXPLORED:
                    continue
                other = self.graph.opposite(vertex, edge)
                if result.vertex_labels[other] is DFSLabel.UNEXPLORED:
                    self._set_edge_label(result, edge, DFSLabel.DISCOVERY)
                    result.parent[other] = edge
                    self._visit_dfs(other, result)
                    stack.append((other, self.graph.incident_edges(other)))
                    break
                self._set_edge_label(result, edge, DFSLabel.BACK)
            else:
                stack.pop()

    def _visit_dfs(self, vertex: pyvertex, result: TraversalResult):
        self._set_vertex_label(result, vertex, DFSLabel.VISITED)
        result.order.append(vertex)

    # ------------------------------------------------------------------
    # Breadth-first search
    # ------------------------------------------------------------------

    def bfs(self, source: Optional[pyvertex] = None) -> TraversalResult:
        """
        Label the graph breadth-first.

        Args:
            source: Explore only the component of this vertex. When omitted,
                a breadth-first search is started from every still
                unexplored vertex in insertion order.

        Returns:
            TraversalResult with BFSLabel values and per-vertex levels
        """
        self._check_source(source)
        result = TraversalResult("bfs")
        self._reset(result, BFSLabel.UNEXPLORED)

        if source is not None:
            self._bfs_from(source, result)
        else:
            for vertex in self.graph.vertices():
                if result.vertex_labels[vertex] is BFSLabel.UNEXPLORED:
                    self._bfs_from(vertex, result)

        logger.info(f"BFS completed: visited {len(result.order)} vertices in "
                    f"{len(result.roots)} trees, {len(result.discovery_edges())} discovery "
                    f"and {len(result.cross_edges())} cross edges")
        return result

    def _bfs_from(self, source: pyvertex, result: TraversalResult):
        """Explore the component of source one frontier level at a time."""
        result.roots.append(source)
        result.parent[source] = None
        self._visit_bfs(source, 0, result)

        frontiers = [[source]]
        i = 0
        while frontiers[i]:
            next_frontier = []
            for vertex in frontiers[i]:
                for edge in self.graph.incident_edges(vertex):
                    if result.edge_labels[edge] is not BFSLabel.UNEXPLORED:
                        continue
                    other = self.graph.opposite(vertex, edge)
                    if result.vertex_labels[other] is BFSLabel.UNEXPLORED:
                        self._set_edge_label(result, edge, BFSLabel.DISCOVERY)
                        result.parent[other] = edge
                        self._visit_bfs(other, i + 1, result)
                        next_frontier.append(other)
                    else:
                        self._set_edge_label(result, edge, BFSLabel.CROSS)
            frontiers.append(next_frontier)
            i += 1

        # The last frontier is always empty.
        frontiers.pop()
        result._frontiers[source] = frontiers
        logger.debug(f"BFS from {source!r} reached depth {len(frontiers) - 1}")

    def _visit_bfs(self, vertex: pyvertex, level: int, result: TraversalResult):
        self._set_vertex_label(result, vertex, BFSLabel.VISITED)
        result.order.append(vertex)
        result.level[vertex] = level
