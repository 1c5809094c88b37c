"""
MatrixGraph - Undirected Adjacency-Matrix Graph Library

A Python library providing a generic undirected graph backed by an
adjacency matrix, with depth-first and breadth-first traversals that
classify edges as discovery, back or cross edges.

Main Classes:
    pymatrixgraph: Main class combining the graph and its traversals (facade)
    MatrixGraph: Adjacency-matrix graph engine
    GraphTraversal: DFS/BFS labeling
    pyvertex: Vertex representation in the graph
    pyedge: Edge representation between vertices

Example:
    >>> from matrixgraph import pymatrixgraph
    >>> graph = pymatrixgraph()
    >>> a = graph.insert_vertex("A")
    >>> b = graph.insert_vertex("B")
    >>> ab = graph.insert_edge(a, b, "A-B")
    >>> result = graph.dfs()
"""

__version__ = "0.1.0"

from matrixgraph.classes.vertex import pyvertex
from matrixgraph.classes.edge import pyedge
from matrixgraph.classes.handle_list import pyhandlelist, pynode
from matrixgraph.classes.labels import DFSLabel, BFSLabel
from matrixgraph.classes.exceptions import (
    MatrixGraphError,
    EdgeNotIncidentError,
    GraphMembershipError,
    InvalidHandleError,
)
from matrixgraph.core.graph import MatrixGraph
from matrixgraph.analysis.traversal import GraphTraversal, TraversalResult
from matrixgraph.core.matrixgraph import pymatrixgraph

__all__ = [
    'pymatrixgraph',
    'MatrixGraph',
    'GraphTraversal',
    'TraversalResult',
    'pyvertex',
    'pyedge',
    'pyhandlelist',
    'pynode',
    'DFSLabel',
    'BFSLabel',
    'MatrixGraphError',
    'EdgeNotIncidentError',
    'GraphMembershipError',
    'InvalidHandleError',
]
