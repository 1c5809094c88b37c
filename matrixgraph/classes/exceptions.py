"""
Exception types raised by the matrixgraph package.

Every error is raised before the graph is mutated, so a failed call leaves
the graph unchanged.
"""


class MatrixGraphError(Exception):
    """Base class for all matrixgraph errors."""


class EdgeNotIncidentError(MatrixGraphError, ValueError):
    """Raised when an edge does not touch the vertex it was paired with."""

    def __init__(self, vertex, edge):
        self.vertex = vertex
        self.edge = edge
        super().__init__(f"Edge {edge!r} is not incident to vertex {vertex!r}")


class GraphMembershipError(MatrixGraphError, ValueError):
    """Raised for a vertex or edge that is foreign to the graph or already removed."""


class InvalidHandleError(MatrixGraphError, ValueError):
    """Raised when a list handle does not belong to the list it is used with."""
