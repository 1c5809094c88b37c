"""Shared fixtures for matrixgraph tests."""

import pytest

from matrixgraph import MatrixGraph


@pytest.fixture
def graph():
    return MatrixGraph()


@pytest.fixture
def path_graph():
    """A - B - C - D, returned as (graph, vertices, edges)."""
    g = MatrixGraph()
    vertices = [g.insert_vertex(name) for name in "ABCD"]
    edges = [
        g.insert_edge(vertices[i], vertices[i + 1], f"{vertices[i]}{vertices[i + 1]}")
        for i in range(3)
    ]
    return g, vertices, edges


@pytest.fixture
def triangle():
    """A, B, C with edges AB, BC, CA, returned as (graph, vertices, edges)."""
    g = MatrixGraph()
    a, b, c = (g.insert_vertex(name) for name in "ABC")
    edges = [g.insert_edge(a, b, "AB"), g.insert_edge(b, c, "BC"), g.insert_edge(c, a, "CA")]
    return g, [a, b, c], edges
