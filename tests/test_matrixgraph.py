"""Tests for core/matrixgraph.py - pymatrixgraph facade."""

import pytest

from matrixgraph import BFSLabel, DFSLabel, EdgeNotIncidentError, pymatrixgraph


@pytest.fixture
def square():
    """A - B - C - D - A."""
    g = pymatrixgraph()
    a, b, c, d = (g.insert_vertex(name) for name in "ABCD")
    edges = [
        g.insert_edge(a, b, "AB"),
        g.insert_edge(b, c, "BC"),
        g.insert_edge(c, d, "CD"),
        g.insert_edge(d, a, "DA"),
    ]
    return g, [a, b, c, d], edges


class TestFacadeStructure:
    """Tests for graph operations through the facade."""

    def test_queries_delegate(self, square):
        g, (a, b, c, d), (ab, bc, cd, da) = square

        assert g.end_vertices(ab) == (a, b)
        assert g.opposite(a, da) is d
        assert g.are_adjacent(a, b)
        assert not g.are_adjacent(a, c)
        assert g.get_edge(c, d) is cd
        assert list(g.incident_edges(a)) == [ab, da]
        assert g.degree(b) == 2
        assert g.get_vertex_count() == 4
        assert g.get_edge_count() == 4
        assert len(g) == 4
        assert a in g
        assert g.adjacency_array().shape == (4, 4)

    def test_construction_is_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="matrixgraph.core.matrixgraph"):
            pymatrixgraph(eager_edge_clear=False)

        assert "Initialized pymatrixgraph (eager_edge_clear=False" in caplog.text

    def test_opposite_error_propagates(self, square):
        g, (a, _, c, _), (_, bc, _, _) = square

        with pytest.raises(EdgeNotIncidentError):
            g.opposite(a, bc)

    def test_mutation_delegates(self, square):
        g, (a, b, c, d), (ab, bc, cd, da) = square

        assert g.replace(a, "A2") == "A"
        assert g.replace(ab, "AB2") == "AB"
        assert g.remove_edge(bc) == "BC"
        assert g.remove_vertex(d) == "D"

        assert list(g.vertices()) == [a, b, c]
        assert list(g.edges()) == [ab]
        assert g.graph.max_index == 4


class TestFacadeTraversal:
    """Tests for traversals and label accessors through the facade."""

    def test_dfs_on_cycle(self, square):
        g, vertices, edges = square

        result = g.dfs(vertices[0])

        assert len(result.discovery_edges()) == 3
        assert len(result.back_edges()) == 1
        assert all(g.get_label(v) is DFSLabel.VISITED for v in vertices)

    def test_bfs_on_cycle(self, square):
        g, (a, b, c, d), _ = square

        result = g.bfs(a)

        assert result.levels() == [[a], [b, d], [c]]
        assert len(result.cross_edges()) == 1
        assert g.get_blabel(c) is BFSLabel.VISITED

    def test_label_accessors(self, square):
        g, (a, _, _, _), (ab, _, _, _) = square

        g.set_label(a, DFSLabel.VISITED)
        g.set_blabel(ab, BFSLabel.CROSS)

        assert g.get_label(a) is DFSLabel.VISITED
        assert g.get_blabel(ab) is BFSLabel.CROSS
        assert g.get_label(ab) is None

    def test_annotate_off(self):
        g = pymatrixgraph(annotate=False)
        a = g.insert_vertex("A")

        result = g.dfs()

        assert g.get_label(a) is None
        assert result.label_of(a) is DFSLabel.VISITED

    def test_lazy_edge_clear_option(self):
        g = pymatrixgraph(eager_edge_clear=False)
        a = g.insert_vertex("A")
        b = g.insert_vertex("B")
        e = g.insert_edge(a, b, "AB")

        g.remove_edge(e)

        assert g.graph.matrix[0, 1] is e
        assert not g.are_adjacent(a, b)
