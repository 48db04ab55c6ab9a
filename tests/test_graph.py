"""Tests for the graph container."""

import pytest

from radiuscover.graph import Graph, GraphInputError


class TestGraph:
    def test_adjacency_and_degree(self):
        g = Graph.from_edges(4, [(0, 1), (1, 2), (1, 3)])
        assert g.neighbors(1) == [0, 2, 3]
        assert g.degree == [1, 3, 1, 1]
        assert g.edge_count == 3
        assert len(g) == 4

    def test_duplicate_edges_kept_literally(self):
        g = Graph.from_edges(2, [(0, 1), (0, 1)])
        assert g.neighbors(0) == [1, 1]
        assert g.degree == [2, 2]

    def test_self_loop_kept_literally(self):
        g = Graph.from_edges(2, [(0, 0)])
        assert g.neighbors(0) == [0, 0]
        assert g.degree[0] == 2

    def test_out_of_range_endpoint(self):
        g = Graph(3)
        with pytest.raises(GraphInputError, match="outside"):
            g.add_edge(0, 3)
        with pytest.raises(GraphInputError, match="outside"):
            g.add_edge(-1, 2)
        assert g.edge_count == 0

    def test_negative_vertex_count(self):
        with pytest.raises(GraphInputError):
            Graph(-1)

    def test_strict_rejects_self_loop(self):
        g = Graph(3, strict=True)
        with pytest.raises(GraphInputError, match="Self-loop"):
            g.add_edge(2, 2)

    def test_strict_rejects_duplicate_either_direction(self):
        g = Graph(3, strict=True)
        g.add_edge(0, 1)
        with pytest.raises(GraphInputError, match="Duplicate"):
            g.add_edge(1, 0)

    def test_isolated_vertices(self):
        g = Graph.from_edges(5, [(0, 1), (1, 2)])
        assert g.isolated_vertices() == [3, 4]

    def test_from_instance(self):
        inst = {
            "nodes": [0, 1, 2],
            "edges": [{"source": 0, "target": 1}, {"source": 1, "target": 2}],
        }
        g = Graph.from_instance(inst)
        assert g.vertex_count == 3
        assert g.degree == [1, 2, 1]

    def test_from_instance_rejects_non_contiguous_nodes(self):
        inst = {"nodes": [0, 2], "edges": []}
        with pytest.raises(GraphInputError, match="0 .. n-1"):
            Graph.from_instance(inst)

    def test_to_networkx_keeps_multiplicity(self):
        g = Graph.from_edges(3, [(0, 1), (0, 1), (2, 2)])
        G = g.to_networkx()
        assert G.number_of_nodes() == 3
        assert G.number_of_edges(0, 1) == 2
        assert G.number_of_edges(2, 2) == 1
