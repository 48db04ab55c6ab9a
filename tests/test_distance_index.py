"""Tests for the breadth-first distance index."""

import networkx as nx
import pytest

from radiuscover.core.distance_index import DistanceIndex
from radiuscover.generators import ErdosRenyiGenerator
from radiuscover.graph import Graph


@pytest.fixture()
def path5():
    return Graph.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4)])


class TestDistanceIndex:
    def test_path_radius_one(self, path5):
        index = DistanceIndex.build(path5, 1)
        assert set(index[0]) == {0, 1}
        assert set(index[1]) == {0, 1, 2}
        assert set(index[2]) == {1, 2, 3}
        assert set(index[3]) == {2, 3, 4}
        assert set(index[4]) == {3, 4}

    def test_entry_starts_with_vertex(self, path5):
        index = DistanceIndex.build(path5, 2)
        for v in range(5):
            assert index[v][0] == v

    def test_radius_zero_gives_singletons(self, path5):
        index = DistanceIndex.build(path5, 0)
        assert [index[v] for v in range(5)] == [[0], [1], [2], [3], [4]]

    def test_isolated_vertex_any_radius(self):
        g = Graph.from_edges(4, [(0, 1), (1, 2)])
        for d in (0, 1, 5):
            index = DistanceIndex.build(g, d)
            assert index[3] == [3]
            assert all(3 not in index[v] for v in range(3))

    def test_no_duplicates_with_parallel_edges_and_loops(self):
        g = Graph.from_edges(3, [(0, 1), (0, 1), (1, 1), (1, 2)])
        index = DistanceIndex.build(g, 2)
        for v in range(3):
            assert len(index[v]) == len(set(index[v]))
        assert set(index[0]) == {0, 1, 2}

    def test_negative_radius(self, path5):
        with pytest.raises(ValueError, match="non-negative"):
            DistanceIndex.build(path5, -1)

    def test_covers(self, path5):
        index = DistanceIndex.build(path5, 1)
        assert index.covers(2, 3)
        assert not index.covers(0, 2)

    @pytest.mark.parametrize("radius", [1, 2, 3])
    def test_matches_networkx_bfs(self, radius):
        inst = ErdosRenyiGenerator().generate(40, p=0.08, seed=11)
        g = Graph.from_instance(inst)
        G = g.to_networkx()
        index = DistanceIndex.build(g, radius)
        for s in range(g.vertex_count):
            expected = nx.single_source_shortest_path_length(G, s, cutoff=radius)
            assert set(index[s]) == set(expected)

    def test_symmetry(self):
        inst = ErdosRenyiGenerator().generate(50, p=0.06, seed=5)
        g = Graph.from_instance(inst)
        index = DistanceIndex.build(g, 2)
        for s in range(g.vertex_count):
            for u in index[s]:
                assert s in index[u]
