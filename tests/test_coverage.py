"""Tests for coverage evaluation and the greedy initializer."""

import pytest

from radiuscover.core.coverage import (
    count_uncovered,
    coverage_lower_bound,
    is_feasible,
    mark_covered,
)
from radiuscover.core.distance_index import DistanceIndex
from radiuscover.core.greedy import greedy_cover
from radiuscover.generators import Grid2DGenerator
from radiuscover.graph import Graph


@pytest.fixture()
def path_index():
    g = Graph.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
    return DistanceIndex.build(g, 1)


class TestCoverage:
    def test_mark_covered(self, path_index):
        assert mark_covered([0], path_index) == [True, True, False, False, False]
        assert mark_covered([], path_index) == [False] * 5

    def test_count_uncovered(self, path_index):
        assert count_uncovered(mark_covered([1], path_index)) == 2
        assert count_uncovered(mark_covered([1, 3], path_index)) == 0

    def test_is_feasible(self, path_index):
        assert is_feasible([1, 3], path_index)
        assert is_feasible([0, 3], path_index)
        assert not is_feasible([0, 4], path_index)

    def test_mark_covered_is_pure(self, path_index):
        solution = [2]
        mark_covered(solution, path_index)
        assert solution == [2]

    def test_lower_bound(self, path_index):
        # largest neighbourhood holds 3 of the 5 vertices
        assert coverage_lower_bound(path_index) == 2
        assert coverage_lower_bound(DistanceIndex.build(Graph(0), 1)) == 0


class TestGreedy:
    def test_path_scenario(self, path_index):
        assert greedy_cover(path_index) == [0, 2, 4]

    def test_radius_zero_is_every_vertex(self):
        g = Graph.from_edges(4, [(0, 1), (2, 3)])
        assert greedy_cover(DistanceIndex.build(g, 0)) == [0, 1, 2, 3]

    def test_isolated_vertex_chosen(self):
        g = Graph.from_edges(4, [(0, 1), (1, 2)])
        solution = greedy_cover(DistanceIndex.build(g, 3))
        assert 3 in solution

    def test_deterministic_and_feasible(self):
        g = Graph.from_instance(Grid2DGenerator().generate(36))
        index = DistanceIndex.build(g, 1)
        first = greedy_cover(index)
        assert first == greedy_cover(index)
        assert is_feasible(first, index)

    def test_empty_graph(self):
        assert greedy_cover(DistanceIndex.build(Graph(0), 2)) == []
