"""Deterministic greedy construction of a feasible covering."""

from __future__ import annotations

from radiuscover.core.distance_index import DistanceIndex


def greedy_cover(index: DistanceIndex) -> list[int]:
    """
    Scan vertices in id order, opening a shop at each one still uncovered.

    Every vertex is either chosen or covered by an earlier shop before it
    is visited, so the result is always feasible.
    """
    solution: list[int] = []
    covered = [False] * index.vertex_count

    for vertex in range(index.vertex_count):
        if covered[vertex]:
            continue
        solution.append(vertex)
        for reached in index[vertex]:
            covered[reached] = True

    return solution
