"""Coverage evaluation for candidate solutions."""

from __future__ import annotations

from typing import Sequence

from radiuscover.core.distance_index import DistanceIndex


def mark_covered(solution: Sequence[int], index: DistanceIndex) -> list[bool]:
    """Return, per vertex, whether some shop in *solution* covers it."""
    covered = [False] * index.vertex_count
    for shop in solution:
        for vertex in index[shop]:
            covered[vertex] = True
    return covered


def count_uncovered(covered: Sequence[bool]) -> int:
    return sum(1 for flag in covered if not flag)


def is_feasible(solution: Sequence[int], index: DistanceIndex) -> bool:
    return all(mark_covered(solution, index))


def coverage_lower_bound(index: DistanceIndex) -> int:
    """No covering is smaller than C divided by the largest neighbourhood."""
    if index.vertex_count == 0:
        return 0
    largest = max(len(index[v]) for v in range(index.vertex_count))
    return -(-index.vertex_count // largest)
