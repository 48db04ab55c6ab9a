"""Covering engine: distance index, coverage, greedy start and annealing."""

from radiuscover.core.annealing import (
    AnnealingController,
    AnnealingResult,
    SearchState,
    make_rng,
)
from radiuscover.core.coverage import (
    count_uncovered,
    coverage_lower_bound,
    is_feasible,
    mark_covered,
)
from radiuscover.core.distance_index import DistanceIndex
from radiuscover.core.greedy import greedy_cover
from radiuscover.core.neighborhood import generate_neighbor

__all__ = [
    "AnnealingController",
    "AnnealingResult",
    "SearchState",
    "make_rng",
    "DistanceIndex",
    "mark_covered",
    "count_uncovered",
    "coverage_lower_bound",
    "is_feasible",
    "greedy_cover",
    "generate_neighbor",
]
