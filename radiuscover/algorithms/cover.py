"""Built-in covering algorithms: the greedy scan and annealing on top of it."""

from __future__ import annotations

from radiuscover.algorithms.base import AlgorithmWrapper
from radiuscover.config import AnnealingConfig
from radiuscover.core.annealing import AnnealingController
from radiuscover.core.distance_index import DistanceIndex
from radiuscover.core.greedy import greedy_cover


class GreedyCover(AlgorithmWrapper):
    """Open a shop at each vertex still uncovered, in id order."""
    name = "greedy"

    def solve(self, index: DistanceIndex, config: AnnealingConfig) -> dict:
        return {"solution": {"shops": greedy_cover(index)}, "metadata": {}}


class AnnealingCover(AlgorithmWrapper):
    """Simulated annealing seeded with the greedy covering."""
    name = "annealing"

    def solve(self, index: DistanceIndex, config: AnnealingConfig) -> dict:
        result = AnnealingController(index, config).run()
        return {
            "solution": {"shops": result.solution},
            "metadata": result.stats.model_dump(mode="json"),
        }


DEFAULT_ALGORITHMS: list[type[AlgorithmWrapper]] = [GreedyCover, AnnealingCover]
