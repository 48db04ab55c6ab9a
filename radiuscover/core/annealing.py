"""
Simulated-annealing refinement of a feasible covering.

The controller owns one random source, shared in sequence by neighbour
generation and acceptance sampling, and polls an injected monotonic clock
once at the top of every iteration.
"""

from __future__ import annotations

import logging
import math
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from radiuscover.config import AnnealingConfig, AnnealingStats, StopReason
from radiuscover.core.coverage import count_uncovered, mark_covered
from radiuscover.core.distance_index import DistanceIndex
from radiuscover.core.greedy import greedy_cover
from radiuscover.core.neighborhood import generate_neighbor

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass
class SearchState:
    current_solution: list[int]
    current_energy: int
    best_solution: list[int]
    best_energy: int
    temperature: float

    @classmethod
    def start(cls, solution: list[int], temperature: float) -> "SearchState":
        return cls(
            current_solution=list(solution),
            current_energy=len(solution),
            best_solution=list(solution),
            best_energy=len(solution),
            temperature=temperature,
        )


@dataclass
class AnnealingResult:
    solution: list[int]
    stats: AnnealingStats = field(default_factory=AnnealingStats)

    @property
    def size(self) -> int:
        return len(self.solution)


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create the shared random source, seeding from the monotonic clock if needed."""
    if seed is None:
        seed = time.monotonic_ns()
    return random.Random(seed)


class AnnealingController:
    """
    Drives the annealing loop over a prebuilt :class:`DistanceIndex`.

    Parameters
    ----------
    index : DistanceIndex
        Radius-d neighbourhoods of every vertex.
    config : AnnealingConfig | None
        Schedule and deadline.  Defaults reproduce the reference constants.
    rng : random.Random | None
        Shared random source.  Built from ``config.seed`` when omitted.
    clock : callable
        Monotonic clock returning seconds.
    started_at : float | None
        Clock reading the deadline is measured from.  Defaults to the
        clock reading when :meth:`run` begins.
    """

    def __init__(
        self,
        index: DistanceIndex,
        config: AnnealingConfig | None = None,
        rng: random.Random | None = None,
        clock: Clock = time.monotonic,
        started_at: float | None = None,
    ) -> None:
        self.index = index
        self.config = config or AnnealingConfig()
        self.rng = rng if rng is not None else make_rng(self.config.seed)
        self.clock = clock
        self.started_at = started_at

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, initial: list[int] | None = None) -> AnnealingResult:
        """
        Search from *initial* (the greedy covering by default) until the
        deadline passes or the temperature reaches its floor.

        Returns the best feasible solution seen.
        """
        cfg = self.config
        start = self.started_at if self.started_at is not None else self.clock()
        solution = greedy_cover(self.index) if initial is None else list(initial)
        if count_uncovered(mark_covered(solution, self.index)):
            raise ValueError("Initial solution does not cover every vertex")

        state = SearchState.start(solution, cfg.initial_temperature)
        stats = AnnealingStats(
            greedy_size=state.best_energy,
            best_energy_history=[state.best_energy],
        )
        vertex_count = self.index.vertex_count

        while True:
            elapsed = self.clock() - start
            if elapsed >= cfg.deadline_seconds:
                stats.stop_reason = StopReason.DEADLINE
                break
            if vertex_count == 0:
                stats.stop_reason = StopReason.EMPTY_GRAPH
                break
            if state.temperature <= cfg.min_temperature:
                stats.stop_reason = StopReason.TEMPERATURE_FLOOR
                break

            stats.iterations += 1
            neighbor = generate_neighbor(state.current_solution, vertex_count, self.rng)
            if count_uncovered(mark_covered(neighbor, self.index)) > 0:
                stats.infeasible += 1
                continue

            stats.evaluated += 1
            if self._accept(state.current_energy, len(neighbor), state.temperature):
                stats.accepted += 1
                state.current_solution = neighbor
                state.current_energy = len(neighbor)
                if state.current_energy < state.best_energy:
                    state.best_energy = state.current_energy
                    state.best_solution = list(neighbor)
                    stats.improvements += 1
                    stats.best_energy_history.append(state.best_energy)
                    logger.debug(
                        "Iteration %d: new best %d at T=%.4f",
                        stats.iterations, state.best_energy, state.temperature,
                    )

            state.temperature *= cfg.cooling_rate

        stats.best_size = state.best_energy
        stats.final_temperature = state.temperature
        stats.elapsed_seconds = self.clock() - start
        logger.info(
            "Annealing stopped (%s) after %d iterations: best %d, greedy %d",
            stats.stop_reason.value, stats.iterations, stats.best_size, stats.greedy_size,
        )
        return AnnealingResult(solution=state.best_solution, stats=stats)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _accept(self, current_energy: int, neighbor_energy: int, temperature: float) -> bool:
        # Equal energies give exp(0) == 1, which always beats U < 1.
        if neighbor_energy < current_energy:
            return True
        factor = math.exp((current_energy - neighbor_energy) / temperature)
        return factor > self.rng.random()
