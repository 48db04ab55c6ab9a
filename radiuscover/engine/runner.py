"""
Benchmark execution engine.

Generates instances, builds one distance index per (instance, radius),
runs every algorithm on it, checks coverage, and produces a pandas
DataFrame of results.
"""

from __future__ import annotations

import logging
import time
import tracemalloc
from typing import Any, Callable, Iterator, Optional

import pandas as pd
from tqdm import tqdm

from radiuscover.algorithms.base import AlgorithmWrapper
from radiuscover.config import (
    AnnealingConfig,
    BenchmarkConfig,
    BenchmarkResult,
    RunStatus,
)
from radiuscover.core.coverage import coverage_lower_bound, is_feasible
from radiuscover.core.distance_index import DistanceIndex
from radiuscover.generators import get_generator, known_optimum
from radiuscover.graph import Graph, GraphInputError

logger = logging.getLogger(__name__)

ProgressFn = Callable[[str, int, int], None]


def _run_one(
    algorithm: AlgorithmWrapper,
    index: DistanceIndex,
    config: AnnealingConfig,
    track_memory: bool = True,
) -> dict:
    """
    Run a single (algorithm × index) and return raw measurements.

    With *track_memory*, tracemalloc hooks every allocation for the whole
    call.  A deadline-bound search then completes fewer iterations than it
    would untraced, so its objective can be worse than the CLI's for the
    same settings.  Pass ``track_memory=False`` to compare quality.
    """
    if track_memory:
        tracemalloc.start()
    t0 = time.perf_counter()
    try:
        result = algorithm.solve(index, config)
        status = RunStatus.SUCCESS
        error = ""
    except Exception as exc:  # noqa: BLE001
        logger.warning("Algorithm %s failed: %s", algorithm.name, exc)
        result = None
        status = RunStatus.ERROR
        error = str(exc)
    wall_time = time.perf_counter() - t0
    peak_mem = 0
    if track_memory:
        _, peak_mem = tracemalloc.get_traced_memory()
        tracemalloc.stop()
    return {
        "solution": result,
        "wall_time": wall_time,
        "peak_memory_mb": peak_mem / (1024 * 1024),
        "status": status,
        "error": error,
    }


class BenchmarkRunner:
    """
    Runs covering algorithms across generated and custom instances.

    An instance that cannot be turned into a graph yields one error row per
    (algorithm, radius, run) instead of stopping the sweep.

    Usage
    -----
    >>> runner = BenchmarkRunner(config)
    >>> runner.register_algorithm(GreedyCover())
    >>> df = runner.run()
    """

    def __init__(self, config: BenchmarkConfig) -> None:
        self.config = config
        self.algorithms: list[AlgorithmWrapper] = []
        self._instances: list[dict] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def register_algorithm(self, algorithm: AlgorithmWrapper) -> None:
        """Add an :class:`AlgorithmWrapper` instance to the benchmark."""
        self.algorithms.append(algorithm)

    def generate_instances(self) -> list[dict]:
        """
        Build all graph instances according to the config.

        Returns a list of dicts, each augmented with an ``instance_name``
        key for later identification.
        """
        instances: list[dict] = []

        for gen_cfg in self.config.instance_config.generators:
            gen = get_generator(gen_cfg.type)()
            for size in gen_cfg.sizes:
                for i in range(gen_cfg.count_per_size):
                    inst = gen.generate(size, **gen_cfg.params)
                    inst["instance_name"] = f"{gen_cfg.type}_n{size}_{i}"
                    instances.append(inst)

        for idx, inst in enumerate(self.config.instance_config.custom_instances):
            if "instance_name" not in inst:
                inst["instance_name"] = f"custom_{idx}"
            instances.append(inst)

        self._instances = instances
        logger.info("Generated %d instances", len(instances))
        return instances

    def run(self, progress_fn: Optional[ProgressFn] = None) -> pd.DataFrame:
        """Execute the full benchmark and return a results DataFrame."""
        if not self.algorithms:
            raise RuntimeError("No algorithms registered. Call register_algorithm() first.")

        if not self._instances:
            self.generate_instances()

        execution = self.config.execution_config
        annealing = self.config.annealing

        records: list[BenchmarkResult] = []
        total = len(self.algorithms) * len(self._instances) * len(execution.radii) * execution.runs_per_config
        completed = 0

        with tqdm(total=total, desc="Running Benchmark", unit="run") as pbar:
            for inst in self._instances:
                inst_name = inst.get("instance_name", "unknown")
                gen_name = inst.get("metadata", {}).get("generator", "custom")
                graph_error = ""
                try:
                    graph = Graph.from_instance(inst)
                except GraphInputError as exc:
                    logger.warning("Skipping instance %s: %s", inst_name, exc)
                    graph = None
                    graph_error = str(exc)

                for radius in execution.radii:
                    context = {
                        "instance_name": inst_name,
                        "instance_generator": gen_name,
                        "radius": radius,
                    }
                    if graph is None:
                        context["problem_size"] = len(inst.get("nodes", []))
                        rows = [
                            BenchmarkResult(
                                **context,
                                algorithm_name=algo.name,
                                run_index=run_idx,
                                status=RunStatus.ERROR,
                                feasible=False,
                                error_message=graph_error,
                            )
                            for algo in self.algorithms
                            for run_idx in range(execution.runs_per_config)
                        ]
                    else:
                        rows = self._run_radius(graph, context, annealing, execution.runs_per_config, execution.track_memory)

                    for row in rows:
                        records.append(row)
                        completed += 1
                        pbar.update(1)
                        if progress_fn:
                            progress_fn(row.algorithm_name, completed, total)

        df = pd.DataFrame([r.model_dump(mode="json") for r in records])
        logger.info("Benchmark complete — %d results collected", len(df))
        return df

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run_radius(
        self,
        graph: Graph,
        context: dict[str, Any],
        annealing: AnnealingConfig,
        runs: int,
        track_memory: bool,
    ) -> Iterator[BenchmarkResult]:
        index = DistanceIndex.build(graph, context["radius"])
        context = dict(
            context,
            problem_size=graph.vertex_count,
            lower_bound=coverage_lower_bound(index),
            optimum=known_optimum(context["instance_generator"], graph.vertex_count, context["radius"]),
        )
        for algo in self.algorithms:
            for run_idx in range(runs):
                raw = _run_one(algo, index, annealing, track_memory)
                yield self._record(algo, context, run_idx, raw, index)

    @staticmethod
    def _record(
        algo: AlgorithmWrapper,
        context: dict[str, Any],
        run_idx: int,
        raw: dict[str, Any],
        index: DistanceIndex,
    ) -> BenchmarkResult:
        objective_value = None
        gap = None
        feasible = False
        status = raw["status"]
        error = raw["error"]

        if status == RunStatus.SUCCESS and raw["solution"] is not None:
            shops = raw["solution"].get("solution", {}).get("shops", [])
            objective_value = len(shops)
            in_range = all(0 <= s < len(index) for s in shops)
            feasible = in_range and is_feasible(shops, index)
            if context["optimum"] is not None:
                gap = objective_value - context["optimum"]
        elif status == RunStatus.SUCCESS:
            status = RunStatus.ERROR
            error = "Algorithm returned None"

        return BenchmarkResult(
            **context,
            algorithm_name=algo.name,
            objective_value=objective_value,
            gap=gap,
            wall_time_seconds=round(raw["wall_time"], 6),
            peak_memory_mb=round(raw["peak_memory_mb"], 3),
            status=status,
            run_index=run_idx,
            feasible=feasible,
            error_message=error,
        )
