#!/usr/bin/env python3
"""
radiuscover — benchmark CLI.

1. Instances: generated graphs (``--generator``) and/or custom JSON
   (``--instances``)
2. Execution: greedy and annealing coverings for every radius
3. Report: results table, per-algorithm summary, optional CSV

Usage
-----
    python scripts/run_benchmark.py --generator grid_2d --sizes 25 100 --radii 1 2 --deadline 2
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

import pandas as pd

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from radiuscover.algorithms.cover import DEFAULT_ALGORITHMS  # noqa: E402
from radiuscover.config import (  # noqa: E402
    AnnealingConfig,
    BenchmarkConfig,
    ExecutionConfig,
    GeneratorConfig,
    InstanceConfig,
)
from radiuscover.engine.runner import BenchmarkRunner  # noqa: E402
from radiuscover.generators import list_generators  # noqa: E402
from radiuscover.utils.instance_loader import load_instances  # noqa: E402
from radiuscover.utils.loader import load_algorithm_from_file  # noqa: E402


def _parse_params(pairs: list[str]) -> dict:
    """Turn ``key=value`` pairs into a dict, decoding values as JSON when possible."""
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected key=value, got {pair!r}")
        try:
            params[key] = json.loads(value)
        except json.JSONDecodeError:
            params[key] = value
    return params


def build_config(args: argparse.Namespace) -> BenchmarkConfig:
    generators = []
    if args.generator:
        params = _parse_params(args.param or [])
        for name in args.generator:
            generators.append(GeneratorConfig(
                type=name,
                sizes=args.sizes,
                count_per_size=args.count,
                params=params,
            ))

    custom = []
    for path in args.instances or []:
        custom.extend(load_instances(path))

    return BenchmarkConfig(
        instance_config=InstanceConfig(generators=generators, custom_instances=custom),
        execution_config=ExecutionConfig(
            runs_per_config=args.runs, radii=args.radii, track_memory=not args.no_memory,
        ),
        annealing=AnnealingConfig(deadline_seconds=args.deadline, seed=args.seed),
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark radius-d covering algorithms.")
    parser.add_argument("--generator", "-g", nargs="+", choices=list_generators(), help="Instance generator(s) to use.")
    parser.add_argument("--sizes", "-n", nargs="+", type=int, default=[25, 100], help="Graph sizes to generate.")
    parser.add_argument("--count", type=int, default=1, help="Instances per size.")
    parser.add_argument("--param", nargs="*", help="Generator params as key=value (e.g. p=0.05 seed=3).")
    parser.add_argument("--instances", "-i", nargs="+", help="JSON instance file(s) to include.")
    parser.add_argument("--radii", "-d", nargs="+", type=int, default=[1], help="Covering radii to benchmark.")
    parser.add_argument("--runs", type=int, default=1, help="Runs per (algorithm, instance, radius).")
    parser.add_argument("--deadline", type=float, default=5.0, help="Annealing deadline in seconds.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the annealing random source.")
    parser.add_argument("--custom", "-c", type=str, help="Path to a custom AlgorithmWrapper file to benchmark alongside the built-ins.")
    parser.add_argument("--no-memory", action="store_true", help="Skip tracemalloc so deadline-bound searches run at full speed.")
    parser.add_argument("--csv", type=str, default=None, help="Write the results table to this CSV path.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s | %(message)s",
    )

    if not args.generator and not args.instances:
        parser.error("Provide --generator and/or --instances")

    config = build_config(args)
    runner = BenchmarkRunner(config)
    for algo_cls in DEFAULT_ALGORITHMS:
        runner.register_algorithm(algo_cls())
    if args.custom:
        try:
            runner.register_algorithm(load_algorithm_from_file(args.custom))
        except (FileNotFoundError, ImportError, ValueError) as e:
            print(f"Failed to load custom algorithm: {e}")
            sys.exit(1)

    df = runner.run()

    print("\n" + "=" * 72)
    print("RESULTS")
    print("=" * 72)
    print(df.to_string(index=False))

    print("\n── Summary ──")
    for column in ("objective_value", "optimum", "gap"):
        df[column] = pd.to_numeric(df[column])
    summary = (
        df[df["status"] == "success"]
        .groupby(["algorithm_name", "radius", "problem_size"])
        .agg(
            avg_shops=("objective_value", "mean"),
            min_shops=("objective_value", "min"),
            lower_bound=("lower_bound", "first"),
            optimum=("optimum", "first"),
            avg_gap=("gap", "mean"),
            avg_time_s=("wall_time_seconds", "mean"),
            all_feasible=("feasible", "all"),
        )
        .round(4)
    )
    print(summary)

    if args.csv:
        df.to_csv(args.csv, index=False)
        print(f"\nResults written to {args.csv}")


if __name__ == "__main__":
    main()
