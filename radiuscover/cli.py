"""
radiuscover — choose shops so every vertex is within d hops of one.

Reads ``C R``, ``R`` edge pairs and ``d`` from stdin, writes the solution
size and the shop ids to stdout.

Usage
-----
    radiuscover --seed 7 < problem.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Optional, Sequence

from pydantic import ValidationError

from radiuscover.config import AnnealingConfig
from radiuscover.core.annealing import AnnealingController
from radiuscover.core.distance_index import DistanceIndex
from radiuscover.core.greedy import greedy_cover
from radiuscover.graph import GraphInputError
from radiuscover.utils.problem_io import ProblemInputError, format_solution, read_problem

logger = logging.getLogger("radiuscover")

EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    defaults = AnnealingConfig()
    parser = argparse.ArgumentParser(
        prog="radiuscover",
        description="Approximate a minimum radius-d covering set of a graph.",
    )
    parser.add_argument("--deadline", type=float, default=defaults.deadline_seconds, help="Wall-clock budget in seconds, counted from process start.")
    parser.add_argument("--initial-temperature", type=float, default=defaults.initial_temperature, help="Starting annealing temperature.")
    parser.add_argument("--cooling-rate", type=float, default=defaults.cooling_rate, help="Temperature multiplier per feasible iteration.")
    parser.add_argument("--min-temperature", type=float, default=defaults.min_temperature, help="Stop once the temperature drops to this value.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source (default: clock reading).")
    parser.add_argument("--strict-edges", action="store_true", help="Reject self-loops and duplicate edges.")
    parser.add_argument("--greedy-only", action="store_true", help="Skip annealing and print the greedy covering.")
    parser.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity (logs go to stderr).")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    started_at = time.monotonic()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s | %(message)s",
    )

    try:
        config = AnnealingConfig(
            deadline_seconds=args.deadline,
            initial_temperature=args.initial_temperature,
            cooling_rate=args.cooling_rate,
            min_temperature=args.min_temperature,
            seed=args.seed,
        )
    except ValidationError as exc:
        logger.error("Invalid search settings: %s", exc)
        return EXIT_INPUT_ERROR

    try:
        problem = read_problem(sys.stdin, strict=args.strict_edges)
    except (ProblemInputError, GraphInputError) as exc:
        logger.error("Invalid input: %s", exc)
        return EXIT_INPUT_ERROR

    logger.info(
        "Read %r with covering radius %d", problem.graph, problem.radius,
    )
    index = DistanceIndex.build(problem.graph, problem.radius)

    if args.greedy_only:
        shops = greedy_cover(index)
    else:
        controller = AnnealingController(index, config, started_at=started_at)
        shops = controller.run().solution

    sys.stdout.write(format_solution(shops))
    return 0


if __name__ == "__main__":
    sys.exit(main())
