"""Single-move neighbourhood for the annealing search."""

from __future__ import annotations

import random


def generate_neighbor(
    solution: list[int],
    vertex_count: int,
    rng: random.Random,
) -> list[int]:
    """
    Return a copy of *solution* with one random unit move applied.

    With probability 1/2 (and only when *solution* is non-empty) a
    uniformly chosen shop is removed.  Otherwise a uniformly chosen vertex
    is appended, unless it is already a shop, in which case the copy is
    returned unchanged.  The result may be infeasible.
    """
    neighbor = list(solution)
    if neighbor and rng.random() < 0.5:
        del neighbor[rng.randrange(len(neighbor))]
    else:
        vertex = rng.randrange(vertex_count)
        if vertex not in neighbor:
            neighbor.append(vertex)
    return neighbor
