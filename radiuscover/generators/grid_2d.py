"""Rectangular street-grid instances."""

from __future__ import annotations

import math
from typing import Any, Optional

import networkx as nx

from radiuscover.generators.base import BaseGenerator


def grid_shape(size: int) -> tuple[int, int]:
    """Most-square ``(rows, cols)`` with ``rows * cols == size``."""
    rows = max(1, math.isqrt(size))
    while size % rows:
        rows -= 1
    return rows, size // rows


class Grid2DGenerator(BaseGenerator):
    """
    A ``rows × cols`` lattice holding ``size`` vertices.

    The optimum is known only at the extremes: radius 0, and any radius
    reaching every cell from the centre, where a single shop suffices.
    """

    name = "grid_2d"

    def build(self, size: int, **params: Any) -> tuple[nx.Graph, dict[str, Any]]:
        rows, cols = grid_shape(size)
        return nx.grid_2d_graph(rows, cols), {"rows": rows, "cols": cols}

    def optimal_shops(self, size: int, radius: int) -> Optional[int]:
        rows, cols = grid_shape(size)
        centre_reach = (rows // 2) + (cols // 2)
        if size and radius >= centre_reach:
            return 1
        return super().optimal_shops(size, radius)
