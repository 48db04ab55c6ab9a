"""Paths and cycles, the families with a closed-form optimum."""

from __future__ import annotations

import math
from typing import Any, Optional

import networkx as nx

from radiuscover.generators.base import BaseGenerator


class PathGenerator(BaseGenerator):
    """The path ``0 - 1 - ... - (n-1)``."""

    name = "path"

    def build(self, size: int, **params: Any) -> tuple[nx.Graph, dict[str, Any]]:
        return nx.path_graph(size), {}

    def optimal_shops(self, size: int, radius: int) -> Optional[int]:
        # a shop covers at most 2d + 1 consecutive vertices
        return math.ceil(size / (2 * radius + 1))


class CycleGenerator(PathGenerator):
    """The cycle on ``n`` vertices; same optimum as the path of that length."""

    name = "cycle"

    def build(self, size: int, **params: Any) -> tuple[nx.Graph, dict[str, Any]]:
        return nx.cycle_graph(size), {}
