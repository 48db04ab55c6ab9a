"""Sparse random graphs, which tend to leave isolated vertices."""

from __future__ import annotations

from typing import Any

import networkx as nx

from radiuscover.generators.base import BaseGenerator


class ErdosRenyiGenerator(BaseGenerator):
    """G(n, p) with ``p`` (default 0.1) and an optional ``seed``."""

    name = "erdos_renyi"

    def build(self, size: int, **params: Any) -> tuple[nx.Graph, dict[str, Any]]:
        p = params.get("p", 0.1)
        return nx.gnp_random_graph(size, p, seed=params.get("seed")), {"p": p}
