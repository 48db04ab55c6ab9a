"""Common machinery for covering instance generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import networkx as nx


class BaseGenerator(ABC):
    """
    A graph family that covering instances are drawn from.

    Subclasses supply a networkx recipe in :meth:`build`.  :meth:`generate`
    relabels it to ``0 .. n-1`` and packs it into the instance dict read by
    :meth:`radiuscover.graph.Graph.from_instance`::

        {"nodes": [...], "edges": [{"source": u, "target": v}, ...],
         "metadata": {"generator": name, "size": n, "params": {...}}}

    Families whose minimum covering has a closed form override
    :meth:`optimal_shops` so benchmarks can report the gap to optimal.
    """

    name: str = "base"

    @abstractmethod
    def build(self, size: int, **params: Any) -> tuple[nx.Graph, dict[str, Any]]:
        """Return the graph and the parameters worth recording in metadata."""

    def optimal_shops(self, size: int, radius: int) -> Optional[int]:
        # at radius 0 every vertex has to be a shop, whatever the family
        return size if radius == 0 else None

    def generate(self, size: int, **params: Any) -> dict:
        G, recorded = self.build(size, **params)
        G = nx.convert_node_labels_to_integers(G, ordering="sorted")
        return {
            "nodes": list(range(G.number_of_nodes())),
            "edges": [{"source": u, "target": v} for u, v in G.edges()],
            "metadata": {"generator": self.name, "size": size, "params": recorded},
        }
