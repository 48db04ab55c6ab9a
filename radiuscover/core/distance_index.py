"""Breadth-first precomputation of every vertex's radius-d neighbourhood."""

from __future__ import annotations

import logging
from collections import deque

from radiuscover.graph import Graph

logger = logging.getLogger(__name__)


class DistanceIndex:
    """
    For each vertex ``s``, the vertices within ``radius`` hops of ``s``.

    Entries are listed in breadth-first discovery order and always start
    with ``s`` itself.  The index is read-only once built.
    """

    def __init__(self, radius: int, entries: list[list[int]]) -> None:
        self.radius = radius
        self._entries = entries

    @classmethod
    def build(cls, graph: Graph, radius: int) -> "DistanceIndex":
        if radius < 0:
            raise ValueError(f"Covering radius must be non-negative, got {radius}")
        entries = [_within_radius(graph, s, radius) for s in range(graph.vertex_count)]
        logger.info(
            "Built distance index for %d vertices at radius %d (%d entries total)",
            graph.vertex_count, radius, sum(len(e) for e in entries),
        )
        return cls(radius, entries)

    @property
    def vertex_count(self) -> int:
        return len(self._entries)

    def __getitem__(self, vertex: int) -> list[int]:
        return self._entries[vertex]

    def __len__(self) -> int:
        return len(self._entries)

    def covers(self, shop: int, vertex: int) -> bool:
        return vertex in self._entries[shop]


def _within_radius(graph: Graph, start: int, radius: int) -> list[int]:
    visited = [False] * graph.vertex_count
    visited[start] = True
    queue: deque[tuple[int, int]] = deque([(start, 0)])
    found: list[int] = []

    while queue:
        vertex, distance = queue.popleft()
        found.append(vertex)
        # vertices at the radius are recorded but never expanded
        if distance == radius:
            continue
        for neighbor in graph.adjacency[vertex]:
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append((neighbor, distance + 1))

    return found
