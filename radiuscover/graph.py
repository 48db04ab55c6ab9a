"""Undirected, unweighted graph over vertices ``0 .. C-1``."""

from __future__ import annotations

from typing import Iterable

import networkx as nx


class GraphInputError(ValueError):
    """Raised when an edge cannot be added to a :class:`Graph`."""


class Graph:
    """
    Adjacency-list graph with per-vertex degree.

    Edges are stored literally: a duplicate edge appears twice in both
    adjacency lists, and a self-loop ``(v, v)`` appears twice in ``v``'s
    list and adds two to its degree.  With ``strict=True`` both are
    rejected instead.

    Parameters
    ----------
    vertex_count : int
        Number of vertices ``C``.
    strict : bool, default False
        Reject self-loops and duplicate edges.
    """

    def __init__(self, vertex_count: int, strict: bool = False) -> None:
        if vertex_count < 0:
            raise GraphInputError(f"Vertex count must be non-negative, got {vertex_count}")
        self.vertex_count = vertex_count
        self.strict = strict
        self.adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
        self.degree: list[int] = [0] * vertex_count
        self.edge_count = 0
        self._seen: set[tuple[int, int]] = set()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[tuple[int, int]],
        strict: bool = False,
    ) -> "Graph":
        graph = cls(vertex_count, strict=strict)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    @classmethod
    def from_instance(cls, instance: dict, strict: bool = False) -> "Graph":
        """
        Build a graph from a standard instance dict.

        Node labels must be exactly ``0 .. len(nodes)-1``.
        """
        nodes = instance["nodes"]
        if sorted(nodes) != list(range(len(nodes))):
            raise GraphInputError("Instance nodes must be the integers 0 .. n-1")
        edges = [(e["source"], e["target"]) for e in instance["edges"]]
        return cls.from_edges(len(nodes), edges, strict=strict)

    def add_edge(self, u: int, v: int) -> None:
        """Add the undirected edge ``(u, v)``."""
        for endpoint in (u, v):
            if not 0 <= endpoint < self.vertex_count:
                raise GraphInputError(
                    f"Edge ({u}, {v}) has endpoint {endpoint} outside [0, {self.vertex_count})"
                )
        if self.strict:
            if u == v:
                raise GraphInputError(f"Self-loop on vertex {u} is not allowed")
            key = (min(u, v), max(u, v))
            if key in self._seen:
                raise GraphInputError(f"Duplicate edge ({u}, {v})")
            self._seen.add(key)

        self.adjacency[u].append(v)
        self.adjacency[v].append(u)
        self.degree[u] += 1
        self.degree[v] += 1
        self.edge_count += 1

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def neighbors(self, vertex: int) -> list[int]:
        return self.adjacency[vertex]

    def isolated_vertices(self) -> list[int]:
        return [v for v in range(self.vertex_count) if self.degree[v] == 0]

    def to_networkx(self) -> nx.MultiGraph:
        """Return a ``networkx.MultiGraph`` view, keeping parallel edges and loops."""
        G = nx.MultiGraph()
        G.add_nodes_from(range(self.vertex_count))
        for u in range(self.vertex_count):
            for v in self.adjacency[u]:
                if u < v:
                    G.add_edge(u, v)
        # self-loops are listed twice in the adjacency of their vertex
        for u in range(self.vertex_count):
            for _ in range(self.adjacency[u].count(u) // 2):
                G.add_edge(u, u)
        return G

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"<Graph vertices={self.vertex_count} edges={self.edge_count}>"
