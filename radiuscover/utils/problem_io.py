"""
Reading covering problems from the whitespace-separated text format and
writing solutions back.

Input, read strictly in order::

    C R
    c1 c2      (R lines, one undirected edge each)
    d

Output::

    <solution size>
    <id> <id> ... <id>
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, TextIO

from radiuscover.graph import Graph


class ProblemInputError(ValueError):
    """Raised when the problem text is truncated or holds a bad token."""


@dataclass
class CoverProblem:
    graph: Graph
    radius: int


def _tokens(text: str) -> Iterator[tuple[int, str]]:
    for position, token in enumerate(text.split()):
        yield position, token


def _next_int(tokens: Iterator[tuple[int, str]], what: str) -> int:
    try:
        position, token = next(tokens)
    except StopIteration:
        raise ProblemInputError(f"Input ended while reading {what}") from None
    try:
        return int(token)
    except ValueError:
        raise ProblemInputError(
            f"Expected an integer for {what} at token {position}, got {token!r}"
        ) from None


def parse_problem(text: str, strict: bool = False) -> CoverProblem:
    """
    Parse a covering problem.

    Raises
    ------
    ProblemInputError
        On non-integer tokens, truncated input, or negative counts/radius.
    GraphInputError
        When an edge endpoint is outside ``[0, C)``, or, with ``strict``,
        on self-loops and duplicate edges.
    """
    tokens = _tokens(text)
    vertex_count = _next_int(tokens, "vertex count")
    edge_count = _next_int(tokens, "edge count")
    if vertex_count < 0 or edge_count < 0:
        raise ProblemInputError(
            f"Vertex and edge counts must be non-negative, got {vertex_count} and {edge_count}"
        )

    graph = Graph(vertex_count, strict=strict)
    for i in range(edge_count):
        u = _next_int(tokens, f"edge {i} source")
        v = _next_int(tokens, f"edge {i} target")
        graph.add_edge(u, v)

    radius = _next_int(tokens, "covering radius")
    if radius < 0:
        raise ProblemInputError(f"Covering radius must be non-negative, got {radius}")
    return CoverProblem(graph=graph, radius=radius)


def read_problem(stream: TextIO, strict: bool = False) -> CoverProblem:
    return parse_problem(stream.read(), strict=strict)


def format_solution(solution: Sequence[int]) -> str:
    """Render the size line and the id line, ids in their stored order."""
    ids = "".join(f"{shop} " for shop in solution)
    return f"{len(solution)}\n{ids}\n"
