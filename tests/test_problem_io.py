"""Tests for reading problems and writing solutions."""

import io

import pytest

from radiuscover.graph import GraphInputError
from radiuscover.utils.problem_io import (
    ProblemInputError,
    format_solution,
    parse_problem,
    read_problem,
)

PATH5 = """5 4
0 1
1 2
2 3
3 4
1
"""


class TestParseProblem:
    def test_path(self):
        problem = parse_problem(PATH5)
        assert problem.radius == 1
        assert problem.graph.vertex_count == 5
        assert problem.graph.edge_count == 4
        assert problem.graph.degree == [1, 2, 2, 2, 1]

    def test_whitespace_is_free_form(self):
        problem = parse_problem("3 1 0 2\n\n 4")
        assert problem.graph.neighbors(0) == [2]
        assert problem.radius == 4

    def test_read_problem_from_stream(self):
        problem = read_problem(io.StringIO(PATH5))
        assert problem.graph.vertex_count == 5

    def test_duplicates_and_loops_accepted(self):
        problem = parse_problem("2 3 0 1 0 1 1 1 0")
        assert problem.graph.degree == [2, 4]

    def test_strict_rejects_duplicates(self):
        with pytest.raises(GraphInputError, match="Duplicate"):
            parse_problem("2 2 0 1 1 0 0", strict=True)

    def test_truncated(self):
        with pytest.raises(ProblemInputError, match="edge 1 source"):
            parse_problem("3 2 0 1")

    def test_missing_radius(self):
        with pytest.raises(ProblemInputError, match="covering radius"):
            parse_problem("2 1 0 1")

    def test_non_integer_token(self):
        with pytest.raises(ProblemInputError, match="'x'"):
            parse_problem("2 1 0 x 1")

    def test_out_of_range_endpoint(self):
        with pytest.raises(GraphInputError, match="outside"):
            parse_problem("2 1 0 2 1")

    def test_negative_radius(self):
        with pytest.raises(ProblemInputError, match="radius"):
            parse_problem("1 0 -1")

    def test_negative_counts(self):
        with pytest.raises(ProblemInputError, match="non-negative"):
            parse_problem("-1 0 0")


class TestFormatSolution:
    def test_keeps_order_with_trailing_separator(self):
        assert format_solution([4, 0, 2]) == "3\n4 0 2 \n"

    def test_empty(self):
        assert format_solution([]) == "0\n\n"
