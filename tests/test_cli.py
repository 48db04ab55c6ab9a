"""Tests for the radiuscover command line."""

import io

import pytest

from radiuscover import cli

PATH5 = "5 4\n0 1\n1 2\n2 3\n3 4\n1\n"


def _run(monkeypatch, capsys, stdin, *argv):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = cli.main(list(argv))
    return code, capsys.readouterr().out


class TestCli:
    def test_greedy_only(self, monkeypatch, capsys):
        code, out = _run(monkeypatch, capsys, PATH5, "--greedy-only")
        assert code == 0
        assert out == "3\n0 2 4 \n"

    def test_annealing_output(self, monkeypatch, capsys):
        code, out = _run(
            monkeypatch, capsys, PATH5,
            "--seed", "1", "--initial-temperature", "10", "--cooling-rate", "0.999",
        )
        assert code == 0
        size_line, ids_line = out.splitlines()
        shops = [int(tok) for tok in ids_line.split()]
        assert int(size_line) == len(shops)
        assert 2 <= len(shops) <= 3
        covered = set()
        for s in shops:
            covered.update({s - 1, s, s + 1})
        assert set(range(5)) <= covered

    def test_radius_zero_selects_everything(self, monkeypatch, capsys):
        code, out = _run(monkeypatch, capsys, "3 1 0 1 0", "--deadline", "0.05")
        assert code == 0
        size_line, ids_line = out.splitlines()
        assert size_line == "3"
        assert sorted(int(t) for t in ids_line.split()) == [0, 1, 2]

    def test_invalid_input_exit_code(self, monkeypatch, capsys):
        code, out = _run(monkeypatch, capsys, "2 1 0 5 1")
        assert code == cli.EXIT_INPUT_ERROR
        assert out == ""

    def test_strict_edges(self, monkeypatch, capsys):
        code, _ = _run(monkeypatch, capsys, "2 1 1 1 0", "--strict-edges")
        assert code == cli.EXIT_INPUT_ERROR

    def test_invalid_settings(self, monkeypatch, capsys):
        code, _ = _run(monkeypatch, capsys, PATH5, "--cooling-rate", "1.5")
        assert code == cli.EXIT_INPUT_ERROR

    def test_parser_defaults(self):
        args = cli.build_parser().parse_args([])
        assert args.deadline == 26.0
        assert args.initial_temperature == 3000.0
        assert args.cooling_rate == 0.9999
        assert args.min_temperature == 0.01
        assert args.seed is None

    def test_unknown_log_level(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["--log-level", "LOUD"])
