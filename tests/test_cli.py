"""Tests for the wdg command line."""

import pytest
from click.testing import CliRunner

from weighted_digraph import __version__
from weighted_digraph.cli import cli
from weighted_digraph.config import reset_config
from weighted_digraph.container import reset_container


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr("weighted_digraph.cli.configure_logging", lambda *args, **kwargs: None)
    reset_config()
    reset_container()
    yield
    reset_container()
    reset_config()


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("4\n0 1 1\n0 2 4\n1 2 1\n0 1 9\n", encoding="utf-8")
    return str(path)


def test_cli_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args_shows_help(runner, graph_file):
    result = runner.invoke(cli, ["-f", graph_file])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_info(runner, graph_file):
    result = runner.invoke(cli, ["-f", graph_file, "info"])

    assert result.exit_code == 0
    assert "vertices: 4" in result.output
    assert "arcs: 4" in result.output


def test_degree(runner, graph_file):
    result = runner.invoke(cli, ["-f", graph_file, "degree", "0"])
    assert result.exit_code == 0
    assert result.output.strip() == "2"


def test_weight_first_insertion_wins(runner, graph_file):
    result = runner.invoke(cli, ["-f", graph_file, "weight", "0", "1"])
    assert result.output.strip() == "1"


def test_weight_missing_arc(runner, graph_file):
    result = runner.invoke(cli, ["-f", graph_file, "weight", "2", "0"])
    assert result.exit_code == 0
    assert result.output.strip() == "inf"


def test_path_weight(runner, graph_file):
    result = runner.invoke(cli, ["-f", graph_file, "path-weight", "0", "1", "2"])
    assert result.output.strip() == "2"


def test_connected_and_reachable(runner, graph_file):
    assert runner.invoke(cli, ["-f", graph_file, "connected", "3", "3"]).output.strip() == "true"
    assert runner.invoke(cli, ["-f", graph_file, "connected", "1", "0"]).output.strip() == "false"
    assert runner.invoke(cli, ["-f", graph_file, "reachable", "0", "2"]).output.strip() == "true"
    assert runner.invoke(cli, ["-f", graph_file, "reachable", "2", "0"]).output.strip() == "false"


def test_valid(runner, graph_file):
    assert runner.invoke(cli, ["-f", graph_file, "valid", "0", "1", "2"]).output.strip() == "true"
    assert runner.invoke(cli, ["-f", graph_file, "valid", "2", "1"]).output.strip() == "false"


def test_shortest(runner, graph_file):
    result = runner.invoke(cli, ["-f", graph_file, "shortest", "0", "2"])

    assert result.exit_code == 0
    assert result.output.strip() == "0 -> 1 -> 2 (weight 2)"


def test_shortest_unreachable_exits_nonzero(runner, graph_file):
    result = runner.invoke(cli, ["-f", graph_file, "shortest", "0", "3"])

    assert result.exit_code == 1
    assert "No path from 0 to 3" in result.output


def test_out_of_range_vertex_exits_nonzero(runner, graph_file):
    result = runner.invoke(cli, ["-f", graph_file, "degree", "7"])
    assert result.exit_code == 1


def test_missing_file_is_fatal(runner, tmp_path):
    result = runner.invoke(cli, ["-f", str(tmp_path / "absent.txt"), "info"])

    assert result.exit_code == 1
    assert "cannot open file!" in result.output


def test_without_file_uses_configured_graph(runner, monkeypatch, tmp_path):
    (tmp_path / "digraph.txt").write_text("2\n0 1 3\n", encoding="utf-8")
    monkeypatch.setenv("WDG_GRAPH_DATA_DIR", str(tmp_path))

    result = runner.invoke(cli, ["weight", "0", "1"])

    assert result.exit_code == 0
    assert result.output.strip() == "3"


def test_without_file_reads_bundled_sample(runner):
    result = runner.invoke(cli, ["shortest", "0", "4"])

    assert result.exit_code == 0
    assert result.output.strip() == "0 -> 2 -> 5 -> 4 (weight 20)"
