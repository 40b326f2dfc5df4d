import json
import logging
from pathlib import Path

import pytest

from depgraph import cli
from depgraph.graph import Graph
from depgraph.io import example_graph, load_graph, save_graph
from depgraph.logging import set_global_log_level


@pytest.fixture(autouse=True)
def _restore_log_level():
    yield
    set_global_log_level(logging.INFO)


def test_no_arguments_prints_help(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: depgraph" in capsys.readouterr().out


def test_analyze_builtin_example(capsys):
    cli.main(["analyze", "--source", "2"])
    out = capsys.readouterr().out
    assert "Strongly connected components: 3" in out
    assert "SCC0{Task3,Task2,Task1}" in out
    assert "Critical path length: 5" in out


def test_analyze_json_stdout_is_pure_json(capsys):
    cli.main(["analyze", "--json", "--source", "2"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["order"] == [2, 0, 1]
    assert payload["critical_path"] == {"length": 5.0, "path": [2, 1]}


def test_analyze_file_with_results(tmp_path: Path, capsys):
    graph_path = save_graph(example_graph(), tmp_path / "demo.yaml")
    results_path = tmp_path / "out" / "results.json"

    cli.main(["analyze", str(graph_path), "--results", str(results_path), "--metrics"])

    data = json.loads(results_path.read_text())
    assert data["components"] == [[3, 2, 1], [4], [0]]
    assert set(data["metrics"]) >= {"scc", "condensation", "topological_sort"}
    assert "Metrics" in capsys.readouterr().out


def test_analyze_all_sources(capsys):
    cli.main(["analyze", "--json", "--all-sources"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["critical_path"]["path"] == [2, 1]


def test_analyze_missing_file(tmp_path: Path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["analyze", str(tmp_path / "missing.json")])
    assert exc_info.value.code == 1
    assert "ERROR: Graph file not found" in capsys.readouterr().out


def test_analyze_malformed_file(tmp_path: Path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"vertices": 2, "edges": [{"from": 0, "to": 9}]}))
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["analyze", str(path)])
    assert exc_info.value.code == 1
    assert "InvalidVertexError" in capsys.readouterr().out


def test_analyze_negative_source(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["analyze", "--source", "-1"])
    assert exc_info.value.code == 1
    assert "source must be non-negative" in capsys.readouterr().out


def _write_two_graphs(directory: Path):
    save_graph(example_graph(), directory / "a_demo.json")
    chain = Graph(3)
    chain.add_edge(0, 1, 2.0)
    chain.add_edge(1, 2, 3.0)
    save_graph(chain, directory / "b_chain.yaml")
    (directory / "notes.txt").write_text("not a graph")


def test_analyze_directory_json(tmp_path: Path, capsys):
    _write_two_graphs(tmp_path)
    cli.main(["analyze", str(tmp_path), "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert list(payload) == [
        str(tmp_path / "a_demo.json"),
        str(tmp_path / "b_chain.yaml"),
    ]
    demo_result = payload[str(tmp_path / "a_demo.json")]
    assert demo_result["components"] == [[3, 2, 1], [4], [0]]
    chain_result = payload[str(tmp_path / "b_chain.yaml")]
    assert chain_result["condensation"]["vertices"] == 3
    assert chain_result["order"] == [2, 1, 0]


def test_analyze_several_files_text(tmp_path: Path, capsys):
    _write_two_graphs(tmp_path)
    first, second = tmp_path / "a_demo.json", tmp_path / "b_chain.yaml"
    cli.main(["analyze", str(first), str(second)])
    out = capsys.readouterr().out
    assert f"=== {first} ===" in out
    assert f"=== {second} ===" in out
    assert out.index(str(first)) < out.index(str(second))


def test_analyze_empty_directory(tmp_path: Path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["analyze", str(tmp_path)])
    assert exc_info.value.code == 1
    assert "No graph files to analyze" in capsys.readouterr().out


@pytest.mark.parametrize("kind", ["dag", "scc"])
def test_generate_writes_loadable_graph(tmp_path: Path, capsys, kind):
    output = tmp_path / f"{kind}.json"
    cli.main(["generate", kind, str(output), "-n", "12", "-k", "3", "--seed", "7"])

    graph = load_graph(output)
    assert graph.vertex_count == 12
    assert f"Wrote 12 vertices and {graph.edge_count} edges" in capsys.readouterr().out


def test_generate_is_reproducible(tmp_path: Path):
    first, second = tmp_path / "a.json", tmp_path / "b.json"
    cli.main(["generate", "dag", str(first), "--seed", "3"])
    cli.main(["generate", "dag", str(second), "--seed", "3"])
    assert first.read_text() == second.read_text()


def test_generate_invalid_arguments(tmp_path: Path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["generate", "scc", str(tmp_path / "x.json"), "-n", "2", "-k", "5"])
    assert exc_info.value.code == 1
    assert "ERROR: Failed to generate graph" in capsys.readouterr().out


def test_verbose_sets_debug_level():
    cli.main(["--verbose", "analyze", "--json"])
    assert logging.getLogger("depgraph").level == logging.DEBUG


def test_quiet_sets_warning_level():
    cli.main(["--quiet", "analyze", "--json"])
    assert logging.getLogger("depgraph").level == logging.WARNING
