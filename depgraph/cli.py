"""Command-line interface for depgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Dict, List, Optional

from depgraph.analysis import AnalysisResult, analyze
from depgraph.config import AnalysisConfig
from depgraph.generate import generate_dag, generate_graph_with_sccs
from depgraph.io import YAML_SUFFIXES, example_graph, load_graph, save_graph
from depgraph.logging import get_logger, set_global_log_level
from depgraph.report import format_report

logger = get_logger(__name__)

GRAPH_SUFFIXES = {".json"} | YAML_SUFFIXES


def _format_duration(seconds: float) -> str:
    """Return a concise duration string, e.g. ``"12.3 ms"`` or ``"1.23 s"``."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _collect_graph_files(paths: List[Path]) -> List[Path]:
    """Expand directories into the graph files they contain, sorted by name.

    Files are passed through as given, so a missing file surfaces as
    ``FileNotFoundError`` when it is loaded.
    """
    files: List[Path] = []
    for path in paths:
        if path.is_dir():
            found = sorted(
                p
                for p in path.iterdir()
                if p.is_file() and p.suffix.lower() in GRAPH_SUFFIXES
            )
            if not found:
                logger.warning(f"No graph files found in directory: {path}")
            files.extend(found)
        else:
            files.append(path)
    return files


def _run_analyze(
    paths: List[Path],
    source: int,
    as_json: bool,
    results: Optional[Path],
    with_metrics: bool,
    all_sources: bool,
) -> None:
    """Analyze graph files (or the built-in example) and print the outcome.

    A single graph produces a single report or JSON document. Several graphs
    produce one report per file, or a JSON object keyed by file path.
    """
    start = perf_counter()
    config = AnalysisConfig(
        source=source, compute_all_sources_critical_path=all_sources
    )
    current: Optional[Path] = None
    try:
        analyses: Dict[str, AnalysisResult] = {}
        if not paths:
            logger.info("No graph file given; using the built-in example graph")
            analyses["example"] = analyze(
                example_graph(), config=config, collect_metrics=with_metrics
            )
        else:
            files = _collect_graph_files(paths)
            if not files:
                raise ValueError("No graph files to analyze")
            for current in files:
                logger.info(f"Loading graph from: {current}")
                graph = load_graph(current, default_weight=config.default_weight)
                analyses[str(current)] = analyze(
                    graph, config=config, collect_metrics=with_metrics
                )

        if as_json or results is not None:
            if len(analyses) == 1:
                payload = next(iter(analyses.values())).to_dict()
            else:
                payload = {name: result.to_dict() for name, result in analyses.items()}
            json_str = json.dumps(payload, indent=2)
            if results is not None:
                results.parent.mkdir(parents=True, exist_ok=True)
                results.write_text(json_str)
                logger.info(f"Results written to: {results}")
            if as_json:
                print(json_str)
        if not as_json:
            for name, result in analyses.items():
                if len(analyses) > 1:
                    print(f"=== {name} ===")
                print(format_report(result))
                if len(analyses) > 1:
                    print()

        logger.info(
            f"Analyzed {len(analyses)} graph(s) in "
            f"{_format_duration(perf_counter() - start)}"
        )
    except FileNotFoundError:
        logger.error(f"Graph file not found: {current}")
        print(f"ERROR: Graph file not found: {current}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to analyze graph: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to analyze graph: {type(e).__name__}: {e}")
        sys.exit(1)


def _run_generate(
    kind: str,
    output: Path,
    vertices: int,
    density: float,
    components: int,
    seed: Optional[int],
) -> None:
    try:
        if kind == "dag":
            graph = generate_dag(vertices, density, seed=seed)
        else:
            graph = generate_graph_with_sccs(vertices, components, seed=seed)
        save_graph(graph, output)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to generate graph: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to generate graph: {type(e).__name__}: {e}")
        sys.exit(1)
    logger.info(f"Generated {kind} graph written to: {output}")
    print(
        f"Wrote {graph.vertex_count} vertices and {graph.edge_count} edges to {output}"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``depgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="depgraph",
        description="Find dependency cycles, execution order and critical paths.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{analyze,generate}",
        help="Available commands",
    )

    analyze_parser = subparsers.add_parser(
        "analyze", help="Analyze graph files or directories of graph files"
    )
    analyze_parser.add_argument(
        "graphs",
        type=Path,
        nargs="*",
        help=(
            "Graph JSON/YAML files or directories holding them "
            "(default: built-in example graph)"
        ),
    )
    analyze_parser.add_argument(
        "--source",
        "-s",
        type=int,
        default=0,
        help="Condensation vertex to compute paths from (default: 0)",
    )
    analyze_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON instead of text"
    )
    analyze_parser.add_argument(
        "--results", "-r", type=Path, default=None, help="Also write JSON results here"
    )
    analyze_parser.add_argument(
        "--metrics", action="store_true", help="Collect per-stage counters and timing"
    )
    analyze_parser.add_argument(
        "--all-sources",
        action="store_true",
        help="Search every component as a source for the critical path",
    )

    generate_parser = subparsers.add_parser(
        "generate", help="Write a synthetic graph dataset"
    )
    generate_parser.add_argument("kind", choices=["dag", "scc"], help="Graph family")
    generate_parser.add_argument("output", type=Path, help="Output JSON/YAML file")
    generate_parser.add_argument(
        "--vertices", "-n", type=int, default=10, help="Number of vertices"
    )
    generate_parser.add_argument(
        "--density", type=float, default=0.3, help="Edge probability for 'dag'"
    )
    generate_parser.add_argument(
        "--components", "-k", type=int, default=3, help="Number of clusters for 'scc'"
    )
    generate_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "analyze":
        _run_analyze(
            paths=args.graphs,
            source=args.source,
            as_json=args.json,
            results=args.results,
            with_metrics=args.metrics,
            all_sources=args.all_sources,
        )
    elif args.command == "generate":
        _run_generate(
            kind=args.kind,
            output=args.output,
            vertices=args.vertices,
            density=args.density,
            components=args.components,
            seed=args.seed,
        )


if __name__ == "__main__":
    main()
