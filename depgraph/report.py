"""Plain-text reports for analysis results."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from depgraph.algorithms.base import Components
from depgraph.algorithms.dag_paths import CriticalPath, PathResult
from depgraph.analysis import AnalysisResult
from depgraph.graph import Graph, VertexID
from depgraph.metrics import StageMetrics

# Long member lists and paths are clipped in table cells
MAX_COL_WIDTH = 48


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 6,
    max_col_width: Optional[int] = None,
) -> str:
    """Format rows as an ASCII table; returns an empty string without rows."""
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    table = [[clip(h) for h in headers]] + [[clip(c) for c in row] for row in rows]
    widths = [
        max(min_width, max(len(row[i]) for row in table)) for i in range(len(headers))
    ]

    def format_row(cells: Sequence[str]) -> str:
        return "   " + " | ".join(f"{c:<{widths[i]}}" for i, c in enumerate(cells))

    lines = [format_row(table[0]), "   " + "-+-".join("-" * w for w in widths)]
    lines.extend(format_row(row) for row in table[1:])
    return "\n".join(lines)


def _format_distance(value: float) -> str:
    """Return a distance with up to three decimals, trailing zeros trimmed."""
    s = f"{value:,.3f}"
    return s.rstrip("0").rstrip(".") if "." in s else s


def _format_vertices(graph: Graph, vertices: Iterable[VertexID]) -> str:
    return " -> ".join(f"{v}({graph.label(v)})" for v in vertices)


def format_components(graph: Graph, components: Components) -> str:
    """List each component with its size and member labels."""
    lines = [f"Strongly connected components: {len(components)}"]
    rows = [
        [i, len(component), ", ".join(f"{v}({graph.label(v)})" for v in component)]
        for i, component in enumerate(components)
    ]
    table = _format_table(
        ["SCC", "Size", "Members"], rows, max_col_width=MAX_COL_WIDTH
    )
    if table:
        lines.append(table)
    return "\n".join(lines)


def format_order(graph: Graph, order: Sequence[VertexID]) -> str:
    """Render a topological order, or the cycle notice for an empty order."""
    if not order and graph.vertex_count:
        return "Graph contains a cycle - no topological order exists"
    return "Topological order: " + _format_vertices(graph, order)


def format_paths(graph: Graph, result: PathResult) -> str:
    """Tabulate distance and path for every reachable vertex."""
    title = (
        f"{result.mode.name.capitalize()} paths from {result.source} "
        f"({graph.label(result.source)})"
    )
    rows = [
        [
            v,
            graph.label(v),
            _format_distance(result.distance_to(v)),
            _format_vertices(graph, result.path_to(v)),
        ]
        for v in result.reachable()
    ]
    table = _format_table(
        ["To", "Label", "Distance", "Path"], rows, max_col_width=MAX_COL_WIDTH
    )
    return title + "\n" + table


def format_critical_path(graph: Graph, critical: Optional[CriticalPath]) -> str:
    if critical is None:
        return "Critical path: none"
    return (
        f"Critical path length: {_format_distance(critical.length)}\n"
        f"Critical path: {_format_vertices(graph, critical.path)}"
    )


def format_metrics(metrics: StageMetrics) -> str:
    rows = [[name, value] for name, value in sorted(metrics.counters.items())]
    header = f"{metrics.name}: {metrics.elapsed_ms():.3f} ms"
    table = _format_table(["Counter", "Value"], rows)
    return header + ("\n" + table if table else "")


def format_report(result: AnalysisResult) -> str:
    """Return the full multi-section text report for ``result``."""
    graph = result.graph
    condensation = result.condensation
    sections = [
        f"Graph: {graph.vertex_count} vertices, {graph.edge_count} edges",
        format_components(graph, result.components),
        (
            f"Condensation: {condensation.vertex_count} components, "
            f"{condensation.edge_count} edges between components"
        ),
        format_order(condensation, result.order),
    ]
    if result.shortest is not None:
        sections.append(format_paths(condensation, result.shortest))
    if result.longest is not None:
        sections.append(format_paths(condensation, result.longest))
        sections.append(format_critical_path(condensation, result.critical_path))
    if result.stage_metrics:
        sections.append(
            "Metrics\n"
            + "\n".join(format_metrics(m) for m in result.stage_metrics.values())
        )
    return "\n\n".join(sections)
