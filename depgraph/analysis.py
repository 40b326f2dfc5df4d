"""End-to-end dependency analysis.

``analyze()`` chains the four stages: SCC detection on the input graph,
condensation into a DAG, topological ordering of the condensation, and
shortest/longest paths from a source component.

Example:
    from depgraph import Graph, analyze

    graph = Graph(3)
    graph.add_edge(0, 1, 2.0)
    graph.add_edge(1, 2, 3.0)
    result = analyze(graph)
    result.longest.distance_to(2)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from depgraph.algorithms.base import Components
from depgraph.algorithms.condensation import build_condensation
from depgraph.algorithms.dag_paths import (
    CriticalPath,
    PathResult,
    find_critical_path,
    longest_path,
    shortest_path,
)
from depgraph.algorithms.scc import cyclic_components, find_components
from depgraph.algorithms.topo import topological_sort
from depgraph.config import ANALYSIS_CONFIG, AnalysisConfig
from depgraph.graph import Graph, VertexID
from depgraph.logging import get_logger
from depgraph.metrics import StageMetrics

logger = get_logger(__name__)


@dataclass
class AnalysisResult:
    """Outputs of every pipeline stage.

    Attributes:
        graph: The analyzed input graph.
        components: SCCs of ``graph`` in root-finalization order.
        condensation: DAG with one vertex per component.
        order: Topological order of ``condensation``.
        shortest: Shortest paths from the source component, if computed.
        longest: Longest paths from the source component, if computed.
        critical_path: Heaviest path in ``longest`` (or over all sources when
            configured), if any.
        stage_metrics: Per-stage metrics when collection was requested.
    """

    graph: Graph
    components: Components
    condensation: Graph
    order: List[VertexID]
    shortest: Optional[PathResult] = None
    longest: Optional[PathResult] = None
    critical_path: Optional[CriticalPath] = None
    stage_metrics: Dict[str, StageMetrics] = field(default_factory=dict)

    @property
    def cyclic_components(self) -> Components:
        """Components that contain a cycle."""
        return cyclic_components(self.components, self.graph)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable summary."""

        def finite(value: float) -> Optional[float]:
            return value if math.isfinite(value) else None

        data: Dict[str, Any] = {
            "graph": {
                "vertices": self.graph.vertex_count,
                "edges": self.graph.edge_count,
            },
            "components": [list(component) for component in self.components],
            "cyclic_components": [list(c) for c in self.cyclic_components],
            "condensation": {
                "vertices": self.condensation.vertex_count,
                "edges": [
                    {"from": u, "to": v, "weight": w}
                    for u, v, w in self.condensation.iter_edges()
                ],
                "labels": [
                    self.condensation.label(i)
                    for i in range(self.condensation.vertex_count)
                ],
            },
            "order": list(self.order),
            "shortest": self.shortest.to_dict() if self.shortest else None,
            "longest": self.longest.to_dict() if self.longest else None,
            "critical_path": None,
        }
        if self.critical_path is not None:
            data["critical_path"] = {
                "length": finite(self.critical_path.length),
                "path": list(self.critical_path.path),
            }
        if self.stage_metrics:
            data["metrics"] = {
                name: metrics.to_dict() for name, metrics in self.stage_metrics.items()
            }
        return data


def analyze(
    graph: Graph,
    config: Optional[AnalysisConfig] = None,
    collect_metrics: bool = False,
) -> AnalysisResult:
    """Run the full analysis pipeline on ``graph``.

    Path queries start at condensation vertex ``config.source``. They are
    skipped (left as ``None``) when the condensation has no vertex with that
    id, which includes the empty graph.

    Args:
        graph: Input graph; may contain cycles. Not modified.
        config: Pipeline configuration; defaults to ``ANALYSIS_CONFIG``.
        collect_metrics: Record a ``StageMetrics`` per stage.

    Returns:
        AnalysisResult with the output of every stage.

    Raises:
        ValueError: If ``config`` is invalid.
    """
    config = config or ANALYSIS_CONFIG
    config.validate()

    stage_metrics: Dict[str, StageMetrics] = {}

    def stage(name: str) -> Optional[StageMetrics]:
        if not collect_metrics:
            return None
        metrics = StageMetrics(name=name)
        stage_metrics[name] = metrics
        return metrics

    logger.info(
        f"Analyzing graph with {graph.vertex_count} vertices and "
        f"{graph.edge_count} edges"
    )

    components = find_components(graph, stage("scc"))
    condensation = build_condensation(
        graph,
        components,
        stage("condensation"),
        label_prefix=config.component_label_prefix,
    )
    order = topological_sort(condensation, stage("topological_sort"))
    logger.info(
        f"Found {len(components)} components "
        f"({len(cyclic_components(components, graph))} cyclic); "
        f"condensation has {condensation.edge_count} edges"
    )

    result = AnalysisResult(
        graph=graph,
        components=components,
        condensation=condensation,
        order=order,
        stage_metrics=stage_metrics,
    )

    if config.source >= condensation.vertex_count:
        if condensation.vertex_count:
            logger.warning(
                f"Source {config.source} is outside the condensation "
                f"(0..{condensation.vertex_count - 1}); skipping path analysis"
            )
        return result

    result.shortest = shortest_path(condensation, config.source, stage("shortest_path"))
    result.longest = longest_path(condensation, config.source, stage("longest_path"))
    if config.compute_all_sources_critical_path:
        result.critical_path = find_critical_path(
            condensation, stage("critical_path")
        )
    else:
        result.critical_path = result.longest.critical_path()

    if result.critical_path is not None:
        logger.info(
            f"Critical path length {result.critical_path.length:g} over "
            f"{len(result.critical_path.path)} components"
        )
    return result
