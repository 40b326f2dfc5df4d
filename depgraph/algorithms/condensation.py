"""Condensation of a graph into the DAG of its strongly connected components.

Each component becomes one vertex. For every ordered pair of distinct
components connected by at least one original edge, exactly one condensation
edge is kept, carrying the weight of the *first* such edge met while scanning
vertices in id order and edges in insertion order. Later parallel edges are
dropped, not aggregated; a different policy (minimum, sum, ...) would change
downstream path lengths. Edges inside a component, self-loops included, are
discarded.
"""

from __future__ import annotations

from typing import Dict, Optional, Set, Tuple

from depgraph.algorithms.base import Components, count
from depgraph.errors import ComponentsPreconditionError
from depgraph.graph import Graph, VertexID
from depgraph.logging import get_logger
from depgraph.metrics import Metrics

logger = get_logger(__name__)


def _index_partition(graph: Graph, components: Components) -> Dict[VertexID, int]:
    """Map vertex -> component index, verifying ``components`` partitions ``graph``.

    Raises:
        ComponentsPreconditionError: On out-of-range ids, duplicated vertices,
            or vertices missing from every component.
    """
    n = graph.vertex_count
    vertex_to_component: Dict[VertexID, int] = {}
    for index, component in enumerate(components):
        if not component:
            raise ComponentsPreconditionError(f"Component {index} is empty")
        for vertex in component:
            if not isinstance(vertex, int) or not 0 <= vertex < n:
                raise ComponentsPreconditionError(
                    f"Component {index} references vertex {vertex!r} outside a "
                    f"graph of {n} vertices; components belong to another graph"
                )
            if vertex in vertex_to_component:
                raise ComponentsPreconditionError(
                    f"Vertex {vertex} appears in components "
                    f"{vertex_to_component[vertex]} and {index}"
                )
            vertex_to_component[vertex] = index

    if len(vertex_to_component) != n:
        missing = sorted(set(range(n)) - vertex_to_component.keys())
        raise ComponentsPreconditionError(
            f"Components cover {len(vertex_to_component)} of {n} vertices; "
            f"missing {missing[:10]}. Run find_components() on this graph first"
        )
    return vertex_to_component


def component_label(
    graph: Graph, index: int, component: Tuple[VertexID, ...], prefix: str = "SCC"
) -> str:
    """Return the composite label ``"<prefix><index>{a,b,...}"`` of a component."""
    members = ",".join(graph.label(vertex) for vertex in component)
    return f"{prefix}{index}{{{members}}}"


def build_condensation(
    graph: Graph,
    components: Components,
    metrics: Optional[Metrics] = None,
    label_prefix: str = "SCC",
) -> Graph:
    """Collapse each component of ``graph`` into a single vertex.

    Args:
        graph: Original graph. Not modified.
        components: Output of ``find_components(graph)``; must be a complete
            partition of ``graph``'s vertices.
        metrics: Optional observer; receives ``edges_examined`` and
            ``condensation_edges`` counters.
        label_prefix: Prefix of the composite vertex labels.

    Returns:
        A new acyclic graph with ``len(components)`` vertices. Vertex ``i``
        stands for ``components[i]``.

    Raises:
        ComponentsPreconditionError: If ``components`` does not partition the
            vertices of ``graph``. Raised before anything is built.
    """
    vertex_to_component = _index_partition(graph, components)

    if metrics is not None:
        metrics.start_timer()

    condensation = Graph(len(components))
    seen_pairs: Set[Tuple[int, int]] = set()

    for source, target, weight in graph.iter_edges():
        count(metrics, "edges_examined")
        source_component = vertex_to_component[source]
        target_component = vertex_to_component[target]
        if source_component == target_component:
            continue
        pair = (source_component, target_component)
        if pair in seen_pairs:
            continue
        seen_pairs.add(pair)
        condensation.add_edge(source_component, target_component, weight)
        count(metrics, "condensation_edges")

    for index, component in enumerate(components):
        condensation.set_label(
            index, component_label(graph, index, component, label_prefix)
        )

    if metrics is not None:
        metrics.stop_timer()

    logger.debug(
        f"Condensed {graph.vertex_count} vertices into {condensation.vertex_count} "
        f"components with {condensation.edge_count} cross-component edges"
    )
    return condensation
