"""Topological ordering with Kahn's algorithm."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from depgraph.algorithms.base import TopoStatus, count
from depgraph.graph import Graph, VertexID
from depgraph.logging import get_logger
from depgraph.metrics import Metrics

logger = get_logger(__name__)


@dataclass(frozen=True)
class TopoResult:
    """Tagged outcome of a topological sort.

    Attributes:
        status: ACYCLIC, CYCLIC or EMPTY.
        order: The topological order; empty unless ``status`` is ACYCLIC.
    """

    status: TopoStatus
    order: List[VertexID] = field(default_factory=list)

    @property
    def is_acyclic(self) -> bool:
        """True for ACYCLIC and EMPTY (a graph without vertices has no cycle)."""
        return self.status is not TopoStatus.CYCLIC


def _kahn(dag: Graph, metrics: Optional[Metrics]) -> List[VertexID]:
    """Return the vertices Kahn's algorithm manages to order.

    The result is a full order iff its length equals the vertex count.
    """
    n = dag.vertex_count
    adjacency = dag._adj
    in_degree = [0] * n
    for edges in adjacency:
        for edge in edges:
            in_degree[edge.target] += 1
            count(metrics, "in_degree_calculations")

    frontier: Deque[VertexID] = deque()
    for vertex in range(n):
        if in_degree[vertex] == 0:
            frontier.append(vertex)
            count(metrics, "queue_pushes")

    order: List[VertexID] = []
    while frontier:
        u = frontier.popleft()
        order.append(u)
        count(metrics, "queue_pops")
        for edge in adjacency[u]:
            in_degree[edge.target] -= 1
            count(metrics, "edges_processed")
            if in_degree[edge.target] == 0:
                frontier.append(edge.target)
                count(metrics, "queue_pushes")
    return order


def sort_with_status(dag: Graph, metrics: Optional[Metrics] = None) -> TopoResult:
    """Topologically sort ``dag`` and say explicitly why an order may be empty.

    Args:
        dag: Graph to sort. Not modified.
        metrics: Optional observer (see :func:`topological_sort`).

    Returns:
        ``TopoResult`` with status EMPTY for a zero-vertex graph, CYCLIC when
        some vertex could not be ordered, ACYCLIC otherwise.
    """
    if metrics is not None:
        metrics.start_timer()

    order = _kahn(dag, metrics)

    if dag.vertex_count == 0:
        result = TopoResult(TopoStatus.EMPTY)
    elif len(order) < dag.vertex_count:
        count(metrics, "cycle_detected")
        logger.debug(
            f"Cycle detected: ordered {len(order)} of {dag.vertex_count} vertices"
        )
        result = TopoResult(TopoStatus.CYCLIC)
    else:
        result = TopoResult(TopoStatus.ACYCLIC, order)

    if metrics is not None:
        metrics.stop_timer()
    return result


def topological_sort(dag: Graph, metrics: Optional[Metrics] = None) -> List[VertexID]:
    """Return a topological order of ``dag``.

    Zero-in-degree vertices enter a FIFO frontier in ascending id order, so the
    order is deterministic.

    An empty list means either that ``dag`` has a cycle or that it has no
    vertices; callers tell the two apart with ``dag.vertex_count`` or use
    :func:`sort_with_status`.

    Args:
        dag: Graph to sort. Not modified.
        metrics: Optional observer; receives ``in_degree_calculations``,
            ``queue_pushes``, ``queue_pops``, ``edges_processed`` and
            ``cycle_detected`` counters.

    Returns:
        A permutation of ``0..n-1`` in which every edge ``u -> v`` has ``u``
        before ``v``, or an empty list.
    """
    return sort_with_status(dag, metrics).order


def is_acyclic(graph: Graph) -> bool:
    """Return True if ``graph`` has no directed cycle.

    A zero-vertex graph is acyclic.
    """
    return len(topological_sort(graph)) == graph.vertex_count
