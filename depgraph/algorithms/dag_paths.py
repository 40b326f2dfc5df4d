"""Shortest and longest paths on a DAG by dynamic programming.

Vertices are relaxed in topological order, so each vertex's distance is final
the first time it is processed: no priority queue and no repeated relaxation.
Both objectives share one routine and differ only in the sentinel (``+inf``
for shortest, ``-inf`` for longest) and the strict comparator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from depgraph.algorithms.base import Distance, PathMode, TopoStatus, count
from depgraph.algorithms.topo import sort_with_status
from depgraph.errors import CyclicGraphError, InvalidVertexError
from depgraph.graph import Graph, VertexID
from depgraph.logging import get_logger
from depgraph.metrics import Metrics

logger = get_logger(__name__)


@dataclass(frozen=True)
class CriticalPath:
    """The heaviest path found in a path computation.

    Attributes:
        length: Total weight of the path.
        path: Vertex ids from the source to the end vertex.
    """

    length: Distance
    path: Tuple[VertexID, ...]

    @property
    def source(self) -> VertexID:
        return self.path[0]

    @property
    def target(self) -> VertexID:
        return self.path[-1]


@dataclass(frozen=True)
class PathResult:
    """Distances and predecessor links from a single source.

    Attributes:
        distances: Distance per vertex; vertices the source cannot reach keep
            the mode's sentinel (``+inf`` for SHORTEST, ``-inf`` for LONGEST).
        predecessors: Previous vertex on the best path, ``None`` for the source
            and for unreachable vertices.
        source: Source vertex id.
        mode: SHORTEST or LONGEST.
    """

    distances: Tuple[Distance, ...]
    predecessors: Tuple[Optional[VertexID], ...]
    source: VertexID
    mode: PathMode

    def _check(self, vertex: VertexID) -> None:
        if (
            isinstance(vertex, bool)
            or not isinstance(vertex, int)
            or not 0 <= vertex < len(self.distances)
        ):
            raise InvalidVertexError(vertex, len(self.distances))

    def distance_to(self, vertex: VertexID) -> Distance:
        """Return the best distance to ``vertex`` (a sentinel if unreachable)."""
        self._check(vertex)
        return self.distances[vertex]

    def is_unreachable(self, vertex: VertexID) -> bool:
        """Return True if no path leads from the source to ``vertex``."""
        self._check(vertex)
        return self.distances[vertex] == self.mode.sentinel

    def reachable(self) -> List[VertexID]:
        """Return the ids of all reachable vertices in ascending order."""
        sentinel = self.mode.sentinel
        return [v for v, d in enumerate(self.distances) if d != sentinel]

    def path_to(self, vertex: VertexID) -> List[VertexID]:
        """Reconstruct the best path from the source to ``vertex``.

        Returns:
            Vertex ids from source to ``vertex`` inclusive, or an empty list
            if ``vertex`` is unreachable.
        """
        if self.is_unreachable(vertex):
            return []
        path: List[VertexID] = []
        current: Optional[VertexID] = vertex
        while current is not None:
            path.append(current)
            if current == self.source:
                break
            current = self.predecessors[current]
        path.reverse()
        return path

    def critical_vertex(self) -> Optional[VertexID]:
        """Return the reachable vertex with the largest distance.

        Ties go to the lowest vertex id. The source is always reachable, so
        ``None`` only comes back for a result without vertices.
        """
        best: Optional[VertexID] = None
        best_distance = -math.inf
        sentinel = self.mode.sentinel
        for vertex, distance in enumerate(self.distances):
            if distance == sentinel:
                continue
            if best is None or distance > best_distance:
                best = vertex
                best_distance = distance
        return best

    def critical_path(self) -> Optional[CriticalPath]:
        """Return the path to :meth:`critical_vertex` with its length."""
        vertex = self.critical_vertex()
        if vertex is None:
            return None
        return CriticalPath(self.distances[vertex], tuple(self.path_to(vertex)))

    def to_dict(self) -> dict:
        """Return a JSON-friendly view; infinite distances become ``None``."""
        return {
            "source": self.source,
            "mode": self.mode.name.lower(),
            "distances": [d if math.isfinite(d) else None for d in self.distances],
            "predecessors": list(self.predecessors),
        }


def _extremize(
    dag: Graph, source: VertexID, mode: PathMode, metrics: Optional[Metrics]
) -> PathResult:
    n = dag.vertex_count
    if isinstance(source, bool) or not isinstance(source, int) or not 0 <= source < n:
        raise InvalidVertexError(source, n)

    if metrics is not None:
        metrics.start_timer()

    topo = sort_with_status(dag)
    if topo.status is TopoStatus.CYCLIC:
        if metrics is not None:
            metrics.stop_timer()
        raise CyclicGraphError(
            f"Graph contains a cycle; {mode.name.lower()} paths need a DAG"
        )

    sentinel = mode.sentinel
    distances: List[Distance] = [sentinel] * n
    predecessors: List[Optional[VertexID]] = [None] * n
    distances[source] = 0.0
    adjacency = dag._adj

    for u in topo.order:
        if distances[u] == sentinel:
            continue
        for edge in adjacency[u]:
            candidate = distances[u] + edge.weight
            count(metrics, "relaxations")
            if mode.improves(candidate, distances[edge.target]):
                distances[edge.target] = candidate
                predecessors[edge.target] = u
                count(metrics, "updates")

    if metrics is not None:
        metrics.stop_timer()

    return PathResult(tuple(distances), tuple(predecessors), source, mode)


def shortest_path(
    dag: Graph, source: VertexID, metrics: Optional[Metrics] = None
) -> PathResult:
    """Compute minimum-weight paths from ``source`` to every vertex.

    Args:
        dag: Acyclic graph. Not modified.
        source: Source vertex id.
        metrics: Optional observer; receives ``relaxations`` and ``updates``.

    Returns:
        PathResult in SHORTEST mode.

    Raises:
        InvalidVertexError: If ``source`` is out of range.
        CyclicGraphError: If ``dag`` contains a cycle.
    """
    return _extremize(dag, source, PathMode.SHORTEST, metrics)


def longest_path(
    dag: Graph, source: VertexID, metrics: Optional[Metrics] = None
) -> PathResult:
    """Compute maximum-weight (critical) paths from ``source`` to every vertex.

    Args:
        dag: Acyclic graph. Not modified.
        source: Source vertex id.
        metrics: Optional observer; receives ``relaxations`` and ``updates``.

    Returns:
        PathResult in LONGEST mode.

    Raises:
        InvalidVertexError: If ``source`` is out of range.
        CyclicGraphError: If ``dag`` contains a cycle.
    """
    return _extremize(dag, source, PathMode.LONGEST, metrics)


class _CountersOnly:
    """Forward counters to ``metrics`` but leave its timer to the caller."""

    def __init__(self, metrics: Metrics) -> None:
        self._metrics = metrics

    def start_timer(self) -> None:
        pass

    def stop_timer(self) -> None:
        pass

    def increment_counter(self, name: str, amount: int = 1) -> None:
        self._metrics.increment_counter(name, amount)

    def elapsed(self) -> float:
        return self._metrics.elapsed()


def find_critical_path(
    dag: Graph, metrics: Optional[Metrics] = None
) -> Optional[CriticalPath]:
    """Return the longest path in ``dag`` over all possible sources.

    Runs :func:`longest_path` from every vertex. A strictly longer path
    replaces the current best, so ties keep the lowest source id and, for that
    source, the lowest end vertex id.

    ``metrics`` times the whole search once; the per-source runs only add to
    its counters.

    Returns:
        The overall critical path, or ``None`` for a graph without vertices.

    Raises:
        CyclicGraphError: If ``dag`` contains a cycle.
    """
    per_source: Optional[Metrics] = None
    if metrics is not None:
        per_source = _CountersOnly(metrics)
        metrics.start_timer()

    best: Optional[CriticalPath] = None
    try:
        for source in range(dag.vertex_count):
            candidate = longest_path(dag, source, per_source).critical_path()
            if candidate is None:
                continue
            if best is None or candidate.length > best.length:
                best = candidate
    finally:
        if metrics is not None:
            metrics.stop_timer()
    if best is not None:
        logger.debug(
            f"Critical path {best.source}->{best.target} has length {best.length:g}"
        )
    return best
