"""Directed weighted graph over dense integer vertex ids.

`Graph` stores a fixed number of vertices ``0..n-1``, an ordered list of
outgoing edges per vertex and optional display labels. Edge order is the
insertion order, which makes every traversal in `depgraph.algorithms`
deterministic. Parallel edges are kept as separate entries.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from depgraph.errors import InvalidVertexError

VertexID = int
Weight = float


@dataclass(frozen=True)
class Edge:
    """Outgoing edge stored in a source vertex's adjacency list.

    Attributes:
        target: Target vertex id.
        weight: Edge weight (duration, cost, ...).
    """

    target: VertexID
    weight: Weight = 1.0


class Graph:
    """A directed multigraph with a fixed vertex count.

    This class enforces:
      - Vertex ids are integers in ``[0, vertex_count)``.
      - Out-of-range endpoints or label targets raise ``InvalidVertexError``
        before anything is recorded.
      - NaN and infinite weights are rejected with ``ValueError``.
      - No vertex or edge removal; the vertex count never changes.
    """

    def __init__(self, vertex_count: int) -> None:
        """Create a graph with ``vertex_count`` isolated vertices.

        Args:
            vertex_count: Number of vertices; must be non-negative.

        Raises:
            ValueError: If ``vertex_count`` is not a non-negative integer.
        """
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise ValueError(f"vertex_count must be an integer, got {vertex_count!r}")
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self._vertex_count: int = vertex_count
        self._adj: List[List[Edge]] = [[] for _ in range(self._vertex_count)]
        self._labels: Dict[VertexID, str] = {}

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        """Total number of edges, parallel edges included."""
        return sum(len(edges) for edges in self._adj)

    def __len__(self) -> int:
        return self._vertex_count

    def _check_vertex(self, vertex: VertexID) -> None:
        if (
            isinstance(vertex, bool)
            or not isinstance(vertex, int)
            or not 0 <= vertex < self._vertex_count
        ):
            raise InvalidVertexError(vertex, self._vertex_count)

    #
    # Construction
    #
    def add_edge(
        self, source: VertexID, target: VertexID, weight: Weight = 1.0
    ) -> None:
        """Append a directed edge ``source -> target``.

        Args:
            source: Source vertex id.
            target: Target vertex id.
            weight: Edge weight. Defaults to 1.0.

        Raises:
            InvalidVertexError: If either endpoint is out of range.
            ValueError: If ``weight`` is NaN or infinite.
        """
        self._check_vertex(source)
        self._check_vertex(target)
        weight = float(weight)
        if not math.isfinite(weight):
            raise ValueError(f"Edge {source}->{target} has non-finite weight {weight}")
        self._adj[source].append(Edge(target, weight))

    def set_label(self, vertex: VertexID, text: str) -> None:
        """Attach a display label to ``vertex``.

        Raises:
            InvalidVertexError: If ``vertex`` is out of range.
        """
        self._check_vertex(vertex)
        self._labels[vertex] = str(text)

    #
    # Queries
    #
    def label(self, vertex: VertexID) -> str:
        """Return the label of ``vertex`` or its decimal id if none was set."""
        return self._labels.get(vertex, str(vertex))

    def has_label(self, vertex: VertexID) -> bool:
        return vertex in self._labels

    @property
    def labels(self) -> Dict[VertexID, str]:
        """Copy of the explicitly set labels."""
        return dict(self._labels)

    def edges(self, vertex: VertexID) -> List[Edge]:
        """Return the outgoing edges of ``vertex`` in insertion order.

        The returned list is a copy; mutating it does not affect the graph.

        Raises:
            InvalidVertexError: If ``vertex`` is out of range.
        """
        self._check_vertex(vertex)
        return list(self._adj[vertex])

    def iter_edges(self) -> Iterator[Tuple[VertexID, VertexID, Weight]]:
        """Yield ``(source, target, weight)`` ordered by source id, then insertion."""
        for source, edges in enumerate(self._adj):
            for edge in edges:
                yield source, edge.target, edge.weight

    def has_edge(self, source: VertexID, target: VertexID) -> bool:
        """Return True if at least one edge ``source -> target`` exists."""
        if not (0 <= source < self._vertex_count):
            return False
        return any(edge.target == target for edge in self._adj[source])

    def reverse(self) -> Graph:
        """Return a new graph with every edge reversed and labels copied."""
        reversed_graph = Graph(self._vertex_count)
        for source, target, weight in self.iter_edges():
            reversed_graph.add_edge(target, source, weight)
        for vertex, text in self._labels.items():
            reversed_graph.set_label(vertex, text)
        return reversed_graph

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self._vertex_count == other._vertex_count
            and self._adj == other._adj
            and self._labels == other._labels
        )

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self._vertex_count}, edge_count={self.edge_count})"

    def __str__(self) -> str:
        lines = [
            f"Graph with {self._vertex_count} vertices and {self.edge_count} edges:"
        ]
        for vertex, edges in enumerate(self._adj):
            targets = " ".join(f"->{e.target}(w={e.weight:g})" for e in edges)
            lines.append(f"{vertex} ({self.label(vertex)}): {targets}".rstrip())
        return "\n".join(lines)
