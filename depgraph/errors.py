"""Exception types raised by depgraph.

All errors derive from :class:`DepGraphError` and also from the builtin that
best describes them, so callers can catch either ``ValueError`` or the precise
type.
"""

from __future__ import annotations


class DepGraphError(Exception):
    """Base class for depgraph errors."""


class InvalidVertexError(DepGraphError, ValueError):
    """A vertex id lies outside ``[0, vertex_count)``.

    Attributes:
        vertex: The offending vertex id.
        vertex_count: Vertex count of the graph the id was checked against.
    """

    def __init__(self, vertex: object, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Invalid vertex {vertex!r}: expected an id in [0, {vertex_count})"
        )


class ComponentsPreconditionError(DepGraphError, RuntimeError):
    """Condensation was requested with components that do not partition the graph."""


class CyclicGraphError(DepGraphError, ValueError):
    """An operation that requires a DAG was given a graph with a cycle."""

    def __init__(self, message: str = "Graph contains a cycle") -> None:
        super().__init__(message)
