"""Shared enums, aliases and helpers for the graph algorithms."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import List, Optional, Tuple

from depgraph.graph import VertexID
from depgraph.metrics import Metrics

#: Path length: a finite float or one of the infinity sentinels.
Distance = float

#: A strongly connected component: vertex ids in stack-pop order.
Component = Tuple[VertexID, ...]

#: Sequence of components in root-finalization order.
Components = List[Component]


class PathMode(IntEnum):
    """Objective of a DAG path computation."""

    #: Minimize total weight; unreachable vertices stay at +inf.
    SHORTEST = 1
    #: Maximize total weight (critical path); unreachable vertices stay at -inf.
    LONGEST = 2

    @property
    def sentinel(self) -> Distance:
        """Initial distance of every vertex other than the source."""
        return math.inf if self is PathMode.SHORTEST else -math.inf

    def improves(self, candidate: Distance, current: Distance) -> bool:
        """Return True if ``candidate`` is strictly better than ``current``."""
        if self is PathMode.SHORTEST:
            return candidate < current
        return candidate > current


class TopoStatus(IntEnum):
    """Outcome of a topological sort."""

    #: Every vertex was ordered.
    ACYCLIC = 1
    #: The graph has at least one cycle; no order exists.
    CYCLIC = 2
    #: The graph has no vertices.
    EMPTY = 3


def count(metrics: Optional[Metrics], name: str, amount: int = 1) -> None:
    """Increment ``name`` on ``metrics`` when an observer is attached."""
    if metrics is not None:
        metrics.increment_counter(name, amount)
