"""Synthetic task graphs for benchmarks and tests.

Generators take an optional ``seed`` and draw from a private
``random.Random`` instance, so the global random state is never touched and
equal seeds give equal graphs.
"""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from depgraph.graph import Graph
from depgraph.logging import get_logger

logger = get_logger(__name__)


def generate_dag(n: int, density: float, seed: Optional[int] = None) -> Graph:
    """Generate a random DAG.

    Edges only run from lower to higher ids, which guarantees acyclicity. Each
    pair ``i < j`` gets an edge with probability ``density`` and a weight in
    ``[1, 10)``. Vertex ``i`` is labeled ``Task{i}``.

    Raises:
        ValueError: If ``n`` is negative or ``density`` is outside [0, 1].
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be within [0, 1], got {density}")

    rng = random.Random(seed)
    graph = Graph(n)
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < density:
                graph.add_edge(i, j, 1.0 + rng.random() * 9.0)
    for i in range(n):
        graph.set_label(i, f"Task{i}")

    logger.debug(f"Generated DAG with {n} vertices and {graph.edge_count} edges")
    return graph


def _blocks(n: int, num_components: int) -> List[Tuple[int, int]]:
    """Split ``0..n-1`` into contiguous blocks; the last one takes the remainder."""
    size = n // num_components
    return [
        (k * size, n if k == num_components - 1 else (k + 1) * size)
        for k in range(num_components)
    ]


def generate_graph_with_sccs(
    n: int, num_components: int, seed: Optional[int] = None
) -> Graph:
    """Generate a graph made of ``num_components`` cyclic clusters chained in a line.

    Every block of vertices is closed into a ring, 30% of its vertices get an
    extra intra-block edge, and one or two edges link each block to the next.
    Weights lie in ``[1, 5)``. Vertices are labeled ``SCC{k}_V{j}``.

    Raises:
        ValueError: If ``num_components`` is not within ``[1, n]``.
    """
    if num_components < 1 or num_components > n:
        raise ValueError(
            f"num_components must be within [1, {n}], got {num_components}"
        )

    rng = random.Random(seed)
    graph = Graph(n)
    blocks = _blocks(n, num_components)

    for start, end in blocks:
        for i in range(start, end):
            following = i + 1 if i + 1 < end else start
            graph.add_edge(i, following, 1.0 + rng.random() * 4.0)
        for i in range(start, end):
            if rng.random() < 0.3:
                target = rng.randrange(start, end)
                if target != i:
                    graph.add_edge(i, target, 1.0 + rng.random() * 4.0)

    for (from_start, from_end), (to_start, to_end) in zip(blocks, blocks[1:]):
        for _ in range(1 + rng.randrange(2)):
            graph.add_edge(
                rng.randrange(from_start, from_end),
                rng.randrange(to_start, to_end),
                1.0 + rng.random() * 4.0,
            )

    size = n // num_components
    for i in range(n):
        block = min(i // size, num_components - 1)
        graph.set_label(i, f"SCC{block}_V{i - blocks[block][0]}")

    logger.debug(
        f"Generated graph with {n} vertices in {num_components} clusters and "
        f"{graph.edge_count} edges"
    )
    return graph
