"""Strongly connected components via Tarjan's algorithm.

The depth-first search runs on an explicit stack of ``[vertex, edge_cursor]``
frames instead of recursing, so arbitrarily long dependency chains do not hit
Python's recursion limit. Vertices are started in id order and edges are
followed in insertion order, which reproduces exactly the discovery and
finalization order of the classic recursive formulation.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from depgraph.algorithms.base import Components, count
from depgraph.graph import Graph, VertexID
from depgraph.logging import get_logger
from depgraph.metrics import Metrics

logger = get_logger(__name__)

#: Discovery/low-link value of a vertex the search has not reached yet.
UNVISITED = -1


def find_components(graph: Graph, metrics: Optional[Metrics] = None) -> Components:
    """Return the strongly connected components of ``graph``.

    Components are emitted in the order their DFS root is finalized, which is a
    reverse topological order of the DFS completion, not necessarily a valid
    topological order of the condensation. Each component lists its vertices
    in the order they were popped from the component stack.

    Args:
        graph: Graph to analyze. Not modified.
        metrics: Optional observer; receives ``dfs_visits``,
            ``edges_traversed``, ``stack_pops`` and ``sccs_found`` counters.

    Returns:
        List of components; every vertex appears in exactly one of them. An
        empty graph yields an empty list.
    """
    if metrics is not None:
        metrics.start_timer()

    n = graph.vertex_count
    adjacency = graph._adj
    discovery: List[int] = [UNVISITED] * n
    lowlink: List[int] = [UNVISITED] * n
    on_stack: List[bool] = [False] * n
    component_stack: List[VertexID] = []
    components: Components = []
    timestamp = 0

    for root in range(n):
        if discovery[root] != UNVISITED:
            continue

        discovery[root] = lowlink[root] = timestamp
        timestamp += 1
        component_stack.append(root)
        on_stack[root] = True
        count(metrics, "dfs_visits")
        frames: List[List[int]] = [[root, 0]]

        while frames:
            frame = frames[-1]
            u, cursor = frame
            edges = adjacency[u]

            if cursor < len(edges):
                frame[1] = cursor + 1
                v = edges[cursor].target
                count(metrics, "edges_traversed")
                if discovery[v] == UNVISITED:
                    # Tree edge: descend; lowlink[u] is folded in when v finishes
                    discovery[v] = lowlink[v] = timestamp
                    timestamp += 1
                    component_stack.append(v)
                    on_stack[v] = True
                    count(metrics, "dfs_visits")
                    frames.append([v, 0])
                elif on_stack[v]:
                    lowlink[u] = min(lowlink[u], discovery[v])
                continue

            frames.pop()
            if lowlink[u] == discovery[u]:
                component: List[VertexID] = []
                while True:
                    w = component_stack.pop()
                    on_stack[w] = False
                    component.append(w)
                    count(metrics, "stack_pops")
                    if w == u:
                        break
                components.append(tuple(component))
                count(metrics, "sccs_found")

            if frames:
                parent = frames[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[u])

    if metrics is not None:
        metrics.stop_timer()

    logger.debug(
        f"Found {len(components)} strongly connected components in a graph "
        f"with {n} vertices"
    )
    return components


def cyclic_components(components: Components, graph: Graph) -> Components:
    """Return the components that contain a cycle.

    A component is cyclic if it has more than one vertex or its single vertex
    carries a self-loop.
    """
    result: Components = []
    for component in components:
        if len(component) > 1:
            result.append(component)
        elif graph.has_edge(component[0], component[0]):
            result.append(component)
    return result


def component_index(components: Components) -> Dict[VertexID, int]:
    """Map every vertex id to the index of the component containing it."""
    return {vertex: i for i, component in enumerate(components) for vertex in component}
