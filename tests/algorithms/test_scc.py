import random
import sys

import pytest

from depgraph.algorithms.scc import (
    component_index,
    cyclic_components,
    find_components,
)
from depgraph.graph import Graph
from depgraph.metrics import StageMetrics


def _recursive_tarjan(graph):
    """Textbook recursive Tarjan used as a reference for small graphs."""
    n = graph.vertex_count
    disc = [-1] * n
    low = [-1] * n
    on_stack = [False] * n
    stack = []
    out = []
    time = [0]

    def visit(u):
        disc[u] = low[u] = time[0]
        time[0] += 1
        stack.append(u)
        on_stack[u] = True
        for edge in graph.edges(u):
            v = edge.target
            if disc[v] == -1:
                visit(v)
                low[u] = min(low[u], low[v])
            elif on_stack[v]:
                low[u] = min(low[u], disc[v])
        if low[u] == disc[u]:
            comp = []
            while True:
                w = stack.pop()
                on_stack[w] = False
                comp.append(w)
                if w == u:
                    break
            out.append(tuple(comp))

    for v in range(n):
        if disc[v] == -1:
            visit(v)
    return out


def _random_graph(rng, n, m):
    g = Graph(n)
    for _ in range(m):
        g.add_edge(rng.randrange(n), rng.randrange(n), rng.uniform(1, 5))
    return g


class TestFindComponents:
    def test_simple_cycle(self, triangle):
        assert find_components(triangle) == [(2, 1, 0)]

    def test_chain_is_all_singletons(self, chain):
        assert find_components(chain) == [(3,), (2,), (1,), (0,)]

    def test_mixed_graph_order(self, mixed):
        assert find_components(mixed) == [(3,), (2, 1), (4,), (0,)]

    def test_empty_graph(self):
        assert find_components(Graph(0)) == []

    def test_single_vertex(self):
        assert find_components(Graph(1)) == [(0,)]

    def test_isolated_vertices(self):
        assert find_components(Graph(3)) == [(0,), (1,), (2,)]

    def test_self_loop_is_singleton(self):
        g = Graph(1)
        g.add_edge(0, 0)
        assert find_components(g) == [(0,)]

    def test_disconnected_rings(self, two_rings):
        assert find_components(two_rings) == [(2, 1, 0), (5, 4, 3)]

    def test_partition_property(self, demo):
        components = find_components(demo)
        members = [v for component in components for v in component]
        assert sorted(members) == list(range(demo.vertex_count))

    def test_does_not_mutate_graph(self, mixed):
        before = list(mixed.iter_edges())
        find_components(mixed)
        assert list(mixed.iter_edges()) == before

    def test_deep_chain_does_not_recurse(self):
        n = max(10_000, sys.getrecursionlimit() * 3)
        g = Graph(n)
        for i in range(n - 1):
            g.add_edge(i, i + 1)
        components = find_components(g)
        assert len(components) == n
        assert components[0] == (n - 1,)
        assert components[-1] == (0,)

    def test_deep_ring_is_one_component(self):
        n = max(10_000, sys.getrecursionlimit() * 2)
        g = Graph(n)
        for i in range(n):
            g.add_edge(i, (i + 1) % n)
        components = find_components(g)
        assert len(components) == 1
        assert sorted(components[0]) == list(range(n))

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_recursive_reference(self, seed):
        rng = random.Random(seed)
        g = _random_graph(rng, n=25, m=40)
        assert find_components(g) == _recursive_tarjan(g)

    def test_metrics_counters(self, chain):
        metrics = StageMetrics(name="scc")
        find_components(chain, metrics)
        assert metrics.counter("dfs_visits") == 4
        assert metrics.counter("edges_traversed") == 3
        assert metrics.counter("stack_pops") == 4
        assert metrics.counter("sccs_found") == 4
        assert not metrics.running

    def test_metrics_do_not_change_result(self, demo):
        assert find_components(demo, StageMetrics()) == find_components(demo)


class TestHelpers:
    def test_cyclic_components(self, mixed):
        assert cyclic_components(find_components(mixed), mixed) == [(2, 1)]

    def test_self_loop_is_cyclic(self):
        g = Graph(2)
        g.add_edge(1, 1)
        assert cyclic_components(find_components(g), g) == [(1,)]

    def test_component_index(self, mixed):
        index = component_index(find_components(mixed))
        assert index == {3: 0, 2: 1, 1: 1, 4: 2, 0: 3}
