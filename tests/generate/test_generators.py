import random

import pytest

from depgraph.algorithms.condensation import build_condensation
from depgraph.algorithms.scc import find_components
from depgraph.algorithms.topo import is_acyclic, topological_sort
from depgraph.generate import generate_dag, generate_graph_with_sccs


class TestGenerateDag:
    def test_edges_point_forward(self):
        graph = generate_dag(30, 0.4, seed=1)
        assert all(u < v for u, v, _ in graph.iter_edges())
        assert is_acyclic(graph)

    def test_weights_and_labels(self):
        graph = generate_dag(15, 0.5, seed=2)
        assert all(1.0 <= w < 10.0 for _, _, w in graph.iter_edges())
        assert graph.label(7) == "Task7"

    def test_density_bounds(self):
        assert generate_dag(10, 0.0, seed=0).edge_count == 0
        assert generate_dag(10, 1.0, seed=0).edge_count == 45

    def test_seed_reproducible(self):
        assert generate_dag(20, 0.3, seed=5) == generate_dag(20, 0.3, seed=5)

    def test_global_random_state_untouched(self):
        random.seed(123)
        expected = random.random()
        random.seed(123)
        generate_dag(20, 0.3, seed=5)
        assert random.random() == expected

    @pytest.mark.parametrize("n,density", [(-1, 0.5), (5, -0.1), (5, 1.5)])
    def test_invalid_arguments(self, n, density):
        with pytest.raises(ValueError):
            generate_dag(n, density)


class TestGenerateGraphWithSccs:
    @pytest.mark.parametrize("n,k", [(12, 3), (10, 3), (7, 7), (5, 1)])
    def test_component_count(self, n, k):
        graph = generate_graph_with_sccs(n, k, seed=4)
        components = find_components(graph)
        assert len(components) == k

        condensation = build_condensation(graph, components)
        assert len(topological_sort(condensation)) == k

    def test_last_block_takes_remainder(self):
        graph = generate_graph_with_sccs(10, 3, seed=0)
        sizes = sorted(len(c) for c in find_components(graph))
        assert sizes == [3, 3, 4]
        assert graph.label(9) == "SCC2_V3"
        assert graph.label(3) == "SCC1_V0"

    def test_weights(self):
        graph = generate_graph_with_sccs(20, 4, seed=9)
        assert all(1.0 <= w < 5.0 for _, _, w in graph.iter_edges())

    def test_seed_reproducible(self):
        first = generate_graph_with_sccs(25, 5, seed=11)
        assert first == generate_graph_with_sccs(25, 5, seed=11)

    @pytest.mark.parametrize("n,k", [(5, 0), (3, 4)])
    def test_invalid_arguments(self, n, k):
        with pytest.raises(ValueError):
            generate_graph_with_sccs(n, k)
