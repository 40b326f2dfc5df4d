"""Shared graph fixtures.

Edge weights are chosen so that every expected distance in the tests can be
checked by hand.
"""

from __future__ import annotations

import pytest

from depgraph.graph import Graph
from depgraph.io import example_graph


@pytest.fixture
def chain():
    #  0 --2--> 1 --3--> 2 --1--> 3
    g = Graph(4)
    g.add_edge(0, 1, 2.0)
    g.add_edge(1, 2, 3.0)
    g.add_edge(2, 3, 1.0)
    return g


@pytest.fixture
def diamond():
    #      5       1
    #   ┌────►1────┐
    #   │          ▼
    #   0          3
    #   │          ▲
    #   └────►2────┘
    #      2       4
    g = Graph(4)
    g.add_edge(0, 1, 5.0)
    g.add_edge(0, 2, 2.0)
    g.add_edge(1, 3, 1.0)
    g.add_edge(2, 3, 4.0)
    return g


@pytest.fixture
def split_diamond():
    # Like `diamond` but 2->3 weighs 3: shortest goes 0-2-3 (5), longest 0-1-3 (6)
    g = Graph(4)
    g.add_edge(0, 1, 5.0)
    g.add_edge(0, 2, 2.0)
    g.add_edge(1, 3, 1.0)
    g.add_edge(2, 3, 3.0)
    return g


@pytest.fixture
def triangle():
    # 0 -> 1 -> 2 -> 0
    g = Graph(3)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 0)
    return g


@pytest.fixture
def mixed():
    # 0 -> 1 <-> 2 -> 3, plus 0 -> 4
    g = Graph(5)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 1)
    g.add_edge(2, 3)
    g.add_edge(0, 4)
    return g


@pytest.fixture
def two_rings():
    # Disconnected rings 0 -> 1 -> 2 -> 0 and 3 -> 4 -> 5 -> 3
    g = Graph(6)
    for a, b in [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)]:
        g.add_edge(a, b)
    return g


@pytest.fixture
def demo():
    # Start -> Task1 -> Task2 -> Task3 -> Task1, Start -> End
    return example_graph()
