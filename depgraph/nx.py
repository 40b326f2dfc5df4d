"""NetworkX graph conversion utilities.

Converts between NetworkX directed graphs and :class:`depgraph.graph.Graph`,
which requires dense integer vertex ids.

Example:
    >>> import networkx as nx
    >>> from depgraph.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("build", "test", weight=3.0)
    >>> G.add_edge("test", "deploy", weight=1.0)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["test"]
    1
    >>> G_out = to_networkx(graph, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple

import networkx as nx

from depgraph.graph import Graph


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and dense vertex ids.

    Attributes:
        to_index: Maps original node names to vertex ids.
        to_name: Maps vertex ids back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap assigning ids in list order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: nx.DiGraph,
    *,
    weight_attr: str = "weight",
    default_weight: float = 1.0,
    label_attr: str = "label",
    sort_nodes: bool = False,
) -> Tuple[Graph, NodeMap]:
    """Convert a directed NetworkX graph to a depgraph Graph.

    Nodes get ids in NetworkX iteration order (or ``str``-sorted order when
    ``sort_nodes`` is True). Edges are added in ``G.edges`` order. A node's
    ``label_attr`` attribute becomes its label; otherwise the node name is
    used.

    Args:
        G: ``nx.DiGraph`` or ``nx.MultiDiGraph``.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight of edges without ``weight_attr``.
        label_attr: Node attribute holding the label.
        sort_nodes: Assign ids in sorted name order.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
        ValueError: If ``G`` is undirected.
    """
    if not isinstance(G, nx.Graph):
        raise TypeError(f"Expected a NetworkX graph, got {type(G).__name__}")
    if not G.is_directed():
        raise ValueError("Undirected graphs are not supported; convert to a DiGraph")

    names = list(G.nodes())
    if sort_nodes:
        names = sorted(names, key=str)
    node_map = NodeMap.from_names(names)

    graph = Graph(len(names))
    for u, v, data in G.edges(data=True):
        graph.add_edge(
            node_map.to_index[u],
            node_map.to_index[v],
            float(data.get(weight_attr, default_weight)),
        )
    for name, index in node_map.to_index.items():
        graph.set_label(index, str(G.nodes[name].get(label_attr, name)))

    return graph, node_map


def to_networkx(
    graph: Graph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
    label_attr: str = "label",
) -> nx.MultiDiGraph:
    """Convert a depgraph Graph to a NetworkX MultiDiGraph.

    Parallel edges are preserved. Nodes carry their label under ``label_attr``.

    Args:
        graph: Graph to convert.
        node_map: Optional mapping restoring original node names; nodes are
            named by vertex id otherwise.
        weight_attr: Edge attribute receiving the weight.
        label_attr: Node attribute receiving the label.

    Returns:
        A new ``nx.MultiDiGraph``.
    """
    G = nx.MultiDiGraph()

    def name(vertex: int) -> Hashable:
        if node_map is None:
            return vertex
        return node_map.to_name.get(vertex, vertex)

    for vertex in range(graph.vertex_count):
        G.add_node(name(vertex), **{label_attr: graph.label(vertex)})
    for source, target, weight in graph.iter_edges():
        G.add_edge(name(source), name(target), **{weight_attr: weight})
    return G
