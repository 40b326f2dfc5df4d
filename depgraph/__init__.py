"""depgraph: dependency graph analysis.

depgraph finds cyclic dependency clusters in a directed, weighted task graph,
orders the remaining acyclic structure and computes shortest and longest
(critical) paths through it.

Primary API:
    analyze() - Run the whole pipeline and return an AnalysisResult
    Graph - Directed weighted graph over vertex ids 0..n-1
    find_components() - Tarjan strongly connected components
    build_condensation() - Collapse components into a DAG
    topological_sort() / sort_with_status() - Kahn ordering
    shortest_path() / longest_path() - DAG path extremization

Example:
    from depgraph import Graph, analyze

    graph = Graph(4)
    graph.add_edge(0, 1, 2.0)
    graph.add_edge(1, 2, 3.0)
    graph.add_edge(2, 1, 1.0)
    graph.add_edge(2, 3, 1.0)

    result = analyze(graph)
    print(result.critical_path)
"""

from __future__ import annotations

from depgraph import cli, logging
from depgraph._version import __version__
from depgraph.algorithms import (
    CriticalPath,
    PathMode,
    PathResult,
    TopoResult,
    TopoStatus,
    build_condensation,
    cyclic_components,
    find_components,
    find_critical_path,
    is_acyclic,
    longest_path,
    shortest_path,
    sort_with_status,
    topological_sort,
)
from depgraph.analysis import AnalysisResult, analyze
from depgraph.config import AnalysisConfig
from depgraph.errors import (
    ComponentsPreconditionError,
    CyclicGraphError,
    DepGraphError,
    InvalidVertexError,
)
from depgraph.graph import Edge, Graph
from depgraph.io import graph_from_dict, graph_to_dict, load_graph, save_graph
from depgraph.metrics import Metrics, StageMetrics
from depgraph.nx import NodeMap, from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Edge",
    # Pipeline
    "analyze",
    "AnalysisResult",
    "AnalysisConfig",
    # Algorithms
    "find_components",
    "cyclic_components",
    "build_condensation",
    "topological_sort",
    "sort_with_status",
    "is_acyclic",
    "shortest_path",
    "longest_path",
    "find_critical_path",
    # Types
    "PathMode",
    "PathResult",
    "CriticalPath",
    "TopoResult",
    "TopoStatus",
    # Errors
    "DepGraphError",
    "InvalidVertexError",
    "ComponentsPreconditionError",
    "CyclicGraphError",
    # Instrumentation
    "Metrics",
    "StageMetrics",
    # I/O
    "load_graph",
    "save_graph",
    "graph_from_dict",
    "graph_to_dict",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
