"""Graph algorithms: SCC detection, condensation, topological sort, DAG paths."""

from depgraph.algorithms.base import PathMode, TopoStatus
from depgraph.algorithms.condensation import build_condensation
from depgraph.algorithms.dag_paths import (
    CriticalPath,
    PathResult,
    find_critical_path,
    longest_path,
    shortest_path,
)
from depgraph.algorithms.scc import cyclic_components, find_components
from depgraph.algorithms.topo import (
    TopoResult,
    is_acyclic,
    sort_with_status,
    topological_sort,
)

__all__ = [
    "PathMode",
    "TopoStatus",
    "find_components",
    "cyclic_components",
    "build_condensation",
    "topological_sort",
    "sort_with_status",
    "is_acyclic",
    "TopoResult",
    "shortest_path",
    "longest_path",
    "find_critical_path",
    "PathResult",
    "CriticalPath",
]
