"""Reading and writing graphs as JSON or YAML documents.

Document layout::

    {
      "vertices": 5,
      "edges": [
        {"from": 0, "to": 1, "weight": 2.5},
        {"from": 1, "to": 2}
      ],
      "labels": {"0": "Task A", "1": "Task B"}
    }

``weight`` is optional and defaults to 1.0; ``labels`` is optional and keyed by
vertex id as a decimal string. YAML files use the same structure; integer
label keys produced by the YAML parser are accepted as well.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from depgraph.graph import Graph
from depgraph.logging import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _require_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return value


def graph_from_dict(data: Dict[str, Any], default_weight: float = 1.0) -> Graph:
    """Build a Graph from its document form.

    Args:
        data: Parsed document.
        default_weight: Weight of edges without a ``weight`` entry.

    Returns:
        The constructed graph.

    Raises:
        ValueError: If the document is malformed.
        InvalidVertexError: If an edge or label references a missing vertex.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Graph document must be a mapping, got {type(data).__name__}")
    if "vertices" not in data:
        raise ValueError("Graph document is missing the 'vertices' field")

    graph = Graph(_require_int(data["vertices"], "'vertices'"))

    edges = data.get("edges") or []
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")
    for position, edge in enumerate(edges):
        if not isinstance(edge, dict) or "from" not in edge or "to" not in edge:
            raise ValueError(f"Edge #{position} must have 'from' and 'to' fields")
        weight = edge.get("weight", default_weight)
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ValueError(f"Edge #{position} has a non-numeric weight {weight!r}")
        graph.add_edge(
            _require_int(edge["from"], f"Edge #{position} 'from'"),
            _require_int(edge["to"], f"Edge #{position} 'to'"),
            float(weight),
        )

    labels = data.get("labels") or {}
    if not isinstance(labels, dict):
        raise ValueError("'labels' must be a mapping of vertex id to text")
    for key, text in labels.items():
        try:
            vertex = int(str(key), 10)
        except ValueError:
            raise ValueError(f"Label key {key!r} is not a decimal vertex id") from None
        graph.set_label(vertex, str(text))

    return graph


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """Return the document form of ``graph``.

    Only explicitly set labels are written, so loading the result yields an
    equal graph.
    """
    edges: List[Dict[str, Any]] = [
        {"from": source, "to": target, "weight": weight}
        for source, target, weight in graph.iter_edges()
    ]
    return {
        "vertices": graph.vertex_count,
        "edges": edges,
        "labels": {str(v): text for v, text in sorted(graph.labels.items())},
    }


def load_graph(path: Union[str, Path], default_weight: float = 1.0) -> Graph:
    """Load a graph from a JSON file, or YAML for ``.yaml``/``.yml`` files.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file cannot be parsed or is malformed.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ValueError(f"Cannot parse {path}: {exc}") from exc

    graph = graph_from_dict(data, default_weight=default_weight)
    logger.info(
        f"Loaded graph from {path}: {graph.vertex_count} vertices, "
        f"{graph.edge_count} edges"
    )
    return graph


def save_graph(graph: Graph, path: Union[str, Path]) -> Path:
    """Write ``graph`` to ``path`` as JSON, or YAML for YAML suffixes.

    Parent directories are created as needed.

    Returns:
        The written path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = graph_to_dict(graph)
    if path.suffix.lower() in YAML_SUFFIXES:
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    else:
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    logger.debug(f"Wrote graph with {graph.vertex_count} vertices to {path}")
    return path


def example_graph() -> Graph:
    """Return a small demo graph with a 1 -> 2 -> 3 -> 1 cycle."""
    graph = Graph(5)
    graph.add_edge(0, 1, 2.0)
    graph.add_edge(1, 2, 3.0)
    graph.add_edge(2, 3, 1.0)
    graph.add_edge(3, 1, 1.0)
    graph.add_edge(0, 4, 5.0)
    for vertex, text in enumerate(["Start", "Task1", "Task2", "Task3", "End"]):
        graph.set_label(vertex, text)
    return graph
