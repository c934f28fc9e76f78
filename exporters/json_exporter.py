"""JSON exporters for dependency trees and graphs (machine-friendly format)."""

import json
from typing import Any, Dict, List, Optional

from graph.model import DependencyGraph
from .paths import display_path


def tree_to_json(result: Any, indent: int = 2) -> str:
    """
    Serialize a build_tree() or build_list() result.

    Shared subtrees are written out in full at every place they occur.
    """
    return json.dumps(result, indent=indent)


def to_json(
    graph: DependencyGraph,
    base: Optional[str] = None,
    indent: int = 2,
    include_missing: bool = True,
) -> str:
    """
    Convert a dependency graph to a nodes/edges JSON document.

    Args:
        graph: The graph of a finished traversal.
        base: Optional directory that node paths are made relative to.
        indent: JSON indentation level.
        include_missing: If True, include unresolved specifiers as edges
            flagged `"missing": true`.

    Returns:
        JSON string representation of the graph.
    """
    nodes: List[str] = [display_path(node, base) for node in sorted(graph.nodes)]

    edges: List[Dict[str, Any]] = []
    for source, target in graph.iter_edges():
        edge: Dict[str, Any] = {
            "source": display_path(source, base),
            "target": display_path(target, base),
        }
        if graph.is_cycle_edge(source, target):
            edge["cycle"] = True
        edges.append(edge)

    if include_missing:
        for source, specifier in graph.iter_missing():
            edges.append({
                "source": display_path(source, base),
                "target": specifier,
                "missing": True,
            })

    data: Dict[str, Any] = {
        "nodes": nodes,
        "edges": edges,
    }

    return json.dumps(data, indent=indent)
