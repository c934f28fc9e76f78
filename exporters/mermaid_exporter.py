"""Mermaid flowchart exporter for dependency graphs."""

import re
from typing import Dict, Optional

from graph.model import DependencyGraph
from .paths import display_path


def to_mermaid(
    graph: DependencyGraph,
    base: Optional[str] = None,
    orientation: str = "LR",
    include_missing: bool = True,
) -> str:
    """
    Convert a dependency graph to Mermaid flowchart syntax.

    Args:
        graph: The graph of a finished traversal.
        base: Optional directory that labels are made relative to.
        orientation: Flowchart orientation (LR, TD, TB, RL, BT).
        include_missing: If True, show unresolved specifiers as dashed nodes.

    Returns:
        Mermaid flowchart string.
    """
    lines = [f"flowchart {orientation}"]

    # Build node ID mapping
    node_ids: Dict[str, str] = {}
    for node in sorted(graph.nodes):
        node_ids[node] = _unique_id(_sanitize_id(display_path(node, base)), node_ids)

    # Build missing node ID mapping
    missing_ids: Dict[str, str] = {}
    if include_missing:
        for _, specifier in graph.iter_missing():
            if specifier not in missing_ids:
                missing_ids[specifier] = _unique_id(
                    _sanitize_id(f"missing_{specifier}"),
                    {**node_ids, **missing_ids},
                )

    for node in sorted(graph.nodes):
        lines.append(f'    {node_ids[node]}["{display_path(node, base)}"]')

    if missing_ids:
        lines.append("")
        lines.append("    %% Missing references")
        for specifier in sorted(missing_ids):
            missing_id = missing_ids[specifier]
            lines.append(f'    {missing_id}["{specifier} [MISSING]"]')
            lines.append(f"    style {missing_id} stroke:#ff0000,stroke-dasharray: 5 5")

    lines.append("")
    for source, target in graph.iter_edges():
        arrow = "-.->|cycle|" if graph.is_cycle_edge(source, target) else "-->"
        lines.append(f"    {node_ids[source]} {arrow} {node_ids[target]}")

    # Add missing edges (dashed)
    for source, specifier in graph.iter_missing():
        if specifier in missing_ids:
            lines.append(f"    {node_ids[source]} -.-> {missing_ids[specifier]}")

    return "\n".join(lines)


def _sanitize_id(value: str) -> str:
    """
    Sanitize a string to be a valid Mermaid ID.

    Mermaid IDs can only contain letters, digits, and underscores.
    """
    # Replace path separators and dots with underscores
    sanitized = re.sub(r"[/\\.\-]", "_", value)
    # Remove any remaining invalid characters
    sanitized = re.sub(r"[^a-zA-Z0-9_]", "", sanitized)
    # Ensure it starts with a letter
    if sanitized and not sanitized[0].isalpha():
        sanitized = "n_" + sanitized
    return sanitized or "unknown"


def _unique_id(candidate: str, taken: Dict[str, str]) -> str:
    used = set(taken.values())
    unique = candidate
    counter = 2
    while unique in used:
        unique = f"{candidate}_{counter}"
        counter += 1
    return unique
