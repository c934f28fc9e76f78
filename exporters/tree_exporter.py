"""Assembly of the nested-tree and flat-list result shapes."""

from typing import Any, Dict, Iterable, List

from graph.model import DependencyGraph, FileId


def dedupe(items: Iterable[FileId]) -> List[FileId]:
    """Drop repeated entries, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))


class TreeAssembler:
    """
    Build `{file: subtree}` dictionaries as nodes are committed.

    A child's entry is the very object cached for it in `visited`, so a
    file reached from several parents is shared, not copied. A cycle edge
    renders as an empty leaf.
    """

    def empty(self) -> Dict[FileId, Any]:
        return {}

    def commit(self, graph: DependencyGraph, node: FileId, visited: Dict[FileId, Any]) -> Dict[FileId, Any]:
        subtree: Dict[FileId, Any] = {}
        for target in graph.get_targets(node):
            if graph.is_cycle_edge(node, target):
                subtree[target] = {}
            else:
                subtree[target] = visited[target]
        return subtree

    def finish(self, entry: FileId, subtree: Any) -> Dict[FileId, Any]:
        return {entry: subtree}


class ListAssembler:
    """
    Build dependency-first lists as nodes are committed.

    A node's list is its children's lists followed by the node itself, so
    every file comes after everything it depends on.
    """

    def empty(self) -> List[FileId]:
        return []

    def commit(self, graph: DependencyGraph, node: FileId, visited: Dict[FileId, Any]) -> List[FileId]:
        items: List[FileId] = []
        for target in graph.get_targets(node):
            if graph.is_cycle_edge(node, target):
                continue
            items.extend(visited[target])
        items.append(node)
        return dedupe(items)

    def finish(self, entry: FileId, items: Any) -> List[FileId]:
        return dedupe(items)
