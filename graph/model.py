"""Graph data model for storing file dependency relationships."""

from typing import Dict, Iterator, List, Set, Tuple


FileId = str


class DependencyGraph:
    """
    A directed graph of file dependencies, keyed by absolute file path.

    Each node keeps its outgoing edges in discovery order without
    duplicates. Edges that closed a cycle during traversal are flagged so
    that renderers can stop there. Unresolved specifiers are tracked per
    source file, separately from the nodes.
    """

    def __init__(self):
        self._edges: Dict[FileId, List[FileId]] = {}
        self._cycle_edges: Set[Tuple[FileId, FileId]] = set()
        self._missing: Dict[FileId, List[str]] = {}

    @property
    def nodes(self) -> Set[FileId]:
        """Return all nodes in the graph."""
        return set(self._edges)

    @property
    def edges(self) -> Dict[FileId, List[FileId]]:
        """Return adjacency list representation of edges."""
        return {k: list(v) for k, v in self._edges.items()}

    @property
    def missing(self) -> Dict[FileId, List[str]]:
        """Return unresolved specifiers (source -> specifiers in order)."""
        return {k: list(v) for k, v in self._missing.items()}

    def add_node(self, node: FileId) -> None:
        """Add a node to the graph."""
        self._edges.setdefault(node, [])

    def add_edge(self, source: FileId, target: FileId, cycle: bool = False) -> None:
        """
        Add a directed edge from source to target.

        Automatically adds both nodes to the graph. Adding an existing edge
        again keeps its original position.

        Args:
            source: The requiring file.
            target: The required file.
            cycle: True if target was still being expanded when the edge
                was found.
        """
        self.add_node(source)
        self.add_node(target)

        if target not in self._edges[source]:
            self._edges[source].append(target)
        if cycle:
            self._cycle_edges.add((source, target))

    def add_missing(self, source: FileId, specifier: str) -> None:
        """
        Record a specifier of source that resolved to no file.

        Args:
            source: The file containing the specifier.
            specifier: The raw, unresolved specifier.
        """
        self.add_node(source)
        specifiers = self._missing.setdefault(source, [])
        if specifier not in specifiers:
            specifiers.append(specifier)

    def get_missing(self, source: FileId) -> List[str]:
        """Get the unresolved specifiers of the source file."""
        return list(self._missing.get(source, []))

    def has_missing(self) -> bool:
        """Check if there are any unresolved specifiers."""
        return bool(self._missing)

    def get_targets(self, source: FileId) -> List[FileId]:
        """Get the direct dependencies of source, in discovery order."""
        return list(self._edges.get(source, []))

    def is_cycle_edge(self, source: FileId, target: FileId) -> bool:
        return (source, target) in self._cycle_edges

    def get_roots(self) -> Set[FileId]:
        """
        Get nodes that no other node depends on.

        For a finished traversal this is the entry file.
        """
        all_targets: Set[FileId] = set()
        for targets in self._edges.values():
            all_targets.update(targets)

        return set(self._edges) - all_targets

    def get_sources(self, target: FileId) -> Set[FileId]:
        """Get all files that depend on the target file."""
        return {source for source, targets in self._edges.items() if target in targets}

    def iter_edges(self) -> Iterator[Tuple[FileId, FileId]]:
        """Iterate over all edges as (source, target) tuples."""
        for source, targets in self._edges.items():
            for target in targets:
                yield source, target

    def iter_missing(self) -> Iterator[Tuple[FileId, str]]:
        """Iterate over all unresolved specifiers as (source, specifier) tuples."""
        for source, specifiers in self._missing.items():
            for specifier in specifiers:
                yield source, specifier

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._edges)

    def __contains__(self, node: FileId) -> bool:
        """Check if a node is in the graph."""
        return node in self._edges

    def __repr__(self) -> str:
        edge_count = sum(len(t) for t in self._edges.values())
        missing_count = sum(len(m) for m in self._missing.values())
        return (
            f"DependencyGraph(nodes={len(self._edges)}, edges={edge_count}, "
            f"cycles={len(self._cycle_edges)}, missing={missing_count})"
        )
