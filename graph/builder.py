"""Traversal engine that walks a file's dependencies and assembles the result."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple, Union

from exporters.tree_exporter import ListAssembler, TreeAssembler
from extractors import analyze_source
from resolvers import ModuleResolver, ResolutionStatus
from .config import TraversalConfig
from .errors import ExtractionError
from .model import DependencyGraph, FileId


logger = logging.getLogger(__name__)


@dataclass
class TraversalState:
    """
    Mutable state of one traversal.

    `visited` holds committed subtrees, `in_progress` the files on the
    current path of the walk. A file is in at most one of the two.
    """

    visited: Dict[FileId, Any]
    non_existent: Dict[FileId, List[str]]
    in_progress: Set[FileId] = field(default_factory=set)
    graph: DependencyGraph = field(default_factory=DependencyGraph)


class DependencyTraversal:
    """
    Depth-first walk from an entry file over everything it depends on.

    Every file is expanded at most once: files already in `visited` are
    reused as they are, and an edge back to a file still being expanded is
    recorded as a cycle edge without re-entering it.
    """

    def __init__(self, config: TraversalConfig):
        self.config = config
        self.resolver = ModuleResolver(
            config.directory,
            rjs_config=config.rjs_config,
            bundler_alias_config=config.bundler_alias_config,
            ts_config=config.ts_config,
            node_modules_entry_field=config.node_modules_entry_field,
        )
        self.assembler = ListAssembler() if config.is_list_form else TreeAssembler()
        self.state = TraversalState(visited=config.visited, non_existent=config.non_existent)

    @property
    def graph(self) -> DependencyGraph:
        return self.state.graph

    def run(self) -> Union[Dict[FileId, Any], List[FileId]]:
        """
        Traverse from the entry file.

        Returns:
            `{entry: subtree}` in tree form or a dependency-first list in
            list form; empty if the entry file does not exist.
        """
        entry = self.config.filename

        if entry in self.state.visited:
            logger.debug("Entry %s already visited", entry)
            return self.assembler.finish(entry, self.state.visited[entry])

        if not os.path.isfile(entry):
            logger.debug("Entry %s does not exist", entry)
            return self.assembler.empty()

        return self.assembler.finish(entry, self._traverse(entry))

    def _traverse(self, entry: FileId) -> Any:
        """
        Depth-first walk with an explicit stack of (file, pending dependencies).

        A file is committed once all of its dependencies are, so deep
        dependency chains do not hit the interpreter's recursion limit.
        """
        state = self.state

        if entry in state.visited:
            logger.debug("Already visited %s", entry)
            return state.visited[entry]

        stack: List[Tuple[FileId, Iterator[FileId]]] = [self._enter(entry)]

        while stack:
            file_id, pending = stack[-1]
            dependency = next(pending, None)

            if dependency is None:
                stack.pop()
                self._commit(file_id)
                if stack:
                    state.graph.add_edge(stack[-1][0], file_id)
                continue

            if dependency in state.in_progress:
                logger.debug("Cycle: %s -> %s", file_id, dependency)
                state.graph.add_edge(file_id, dependency, cycle=True)
            elif dependency in state.visited:
                logger.debug("Already visited %s", dependency)
                state.graph.add_edge(file_id, dependency)
            else:
                stack.append(self._enter(dependency))

        return state.visited[entry]

    def _enter(self, file_id: FileId) -> Tuple[FileId, Iterator[FileId]]:
        logger.debug("Traversing %s", file_id)
        self.state.in_progress.add(file_id)
        self.state.graph.add_node(file_id)
        return file_id, iter(self.get_dependencies(file_id))

    def _commit(self, file_id: FileId) -> None:
        state = self.state
        state.in_progress.discard(file_id)
        state.visited[file_id] = self.assembler.commit(state.graph, file_id, state.visited)

    def get_dependencies(self, file_id: FileId) -> List[FileId]:
        """
        Resolved, filtered direct dependencies of a file.

        Unreadable or unparsable files have none. Unresolved specifiers are
        recorded in `non_existent` under the file, all at once.
        """
        try:
            source = Path(file_id).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read %s: %s", file_id, e)
            return []

        try:
            extraction = analyze_source(
                file_id,
                source,
                self.config.extractor_config,
                include_dynamic=self.config.include_dynamic_imports,
            )
        except ExtractionError as e:
            logger.debug("%s", e)
            return []

        dependencies: List[FileId] = []
        unresolved: List[str] = []

        for specifier in dict.fromkeys(extraction.specifiers):
            resolution = self.resolver.resolve(specifier, file_id, extraction.module_format)

            if resolution.status is ResolutionStatus.NOT_FOUND:
                logger.debug("Cannot resolve %s in %s", specifier, file_id)
                unresolved.append(specifier)
                continue
            if resolution.status is ResolutionStatus.EXCLUDED:
                continue

            path = resolution.path
            if path in dependencies:
                continue
            if self.config.filter is not None and not self.config.filter(path, file_id):
                logger.debug("Filtered out %s", path)
                continue
            dependencies.append(path)

        if unresolved:
            self._record_non_existent(file_id, unresolved)

        return dependencies

    def _record_non_existent(self, file_id: FileId, specifiers: List[str]) -> None:
        recorded = self.state.non_existent.setdefault(file_id, [])
        for specifier in specifiers:
            if specifier not in recorded:
                recorded.append(specifier)
            self.state.graph.add_missing(file_id, specifier)


def build_tree(options: Optional[Dict[str, Any]] = None, **kwargs: Any) -> Dict[FileId, Any]:
    """
    Build the nested dependency tree of a file.

    Args:
        options: Traversal options as a mapping (see TraversalConfig).
        **kwargs: Traversal options as keywords; they override `options`.

    Returns:
        `{filename: {dependency: {...}, ...}}`, or `{}` when the entry file
        does not exist.

    Raises:
        ConfigurationError: If the options are unusable.
    """
    config = TraversalConfig.from_options(options, **kwargs).clone(is_list_form=False)
    return DependencyTraversal(config).run()


def build_list(options: Optional[Dict[str, Any]] = None, **kwargs: Any) -> List[FileId]:
    """
    Build the flat dependency list of a file.

    Every file appears once and after all of its dependencies; the entry
    file comes last.

    Raises:
        ConfigurationError: If the options are unusable.
    """
    config = TraversalConfig.from_options(options, **kwargs).clone(is_list_form=True)
    return DependencyTraversal(config).run()
