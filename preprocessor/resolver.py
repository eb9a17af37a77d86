"""Recursive resolution of `#pragma use` directives into an ordered file list."""

import logging
from typing import Container, Iterable, Iterator, List, Optional, Set

from graph.model import IncludeGraph
from .directives import scan_directives
from .paths import canonical_path, normalize_include
from .source import Source, SourceFile

logger = logging.getLogger(__name__)


class ResolutionSet:
    """
    Ordered, append-only collection of resolved files.

    Membership is checked by Canonical Path through a set kept alongside
    the ordered list.
    """

    def __init__(self):
        self._files: List[SourceFile] = []
        self._index: Set[str] = set()

    def append(self, source_file: SourceFile) -> None:
        """Append a file. Appending a file that is already present is an error."""
        if source_file.filename in self._index:
            raise ValueError(f"{source_file.filename} is already resolved")
        self._files.append(source_file)
        self._index.add(source_file.filename)

    def to_list(self) -> List[SourceFile]:
        return list(self._files)

    def __contains__(self, filename: str) -> bool:
        return filename in self._index

    def __iter__(self) -> Iterator[SourceFile]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)


def resolve_includes(*filenames: str, graph: Optional[IncludeGraph] = None) -> List[SourceFile]:
    """
    Recursively resolve the dependencies of the given files.

    For each filename, in order, its transitive dependencies are listed
    first and the file itself last. Every file appears once, at the place
    it was first reached. A reference that would close a cycle is dropped
    without an error.

    Args:
        filenames: Root files, relative to the working directory or absolute.
        graph: Optional graph that receives every include edge seen.

    Returns:
        The resolved files, dependencies before dependents.

    Raises:
        OSError: If any file cannot be read or the working directory cannot
            be determined. No partial result is returned.
    """
    roots = [canonical_path(filename) for filename in filenames]
    if graph is not None:
        for root in roots:
            graph.add_root(root)

    resolved = ResolutionSet()
    _resolve_recursive(roots, resolved, set(), graph)
    return resolved.to_list()


def resolve_source(source: Source, graph: Optional[IncludeGraph] = None) -> List[SourceFile]:
    """
    Resolve the files referenced by an arbitrary source unit.

    Relative references are resolved against `source.directory()`, which is
    the working directory for a `SourceBuffer`. The source itself is not
    part of the result.

    Raises:
        OSError: If the source or any referenced file cannot be read.
    """
    # A file source stays pending so it cannot resolve into its own result
    name: Optional[str] = None
    pending: Set[str] = set()
    if isinstance(source, SourceFile):
        name = canonical_path(source.filename)
        pending.add(name)

    references = _collect_references(source, (), pending, graph, name=name)
    if graph is not None:
        for reference in references:
            graph.add_root(reference)

    resolved = ResolutionSet()
    _resolve_recursive(references, resolved, pending, graph)
    return resolved.to_list()


def _collect_references(
    source: Source,
    resolved: Container[str],
    pending: Container[str],
    graph: Optional[IncludeGraph],
    name: Optional[str] = None,
) -> List[str]:
    """
    Read a source unit and return the references that still need resolving.

    A reference is dropped if its path is already resolved, or pending
    further up the call stack.
    """
    content = source.contents()
    directory = source.directory()

    references: List[str] = []
    for reference in scan_directives(content):
        path = normalize_include(reference, directory)
        is_pending = path in pending
        if graph is not None and name is not None:
            graph.add_edge(name, path, cycle=is_pending)
        if is_pending or path in resolved:
            continue
        references.append(path)
    return references


def _resolve_recursive(
    filenames: Iterable[str],
    resolved: ResolutionSet,
    pending: Set[str],
    graph: Optional[IncludeGraph],
) -> None:
    """
    Resolve canonical filenames depth-first, appending to `resolved`.

    `pending` holds every file on the current recursion path. A file is
    unvisited, then pending while its dependencies are resolved, then
    resolved once appended; it is never processed twice.
    """
    for filename in filenames:
        # A sibling or an earlier root may already have pulled this file in
        if filename in resolved or filename in pending:
            continue

        current = SourceFile(filename)
        logger.debug("Reading %s", filename)

        # The current file counts as pending so it cannot include itself
        pending.add(filename)
        includes = _collect_references(current, resolved, pending, graph, name=filename)
        if includes:
            logger.debug("Resolving %d include(s) of %s", len(includes), filename)
        _resolve_recursive(includes, resolved, pending, graph)
        pending.discard(filename)

        resolved.append(current)
