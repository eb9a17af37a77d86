"""Discovery of shader sources when a directory is given as a root."""

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set


DEFAULT_EXTENSIONS = {
    ".glsl", ".vert", ".frag", ".geom", ".comp", ".tesc", ".tese",
    ".vs", ".fs", ".hlsl", ".wgsl", ".shader",
}
DEFAULT_EXCLUDE_DIRS = {
    ".git", ".hg", ".svn",
    "node_modules", "__pycache__",
    "venv", ".venv",
    ".idea", ".vscode",
    "build", "dist",
}


def iter_sources(
    root: Path,
    include_ext: Optional[Set[str]] = None,
    exclude_dirs: Optional[Set[str]] = None,
    max_depth: Optional[int] = None,
) -> Iterator[Path]:
    """
    Iterate over shader source files in a directory tree.

    Args:
        root: Root directory to scan.
        include_ext: Set of file extensions to include (e.g., {'.glsl', '.frag'}).
                    If None, uses DEFAULT_EXTENSIONS.
        exclude_dirs: Set of directory names to skip.
                     If None, uses DEFAULT_EXCLUDE_DIRS.
        max_depth: Maximum depth to descend. None means unlimited.

    Yields:
        Path objects for matching files, in sorted order.
    """
    if include_ext is None:
        include_ext = DEFAULT_EXTENSIONS
    if exclude_dirs is None:
        exclude_dirs = DEFAULT_EXCLUDE_DIRS

    def _walk(current: Path, depth: int) -> Iterator[Path]:
        if max_depth is not None and depth > max_depth:
            return

        try:
            entries = sorted(current.iterdir())
        except PermissionError:
            return

        for entry in entries:
            if entry.is_dir():
                if entry.name in exclude_dirs:
                    continue
                yield from _walk(entry, depth + 1)
            elif entry.is_file():
                if entry.suffix.lower() in include_ext:
                    yield entry

    yield from _walk(root.resolve(), 0)


def expand_roots(paths: Iterable[str], include_ext: Optional[Set[str]] = None) -> List[str]:
    """
    Replace directories in a list of roots with the shader files they contain.

    Anything that is not a directory is passed through unchanged, so a
    missing file is reported by the resolver when it is read.
    """
    expanded: List[str] = []
    for path in paths:
        if os.path.isdir(path):
            expanded.extend(str(p) for p in iter_sources(Path(path), include_ext=include_ext))
        else:
            expanded.append(path)
    return expanded
