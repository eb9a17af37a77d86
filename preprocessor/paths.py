"""Canonicalization of include references into comparable absolute paths."""

import os
from typing import Optional


def canonical_path(path: str, directory: Optional[str] = None) -> str:
    """
    Turn a path into a Canonical Path.

    Absolute paths are only cleaned. Relative paths are joined onto
    `directory` first, or onto the current working directory when no
    directory is given. The target is not required to exist.

    Args:
        path: The path to canonicalize.
        directory: Directory a relative path is relative to.

    Returns:
        Absolute path with `.` and `..` segments collapsed.

    Raises:
        OSError: If the current working directory is needed but cannot be
            determined.
    """
    if not os.path.isabs(path):
        base = os.getcwd() if directory is None else os.path.abspath(directory)
        path = os.path.join(base, path)
    return os.path.normpath(path)


def normalize_include(reference: str, directory: str) -> str:
    """Resolve an include reference found in a unit located in `directory`."""
    return canonical_path(reference, directory)


def display_path(path: str, base: Optional[str] = None) -> str:
    """
    Get a short, forward-slash path for output.

    Args:
        path: Canonical path to display.
        base: Directory to display the path relative to.

    Returns:
        The path relative to `base` if it lies below it, otherwise the path
        itself.
    """
    if base is not None:
        base = canonical_path(base)
        try:
            if os.path.commonpath([path, base]) == base:
                return os.path.relpath(path, base).replace("\\", "/")
        except ValueError:
            # Different drives on Windows
            pass
    return path.replace("\\", "/")
