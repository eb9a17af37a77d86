"""Plain list exporter: one resolved file per line."""

from typing import List, Optional

from preprocessor.paths import display_path
from preprocessor.source import SourceFile


def to_list(files: List[SourceFile], base: Optional[str] = None) -> str:
    """
    List resolved files in resolution order.

    Args:
        files: Resolved files, dependencies first.
        base: Optional base path for relative path display.

    Returns:
        Newline separated paths.
    """
    return "\n".join(display_path(f.filename, base) for f in files)
