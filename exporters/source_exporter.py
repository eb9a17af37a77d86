"""Flattening exporter: concatenates resolved sources into one text stream."""

from typing import List, Optional

from preprocessor.directives import strip_directives
from preprocessor.source import Source, SourceFile


def to_source(
    files: List[SourceFile],
    strip: bool = False,
    line_markers: bool = False,
    prelude: Optional[Source] = None,
) -> str:
    """
    Concatenate the contents of resolved files in resolution order.

    Args:
        files: Resolved files, dependencies first.
        strip: If True, blank out `#pragma use` lines.
        line_markers: If True, put a `// file: <path>` comment before each file.
        prelude: Optional source whose includes were resolved into `files`;
                 it depends on all of them, so it is emitted last.

    Returns:
        The flattened source text.

    Raises:
        OSError: If a file can no longer be read.
    """
    chunks: List[str] = []

    units: List[Source] = list(files)
    if prelude is not None:
        units.append(prelude)

    for unit in units:
        content = unit.contents()
        if strip:
            content = strip_directives(content)
        text = content.decode("utf-8")
        if text and not text.endswith("\n"):
            text += "\n"

        if line_markers:
            name = unit.filename if isinstance(unit, SourceFile) else "<buffer>"
            chunks.append(f"// file: {name}\n")
        chunks.append(text)

    return "".join(chunks)
