"""Extraction of `#pragma use` directives from raw source bytes."""

import os
import re
from typing import List, Union


# A directive is a whole line of the form: #pragma use "path/to/file"
DIRECTIVE_PATTERN = re.compile(
    rb'^#pragma[ \t]+use[ \t]+"([^"\r\n]+)"$',
    re.IGNORECASE | re.MULTILINE,
)


def _as_bytes(content: Union[bytes, str]) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    return content


def scan_directives(content: Union[bytes, str]) -> List[str]:
    """
    Extract include references from the contents of a source unit.

    Args:
        content: Raw contents of one source unit.

    Returns:
        The quoted paths of all directives, in document order. A path that
        is referenced twice is returned twice.
    """
    return [
        os.fsdecode(match.group(1))
        for match in DIRECTIVE_PATTERN.finditer(_as_bytes(content))
    ]


def strip_directives(content: Union[bytes, str]) -> bytes:
    """
    Blank out every directive line.

    Line terminators are kept, so the remaining text keeps its line numbers.
    """
    return DIRECTIVE_PATTERN.sub(b"", _as_bytes(content))
