"""JSON exporter for resolution results (machine-friendly format)."""

import json
from typing import Any, Dict, List, Optional

from graph.model import IncludeGraph
from preprocessor.paths import display_path
from preprocessor.source import SourceFile


def to_json(
    files: List[SourceFile],
    graph: IncludeGraph,
    base: Optional[str] = None,
    indent: int = 2,
) -> str:
    """
    Convert a resolution result to JSON format.

    Args:
        files: Resolved files, dependencies first.
        graph: Include graph recorded during resolution.
        base: Optional base path for relative path display.
        indent: JSON indentation level.

    Returns:
        JSON string with the ordered file list and every include edge.
    """
    edges: List[Dict[str, Any]] = []
    for source, target, cycle in graph.iter_edges():
        edges.append({
            "source": display_path(source, base),
            "target": display_path(target, base),
            "cycle": cycle,
        })

    data: Dict[str, Any] = {
        "files": [display_path(f.filename, base) for f in files],
        "edges": edges,
    }

    return json.dumps(data, indent=indent)
