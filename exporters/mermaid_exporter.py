"""Mermaid flowchart exporter for include graphs."""

import re
from typing import Dict, List, Optional

from graph.model import IncludeGraph
from preprocessor.paths import display_path


def to_mermaid(
    graph: IncludeGraph,
    base: Optional[str] = None,
    orientation: str = "LR",
) -> str:
    """
    Convert an include graph to Mermaid flowchart syntax.

    Edges that were dropped to break a cycle are drawn dashed.

    Args:
        graph: The include graph to export.
        base: Optional base path for relative path display.
        orientation: Flowchart orientation (LR, TD, TB, RL, BT).

    Returns:
        Mermaid flowchart string.
    """
    lines = [f"flowchart {orientation}"]

    # Node IDs must be unique, so number them in discovery order
    node_ids: Dict[str, str] = {}
    for index, node in enumerate(graph.nodes):
        label = display_path(node, base)
        node_ids[node] = f"n{index}_{_sanitize_id(label)}"
        lines.append(f'    {node_ids[node]}["{_escape_label(label)}"]')

    edge_lines: List[str] = []
    for source, target, cycle in graph.iter_edges():
        arrow = "-.->" if cycle else "-->"
        edge_lines.append(f"    {node_ids[source]} {arrow} {node_ids[target]}")

    if edge_lines:
        lines.append("")
        lines.extend(edge_lines)

    return "\n".join(lines)


def _sanitize_id(label: str) -> str:
    """Convert a display path to a valid Mermaid node ID fragment."""
    sanitized = re.sub(r"[^a-zA-Z0-9_]", "_", label)
    return re.sub(r"_+", "_", sanitized).strip("_")


def _escape_label(label: str) -> str:
    """Escape characters that would break a quoted Mermaid label."""
    return label.replace('"', "#quot;")
