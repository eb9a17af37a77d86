"""ASCII tree-style exporter for include graphs."""

from typing import List, Optional, Set, Tuple

from graph.model import IncludeGraph
from preprocessor.paths import display_path


# Unicode tree characters
UNICODE_BRANCH = "├── "
UNICODE_LAST = "└── "
UNICODE_VERTICAL = "│   "
UNICODE_SPACE = "    "

# ASCII fallback characters
ASCII_BRANCH = "|-- "
ASCII_LAST = "\\-- "
ASCII_VERTICAL = "|   "
ASCII_SPACE = "    "


def to_ascii(
    graph: IncludeGraph,
    base: Optional[str] = None,
    style: str = "tree",
) -> str:
    """
    Convert an include graph to an ASCII tree per root.

    Children are listed in directive order. A file that already appears on
    the current branch is marked with ` [*]` and not expanded again.

    Args:
        graph: The include graph to export.
        base: Optional base path for relative path display.
        style: Output style - "tree" (Unicode) or "ascii" (pure ASCII).

    Returns:
        ASCII tree string.
    """
    if style == "ascii":
        chars = (ASCII_BRANCH, ASCII_LAST, ASCII_VERTICAL, ASCII_SPACE)
    else:
        chars = (UNICODE_BRANCH, UNICODE_LAST, UNICODE_VERTICAL, UNICODE_SPACE)

    lines: List[str] = []
    roots = graph.roots
    for i, root_node in enumerate(roots):
        lines.append(display_path(root_node, base))
        _render_children(graph, root_node, base, "", chars, {root_node}, lines)

        # Blank line between root trees
        if i < len(roots) - 1:
            lines.append("")

    return "\n".join(lines)


def _render_children(
    graph: IncludeGraph,
    node: str,
    base: Optional[str],
    prefix: str,
    chars: Tuple[str, str, str, str],
    visited: Set[str],
    lines: List[str],
) -> None:
    """
    Recursively render the includes of a node.

    Args:
        graph: The include graph.
        node: Node whose children are rendered.
        base: Base path for display.
        prefix: Current line prefix for indentation.
        chars: Character set (branch, last, vertical, space).
        visited: Nodes on the current branch (to detect cycles).
        lines: Output lines list (modified in place).
    """
    branch, last, vertical, space = chars

    children = graph.get_targets(node)
    for index, child in enumerate(children):
        is_last = index == len(children) - 1
        connector = last if is_last else branch
        is_cycle = child in visited

        marker = " [*]" if is_cycle else ""
        lines.append(f"{prefix}{connector}{display_path(child, base)}{marker}")

        if is_cycle:
            continue

        visited.add(child)
        _render_children(
            graph,
            child,
            base,
            prefix + (space if is_last else vertical),
            chars,
            visited,
            lines,
        )
        # Backtrack so the same file can show up under other branches
        visited.discard(child)
