"""Graph data model recording the include relationships found during resolution."""

from typing import Dict, Iterator, List, Set, Tuple


class IncludeGraph:
    """
    A directed graph of include directives.

    Nodes are Canonical Paths, and edges represent 'includer -> included'
    relationships in directive order. Edges that were dropped during
    resolution because they would close a cycle are kept and marked.
    """

    def __init__(self):
        # dicts double as insertion-ordered sets
        self._nodes: Dict[str, None] = {}
        self._roots: Dict[str, None] = {}
        self._edges: Dict[str, Dict[str, None]] = {}
        self._cycles: Set[Tuple[str, str]] = set()

    @property
    def nodes(self) -> List[str]:
        """Return all nodes in the order they were first seen."""
        return list(self._nodes)

    @property
    def roots(self) -> List[str]:
        """Return the files resolution was started from, in caller order."""
        return list(self._roots)

    def add_node(self, node: str) -> None:
        """Add a node to the graph."""
        self._nodes.setdefault(node, None)

    def add_root(self, node: str) -> None:
        """Add a node and remember it as a resolution root."""
        self.add_node(node)
        self._roots.setdefault(node, None)

    def add_edge(self, source: str, target: str, cycle: bool = False) -> None:
        """
        Add a directed edge from source to target.

        Automatically adds both nodes to the graph. Adding the same edge
        twice keeps the position of the first one.

        Args:
            source: The including file.
            target: The included file.
            cycle: True if following this edge would close a cycle.
        """
        self.add_node(source)
        self.add_node(target)
        self._edges.setdefault(source, {}).setdefault(target, None)
        if cycle:
            self._cycles.add((source, target))

    def get_targets(self, source: str) -> List[str]:
        """Get all files the source file includes, in directive order."""
        return list(self._edges.get(source, {}))

    def get_sources(self, target: str) -> List[str]:
        """Get all files that include the target file."""
        return [source for source, targets in self._edges.items() if target in targets]

    def is_cycle_edge(self, source: str, target: str) -> bool:
        """Check whether an edge was dropped to break a cycle."""
        return (source, target) in self._cycles

    def has_cycles(self) -> bool:
        """Check if resolution had to break any cycle."""
        return bool(self._cycles)

    def iter_edges(self) -> Iterator[Tuple[str, str, bool]]:
        """Iterate over all edges as (source, target, cycle) tuples."""
        for source, targets in self._edges.items():
            for target in targets:
                yield source, target, (source, target) in self._cycles

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, node: str) -> bool:
        """Check if a node is in the graph."""
        return node in self._nodes

    def __repr__(self) -> str:
        edge_count = sum(len(t) for t in self._edges.values())
        return f"IncludeGraph(nodes={len(self._nodes)}, edges={edge_count}, cycles={len(self._cycles)})"
