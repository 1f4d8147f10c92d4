"""Append-only similarity graph.

Nodes are name records addressed by insertion index. Edges are directed
index pairs kept in insertion order, both globally and per source node,
so traversal order follows the order edges were added.
"""

from __future__ import annotations

from typing import MutableSequence

from core.errors import NameGraphIndexError
from core.types import GraphEdge, NameRecord, ReachabilityResult


class SimilarityGraph:
    """Directed graph of name records linked by group similarity."""

    def __init__(self) -> None:
        self._nodes: list[NameRecord] = []
        self._edges: list[GraphEdge] = []
        self._adjacency: list[list[int]] = []

    def add_node(self, record: NameRecord) -> int:
        """Append a record and return its node index."""
        node_index = len(self._nodes)
        self._nodes.append(record)
        self._adjacency.append([])
        return node_index

    def add_edge(self, source_index: int, target_index: int) -> None:
        """Append one directed edge.

        Only the given direction is stored; callers add the reverse edge
        themselves when they need it.

        Args:
            source_index: Index of the edge's source node.
            target_index: Index of the edge's target node.

        Raises:
            NameGraphIndexError: If either index is not an existing node.
        """
        self._require_index(source_index, "edge source")
        self._require_index(target_index, "edge target")
        self._edges.append(GraphEdge(source=source_index, target=target_index))
        self._adjacency[source_index].append(target_index)

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def get_node(self, index: int) -> NameRecord | None:
        """Return the record at ``index``, or None when out of range."""
        if 0 <= index < len(self._nodes):
            return self._nodes[index]
        return None

    def nodes(self) -> tuple[NameRecord, ...]:
        """Return all records in insertion order."""
        return tuple(self._nodes)

    def edges(self) -> tuple[GraphEdge, ...]:
        """Return all edges in insertion order."""
        return tuple(self._edges)

    def depth_first_visit(
        self,
        start_index: int,
        visited: MutableSequence[bool] | None = None,
    ) -> ReachabilityResult:
        """Mark every node reachable from ``start_index``.

        Visits targets in edge-insertion order and never revisits a node.
        Uses an explicit stack; first-visit order matches a recursive walk.

        Args:
            start_index: Node to start from.
            visited: Optional per-node marker list, updated in place.

        Returns:
            Visited markers and first-visit order.

        Raises:
            NameGraphIndexError: If the start index is not an existing node
                or the marker list does not match the node count.
        """
        self._require_index(start_index, "traversal start")
        if visited is None:
            visited = [False] * len(self._nodes)
        elif len(visited) != len(self._nodes):
            raise NameGraphIndexError(
                f"Visited markers cover {len(visited)} nodes, graph has {len(self._nodes)}."
            )
        visited[start_index] = True
        order = [start_index]
        stack = [(start_index, iter(self._adjacency[start_index]))]
        while stack:
            _, targets = stack[-1]
            for target in targets:
                if not visited[target]:
                    visited[target] = True
                    order.append(target)
                    stack.append((target, iter(self._adjacency[target])))
                    break
            else:
                stack.pop()
        return ReachabilityResult(
            start_index=start_index,
            visited=tuple(visited),
            order=tuple(order),
        )

    def _require_index(self, index: int, role: str) -> None:
        if not 0 <= index < len(self._nodes):
            raise NameGraphIndexError(
                f"Invalid {role} index {index}: graph has {len(self._nodes)} nodes."
            )
