"""Insertion-with-linking protocol for the similarity graph.

Each new record becomes a node, then every earlier node of the same
(gender, ethnicity) group gets an edge pointing at it. Reverse edges are
never added, so reachability runs from earlier nodes to later ones.
"""

from __future__ import annotations

from core.types import NameRecord
from graph.group_index import GroupIndex
from graph.similarity_graph import SimilarityGraph


def insert_linked_record(
    graph: SimilarityGraph,
    group_index: GroupIndex,
    record: NameRecord,
) -> int:
    """Add a record and link it from its earlier group members.

    Edges are added in ascending source index order, matching a full
    scan of the node list.

    Args:
        graph: Graph receiving the node and edges.
        group_index: Membership index kept in step with ``graph``.
        record: Record to insert.

    Returns:
        Index of the new node.
    """
    key = record.group_key
    node_index = graph.add_node(record)
    for member_index in group_index.members(key):
        if member_index != node_index:
            graph.add_edge(member_index, node_index)
    group_index.add_member(key, node_index)
    return node_index
