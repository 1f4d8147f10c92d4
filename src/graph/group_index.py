"""Group membership index for similarity linking.

This module maps each (gender, ethnicity) key to the ordered node
indices of its members so linking avoids rescanning every node.
"""

from __future__ import annotations

from core.types import GroupKey


class GroupIndex:
    """Append-only mapping from group key to member node indices."""

    def __init__(self) -> None:
        self._members: dict[GroupKey, list[int]] = {}

    def members(self, key: GroupKey) -> tuple[int, ...]:
        """Return member indices of ``key`` in insertion order."""
        return tuple(self._members.get(key, ()))

    def add_member(self, key: GroupKey, node_index: int) -> None:
        self._members.setdefault(key, []).append(node_index)

    def group_sizes(self) -> dict[GroupKey, int]:
        """Return member counts per group in first-seen order."""
        return {key: len(indices) for key, indices in self._members.items()}
