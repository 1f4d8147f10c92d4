"""Per-group count totals and name lists."""

from __future__ import annotations

from typing import Iterable

from core.types import GroupKey, GroupTotal, NameRecord


def compute_group_totals(records: Iterable[NameRecord]) -> dict[GroupKey, GroupTotal]:
    """Sum counts and collect names for each (gender, ethnicity) group.

    Args:
        records: Records in node order.

    Returns:
        Totals keyed by group, groups in first-seen order and names in
        record order.
    """
    totals: dict[GroupKey, int] = {}
    names: dict[GroupKey, list[str]] = {}
    for record in records:
        key = record.group_key
        totals[key] = totals.get(key, 0) + record.count
        names.setdefault(key, []).append(record.name)
    return {key: GroupTotal(total=totals[key], names=tuple(names[key])) for key in totals}
