"""Starting-letter histograms per group.

Letters are the first character of each name, compared by code point.
Empty names add nothing for their record, but their group still appears.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from core.types import GroupKey, NameRecord


def count_names_by_starting_letter(
    records: Iterable[NameRecord],
) -> dict[GroupKey, dict[str, int]]:
    """Count records per group by the first character of their name.

    Args:
        records: Records in node order.

    Returns:
        Letter counts keyed by group, groups in first-seen order. Letter
        keys are unordered; use ``sorted_letter_counts`` to present them.
    """
    histogram: dict[GroupKey, dict[str, int]] = {}
    for record in records:
        letter_counts = histogram.setdefault(record.group_key, {})
        if record.name:
            first_letter = record.name[0]
            letter_counts[first_letter] = letter_counts.get(first_letter, 0) + 1
    return histogram


def sorted_letter_counts(letter_counts: Mapping[str, int]) -> tuple[tuple[str, int], ...]:
    """Return ``(letter, count)`` pairs in ascending code point order."""
    return tuple((letter, letter_counts[letter]) for letter in sorted(letter_counts))
