"""Unit tests for group totals aggregation."""

from __future__ import annotations

from analysis.group_totals import compute_group_totals
from core.types import GroupKey, GroupTotal
from tests.fixture_paths import make_record


def _three_records() -> list:
    return [
        make_record("M", "A", "Al", count=10),
        make_record("M", "A", "Bo", count=5, rank=2),
        make_record("F", "A", "Cy", count=7),
    ]


def test_compute_group_totals_sums_counts_and_keeps_name_order() -> None:
    """Totals sum counts and list names in record order."""
    totals = compute_group_totals(_three_records())

    assert totals == {
        GroupKey("M", "A"): GroupTotal(total=15, names=("Al", "Bo")),
        GroupKey("F", "A"): GroupTotal(total=7, names=("Cy",)),
    }


def test_compute_group_totals_orders_groups_by_first_appearance() -> None:
    """Groups appear in the order their first member was seen."""
    totals = compute_group_totals(_three_records())

    assert list(totals) == [GroupKey("M", "A"), GroupKey("F", "A")]


def test_compute_group_totals_is_idempotent() -> None:
    """Repeated aggregation over unchanged records gives equal results."""
    records = _three_records()

    assert compute_group_totals(records) == compute_group_totals(records)


def test_compute_group_totals_empty_input() -> None:
    """No records yield no groups."""
    assert compute_group_totals([]) == {}


def test_compute_group_totals_keeps_duplicate_names() -> None:
    """The same name in two rows is listed twice."""
    totals = compute_group_totals(
        [make_record("F", "W", "Olivia", count=2), make_record("F", "W", "Olivia", count=3)]
    )

    assert totals[GroupKey("F", "W")] == GroupTotal(total=5, names=("Olivia", "Olivia"))
