"""Shared typed models.

This module defines immutable data models used by ingest, graph,
analysis, and report layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Mapping

from core.constants import DEFAULT_DELIMITER, DEFAULT_MAX_RECORDS, DEFAULT_START_INDEX

ParseFailureKind = Literal["row_shape", "field_type"]


@dataclass(frozen=True, order=True)
class GroupKey:
    """Grouping key shared by records with equal gender and ethnicity.

    Attributes:
        gender: Gender value exactly as read from the source.
        ethnicity: Ethnicity value exactly as read from the source.
    """

    gender: str
    ethnicity: str


@dataclass(frozen=True)
class NameRecord:
    """One validated baby-name row.

    Attributes:
        year: Year of birth.
        gender: Gender label.
        ethnicity: Ethnicity label.
        name: Child's first name.
        count: Number of children given the name.
        rank: Popularity rank of the name.
    """

    year: int
    gender: str
    ethnicity: str
    name: str
    count: int
    rank: int

    @property
    def group_key(self) -> GroupKey:
        """Return the (gender, ethnicity) key of this record."""
        return GroupKey(gender=self.gender, ethnicity=self.ethnicity)


@dataclass(frozen=True)
class ParseFailure:
    """Rejected row description returned by the row parser.

    Attributes:
        kind: ``row_shape`` for wrong field counts, ``field_type`` for bad numerics.
        reason: Human-readable rejection reason.
        field_count: Number of fields the row carried.
    """

    kind: ParseFailureKind
    reason: str
    field_count: int


@dataclass(frozen=True)
class GraphEdge:
    """Directed link between two node indices sharing a group."""

    source: int
    target: int


@dataclass(frozen=True)
class GroupTotal:
    """Summed count and ordered member names for one group."""

    total: int
    names: tuple[str, ...]


@dataclass(frozen=True)
class ReachabilityResult:
    """Outcome of a depth-first traversal.

    Attributes:
        start_index: Node the traversal started from.
        visited: Visited marker per node index.
        order: Node indices in first-visit order.
    """

    start_index: int
    visited: tuple[bool, ...]
    order: tuple[int, ...]

    def reachable_indices(self) -> tuple[int, ...]:
        """Return visited node indices in ascending order."""
        return tuple(index for index, seen in enumerate(self.visited) if seen)


@dataclass(frozen=True)
class IngestSummary:
    """Row accounting for one graph build.

    Attributes:
        rows_read: Data rows pulled from the source.
        rows_accepted: Rows that became graph nodes.
        rows_skipped: Rows rejected by the parser.
        limit_reached: Whether ingest stopped at the record cap.
    """

    rows_read: int
    rows_accepted: int
    rows_skipped: int
    limit_reached: bool


@dataclass(frozen=True)
class ReportOptions:
    """Report request options.

    Attributes:
        source_path: Delimited file holding name rows.
        max_records: Cap on accepted records, or None for no cap.
        start_index: Node index the traversal starts from.
        delimiter: Single-character field delimiter.
    """

    source_path: Path
    max_records: int | None = DEFAULT_MAX_RECORDS
    start_index: int = DEFAULT_START_INDEX
    delimiter: str = DEFAULT_DELIMITER


@dataclass(frozen=True)
class GraphReport:
    """All values produced by one report run.

    Attributes:
        node_count: Final number of graph nodes.
        edge_count: Final number of graph edges.
        group_totals: Count and names per group, in first-seen group order.
        letter_counts: First-letter histogram per group.
        reachability: Traversal result, or None when the graph is empty.
        ingest: Row accounting for the build.
    """

    node_count: int
    edge_count: int
    group_totals: Mapping[GroupKey, GroupTotal]
    letter_counts: Mapping[GroupKey, Mapping[str, int]]
    reachability: ReachabilityResult | None
    ingest: IngestSummary
