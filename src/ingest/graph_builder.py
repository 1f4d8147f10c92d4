"""Graph construction from raw name rows.

This module parses rows, skips rejected ones, and links accepted
records into a similarity graph until the optional record cap is hit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from core.logging_config import get_logger
from core.types import IngestSummary, ParseFailure
from graph.group_index import GroupIndex
from graph.linking import insert_linked_record
from graph.similarity_graph import SimilarityGraph
from ingest.row_parser import parse_row

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class GraphBuild:
    """Graph, group index, and row accounting from one build."""

    graph: SimilarityGraph
    group_index: GroupIndex
    ingest: IngestSummary


def build_name_graph(
    rows: Iterable[tuple[int, Sequence[str]]],
    max_records: int | None = None,
) -> GraphBuild:
    """Build a similarity graph from raw rows.

    Rejected rows are skipped silently apart from a debug log event.
    Reading stops once ``max_records`` records have been accepted.

    Args:
        rows: ``(line_number, fields)`` pairs, header already removed.
        max_records: Optional cap on accepted records.

    Returns:
        Built graph with its group index and ingest summary.
    """
    graph = SimilarityGraph()
    group_index = GroupIndex()
    rows_read = 0
    rows_skipped = 0
    limit_reached = False
    for line_number, fields in rows:
        if max_records is not None and graph.node_count() >= max_records:
            limit_reached = True
            _LOGGER.info("ingest_limit_reached", max_records=max_records)
            break
        rows_read += 1
        result = parse_row(fields)
        if isinstance(result, ParseFailure):
            rows_skipped += 1
            _LOGGER.debug(
                "row_skipped",
                line_number=line_number,
                kind=result.kind,
                reason=result.reason,
            )
            continue
        insert_linked_record(graph, group_index, result)
    summary = IngestSummary(
        rows_read=rows_read,
        rows_accepted=graph.node_count(),
        rows_skipped=rows_skipped,
        limit_reached=limit_reached,
    )
    _LOGGER.info(
        "graph_built",
        node_count=graph.node_count(),
        edge_count=graph.edge_count(),
        group_count=len(group_index.group_sizes()),
        rows_skipped=rows_skipped,
    )
    return GraphBuild(graph=graph, group_index=group_index, ingest=summary)
