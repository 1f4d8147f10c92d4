"""Public SDK surface for the name graph.

This module provides a stable import path for library users.
It re-exports the primary client, graph primitives, and typed models.
"""

from __future__ import annotations

from analysis.group_totals import compute_group_totals
from analysis.letter_histogram import count_names_by_starting_letter, sorted_letter_counts
from core.config import NameGraphConfig
from core.types import (
    GraphEdge,
    GraphReport,
    GroupKey,
    GroupTotal,
    NameRecord,
    ParseFailure,
    ReachabilityResult,
    ReportOptions,
)
from graph.group_index import GroupIndex
from graph.linking import insert_linked_record
from graph.similarity_graph import SimilarityGraph
from ingest.graph_builder import build_name_graph
from ingest.row_parser import parse_row
from report.pipeline import build_graph_report
from report.report_sdk import NameGraphClient

__all__ = [
    "GraphEdge",
    "GraphReport",
    "GroupIndex",
    "GroupKey",
    "GroupTotal",
    "NameGraphClient",
    "NameGraphConfig",
    "NameRecord",
    "ParseFailure",
    "ReachabilityResult",
    "ReportOptions",
    "SimilarityGraph",
    "build_graph_report",
    "build_name_graph",
    "compute_group_totals",
    "count_names_by_starting_letter",
    "insert_linked_record",
    "parse_row",
    "sorted_letter_counts",
]
