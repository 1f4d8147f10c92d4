"""Report orchestration for name graph runs.

This module coordinates source loading, graph construction,
reachability traversal, and grouped aggregation into one report.
"""

from __future__ import annotations

from contextlib import closing

from analysis.group_totals import compute_group_totals
from analysis.letter_histogram import count_names_by_starting_letter
from core.logging_config import get_logger
from core.types import GraphReport, ReachabilityResult, ReportOptions
from graph.similarity_graph import SimilarityGraph
from ingest.graph_builder import GraphBuild, build_name_graph
from ingest.input_reader import read_name_rows

_LOGGER = get_logger(__name__)


class ReportPipelineRunner:
    """Runner that turns one source file into a graph report."""

    def __init__(self, options: ReportOptions) -> None:
        self._options = options

    def run(self) -> GraphReport:
        """Execute the report pipeline and return its values."""
        build = self._build_graph()
        reachability = _traverse(build.graph, self._options.start_index)
        report = assemble_report(build, reachability)
        _log_report_completion(self._options, report)
        return report

    def _build_graph(self) -> GraphBuild:
        rows = read_name_rows(self._options.source_path, self._options.delimiter)
        with closing(rows):
            return build_name_graph(rows, self._options.max_records)


def build_graph_report(options: ReportOptions) -> GraphReport:
    """Build a graph report from a delimited source file.

    Args:
        options: Report request options.

    Returns:
        Counts, group aggregates, and reachability for the source.

    Raises:
        NameGraphIngestError: If the source cannot be read.
        NameGraphIndexError: If the start index is outside a non-empty graph.
    """
    runner = ReportPipelineRunner(options)
    return runner.run()


def assemble_report(build: GraphBuild, reachability: ReachabilityResult | None) -> GraphReport:
    """Aggregate a built graph into report values."""
    records = build.graph.nodes()
    return GraphReport(
        node_count=build.graph.node_count(),
        edge_count=build.graph.edge_count(),
        group_totals=compute_group_totals(records),
        letter_counts=count_names_by_starting_letter(records),
        reachability=reachability,
        ingest=build.ingest,
    )


def _traverse(graph: SimilarityGraph, start_index: int) -> ReachabilityResult | None:
    """Run reachability from ``start_index`` unless the graph is empty."""
    if graph.node_count() == 0:
        return None
    return graph.depth_first_visit(start_index)


def _log_report_completion(options: ReportOptions, report: GraphReport) -> None:
    """Log pipeline completion with contextual metadata."""
    reachable_count = (
        len(report.reachability.reachable_indices()) if report.reachability else 0
    )
    _LOGGER.info(
        "report_completed",
        source_path=str(options.source_path),
        max_records=options.max_records,
        node_count=report.node_count,
        edge_count=report.edge_count,
        group_count=len(report.group_totals),
        reachable_count=reachable_count,
        rows_skipped=report.ingest.rows_skipped,
    )
