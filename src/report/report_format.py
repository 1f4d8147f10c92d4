"""Text rendering for graph reports.

Group sections follow first-seen group order; letters within a group
are listed in ascending code point order.
"""

from __future__ import annotations

import json

from analysis.letter_histogram import sorted_letter_counts
from core.types import GraphReport


def format_report_lines(report: GraphReport) -> tuple[str, ...]:
    """Render the full human-readable report."""
    return (
        *format_count_lines(report),
        *format_group_total_lines(report),
        *format_letter_count_lines(report),
    )


def format_count_lines(report: GraphReport) -> tuple[str, ...]:
    return (
        f"Number of nodes in the graph: {report.node_count}",
        f"Number of edges in the graph: {report.edge_count}",
    )


def format_group_total_lines(report: GraphReport) -> tuple[str, ...]:
    lines = ["Total count of names that share both gender and ethnicity:"]
    for key, group_total in report.group_totals.items():
        lines.append(f"Gender: {key.gender}, Ethnicity: {key.ethnicity}: {group_total.total}")
        lines.append(f"Names: {json.dumps(list(group_total.names), ensure_ascii=False)}")
    return tuple(lines)


def format_letter_count_lines(report: GraphReport) -> tuple[str, ...]:
    lines = ["Counts of names by starting letter:"]
    for key, letter_counts in report.letter_counts.items():
        lines.append(f"Gender: {key.gender}, Ethnicity: {key.ethnicity}")
        for letter, count in sorted_letter_counts(letter_counts):
            lines.append(f"{letter}: {count}")
    return tuple(lines)


def format_reachability_lines(report: GraphReport) -> tuple[str, ...]:
    """Render traversal start and reachable node indices."""
    if report.reachability is None:
        return ("start_index=-", "reachable_count=0", "reachable=-")
    reachable = report.reachability.reachable_indices()
    return (
        f"start_index={report.reachability.start_index}",
        f"reachable_count={len(reachable)}",
        f"reachable={','.join(str(index) for index in reachable) or '-'}",
    )


def format_summary_lines(report: GraphReport) -> tuple[str, ...]:
    """Render counts and ingest accounting as ``key=value`` lines."""
    reachable_count = (
        len(report.reachability.reachable_indices()) if report.reachability else 0
    )
    return (
        f"node_count={report.node_count}",
        f"edge_count={report.edge_count}",
        f"group_count={len(report.group_totals)}",
        f"rows_read={report.ingest.rows_read}",
        f"rows_accepted={report.ingest.rows_accepted}",
        f"rows_skipped={report.ingest.rows_skipped}",
        f"limit_reached={str(report.ingest.limit_reached).lower()}",
        f"reachable_count={reachable_count}",
    )
