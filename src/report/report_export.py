"""JSON export for graph reports.

This module isolates report serialization and file IO.
Letter counts are written in ascending order for stable diffs.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from analysis.letter_histogram import sorted_letter_counts
from core.errors import NameGraphReportError
from core.logging_config import get_logger
from core.types import GraphReport

_LOGGER = get_logger(__name__)


def report_to_payload(report: GraphReport) -> dict[str, Any]:
    """Convert a report into a JSON-serializable mapping.

    Args:
        report: Report values.

    Returns:
        Mapping with counts, ingest accounting, reachability, and groups.
    """
    groups = []
    for key, group_total in report.group_totals.items():
        letter_counts = report.letter_counts.get(key, {})
        groups.append(
            {
                "gender": key.gender,
                "ethnicity": key.ethnicity,
                "total": group_total.total,
                "names": list(group_total.names),
                "letters": dict(sorted_letter_counts(letter_counts)),
            }
        )
    reachability = report.reachability
    return {
        "node_count": report.node_count,
        "edge_count": report.edge_count,
        "ingest": {
            "rows_read": report.ingest.rows_read,
            "rows_accepted": report.ingest.rows_accepted,
            "rows_skipped": report.ingest.rows_skipped,
            "limit_reached": report.ingest.limit_reached,
        },
        "reachability": None
        if reachability is None
        else {
            "start_index": reachability.start_index,
            "reachable": list(reachability.reachable_indices()),
            "order": list(reachability.order),
        },
        "groups": groups,
    }


def render_report_json(report: GraphReport) -> str:
    """Render a report as indented JSON text."""
    return json.dumps(report_to_payload(report), indent=2, ensure_ascii=False)


def write_report_json(report: GraphReport, output_path: Path | str) -> Path:
    """Write a report JSON file, creating parent directories.

    Args:
        report: Report values.
        output_path: Destination file path.

    Returns:
        Resolved path of the written file.

    Raises:
        NameGraphReportError: If the file cannot be written.
    """
    resolved_path = Path(output_path).expanduser().resolve()
    try:
        resolved_path.parent.mkdir(parents=True, exist_ok=True)
        resolved_path.write_text(render_report_json(report) + "\n", encoding="utf-8")
    except OSError as error:
        raise NameGraphReportError(
            f"Failed to write report to {resolved_path}: {error}. "
            "Check the output directory and retry."
        ) from error
    _LOGGER.info("report_exported", output_path=str(resolved_path), node_count=report.node_count)
    return resolved_path
