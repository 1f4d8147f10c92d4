"""Report and summary CLI command wiring.

This module registers the report-building subcommands and maps their
arguments onto report options resolved against runtime configuration.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any

from core.config import parse_delimiter, parse_max_records
from core.constants import DEFAULT_REPORT_FORMAT, SUPPORTED_REPORT_FORMATS
from core.errors import NameGraphConfigError
from core.types import ReportOptions
from report.report_export import render_report_json
from report.report_format import format_report_lines, format_summary_lines
from report.report_sdk import NameGraphClient


def add_report_command(subparsers: Any) -> None:
    """Register report subcommand."""
    parser = subparsers.add_parser("report", help="Build the full name graph report")
    _add_source_arguments(parser)
    parser.add_argument(
        "--format",
        default=DEFAULT_REPORT_FORMAT,
        choices=SUPPORTED_REPORT_FORMATS,
        help="Output format",
    )
    parser.add_argument("--output", help="Write the JSON report to this file")


def add_summary_command(subparsers: Any) -> None:
    """Register summary subcommand."""
    parser = subparsers.add_parser("summary", help="Print graph and ingest counts")
    _add_source_arguments(parser)


def run_report_command(client: NameGraphClient, args: argparse.Namespace) -> int:
    """Handle report command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = _build_report_options(client, args)
    if args.output:
        print(client.export_report(args.output, options))
        return 0
    report = client.build_report(options)
    if args.format == "json":
        print(render_report_json(report))
        return 0
    for line in format_report_lines(report):
        print(line)
    return 0


def run_summary_command(client: NameGraphClient, args: argparse.Namespace) -> int:
    """Handle summary command."""
    report = client.build_report(_build_report_options(client, args))
    for line in format_summary_lines(report):
        print(line)
    return 0


def _build_report_options(client: NameGraphClient, args: argparse.Namespace) -> ReportOptions:
    """Overlay CLI arguments on configured defaults.

    Raises:
        NameGraphConfigError: If limit or delimiter values are invalid.
    """
    options = client.default_options()
    if args.source:
        options = replace(options, source_path=Path(args.source).expanduser())
    if args.limit is not None:
        options = replace(options, max_records=parse_max_records(str(args.limit)))
    if args.start_index is not None:
        if args.start_index < 0:
            raise NameGraphConfigError(
                f"Invalid --start-index value {args.start_index}: expected a non-negative integer."
            )
        options = replace(options, start_index=args.start_index)
    if args.delimiter is not None:
        options = replace(options, delimiter=parse_delimiter(args.delimiter))
    return options


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "source",
        nargs="?",
        help="Delimited name file; defaults to NAMEGRAPH_SOURCE_PATH",
    )
    parser.add_argument("--limit", type=int, help="Maximum accepted records, 0 for no limit")
    parser.add_argument("--start-index", type=int, help="Traversal start node index")
    parser.add_argument("--delimiter", help="Single-character field delimiter")
