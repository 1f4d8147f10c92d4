"""Name graph CLI entry points.
This module exposes report, summary, and run-spec commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from cli.report_command import (
    add_report_command,
    add_summary_command,
    run_report_command,
    run_summary_command,
)
from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from core.config import NameGraphConfig
from core.constants import SUPPORTED_LOG_LEVELS
from core.logging_config import configure_logging
from report.report_sdk import NameGraphClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="namegraph",
        description="Baby-name similarity graph reports",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=SUPPORTED_LOG_LEVELS,
        help="Override NAMEGRAPH_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_report_command(subparsers)
    add_summary_command(subparsers)
    add_run_spec_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the name graph CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = NameGraphConfig.from_env()
    configure_logging(args.log_level or config.log_level)
    client = NameGraphClient(config)
    if args.command == "report":
        return run_report_command(client, args)
    if args.command == "summary":
        return run_summary_command(client, args)
    if args.command == "run-spec":
        return run_run_spec_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2
