"""Run-spec CLI command wiring.

This module registers the run-spec subcommand and delegates execution to the
shared run-spec engine used by CLI and SDK entry points.
"""

from __future__ import annotations

import argparse
from typing import Any

from report.report_sdk import NameGraphClient


def add_run_spec_command(subparsers: Any) -> None:
    """Register run-spec subcommand."""
    parser = subparsers.add_parser(
        "run-spec",
        help="Run a declarative YAML report spec",
    )
    parser.add_argument("spec_file", help="Path to YAML run-spec file")


def run_run_spec_command(client: NameGraphClient, args: argparse.Namespace) -> int:
    """Handle run-spec command invocation."""
    output_lines = client.run_spec(args.spec_file)
    for line in output_lines:
        print(line)
    return 0
