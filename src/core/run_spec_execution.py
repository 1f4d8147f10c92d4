"""Shared run-spec execution engine for CLI and SDK workflows.

This module renders resolved run-spec steps through a client so
different entry points execute one declarative pipeline path.
"""

from __future__ import annotations

from typing import Callable, Protocol

from core.errors import NameGraphRunSpecError
from core.run_spec import RunSpec, RunSpecStep, load_run_spec
from core.types import GraphReport, ReportOptions
from report.report_export import render_report_json, write_report_json
from report.report_format import (
    format_group_total_lines,
    format_letter_count_lines,
    format_reachability_lines,
    format_report_lines,
    format_summary_lines,
)


class RunSpecClient(Protocol):
    """Client API contract required by run-spec execution."""

    def default_options(self) -> ReportOptions: ...

    def build_report(self, options: ReportOptions | None = None) -> GraphReport: ...


_LINE_FORMATTERS: dict[str, Callable[[GraphReport], tuple[str, ...]]] = {
    "report": format_report_lines,
    "summary": format_summary_lines,
    "totals": format_group_total_lines,
    "letters": format_letter_count_lines,
    "reachable": format_reachability_lines,
}


def execute_run_spec_file(client: RunSpecClient, spec_file: str) -> tuple[str, ...]:
    """Load and execute a run-spec file, returning printable output lines."""
    return execute_run_spec(client, load_run_spec(spec_file))


def execute_run_spec(client: RunSpecClient, spec: RunSpec) -> tuple[str, ...]:
    """Execute a parsed run-spec object and return output lines.

    Steps that resolve to the same report options share one built report.
    """
    base_options = client.default_options()
    reports: dict[ReportOptions, GraphReport] = {}
    output_lines: list[str] = []
    for step in spec.steps:
        options = step.overrides.apply(base_options)
        report = reports.get(options)
        if report is None:
            report = client.build_report(options)
            reports[options] = report
        output_lines.extend(_render_step(step, report))
    return tuple(output_lines)


def _render_step(step: RunSpecStep, report: GraphReport) -> tuple[str, ...]:
    if step.command == "export":
        if step.output is None:
            raise NameGraphRunSpecError("Export steps need an 'output' path.")
        return (str(write_report_json(report, step.output)),)
    if step.command == "report" and step.report_format == "json":
        return tuple(render_report_json(report).splitlines())
    formatter = _LINE_FORMATTERS.get(step.command)
    if formatter is None:
        raise NameGraphRunSpecError(f"Unsupported run-spec command '{step.command}'.")
    return formatter(report)
