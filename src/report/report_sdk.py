"""Python SDK for name graph reports.

This module exposes a high-level client for building, exporting,
and scripting reports over delimited baby-name sources.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import NameGraphConfig
from core.run_spec_execution import execute_run_spec_file
from core.types import GraphReport, ReportOptions
from report.pipeline import build_graph_report
from report.report_export import write_report_json


class NameGraphClient:
    """Primary SDK entry point for report workflows."""

    def __init__(self, config: NameGraphConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or NameGraphConfig.from_env()

    @property
    def config(self) -> NameGraphConfig:
        return self._config

    def default_options(self) -> ReportOptions:
        """Build report options from the client configuration."""
        return ReportOptions(
            source_path=self._config.source_path,
            max_records=self._config.max_records,
            start_index=self._config.start_index,
            delimiter=self._config.delimiter,
        )

    def build_report(self, options: ReportOptions | None = None) -> GraphReport:
        """Build a report for a source file.

        Args:
            options: Report options; defaults come from configuration.

        Returns:
            Report values.

        Raises:
            NameGraphIngestError: If the source cannot be read.
        """
        return build_graph_report(options or self.default_options())

    def export_report(self, output_path: str, options: ReportOptions | None = None) -> Path:
        """Build a report and write it as JSON.

        Args:
            output_path: Destination JSON path.
            options: Report options; defaults come from configuration.

        Returns:
            Written file path.
        """
        report = self.build_report(options)
        return write_report_json(report, output_path)

    def with_source(self, source_path: str) -> "NameGraphClient":
        """Clone the client with a different default source file.

        Args:
            source_path: New source path.

        Returns:
            New SDK client instance.
        """
        updated_config = replace(self._config, source_path=Path(source_path).expanduser())
        return NameGraphClient(updated_config)

    def run_spec(self, spec_file: str) -> tuple[str, ...]:
        """Execute a YAML run-spec through the shared execution engine.

        Args:
            spec_file: Path to YAML run-spec file.

        Returns:
            Ordered command output lines.
        """
        return execute_run_spec_file(self, spec_file)
