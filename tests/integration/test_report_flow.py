"""Integration tests for the end-to-end report workflow."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

from core.config import NameGraphConfig
from namegraph import NameGraphClient, build_name_graph, parse_row
from tests.fixture_paths import names_csv


def test_client_builds_and_exports_sample_report(tmp_path: Path) -> None:
    """SDK flow should read, link, traverse, aggregate, and export."""
    config = replace(NameGraphConfig.from_env(), source_path=names_csv("sample_names.csv"))
    client = NameGraphClient(config)

    report = client.build_report()
    output_path = client.export_report(str(tmp_path / "report.json"))
    payload = json.loads(output_path.read_text(encoding="utf-8"))

    assert (
        report.node_count == payload["node_count"] == 7
        and report.edge_count == payload["edge_count"] == 7
        and [group["total"] for group in payload["groups"]] == [414, 272, 213]
    )


def test_client_with_source_switches_input() -> None:
    """Cloned clients should read from their own source."""
    client = NameGraphClient(NameGraphConfig.from_env()).with_source(
        str(names_csv("three_records.csv"))
    )

    report = client.build_report()

    assert report.node_count == 3 and client.config.source_path.name == "three_records.csv"


def test_repeated_reports_are_identical() -> None:
    """Building twice over unchanged input yields identical values."""
    client = NameGraphClient(NameGraphConfig.from_env()).with_source(
        str(names_csv("sample_names.csv"))
    )

    assert client.build_report() == client.build_report()


def test_in_memory_rows_match_edge_formula() -> None:
    """Library users can build graphs from rows without a file."""
    rows = [
        (
            offset + 2,
            [str(2015 + offset % 3), gender, "WHITE NON HISPANIC", f"NAME{offset}", "10", "1"],
        )
        for offset, gender in enumerate(["FEMALE", "MALE"] * 50)
    ]

    build = build_name_graph(rows, max_records=None)

    assert build.graph.node_count() == 100 and build.graph.edge_count() == 2 * (50 * 49 // 2)


def test_parse_row_exposed_from_sdk() -> None:
    """The public module re-exports the row parser."""
    assert parse_row(["2020", "M", "A", "Al", "10", "1"]).name == "Al"
