"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_CONFIG_ENV_VARS = (
    "NAMEGRAPH_SOURCE_PATH",
    "NAMEGRAPH_MAX_RECORDS",
    "NAMEGRAPH_START_INDEX",
    "NAMEGRAPH_DELIMITER",
    "NAMEGRAPH_LOG_LEVEL",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep caller environment from leaking into config parsing."""
    for variable_name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(variable_name, raising=False)
