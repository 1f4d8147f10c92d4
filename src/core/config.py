"""Runtime configuration model for the name graph.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_DELIMITER,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_RECORDS,
    DEFAULT_SOURCE_PATH,
    DEFAULT_START_INDEX,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import NameGraphConfigError


@dataclass(frozen=True)
class NameGraphConfig:
    """Validated runtime configuration.

    Attributes:
        source_path: Default delimited file holding name rows.
        max_records: Cap on accepted records, or None for no cap.
        start_index: Node index the reachability traversal starts from.
        delimiter: Single-character field delimiter of the source file.
        log_level: Minimum structured log level.
    """

    source_path: Path
    max_records: int | None
    start_index: int
    delimiter: str
    log_level: str

    @classmethod
    def from_env(cls) -> "NameGraphConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            NameGraphConfigError: If environment values are invalid.
        """
        source_value = os.getenv("NAMEGRAPH_SOURCE_PATH", str(DEFAULT_SOURCE_PATH))
        max_records_value = os.getenv("NAMEGRAPH_MAX_RECORDS", str(DEFAULT_MAX_RECORDS))
        start_index_value = os.getenv("NAMEGRAPH_START_INDEX", str(DEFAULT_START_INDEX))
        delimiter = os.getenv("NAMEGRAPH_DELIMITER", DEFAULT_DELIMITER)
        log_level = os.getenv("NAMEGRAPH_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            source_path=Path(source_value).expanduser(),
            max_records=parse_max_records(max_records_value),
            start_index=_parse_non_negative_int("NAMEGRAPH_START_INDEX", start_index_value),
            delimiter=parse_delimiter(delimiter),
            log_level=_parse_log_level(log_level),
        )


def parse_max_records(raw_value: str) -> int | None:
    """Parse a record cap where zero disables the cap.

    Args:
        raw_value: Raw string from environment or CLI.

    Returns:
        Positive cap, or None when unlimited.

    Raises:
        NameGraphConfigError: If value is not a non-negative integer.
    """
    max_records = _parse_non_negative_int("NAMEGRAPH_MAX_RECORDS", raw_value)
    return max_records if max_records > 0 else None


def parse_delimiter(raw_value: str) -> str:
    """Validate a single-character delimiter."""
    if len(raw_value) != 1:
        raise NameGraphConfigError(
            f"Invalid NAMEGRAPH_DELIMITER value: expected one character, got '{raw_value}'. "
            "Set NAMEGRAPH_DELIMITER to a single character such as ','."
        )
    return raw_value


def _parse_non_negative_int(variable_name: str, raw_value: str) -> int:
    """Parse a non-negative integer environment value.

    Args:
        variable_name: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed integer.

    Raises:
        NameGraphConfigError: If value cannot be parsed or is negative.
    """
    try:
        value = int(raw_value)
    except ValueError as error:
        raise NameGraphConfigError(
            f"Invalid {variable_name} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {variable_name} to a numeric value."
        ) from error
    if value < 0:
        raise NameGraphConfigError(
            f"Invalid {variable_name} value: expected a non-negative integer, got {value}."
        )
    return value


def _parse_log_level(raw_value: str) -> str:
    normalized = raw_value.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        raise NameGraphConfigError(
            f"Invalid NAMEGRAPH_LOG_LEVEL value '{raw_value}'. "
            f"Use one of: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return normalized
