"""Field readers for run-spec defaults and steps.

Each reader returns None, or a default, for an absent field and raises
NameGraphRunSpecError for a present field of the wrong shape.
"""

from __future__ import annotations

from typing import Mapping

from core.constants import DEFAULT_REPORT_FORMAT, SUPPORTED_REPORT_FORMATS
from core.errors import NameGraphRunSpecError


def optional_string(mapping: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional string field from a run-spec step."""
    value = mapping.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    raise NameGraphRunSpecError(f"Run-spec field '{field_name}' must be a string when provided.")


def optional_int(mapping: Mapping[str, object], field_name: str) -> int | None:
    """Read an optional non-negative integer field from a run-spec step."""
    value = mapping.get(field_name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise NameGraphRunSpecError(f"Run-spec field '{field_name}' must be an integer.")
    if value < 0:
        raise NameGraphRunSpecError(
            f"Run-spec field '{field_name}' must be non-negative, got {value}."
        )
    return value


def optional_delimiter(mapping: Mapping[str, object], field_name: str) -> str | None:
    """Read a single-character delimiter without trimming whitespace."""
    value = mapping.get(field_name)
    if value is None:
        return None
    if isinstance(value, str) and len(value) == 1:
        return value
    raise NameGraphRunSpecError(
        f"Run-spec field '{field_name}' must be a single character, got {value!r}."
    )


def parse_report_format(mapping: Mapping[str, object]) -> str:
    """Parse the optional report format of a step."""
    value = optional_string(mapping, "format")
    if value is None:
        return DEFAULT_REPORT_FORMAT
    if value in SUPPORTED_REPORT_FORMATS:
        return value
    supported_rows = ", ".join(SUPPORTED_REPORT_FORMATS)
    raise NameGraphRunSpecError(f"Invalid format '{value}'. Use one of: {supported_rows}.")
