"""Name graph exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class NameGraphError(Exception):
    """Base exception for all name graph failures."""


class NameGraphConfigError(NameGraphError):
    """Raised for invalid runtime configuration."""


class NameGraphIngestError(NameGraphError):
    """Raised when the record source cannot be opened or read."""


class NameGraphParseError(NameGraphError):
    """Raised inside the row parser for rows that cannot become records."""


class RowShapeError(NameGraphParseError):
    """Raised when a row does not carry exactly six fields."""


class FieldTypeError(NameGraphParseError):
    """Raised when a numeric field does not parse as an unsigned integer."""


class NameGraphIndexError(NameGraphError, IndexError):
    """Raised when an edge or traversal references a missing node."""


class NameGraphRunSpecError(NameGraphError):
    """Raised for invalid or unsupported run-spec configuration."""


class NameGraphReportError(NameGraphError):
    """Raised when a report cannot be written."""
