"""Core constants used across name graph modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_SOURCE_PATH = Path("Popular_Baby_Names.csv")
DEFAULT_MAX_RECORDS = 1000
DEFAULT_START_INDEX = 0
DEFAULT_DELIMITER = ","
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_REPORT_FORMAT = "text"
SUPPORTED_REPORT_FORMATS = ("text", "json")
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
RECORD_FIELD_COUNT = 6
MAX_UNSIGNED_VALUE = 2**32 - 1
SOURCE_FILE_ENCODING = "utf-8-sig"
