"""Row parser for baby-name records.

This module turns one raw tabular row into a validated record.
Rejected rows come back as typed failures instead of raised errors.
"""

from __future__ import annotations

import re
from typing import Sequence

from core.constants import MAX_UNSIGNED_VALUE, RECORD_FIELD_COUNT
from core.errors import FieldTypeError, RowShapeError
from core.types import NameRecord, ParseFailure

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
_UNDECODABLE_PATTERN = re.compile(r"[\udc80-\udcff]")
_FIELD_NAMES = ("year", "gender", "ethnicity", "name", "count", "rank")


def parse_row(fields: Sequence[str]) -> NameRecord | ParseFailure:
    """Parse a row, returning a failure value for unusable rows.

    Args:
        fields: Raw string fields in source column order.

    Returns:
        Parsed record, or a parse failure describing the rejection.
    """
    try:
        return build_record(fields)
    except RowShapeError as error:
        return ParseFailure(kind="row_shape", reason=str(error), field_count=len(fields))
    except FieldTypeError as error:
        return ParseFailure(kind="field_type", reason=str(error), field_count=len(fields))


def build_record(fields: Sequence[str]) -> NameRecord:
    """Build a record from exactly six string fields.

    Args:
        fields: ``year, gender, ethnicity, name, count, rank`` strings.

    Returns:
        Validated record. Text fields pass through unchanged.

    Raises:
        RowShapeError: If the row does not have six fields.
        FieldTypeError: If a numeric field is not an unsigned integer or a
            field held bytes that were not valid UTF-8.
    """
    if len(fields) != RECORD_FIELD_COUNT:
        raise RowShapeError(
            f"Expected {RECORD_FIELD_COUNT} fields, got {len(fields)}."
        )
    for field_name, raw_value in zip(_FIELD_NAMES, fields):
        if _UNDECODABLE_PATTERN.search(raw_value):
            raise FieldTypeError(f"Field '{field_name}' is not valid UTF-8 text.")
    year, gender, ethnicity, name, count, rank = fields
    return NameRecord(
        year=_parse_unsigned("year", year),
        gender=gender,
        ethnicity=ethnicity,
        name=name,
        count=_parse_unsigned("count", count),
        rank=_parse_unsigned("rank", rank),
    )


def _parse_unsigned(field_name: str, raw_value: str) -> int:
    """Parse an unsigned 32-bit integer field.

    Args:
        field_name: Column name for error context.
        raw_value: Untrimmed field text.

    Returns:
        Parsed integer.

    Raises:
        FieldTypeError: If the text is not an in-range unsigned integer.
    """
    if not _UNSIGNED_PATTERN.fullmatch(raw_value):
        raise FieldTypeError(
            f"Field '{field_name}' must be an unsigned integer, got {raw_value!r}."
        )
    value = int(raw_value)
    if value > MAX_UNSIGNED_VALUE:
        raise FieldTypeError(
            f"Field '{field_name}' exceeds {MAX_UNSIGNED_VALUE}, got {raw_value!r}."
        )
    return value
