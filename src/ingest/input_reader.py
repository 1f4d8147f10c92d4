"""Source row readers for ingestion.

This module loads delimited name rows from a local file.
It yields raw string fields with their line numbers and leaves
validation to the row parser.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Generator, TextIO

from core.constants import DEFAULT_DELIMITER, SOURCE_FILE_ENCODING
from core.errors import NameGraphIngestError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

SourceRow = tuple[int, list[str]]


def read_name_rows(
    source_path: Path | str,
    delimiter: str = DEFAULT_DELIMITER,
) -> Generator[SourceRow, None, None]:
    """Open a delimited source file and iterate its data rows.

    The path is validated before the iterator is returned, so a missing
    source fails before any row reaches the graph. Bytes that are not
    UTF-8 are kept as surrogate escapes for the row parser to reject.

    Args:
        source_path: Local delimited file with a header row.
        delimiter: Single-character field delimiter.

    Returns:
        Generator of ``(line_number, fields)`` pairs, header excluded.
        Close it to release the file when stopping early.

    Raises:
        NameGraphIngestError: If the source cannot be opened.
    """
    resolved_path = Path(source_path).expanduser()
    if not resolved_path.exists():
        raise NameGraphIngestError(
            f"Failed to read source at {resolved_path}: path does not exist. "
            "Provide an existing delimited file."
        )
    if not resolved_path.is_file():
        raise NameGraphIngestError(
            f"Failed to read source at {resolved_path}: path is not a file. "
            "Provide a delimited file, not a directory."
        )
    try:
        source_file = resolved_path.open(
            "r",
            encoding=SOURCE_FILE_ENCODING,
            errors="surrogateescape",
            newline="",
        )
    except OSError as error:
        raise NameGraphIngestError(
            f"Failed to open source at {resolved_path}: {error}. "
            "Check file permissions and retry."
        ) from error
    return _iter_data_rows(source_file, resolved_path, delimiter)


def _iter_data_rows(
    source_file: TextIO,
    source_path: Path,
    delimiter: str,
) -> Generator[SourceRow, None, None]:
    """Yield non-blank data rows and close the file when done.

    A row the CSV tokenizer rejects is logged and skipped; reading
    resumes on the following line.

    Args:
        source_file: Open text handle positioned at the header.
        source_path: Path for log context.
        delimiter: Field delimiter.
    """
    with source_file:
        reader = csv.reader(source_file, delimiter=delimiter)
        header_seen = False
        while True:
            try:
                fields = next(reader)
            except StopIteration:
                return
            except csv.Error as error:
                _LOGGER.debug(
                    "row_skipped",
                    source_path=str(source_path),
                    line_number=reader.line_num,
                    kind="unreadable",
                    reason=str(error),
                )
                continue
            if not fields:
                continue
            if not header_seen:
                header_seen = True
                continue
            yield reader.line_num, fields
