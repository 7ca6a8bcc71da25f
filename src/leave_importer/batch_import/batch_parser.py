"""Batch parsing service for one uploaded leave import sheet."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from leave_importer.row_parsing import (
    LeaveImportError,
    ParsedLeaveImportRow,
    RowParseResult,
    parse_leave_import_row,
)

from .sheet_projection import (
    SheetDataRow,
    build_header_map,
    is_empty_row,
    missing_required_headers,
    project_data_rows,
)

LEAVE_IMPORT_MAX_ROWS = 1000

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())


class ImportBatchError(Exception):
    """Raised when a sheet cannot be imported as a whole."""


@dataclass(frozen=True)
class LeaveImportBatch:
    """Per-row outcomes of parsing one sheet."""

    total_rows: int
    parsed_rows: tuple[ParsedLeaveImportRow, ...]
    errors: tuple[LeaveImportError, ...]


def parse_leave_import_sheet(
    rows: Sequence[Sequence[object]],
    *,
    max_rows: int = LEAVE_IMPORT_MAX_ROWS,
    parallelism: int = 1,
) -> LeaveImportBatch:
    """Parse a sheet given as a grid whose first row holds the headers.

    Args:
      rows: Sheet values, header row first, as produced by a spreadsheet reader.
      max_rows: Maximum number of non-empty data rows accepted in one batch.
      parallelism: Number of worker threads used to parse rows.

    Returns:
      The parsed rows and row errors, both in sheet order.

    Raises:
      ImportBatchError: If the sheet has no usable header row, lacks required
        headers, has no data rows or exceeds ``max_rows``.
    """
    if not rows:
        raise ImportBatchError("Sheet is empty")

    header_row = rows[0]
    if not header_row or is_empty_row(header_row):
        raise ImportBatchError("Header row is missing")

    header_map = build_header_map(header_row)
    missing_headers = missing_required_headers(header_map)
    if missing_headers:
        missing = ", ".join(header.value for header in missing_headers)
        raise ImportBatchError(f"Missing required header(s): {missing}")

    data_rows = project_data_rows(rows[1:], header_map)
    if not data_rows:
        raise ImportBatchError("No data rows found")
    if len(data_rows) > max_rows:
        raise ImportBatchError(f"Row limit exceeded. Maximum allowed rows: {max_rows}")

    results = _parse_rows(data_rows, parallelism)
    parsed_rows = tuple(result for result in results if isinstance(result, ParsedLeaveImportRow))
    errors = tuple(result for result in results if isinstance(result, LeaveImportError))
    for error in errors:
        _LOGGER.debug("Rejected leave import row %d: %s", error.row_number, error.reason)
    _LOGGER.info(
        "Parsed leave import sheet: %d rows, %d valid, %d rejected",
        len(data_rows),
        len(parsed_rows),
        len(errors),
    )
    return LeaveImportBatch(total_rows=len(data_rows), parsed_rows=parsed_rows, errors=errors)


def _parse_rows(data_rows: Sequence[SheetDataRow], parallelism: int) -> list[RowParseResult]:
    if parallelism <= 1 or len(data_rows) <= 1:
        return [_parse_row(data_row) for data_row in data_rows]
    with ThreadPoolExecutor(max_workers=parallelism) as executor:
        results = list(executor.map(_parse_row, data_rows))
    return sorted(results, key=lambda result: result.row_number)


def _parse_row(data_row: SheetDataRow) -> RowParseResult:
    return parse_leave_import_row(data_row.cells, data_row.row_number)
