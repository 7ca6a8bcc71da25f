"""Projection of raw sheet rows onto canonical leave import headers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from leave_importer.row_parsing import (
    LEAVE_IMPORT_REQUIRED_HEADERS,
    LeaveImportHeader,
    LeaveImportRowCells,
    is_empty_cell,
    resolve_header,
)

FIRST_DATA_ROW_NUMBER = 2


@dataclass(frozen=True)
class SheetDataRow:
    """One non-empty data row keyed by canonical header."""

    row_number: int
    cells: LeaveImportRowCells


def build_header_map(header_row: Sequence[object]) -> dict[LeaveImportHeader, int]:
    """Map each recognised header to its column index; the first occurrence wins."""
    header_map: dict[LeaveImportHeader, int] = {}
    for index, header_cell in enumerate(header_row):
        header = resolve_header(header_cell)
        if header is not None and header not in header_map:
            header_map[header] = index
    return header_map


def missing_required_headers(
    header_map: Mapping[LeaveImportHeader, int],
) -> tuple[LeaveImportHeader, ...]:
    """Return required headers absent from the header map, in template order."""
    return tuple(header for header in LEAVE_IMPORT_REQUIRED_HEADERS if header not in header_map)


def is_empty_row(values: Sequence[object]) -> bool:
    """Return True when every cell of the row is empty."""
    return all(is_empty_cell(value) for value in values)


def project_data_rows(
    rows: Sequence[Sequence[object]],
    header_map: Mapping[LeaveImportHeader, int],
) -> list[SheetDataRow]:
    """Project data rows (everything after the header row) and drop blank lines."""
    projected: list[SheetDataRow] = []
    for offset, values in enumerate(rows):
        if is_empty_row(values):
            continue
        cells = {
            header: values[index] if index < len(values) else None
            for header, index in header_map.items()
        }
        projected.append(SheetDataRow(row_number=offset + FIRST_DATA_ROW_NUMBER, cells=cells))
    return projected
