"""Excel template generation service."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from leave_importer.row_parsing import LEAVE_IMPORT_HEADERS

from .constants import (
    COLUMN_WIDTHS,
    LEAVE_IMPORT_SAMPLE_ROW,
    TEMPLATE_FILENAME_PREFIX,
    TEMPLATE_SHEET_NAME,
)


def generate_template_workbook(
    output_path: Path | str,
    *,
    sheet_name: str = TEMPLATE_SHEET_NAME,
    include_sample_row: bool = True,
) -> Path:
    """Create the leave import workbook with the header row and an optional sample row."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = sheet_name

    for column_index, header in enumerate(LEAVE_IMPORT_HEADERS, start=1):
        cell = sheet.cell(row=1, column=column_index, value=header.value)
        cell.font = Font(bold=True)
        sheet.column_dimensions[get_column_letter(column_index)].width = COLUMN_WIDTHS[
            column_index - 1
        ]
    sheet.freeze_panes = "A2"

    if include_sample_row:
        for column_index, header in enumerate(LEAVE_IMPORT_HEADERS, start=1):
            value = LEAVE_IMPORT_SAMPLE_ROW.get(header, "")
            sheet.cell(row=2, column=column_index, value=value or None)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def default_template_filename(today: date | None = None) -> str:
    """Return the dated file name offered for a freshly generated template."""
    stamp = (today or date.today()).isoformat()
    return f"{TEMPLATE_FILENAME_PREFIX}-{stamp}.xlsx"
