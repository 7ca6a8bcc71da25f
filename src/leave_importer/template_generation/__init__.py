"""Template generation exports."""

from .constants import (
    COLUMN_WIDTHS,
    LEAVE_IMPORT_SAMPLE_ROW,
    TEMPLATE_COLUMNS,
    TEMPLATE_SHEET_NAME,
)
from .template_workbook_builder import default_template_filename, generate_template_workbook

__all__ = [
    "COLUMN_WIDTHS",
    "LEAVE_IMPORT_SAMPLE_ROW",
    "TEMPLATE_COLUMNS",
    "TEMPLATE_SHEET_NAME",
    "default_template_filename",
    "generate_template_workbook",
]
