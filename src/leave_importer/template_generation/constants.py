"""Shared template generation constants."""

from __future__ import annotations

from types import MappingProxyType

from leave_importer.row_parsing import LEAVE_IMPORT_HEADERS, LeaveImportHeader

TEMPLATE_SHEET_NAME = "Leave Import"
TEMPLATE_FILENAME_PREFIX = "leave-import-template"

COLUMN_WIDTHS: tuple[int, ...] = (16, 14, 14, 14, 28, 12, 10, 10, 30, 22)

LEAVE_IMPORT_SAMPLE_ROW = MappingProxyType(
    {
        LeaveImportHeader.EMPLOYEE_ID: "EMP001",
        LeaveImportHeader.LEAVE_TYPE: "CASUAL",
        LeaveImportHeader.START_DATE: "2026-02-11",
        LeaveImportHeader.END_DATE: "2026-02-11",
        LeaveImportHeader.REASON: "Family event",
        LeaveImportHeader.STATUS: "PENDING",
        LeaveImportHeader.HALF_DAY: "No",
        LeaveImportHeader.PAID_LEAVE: "Yes",
        LeaveImportHeader.REVIEW_NOTES: "",
        LeaveImportHeader.REVIEWED_AT: "",
    }
)

TEMPLATE_COLUMNS: tuple[str, ...] = tuple(header.value for header in LEAVE_IMPORT_HEADERS)
