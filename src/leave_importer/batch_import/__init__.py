"""Batch import domain exports."""

from .batch_parser import (
    LEAVE_IMPORT_MAX_ROWS,
    ImportBatchError,
    LeaveImportBatch,
    parse_leave_import_sheet,
)
from .import_planning import (
    DUPLICATE_LEAVE_SKIPPED,
    EMPLOYEE_NOT_FOUND,
    EmployeeRecord,
    ExistingLeave,
    ImportSummary,
    LeaveImportPlan,
    LeaveRequestDraft,
    plan_leave_import,
)
from .import_report import build_import_report
from .sheet_projection import (
    SheetDataRow,
    build_header_map,
    is_empty_row,
    missing_required_headers,
    project_data_rows,
)

__all__ = [
    "DUPLICATE_LEAVE_SKIPPED",
    "EMPLOYEE_NOT_FOUND",
    "LEAVE_IMPORT_MAX_ROWS",
    "EmployeeRecord",
    "ExistingLeave",
    "ImportBatchError",
    "ImportSummary",
    "LeaveImportBatch",
    "LeaveImportPlan",
    "LeaveRequestDraft",
    "SheetDataRow",
    "build_header_map",
    "build_import_report",
    "is_empty_row",
    "missing_required_headers",
    "parse_leave_import_sheet",
    "plan_leave_import",
    "project_data_rows",
]
