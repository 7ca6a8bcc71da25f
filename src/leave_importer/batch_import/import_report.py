"""JSON-ready rendering of an import plan."""

from __future__ import annotations

from typing import Any

from leave_importer.row_parsing import LeaveImportError

from .import_planning import LeaveImportPlan


def build_import_report(plan: LeaveImportPlan) -> dict[str, Any]:
    """Render the plan summary and row errors as a response payload."""
    summary = plan.summary
    return {
        "success": True,
        "summary": {
            "totalRows": summary.total_rows,
            "importableRows": summary.importable_rows,
            "skippedDuplicateRows": summary.skipped_duplicate_rows,
            "invalidRows": summary.invalid_rows,
        },
        "errors": [_render_error(error) for error in plan.errors],
    }


def _render_error(error: LeaveImportError) -> dict[str, Any]:
    rendered: dict[str, Any] = {"rowNumber": error.row_number}
    if error.employee_id:
        rendered["employeeId"] = error.employee_id
    rendered["reason"] = error.reason
    return rendered
