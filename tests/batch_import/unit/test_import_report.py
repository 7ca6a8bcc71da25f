"""Import report rendering tests."""

from __future__ import annotations

import json

from leave_importer.batch_import import (
    ImportSummary,
    LeaveImportPlan,
    build_import_report,
)
from leave_importer.row_parsing import LeaveImportError


def test_report_renders_summary_and_errors() -> None:
    plan = LeaveImportPlan(
        drafts=(),
        errors=(
            LeaveImportError(row_number=2, reason="Employee ID is required"),
            LeaveImportError(row_number=5, reason="Invalid Status", employee_id="EMP003"),
        ),
        summary=ImportSummary(
            total_rows=950,
            importable_rows=900,
            skipped_duplicate_rows=48,
            invalid_rows=2,
        ),
    )

    report = build_import_report(plan)

    assert report == {
        "success": True,
        "summary": {
            "totalRows": 950,
            "importableRows": 900,
            "skippedDuplicateRows": 48,
            "invalidRows": 2,
        },
        "errors": [
            {"rowNumber": 2, "reason": "Employee ID is required"},
            {"rowNumber": 5, "employeeId": "EMP003", "reason": "Invalid Status"},
        ],
    }
    assert json.loads(json.dumps(report)) == report
