"""Row validation service for the leave import sheet.

Checks run in a fixed order and stop at the first failure, so each rejected
row carries exactly one message that the uploader can act on.
"""

from __future__ import annotations

from datetime import datetime

from .cell_values import get_cell_string, is_empty_cell
from .import_headers import LeaveImportHeader
from .leave_records import (
    LeaveImportError,
    LeaveImportRowCells,
    ParsedLeaveImportRow,
    RowParseResult,
)
from .leave_spans import calculate_applied_days
from .spreadsheet_dates import normalize_date_only, parse_spreadsheet_date
from .value_aliases import parse_leave_status, parse_leave_type, parse_optional_boolean

EMPLOYEE_ID_REQUIRED = "Employee ID is required"
INVALID_LEAVE_TYPE = "Invalid Leave Type"
INVALID_STATUS = "Invalid Status"
INVALID_START_DATE = "Invalid Start Date"
INVALID_END_DATE = "Invalid End Date"
START_AFTER_END = "Start Date must be on or before End Date"
REASON_REQUIRED = "Reason is required"
INVALID_HALF_DAY = "Invalid Half Day value (use yes/no, true/false, 1/0)"
HALF_DAY_SPAN_MISMATCH = "Half Day leave must have the same Start Date and End Date"
INVALID_PAID_LEAVE = "Invalid Paid Leave value (use yes/no, true/false, 1/0)"
INVALID_REVIEWED_AT = "Invalid Reviewed At value"


class _InvalidCell(Exception):
    """Signals an unparseable optional cell that was not left empty."""


# pylint: disable=too-many-return-statements
def parse_leave_import_row(row: LeaveImportRowCells, row_number: int) -> RowParseResult:
    """Validate one projected sheet row into a leave record or a row error."""
    employee_id = get_cell_string(row.get(LeaveImportHeader.EMPLOYEE_ID))
    if not employee_id:
        return LeaveImportError(row_number=row_number, reason=EMPLOYEE_ID_REQUIRED)

    def reject(reason: str) -> LeaveImportError:
        return LeaveImportError(row_number=row_number, reason=reason, employee_id=employee_id)

    leave_type = parse_leave_type(row.get(LeaveImportHeader.LEAVE_TYPE))
    if leave_type is None:
        return reject(INVALID_LEAVE_TYPE)

    status = parse_leave_status(row.get(LeaveImportHeader.STATUS))
    if status is None:
        return reject(INVALID_STATUS)

    start_value = parse_spreadsheet_date(row.get(LeaveImportHeader.START_DATE))
    if start_value is None:
        return reject(INVALID_START_DATE)

    end_value = parse_spreadsheet_date(row.get(LeaveImportHeader.END_DATE))
    if end_value is None:
        return reject(INVALID_END_DATE)

    start_date = normalize_date_only(start_value)
    end_date = normalize_date_only(end_value)
    if start_date > end_date:
        return reject(START_AFTER_END)

    reason = get_cell_string(row.get(LeaveImportHeader.REASON))
    if not reason:
        return reject(REASON_REQUIRED)

    is_half_day = parse_optional_boolean(row.get(LeaveImportHeader.HALF_DAY), False)
    if is_half_day is None:
        return reject(INVALID_HALF_DAY)
    if is_half_day and start_date != end_date:
        return reject(HALF_DAY_SPAN_MISMATCH)

    is_paid_leave = parse_optional_boolean(row.get(LeaveImportHeader.PAID_LEAVE), True)
    if is_paid_leave is None:
        return reject(INVALID_PAID_LEAVE)

    try:
        reviewed_at = _parse_optional_date(row.get(LeaveImportHeader.REVIEWED_AT))
    except _InvalidCell:
        return reject(INVALID_REVIEWED_AT)

    review_notes = get_cell_string(row.get(LeaveImportHeader.REVIEW_NOTES)) or None

    return ParsedLeaveImportRow(
        row_number=row_number,
        employee_id=employee_id,
        leave_type=leave_type,
        start_date=start_date,
        end_date=end_date,
        reason=reason,
        is_half_day=is_half_day,
        is_paid_leave=is_paid_leave,
        status=status,
        review_notes=review_notes,
        reviewed_at=reviewed_at,
        applied_days=calculate_applied_days(start_date, end_date, is_half_day),
    )


# pylint: enable=too-many-return-statements


def _parse_optional_date(value: object) -> datetime | None:
    if is_empty_cell(value):
        return None
    parsed = parse_spreadsheet_date(value)
    if parsed is None:
        raise _InvalidCell(value)
    return parsed
