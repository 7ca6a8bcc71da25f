"""Import planning service: employee lookup and duplicate detection.

Turns a parsed batch into leave request drafts ready for a bulk insert. The
caller supplies the employee directory and the leave spans already stored for
those employees; nothing here touches a database.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime

from leave_importer.row_parsing import (
    LeaveImportError,
    LeaveStatus,
    LeaveType,
    ParsedLeaveImportRow,
    build_duplicate_key,
)

from .batch_parser import LeaveImportBatch

EMPLOYEE_NOT_FOUND = "Employee not found"
DUPLICATE_LEAVE_SKIPPED = (
    "Duplicate leave request skipped (same employee, leave type, start date, and end date)"
)


@dataclass(frozen=True)
class EmployeeRecord:
    """Employee snapshot copied onto imported leave requests."""

    internal_id: str
    employee_id: str
    name: str
    department: str
    designation: str
    contact_number: str


@dataclass(frozen=True)
class ExistingLeave:
    """Leave span already stored for an employee."""

    employee_internal_id: str
    leave_type: LeaveType | str
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True)
class LeaveRequestDraft:  # pylint: disable=too-many-instance-attributes
    """Leave request ready to be persisted."""

    row_number: int
    employee_internal_id: str
    employee_name: str
    department: str
    designation: str
    contact_number: str
    leave_type: LeaveType
    start_date: datetime
    end_date: datetime
    applied_days: float
    reason: str
    is_half_day: bool
    is_paid_leave: bool
    status: LeaveStatus
    review_notes: str | None
    reviewed_at: datetime | None


@dataclass(frozen=True)
class ImportSummary:
    """Row counters reported back to the uploader."""

    total_rows: int
    importable_rows: int
    skipped_duplicate_rows: int
    invalid_rows: int


@dataclass(frozen=True)
class LeaveImportPlan:
    """Drafts to persist plus every row that will not be imported."""

    drafts: tuple[LeaveRequestDraft, ...]
    errors: tuple[LeaveImportError, ...]
    summary: ImportSummary


def plan_leave_import(
    batch: LeaveImportBatch,
    employees: Mapping[str, EmployeeRecord],
    existing_leaves: Iterable[ExistingLeave],
    *,
    now: datetime | None = None,
) -> LeaveImportPlan:
    """Resolve employees and drop duplicates for a parsed batch.

    Args:
      batch: Parsed sheet rows and row errors.
      employees: Employee directory keyed by external employee id.
      existing_leaves: Stored leave spans of the employees in ``employees``.
      now: Review timestamp used for non-pending rows without Reviewed At.

    Returns:
      The leave request drafts, all row errors sorted by row number and the
      batch counters.
    """
    reviewed_fallback = now or datetime.now(UTC)
    known_keys = {
        build_duplicate_key(
            leave.employee_internal_id, leave.leave_type, leave.start_date, leave.end_date
        )
        for leave in existing_leaves
    }

    errors = list(batch.errors)
    invalid_rows = len(batch.errors)
    skipped_duplicate_rows = 0
    drafts: list[LeaveRequestDraft] = []

    for parsed_row in batch.parsed_rows:
        employee = employees.get(parsed_row.employee_id)
        if employee is None:
            errors.append(_row_error(parsed_row, EMPLOYEE_NOT_FOUND))
            invalid_rows += 1
            continue

        duplicate_key = build_duplicate_key(
            employee.internal_id,
            parsed_row.leave_type,
            parsed_row.start_date,
            parsed_row.end_date,
        )
        if duplicate_key in known_keys:
            errors.append(_row_error(parsed_row, DUPLICATE_LEAVE_SKIPPED))
            skipped_duplicate_rows += 1
            continue
        known_keys.add(duplicate_key)

        drafts.append(_build_draft(parsed_row, employee, reviewed_fallback))

    errors.sort(key=lambda error: error.row_number)
    summary = ImportSummary(
        total_rows=batch.total_rows,
        importable_rows=len(drafts),
        skipped_duplicate_rows=skipped_duplicate_rows,
        invalid_rows=invalid_rows,
    )
    return LeaveImportPlan(drafts=tuple(drafts), errors=tuple(errors), summary=summary)


def _row_error(parsed_row: ParsedLeaveImportRow, reason: str) -> LeaveImportError:
    return LeaveImportError(
        row_number=parsed_row.row_number,
        reason=reason,
        employee_id=parsed_row.employee_id,
    )


def _build_draft(
    parsed_row: ParsedLeaveImportRow,
    employee: EmployeeRecord,
    reviewed_fallback: datetime,
) -> LeaveRequestDraft:
    reviewed_at = (
        None
        if parsed_row.status == LeaveStatus.PENDING
        else parsed_row.reviewed_at or reviewed_fallback
    )
    return LeaveRequestDraft(
        row_number=parsed_row.row_number,
        employee_internal_id=employee.internal_id,
        employee_name=employee.name,
        department=employee.department,
        designation=employee.designation,
        contact_number=employee.contact_number,
        leave_type=parsed_row.leave_type,
        start_date=parsed_row.start_date,
        end_date=parsed_row.end_date,
        applied_days=parsed_row.applied_days,
        reason=parsed_row.reason,
        is_half_day=parsed_row.is_half_day,
        is_paid_leave=parsed_row.is_paid_leave,
        status=parsed_row.status,
        review_notes=parsed_row.review_notes,
        reviewed_at=reviewed_at,
    )
