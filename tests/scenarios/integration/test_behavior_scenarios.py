"""Scenario-style integration tests for leave import behaviors."""

from __future__ import annotations

from datetime import UTC, datetime

from leave_importer.batch_import import (
    EmployeeRecord,
    ExistingLeave,
    build_import_report,
    parse_leave_import_sheet,
    plan_leave_import,
)
from leave_importer.row_parsing import (
    LeaveImportError,
    LeaveImportHeader,
    LeaveStatus,
    LeaveType,
    ParsedLeaveImportRow,
    normalize_date_only,
    parse_leave_import_row,
    parse_spreadsheet_date,
)


def _cells(**values: object) -> dict[LeaveImportHeader, object]:
    row: dict[LeaveImportHeader, object] = {
        LeaveImportHeader.EMPLOYEE_ID: "EMP001",
        LeaveImportHeader.LEAVE_TYPE: "Casual",
        LeaveImportHeader.START_DATE: "2026-02-11",
        LeaveImportHeader.END_DATE: "2026-02-11",
        LeaveImportHeader.REASON: "Family event",
        LeaveImportHeader.STATUS: "Pending",
        LeaveImportHeader.HALF_DAY: "No",
        LeaveImportHeader.PAID_LEAVE: "Yes",
    }
    for name, value in values.items():
        row[LeaveImportHeader[name.upper()]] = value
    return row


def test_scenario_single_day_casual_leave_is_accepted() -> None:
    result = parse_leave_import_row(_cells(), 2)

    assert isinstance(result, ParsedLeaveImportRow)
    assert result.applied_days == 1
    assert result.leave_type is LeaveType.CASUAL
    assert result.status is LeaveStatus.PENDING


def test_scenario_half_day_spanning_two_dates_is_rejected() -> None:
    result = parse_leave_import_row(_cells(half_day="Yes", end_date="2026-02-12"), 2)

    assert isinstance(result, LeaveImportError)
    assert result.reason == "Half Day leave must have the same Start Date and End Date"


def test_scenario_unknown_leave_type_is_rejected() -> None:
    result = parse_leave_import_row(_cells(leave_type="Sabbatical"), 2)

    assert isinstance(result, LeaveImportError)
    assert result.reason == "Invalid Leave Type"


def test_scenario_serial_and_slash_dates_agree_on_2023_calendar() -> None:
    serial_date = parse_spreadsheet_date(45000)
    slash_date = parse_spreadsheet_date("2/15/2023")

    assert serial_date is not None and slash_date is not None
    assert normalize_date_only(serial_date) == datetime(2023, 3, 15, tzinfo=UTC)
    assert normalize_date_only(slash_date) == datetime(2023, 2, 15, tzinfo=UTC)
    assert parse_spreadsheet_date("45000") == serial_date


def test_scenario_reversed_dates_are_rejected() -> None:
    result = parse_leave_import_row(_cells(start_date="2026-03-05", end_date="2026-03-01"), 2)

    assert isinstance(result, LeaveImportError)
    assert result.reason == "Start Date must be on or before End Date"


def test_scenario_reviewed_at_absent_versus_invalid() -> None:
    invalid = parse_leave_import_row(_cells(reviewed_at="not-a-date"), 2)
    blank = parse_leave_import_row(_cells(reviewed_at=""), 2)

    assert isinstance(invalid, LeaveImportError)
    assert invalid.reason == "Invalid Reviewed At value"
    assert isinstance(blank, ParsedLeaveImportRow)
    assert blank.reviewed_at is None


def test_scenario_partial_success_batch_report() -> None:
    header = ["Employee ID", "Leave Type", "Start Date", "End Date", "Reason", "Status"]
    rows: list[list[object]] = [header]
    for index in range(20):
        day = f"2026-05-{index + 1:02d}"
        reason = "" if index % 10 == 9 else "Planned leave"
        rows.append(["EMP001", "Paid", day, day, reason, "Approved"])
    employees = {
        "EMP001": EmployeeRecord(
            internal_id="db-1",
            employee_id="EMP001",
            name="Asha Rao",
            department="Finance",
            designation="Accountant",
            contact_number="555-0100",
        )
    }
    stored = [
        ExistingLeave(
            employee_internal_id="db-1",
            leave_type="PAID",
            start_date=datetime(2026, 5, 1, tzinfo=UTC),
            end_date=datetime(2026, 5, 1, tzinfo=UTC),
        )
    ]

    plan = plan_leave_import(
        parse_leave_import_sheet(rows), employees, stored, now=datetime(2026, 4, 1, tzinfo=UTC)
    )
    report = build_import_report(plan)

    assert report["summary"] == {
        "totalRows": 20,
        "importableRows": 17,
        "skippedDuplicateRows": 1,
        "invalidRows": 2,
    }
    assert {error["reason"] for error in report["errors"]} == {
        "Reason is required",
        "Duplicate leave request skipped (same employee, leave type, start date, and end date)",
    }
