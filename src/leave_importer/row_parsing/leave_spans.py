"""Leave duration and duplicate key calculations."""

from __future__ import annotations

from datetime import datetime

from .spreadsheet_dates import normalize_date_only
from .value_aliases import LeaveType

HALF_DAY_APPLIED_DAYS = 0.5


def calculate_applied_days(start_date: datetime, end_date: datetime, is_half_day: bool) -> float:
    """Return the leave days debited for the span, counting both ends."""
    if is_half_day:
        return HALF_DAY_APPLIED_DAYS
    span = normalize_date_only(end_date) - normalize_date_only(start_date)
    return span.days + 1


def build_duplicate_key(
    employee_internal_id: str,
    leave_type: LeaveType | str,
    start_date: datetime,
    end_date: datetime,
) -> str:
    """Build the key identifying one leave span of one employee and leave type."""
    leave_type_value = leave_type.value if isinstance(leave_type, LeaveType) else leave_type
    start = _to_iso_midnight(start_date)
    end = _to_iso_midnight(end_date)
    return f"{employee_internal_id}|{leave_type_value}|{start}|{end}"


def _to_iso_midnight(value: datetime) -> str:
    return normalize_date_only(value).strftime("%Y-%m-%dT%H:%M:%S.000Z")
