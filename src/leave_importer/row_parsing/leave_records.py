"""Leave import row entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from .import_headers import LeaveImportHeader
from .value_aliases import LeaveStatus, LeaveType

LeaveImportRowCells = Mapping[LeaveImportHeader, object]


@dataclass(frozen=True)
class ParsedLeaveImportRow:  # pylint: disable=too-many-instance-attributes
    """Validated leave request built from one sheet row."""

    row_number: int
    employee_id: str
    leave_type: LeaveType
    start_date: datetime
    end_date: datetime
    reason: str
    is_half_day: bool
    is_paid_leave: bool
    status: LeaveStatus
    review_notes: str | None
    reviewed_at: datetime | None
    applied_days: float


@dataclass(frozen=True)
class LeaveImportError:
    """User-facing rejection of one sheet row."""

    row_number: int
    reason: str
    employee_id: str | None = None


RowParseResult = ParsedLeaveImportRow | LeaveImportError
