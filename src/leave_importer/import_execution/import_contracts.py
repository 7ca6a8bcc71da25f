"""Import execution entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from leave_importer.batch_import import EmployeeRecord, ExistingLeave, LeaveImportPlan


@dataclass(frozen=True)
class ImportRequest:
    """Input contract for planning one uploaded sheet."""

    rows: Sequence[Sequence[object]]
    employees: Mapping[str, EmployeeRecord]
    existing_leaves: Sequence[ExistingLeave] = ()
    requested_at: datetime | None = None


@dataclass(frozen=True)
class ImportOutcome:
    """Output contract for one planned import."""

    plan: LeaveImportPlan
    report: Mapping[str, Any] = field(default_factory=dict)
