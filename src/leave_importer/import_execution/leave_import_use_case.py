"""Leave import use-case service."""

from __future__ import annotations

from leave_importer.batch_import import (
    ImportBatchError,
    build_import_report,
    parse_leave_import_sheet,
    plan_leave_import,
)
from leave_importer.configuration import ImportConfiguration, default_configuration

from .import_contracts import ImportOutcome, ImportRequest


class ImportExecutionError(Exception):
    """Raised when an uploaded sheet cannot be planned for import."""


def execute_leave_import(
    request: ImportRequest,
    configuration: ImportConfiguration | None = None,
) -> ImportOutcome:
    """Parse the sheet, resolve employees and drop duplicates under the configured limits."""
    settings = (configuration or default_configuration()).importing
    try:
        batch = parse_leave_import_sheet(
            request.rows,
            max_rows=settings.max_rows,
            parallelism=settings.parallelism,
        )
    except ImportBatchError as exc:
        raise ImportExecutionError(str(exc)) from exc

    plan = plan_leave_import(
        batch,
        request.employees,
        request.existing_leaves,
        now=request.requested_at,
    )
    return ImportOutcome(plan=plan, report=build_import_report(plan))
