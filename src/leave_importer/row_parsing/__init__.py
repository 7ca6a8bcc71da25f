"""Row parsing domain exports."""

from .cell_values import get_cell_string, is_empty_cell
from .import_headers import (
    HEADER_ALIASES,
    LEAVE_IMPORT_HEADERS,
    LEAVE_IMPORT_OPTIONAL_HEADERS,
    LEAVE_IMPORT_REQUIRED_HEADERS,
    LeaveImportHeader,
    resolve_header,
)
from .leave_records import (
    LeaveImportError,
    LeaveImportRowCells,
    ParsedLeaveImportRow,
    RowParseResult,
)
from .leave_spans import build_duplicate_key, calculate_applied_days
from .row_validator import parse_leave_import_row
from .spreadsheet_dates import normalize_date_only, parse_spreadsheet_date
from .value_aliases import (
    LeaveStatus,
    LeaveType,
    parse_leave_status,
    parse_leave_type,
    parse_optional_boolean,
)

__all__ = [
    "HEADER_ALIASES",
    "LEAVE_IMPORT_HEADERS",
    "LEAVE_IMPORT_OPTIONAL_HEADERS",
    "LEAVE_IMPORT_REQUIRED_HEADERS",
    "LeaveImportError",
    "LeaveImportHeader",
    "LeaveImportRowCells",
    "LeaveStatus",
    "LeaveType",
    "ParsedLeaveImportRow",
    "RowParseResult",
    "build_duplicate_key",
    "calculate_applied_days",
    "get_cell_string",
    "is_empty_cell",
    "normalize_date_only",
    "parse_leave_import_row",
    "parse_leave_status",
    "parse_leave_type",
    "parse_optional_boolean",
    "parse_spreadsheet_date",
    "resolve_header",
]
