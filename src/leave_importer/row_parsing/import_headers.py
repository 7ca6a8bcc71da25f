"""Canonical leave import headers and header alias resolution."""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType

from .cell_values import get_cell_string

_SEPARATOR_PATTERN = re.compile(r"[_-]+")
_WHITESPACE_PATTERN = re.compile(r"\s+")


class LeaveImportHeader(str, Enum):
    """Canonical column headers of the leave import sheet."""

    EMPLOYEE_ID = "Employee ID"
    LEAVE_TYPE = "Leave Type"
    START_DATE = "Start Date"
    END_DATE = "End Date"
    REASON = "Reason"
    STATUS = "Status"
    HALF_DAY = "Half Day"
    PAID_LEAVE = "Paid Leave"
    REVIEW_NOTES = "Review Notes"
    REVIEWED_AT = "Reviewed At"


LEAVE_IMPORT_REQUIRED_HEADERS: tuple[LeaveImportHeader, ...] = (
    LeaveImportHeader.EMPLOYEE_ID,
    LeaveImportHeader.LEAVE_TYPE,
    LeaveImportHeader.START_DATE,
    LeaveImportHeader.END_DATE,
    LeaveImportHeader.REASON,
    LeaveImportHeader.STATUS,
)
LEAVE_IMPORT_OPTIONAL_HEADERS: tuple[LeaveImportHeader, ...] = (
    LeaveImportHeader.HALF_DAY,
    LeaveImportHeader.PAID_LEAVE,
    LeaveImportHeader.REVIEW_NOTES,
    LeaveImportHeader.REVIEWED_AT,
)
LEAVE_IMPORT_HEADERS: tuple[LeaveImportHeader, ...] = (
    LEAVE_IMPORT_REQUIRED_HEADERS + LEAVE_IMPORT_OPTIONAL_HEADERS
)


def normalize_token(value: str) -> str:
    """Lowercase a token and collapse underscores, hyphens and whitespace to single spaces."""
    collapsed = _SEPARATOR_PATTERN.sub(" ", value.strip().lower())
    return _WHITESPACE_PATTERN.sub(" ", collapsed).strip()


def _build_header_aliases() -> MappingProxyType[str, LeaveImportHeader]:
    aliases: dict[str, LeaveImportHeader] = {}
    for header in LEAVE_IMPORT_HEADERS:
        spaced = normalize_token(header.value)
        aliases[spaced] = header
        aliases[spaced.replace(" ", "")] = header
    return MappingProxyType(aliases)


HEADER_ALIASES = _build_header_aliases()


def resolve_header(value: object) -> LeaveImportHeader | None:
    """Map raw header cell text to its canonical header, or None when unknown."""
    if isinstance(value, bool) or not isinstance(value, str | int | float):
        return None
    normalized = normalize_token(get_cell_string(value))
    if not normalized:
        return None
    return HEADER_ALIASES.get(normalized)
