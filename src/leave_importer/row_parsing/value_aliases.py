"""Closed vocabularies for leave types, statuses and yes/no cells."""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType

from .cell_values import get_cell_string, is_empty_cell
from .import_headers import normalize_token

_WHITESPACE_PATTERN = re.compile(r"\s+")


class LeaveType(str, Enum):
    """Leave types accepted by the import."""

    CASUAL = "CASUAL"
    PAID = "PAID"
    COMP_OFF = "COMP_OFF"


class LeaveStatus(str, Enum):
    """Review states a leave request can be imported with."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


LEAVE_TYPE_ALIASES = MappingProxyType(
    {
        "casual": LeaveType.CASUAL,
        "casual leave": LeaveType.CASUAL,
        "paid": LeaveType.PAID,
        "paid leave": LeaveType.PAID,
        "comp off": LeaveType.COMP_OFF,
        "compoff": LeaveType.COMP_OFF,
    }
)

LEAVE_STATUS_ALIASES = MappingProxyType(
    {
        "pending": LeaveStatus.PENDING,
        "approved": LeaveStatus.APPROVED,
        "rejected": LeaveStatus.REJECTED,
        "cancelled": LeaveStatus.CANCELLED,
        "canceled": LeaveStatus.CANCELLED,
    }
)

BOOLEAN_TRUE_VALUES = frozenset({"true", "yes", "y", "1"})
BOOLEAN_FALSE_VALUES = frozenset({"false", "no", "n", "0"})


def parse_leave_type(value: object) -> LeaveType | None:
    """Resolve a leave type cell, or None when the token is unknown."""
    normalized = normalize_token(get_cell_string(value))
    if not normalized:
        return None
    return LEAVE_TYPE_ALIASES.get(normalized)


def parse_leave_status(value: object) -> LeaveStatus | None:
    """Resolve a status cell, or None when the token is unknown."""
    normalized = normalize_token(get_cell_string(value))
    if not normalized:
        return None
    return LEAVE_STATUS_ALIASES.get(normalized)


def parse_optional_boolean(value: object, default: bool) -> bool | None:
    """Interpret a yes/no cell.

    Empty cells yield ``default``. Numbers other than 1 and 0 and unknown
    words yield None so the caller can reject the row.
    """
    if is_empty_cell(value):
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        if value == 1:
            return True
        if value == 0:
            return False
        return None
    if isinstance(value, str):
        normalized = _WHITESPACE_PATTERN.sub("", normalize_token(value))
        if normalized in BOOLEAN_TRUE_VALUES:
            return True
        if normalized in BOOLEAN_FALSE_VALUES:
            return False
    return None
