"""Leave type, status and yes/no cell tests."""

from __future__ import annotations

import pytest
from leave_importer.row_parsing.value_aliases import (
    LEAVE_STATUS_ALIASES,
    LEAVE_TYPE_ALIASES,
    LeaveStatus,
    LeaveType,
    parse_leave_status,
    parse_leave_type,
    parse_optional_boolean,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Casual", LeaveType.CASUAL),
        ("CASUAL", LeaveType.CASUAL),
        (" casual leave ", LeaveType.CASUAL),
        ("Casual_Leave", LeaveType.CASUAL),
        ("paid", LeaveType.PAID),
        ("Paid Leave", LeaveType.PAID),
        ("COMP_OFF", LeaveType.COMP_OFF),
        ("comp off", LeaveType.COMP_OFF),
        ("Comp-Off", LeaveType.COMP_OFF),
        ("compoff", LeaveType.COMP_OFF),
    ],
)
def test_parse_leave_type_accepts_synonyms(value: str, expected: LeaveType) -> None:
    assert parse_leave_type(value) is expected


@pytest.mark.parametrize("value", ["Sabbatical", "sick", "", "   ", None, 1, True])
def test_parse_leave_type_rejects_unknown_tokens(value: object) -> None:
    assert parse_leave_type(value) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Pending", LeaveStatus.PENDING),
        ("APPROVED", LeaveStatus.APPROVED),
        (" rejected ", LeaveStatus.REJECTED),
        ("Cancelled", LeaveStatus.CANCELLED),
        ("canceled", LeaveStatus.CANCELLED),
    ],
)
def test_parse_leave_status_accepts_synonyms(value: str, expected: LeaveStatus) -> None:
    assert parse_leave_status(value) is expected


@pytest.mark.parametrize("value", ["Done", "approve", "", None, 0])
def test_parse_leave_status_rejects_unknown_tokens(value: object) -> None:
    assert parse_leave_status(value) is None


def test_alias_tables_target_only_enum_members() -> None:
    assert set(LEAVE_TYPE_ALIASES.values()) == set(LeaveType)
    assert set(LEAVE_STATUS_ALIASES.values()) == set(LeaveStatus)


@pytest.mark.parametrize("value", [None, "", "   "])
def test_empty_boolean_cells_use_the_default(value: object) -> None:
    assert parse_optional_boolean(value, False) is False
    assert parse_optional_boolean(value, True) is True


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, True),
        (False, False),
        (1, True),
        (0, False),
        (1.0, True),
        (0.0, False),
        ("Yes", True),
        ("y", True),
        ("TRUE", True),
        ("1", True),
        (" Y e s ", True),
        ("No", False),
        ("n", False),
        ("false", False),
        ("0", False),
    ],
)
def test_boolean_cells(value: object, expected: bool) -> None:
    assert parse_optional_boolean(value, not expected) is expected


@pytest.mark.parametrize("value", [2, -1, 0.5, "maybe", "yes please", "2"])
def test_ambiguous_boolean_cells_are_rejected(value: object) -> None:
    assert parse_optional_boolean(value, False) is None


def test_numeric_two_is_rejected_not_defaulted() -> None:
    assert parse_optional_boolean(2, False) is None
