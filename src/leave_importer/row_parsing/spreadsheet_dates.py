"""Spreadsheet date parsing service.

Cells reach the parser in three shapes: native ``datetime``/``date`` values
(openpyxl, pandas), numeric serials (raw xlsx/CSV exports) and free text.
Every shape resolves to an aware UTC ``datetime`` so that the same calendar
day compares equal regardless of how it was written.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, date, datetime, timedelta

from .cell_values import is_empty_cell

SPREADSHEET_EPOCH_UTC = datetime(1899, 12, 30, tzinfo=UTC)
MILLIS_PER_DAY = 24 * 60 * 60 * 1000

_NUMERIC_PATTERN = re.compile(r"^-?\d+(\.\d+)?([eE][-+]?\d+)?$", re.ASCII)
_ISO_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)
# Month-first, matching the template's documented convention.
_MONTH_FIRST_PATTERN = re.compile(r"^(\d{1,2})[/-](\d{1,2})[/-](\d{4})$", re.ASCII)
_WRITTEN_DATE_FORMATS: tuple[str, ...] = (
    "%Y/%m/%d",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%a, %d %b %Y",
    "%a %b %d %Y",
)


def parse_spreadsheet_date(value: object) -> datetime | None:
    """Parse a cell into an aware UTC datetime, or None when it is not a date."""
    if is_empty_cell(value):
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return parse_serial_date(value)
    if isinstance(value, str):
        trimmed = value.strip()
        if _NUMERIC_PATTERN.fullmatch(trimmed):
            serial_date = parse_serial_date(float(trimmed))
            if serial_date is not None:
                return serial_date
        return _parse_date_string(trimmed)
    return None


def parse_serial_date(serial: float) -> datetime | None:
    """Convert a spreadsheet serial (day 0 = 1899-12-30) to a UTC datetime."""
    try:
        serial = float(serial)
    except OverflowError:
        return None
    if not math.isfinite(serial):
        return None
    whole_days = math.trunc(serial)
    fractional_days = serial - whole_days
    # Half-up rounding of the time-of-day, toward positive infinity.
    fraction_millis = math.floor(fractional_days * MILLIS_PER_DAY + 0.5)
    try:
        return SPREADSHEET_EPOCH_UTC + timedelta(
            days=whole_days, milliseconds=fraction_millis
        )
    except OverflowError:
        return None


def normalize_date_only(value: datetime) -> datetime:
    """Strip the time of day, keeping the UTC calendar date at midnight UTC."""
    utc_value = _as_utc(value)
    return datetime(utc_value.year, utc_value.month, utc_value.day, tzinfo=UTC)


def _parse_date_string(text: str) -> datetime | None:
    # Dates are written with ASCII digits only.
    if not text or not text.isascii():
        return None

    iso_match = _ISO_DATE_PATTERN.fullmatch(text)
    if iso_match:
        year, month, day = (int(part) for part in iso_match.groups())
        return _build_utc_date(year, month, day)

    month_first_match = _MONTH_FIRST_PATTERN.fullmatch(text)
    if month_first_match:
        month, day, year = (int(part) for part in month_first_match.groups())
        return _build_utc_date(year, month, day)

    return _parse_generic_date_string(text)


def _parse_generic_date_string(text: str) -> datetime | None:
    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return _as_utc(datetime.fromisoformat(iso_text))
    except ValueError:
        pass
    for date_format in _WRITTEN_DATE_FORMATS:
        try:
            parsed = datetime.strptime(text, date_format)
        except ValueError:
            continue
        return parsed.replace(tzinfo=UTC)
    return None


def _build_utc_date(year: int, month: int, day: int) -> datetime | None:
    try:
        return datetime(year, month, day, tzinfo=UTC)
    except ValueError:
        return None


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
