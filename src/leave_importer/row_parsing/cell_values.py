"""Coercion helpers for untyped spreadsheet cell values."""

from __future__ import annotations


def is_empty_cell(value: object) -> bool:
    """Return True for missing cells and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def get_cell_string(value: object) -> str:
    """Return the trimmed text shown for a cell, or an empty string for non-scalar values."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return str(value).strip()
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # Beyond the interpreter's int-to-str digit limit.
            return ""
    return ""
