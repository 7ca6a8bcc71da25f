"""Spreadsheet-based bulk leave import."""
