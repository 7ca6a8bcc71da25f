"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from leave_importer.batch_import import LEAVE_IMPORT_MAX_ROWS
from leave_importer.template_generation import TEMPLATE_SHEET_NAME


@dataclass(frozen=True)
class TemplateSettings:
    """Template workbook layout settings."""

    sheet_name: str = TEMPLATE_SHEET_NAME
    include_sample_row: bool = True


@dataclass(frozen=True)
class ImportSettings:
    """Batch parsing limits."""

    max_rows: int = LEAVE_IMPORT_MAX_ROWS
    parallelism: int = 1


@dataclass(frozen=True)
class ImportConfiguration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    template: TemplateSettings = field(default_factory=TemplateSettings)
    importing: ImportSettings = field(default_factory=ImportSettings)


def default_configuration() -> ImportConfiguration:
    """Return the configuration used when no file is given."""
    return ImportConfiguration()
