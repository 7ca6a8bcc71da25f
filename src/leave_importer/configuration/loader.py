"""Configuration loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from leave_importer.batch_import import LEAVE_IMPORT_MAX_ROWS
from leave_importer.template_generation import TEMPLATE_SHEET_NAME

from .runtime_settings import ImportConfiguration, ImportSettings, TemplateSettings

_MAX_SHEET_NAME_LENGTH = 31
_INVALID_SHEET_NAME_CHARACTERS = re.compile(r"[\\/*?:\[\]]")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> ImportConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    template = _parse_template_section(parsed.get("template"))
    importing = _parse_import_section(parsed.get("import"))
    return ImportConfiguration(path=path, template=template, importing=importing)


def _parse_template_section(value: Any) -> TemplateSettings:
    section = _optional_mapping(value, "template")
    sheet_name = _require_non_empty_string(
        section.get("sheet_name", TEMPLATE_SHEET_NAME), "template.sheet_name"
    )
    if len(sheet_name) > _MAX_SHEET_NAME_LENGTH:
        raise ConfigurationError(
            f"template.sheet_name must be at most {_MAX_SHEET_NAME_LENGTH} characters."
        )
    if _INVALID_SHEET_NAME_CHARACTERS.search(sheet_name):
        raise ConfigurationError("template.sheet_name must not contain \\ / * ? : [ ].")
    include_sample_row = _require_bool(
        section.get("include_sample_row", True), "template.include_sample_row"
    )
    return TemplateSettings(sheet_name=sheet_name, include_sample_row=include_sample_row)


def _parse_import_section(value: Any) -> ImportSettings:
    section = _optional_mapping(value, "import")
    max_rows = _require_positive_int(
        section.get("max_rows", LEAVE_IMPORT_MAX_ROWS), "import.max_rows"
    )
    parallelism = _require_positive_int(section.get("parallelism", 1), "import.parallelism")
    return ImportSettings(max_rows=max_rows, parallelism=parallelism)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
