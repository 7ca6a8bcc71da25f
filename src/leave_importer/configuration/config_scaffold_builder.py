"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "leave-import.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration for leave-importer.
# Every setting is optional; remove a line to fall back to its default.

template:
  # Worksheet title of the generated import template (max 31 characters).
  sheet_name: "Leave Import"
  # Write an example row below the header row.
  include_sample_row: true

import:
  # Maximum number of non-empty data rows accepted in one upload.
  max_rows: 1000
  # Worker threads used to parse rows; 1 parses sequentially.
  parallelism: 1
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
