"""Command line interface entry point."""

from __future__ import annotations

import sys

import click

from leave_importer.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from leave_importer.template_generation import (
    default_template_filename,
    generate_template_workbook,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="leave-importer")
def cli() -> None:
    """Bulk leave import utility."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration file to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration with the default settings and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-template")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to the YAML configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the template workbook to write (defaults to a dated file name)",
)
@click.option(
    "--no-sample-row",
    is_flag=True,
    default=False,
    help="Write only the header row.",
)
def generate_template(config_path: str | None, output_path: str | None, no_sample_row: bool) -> None:
    """Generate the leave import template workbook."""
    try:
        configuration = load_configuration(config_path) if config_path else default_configuration()
        resolved_output = generate_template_workbook(
            output_path or default_template_filename(),
            sheet_name=configuration.template.sheet_name,
            include_sample_row=configuration.template.include_sample_row and not no_sample_row,
        )
    except (ConfigurationError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
