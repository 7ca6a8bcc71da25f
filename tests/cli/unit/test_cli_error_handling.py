"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from leave_importer.cli import main


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate-template", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_config_file_returns_error_message(tmp_path: Path, capsys) -> None:
    exit_code = main(
        [
            "generate-template",
            "--config",
            str(tmp_path / "missing.yaml"),
            "--output",
            str(tmp_path / "template.xlsx"),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert not (tmp_path / "template.xlsx").exists()


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "leave-import.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
