"""CLI error-handling tests for concise conversion diagnostics."""

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from appdef.cli import app
from appdef.errors import ConversionError


def test_convert_reports_missing_fonts_section(tmp_path: Path) -> None:
    """A document without fonts should fail with section-aware diagnostics."""

    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "appdef.xml").write_text(
        "<app-definition><app-name>Broken</app-name>"
        "<features type='main'/><color-themes/><traits/></app-definition>",
        encoding="utf-8",
    )
    out_dir = tmp_path / "out"

    result = CliRunner().invoke(app, ["convert", str(data_dir), "--out", str(out_dir)])

    assert result.exit_code == 1
    assert "convert failed at section `fonts`" in result.output
    assert "Hint: Add a `<fonts>` element" in result.output
    assert not (out_dir / "src" / "config.js").exists()


def test_convert_reports_missing_appdef(tmp_path: Path) -> None:
    """A data directory without `appdef.xml` should fail in the document section."""

    result = CliRunner().invoke(app, ["convert", str(tmp_path)])

    assert result.exit_code == 1
    assert "convert failed at section `document`" in result.output


def test_convert_requires_data_dir_without_config(monkeypatch: MonkeyPatch) -> None:
    """Convert should explain how to supply input when nothing is given."""

    monkeypatch.delenv("APPDEF_DATA_DIR", raising=False)
    result = CliRunner().invoke(app, ["convert"])

    assert result.exit_code == 1
    assert "convert failed at section `settings`" in result.output
    assert "Data directory is required" in result.output


def test_convert_reports_missing_config_file() -> None:
    """Convert should fail with section-aware diagnostics when `--config` is missing."""

    result = CliRunner().invoke(app, ["convert", "--config", "missing-appdef.yaml"])

    assert result.exit_code == 1
    assert "convert failed at section `settings`" in result.output
    assert "Settings file not found: `missing-appdef.yaml`." in result.output


def test_convert_reports_invalid_config_payload(tmp_path: Path) -> None:
    """Convert should fail fast when YAML settings are invalid."""

    settings_path = tmp_path / "invalid.yaml"
    settings_path.write_text("output_dir: out\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["convert", "--config", str(settings_path)])

    assert result.exit_code == 1
    assert "is missing required key(s): data_dir" in result.output


def test_inspect_reports_non_conversion_error(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """Inspect should still report unexpected exceptions with exit code 1."""

    def _failing_convert(*_: object, **__: object) -> None:
        raise RuntimeError("unexpected tree error")

    monkeypatch.setattr("appdef.cli.ConfigConverter.convert", _failing_convert)
    appdef_path = tmp_path / "appdef.xml"
    appdef_path.write_text("<app-definition/>", encoding="utf-8")

    result = CliRunner().invoke(app, ["inspect", str(appdef_path)])

    assert result.exit_code == 1
    assert "inspect failed: unexpected tree error" in result.output


def test_inspect_reports_conversion_error_hint(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """Inspect should print the hint carried by conversion errors."""

    def _failing_convert(*_: object, **__: object) -> None:
        raise ConversionError(section="themes", detail="bad themes", hint="fix themes")

    monkeypatch.setattr("appdef.cli.ConfigConverter.convert", _failing_convert)
    appdef_path = tmp_path / "appdef.xml"
    appdef_path.write_text("<app-definition/>", encoding="utf-8")

    result = CliRunner().invoke(app, ["inspect", str(appdef_path)])

    assert result.exit_code == 1
    assert "inspect failed at section `themes`: bad themes" in result.output
    assert "Hint: fix themes" in result.output
