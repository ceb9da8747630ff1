"""Integration tests for the `appdef convert` command."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from appdef.cli import app


def _data_dir(tmp_path: Path, fixture: Path) -> Path:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    shutil.copy(fixture, data_dir / "appdef.xml")
    return data_dir


def test_convert_writes_config_module(tmp_path: Path, canonical_appdef_fixture_path: Path) -> None:
    """Convert should write `src/config.js` with a default-exported JSON payload."""

    data_dir = _data_dir(tmp_path, canonical_appdef_fixture_path)
    out_dir = tmp_path / "out"

    result = CliRunner().invoke(app, ["convert", str(data_dir), "--out", str(out_dir)])

    assert result.exit_code == 0, result.output
    module = (out_dir / "src" / "config.js").read_text(encoding="utf-8")
    assert module.startswith("export default {")
    assert module.endswith("};")
    payload = json.loads(module[len("export default ") : -1])
    assert payload["name"] == "Sample Scripture App"
    assert payload["defaultTheme"] == "Sepia"
    assert "Converted: Sample Scripture App" in result.output


def test_convert_writes_optional_json_and_verbose_counts(
    tmp_path: Path, canonical_appdef_fixture_path: Path
) -> None:
    """`--json` adds a plain JSON file and `--verbose` reports section counts."""

    data_dir = _data_dir(tmp_path, canonical_appdef_fixture_path)
    out_dir = tmp_path / "out"

    result = CliRunner().invoke(
        app,
        [
            "convert",
            str(data_dir),
            "--out",
            str(out_dir),
            "--json",
            "build/config.json",
            "--verbose",
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads((out_dir / "build" / "config.json").read_text(encoding="utf-8"))
    assert [collection["id"] for collection in payload["bookCollections"]] == ["C01", "C02"]
    assert "section=fonts event=converted count=2" in result.output


def test_convert_uses_yaml_settings(tmp_path: Path, canonical_appdef_fixture_path: Path) -> None:
    """Settings from `--config` should drive data dir, output root, and module path."""

    data_dir = _data_dir(tmp_path, canonical_appdef_fixture_path)
    out_dir = tmp_path / "build"
    settings_path = tmp_path / "appdef.yml"
    settings_path.write_text(
        f"data_dir: {data_dir}\noutput_dir: {out_dir}\nmodule_path: generated/config.js\n",
        encoding="utf-8",
    )

    result = CliRunner().invoke(app, ["convert", "--config", str(settings_path)])

    assert result.exit_code == 0, result.output
    assert (out_dir / "generated" / "config.js").exists()


def test_inspect_prints_summary(canonical_appdef_fixture_path: Path) -> None:
    """Inspect should print a per-section summary of the fixture."""

    result = CliRunner().invoke(app, ["inspect", str(canonical_appdef_fixture_path)])

    assert result.exit_code == 0, result.output
    assert "Fonts: 2" in result.output
    assert "Book collections: 2" in result.output
    assert "  - A04: other (Custom)" in result.output


def test_convert_reads_settings_from_environment(
    monkeypatch: MonkeyPatch, tmp_path: Path, canonical_appdef_fixture_path: Path
) -> None:
    """Without arguments, `APPDEF_*` variables should drive the conversion."""

    data_dir = _data_dir(tmp_path, canonical_appdef_fixture_path)
    out_dir = tmp_path / "env-out"
    monkeypatch.setenv("APPDEF_DATA_DIR", str(data_dir))
    monkeypatch.setenv("APPDEF_OUTPUT_DIR", str(out_dir))

    result = CliRunner().invoke(app, ["convert"])

    assert result.exit_code == 0, result.output
    assert (out_dir / "src" / "config.js").exists()
