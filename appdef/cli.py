"""Command-line interface for appdef.

Responsibilities:
- Expose user-facing commands for converting application definitions.
- Convert CLI arguments into `ConverterSettings` and run the conversion task.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_config_summary, echo_written_files, exit_with_command_error
from .config import ConverterSettings, SettingsLoader
from .errors import ConversionError
from .io.document import AppDefDocument
from .io.storage import ArtifactStore
from .pipeline.converter import ConfigConverter
from .pipeline.serialization import config_payload
from .pipeline.task import ConvertConfigTask
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="appdef",
    no_args_is_help=True,
    help="Convert application definitions into build configuration.",
)


def _load_yaml_settings(config_path: Path | None) -> ConverterSettings | None:
    """Load a YAML settings file when requested and map failures to conversion errors."""

    if config_path is None:
        return None

    try:
        return SettingsLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ConversionError(
            section="settings",
            detail=f"Settings file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ConversionError(
            section="settings",
            detail=f"Invalid settings file `{config_path}`: {exc}",
            hint="Fix settings keys/values and rerun.",
        ) from exc


def _resolve_settings(
    config_file: Path | None,
    data_dir: Path | None,
    out: Path | None,
    verbose: bool | None,
    json_path: str | None,
) -> ConverterSettings:
    """Resolve effective settings from YAML or environment defaults and CLI overrides."""

    loaded = _load_yaml_settings(config_file)
    if loaded is None and data_dir is None and os.environ.get("APPDEF_DATA_DIR"):
        try:
            loaded = SettingsLoader.from_env()
        except ValueError as exc:
            raise ConversionError(section="settings", detail=str(exc)) from exc

    if loaded is None:
        if data_dir is None:
            raise ConversionError(
                section="settings",
                detail="Data directory is required when `--config` is not provided.",
                hint="Pass `<data-dir>` or use `--config <path.yaml>` with `data_dir`.",
            )
        settings = ConverterSettings(
            data_dir=data_dir,
            output_dir=out if out is not None else Path("."),
            verbose=bool(verbose),
            json_path=json_path,
        )
    else:
        settings = ConverterSettings(
            data_dir=data_dir if data_dir is not None else loaded.data_dir,
            output_dir=out if out is not None else loaded.output_dir,
            module_path=loaded.module_path,
            appdef_name=loaded.appdef_name,
            verbose=verbose if verbose is not None else loaded.verbose,
            json_path=json_path if json_path is not None else loaded.json_path,
        )
    try:
        settings.validate()
    except ValueError as exc:
        raise ConversionError(section="settings", detail=str(exc)) from exc
    return settings


@app.command("convert")
def convert_command(
    data_dir: Annotated[
        Path | None,
        typer.Argument(
            help="Directory containing `appdef.xml` (optional when provided in `--config`).",
        ),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output root for generated files (overrides config file value)."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML settings file."),
    ] = None,
    verbose: Annotated[
        bool | None,
        typer.Option("--verbose/--quiet", help="Report converted item counts per section."),
    ] = None,
    json_path: Annotated[
        str | None,
        typer.Option("--json", help="Also write plain JSON to this path below the output root."),
    ] = None,
) -> None:
    """Convert `appdef.xml` into the `config.js` module."""

    try:
        settings = _resolve_settings(config_file, data_dir, out, verbose, json_path)
        task = ConvertConfigTask(
            settings.data_dir,
            appdef_name=settings.appdef_name,
            module_path=settings.module_path,
            run_logger=RunLogger(),
        )
        output = task.run(verbose=settings.verbose)
        store = ArtifactStore(settings.output_dir)
        written = [store.save_text(Path(file.path), file.content) for file in output.files]
        if settings.json_path is not None:
            written.append(
                store.save_json(Path(settings.json_path), config_payload(output.data))
            )
    except Exception as exc:
        exit_with_command_error("convert", exc)

    typer.echo(f"Converted: {output.data.name}")
    echo_written_files(written)


@app.command("inspect")
def inspect_command(
    appdef_file: Annotated[Path, typer.Argument(help="Path to an `appdef.xml` file.")],
) -> None:
    """Convert an application definition and print a per-section summary."""

    try:
        root = AppDefDocument.load(appdef_file)
        config = ConfigConverter(RunLogger()).convert(root)
    except Exception as exc:
        exit_with_command_error("inspect", exc)

    echo_config_summary(config)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
