"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
written-file listings, and configuration summaries.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from .errors import ConversionError
from .models.datatypes import AppConfig


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ConversionError):
        typer.secho(
            f"{command_name} failed at section `{exc.section}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_written_files(paths: list[Path]) -> None:
    """Print one line per generated file."""

    for path in paths:
        typer.echo(f"Wrote: {path}")


def echo_config_summary(config: AppConfig) -> None:
    """Print a compact per-section summary of a converted configuration."""

    typer.echo(f"App: {config.name}")
    typer.echo(f"Features: {len(config.main_features)}")
    typer.echo(f"Fonts: {len(config.fonts)}")
    typer.echo(f"Traits: {len(config.traits)}")
    typer.echo(f"Themes: {len(config.themes)}")
    for theme in config.themes:
        marker = " (default)" if theme.name == config.default_theme else ""
        state = "enabled" if theme.enabled else "disabled"
        typer.echo(f"  - {theme.name} [{state}]{marker}")
    typer.echo(f"Book collections: {len(config.book_collections)}")
    for collection in config.book_collections:
        typer.echo(
            f"  - {collection.id} ({collection.language_code}): {len(collection.books)} books"
        )
    if config.translation_mappings is not None:
        typer.echo(f"Translation mappings: {len(config.translation_mappings)}")
    if config.keys is not None:
        typer.echo(f"Keys: {len(config.keys)}")
    if config.audio_sources is not None:
        typer.echo(f"Audio sources: {len(config.audio_sources)}")
        for source_id, source in config.audio_sources.items():
            typer.echo(f"  - {source_id}: {source.type} ({source.name})")
