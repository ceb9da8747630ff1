"""Aggregator that converts an application definition tree into `AppConfig`.

Responsibilities:
- Run every section extractor once, in a fixed order, against the root node.
- Collect section results in a `ConfigBuilder` and assemble them only after
  every section succeeded.
- Report per-section counts when verbose diagnostics are enabled.
"""

from __future__ import annotations

from ..errors import ConversionError
from ..extractors import (
    MAIN_FEATURES_TYPE,
    extract_audio_sources,
    extract_collections,
    extract_features,
    extract_fonts,
    extract_keys,
    extract_themes,
    extract_traits,
    extract_translation_mappings,
)
from ..io.document import DocumentNode
from ..models.datatypes import AppConfig
from ..telemetry.logger import RunLogger
from .builder import ConfigBuilder
from .telemetry import ConverterTelemetryMixin


class ConfigConverter(ConverterTelemetryMixin):
    """Convert a parsed application definition into an immutable configuration."""

    def __init__(self, run_logger: RunLogger | None = None, *, verbose: bool = False) -> None:
        """Initialize converter diagnostics.

        Args:
            run_logger: Optional structured logger for section events and counts.
            verbose: Whether per-section item counts are reported.
        """

        self._run_logger = run_logger
        self._verbose = verbose

    def convert(self, root: DocumentNode) -> AppConfig:
        """Convert the whole document.

        Raises:
            ConversionError: If required structure is missing.
        """

        builder = ConfigBuilder()

        name = self._run_section("name", lambda: self._extract_name(root))
        builder.set("name", name)
        self._report_count("name", 1, app=name)

        features = self._run_section(
            "features", lambda: extract_features(root, MAIN_FEATURES_TYPE, "features")
        )
        builder.set("main_features", features)
        self._report_count("features", len(features))

        fonts = self._run_section("fonts", lambda: extract_fonts(root))
        builder.set("fonts", fonts)
        self._report_count("fonts", len(fonts))

        themes = self._run_section("themes", lambda: extract_themes(root))
        builder.set("themes", themes.themes)
        if themes.default_theme is not None:
            builder.set("default_theme", themes.default_theme)
        self._report_count("themes", len(themes.themes))

        traits = self._run_section("traits", lambda: extract_traits(root))
        builder.set("traits", traits)
        self._report_count("traits", len(traits))

        collections = self._run_section("book-collections", lambda: extract_collections(root))
        builder.set("book_collections", collections)
        self._report_count(
            "book-collections",
            len(collections),
            books="[" + ",".join(str(len(collection.books)) for collection in collections) + "]",
        )

        mappings = self._run_section(
            "translation-mappings", lambda: extract_translation_mappings(root)
        )
        if mappings is not None:
            builder.set("translation_mappings", mappings)
            self._report_count("translation-mappings", len(mappings))

        keys = self._run_section("keys", lambda: extract_keys(root))
        if keys is not None:
            builder.set("keys", keys)
            self._report_count("keys", len(keys))

        sources = self._run_section("audio-sources", lambda: extract_audio_sources(root))
        if sources is not None:
            builder.set("audio_sources", sources)
        self._report_count("audio-sources", len(sources) if sources is not None else 0)

        return builder.build()

    @staticmethod
    def _extract_name(root: DocumentNode) -> str:
        name = root.first("app-name")
        if name is None:
            raise ConversionError(
                section="name",
                detail="Application name `<app-name>` not found.",
                hint="Add `<app-name>` to the application definition.",
            )
        return name.text


def convert(root: DocumentNode, verbose: bool = False) -> AppConfig:
    """Convert a parsed application definition with optional verbose counts."""

    run_logger = RunLogger() if verbose else None
    return ConfigConverter(run_logger, verbose=verbose).convert(root)
