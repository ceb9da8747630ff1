"""Rendering of `AppConfig` into JSON-compatible payloads.

Responsibilities:
- Map typed records onto the field names downstream build steps read.
- Omit absent optional values instead of writing `null`.
- Render compact JSON and the `export default <json>;` module text.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from ..models.datatypes import (
    AppConfig,
    AudioSource,
    AudioTrack,
    Book,
    BookCollection,
    ColorTheme,
    DownloadAudioSource,
    FcbhAudioSource,
    Font,
)


def _without_absent(payload: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


def font_payload(font: Font) -> dict[str, Any]:
    return {
        "family": font.family,
        "name": font.name,
        "file": font.file,
        "fontStyle": font.font_style,
        "fontWeight": font.font_weight,
    }


def theme_payload(theme: ColorTheme) -> dict[str, Any]:
    return {
        "name": theme.name,
        "enabled": theme.enabled,
        "colorSets": [
            {"type": color_set.type, "colors": dict(color_set.colors)}
            for color_set in theme.color_sets
        ],
    }


def track_payload(track: AudioTrack) -> dict[str, Any]:
    return {
        "num": track.num,
        "src": track.src,
        "len": track.len,
        "size": track.size,
        "filename": track.filename,
        "timingFile": track.timing_file,
    }


def book_payload(book: Book) -> dict[str, Any]:
    return _without_absent(
        {
            "id": book.id,
            "name": book.name,
            "abbreviation": book.abbreviation,
            "testament": book.testament,
            "section": book.section,
            "chapters": book.chapters,
            "chaptersN": book.chapters_n,
            "file": book.file,
            "audio": [track_payload(track) for track in book.audio],
        }
    )


def collection_payload(collection: BookCollection) -> dict[str, Any]:
    style = collection.style
    return {
        "id": collection.id,
        "collectionName": collection.collection_name,
        "collectionAbbreviation": collection.collection_abbreviation,
        "collectionDescription": collection.collection_description,
        "features": dict(collection.features),
        "books": [book_payload(book) for book in collection.books],
        "languageCode": collection.language_code,
        "languageName": collection.language_name,
        "style": {
            "font": style.font,
            "lineHeight": style.line_height,
            "numeralSystem": style.numeral_system,
            "textDirection": style.text_direction,
            "textSize": style.text_size,
            "verseNumbers": style.verse_numbers,
        },
    }


def audio_source_payload(source: AudioSource) -> dict[str, Any]:
    payload: dict[str, Any] = {"type": source.type, "name": source.name}
    if isinstance(source, (DownloadAudioSource, FcbhAudioSource)):
        payload["accessMethods"] = list(source.access_methods)
        payload["folder"] = source.folder
    if isinstance(source, DownloadAudioSource):
        payload["address"] = source.address
    elif isinstance(source, FcbhAudioSource):
        payload["key"] = source.key
        payload["damId"] = source.dam_id
    return payload


def _nested_dict(mapping: Mapping[str, Mapping[str, str]]) -> dict[str, dict[str, str]]:
    return {key: dict(value) for key, value in mapping.items()}


def config_payload(config: AppConfig) -> dict[str, Any]:
    """Return the JSON-compatible tree for a converted configuration."""

    payload: dict[str, Any] = {
        "name": config.name,
        "mainFeatures": dict(config.main_features),
        "fonts": [font_payload(font) for font in config.fonts],
        "themes": [theme_payload(theme) for theme in config.themes],
        "defaultTheme": config.default_theme,
        "traits": _without_absent(dict(config.traits)),
        "bookCollections": [
            collection_payload(collection) for collection in config.book_collections
        ],
    }
    if config.translation_mappings is not None:
        payload["translationMappings"] = _nested_dict(config.translation_mappings)
    if config.keys is not None:
        payload["keys"] = list(config.keys)
    if config.audio_sources is not None:
        payload["audio"] = {
            "sources": {
                source_id: audio_source_payload(source)
                for source_id, source in config.audio_sources.items()
            }
        }
    return _without_absent(payload)


def render_json(config: AppConfig, *, indent: int | None = None) -> str:
    """Render the configuration as JSON; compact unless `indent` is given."""

    separators = (",", ":") if indent is None else None
    return json.dumps(
        config_payload(config),
        ensure_ascii=False,
        indent=indent,
        separators=separators,
    )


def render_module(config: AppConfig) -> str:
    """Render the configuration as the sole default export of a JS module."""

    return f"export default {render_json(config)};"
