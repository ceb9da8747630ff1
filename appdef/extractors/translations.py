"""Translation mapping and key list extraction.

Both blocks are optional: when absent the caller leaves the corresponding
configuration field unset instead of defaulting it to an empty value.
"""

from __future__ import annotations

from loguru import logger

from ..io.document import DocumentNode

TRANSLATIONS_SECTION = "translation-mappings"
KEYS_SECTION = "keys"


def extract_translation_mappings(root: DocumentNode) -> dict[str, dict[str, str]] | None:
    """Extract `<tm id=...>` entries as id -> {language -> text}."""

    block = root.first("translation-mappings")
    if block is None:
        return None

    mappings: dict[str, dict[str, str]] = {}
    for mapping in block.find_all("tm"):
        mapping_id = mapping.attr("id")
        if mapping_id is None:
            logger.warning("{} entry skipped: expected attribute `id`", TRANSLATIONS_SECTION)
            continue
        localizations: dict[str, str] = {}
        for localization in mapping.find_all("t"):
            lang = localization.attr("lang")
            if lang is None:
                logger.warning(
                    "{} `{}` localization skipped: expected attribute `lang`",
                    TRANSLATIONS_SECTION,
                    mapping_id,
                )
                continue
            localizations[lang] = localization.text
        mappings[mapping_id] = localizations
    return mappings


def extract_keys(root: DocumentNode) -> tuple[str, ...] | None:
    """Extract the ordered `<key>` texts of the `<keys>` block."""

    block = root.first("keys")
    if block is None:
        return None
    return tuple(key.text for key in block.find_all("key"))
