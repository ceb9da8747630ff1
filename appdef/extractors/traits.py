"""Trait extraction; values stay raw strings or absent."""

from __future__ import annotations

from loguru import logger

from ..io.document import DocumentNode

SECTION = "traits"


def extract_traits(root: DocumentNode) -> dict[str, str | None]:
    """Extract `<trait name=... value=...>` entries of the `<traits>` block."""

    traits_block = root.require_first("traits", SECTION)
    traits: dict[str, str | None] = {}
    for trait in traits_block.find_all("trait"):
        name = trait.attr("name")
        if name is None:
            logger.warning("traits entry skipped: expected attribute `name`")
            continue
        traits[name] = trait.attr("value")
    return traits
