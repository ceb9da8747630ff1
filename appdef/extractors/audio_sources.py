"""Audio source extraction.

Each `<audio-source>` is keyed by its `id` and shaped by its `type`:

- `assets`: only `type` and `name`.
- `download`: adds access methods, folder, and remote address.
- `fcbh`: adds access methods, folder, API key, and DAM id.

Sources of any other type keep `type` and `name` only. A document without
audio sources yields `None` so the registry is omitted from the result.
"""

from __future__ import annotations

from ..io.document import DocumentNode
from ..models.datatypes import (
    AssetsAudioSource,
    AudioSource,
    DownloadAudioSource,
    FcbhAudioSource,
    UnknownAudioSource,
)

SECTION = "audio-sources"
ACCESS_METHOD_SEPARATOR = "|"


def _access_methods(source: DocumentNode) -> tuple[str, ...]:
    raw = source.require_first("access-methods", SECTION).require_attr("value", SECTION)
    return tuple(raw.split(ACCESS_METHOD_SEPARATOR))


def extract_audio_source(source: DocumentNode) -> AudioSource:
    """Extract one `<audio-source>` into its type-specific variant."""

    source_type = source.require_attr("type", SECTION)
    name = source.require_child_text("name", SECTION)

    if source_type == "assets":
        return AssetsAudioSource(name=name)
    if source_type == "download":
        return DownloadAudioSource(
            name=name,
            access_methods=_access_methods(source),
            folder=source.require_child_text("folder", SECTION),
            address=source.require_child_text("address", SECTION),
        )
    if source_type == "fcbh":
        return FcbhAudioSource(
            name=name,
            access_methods=_access_methods(source),
            folder=source.require_child_text("folder", SECTION),
            key=source.require_child_text("key", SECTION),
            dam_id=source.require_child_text("dam-id", SECTION),
        )
    return UnknownAudioSource(type=source_type, name=name)


def extract_audio_sources(root: DocumentNode) -> dict[str, AudioSource] | None:
    """Extract the `<audio-sources>` registry keyed by source id."""

    block = root.first("audio-sources")
    if block is None:
        return None
    entries = block.find_all("audio-source")
    if not entries:
        return None
    return {
        entry.require_attr("id", SECTION): extract_audio_source(entry)
        for entry in entries
    }
