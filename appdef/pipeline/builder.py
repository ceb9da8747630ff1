"""Accumulator for section results.

Section extractors hand their finished, immutable slices to `ConfigBuilder`;
`build` assembles the `AppConfig` once every required slice is present.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from ..models.datatypes import AppConfig

_REQUIRED_SLOTS = (
    "name",
    "main_features",
    "fonts",
    "themes",
    "traits",
    "book_collections",
)
_OPTIONAL_SLOTS = (
    "default_theme",
    "translation_mappings",
    "keys",
    "audio_sources",
)


def _freeze(value: Any) -> Any:
    """Wrap nested mappings in read-only proxies."""

    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    return value


@dataclass(slots=True)
class ConfigBuilder:
    """Collects section slices; each slot is written at most once."""

    _slots: dict[str, Any] = field(default_factory=dict)

    def set(self, slot: str, value: Any) -> None:
        """Store the result of one section."""

        if slot not in _REQUIRED_SLOTS and slot not in _OPTIONAL_SLOTS:
            raise KeyError(f"Unknown configuration slot `{slot}`.")
        if slot in self._slots:
            raise ValueError(f"Configuration slot `{slot}` was already set.")
        self._slots[slot] = value

    def build(self) -> AppConfig:
        """Assemble the final configuration.

        Raises:
            ValueError: If a required slot was never set.
        """

        missing = [slot for slot in _REQUIRED_SLOTS if slot not in self._slots]
        if missing:
            raise ValueError(f"Configuration is missing section(s): {', '.join(missing)}.")
        return AppConfig(**{slot: _freeze(value) for slot, value in self._slots.items()})
