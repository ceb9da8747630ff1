"""Navigable tree over an application definition document.

Responsibilities:
- Parse `appdef.xml` markup into a fully materialized element tree.
- Expose the small lookup surface extractors rely on: descendants by tag,
  first match with an attribute filter, optional attributes, and text.
- Turn missing required structure into section-scoped `ConversionError`s.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator
from xml.etree import ElementTree as ET

from ..errors import ConversionError


class DocumentNode:
    """Read-only view over one element of the document tree."""

    __slots__ = ("_element",)

    def __init__(self, element: ET.Element) -> None:
        self._element = element

    @property
    def tag(self) -> str:
        return self._element.tag

    @property
    def text(self) -> str:
        """Concatenated text content with surrounding whitespace trimmed."""

        return "".join(self._element.itertext()).strip()

    def attr(self, name: str) -> str | None:
        """Return an attribute value, or `None` when the attribute is absent."""

        return self._element.attrib.get(name)

    def find_all(self, tag: str) -> list[DocumentNode]:
        """Return all descendants with the given tag in document order."""

        return [DocumentNode(found) for found in self._iter_descendants(tag)]

    def first(self, tag: str) -> DocumentNode | None:
        """Return the first descendant with the given tag, if any."""

        for found in self._iter_descendants(tag):
            return DocumentNode(found)
        return None

    def first_child(self, tag: str) -> DocumentNode | None:
        """Return the first direct child with the given tag, if any."""

        found = self._element.find(tag)
        if found is None:
            return None
        return DocumentNode(found)

    def first_with(self, tag: str, attribute: str, value: str) -> DocumentNode | None:
        """Return the first descendant whose tag and attribute value both match."""

        for found in self._iter_descendants(tag):
            if found.attrib.get(attribute) == value:
                return DocumentNode(found)
        return None

    def require_first(self, tag: str, section: str) -> DocumentNode:
        """Return the first descendant with the given tag or fail the section."""

        found = self.first(tag)
        if found is None:
            raise ConversionError(
                section=section,
                detail=f"Required `<{tag}>` element not found under `<{self.tag}>`.",
                hint=f"Add a `<{tag}>` element to the application definition.",
            )
        return found

    def require_attr(self, name: str, section: str) -> str:
        """Return an attribute value or fail the section."""

        value = self.attr(name)
        if value is None:
            raise ConversionError(
                section=section,
                detail=f"Required attribute `{name}` missing on `<{self.tag}>`.",
                hint=f"Set `{name}` on every `<{self.tag}>` element.",
            )
        return value

    def require_child_text(self, tag: str, section: str) -> str:
        """Return the text of the first descendant with the given tag or fail."""

        return self.require_first(tag, section).text

    def optional_text(self, tag: str) -> str | None:
        """Return the text of the first direct child with the given tag, if any."""

        found = self.first_child(tag)
        if found is None:
            return None
        return found.text

    def _iter_descendants(self, tag: str) -> Iterator[ET.Element]:
        for found in self._element.iter(tag):
            if found is not self._element:
                yield found

    def __repr__(self) -> str:
        return f"DocumentNode(<{self.tag}>)"


class AppDefDocument:
    """Loader for application definition markup."""

    @staticmethod
    def from_string(markup: str | bytes) -> DocumentNode:
        """Parse markup text and return the root node."""

        try:
            root = ET.fromstring(markup)
        except ET.ParseError as exc:
            raise ConversionError(
                section="document",
                detail=f"Application definition is not well-formed markup: {exc}",
                hint="Fix the markup syntax and rerun.",
            ) from exc
        return DocumentNode(root)

    @staticmethod
    def load(path: Path) -> DocumentNode:
        """Read and parse an application definition file."""

        try:
            markup = path.read_bytes()
        except FileNotFoundError as exc:
            raise ConversionError(
                section="document",
                detail=f"Application definition not found: `{path}`.",
                hint="Point the converter at a data directory containing `appdef.xml`.",
            ) from exc
        return AppDefDocument.from_string(markup)
