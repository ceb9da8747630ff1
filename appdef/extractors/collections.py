"""Book collection extraction.

Responsibilities:
- Extract one `BookCollection` per `<books>` block, in document order.
- Extract books with chapter data, optional display labels, the canonical
  source file name, and page audio tracks.
- Extract the mandatory `<styles-info>` and `<writing-system>` blocks and the
  optional localized collection labels.

Failure policy:
- Missing collection features, styles, or writing system is fatal.
- Pages without `<audio>` contribute no track.
- Missing display labels default to empty strings (collection) or `None` (book).
"""

from __future__ import annotations

import re
from types import MappingProxyType

from ..errors import ConversionError
from ..io.document import DocumentNode
from ..models.datatypes import AudioTrack, Book, BookCollection, CollectionStyle
from ..parsing import parse_int_attribute
from .features import COLLECTION_FEATURES_TYPE, extract_features

SECTION = "book-collections"
CANONICAL_BOOK_SUFFIX = ".usfm"

_FILE_EXTENSION_PATTERN = re.compile(r"\.\w*$")


def canonical_book_file(file_name: str) -> str:
    """Rewrite a trailing file extension to the canonical book suffix.

    Names without an extension are returned unchanged.
    """

    return _FILE_EXTENSION_PATTERN.sub(CANONICAL_BOOK_SUFFIX, file_name, count=1)


def _int_attr(node: DocumentNode, name: str) -> int:
    raw = node.require_attr(name, SECTION)
    try:
        return parse_int_attribute(raw, name)
    except ValueError as exc:
        raise ConversionError(
            section=SECTION,
            detail=f"Attribute `{name}` on `<{node.tag}>` is not an integer: `{raw}`.",
        ) from exc


def extract_audio_track(page: DocumentNode) -> AudioTrack | None:
    """Extract the audio track of one `<page>`, or `None` when it has no audio."""

    audio = page.first("audio")
    if audio is None:
        return None
    audio_file = audio.require_first("f", SECTION)
    return AudioTrack(
        num=_int_attr(page, "num"),
        src=audio_file.require_attr("src", SECTION),
        len=_int_attr(audio_file, "len"),
        size=_int_attr(audio_file, "size"),
        filename=audio_file.text,
        timing_file=audio.require_child_text("y", SECTION),
    )


def extract_book(book: DocumentNode) -> Book:
    """Extract one `<book>` entry with its audio tracks."""

    source_file = book.optional_text("f")
    tracks = (extract_audio_track(page) for page in book.find_all("page"))
    return Book(
        id=book.require_attr("id", SECTION),
        chapters=_int_attr(book.require_first("ct", SECTION), "c"),
        chapters_n=book.require_first("cn", SECTION).require_attr("value", SECTION),
        name=book.optional_text("n"),
        abbreviation=book.optional_text("v"),
        testament=book.optional_text("g"),
        section=book.optional_text("sg"),
        file=canonical_book_file(source_file) if source_file is not None else None,
        audio=tuple(track for track in tracks if track is not None),
    )


def extract_style(collection: DocumentNode) -> CollectionStyle:
    """Extract the collection `<styles-info>` block; all six fields are required."""

    styles = collection.require_first("styles-info", SECTION)

    def value_of(tag: str) -> str:
        return styles.require_first(tag, SECTION).require_attr("value", SECTION)

    return CollectionStyle(
        font=styles.require_first("text-font", SECTION).require_attr("family", SECTION),
        line_height=_int_attr(styles.require_first("line-height", SECTION), "value"),
        numeral_system=value_of("numeral-system"),
        text_direction=value_of("text-direction"),
        text_size=_int_attr(styles.require_first("text-size", SECTION), "value"),
        verse_numbers=value_of("verse-number-style"),
    )


def _label(collection: DocumentNode, tag: str) -> str:
    found = collection.first(tag)
    return found.text if found is not None else ""


def extract_collection(collection: DocumentNode) -> BookCollection:
    """Extract one `<books>` block into a `BookCollection`."""

    features = extract_features(collection, COLLECTION_FEATURES_TYPE, SECTION)
    books = tuple(extract_book(book) for book in collection.find_all("book"))
    style = extract_style(collection)
    writing_system = collection.require_first("writing-system", SECTION)
    language_name = writing_system.require_first("display-names", SECTION).require_child_text(
        "form", SECTION
    )

    return BookCollection(
        id=collection.attr("id") or "",
        collection_name=_label(collection, "book-collection-name"),
        collection_abbreviation=_label(collection, "book-collection-abbrev"),
        collection_description=_label(collection, "book-collection-description"),
        features=MappingProxyType(features),
        language_code=writing_system.require_attr("code", SECTION),
        language_name=language_name,
        style=style,
        books=books,
    )


def extract_collections(root: DocumentNode) -> tuple[BookCollection, ...]:
    """Extract every `<books>` block of the document in order."""

    return tuple(extract_collection(collection) for collection in root.find_all("books"))
