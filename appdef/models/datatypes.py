"""Core datatypes for a converted application definition.

Responsibilities:
- Represent immutable records produced by the section extractors.
- Provide explicit typing so the aggregated result stays JSON-serializable.

Key types:
- `AppConfig`, `Font`, `ColorTheme`, `ColorSet`, `BookCollection`, `Book`,
  `CollectionStyle`, `AudioTrack`, and the audio source variants
  `AssetsAudioSource`, `DownloadAudioSource`, `FcbhAudioSource`,
  `UnknownAudioSource`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ..parsing import FeatureValue

Features = Mapping[str, FeatureValue]
Traits = Mapping[str, str | None]
TranslationMappings = Mapping[str, Mapping[str, str]]


@dataclass(frozen=True, slots=True)
class Font:
    """One declared font face.

    Attributes:
        family: Family identifier referenced by styles.
        name: Human-readable font name.
        file: Font file reference.
        font_weight: CSS-like weight token.
        font_style: CSS-like style token.
    """

    family: str
    name: str
    file: str
    font_weight: str
    font_style: str


@dataclass(frozen=True, slots=True)
class ColorSet:
    """Colors of one UI surface category resolved for a single theme."""

    type: str
    colors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True, slots=True)
class ColorTheme:
    """A named color theme with its per-surface color sets."""

    name: str
    enabled: bool
    color_sets: tuple[ColorSet, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class CollectionStyle:
    """Rendering style shared by every book in one collection.

    Attributes:
        font: Text font family token.
        line_height: Line height value.
        numeral_system: Numeral system token.
        text_direction: Text direction token (`LTR`/`RTL`).
        text_size: Base text size.
        verse_numbers: Verse number style token.
    """

    font: str
    line_height: int
    numeral_system: str
    text_direction: str
    text_size: int
    verse_numbers: str


@dataclass(frozen=True, slots=True)
class AudioTrack:
    """Audio asset attached to one book page.

    Attributes:
        num: Page number the track belongs to.
        src: Source locator of the audio file.
        len: Length value as declared by the document.
        size: Size of the audio file in bytes.
        filename: Audio file name.
        timing_file: Companion timing file reference.
    """

    num: int
    src: str
    len: int
    size: int
    filename: str
    timing_file: str


@dataclass(frozen=True, slots=True)
class Book:
    """One book of a collection with its paginated audio tracks.

    Attributes:
        id: Book identifier.
        chapters: Number of chapters.
        chapters_n: Raw chapter notation such as `1-34`.
        name: Optional display name.
        abbreviation: Optional abbreviation.
        testament: Optional testament label.
        section: Optional section label.
        file: Optional source file reference with a canonical `.usfm` suffix.
        audio: Ordered audio tracks, one per page that carries audio.
    """

    id: str
    chapters: int
    chapters_n: str
    name: str | None = None
    abbreviation: str | None = None
    testament: str | None = None
    section: str | None = None
    file: str | None = None
    audio: tuple[AudioTrack, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class BookCollection:
    """A localized set of books sharing language, style, and features."""

    id: str
    collection_name: str
    collection_abbreviation: str
    collection_description: str
    features: Features
    language_code: str
    language_name: str
    style: CollectionStyle
    books: tuple[Book, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class AssetsAudioSource:
    """Audio bundled with the application assets."""

    name: str
    type: str = "assets"


@dataclass(frozen=True, slots=True)
class DownloadAudioSource:
    """Audio fetched from a plain remote address."""

    name: str
    access_methods: tuple[str, ...]
    folder: str
    address: str
    type: str = "download"


@dataclass(frozen=True, slots=True)
class FcbhAudioSource:
    """Audio fetched from the Faith Comes By Hearing provider."""

    name: str
    access_methods: tuple[str, ...]
    folder: str
    key: str
    dam_id: str
    type: str = "fcbh"


@dataclass(frozen=True, slots=True)
class UnknownAudioSource:
    """Audio source of an unrecognized type; only shared fields are kept."""

    type: str
    name: str


AudioSource = AssetsAudioSource | DownloadAudioSource | FcbhAudioSource | UnknownAudioSource


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Fully converted application definition.

    Attributes:
        name: Application name.
        main_features: Global feature flags.
        fonts: Declared fonts in document order.
        themes: Color themes in document order.
        traits: Raw trait values keyed by trait name.
        book_collections: Book collections in document order.
        default_theme: Name of the theme flagged as default, if any.
        translation_mappings: UI string translations, or `None` when absent.
        keys: Ordered key strings, or `None` when absent.
        audio_sources: Audio sources keyed by id, or `None` when absent.
    """

    name: str
    main_features: Features
    fonts: tuple[Font, ...]
    themes: tuple[ColorTheme, ...]
    traits: Traits
    book_collections: tuple[BookCollection, ...]
    default_theme: str | None = None
    translation_mappings: TranslationMappings | None = None
    keys: tuple[str, ...] | None = None
    audio_sources: Mapping[str, AudioSource] | None = None
