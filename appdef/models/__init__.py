"""Shared typed data models for appdef.

This package contains the immutable records produced by section extractors
and assembled into one `AppConfig`.
"""

from .datatypes import (
    AppConfig,
    AssetsAudioSource,
    AudioSource,
    AudioTrack,
    Book,
    BookCollection,
    CollectionStyle,
    ColorSet,
    ColorTheme,
    DownloadAudioSource,
    FcbhAudioSource,
    Font,
    UnknownAudioSource,
)

__all__ = [
    "AppConfig",
    "AssetsAudioSource",
    "AudioSource",
    "AudioTrack",
    "Book",
    "BookCollection",
    "CollectionStyle",
    "ColorSet",
    "ColorTheme",
    "DownloadAudioSource",
    "FcbhAudioSource",
    "Font",
    "UnknownAudioSource",
]
