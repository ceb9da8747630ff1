"""Section extractors for application definition documents.

Each extractor consumes one named subtree and returns one immutable slice of
the final `AppConfig`.
"""

from .audio_sources import extract_audio_sources
from .collections import extract_collections
from .features import MAIN_FEATURES_TYPE, extract_features
from .fonts import extract_fonts
from .themes import ThemesResult, extract_themes
from .traits import extract_traits
from .translations import extract_keys, extract_translation_mappings

__all__ = [
    "MAIN_FEATURES_TYPE",
    "ThemesResult",
    "extract_audio_sources",
    "extract_collections",
    "extract_features",
    "extract_fonts",
    "extract_keys",
    "extract_themes",
    "extract_traits",
    "extract_translation_mappings",
]
