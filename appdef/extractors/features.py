"""Feature flag extraction.

Responsibilities:
- Read `<e name=... value=...>` pairs from a `<features type=...>` block.
- Coerce each value with `coerce_config_value`.
- Skip incomplete pairs with a warning instead of failing the document.
"""

from __future__ import annotations

from loguru import logger

from ..errors import ConversionError
from ..io.document import DocumentNode
from ..parsing import FeatureValue, coerce_config_value

MAIN_FEATURES_TYPE = "main"
COLLECTION_FEATURES_TYPE = "bc"


def extract_features(root: DocumentNode, features_type: str, section: str) -> dict[str, FeatureValue]:
    """Extract the feature map of the first `<features>` block of the given type.

    Args:
        root: Node to search below.
        features_type: Value of the block's `type` attribute (`main` or `bc`).
        section: Section label used for diagnostics and errors.

    Raises:
        ConversionError: If no matching `<features>` block exists.
    """

    block = root.first_with("features", "type", features_type)
    if block is None:
        raise ConversionError(
            section=section,
            detail=f"Features block `<features type=\"{features_type}\">` not found.",
            hint="Every application definition needs its features block.",
        )

    features: dict[str, FeatureValue] = {}
    for entry in block.find_all("e"):
        name = entry.attr("name")
        value = entry.attr("value")
        if name is None or value is None:
            logger.warning(
                "{} entry skipped: expected attributes `name` and `value` (name={})",
                section,
                name,
            )
            continue
        features[name] = coerce_config_value(value)
    return features
