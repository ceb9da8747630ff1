"""Font list extraction.

Every declared font must resolve completely: a font entry missing any of its
five fields aborts the conversion.
"""

from __future__ import annotations

from ..errors import ConversionError
from ..io.document import DocumentNode
from ..models.datatypes import Font

SECTION = "fonts"


def _style_value(font: DocumentNode, prop: str) -> str:
    declaration = font.first_with("sd", "property", prop)
    if declaration is None:
        raise ConversionError(
            section=SECTION,
            detail=f"Font `{font.attr('family')}` has no `<sd property=\"{prop}\">` declaration.",
            hint=f"Declare `{prop}` for every font.",
        )
    return declaration.require_attr("value", SECTION)


def extract_font(font: DocumentNode) -> Font:
    """Extract one `<font>` entry."""

    return Font(
        family=font.require_attr("family", SECTION),
        name=font.require_child_text("font-name", SECTION),
        file=font.require_child_text("f", SECTION),
        font_style=_style_value(font, "font-style"),
        font_weight=_style_value(font, "font-weight"),
    )


def extract_fonts(root: DocumentNode) -> tuple[Font, ...]:
    """Extract all fonts of the `<fonts>` block in document order."""

    fonts_block = root.require_first("fonts", SECTION)
    return tuple(extract_font(font) for font in fonts_block.find_all("font"))
