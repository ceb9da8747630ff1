"""Color theme extraction.

Responsibilities:
- Collect the global `<colors type=...>` definitions once; groups without
  a `type` are skipped with a warning.
- Build each theme's color sets by picking, per color, the `<cm>` mapping
  whose `theme` attribute names that theme.
- Track the theme flagged as default; the last flagged theme wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from loguru import logger

from ..io.document import DocumentNode
from ..models.datatypes import ColorSet, ColorTheme

SECTION = "themes"


@dataclass(frozen=True, slots=True)
class ThemesResult:
    """Themes in document order plus the default theme name."""

    themes: tuple[ColorTheme, ...]
    default_theme: str | None


@dataclass(frozen=True, slots=True)
class _ColorDefinition:
    name: str | None
    values_by_theme: dict[str, str]


@dataclass(frozen=True, slots=True)
class _ColorGroup:
    type: str
    colors: tuple[_ColorDefinition, ...]


def _collect_color_groups(root: DocumentNode) -> tuple[_ColorGroup, ...]:
    groups = []
    for colors_block in root.find_all("colors"):
        group_type = colors_block.attr("type")
        if group_type is None:
            logger.warning("{} colors group skipped: expected attribute `type`", SECTION)
            continue
        definitions = []
        for color in colors_block.find_all("color"):
            values_by_theme: dict[str, str] = {}
            for mapping in color.find_all("cm"):
                theme = mapping.attr("theme")
                if theme is not None and theme not in values_by_theme:
                    values_by_theme[theme] = mapping.attr("value") or ""
            definitions.append(_ColorDefinition(color.attr("name"), values_by_theme))
        groups.append(_ColorGroup(type=group_type, colors=tuple(definitions)))
    return tuple(groups)


def _color_sets_for(theme_name: str, groups: tuple[_ColorGroup, ...]) -> tuple[ColorSet, ...]:
    color_sets = []
    for group in groups:
        colors: dict[str, str] = {}
        for definition in group.colors:
            value = definition.values_by_theme.get(theme_name)
            # Colors without a value for this theme are left out, not defaulted.
            if definition.name and value:
                colors[definition.name] = value
        color_sets.append(ColorSet(type=group.type, colors=MappingProxyType(colors)))
    return tuple(color_sets)


def extract_themes(root: DocumentNode) -> ThemesResult:
    """Extract every `<color-theme>` of the `<color-themes>` block."""

    themes_block = root.require_first("color-themes", SECTION)
    groups = _collect_color_groups(root)

    themes = []
    default_theme = None
    for theme_node in themes_block.find_all("color-theme"):
        name = theme_node.require_attr("name", SECTION)
        themes.append(
            ColorTheme(
                name=name,
                enabled=theme_node.attr("enabled") == "true",
                color_sets=_color_sets_for(name, groups),
            )
        )
        if theme_node.attr("default") == "true":
            default_theme = name
    return ThemesResult(themes=tuple(themes), default_theme=default_theme)
