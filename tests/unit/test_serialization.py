"""Unit tests for configuration serialization."""

from __future__ import annotations

import json

from appdef.io.document import DocumentNode
from appdef.pipeline.converter import convert
from appdef.pipeline.serialization import config_payload, render_json, render_module


def test_config_payload_uses_downstream_field_names(canonical_root: DocumentNode) -> None:
    """Payload keys should follow the names consumed by downstream build steps."""

    payload = config_payload(convert(canonical_root))

    assert list(payload) == [
        "name",
        "mainFeatures",
        "fonts",
        "themes",
        "defaultTheme",
        "traits",
        "bookCollections",
        "translationMappings",
        "keys",
        "audio",
    ]
    assert payload["fonts"][1] == {
        "family": "charis",
        "name": "Charis SIL",
        "file": "CharisSIL-B.ttf",
        "fontStyle": "normal",
        "fontWeight": "bold",
    }
    assert payload["themes"][2] == {
        "name": "Dark",
        "enabled": False,
        "colorSets": [
            {"type": "main", "colors": {"PrimaryColor": "#000000"}},
            {"type": "reader", "colors": {"TextColor": "#CCCCCC"}},
        ],
    }
    collection = payload["bookCollections"][0]
    assert collection["style"] == {
        "font": "andika",
        "lineHeight": 150,
        "numeralSystem": "Default",
        "textDirection": "LTR",
        "textSize": 100,
        "verseNumbers": "superscript",
    }
    assert collection["books"][0]["audio"][0] == {
        "num": 1,
        "src": "A01",
        "len": 315,
        "size": 5040000,
        "filename": "B01___01_Genesis.mp3",
        "timingFile": "B01___01_Genesis.txt",
    }


def test_config_payload_omits_absent_values(canonical_root: DocumentNode) -> None:
    """Absent optional values are dropped rather than written as null."""

    payload = config_payload(convert(canonical_root))

    assert payload["traits"] == {"has-audio": "true"}
    exodus = payload["bookCollections"][0]["books"][1]
    assert exodus == {"id": "EXO", "chapters": 40, "chaptersN": "1-40", "audio": []}
    assert payload["bookCollections"][1]["collectionName"] == ""


def test_config_payload_renders_audio_source_variants(canonical_root: DocumentNode) -> None:
    """Each audio source variant should carry only its own fields."""

    sources = config_payload(convert(canonical_root))["audio"]["sources"]

    assert sources["A01"] == {"type": "assets", "name": "Bundled"}
    assert sources["A02"] == {
        "type": "download",
        "name": "Web server",
        "accessMethods": ["download", "stream"],
        "folder": "audio",
        "address": "https://example.org/audio/",
    }
    assert sources["A03"] == {
        "type": "fcbh",
        "name": "Bible Brain",
        "accessMethods": ["stream"],
        "folder": "fcbh",
        "key": "secret-key",
        "damId": "ENGWEBN2DA",
    }
    assert sources["A04"] == {"type": "other", "name": "Custom"}


def test_config_payload_omits_absent_optional_sections(make_root) -> None:
    """A minimal document should not produce optional top-level keys."""

    root = make_root(
        "<app-name>Minimal</app-name><features type='main'/><fonts/>"
        "<color-themes/><traits/>"
    )

    payload = config_payload(convert(root))

    assert payload == {
        "name": "Minimal",
        "mainFeatures": {},
        "fonts": [],
        "themes": [],
        "traits": {},
        "bookCollections": [],
    }


def test_render_module_exports_compact_json(canonical_root: DocumentNode) -> None:
    """The module text should wrap compact JSON in a default export."""

    config = convert(canonical_root)

    module = render_module(config)
    compact = render_json(config)

    assert module == f"export default {compact};"
    assert compact.startswith('{"name":"Sample Scripture App","mainFeatures":{')
    assert json.loads(compact) == config_payload(config)
    assert "Paramètres" in compact
