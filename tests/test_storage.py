"""Tests for generated file storage."""

from __future__ import annotations

import json
from pathlib import Path

from appdef.io.storage import ArtifactStore


def test_artifact_store_writes_text_and_json(tmp_path: Path) -> None:
    """Files should land below the store root with parent directories created."""

    store = ArtifactStore(tmp_path / "out")

    module_path = store.save_text(Path("src/config.js"), "export default {};")
    json_path = store.save_json(Path("build/config.json"), {"name": "Écoute"})

    assert module_path == tmp_path / "out" / "src" / "config.js"
    assert module_path.read_text(encoding="utf-8") == "export default {};"
    assert json.loads(json_path.read_text(encoding="utf-8")) == {"name": "Écoute"}
    assert "Écoute" in json_path.read_text(encoding="utf-8")
