"""Shared pytest fixtures for the full appdef test suite."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from appdef.io.document import AppDefDocument, DocumentNode
from tests.fixture_paths import (
    canonical_appdef_fixture_path as resolve_canonical_appdef_fixture_path,
)


@pytest.fixture
def canonical_appdef_fixture_path() -> Path:
    """Provide the canonical `appdef.xml` fixture path."""

    return resolve_canonical_appdef_fixture_path()


@pytest.fixture
def canonical_root(canonical_appdef_fixture_path: Path) -> DocumentNode:
    """Provide the parsed root node of the canonical fixture."""

    return AppDefDocument.load(canonical_appdef_fixture_path)


@pytest.fixture
def make_root():
    """Build a root node from an inline application definition body."""

    def _make_root(body: str) -> DocumentNode:
        return AppDefDocument.from_string(f"<app-definition>{body}</app-definition>")

    return _make_root


@pytest.fixture(autouse=True)
def _reset_loguru_handlers() -> Iterator[None]:
    """Drop sinks bound to per-test streams so later tests never write to closed files."""

    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
