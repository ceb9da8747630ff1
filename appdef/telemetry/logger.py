"""Structured conversion logging utilities.

Responsibilities:
- Emit concise, deterministic section-level conversion logs through `loguru`.
- Report per-section item counts when verbose diagnostics are requested.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character
        if character.isalnum() or character in {"-", "_", ".", ":", "/", ",", "[", "]"}
        else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class RunLogger:
    """Emit deterministic section logs for CLI-observable conversion activity."""

    def __init__(self, sink: TextIO | None = None, *, level: str = "INFO") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, section: str, **context: object) -> None:
        """Emit one structured conversion log line."""

        line = f"[section] level={level} section={section} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_section_start(self, section: str) -> None:
        """Emit a section-start event."""

        self._emit("DEBUG", "start", section)

    def log_section_complete(self, section: str) -> None:
        """Emit a section-complete event."""

        self._emit("DEBUG", "complete", section)

    def log_section_failure(self, section: str, error_type: str) -> None:
        """Emit a section-failure event without document payload details."""

        self._emit("ERROR", "failure", section, error_type=error_type)

    def log_section_count(self, section: str, count: int, **context: object) -> None:
        """Emit the number of items converted for one section."""

        self._emit("INFO", "converted", section, count=count, **context)
