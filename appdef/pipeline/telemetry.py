"""Section telemetry helper methods for the converter.

Responsibilities:
- Emit section start/complete/failure events.
- Emit verbose item counts without affecting control flow.
- Wrap section extractors with consistent telemetry hooks.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from ..telemetry.logger import RunLogger

_SectionResult = TypeVar("_SectionResult")


class ConverterTelemetryMixin:
    """Provide section-telemetry helper methods."""

    _run_logger: RunLogger | None
    _verbose: bool

    def _on_section_start(self, section: str) -> None:
        if self._run_logger is not None:
            self._run_logger.log_section_start(section)

    def _on_section_complete(self, section: str) -> None:
        if self._run_logger is not None:
            self._run_logger.log_section_complete(section)

    def _on_section_failure(self, section: str, exc: Exception) -> None:
        """Emit section-failure event with sanitized exception metadata."""

        if self._run_logger is not None:
            self._run_logger.log_section_failure(section, type(exc).__name__)

    def _report_count(self, section: str, count: int, **context: object) -> None:
        """Emit a converted-items count when verbose diagnostics are enabled."""

        if self._verbose and self._run_logger is not None:
            self._run_logger.log_section_count(section, count, **context)

    def _run_section(
        self,
        section: str,
        action: Callable[[], _SectionResult],
    ) -> _SectionResult:
        """Run one named section and emit start/complete/failure telemetry events."""

        self._on_section_start(section)
        try:
            result = action()
        except Exception as exc:
            self._on_section_failure(section, exc)
            raise
        self._on_section_complete(section)
        return result
