"""Domain exceptions for conversion and CLI diagnostics."""

from __future__ import annotations


class ConversionError(RuntimeError):
    """Raised when the application definition lacks required structure."""

    def __init__(
        self,
        *,
        section: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a section-scoped conversion error."""

        super().__init__(detail)
        self.section = section
        self.detail = detail
        self.hint = hint
