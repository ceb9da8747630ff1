"""Shared parsing helpers for attribute values and settings normalization."""

from __future__ import annotations

import re

FeatureValue = int | bool | str
"""Closed set of scalar types a coerced attribute value may take."""

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def coerce_config_value(raw: str) -> FeatureValue:
    """Coerce a raw attribute string into an integer, boolean, or string.

    Precedence is fixed: a colon-free base-10 integer literal becomes `int`,
    the exact tokens `true`/`false` become `bool`, and anything else is
    returned unchanged. Space-separated lists, enums, and time literals are
    not interpreted and pass through as opaque strings.

    Args:
        raw: Attribute or text value exactly as it appears in the document.

    Returns:
        The coerced scalar value.
    """

    if ":" not in raw and _INTEGER_PATTERN.fullmatch(raw):
        return int(raw)
    if raw == "true":
        return True
    if raw == "false":
        return False
    return raw


def parse_int_attribute(raw: str, field_name: str) -> int:
    """Parse a required integer attribute value.

    Raises:
        ValueError: If the value is not a base-10 integer literal.
    """

    text = raw.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"`{field_name}` must be an integer, got `{raw}`.")
    return int(text)


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_boolean(value: str, field_name: str) -> bool:
    """Parse a required settings boolean value from accepted textual tokens.

    Args:
        value: Text value to parse.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the token is not one of the accepted boolean values.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed

    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )
