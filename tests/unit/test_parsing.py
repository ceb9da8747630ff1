"""Unit tests for value coercion and shared settings parsing helpers."""

from __future__ import annotations

import pytest

from appdef.parsing import (
    coerce_config_value,
    normalize_optional_string,
    parse_int_attribute,
    parse_permissive_boolean,
    parse_required_boolean,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("42", 42), ("0", 0), ("-7", -7), ("+3", 3)],
)
def test_coerce_config_value_returns_integers_for_integer_literals(raw: str, expected: int) -> None:
    """Colon-free integer literals should become integers."""

    value = coerce_config_value(raw)

    assert value == expected
    assert type(value) is int


def test_coerce_config_value_returns_booleans_for_exact_tokens() -> None:
    """Exactly `true`/`false` should become booleans."""

    assert coerce_config_value("true") is True
    assert coerce_config_value("false") is False


@pytest.mark.parametrize(
    "raw",
    ["12:30", "abc", "True", "FALSE", "1 2 3", "3.5", "12px", "", " 42", "1_000"],
)
def test_coerce_config_value_passes_other_strings_through(raw: str) -> None:
    """Everything else, including times and case variants, stays unchanged."""

    assert coerce_config_value(raw) == raw


def test_parse_int_attribute_rejects_non_integer_values() -> None:
    """Required integer attributes should fail with the field named."""

    assert parse_int_attribute(" 150 ", "line-height") == 150
    with pytest.raises(ValueError, match=r"`line-height` must be an integer"):
        parse_int_attribute("1.5em", "line-height")


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string("  value  ") == "value"


@pytest.mark.parametrize(
    ("token", "expected"),
    [("TrUe", True), ("  ON ", True), ("YeS", True), ("FALSE", False), (" oFf ", False)],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(token: str, expected: bool) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "   ", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


def test_parse_required_boolean_raises_for_invalid_token() -> None:
    """Strict boolean parsing should name the offending field."""

    with pytest.raises(
        ValueError,
        match=(
            r"`verbose` must be a boolean value "
            r"\(`true`/`false`, `1`/`0`, `yes`/`no`\)\."
        ),
    ):
        parse_required_boolean("maybe", "verbose")
