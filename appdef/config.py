"""Converter settings model and loaders.

Responsibilities:
- Define converter run settings as a typed dataclass.
- Provide loader entry points for YAML- and environment-based settings.

Key types:
- `ConverterSettings`: normalized settings for one conversion run.
- `SettingsLoader`: static construction helpers for `ConverterSettings`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_required_boolean,
)
from .pipeline.task import DEFAULT_APPDEF_NAME, DEFAULT_MODULE_PATH


@dataclass(slots=True)
class ConverterSettings:
    """Settings for one conversion run.

    Attributes:
        data_dir: Directory holding the application definition.
        output_dir: Root directory generated files are written under.
        module_path: Module path relative to `output_dir`.
        appdef_name: File name of the application definition inside `data_dir`.
        verbose: Whether per-section counts are reported.
        json_path: Optional extra plain-JSON output relative to `output_dir`.
    """

    data_dir: Path
    output_dir: Path = Path(".")
    module_path: str = DEFAULT_MODULE_PATH
    appdef_name: str = DEFAULT_APPDEF_NAME
    verbose: bool = False
    json_path: str | None = None

    def validate(self) -> None:
        """Validate settings values before conversion."""

        self._require_relative(self.module_path, "module_path")
        self._require_non_empty(self.appdef_name, "appdef_name")
        if self.json_path is not None:
            self._require_relative(self.json_path, "json_path")

    @staticmethod
    def _require_non_empty(value: str, field_name: str) -> None:
        if not value.strip():
            raise ValueError(f"`{field_name}` must be a non-empty string.")

    @staticmethod
    def _require_relative(value: str, field_name: str) -> None:
        ConverterSettings._require_non_empty(value, field_name)
        if Path(value).is_absolute():
            raise ValueError(f"`{field_name}` must be relative to `output_dir`.")


class SettingsLoader:
    """Factory methods for creating `ConverterSettings` from external sources."""

    _REQUIRED_YAML_KEYS = frozenset({"data_dir"})
    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "data_dir",
            "output_dir",
            "module_path",
            "appdef_name",
            "verbose",
            "json_path",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> ConverterSettings:
        """Create validated settings from a YAML file."""

        raw_text = path.read_text(encoding="utf-8")
        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML settings `{path}` must contain a top-level mapping/object.")

        return SettingsLoader._build_settings_from_mapping(
            payload, source_label=f"YAML `{path}`"
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ConverterSettings:
        """Create validated settings from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        data_dir = normalize_optional_string(env_map.get("APPDEF_DATA_DIR"))
        if data_dir is None:
            raise ValueError("Environment variable `APPDEF_DATA_DIR` is required.")
        output_dir = normalize_optional_string(env_map.get("APPDEF_OUTPUT_DIR")) or "."
        module_path = (
            normalize_optional_string(env_map.get("APPDEF_MODULE_PATH")) or DEFAULT_MODULE_PATH
        )
        raw_verbose = normalize_optional_string(env_map.get("APPDEF_VERBOSE"))
        verbose = (
            parse_required_boolean(raw_verbose, "APPDEF_VERBOSE")
            if raw_verbose is not None
            else False
        )

        settings = ConverterSettings(
            data_dir=Path(data_dir),
            output_dir=Path(output_dir),
            module_path=module_path,
            verbose=verbose,
            json_path=normalize_optional_string(env_map.get("APPDEF_JSON_PATH")),
        )
        settings.validate()
        return settings

    @staticmethod
    def _build_settings_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> ConverterSettings:
        """Build validated settings from a parsed mapping payload."""

        SettingsLoader._validate_yaml_keys(payload, source_label)

        data_dir = normalize_optional_string(payload["data_dir"])
        if data_dir is None:
            raise ValueError(f"{source_label} requires non-empty `data_dir`.")

        settings = ConverterSettings(
            data_dir=Path(data_dir),
            output_dir=Path(normalize_optional_string(payload.get("output_dir")) or "."),
            module_path=(
                normalize_optional_string(payload.get("module_path")) or DEFAULT_MODULE_PATH
            ),
            appdef_name=(
                normalize_optional_string(payload.get("appdef_name")) or DEFAULT_APPDEF_NAME
            ),
            verbose=SettingsLoader._optional_boolean(payload, "verbose", source_label, False),
            json_path=normalize_optional_string(payload.get("json_path")),
        )
        settings.validate()
        return settings

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Validate supported and required YAML keys."""

        unknown = sorted(set(payload).difference(SettingsLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        missing = sorted(
            key for key in SettingsLoader._REQUIRED_YAML_KEYS if key not in payload
        )
        if missing:
            key_list = ", ".join(missing)
            raise ValueError(f"{source_label} is missing required key(s): {key_list}.")

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
