"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from docmodel_openapi.schema_conversion import DEFAULT_MAX_DEPTH, ConversionOptions

from .runtime_settings import ExportConfiguration


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> ExportConfiguration:
    """Load and validate the export configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    models = _parse_models_section(parsed.get("models"))
    options = parse_options_section(parsed.get("options"))
    output_path = _parse_output(parsed.get("output"), path.parent)

    return ExportConfiguration(
        path=path,
        models=models,
        options=options,
        output_path=output_path,
    )


def parse_options_section(value: Any) -> ConversionOptions:
    """Validate an `options` mapping into conversion options."""
    if value is None:
        return ConversionOptions()
    section = _require_mapping(value, "options")
    metadata_props = _normalize_string_sequence(
        section.get("metadata_props"), "options.metadata_props"
    )
    omit_fields = _normalize_string_sequence(section.get("omit_fields"), "options.omit_fields")
    omit_internals = _require_bool(section.get("omit_internals", True), "options.omit_internals")
    max_depth = _require_positive_int(
        section.get("max_depth", DEFAULT_MAX_DEPTH), "options.max_depth"
    )
    custom_field_mapping = _parse_custom_field_mapping(section.get("custom_field_mapping"))
    return ConversionOptions(
        metadata_props=metadata_props,
        omit_fields=omit_fields,
        omit_internals=omit_internals,
        custom_field_mapping=custom_field_mapping,
        max_depth=max_depth,
    )


def _parse_models_section(value: Any) -> tuple[str, ...]:
    if value is None:
        raise ConfigurationError("Configuration section 'models' is required.")
    models = _normalize_string_sequence(value, "models")
    for reference in models:
        module_name, separator, attribute = reference.partition(":")
        if not separator or not module_name or not attribute:
            raise ConfigurationError(
                f"models entry '{reference}' must use the form 'package.module:attribute'."
            )
    if not models:
        raise ConfigurationError("models must contain at least one model reference.")
    return models


def _parse_custom_field_mapping(value: Any) -> dict[str, dict[str, str]]:
    if value is None:
        return {}
    section = _require_mapping(value, "options.custom_field_mapping")
    mapping: dict[str, dict[str, str]] = {}
    for type_name, entry in section.items():
        label = f"options.custom_field_mapping.{type_name}"
        if isinstance(entry, Mapping):
            entry = entry.get("type")
        mapping[str(type_name)] = {"type": _require_non_empty_string(entry, label)}
    return mapping


def _parse_output(value: Any, base_path: Path) -> Path | None:
    if value is None:
        return None
    raw_path = _require_non_empty_string(value, "output")
    return _resolve_path(base_path, raw_path)


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
