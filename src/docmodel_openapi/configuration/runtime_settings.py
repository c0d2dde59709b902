"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from docmodel_openapi.schema_conversion import ConversionOptions


@dataclass(frozen=True)
class ExportConfiguration:
    """Top-level export configuration aggregate."""

    path: Path
    models: tuple[str, ...]
    options: ConversionOptions
    output_path: Path | None
