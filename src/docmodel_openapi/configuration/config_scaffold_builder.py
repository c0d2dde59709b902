"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "docmodel-openapi.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Export configuration template for docmodel-openapi.
# Replace every <REQUIRED> placeholder before running export.
# Remove or fill <OPTIONAL> entries only when your models need them.

models:
  # Importable model references in the form package.module:attribute.
  - "<REQUIRED>"

options:
  # Extra descriptor properties copied next to enum, required and description.
  metadata_props: []
  # Field names skipped at every nesting level.
  omit_fields: []
  # Skip the version key (__v) and the id virtual.
  omit_internals: true
  # Maximum descriptor nesting depth before conversion fails.
  max_depth: 32
  # Type name overrides, checked before the built-in type rules.
  custom_field_mapping: {}
  #   uuid: string

# Destination of the OpenAPI components document, relative to this file.
output: "openapi-schemas.json"
"""


def build_placeholder_configuration() -> str:
    """Build an export configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder export configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
