"""OpenAPI components document assembly and writing."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from docmodel_openapi.schema_conversion import ConversionOptions, document_model

logger = logging.getLogger(__name__)


class SchemaExportError(Exception):
    """Raised when converted schemas cannot be combined or written."""


def build_components_document(
    models: Sequence[Any], options: ConversionOptions | None = None
) -> dict[str, Any]:
    """Return `{"components": {"schemas": ...}}` keyed by model title, in model order."""
    schemas: dict[str, Any] = {}
    for model in models:
        document = document_model(model, options)
        title = document["title"]
        if title in schemas:
            raise SchemaExportError(f"Duplicate model title detected: {title}")
        schemas[title] = document
    logger.debug("Built components document with %d schemas", len(schemas))
    return {"components": {"schemas": schemas}}


def render_json(document: Any) -> str:
    """Serialize a schema document as indented JSON text."""
    try:
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    except (TypeError, ValueError) as exc:
        raise SchemaExportError(f"Schema document is not JSON serializable: {exc}") from exc


def write_schema_document(document: Any, output_path: Path | str) -> Path:
    """Write the document as JSON and return the resolved destination.

    Raises:
      SchemaExportError: If the document cannot be serialized.
      OSError: If writing the file fails.
    """
    destination = Path(output_path)
    text = render_json(document)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")
    return destination.resolve()
