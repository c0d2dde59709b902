"""Document model to root JSON Schema assembly."""

from __future__ import annotations

import logging
from typing import Any

from docmodel_openapi.conversion_limits import DocumentSchemaError

from .conversion_models import ConversionOptions
from .tree_walker import walk_schema_tree

logger = logging.getLogger(__name__)


def document_model(model: Any, options: ConversionOptions | None = None) -> dict[str, Any]:
    """Build the root JSON Schema object for a document model.

    Args:
      model: Object exposing `name` (or `model_name`) and `schema`.
      options: Conversion options; defaults apply when omitted.

    Returns:
      `{"title", "properties", "required"}` with `required` omitted when no
      top-level field is required.

    Raises:
      DocumentSchemaError: If the model lacks a schema or a field tree.
    """
    options = options or ConversionOptions()
    title = model_title(model)
    schema = getattr(model, "schema", None)
    if schema is None:
        raise DocumentSchemaError(f"Model '{title}' does not define a schema.")

    properties: dict[str, Any] = {}
    required: list[str] = []
    for field in walk_schema_tree(schema, options):
        if field.type is None or field.name is None:
            logger.debug("Dropping unmapped field '%s' from model '%s'", field.name, title)
            continue
        properties[field.name] = field.to_json_schema()
        if field.required:
            required.append(field.name)

    document: dict[str, Any] = {"title": title, "properties": properties}
    if required:
        document["required"] = required
    logger.debug("Converted model '%s' with %d properties", title, len(properties))
    return document


def model_title(model: Any) -> str:
    """Return the display name of a document model."""
    for attribute in ("name", "model_name"):
        value = getattr(model, attribute, None)
        if isinstance(value, str) and value:
            return value
    raise DocumentSchemaError(f"Model does not define a name: {model!r}")
