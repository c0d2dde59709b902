"""Convert document-model schemas into OpenAPI-compatible JSON Schema."""

import logging

from .schema_conversion import (
    ConversionOptions,
    DocumentSchemaError,
    FieldSchema,
    SchemaDepthError,
    build_field_schema,
    document_model,
    walk_schema_tree,
)
from .type_resolution import resolve_type

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConversionOptions",
    "DocumentSchemaError",
    "FieldSchema",
    "SchemaDepthError",
    "build_field_schema",
    "document_model",
    "resolve_type",
    "walk_schema_tree",
]
