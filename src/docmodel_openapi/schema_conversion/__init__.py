"""Schema conversion exports."""

from docmodel_openapi.conversion_limits import (
    DEFAULT_MAX_DEPTH,
    DocumentSchemaError,
    SchemaDepthError,
)

from .conversion_models import (
    DEFAULT_METADATA_PROPS,
    INTERNAL_FIELDS,
    ConversionOptions,
    FieldSchema,
)
from .document_assembler import document_model, model_title
from .enum_values import is_lazy_enum, materialize_enum
from .field_builder import build_field_schema
from .tree_walker import schema_tree_of, walk_schema_tree

__all__ = [
    "ConversionOptions",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_METADATA_PROPS",
    "DocumentSchemaError",
    "FieldSchema",
    "INTERNAL_FIELDS",
    "SchemaDepthError",
    "build_field_schema",
    "document_model",
    "is_lazy_enum",
    "materialize_enum",
    "model_title",
    "schema_tree_of",
    "walk_schema_tree",
]
