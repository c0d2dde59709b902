"""Schema export exports."""

from .components_document import (
    SchemaExportError,
    build_components_document,
    render_json,
    write_schema_document,
)
from .model_import import ModelImportError, import_model

__all__ = [
    "ModelImportError",
    "SchemaExportError",
    "build_components_document",
    "import_model",
    "render_json",
    "write_schema_document",
]
