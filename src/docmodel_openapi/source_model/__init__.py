"""Source-side schema declarations."""

from .document_schema import ID_VIRTUAL, VERSION_KEY, DocumentModel, Schema
from .type_markers import Map, Mixed, Virtual

__all__ = [
    "DocumentModel",
    "ID_VIRTUAL",
    "Map",
    "Mixed",
    "Schema",
    "VERSION_KEY",
    "Virtual",
]
