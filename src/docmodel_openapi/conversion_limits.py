"""Recursion limits shared by type resolution and schema conversion."""

from __future__ import annotations

DEFAULT_MAX_DEPTH = 32


class DocumentSchemaError(Exception):
    """Raised when a document schema cannot be converted."""


class SchemaDepthError(DocumentSchemaError):
    """Raised when descriptor nesting exceeds the configured maximum depth."""


def ensure_depth(depth: int, max_depth: int, location: str | None = None) -> None:
    """Raise `SchemaDepthError` once `depth` goes past `max_depth`."""
    if depth > max_depth:
        where = f" at '{location}'" if location else ""
        raise SchemaDepthError(
            f"Schema nesting exceeds the maximum depth of {max_depth}{where}."
        )
