"""Model reference resolution."""

from __future__ import annotations

import importlib
from typing import Any


class ModelImportError(Exception):
    """Raised when a model reference cannot be imported."""


def import_model(reference: str) -> Any:
    """Import the model named by a `package.module:attribute` reference.

    Dotted attribute paths (`module:Namespace.Model`) are followed one
    attribute at a time.
    """
    module_name, separator, attribute_path = reference.partition(":")
    if not separator or not module_name.strip() or not attribute_path.strip():
        raise ModelImportError(
            f"Model reference '{reference}' must use the form 'package.module:attribute'."
        )

    try:
        target: Any = importlib.import_module(module_name.strip())
    except ImportError as exc:
        raise ModelImportError(f"Cannot import module '{module_name}': {exc}") from exc

    for attribute in attribute_path.strip().split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise ModelImportError(
                f"Module '{module_name}' has no attribute path '{attribute_path}'."
            ) from exc
    return target
