"""Schema field tree traversal with required-flag bubbling."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from docmodel_openapi.conversion_limits import DocumentSchemaError

from .conversion_models import ConversionOptions, FieldSchema
from .enum_values import is_lazy_enum, materialize_enum
from .field_builder import build_field_schema


def walk_schema_tree(
    schema: Any,
    options: ConversionOptions | None = None,
    *,
    depth: int = 0,
) -> list[FieldSchema]:
    """Convert every field of a schema tree, in declared order.

    `schema` is either an object exposing a `tree` mapping or the tree mapping
    itself. Nodes resolving to `type=None` are kept; callers drop them.

    A required child of an object field is listed in the object's own
    `required_fields`; the object field is required only when its own
    descriptor says so. A required map value schema loses its flag without
    marking the map. Required children of an array's object items are listed in
    `items.required_fields`. Scalar array items never render a required flag.
    """
    options = options or ConversionOptions()
    omitted = options.omitted_fields
    fields: list[FieldSchema] = []

    for name, descriptor in schema_tree_of(schema).items():
        if name in omitted:
            continue
        node = build_field_schema(name, descriptor, options, depth=depth)
        if node.type == "object":
            if node.additional_properties is not None:
                _collect_anonymous_required(node.additional_properties)
            _bubble_required(node)
        elif node.type == "array" and node.items is not None:
            _collect_anonymous_required(node.items)
        if node.type == "string" and is_lazy_enum(node.metadata.get("enum")):
            node.metadata["enum"] = materialize_enum(node.metadata["enum"])
        fields.append(node)

    return fields


def schema_tree_of(schema: Any) -> Mapping[str, Any]:
    """Return the field tree of a schema object or mapping."""
    if isinstance(schema, Mapping):
        return schema
    tree = getattr(schema, "tree", None)
    if isinstance(tree, Mapping):
        return tree
    raise DocumentSchemaError(f"Schema does not expose a field tree: {schema!r}")


def _bubble_required(node: FieldSchema) -> None:
    for child in node.required_children():
        child.required = False
        if child.name is not None:
            node.required_fields.append(child.name)


def _collect_anonymous_required(element: FieldSchema) -> None:
    if element.type != "object" or element.properties is None:
        element.required = False
        return
    for child in element.required_children():
        child.required = False
        if child.name is not None:
            element.required_fields.append(child.name)
