"""Descriptor to JSON Schema primitive kind resolution."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from docmodel_openapi.conversion_limits import DEFAULT_MAX_DEPTH, ensure_depth

from .descriptor_shapes import (
    INSTANCE_TAG_KINDS,
    DescriptorShape,
    classify_descriptor,
    descriptor_attr,
)

CustomFieldMapping = Mapping[str, Any]

_CONSTRUCTOR_NAME_KINDS: Mapping[str, str] = {
    "ObjectId": "string",
    "ObjectID": "string",
    "Date": "string",
    "datetime": "string",
    "date": "string",
    "Decimal128": "number",
    "Decimal": "number",
    "list": "array",
    "tuple": "array",
}

_FIXED_SHAPE_KINDS: Mapping[DescriptorShape, str] = {
    DescriptorShape.NUMBER: "number",
    DescriptorShape.STRING: "string",
    DescriptorShape.SCHEMA_FREE: "object",
    DescriptorShape.OBJECT_ID: "string",
    DescriptorShape.BOOLEAN: "boolean",
    DescriptorShape.MAP: "map",
    DescriptorShape.SEQUENCE: "array",
    DescriptorShape.OBJECT: "object",
}


def resolve_type(
    descriptor: Any,
    custom_field_mapping: CustomFieldMapping | None = None,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str | None:
    """Resolve a type descriptor to its primitive kind.

    Returns one of `string`, `number`, `boolean`, `array`, `object`, `map`, a
    custom-mapped type, a lowercased constructor name, or `None` for absent and
    virtual descriptors. String descriptors listed in `custom_field_mapping`
    take precedence over every built-in rule.
    """
    return _resolve(descriptor, custom_field_mapping or {}, depth=0, max_depth=max_depth)


def custom_type_for(custom_field_mapping: CustomFieldMapping, key: str) -> str | None:
    """Return the override type configured for `key`, if any."""
    entry = custom_field_mapping.get(key)
    if entry is None:
        return None
    if isinstance(entry, Mapping):
        return entry.get("type")
    return str(entry)


def _resolve(
    descriptor: Any, custom_field_mapping: CustomFieldMapping, *, depth: int, max_depth: int
) -> str | None:
    ensure_depth(depth, max_depth)
    shape = classify_descriptor(descriptor)
    if shape is DescriptorShape.ABSENT:
        return None

    if isinstance(descriptor, str):
        custom_type = custom_type_for(custom_field_mapping, descriptor)
        if custom_type is not None:
            return custom_type

    if shape in _FIXED_SHAPE_KINDS:
        return _FIXED_SHAPE_KINDS[shape]
    if shape is DescriptorShape.CONSTRUCTOR:
        return _resolve_constructor(descriptor, custom_field_mapping)
    if shape is DescriptorShape.WRAPPED:
        return _resolve(
            descriptor_attr(descriptor, "type"),
            custom_field_mapping,
            depth=depth + 1,
            max_depth=max_depth,
        )
    if shape is DescriptorShape.INSTANCE_TAGGED:
        return INSTANCE_TAG_KINDS[descriptor_attr(descriptor, "instance")]
    if shape is DescriptorShape.SCHEMA_TYPE_WRAPPER:
        return _resolve(
            descriptor_attr(descriptor_attr(descriptor, "schema_type"), "tree"),
            custom_field_mapping,
            depth=depth + 1,
            max_depth=max_depth,
        )
    # Virtual fields are computed and never rendered.
    return None


def _resolve_constructor(constructor: Any, custom_field_mapping: CustomFieldMapping) -> str:
    name = constructor.__name__
    if name in _CONSTRUCTOR_NAME_KINDS:
        return _CONSTRUCTOR_NAME_KINDS[name]
    lowercase_name = name.lower()
    custom_type = custom_type_for(custom_field_mapping, lowercase_name)
    if custom_type is not None:
        return custom_type
    return lowercase_name
