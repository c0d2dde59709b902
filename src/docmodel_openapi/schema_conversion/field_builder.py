"""Single field descriptor to schema node conversion."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from docmodel_openapi.conversion_limits import ensure_depth
from docmodel_openapi.type_resolution import (
    DescriptorShape,
    classify_descriptor,
    date_format,
    descriptor_attr,
    is_schema_free,
    resolve_type,
)

from .conversion_models import ConversionOptions, FieldSchema
from .enum_values import materialize_enum

logger = logging.getLogger(__name__)


def build_field_schema(
    name: str | None,
    descriptor: Any,
    options: ConversionOptions | None = None,
    *,
    depth: int = 0,
) -> FieldSchema:
    """Convert one field descriptor into a schema node.

    Args:
      name: Field name, or `None` for array items and map values.
      descriptor: The field's type descriptor.
      options: Conversion options; defaults apply when omitted.
      depth: Current nesting depth, checked against `options.max_depth`.

    Returns:
      The node. Unmappable and virtual descriptors give `type=None`.

    Raises:
      SchemaDepthError: If nesting goes past `options.max_depth`.
    """
    options = options or ConversionOptions()
    ensure_depth(depth, options.max_depth, name)
    node = FieldSchema(
        name=name,
        type=resolve_type(descriptor, options.custom_field_mapping, max_depth=options.max_depth),
    )
    _copy_metadata(descriptor, node, options.copied_metadata_props)

    format_name = date_format(descriptor)
    if format_name is not None:
        node.metadata["format"] = format_name
    elif node.type == "array":
        node.items = build_field_schema(None, _array_element(descriptor), options, depth=depth + 1)
    elif node.type == "object":
        node.properties = _build_properties(descriptor, options, depth=depth)
    elif node.type == "map":
        node.type = "object"
        node.additional_properties = build_field_schema(
            None, _map_value(descriptor), options, depth=depth + 1
        )
    return node


def _copy_metadata(descriptor: Any, node: FieldSchema, metadata_props: tuple[str, ...]) -> None:
    if isinstance(descriptor, (type, str, list, tuple)):
        return
    for prop in metadata_props:
        value = descriptor_attr(descriptor, prop)
        if value is None:
            continue
        if prop == "required":
            node.required = _is_required(value)
        elif prop == "enum":
            node.metadata["enum"] = materialize_enum(value)
        else:
            node.metadata[prop] = value


def _is_required(value: Any) -> bool:
    # `[flag, message]` pairs carry a custom validation message.
    if isinstance(value, (list, tuple)):
        return bool(value) and bool(value[0])
    if callable(value):
        return True
    return bool(value)


def _array_element(descriptor: Any) -> Any:
    if isinstance(descriptor, (list, tuple)):
        sequence = descriptor
    else:
        sequence = descriptor_attr(descriptor, "type")
    if isinstance(sequence, (list, tuple)) and sequence and sequence[0] is not None:
        return sequence[0]
    return {}


def _map_value(descriptor: Any) -> Any:
    if isinstance(descriptor, type):
        return {}
    value = descriptor_attr(descriptor, "of")
    return {} if value is None else value


def _build_properties(
    descriptor: Any, options: ConversionOptions, *, depth: int
) -> list[FieldSchema]:
    from .tree_walker import walk_schema_tree

    tree = _sub_tree(descriptor)
    if not tree:
        return []
    properties = []
    for child in walk_schema_tree(tree, options, depth=depth + 1):
        if child.type is None:
            logger.debug("Dropping unmapped field '%s'", child.name)
            continue
        properties.append(child)
    return properties


def _sub_tree(descriptor: Any) -> Mapping[str, Any] | None:
    if _exposes_tree(descriptor):
        return descriptor.tree
    wrapped = None if isinstance(descriptor, type) else descriptor_attr(descriptor, "type")
    source = descriptor if wrapped is None else wrapped
    if is_schema_free(source):
        return None
    if _exposes_tree(source):
        return source.tree
    if _is_schema_type_wrapper(source):
        tree = descriptor_attr(descriptor_attr(source, "schema_type"), "tree")
        return tree if isinstance(tree, Mapping) else None
    if isinstance(source, Mapping):
        return source
    return None


def _is_schema_type_wrapper(candidate: Any) -> bool:
    if isinstance(candidate, type):
        return False
    return classify_descriptor(candidate) is DescriptorShape.SCHEMA_TYPE_WRAPPER


def _exposes_tree(candidate: Any) -> bool:
    if isinstance(candidate, (Mapping, type)):
        return False
    return isinstance(getattr(candidate, "tree", None), Mapping)
