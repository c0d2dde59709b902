"""Type descriptor shape classification."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any

from bson import ObjectId

from docmodel_openapi.source_model.type_markers import Map, Mixed


class DescriptorShape(str, Enum):
    """Shape of one type descriptor, listed in detection priority order."""

    ABSENT = "absent"
    NUMBER = "number"
    STRING = "string"
    SCHEMA_FREE = "schema_free"
    OBJECT_ID = "object_id"
    BOOLEAN = "boolean"
    MAP = "map"
    CONSTRUCTOR = "constructor"
    WRAPPED = "wrapped"
    INSTANCE_TAGGED = "instance_tagged"
    SEQUENCE = "sequence"
    SCHEMA_TYPE_WRAPPER = "schema_type_wrapper"
    VIRTUAL = "virtual"
    OBJECT = "object"


INSTANCE_TAG_KINDS: Mapping[str, str] = {
    "Array": "array",
    "DocumentArray": "array",
    "ObjectId": "string",
    "ObjectID": "string",
    "SchemaDate": "string",
    "Mixed": "object",
    "String": "string",
    "SchemaString": "string",
    "SchemaBuffer": "string",
    "SchemaObjectId": "string",
    "SchemaArray": "array",
    "Boolean": "boolean",
    "SchemaBoolean": "boolean",
    "Number": "number",
    "Decimal128": "number",
    "SchemaNumber": "number",
}

_NUMBER_TYPES = (int, float)
_OBJECT_ID_NAMES = ("ObjectId", "ObjectID")
_MAP_TYPES = (Map, dict)
_DATE_FORMATS = ((datetime, "date-time"), (date, "date"))


def descriptor_attr(descriptor: Any, name: str, default: Any = None) -> Any:
    """Read a descriptor property from a mapping key or an attribute."""
    if isinstance(descriptor, Mapping):
        return descriptor.get(name, default)
    return getattr(descriptor, name, default)


def classify_descriptor(descriptor: Any) -> DescriptorShape:
    """Return the first matching shape for a descriptor."""
    if descriptor is None or (isinstance(descriptor, str) and not descriptor):
        return DescriptorShape.ABSENT
    if _is_one_of(descriptor, _NUMBER_TYPES) or _is_spelled(descriptor, "number"):
        return DescriptorShape.NUMBER
    if descriptor is str or _is_spelled(descriptor, "string"):
        return DescriptorShape.STRING
    if descriptor is Mixed or descriptor_attr(descriptor, "schema_name") == "Mixed":
        return DescriptorShape.SCHEMA_FREE
    if descriptor is ObjectId or (isinstance(descriptor, str) and descriptor in _OBJECT_ID_NAMES):
        return DescriptorShape.OBJECT_ID
    if descriptor is bool or _is_spelled(descriptor, "boolean"):
        return DescriptorShape.BOOLEAN
    if _is_one_of(descriptor, _MAP_TYPES):
        return DescriptorShape.MAP
    if isinstance(descriptor, type) or (callable(descriptor) and hasattr(descriptor, "__name__")):
        return DescriptorShape.CONSTRUCTOR
    if descriptor_attr(descriptor, "type") is not None:
        return DescriptorShape.WRAPPED
    instance_tag = descriptor_attr(descriptor, "instance")
    if isinstance(instance_tag, str) and instance_tag in INSTANCE_TAG_KINDS:
        return DescriptorShape.INSTANCE_TAGGED
    if isinstance(descriptor, (list, tuple)):
        return DescriptorShape.SEQUENCE
    if descriptor_attr(descriptor, "schema_type") is not None:
        return DescriptorShape.SCHEMA_TYPE_WRAPPER
    if is_virtual(descriptor):
        return DescriptorShape.VIRTUAL
    return DescriptorShape.OBJECT


def is_virtual(descriptor: Any) -> bool:
    """Return True for computed, non-persisted field descriptors."""
    getters = descriptor_attr(descriptor, "getters")
    return isinstance(getters, (list, tuple)) and descriptor_attr(descriptor, "path") is not None


def is_schema_free(descriptor: Any) -> bool:
    """Return True when the descriptor accepts any payload without a field tree."""
    return (
        descriptor is Mixed
        or descriptor_attr(descriptor, "schema_name") == "Mixed"
        or descriptor_attr(descriptor, "instance") == "Mixed"
    )


def date_format(descriptor: Any) -> str | None:
    """Return the JSON Schema `format` for bare or wrapped date descriptors."""
    candidates = (descriptor, descriptor_attr(descriptor, "type"))
    for date_type, format_name in _DATE_FORMATS:
        if any(candidate is date_type for candidate in candidates):
            return format_name
    return None


def _is_one_of(descriptor: Any, types: tuple[type, ...]) -> bool:
    return any(descriptor is candidate for candidate in types)


def _is_spelled(descriptor: Any, name: str) -> bool:
    return isinstance(descriptor, str) and descriptor.lower() == name
