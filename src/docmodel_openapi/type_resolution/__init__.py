"""Type resolution exports."""

from .descriptor_shapes import (
    DescriptorShape,
    classify_descriptor,
    date_format,
    descriptor_attr,
    is_schema_free,
    is_virtual,
)
from .type_resolver import custom_type_for, resolve_type

__all__ = [
    "DescriptorShape",
    "classify_descriptor",
    "custom_type_for",
    "date_format",
    "descriptor_attr",
    "is_schema_free",
    "is_virtual",
    "resolve_type",
]
