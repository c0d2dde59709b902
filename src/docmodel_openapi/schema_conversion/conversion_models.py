"""Schema conversion entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from docmodel_openapi.conversion_limits import DEFAULT_MAX_DEPTH

DEFAULT_METADATA_PROPS = ("enum", "required", "description")
INTERNAL_FIELDS = ("__v", "id")


@dataclass(frozen=True)
class ConversionOptions:
    """Caller options for one conversion.

    `metadata_props` lists property names copied in addition to the defaults.
    `custom_field_mapping` maps type names to `{"type": ...}` overrides.
    """

    metadata_props: Sequence[str] = ()
    omit_fields: Sequence[str] = ()
    omit_internals: bool = True
    custom_field_mapping: Mapping[str, Any] = field(default_factory=dict)
    max_depth: int = DEFAULT_MAX_DEPTH

    @property
    def copied_metadata_props(self) -> tuple[str, ...]:
        """Default metadata property names followed by caller extras, without repeats."""
        return tuple(dict.fromkeys((*DEFAULT_METADATA_PROPS, *self.metadata_props)))

    @property
    def omitted_fields(self) -> frozenset[str]:
        """Field names skipped at every nesting level."""
        internals = INTERNAL_FIELDS if self.omit_internals else ()
        return frozenset((*internals, *self.omit_fields))


@dataclass
class FieldSchema:
    """One converted field, before rendering to JSON Schema.

    `name` keys the node into its parent's properties and is `None` for array
    items and map values. `required` is the flag consumed by the parent level.
    """

    name: str | None
    type: str | None
    required: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)
    properties: list[FieldSchema] | None = None
    items: FieldSchema | None = None
    additional_properties: FieldSchema | None = None
    required_fields: list[str] = field(default_factory=list)

    def to_json_schema(self) -> dict[str, Any]:
        """Render the node as a JSON Schema mapping."""
        rendered: dict[str, Any] = {"type": self.type, **self.metadata}
        if self.items is not None:
            rendered["items"] = self.items.to_json_schema()
        if self.properties is not None:
            rendered["properties"] = {
                child.name: child.to_json_schema() for child in self.properties
            }
        if self.additional_properties is not None:
            rendered["additionalProperties"] = self.additional_properties.to_json_schema()
        if self.required_fields:
            rendered["required"] = list(self.required_fields)
        return rendered

    def required_children(self) -> list[FieldSchema]:
        """Children carrying a required flag: properties, or the map value schema."""
        if self.properties is not None:
            children = self.properties
        elif self.additional_properties is not None:
            children = [self.additional_properties]
        else:
            children = []
        return [child for child in children if child.required]
