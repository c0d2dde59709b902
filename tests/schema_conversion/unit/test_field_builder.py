"""Field builder tests."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

import pytest
from docmodel_openapi.schema_conversion import (
    ConversionOptions,
    SchemaDepthError,
    build_field_schema,
)
from docmodel_openapi.source_model import Map, Mixed, Schema, Virtual


class Status(Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


def test_wrapped_string_copies_default_metadata() -> None:
    node = build_field_schema(
        "name", {"type": str, "required": True, "description": "Display name"}
    )

    assert node.name == "name"
    assert node.type == "string"
    assert node.required is True
    assert node.to_json_schema() == {"type": "string", "description": "Display name"}


def test_bare_types_carry_no_metadata() -> None:
    node = build_field_schema("age", int)

    assert node.to_json_schema() == {"type": "number"}
    assert node.required is False


def test_extra_metadata_props_are_copied() -> None:
    options = ConversionOptions(metadata_props=("example",))

    node = build_field_schema("name", {"type": str, "example": "Ada", "hint": "x"}, options)

    assert node.to_json_schema() == {"type": "string", "example": "Ada"}


def test_required_pair_uses_its_flag() -> None:
    assert build_field_schema("a", {"type": str, "required": [True, "needed"]}).required
    assert not build_field_schema("b", {"type": str, "required": [False, "unused"]}).required


def test_dates_get_a_format() -> None:
    assert build_field_schema("created_at", {"type": datetime}).to_json_schema() == {
        "type": "string",
        "format": "date-time",
    }
    assert build_field_schema("birthday", date).to_json_schema() == {
        "type": "string",
        "format": "date",
    }


def test_enum_class_is_materialized_without_touching_the_descriptor() -> None:
    descriptor = {"type": str, "enum": Status}

    node = build_field_schema("status", descriptor)

    assert node.to_json_schema() == {"type": "string", "enum": ["draft", "published"]}
    assert descriptor["enum"] is Status


def test_literal_array_builds_anonymous_items() -> None:
    node = build_field_schema("tags", [str])

    assert node.items is not None
    assert node.items.name is None
    assert node.to_json_schema() == {"type": "array", "items": {"type": "string"}}


def test_wrapped_array_uses_first_element_of_type() -> None:
    node = build_field_schema(
        "sizes", {"type": [{"type": str, "enum": ["s", "m"]}], "description": "Sizes"}
    )

    assert node.to_json_schema() == {
        "type": "array",
        "description": "Sizes",
        "items": {"type": "string", "enum": ["s", "m"]},
    }


def test_array_without_element_defaults_to_empty_object() -> None:
    assert build_field_schema("anything", []).to_json_schema() == {
        "type": "array",
        "items": {"type": "object", "properties": {}},
    }


def test_array_of_dates_formats_items() -> None:
    assert build_field_schema("visits", [datetime]).to_json_schema() == {
        "type": "array",
        "items": {"type": "string", "format": "date-time"},
    }


def test_nested_mapping_builds_properties_and_drops_virtuals() -> None:
    node = build_field_schema(
        "profile",
        {"first": str, "label": Virtual(path="label"), "score": {"type": float}},
    )

    assert [child.name for child in node.properties or []] == ["first", "score"]
    assert node.to_json_schema() == {
        "type": "object",
        "properties": {"first": {"type": "string"}, "score": {"type": "number"}},
    }


def test_nested_schema_uses_its_tree_and_skips_internals() -> None:
    address = Schema({"city": {"type": str, "required": True}})

    node = build_field_schema("address", address)

    assert [child.name for child in node.properties or []] == ["city"]
    assert node.properties is not None
    assert node.properties[0].required is True


def test_wrapped_nested_schema_keeps_wrapper_metadata() -> None:
    address = Schema({"city": str})

    node = build_field_schema("address", {"type": address, "description": "Postal address"})

    assert node.to_json_schema() == {
        "type": "object",
        "description": "Postal address",
        "properties": {"city": {"type": "string"}},
    }


@pytest.mark.parametrize("descriptor", [Mixed, {"type": Mixed}, object])
def test_schema_free_payloads_have_empty_properties(descriptor: object) -> None:
    assert build_field_schema("payload", descriptor).to_json_schema() == {
        "type": "object",
        "properties": {},
    }


def test_map_renders_additional_properties() -> None:
    node = build_field_schema("scores", {"type": Map, "of": int})

    assert node.type == "object"
    assert node.additional_properties is not None
    assert node.additional_properties.name is None
    assert node.to_json_schema() == {
        "type": "object",
        "additionalProperties": {"type": "number"},
    }


def test_bare_dict_map_defaults_to_object_values() -> None:
    assert build_field_schema("extra", dict).to_json_schema() == {
        "type": "object",
        "additionalProperties": {"type": "object", "properties": {}},
    }


def test_custom_field_mapping_reaches_nested_fields() -> None:
    options = ConversionOptions(custom_field_mapping={"uuid": {"type": "string"}})

    node = build_field_schema("refs", {"type": ["uuid"]}, options)

    assert node.to_json_schema() == {"type": "array", "items": {"type": "string"}}


def test_virtual_descriptor_builds_untyped_node() -> None:
    node = build_field_schema("full_name", Virtual(path="full_name"))

    assert node.type is None


def test_nesting_past_max_depth_raises() -> None:
    descriptor: dict[str, object] = {"leaf": str}
    for _ in range(6):
        descriptor = {"child": descriptor}

    with pytest.raises(SchemaDepthError):
        build_field_schema("root", descriptor, ConversionOptions(max_depth=3))
    assert build_field_schema("root", descriptor, ConversionOptions(max_depth=10)).type == "object"
