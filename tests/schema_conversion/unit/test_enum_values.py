"""Enum materialization tests."""

from __future__ import annotations

from enum import Enum
from types import SimpleNamespace

from docmodel_openapi.schema_conversion import is_lazy_enum, materialize_enum


class Status(Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


def test_concrete_lists_are_left_unchanged() -> None:
    values = ["red", "green"]

    assert materialize_enum(values) == ["red", "green"]
    assert materialize_enum(materialize_enum(values)) == ["red", "green"]
    assert not is_lazy_enum(values)


def test_enum_classes_expand_to_member_values() -> None:
    assert materialize_enum(Status) == ["active", "suspended"]
    assert is_lazy_enum(Status)


def test_callable_values_accessor_is_called() -> None:
    accessor = SimpleNamespace(values=lambda: iter(("small", "large")))

    assert materialize_enum(accessor) == ["small", "large"]
    assert is_lazy_enum(accessor)


def test_sequence_values_accessor_is_copied() -> None:
    accessor = SimpleNamespace(values=("small", "large"))

    assert materialize_enum(accessor) == ["small", "large"]


def test_mapping_with_values_key_is_materialized_without_mutation() -> None:
    declared = {"values": ("draft", "published"), "message": "invalid status"}

    assert materialize_enum(declared) == ["draft", "published"]
    assert declared == {"values": ("draft", "published"), "message": "invalid status"}


def test_mapping_values_may_be_an_enum_class() -> None:
    assert materialize_enum({"values": Status}) == ["active", "suspended"]


def test_strings_are_not_treated_as_sequences() -> None:
    assert materialize_enum("fixed") == "fixed"
    assert not is_lazy_enum("fixed")
