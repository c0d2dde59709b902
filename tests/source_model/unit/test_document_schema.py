"""Document schema declaration tests."""

from __future__ import annotations

from types import SimpleNamespace

from bson import ObjectId
from docmodel_openapi.source_model import ID_VIRTUAL, VERSION_KEY, DocumentModel, Schema, Virtual


def test_tree_appends_version_key_and_id_virtual_after_declared_fields() -> None:
    schema = Schema({"title": str, "pages": int})

    assert list(schema.obj) == ["title", "pages"]
    assert list(schema.tree) == ["title", "pages", VERSION_KEY, ID_VIRTUAL]
    assert schema.tree[VERSION_KEY] is int
    assert isinstance(schema.tree[ID_VIRTUAL], Virtual)


def test_unversioned_schema_has_no_version_key() -> None:
    assert VERSION_KEY not in Schema({"title": str}, versioned=False).tree


def test_auto_id_prepends_generated_object_id() -> None:
    schema = Schema({"title": str}, auto_id=True)

    assert list(schema.tree)[0] == "_id"
    assert schema.tree["_id"] == {"type": ObjectId, "auto": True}


def test_declared_id_is_not_replaced() -> None:
    schema = Schema({"_id": str}, auto_id=True)

    assert schema.tree["_id"] is str


def test_declared_virtuals_are_computed_fields() -> None:
    schema = Schema({"first": str}, virtuals={"initial": lambda doc: doc.first[:1]})

    initial = schema.tree["initial"]
    assert isinstance(initial, Virtual)
    assert initial.path == "initial"
    assert initial.getters[0](SimpleNamespace(first="Ada")) == "A"


def test_definition_is_copied() -> None:
    definition = {"title": str}
    schema = Schema(definition)

    definition["extra"] = int

    assert "extra" not in schema.tree


def test_model_binds_name_to_schema() -> None:
    schema = Schema({"title": str})

    model = DocumentModel(name="Book", schema=schema)

    assert model.name == "Book"
    assert model.schema is schema
