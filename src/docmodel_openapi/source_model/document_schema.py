"""Lightweight document schema and model declarations."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from bson import ObjectId

from .type_markers import Virtual

VERSION_KEY = "__v"
ID_VIRTUAL = "id"


class Schema:
    """Ordered field definitions of one document type.

    `obj` keeps the definition exactly as declared. `tree` is the full field
    tree a converter walks: the declared fields plus the version key, the
    virtual fields and, with `auto_id`, a generated `_id`.
    """

    def __init__(
        self,
        definition: Mapping[str, Any] | None = None,
        *,
        virtuals: Mapping[str, Callable[..., Any]] | None = None,
        auto_id: bool = False,
        versioned: bool = True,
    ) -> None:
        self.obj: dict[str, Any] = dict(definition or {})
        self.tree: dict[str, Any] = {}
        if auto_id and "_id" not in self.obj:
            self.tree["_id"] = {"type": ObjectId, "auto": True}
        self.tree.update(self.obj)
        if versioned:
            self.tree[VERSION_KEY] = int
        self.virtual(ID_VIRTUAL, _id_string)
        for name, getter in (virtuals or {}).items():
            self.virtual(name, getter)

    def virtual(self, name: str, getter: Callable[..., Any]) -> Virtual:
        """Declare a computed field and return its descriptor."""
        descriptor = Virtual(path=name, getters=(getter,))
        self.tree[name] = descriptor
        return descriptor

    def __repr__(self) -> str:
        return f"Schema(fields={list(self.obj)!r})"


@dataclass(frozen=True)
class DocumentModel:
    """Named document type bound to its schema."""

    name: str
    schema: Schema


def _id_string(document: Any) -> str:
    return str(getattr(document, "_id", ""))
