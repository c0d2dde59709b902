"""Marker types used when declaring document schemas."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any


class Mixed:
    """Schema-free payload: any JSON object is accepted."""

    schema_name = "Mixed"


class Map:
    """Dynamic map with arbitrary string keys; declare values with `of`."""

    schema_name = "Map"


@dataclass(frozen=True)
class Virtual:
    """Computed field that is never persisted."""

    path: str
    getters: Sequence[Callable[..., Any]] = ()
