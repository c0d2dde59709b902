"""Enum value materialization."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


def materialize_enum(candidate: Any) -> Any:
    """Return the concrete enum value list for a declared enum.

    Accepts `enum.Enum` subclasses, lazy accessors exposing `values` (callable
    or sequence, as an attribute or a mapping key) and plain sequences. The
    declared value is never modified; anything else is returned as is.
    """
    if _is_enum_class(candidate):
        return _enum_values(candidate)
    if isinstance(candidate, Mapping):
        if "values" not in candidate:
            return candidate
        return _concrete_values(candidate["values"])
    if isinstance(candidate, (list, tuple)):
        return list(candidate)
    if isinstance(candidate, (str, bytes)):
        return candidate
    values = getattr(candidate, "values", None)
    if values is not None:
        return _concrete_values(values)
    return candidate


def is_lazy_enum(candidate: Any) -> bool:
    """Return True when the enum still needs materializing."""
    if _is_enum_class(candidate):
        return True
    if isinstance(candidate, Mapping):
        return "values" in candidate
    if isinstance(candidate, (list, tuple, str, bytes)):
        return False
    return getattr(candidate, "values", None) is not None


def _concrete_values(values: Any) -> list[Any]:
    if _is_enum_class(values):
        return _enum_values(values)
    if callable(values):
        values = values()
    return list(values)


def _is_enum_class(candidate: Any) -> bool:
    return isinstance(candidate, type) and issubclass(candidate, Enum)


def _enum_values(enum_class: type[Enum]) -> list[Any]:
    return [member.value for member in enum_class]
