"""Structural merge of a child character onto a base character.

Every value is classified as absent, object, array or scalar before the
rules are applied:

- object + object: recurse
- array on either side: ``base + child`` (concatenated, never de-duplicated)
- otherwise: the child's value when present, else the base's

``None`` (JSON null) is a present scalar, so an explicit ``null`` in the
child overrides the base.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class _Absent:
    def __repr__(self) -> str:
        return "<absent>"


ABSENT: Any = _Absent()


class ValueKind(Enum):
    ABSENT = "absent"
    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"


def kind_of(value: Any) -> ValueKind:
    if value is ABSENT:
        return ValueKind.ABSENT
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    return ValueKind.SCALAR


def merge_values(base: Any, child: Any) -> Any:
    """Merge two values at the same key; may return ``ABSENT``."""
    base_kind, child_kind = kind_of(base), kind_of(child)

    if base_kind is ValueKind.OBJECT and child_kind is ValueKind.OBJECT:
        return merge_objects(base, child)

    if ValueKind.ARRAY in (base_kind, child_kind):
        base_items = list(base) if base_kind is ValueKind.ARRAY else []
        child_items = list(child) if child_kind is ValueKind.ARRAY else []
        return base_items + child_items

    return child if child_kind is not ValueKind.ABSENT else base


def merge_objects(base: dict[str, Any], child: dict[str, Any]) -> dict[str, Any]:
    """Merge over the union of keys; base key order first, then new child keys."""
    result: dict[str, Any] = {}
    for key in dict.fromkeys([*base, *child]):
        merged = merge_values(base.get(key, ABSENT), child.get(key, ABSENT))
        if merged is not ABSENT:
            result[key] = merged
    return result


def merge_characters(base: dict[str, Any], child: dict[str, Any]) -> dict[str, Any]:
    """Merge a raw child character onto a raw base character.

    Pure: neither argument is modified. Scalars prefer the child, lists
    accumulate base-first.
    """
    return merge_objects(base or {}, child or {})
