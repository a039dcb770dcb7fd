"""Getter resolution for dynjson."""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from .model import NodeKind, ObjectMap, kind_of

log = logging.getLogger(__name__)


class Resolution(NamedTuple):
    """Outcome of a member read.

    ``found`` is always True: unknown members resolve to ``None`` rather
    than failing, so absent keys and null values look the same.
    """

    value: Any
    found: bool = True


def resolve_member(mapping: ObjectMap, name: str) -> Resolution:
    """Resolve member *name* on *mapping*.

    - absent key: ``None``
    - object: a new DynamicDocument over the same map
    - non-empty list: a new list, see :func:`wrap_list`
    - empty list / scalar / null: the stored value unchanged
    """
    from .document import DynamicDocument

    if name not in mapping:
        return Resolution(None)

    value = mapping[name]
    kind = kind_of(value)

    if kind is NodeKind.OBJECT:
        return Resolution(DynamicDocument(value))

    if kind is NodeKind.LIST and len(value) > 0:
        return Resolution(wrap_list(value))

    return Resolution(value)


def wrap_list(items) -> list:
    """Copy *items* into a new list, wrapping maps if the first item is one.

    Only the first element decides: a list that starts with a scalar keeps
    every element, later maps included, unwrapped.
    """
    from .document import DynamicDocument

    if kind_of(items[0]) is not NodeKind.OBJECT:
        if any(kind_of(item) is NodeKind.OBJECT for item in items):
            log.debug("list starts with %s; leaving nested objects unwrapped",
                      kind_of(items[0]).name)
        return list(items)

    return [
        DynamicDocument(item) if kind_of(item) is NodeKind.OBJECT else item
        for item in items
    ]
