"""Data model for parsed JSON nodes."""

from __future__ import annotations

import numbers
from collections.abc import Mapping, MutableMapping
from enum import Enum, auto
from typing import Any, Union


# ---------------------------------------------------------------------------
# Node aliases
# ---------------------------------------------------------------------------

ObjectMap = MutableMapping[str, Any]

Node = Union[ObjectMap, list, str, int, float, bool, None]


# ---------------------------------------------------------------------------
# NodeKind
# ---------------------------------------------------------------------------

_document_types: tuple[type, ...] = ()


def register_document_type(cls: type) -> type:
    """Classify instances of *cls* as ``NodeKind.DOCUMENT``."""
    global _document_types
    if cls not in _document_types:
        _document_types = (*_document_types, cls)
    return cls


class NodeKind(Enum):
    OBJECT = auto()
    LIST = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    DOCUMENT = auto()  # a DynamicDocument stored raw by assignment
    OTHER = auto()


def kind_of(value: Any) -> NodeKind:
    """Classify *value* into the variant it occupies in the tree.

    Order matters: ``bool`` is a subclass of ``int`` and must be tested
    before numbers.
    """
    if value is None:
        return NodeKind.NULL
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, bool):
        return NodeKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return NodeKind.NUMBER
    if isinstance(value, Mapping):
        return NodeKind.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeKind.LIST
    if isinstance(value, _document_types):
        return NodeKind.DOCUMENT
    return NodeKind.OTHER
