"""Setter resolution for dynjson."""

from __future__ import annotations

from typing import Any

from .model import ObjectMap


def assign_member(mapping: ObjectMap, name: str, value: Any) -> bool:
    """Store *value* under *name* in *mapping* verbatim.

    No wrapping, unwrapping or validation happens; an existing key keeps
    its position, a new key is appended. Always returns True.
    """
    mapping[name] = value
    return True
