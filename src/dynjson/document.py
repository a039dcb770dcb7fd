"""DynamicDocument — member-style access over a parsed JSON object."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .getter import Resolution, resolve_member
from .model import ObjectMap, register_document_type
from .setter import assign_member


@register_document_type
class DynamicDocument:
    """A view over a JSON object map that reads and writes like attributes.

    The backing map is shared, never copied::

        data = {"user": {"name": "Joe"}, "tags": []}
        doc = DynamicDocument(data)
        doc.user.name            # → "Joe"
        doc.user.name = "Ann"    # data["user"]["name"] is now "Ann"
        doc.missing              # → None
        str(doc)                 # → '{"user":{"name":"Ann"},"tags":[]}'

    Nested objects are wrapped again on every read, so ``doc.user is
    doc.user`` is False even though both alias ``data["user"]``. Members
    whose names clash with the methods below are reachable with
    ``doc["name"]``.

    The map is not locked. Mutating it from another thread, or while
    iterating over the document, is the caller's problem.
    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: ObjectMap | None = None) -> None:
        object.__setattr__(self, "_mapping", {} if mapping is None else mapping)

    @property
    def mapping(self) -> ObjectMap:
        """The backing map (shared reference)."""
        return self._mapping

    # -- Member access --------------------------------------------------

    def resolve(self, name: str) -> Resolution:
        return resolve_member(self._mapping, name)

    def get(self, name: str) -> Any:
        return resolve_member(self._mapping, name).value

    def set(self, name: str, value: Any) -> bool:
        return assign_member(self._mapping, name, value)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name == "_mapping" or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_mapping":
            object.__setattr__(self, name, value)
            return
        self.set(name, value)

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    # -- Iteration ------------------------------------------------------

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        """Yield raw ``(key, value)`` pairs in insertion order, unwrapped."""
        for key, value in self._mapping.items():
            yield key, value

    # -- Text -----------------------------------------------------------

    def __str__(self) -> str:
        from .serializer import serialize
        return serialize(self)

    def __repr__(self) -> str:
        return f"DynamicDocument({self._mapping!r})"
