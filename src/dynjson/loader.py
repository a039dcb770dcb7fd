"""Build a DynamicDocument from JSON text.

Parsing is delegated to the stdlib ``json`` module; its dicts keep
insertion order, which the document and serializer rely on.
"""

from __future__ import annotations

import json
from typing import IO

from .document import DynamicDocument
from .errors import NotAnObjectError


def loads(text: str | bytes) -> DynamicDocument:
    """Parse *text* and wrap the top-level object.

    Raises ``json.JSONDecodeError`` for malformed input and
    ``NotAnObjectError`` when the top level is not an object.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise NotAnObjectError(data)
    return DynamicDocument(data)


def load(fp: IO) -> DynamicDocument:
    return loads(fp.read())
