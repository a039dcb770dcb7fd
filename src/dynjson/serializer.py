"""Serializer: renders a DynamicDocument back to single-line JSON text.

The default output is permissive. Keys and string values are copied
verbatim, so text containing ``"``, ``\\`` or control characters yields
output that is not valid JSON. Pass ``SerializerOptions(escape_strings=True)``
for escaped output.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from .model import NodeKind, ObjectMap, kind_of

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SerializerOptions:
    escape_strings: bool = False  # escape keys and strings like json.dumps
    null_literal: bool = False    # render null as ``null`` instead of empty text


_DEFAULT_OPTIONS = SerializerOptions()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def serialize(document, options: SerializerOptions | None = None) -> str:
    """Render *document* (a DynamicDocument) as JSON-like text."""
    opts = options or _DEFAULT_OPTIONS
    out: list[str] = []
    _write_object(out, document.mapping, opts)
    return "".join(out)


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------

def _write_object(out: list[str], mapping: ObjectMap, opts: SerializerOptions) -> None:
    out.append("{")
    need_comma = False
    for name, value in mapping.items():
        if need_comma:
            out.append(",")
        need_comma = True
        _write_pair(out, name, value, opts)
    out.append("}")


def _write_pair(out: list[str], name: str, value: Any, opts: SerializerOptions) -> None:
    key = _quote(name, opts)
    kind = kind_of(value)

    if kind is NodeKind.NULL:
        out.append(f"{key}:null" if opts.null_literal else f'{key}:""')
    elif kind is NodeKind.STRING:
        out.append(f"{key}:{_quote(value, opts)}")
    elif kind is NodeKind.OBJECT:
        out.append(f"{key}:")
        _write_object(out, value, opts)
    elif kind is NodeKind.DOCUMENT:
        out.append(f"{key}:")
        _write_object(out, value.mapping, opts)
    elif kind is NodeKind.LIST:
        out.append(f"{key}:[")
        _write_items(out, value, opts)
        out.append("]")
    else:
        out.append(f"{key}:{_scalar_text(value)}")


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------

def _write_items(out: list[str], items, opts: SerializerOptions) -> None:
    need_comma = False
    for item in items:
        if need_comma:
            out.append(",")
        need_comma = True

        kind = kind_of(item)
        if kind is NodeKind.OBJECT:
            _write_object(out, item, opts)
        elif kind is NodeKind.DOCUMENT:
            _write_object(out, item.mapping, opts)
        elif kind is NodeKind.STRING:
            out.append(_quote(item, opts))
        elif kind is NodeKind.NULL:
            if opts.null_literal:
                out.append("null")
        else:
            if kind is NodeKind.LIST:
                log.debug("nested list rendered as plain text: %r", item)
            out.append(_scalar_text(item))


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def _quote(text, opts: SerializerOptions) -> str:
    if opts.escape_strings:
        return json.dumps(str(text), ensure_ascii=False)
    return f'"{text}"'


def _scalar_text(value: Any) -> str:
    """Natural text form of an unquoted value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)
