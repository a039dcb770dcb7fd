"""dynjson — member-style access and serialization for parsed JSON objects."""

from .document import DynamicDocument
from .errors import DynJsonError, NotAnObjectError
from .getter import Resolution, resolve_member
from .loader import load, loads
from .model import NodeKind, kind_of
from .serializer import SerializerOptions, serialize
from .setter import assign_member

__all__ = [
    "DynamicDocument",
    "DynJsonError",
    "NotAnObjectError",
    "Resolution",
    "resolve_member",
    "assign_member",
    "load",
    "loads",
    "NodeKind",
    "kind_of",
    "SerializerOptions",
    "serialize",
]
