"""Exceptions raised at the edges of dynjson.

Member access, assignment, iteration and serialization never raise;
these are only used when building a document from JSON text.
"""

from __future__ import annotations


class DynJsonError(Exception):
    """Base class for dynjson errors."""


class NotAnObjectError(DynJsonError, TypeError):
    """The top-level JSON value is not an object."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"top-level JSON value must be an object, got {type(value).__name__}"
        )
