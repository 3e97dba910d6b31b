"""
Core exception types raised by the actor message codec.

Provides typed exceptions for the two fatal failure tiers:
- DecodeError when input text is not syntactically valid JSON.
- EncodeError when a value has no JSON representation (non-finite floats).

Both derive from CodecError, itself a ValueError, so callers may catch the
whole family at once.

Notes:
    - Wrong-shape input never raises: absent keys, non-object roots and
      unsupported member values are absorbed by the codec (empty map, passthrough
      or dropped member).
    - Out-of-range construction of a tagged value raises pydantic.ValidationError
      from model validation, not one of these types.

Examples:
    Catch a malformed document.

    >>> from actormsg.codec.decode import decode_field
    >>> from actormsg.core.errors import DecodeError
    >>> try:
    ...     decode_field("{not json", "parameters")
    ... except DecodeError as e:
    ...     msg = str(e)
    >>> "invalid JSON" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "CodecError",
    "DecodeError",
    "EncodeError",
]


class CodecError(ValueError):
    """Base class for actor message conversion failures."""


class DecodeError(CodecError):
    """Input text is not a syntactically valid JSON document."""


class EncodeError(CodecError):
    """A tagged value cannot be represented as JSON (e.g., NaN or infinite float)."""
