"""
Parameter map -> JSON document encoding.

Every encoder and message builder funnels through encode_value, so a tagged value
has one JSON form regardless of where it is written:

| Kind                                  | JSON form
|---------------------------------------|--------------------------------------
| bool                                  | boolean
| i16, i32, i64, u8, u16, u32, u64      | integer
| usize                                 | integer (unsigned 64-bit)
| f32                                   | number (single precision value widened to double)
| f64                                   | number
| vec_i32, vec_u32                      | array of integers
| string                                | string

Notes:
    - Non-finite floats have no JSON form; encoding one raises EncodeError.
    - Output is canonical JSON (sorted keys, compact separators, non-ASCII kept),
      so a merged document has its keys re-sorted throughout.
    - Merging into a document whose root is not an object returns the base text
      unchanged.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from actormsg.config import CodecSettings
from actormsg.core.constants import PARAMETERS_KEY, VIRTUAL_PARAMETERS_KEY
from actormsg.core.errors import EncodeError
from actormsg.core.grammar import FLOAT_KINDS, INTEGER_KINDS, VECTOR_KINDS, DocumentField
from actormsg.core.serde import json_dumps_canonical, json_loads
from actormsg.core.typing import JsonDict
from actormsg.core.values import TaggedValue, TaggedValueBase

__all__ = [
    "encode_value",
    "encode_map",
    "encode_standalone",
    "encode_merge",
    "merge_document",
    "wrap_standalone",
    "encode_parameters",
    "merge_parameters",
    "encode_virtual_parameters",
    "merge_virtual_parameters",
]

logger = logging.getLogger(__name__)


def encode_value(value: TaggedValue) -> Any:
    """
    JSON form of a tagged value, as a plain Python object.

    Args:
        value (TaggedValue): Tagged value to encode.

    Returns:
        Any: bool, int, float, str or list[int].

    Raises:
        EncodeError: If value holds a NaN or infinite float.
        TypeError: If value is not a tagged value.

    Examples:
        >>> from actormsg.core.values import I16Value, F32Value
        >>> encode_value(I16Value(value=-3))
        -3
        >>> encode_value(F32Value(value=0.5))
        0.5
    """
    if not isinstance(value, TaggedValueBase):
        raise TypeError(f"expected a tagged value, got {type(value).__name__}")
    tag = value.tag
    if tag in FLOAT_KINDS:
        f = float(value.value)  # type: ignore[union-attr]
        if not math.isfinite(f):
            raise EncodeError(f"{tag.value} value {f!r} has no JSON representation")
        return f
    if tag in INTEGER_KINDS:
        # usize included; written as unsigned 64-bit.
        return int(value.value)  # type: ignore[union-attr]
    if tag in VECTOR_KINDS:
        return list(value.value)  # type: ignore[union-attr]
    return value.value  # type: ignore[union-attr]


def encode_map(parameters: Mapping[str, TaggedValue]) -> JsonDict:
    """Encode every entry of a parameter map, in lexicographic name order."""
    return {name: encode_value(parameters[name]) for name in sorted(parameters)}


def _field_name(field_name: str | DocumentField) -> str:
    return field_name.value if isinstance(field_name, DocumentField) else field_name


def wrap_standalone(key: str, encoded: str, settings: CodecSettings | None = None) -> str:
    """
    Wrap already-encoded JSON text as the single member of a fresh document.

    Produces ``{"<key>" : <encoded>}`` using settings.standalone_separator.
    """
    s = settings or CodecSettings()
    return "{" + json_dumps_canonical(key) + s.standalone_separator + encoded + "}"


def encode_standalone(
    parameters: Mapping[str, TaggedValue],
    field_name: str | DocumentField,
    settings: CodecSettings | None = None,
) -> str:
    """
    Encode a parameter map as a fresh document wrapped under field_name.

    Args:
        parameters (Mapping[str, TaggedValue]): Map to encode.
        field_name (str | DocumentField): Wrapping top-level key.
        settings (CodecSettings | None): Output options; defaults reproduce the
            reference form ``{"parameters" : {...}}``.

    Returns:
        str: JSON document text.

    Raises:
        EncodeError: If a value holds a non-finite float.

    Examples:
        >>> from actormsg.core.values import U64Value
        >>> encode_standalone({"n": U64Value(value=5)}, "parameters")
        '{"parameters" : {"n":5}}'
    """
    body = json_dumps_canonical(encode_map(parameters))
    return wrap_standalone(_field_name(field_name), body, settings)


def merge_document(base_text: str, key: str, value: Any) -> str:
    """
    Insert or overwrite one top-level key of a parsed document.

    Args:
        base_text (str): JSON document text to merge into.
        key (str): Top-level key.
        value (Any): JSON-compatible Python object to store under key.

    Returns:
        str: The whole document re-serialized canonically, or base_text unchanged
        when its root is not an object.

    Raises:
        DecodeError: If base_text is not valid JSON.
    """
    doc = json_loads(base_text)
    if not isinstance(doc, dict):
        logger.debug("merge of %r skipped: document root is %s", key, type(doc).__name__)
        return base_text
    doc[key] = value
    return json_dumps_canonical(doc)


def encode_merge(
    parameters: Mapping[str, TaggedValue],
    field_name: str | DocumentField,
    base_text: str,
) -> str:
    """
    Encode a parameter map into an existing document under field_name.

    Raises:
        DecodeError: If base_text is not valid JSON.
        EncodeError: If a value holds a non-finite float.
    """
    return merge_document(base_text, _field_name(field_name), encode_map(parameters))


def encode_parameters(
    parameters: Mapping[str, TaggedValue], settings: CodecSettings | None = None
) -> str:
    return encode_standalone(parameters, PARAMETERS_KEY, settings)


def merge_parameters(parameters: Mapping[str, TaggedValue], base_text: str) -> str:
    return encode_merge(parameters, PARAMETERS_KEY, base_text)


def encode_virtual_parameters(
    parameters: Mapping[str, TaggedValue], settings: CodecSettings | None = None
) -> str:
    return encode_standalone(parameters, VIRTUAL_PARAMETERS_KEY, settings)


def merge_virtual_parameters(parameters: Mapping[str, TaggedValue], base_text: str) -> str:
    return encode_merge(parameters, VIRTUAL_PARAMETERS_KEY, base_text)
