"""
JSON document -> parameter map decoding.

Reads one parameter section (``parameters``, ``virtual_parameters`` or
``function_parameters``) of an actor message and infers a tagged value for each
member. Also reads the sender's ``actor_name``.

Classification policy (first match wins):
    1. boolean                                   -> bool
    2. integer in [0, 2^64 - 1]                  -> u64
    3. integer in [-2^63, -1]                    -> i64
    4. any other number                          -> f64
    5. array of integers in [0, 2^64 - 1]        -> vec_u32 (low 32 bits kept)
    6. array of integers in [-2^63, 2^63 - 1]    -> vec_i32 (low 32 bits, two's complement)
    7. string                                    -> string
    8. anything else (null, object, mixed or float arrays) -> member dropped

Notes:
    - Only unparsable text raises (DecodeError). A missing or non-object section,
      or a non-object document root, decodes to an empty map.
    - Dropped members are invisible in the returned map; decode_field_report lists
      them for callers that need to tell "absent" from "unsupported".
    - An empty array satisfies rule 5 and decodes as an empty vec_u32.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from actormsg.core.constants import (
    ACTOR_NAME_KEY,
    FUNCTION_PARAMETERS_KEY,
    I32_MAX,
    I64_MAX,
    I64_MIN,
    PARAMETERS_KEY,
    U32_MAX,
    U64_MAX,
    VIRTUAL_PARAMETERS_KEY,
)
from actormsg.core.grammar import DocumentField
from actormsg.core.serde import json_dumps_canonical, json_loads
from actormsg.core.typing import ParameterMap
from actormsg.core.values import (
    BoolValue,
    F64Value,
    I64Value,
    StringValue,
    TaggedValue,
    U64Value,
    VecI32Value,
    VecU32Value,
)

__all__ = [
    "DecodeReport",
    "infer_value",
    "decode_field",
    "decode_field_report",
    "decode_parameters",
    "decode_virtual_parameters",
    "decode_function_parameters",
    "get_actor_name",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeReport:
    """
    Result of decoding one parameter section.

    Attributes:
        parameters (ParameterMap): Decoded members in lexicographic name order.
        dropped (list[str]): Sorted names of members whose value matched no kind.
    """

    parameters: ParameterMap = field(default_factory=dict)
    dropped: list[str] = field(default_factory=list)


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _is_u64(x: Any) -> bool:
    return _is_int(x) and 0 <= x <= U64_MAX


def _is_i64(x: Any) -> bool:
    return _is_int(x) and I64_MIN <= x <= I64_MAX


def _wrap_u32(x: int) -> int:
    return x & U32_MAX


def _wrap_i32(x: int) -> int:
    x &= U32_MAX
    return x - (U32_MAX + 1) if x > I32_MAX else x


def infer_value(raw: Any) -> TaggedValue | None:
    """
    Classify one parsed JSON value into a tagged value.

    Args:
        raw (Any): Value as produced by actormsg.core.serde.json_loads.

    Returns:
        TaggedValue | None: Inferred tagged value, or None when the value has no
        supported shape (the member is then dropped by the decoder).

    Examples:
        >>> infer_value(3)
        U64Value(kind='u64', value=3)
        >>> infer_value([-1, 2]).kind
        'vec_i32'
        >>> infer_value(None) is None
        True
    """
    if isinstance(raw, bool):
        return BoolValue(value=raw)
    if _is_u64(raw):
        return U64Value(value=raw)
    if _is_i64(raw):
        return I64Value(value=raw)
    if isinstance(raw, float):
        return F64Value(value=raw)
    if isinstance(raw, list):
        if all(_is_u64(x) for x in raw):
            return VecU32Value(value=[_wrap_u32(x) for x in raw])
        if all(_is_i64(x) for x in raw):
            return VecI32Value(value=[_wrap_i32(x) for x in raw])
        return None
    if isinstance(raw, str):
        return StringValue(value=raw)
    return None


def _field_name(field_name: str | DocumentField) -> str:
    return field_name.value if isinstance(field_name, DocumentField) else field_name


def decode_field_report(text: str, field_name: str | DocumentField) -> DecodeReport:
    """
    Decode one top-level object of a document, reporting dropped members.

    Args:
        text (str): JSON document text.
        field_name (str | DocumentField): Top-level key to read.

    Returns:
        DecodeReport: Decoded map plus names of dropped members.

    Raises:
        DecodeError: If text is not valid JSON.
    """
    doc = json_loads(text)
    key = _field_name(field_name)
    section = doc.get(key) if isinstance(doc, dict) else None
    if not isinstance(section, dict):
        return DecodeReport()

    parameters: ParameterMap = {}
    dropped: list[str] = []
    for name in sorted(section):
        value = infer_value(section[name])
        if value is None:
            logger.debug("dropping %s.%s: unsupported value %r", key, name, section[name])
            dropped.append(name)
            continue
        parameters[name] = value
    return DecodeReport(parameters=parameters, dropped=dropped)


def decode_field(text: str, field_name: str | DocumentField) -> ParameterMap:
    """
    Decode one top-level object of a document into a parameter map.

    Members with unsupported values are silently omitted; see decode_field_report.

    Raises:
        DecodeError: If text is not valid JSON.
    """
    return decode_field_report(text, field_name).parameters


def decode_parameters(text: str) -> ParameterMap:
    """Decode the ``parameters`` section."""
    return decode_field(text, PARAMETERS_KEY)


def decode_virtual_parameters(text: str) -> ParameterMap:
    """Decode the ``virtual_parameters`` section."""
    return decode_field(text, VIRTUAL_PARAMETERS_KEY)


def decode_function_parameters(text: str) -> ParameterMap:
    """Decode the ``function_parameters`` section."""
    return decode_field(text, FUNCTION_PARAMETERS_KEY)


def get_actor_name(text: str) -> str:
    """
    Read the top-level ``actor_name`` of a document.

    Args:
        text (str): JSON document text.

    Returns:
        str: The name; the empty string if the key is absent or the root is not an
        object. A non-string value is returned as its compact JSON text.

    Raises:
        DecodeError: If text is not valid JSON.

    Examples:
        >>> get_actor_name('{"actor_name": "channel_A"}')
        'channel_A'
        >>> get_actor_name('{"parameters": {}}')
        ''
    """
    doc = json_loads(text)
    if not isinstance(doc, dict) or ACTOR_NAME_KEY not in doc:
        return ""
    name = doc[ACTOR_NAME_KEY]
    if isinstance(name, str):
        return name
    return json_dumps_canonical(name).strip('"')
