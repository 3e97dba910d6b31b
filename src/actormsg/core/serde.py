"""
JSON serialization/deserialization utilities for actor message documents.

Provides `json_loads`, a strict wrapper around the stdlib `json` module, and
`json_dumps_canonical`, the single canonical output policy used by every encoder
and merge. This module is zero-IO.

Notes:
    - Canonical JSON:
        - sort_keys=True
        - separators=(",", ":")
        - ensure_ascii=False
        - allow_nan=False
    - Parsing follows RFC 8259: the tokens NaN, Infinity and -Infinity are
      rejected rather than read as floats.
    - Integer literals outside [-2^63, 2^64 - 1] parse as floats, and ``-0``
      parses as negative float zero, so the decoder classifies them as f64.
    - Number literals beyond double precision range (e.g. ``1e400``) are malformed.
    - Strings or keys holding an unpaired surrogate (e.g. ``"\\ud800"``) are malformed.
"""

from __future__ import annotations

import json
import math
from typing import Any

from .constants import I64_MIN, U64_MAX
from .errors import DecodeError

__all__ = [
    "json_loads",
    "json_dumps_canonical",
]


def _parse_int(literal: str) -> int | float:
    if literal == "-0":
        return -0.0
    n = int(literal)
    if I64_MIN <= n <= U64_MAX:
        return n
    return float(n)


def _parse_float(literal: str) -> float:
    v = float(literal)
    if math.isinf(v):
        raise ValueError(f"number out of range: {literal}")
    return v


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name!r}")


def _check_text(obj: Any) -> None:
    # Strings must be valid Unicode scalar sequences; lone surrogates are not.
    stack = [obj]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            item.encode("utf-8")
        elif isinstance(item, dict):
            stack.extend(item.keys())
            stack.extend(item.values())
        elif isinstance(item, list):
            stack.extend(item)


def json_loads(s: str) -> Any:
    """
    Deserialize a JSON string to Python objects.

    Args:
        s (str): JSON string to parse.

    Returns:
        Any: Decoded Python object (dict, list, str, int, float, bool, or None).

    Raises:
        DecodeError: If s is not a syntactically valid JSON document.
    """
    try:
        doc = json.loads(
            s,
            parse_int=_parse_int,
            parse_float=_parse_float,
            parse_constant=_reject_constant,
        )
        _check_text(doc)
    except (ValueError, TypeError, OverflowError, RecursionError) as exc:
        raise DecodeError(f"invalid JSON document: {exc}") from exc
    return doc


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Args:
        obj (Any): JSON-serializable object.

    Returns:
        str: Canonical JSON string with sort_keys=True, compact separators,
        and ensure_ascii=False.

    Raises:
        ValueError: If obj contains a non-finite float.

    Notes:
        This function assumes the input is JSON-serializable and does not perform
        coercion of unsupported types.
    """
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )
