"""
Lightweight typing aliases used across the codec.

This module contains no runtime logic beyond alias definitions and is zero-IO.

Examples:
    Use aliases in annotations.

    >>> from actormsg.core.typing import JsonDict
    >>> def payload() -> JsonDict:
    ...     return {"actor_name": "channel_A"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .values import TaggedValue

__all__ = [
    "JsonDict",
    "ParameterMap",
]

# Parsed JSON object. Kept intentionally broad for serde boundaries.
JsonDict = dict[str, Any]

# Name -> tagged value. Producers insert in lexicographic name order.
ParameterMap = dict[str, "TaggedValue"]
