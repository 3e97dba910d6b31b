"""
Canonical actor message grammar and helpers.

Defines the tagged value kinds and the recognized top-level document fields, plus
zero-IO normalization helpers used by the value models and the codec.

Responsibilities
- Define enums whose serialized values are lower_snake.
- Parse kind and field names from free-form strings (including the variant
  spellings used by peers that name kinds after their type, e.g. "VecU32").
- Record which kinds the decoder can produce versus construction-only kinds.

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE (Python constants)
   - Enum serialized values (wire/structured dumps): lower_snake

2) Inference is lossy by construction:
   - Untyped JSON only tells integers, floats, strings, booleans and arrays
     apart, so the decoder widens every integer to 64 bits.
   - Narrow kinds exist for callers building values before encoding.

Kind table
----------
| Kind      | Payload                         | Produced by decoder
|-----------|---------------------------------|--------------------
| bool      | True / False                    | yes
| i16       | -2^15 .. 2^15-1                 | no
| i32       | -2^31 .. 2^31-1                 | no
| i64       | -2^63 .. 2^63-1                 | yes (negative integers)
| u8        | 0 .. 2^8-1                      | no
| u16       | 0 .. 2^16-1                     | no
| u32       | 0 .. 2^32-1                     | no
| u64       | 0 .. 2^64-1                     | yes (non-negative integers)
| f32       | single precision float          | no
| f64       | double precision float          | yes
| usize     | 0 .. 2^64-1 (encoded as u64)    | no
| string    | text                            | yes
| vec_i32   | list of i32                     | yes
| vec_u32   | list of u32                     | yes

Examples
--------
>>> from actormsg.core.grammar import ValueKind, value_kind_from_value
>>> value_kind_from_value("u64") == ValueKind.U64
True
>>> value_kind_from_value("VecU32") == ValueKind.VEC_U32
True
>>> ValueKind.I16 in DECODED_KINDS
False

Tags
----
grammar, enums, normalization, lower_snake, helpers
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Final

__all__ = [
    "ValueKind",
    "DocumentField",
    "DECODED_KINDS",
    "INTEGER_KINDS",
    "FLOAT_KINDS",
    "VECTOR_KINDS",
    # helpers/validators
    "is_lower_snake",
    "assert_lower_snake",
    "value_kind_from_value",
    "document_field_from_value",
]


class ValueKind(Enum):
    """
    Tag of a tagged value; one member per representable parameter type.

    Serialized values are used in:
      - the ``kind`` discriminator of actormsg.core.values models
      - structured dumps of tagged values ({"kind": ..., "value": ...})
    """

    BOOL = "bool"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    F32 = "f32"
    F64 = "f64"
    USIZE = "usize"
    STRING = "string"
    VEC_I32 = "vec_i32"
    VEC_U32 = "vec_u32"


class DocumentField(Enum):
    """
    Top-level keys recognized in actor message documents.

    Notes:
      Parameter sections (decoded into parameter maps):
        * parameters
        * virtual_parameters
        * function_parameters
      Scalar/nested fields:
        * actor_name          (string)
        * to_user_message     (string)
        * function_component  (object with actor_name, function_name, function_parameters)
    """

    ACTOR_NAME = "actor_name"
    PARAMETERS = "parameters"
    VIRTUAL_PARAMETERS = "virtual_parameters"
    FUNCTION_PARAMETERS = "function_parameters"
    FUNCTION_NAME = "function_name"
    FUNCTION_COMPONENT = "function_component"
    TO_USER_MESSAGE = "to_user_message"


DECODED_KINDS: Final[frozenset[ValueKind]] = frozenset(
    {
        ValueKind.BOOL,
        ValueKind.U64,
        ValueKind.I64,
        ValueKind.F64,
        ValueKind.VEC_U32,
        ValueKind.VEC_I32,
        ValueKind.STRING,
    }
)

INTEGER_KINDS: Final[frozenset[ValueKind]] = frozenset(
    {
        ValueKind.I16,
        ValueKind.I32,
        ValueKind.I64,
        ValueKind.U8,
        ValueKind.U16,
        ValueKind.U32,
        ValueKind.U64,
        ValueKind.USIZE,
    }
)

FLOAT_KINDS: Final[frozenset[ValueKind]] = frozenset({ValueKind.F32, ValueKind.F64})

VECTOR_KINDS: Final[frozenset[ValueKind]] = frozenset({ValueKind.VEC_I32, ValueKind.VEC_U32})

# Type-named spellings used by peers for the non-lower_snake variants.
_KIND_ALIASES: Final[dict[str, ValueKind]] = {
    "String": ValueKind.STRING,
    "VecI32": ValueKind.VEC_I32,
    "VecU32": ValueKind.VEC_U32,
}

# ============================================================================
# Helpers
# ============================================================================

_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Args:
      value (str): Candidate string to validate.

    Returns:
      bool: True if value matches lower_snake (e.g., "vec_u32"), False otherwise.

    Examples:
      >>> is_lower_snake("vec_u32")
      True
      >>> is_lower_snake("VecU32")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def assert_lower_snake(value: str, what: str = "value") -> None:
    """
    Validate that a string is lower_snake.

    Args:
      value (str): Candidate string to validate.
      what (str): Human-friendly label used in the error message.

    Raises:
      ValueError: If value is not lower_snake.
    """
    if not is_lower_snake(value):
        raise ValueError(f"{what} must be lower_snake (got: {value!r})")


def value_kind_from_value(s: str) -> ValueKind:
    """
    Parse a kind name into a ValueKind.

    Accepts the canonical lower_snake value and the type-named spellings
    "String", "VecI32" and "VecU32".

    Args:
      s (str): Kind name.

    Returns:
      ValueKind: Parsed kind.

    Raises:
      ValueError: If s names no known kind.
    """
    alias = _KIND_ALIASES.get(s)
    if alias is not None:
        return alias
    assert_lower_snake(s, "kind")
    return ValueKind(s)


def document_field_from_value(s: str) -> DocumentField:
    """
    Parse a lower_snake top-level key into a DocumentField.

    Raises:
      ValueError: If s is not lower_snake or is not a recognized key.
    """
    assert_lower_snake(s, "document field")
    return DocumentField(s)
