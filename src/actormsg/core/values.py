"""
Pydantic v2 models for the tagged value: the closed union of parameter types that
an actor message can carry.

Responsibilities
- Define one frozen model per kind, discriminated by a ``kind`` literal whose
  value is the lower_snake ValueKind value.
- Enforce payload ranges on construction (integer widths, vector element widths,
  single precision floats).
- Provide the TaggedValue annotated union and helpers to build and (de)serialize
  tagged values in their structured ``{"kind": ..., "value": ...}`` form.

Tag fidelity
- The tag, not the magnitude, decides how a value is encoded: ``I16Value(value=5)``
  and ``U64Value(value=5)`` both encode as ``5``.
- Decoding untyped JSON only ever yields bool, u64, i64, f64, vec_u32, vec_i32 and
  string (see actormsg.core.grammar.DECODED_KINDS). The narrow kinds i16, i32, u8,
  u16, u32, f32 and usize exist for callers constructing values before encoding;
  a decode of their encoded form does not give the same tag back.

Style
- Zero-IO (stdlib + pydantic only).
- Validation is strict: booleans are not integers and strings are not numbers.

Examples:
    >>> from actormsg.core.values import U64Value, make_tagged_value
    >>> U64Value(value=5) == make_tagged_value("u64", 5)
    True
    >>> make_tagged_value("VecU32", [1, 2]).kind
    'vec_u32'
"""

from __future__ import annotations

import struct
from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    I16_MAX,
    I16_MIN,
    I32_MAX,
    I32_MIN,
    I64_MAX,
    I64_MIN,
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
)
from .grammar import ValueKind, value_kind_from_value
from .typing import JsonDict

__all__ = [
    "TaggedValueBase",
    "BoolValue",
    "I16Value",
    "I32Value",
    "I64Value",
    "U8Value",
    "U16Value",
    "U32Value",
    "U64Value",
    "F32Value",
    "F64Value",
    "UsizeValue",
    "StringValue",
    "VecI32Value",
    "VecU32Value",
    "TaggedValue",
    "TAGGED_VALUE_TYPES",
    "make_tagged_value",
    "parse_tagged_value",
    "dump_tagged_value",
]


class TaggedValueBase(BaseModel):
    """Shared configuration for every tagged value model."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    @property
    def tag(self) -> ValueKind:
        """ValueKind of this instance."""
        return ValueKind(self.kind)  # type: ignore[attr-defined]


class BoolValue(TaggedValueBase):
    kind: Literal["bool"] = "bool"
    value: bool


class I16Value(TaggedValueBase):
    kind: Literal["i16"] = "i16"
    value: int = Field(..., ge=I16_MIN, le=I16_MAX)


class I32Value(TaggedValueBase):
    kind: Literal["i32"] = "i32"
    value: int = Field(..., ge=I32_MIN, le=I32_MAX)


class I64Value(TaggedValueBase):
    kind: Literal["i64"] = "i64"
    value: int = Field(..., ge=I64_MIN, le=I64_MAX)


class U8Value(TaggedValueBase):
    kind: Literal["u8"] = "u8"
    value: int = Field(..., ge=0, le=U8_MAX)


class U16Value(TaggedValueBase):
    kind: Literal["u16"] = "u16"
    value: int = Field(..., ge=0, le=U16_MAX)


class U32Value(TaggedValueBase):
    kind: Literal["u32"] = "u32"
    value: int = Field(..., ge=0, le=U32_MAX)


class U64Value(TaggedValueBase):
    kind: Literal["u64"] = "u64"
    value: int = Field(..., ge=0, le=U64_MAX)


class F32Value(TaggedValueBase):
    """
    Single precision float.

    The payload is rounded to the nearest single precision value on construction,
    so ``F32Value(value=0.1).value == 0.10000000149011612``.

    Raises:
        pydantic.ValidationError: If a finite payload is beyond single precision range.
    """

    kind: Literal["f32"] = "f32"
    value: float

    @field_validator("value")
    @classmethod
    def round_to_single(cls, v: float) -> float:
        try:
            return struct.unpack("<f", struct.pack("<f", v))[0]
        except OverflowError as exc:
            raise ValueError(f"f32 payload out of single precision range (got {v!r})") from exc


class F64Value(TaggedValueBase):
    kind: Literal["f64"] = "f64"
    value: float


class UsizeValue(TaggedValueBase):
    """Platform-width unsigned integer; encoded as an unsigned 64-bit integer."""

    kind: Literal["usize"] = "usize"
    value: int = Field(..., ge=0, le=U64_MAX)


class StringValue(TaggedValueBase):
    kind: Literal["string"] = "string"
    value: str


class VecI32Value(TaggedValueBase):
    kind: Literal["vec_i32"] = "vec_i32"
    value: list[Annotated[int, Field(ge=I32_MIN, le=I32_MAX)]]


class VecU32Value(TaggedValueBase):
    kind: Literal["vec_u32"] = "vec_u32"
    value: list[Annotated[int, Field(ge=0, le=U32_MAX)]]


TaggedValue = Annotated[
    Union[
        BoolValue,
        I16Value,
        I32Value,
        I64Value,
        U8Value,
        U16Value,
        U32Value,
        U64Value,
        F32Value,
        F64Value,
        UsizeValue,
        StringValue,
        VecI32Value,
        VecU32Value,
    ],
    Field(discriminator="kind"),
]

TAGGED_VALUE_TYPES: dict[ValueKind, type[TaggedValueBase]] = {
    ValueKind.BOOL: BoolValue,
    ValueKind.I16: I16Value,
    ValueKind.I32: I32Value,
    ValueKind.I64: I64Value,
    ValueKind.U8: U8Value,
    ValueKind.U16: U16Value,
    ValueKind.U32: U32Value,
    ValueKind.U64: U64Value,
    ValueKind.F32: F32Value,
    ValueKind.F64: F64Value,
    ValueKind.USIZE: UsizeValue,
    ValueKind.STRING: StringValue,
    ValueKind.VEC_I32: VecI32Value,
    ValueKind.VEC_U32: VecU32Value,
}


def make_tagged_value(kind: ValueKind | str, value: Any) -> TaggedValue:
    """
    Build a tagged value of the given kind.

    Args:
        kind (ValueKind | str): Kind enum or name (see value_kind_from_value).
        value (Any): Payload, validated against the kind's range.

    Returns:
        TaggedValue: Model instance for the kind.

    Raises:
        ValueError: If kind is unknown.
        pydantic.ValidationError: If the payload does not fit the kind.
    """
    k = kind if isinstance(kind, ValueKind) else value_kind_from_value(kind)
    return TAGGED_VALUE_TYPES[k](value=value)  # type: ignore[return-value]


def parse_tagged_value(data: Mapping[str, Any]) -> TaggedValue:
    """
    Validate a structured ``{"kind": ..., "value": ...}`` mapping into a tagged value.

    The kind may use any spelling accepted by value_kind_from_value.

    Raises:
        ValueError: If the kind is missing or unknown.
        pydantic.ValidationError: If the payload does not fit the kind.
    """
    raw = dict(data)
    kind = raw.get("kind")
    if not isinstance(kind, str):
        raise ValueError(f"tagged value requires a string 'kind' (got {kind!r})")
    k = value_kind_from_value(kind)
    raw["kind"] = k.value
    return TAGGED_VALUE_TYPES[k].model_validate(raw)  # type: ignore[return-value]


def dump_tagged_value(value: TaggedValue) -> JsonDict:
    """Structured ``{"kind": ..., "value": ...}`` form of a tagged value."""
    return value.model_dump()
