"""
actormsg — typed parameters for JSON actor messages.

Named actors expose named functions with named, typed parameters. Messages are
JSON documents; this package converts their parameter sections to and from
maps of tagged values and builds the user-message and function-request shapes.

## Layout
- actormsg.core — contracts: tagged value models, grammar, serde, errors (zero-IO).
- actormsg.codec — decoders, encoders and message builders.
- actormsg.config — CodecSettings (env > TOML > defaults).

## Examples
```python
from actormsg import U64Value, build_function_request, decode_field, get_actor_name

doc = '{"actor_name":"channel_A","parameters":{"a":0,"b":"c"}}'
get_actor_name(doc)              # 'channel_A'
decode_field(doc, "parameters")  # {'a': U64Value(...), 'b': StringValue(...)}
build_function_request("channel_A", "start", {"n": U64Value(value=5)})
```
"""

from __future__ import annotations

from .codec import (
    DecodeReport,
    build_function_request,
    build_user_message,
    decode_field,
    decode_field_report,
    encode_merge,
    encode_standalone,
    encode_value,
    get_actor_name,
    merge_function_request,
    merge_user_message,
)
from .config import CodecSettings
from .core.errors import CodecError, DecodeError, EncodeError
from .core.grammar import DocumentField, ValueKind
from .core.typing import ParameterMap
from .core.values import (
    BoolValue,
    F32Value,
    F64Value,
    I16Value,
    I32Value,
    I64Value,
    StringValue,
    TaggedValue,
    U8Value,
    U16Value,
    U32Value,
    U64Value,
    UsizeValue,
    VecI32Value,
    VecU32Value,
    make_tagged_value,
)

__all__ = [
    "CodecSettings",
    "CodecError",
    "DecodeError",
    "EncodeError",
    "DocumentField",
    "ValueKind",
    "ParameterMap",
    "TaggedValue",
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
    "make_tagged_value",
    "DecodeReport",
    "decode_field",
    "decode_field_report",
    "get_actor_name",
    "encode_value",
    "encode_standalone",
    "encode_merge",
    "build_user_message",
    "merge_user_message",
    "build_function_request",
    "merge_function_request",
]
