"""
actormsg.codec — conversion between actor message JSON text and parameter maps.

## Public API
- decode_field / decode_field_report / get_actor_name — JSON text -> parameter map.
- encode_value / encode_standalone / encode_merge — parameter map -> JSON text.
- build_user_message / merge_user_message — ``to_user_message`` documents.
- build_function_request / merge_function_request — ``function_component`` requests.

## Error policy
- Fatal: unparsable JSON text (DecodeError), non-finite floats (EncodeError).
- Absorbed: missing or non-object sections (empty map), non-object merge targets
  (text returned unchanged), unsupported member values (dropped), out-of-range
  vector elements (truncated to 32 bits).

## Import DAG discipline
- Depends only on stdlib, actormsg.core and actormsg.config.
"""

from __future__ import annotations

from .decode import (
    DecodeReport,
    decode_field,
    decode_field_report,
    decode_function_parameters,
    decode_parameters,
    decode_virtual_parameters,
    get_actor_name,
    infer_value,
)
from .encode import (
    encode_map,
    encode_merge,
    encode_parameters,
    encode_standalone,
    encode_value,
    encode_virtual_parameters,
    merge_document,
    merge_parameters,
    merge_virtual_parameters,
)
from .messages import (
    build_function_request,
    build_user_message,
    merge_function_request,
    merge_user_message,
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
    "encode_value",
    "encode_map",
    "encode_standalone",
    "encode_merge",
    "merge_document",
    "encode_parameters",
    "merge_parameters",
    "encode_virtual_parameters",
    "merge_virtual_parameters",
    "build_user_message",
    "merge_user_message",
    "build_function_request",
    "merge_function_request",
]
