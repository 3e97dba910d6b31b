"""
Core package aggregator for actor message contracts (grammar, tagged values, serde, errors).

## Contracts (single source of truth)
- Grammar — ValueKind and DocumentField enums, normalization helpers.
- Values — pydantic models for every tagged value kind, range-checked on construction.
- Serde — strict JSON parsing and the canonical JSON output policy.
- Constants/Errors/Typing — wire keys, integer bounds, exception types, aliases.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Naming policy: enum `.value` names are lower_snake.
- Decoding never yields the narrow kinds (i16, i32, u8, u16, u32, f32, usize);
  they exist for callers building values before encoding.

## Downstream usage
- actormsg.codec — infers tagged values from parsed JSON and encodes them back
  through `encode_value`, serializing with `json_dumps_canonical`.

## Examples
```python
from actormsg.core.grammar import ValueKind, value_kind_from_value
value_kind_from_value("VecU32") == ValueKind.VEC_U32  # True

from actormsg.core.values import U64Value, parse_tagged_value
parse_tagged_value({"kind": "u64", "value": 5}) == U64Value(value=5)  # True
```
"""
