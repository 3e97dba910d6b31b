import pytest

from actormsg.codec.decode import decode_field
from actormsg.codec.encode import encode_merge, encode_standalone
from actormsg.core.values import (
    BoolValue,
    F32Value,
    I16Value,
    I64Value,
    StringValue,
    U64Value,
    UsizeValue,
    VecI32Value,
    VecU32Value,
)


@pytest.mark.parametrize("field", ["parameters", "virtual_parameters", "function_parameters"])
def test_decodable_kinds_survive_standalone_round_trip(field: str) -> None:
    params = {
        "count": U64Value(value=2**64 - 1),
        "label": StringValue(value="channel_A"),
        "on": BoolValue(value=True),
        "offset": I64Value(value=-12),
        "ids": VecU32Value(value=[0, 4, 2**32 - 1]),
        "deltas": VecI32Value(value=[-5, 5]),
    }
    assert decode_field(encode_standalone(params, field), field) == params


def test_merge_round_trip_preserves_other_sections() -> None:
    base = '{"actor_name": "a", "virtual_parameters": {"speed": 3}}'
    params = {"n": U64Value(value=1)}
    merged = encode_merge(params, "parameters", base)
    assert decode_field(merged, "parameters") == params
    assert decode_field(merged, "virtual_parameters") == {"speed": U64Value(value=3)}


def test_narrow_kinds_do_not_round_trip() -> None:
    params = {
        "a": I16Value(value=3),
        "b": UsizeValue(value=4),
        "c": F32Value(value=0.5),
        "d": I16Value(value=-3),
    }
    back = decode_field(encode_standalone(params, "parameters"), "parameters")
    assert [v.kind for v in back.values()] == ["u64", "u64", "f64", "i64"]
    assert [v.value for v in back.values()] == [3, 4, 0.5, -3]
