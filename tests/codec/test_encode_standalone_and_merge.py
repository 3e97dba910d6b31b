import json
import math

import pytest

from actormsg.codec.encode import (
    encode_map,
    encode_merge,
    encode_parameters,
    encode_standalone,
    encode_value,
    encode_virtual_parameters,
    merge_parameters,
    merge_virtual_parameters,
)
from actormsg.config import CodecSettings
from actormsg.core.errors import DecodeError, EncodeError
from actormsg.core.grammar import DocumentField
from actormsg.core.values import (
    BoolValue,
    F32Value,
    F64Value,
    I16Value,
    I32Value,
    I64Value,
    StringValue,
    U8Value,
    U16Value,
    U32Value,
    U64Value,
    UsizeValue,
    VecI32Value,
    VecU32Value,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        (BoolValue(value=False), False),
        (I16Value(value=-7), -7),
        (I32Value(value=-(2**31)), -(2**31)),
        (I64Value(value=-(2**63)), -(2**63)),
        (U8Value(value=255), 255),
        (U16Value(value=65535), 65535),
        (U32Value(value=2**32 - 1), 2**32 - 1),
        (U64Value(value=2**64 - 1), 2**64 - 1),
        (UsizeValue(value=2**64 - 1), 2**64 - 1),
        (F64Value(value=2.5), 2.5),
        (StringValue(value="hé"), "hé"),
        (VecI32Value(value=[-1, 0]), [-1, 0]),
        (VecU32Value(value=[3]), [3]),
    ],
)
def test_encode_value_table(value: object, expected: object) -> None:
    out = encode_value(value)  # type: ignore[arg-type]
    assert out == expected
    assert type(out) is type(expected)


def test_f32_is_widened_to_double() -> None:
    out = encode_value(F32Value(value=0.1))
    assert isinstance(out, float)
    assert out == 0.10000000149011612


@pytest.mark.parametrize(
    "value",
    [
        F64Value(value=float("nan")),
        F64Value(value=float("inf")),
        F32Value(value=float("-inf")),
    ],
)
def test_non_finite_floats_fail(value: object) -> None:
    with pytest.raises(EncodeError):
        encode_value(value)  # type: ignore[arg-type]


def test_encode_value_rejects_untagged() -> None:
    with pytest.raises(TypeError):
        encode_value(5)  # type: ignore[arg-type]


def test_encode_map_orders_by_name() -> None:
    out = encode_map({"b": U64Value(value=1), "a": BoolValue(value=True)})
    assert list(out) == ["a", "b"]


def test_encode_standalone_reference_form() -> None:
    params = {"b": StringValue(value="c"), "a": U64Value(value=0)}
    assert encode_standalone(params, "parameters") == '{"parameters" : {"a":0,"b":"c"}}'
    assert encode_parameters(params) == '{"parameters" : {"a":0,"b":"c"}}'
    assert (
        encode_virtual_parameters({"v": I16Value(value=-1)})
        == '{"virtual_parameters" : {"v":-1}}'
    )
    assert encode_standalone({}, DocumentField.PARAMETERS) == '{"parameters" : {}}'


def test_encode_standalone_separator_setting() -> None:
    s = CodecSettings(standalone_separator=":")
    assert encode_standalone({"n": U64Value(value=5)}, "parameters", s) == '{"parameters":{"n":5}}'


def test_encode_standalone_nan_is_fatal() -> None:
    with pytest.raises(EncodeError):
        encode_standalone({"x": F64Value(value=math.nan)}, "parameters")


def test_encode_merge_inserts_and_overwrites() -> None:
    base = '{"actor_name": "channel_A", "parameters": {"old": 1}, "z": [1, 2]}'
    out = encode_merge({"n": U64Value(value=5)}, "parameters", base)
    assert out == '{"actor_name":"channel_A","parameters":{"n":5},"z":[1,2]}'
    out2 = merge_virtual_parameters({"v": BoolValue(value=True)}, base)
    assert json.loads(out2)["virtual_parameters"] == {"v": True}
    assert json.loads(out2)["parameters"] == {"old": 1}


def test_encode_merge_resorts_whole_document() -> None:
    base = '{"b": {"y": 1, "x": 2}, "a": 1.0}'
    out = merge_parameters({}, base)
    assert out == '{"a":1.0,"b":{"x":2,"y":1},"parameters":{}}'


@pytest.mark.parametrize("base", ["[1, 2, 3]", '"text"', "42", "null"])
def test_encode_merge_non_object_root_is_passthrough(base: str) -> None:
    assert encode_merge({"n": U64Value(value=5)}, "parameters", base) == base


def test_encode_merge_malformed_base_is_fatal() -> None:
    with pytest.raises(DecodeError):
        encode_merge({"n": U64Value(value=5)}, "parameters", "{broken")


def test_encode_merge_nan_is_fatal() -> None:
    with pytest.raises(EncodeError):
        encode_merge({"x": F32Value(value=float("nan"))}, "parameters", "{}")
