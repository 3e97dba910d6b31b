import json

import pytest

from actormsg.codec.messages import (
    build_function_request,
    build_user_message,
    merge_function_request,
    merge_user_message,
)
from actormsg.config import CodecSettings
from actormsg.core.errors import DecodeError, EncodeError
from actormsg.core.values import F64Value, I32Value, StringValue, U64Value, VecU32Value


def test_build_user_message_reference_form() -> None:
    assert build_user_message("hello") == '{"to_user_message" : "hello"}'


def test_build_user_message_is_verbatim_by_default() -> None:
    out = build_user_message('say "hi"')
    assert out == '{"to_user_message" : "say "hi""}'
    with pytest.raises(json.JSONDecodeError):
        json.loads(out)


def test_build_user_message_escaped_when_configured() -> None:
    out = build_user_message('say "hi"\n', CodecSettings(escape_user_message=True))
    assert json.loads(out) == {"to_user_message": 'say "hi"\n'}


def test_merge_user_message_escapes() -> None:
    out = merge_user_message('a "quoted" text', '{"actor_name": "x"}')
    assert json.loads(out) == {"actor_name": "x", "to_user_message": 'a "quoted" text'}
    assert merge_user_message("new", '{"to_user_message": "old"}') == '{"to_user_message":"new"}'


def test_build_function_request_scenario() -> None:
    out = build_function_request("channel_A", "start", {"n": U64Value(value=5)})
    assert out == (
        '{"function_component":{"actor_name":"channel_A","function_name":"start",'
        '"function_parameters":{"n":5}}}'
    )


def test_build_function_request_encodes_every_parameter() -> None:
    params = {
        "s": StringValue(value="go"),
        "i": I32Value(value=-3),
        "v": VecU32Value(value=[1, 2]),
    }
    doc = json.loads(build_function_request("motor", "set", params))
    assert doc["function_component"]["function_parameters"] == {"i": -3, "s": "go", "v": [1, 2]}


def test_build_function_request_nan_is_fatal() -> None:
    with pytest.raises(EncodeError):
        build_function_request("a", "f", {"x": F64Value(value=float("nan"))})


def test_merge_function_request_keeps_other_keys() -> None:
    base = '{"parameters": {"a": 0}, "to_user_message": "ok"}'
    out = merge_function_request("channel_B", "stop", {}, base)
    assert json.loads(out) == {
        "function_component": {
            "actor_name": "channel_B",
            "function_name": "stop",
            "function_parameters": {},
        },
        "parameters": {"a": 0},
        "to_user_message": "ok",
    }


@pytest.mark.parametrize("base", ["[]", '["a", {"b": 1}]'])
def test_merges_into_array_root_return_text_unchanged(base: str) -> None:
    assert merge_user_message("hi", base) == base
    assert merge_function_request("a", "f", {"n": U64Value(value=1)}, base) == base


def test_merges_with_malformed_base_are_fatal() -> None:
    with pytest.raises(DecodeError):
        merge_user_message("hi", "{")
    with pytest.raises(DecodeError):
        merge_function_request("a", "f", {}, "not json")


def test_merge_into_document_with_unpaired_surrogate_is_fatal() -> None:
    with pytest.raises(DecodeError):
        merge_user_message("x", '{"a": "\\ud800"}')
