import actormsg
from actormsg import (
    DecodeError,
    U64Value,
    build_function_request,
    decode_field,
    get_actor_name,
)


def test_public_api_exports() -> None:
    for name in actormsg.__all__:
        assert hasattr(actormsg, name), name


def test_decode_transform_encode_cycle() -> None:
    doc = '{"actor_name":"channel_A","parameters":{"a":0,"b":"c"}}'
    params = decode_field(doc, "parameters")
    params["a"] = U64Value(value=params["a"].value + 5)
    out = build_function_request(get_actor_name(doc), "start", params)
    assert out == (
        '{"function_component":{"actor_name":"channel_A","function_name":"start",'
        '"function_parameters":{"a":5,"b":"c"}}}'
    )
    assert issubclass(DecodeError, ValueError)
