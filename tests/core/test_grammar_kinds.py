import pytest

from actormsg.core.grammar import (
    DECODED_KINDS,
    DocumentField,
    INTEGER_KINDS,
    ValueKind,
    document_field_from_value,
    is_lower_snake,
    value_kind_from_value,
)


def test_all_enum_values_are_lower_snake() -> None:
    for enum in (ValueKind, DocumentField):
        for member in enum:
            assert is_lower_snake(member.value), member


def test_integer_kinds_cover_every_width() -> None:
    assert {k.value for k in INTEGER_KINDS} == {
        "i16",
        "i32",
        "i64",
        "u8",
        "u16",
        "u32",
        "u64",
        "usize",
    }


@pytest.mark.parametrize(
    "name,expected",
    [
        ("u64", ValueKind.U64),
        ("usize", ValueKind.USIZE),
        ("vec_i32", ValueKind.VEC_I32),
        ("VecI32", ValueKind.VEC_I32),
        ("VecU32", ValueKind.VEC_U32),
        ("String", ValueKind.STRING),
    ],
)
def test_value_kind_from_value_accepts_canonical_and_type_names(
    name: str, expected: ValueKind
) -> None:
    assert value_kind_from_value(name) is expected


@pytest.mark.parametrize("bad", ["U64", "vec-u32", "float", ""])
def test_value_kind_from_value_rejects_unknown(bad: str) -> None:
    with pytest.raises(ValueError):
        value_kind_from_value(bad)


def test_decoded_kinds_exclude_narrow_kinds() -> None:
    narrow = {
        ValueKind.I16,
        ValueKind.I32,
        ValueKind.U8,
        ValueKind.U16,
        ValueKind.U32,
        ValueKind.F32,
        ValueKind.USIZE,
    }
    assert not (narrow & DECODED_KINDS)
    assert DECODED_KINDS | narrow == set(ValueKind)


def test_document_field_from_value() -> None:
    assert document_field_from_value("virtual_parameters") is DocumentField.VIRTUAL_PARAMETERS
    with pytest.raises(ValueError):
        document_field_from_value("Parameters")
    with pytest.raises(ValueError):
        document_field_from_value("unknown_section")


def test_is_lower_snake() -> None:
    assert is_lower_snake("function_component")
    assert not is_lower_snake("FunctionComponent")
