import pytest

from abikit.constructor import Constructor, Param, type_check, types_check
from abikit.encoder import encode
from abikit.errors import InvalidDataError
from abikit.event_param import Kind, ParamType, parse_param_type
from abikit.tokens import (
    Address,
    Array,
    Bool,
    Bytes,
    FixedArray,
    FixedBytes,
    Int,
    String,
    Tuple,
    Uint,
)

UINT256 = ParamType(Kind.UINT, size=256)
ADDRESS = ParamType(Kind.ADDRESS)


def test_encode_input_without_params_returns_code():
    constructor = Constructor(inputs=[])
    assert constructor.encode_input(b"\x60\x80", []) == b"\x60\x80"


def test_encode_input_appends_encoded_arguments():
    constructor = Constructor(inputs=[Param("foo", UINT256)])
    result = constructor.encode_input(b"\xaa\xbb", [Uint(4)])
    assert result[:2] == b"\xaa\xbb"
    assert result[2:] == encode([Uint(4)])
    assert len(result) == 34


def test_encode_input_address_word():
    constructor = Constructor(inputs=[Param("owner", ADDRESS)])
    result = constructor.encode_input(b"", [Address(b"\x11" * 20)])
    assert result == b"\x00" * 12 + b"\x11" * 20


def test_encode_input_rejects_wrong_type():
    constructor = Constructor(inputs=[Param("foo", UINT256)])
    with pytest.raises(InvalidDataError):
        constructor.encode_input(b"", [Bool(True)])


def test_encode_input_rejects_wrong_count():
    constructor = Constructor(inputs=[Param("foo", UINT256)])
    with pytest.raises(InvalidDataError):
        constructor.encode_input(b"", [])
    with pytest.raises(InvalidDataError):
        constructor.encode_input(b"", [Uint(1), Uint(2)])


def test_inputs_are_stored_as_tuple():
    params = [Param("a", UINT256), Param("b", ADDRESS)]
    assert Constructor(inputs=params).inputs == tuple(params)


@pytest.mark.parametrize(
    "token, type_name",
    [
        (Address(b"\x00" * 20), "address"),
        (Bytes(b"\x01"), "bytes"),
        (String("x"), "string"),
        (FixedBytes(b"\x01\x02"), "bytes2"),
        (FixedBytes(b"\x01"), "bytes32"),
        (Int(-1), "int256"),
        (Uint(1), "uint8"),
        (Bool(False), "bool"),
        (Array([Uint(1), Uint(2)]), "uint256[]"),
        (Array([]), "address[]"),
        (FixedArray([Bool(True), Bool(False)]), "bool[2]"),
        (Tuple([Uint(1), String("a")]), "(uint256,string)"),
    ],
)
def test_type_check_accepts_matching(token, type_name):
    assert type_check(token, parse_param_type(type_name)) is True


@pytest.mark.parametrize(
    "token, type_name",
    [
        (Address(b"\x00" * 20), "uint256"),
        (Bytes(b"\x01"), "string"),
        (FixedBytes(b"\x01\x02\x03"), "bytes2"),
        (Int(1), "uint256"),
        (Uint(1), "int256"),
        (Array([Uint(1), Bool(True)]), "uint256[]"),
        (FixedArray([Bool(True)]), "bool[2]"),
        (Tuple([Uint(1)]), "(uint256,string)"),
        (Tuple([String("a"), Uint(1)]), "(uint256,string)"),
    ],
)
def test_type_check_rejects_mismatch(token, type_name):
    assert type_check(token, parse_param_type(type_name)) is False


def test_types_check_lengths_and_order():
    kinds = [UINT256, ADDRESS]
    assert types_check([Uint(1), Address(b"\x00" * 20)], kinds) is True
    assert types_check([Address(b"\x00" * 20), Uint(1)], kinds) is False
    assert types_check([Uint(1)], kinds) is False
    assert types_check([], []) is True