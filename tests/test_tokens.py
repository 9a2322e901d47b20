import pytest

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
    pad_u32,
)

ADDR1 = Address(b"\x11" * 20)
ADDR2 = Address(b"\x22" * 20)


def test_pad_u32_endianness():
    assert pad_u32(0x1)[31] == 1
    assert pad_u32(0x100)[30] == 1


def test_pad_u32_shape():
    word = pad_u32(0x20)
    assert len(word) == 32
    assert word == bytes(31) + b"\x20"


def test_pad_u32_zero_and_max():
    assert pad_u32(0) == bytes(32)
    assert pad_u32(0xFFFFFFFF) == bytes(28) + b"\xff\xff\xff\xff"


@pytest.mark.parametrize("value", [-1, 1 << 32])
def test_pad_u32_out_of_range(value):
    with pytest.raises(ValueError):
        pad_u32(value)


@pytest.mark.parametrize(
    "token",
    [ADDR1, FixedBytes(b"\x12\x34"), Int(5), Uint(4), Bool(True)],
)
def test_static_tokens(token):
    assert token.is_dynamic() is False


@pytest.mark.parametrize("token", [Bytes(b"\x12"), String("gavofyork"), Array([])])
def test_dynamic_tokens(token):
    assert token.is_dynamic() is True


def test_fixed_array_of_addresses_is_static():
    assert FixedArray([ADDR1, ADDR2]).is_dynamic() is False


def test_fixed_array_of_arrays_is_dynamic():
    assert FixedArray([Array([ADDR1]), Array([ADDR2])]).is_dynamic() is True


def test_array_of_static_items_is_dynamic():
    assert Array([FixedArray([ADDR1, ADDR2])]).is_dynamic() is True


def test_tuple_dynamism_follows_members():
    assert Tuple([ADDR1, ADDR2]).is_dynamic() is False
    assert Tuple([Uint(1), String("gavofyork")]).is_dynamic() is True
    assert Tuple([Bool(True), Tuple([String("day")])]).is_dynamic() is True


def test_sequences_become_tuples():
    arr = Array([ADDR1, ADDR2])
    assert arr.items == (ADDR1, ADDR2)
    assert arr == Array((ADDR1, ADDR2))


def test_bytearray_is_normalised():
    assert Bytes(bytearray(b"\x12\x34")).value == b"\x12\x34"
    assert Address(bytearray(b"\x11" * 20)) == ADDR1


def test_address_length_checked():
    with pytest.raises(ValueError):
        Address(b"\x11" * 19)


def test_uint_range_checked():
    assert Uint((1 << 256) - 1).value == (1 << 256) - 1
    with pytest.raises(ValueError):
        Uint(-1)
    with pytest.raises(ValueError):
        Uint(1 << 256)


def test_int_range_checked():
    assert Int(-(1 << 255)).value == -(1 << 255)
    with pytest.raises(ValueError):
        Int(-(1 << 255) - 1)


def test_type_errors():
    with pytest.raises(TypeError):
        String(b"abc")
    with pytest.raises(TypeError):
        Bool(1)
    with pytest.raises(TypeError):
        Uint(True)
    with pytest.raises(TypeError):
        Array([1, 2])


def test_tokens_are_hashable_values():
    assert {Array([ADDR1]), Array([ADDR1])} == {Array([ADDR1])}