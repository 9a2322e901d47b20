import re

import pytest

from abikit.errors import (
    AbiError,
    InvalidDataError,
    InvalidNameError,
    SerializationError,
)


def test_invalid_name_message_and_attribute():
    err = InvalidNameError("foo")
    assert str(err) == "Invalid name: foo"
    assert err.name == "foo"


def test_invalid_data_message():
    assert str(InvalidDataError()) == "Invalid data"


def test_serialization_message_and_detail():
    err = SerializationError("missing field `name`")
    assert str(err) == "Serialization error: missing field `name`"
    assert err.detail == "missing field `name`"


@pytest.mark.parametrize(
    ("factory", "message"),
    [
        (lambda: InvalidNameError("x"), "Invalid name: x"),
        (InvalidDataError, "Invalid data"),
        (lambda: SerializationError("bad"), "Serialization error: bad"),
    ],
)
def test_all_errors_are_caught_as_abi_error(factory, message):
    err = factory()
    assert isinstance(err, AbiError)
    assert str(err) == message
    with pytest.raises(AbiError, match=f"^{re.escape(message)}$"):
        raise err


def test_specific_errors_are_distinct():
    err = InvalidDataError()
    assert not isinstance(err, InvalidNameError)
    assert not isinstance(SerializationError("bad"), InvalidNameError)
    assert not isinstance(InvalidNameError("x"), InvalidDataError)
    assert str(err) == "Invalid data"