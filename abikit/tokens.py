"""Values that can be ABI-encoded, one class per Solidity value family."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_WORD_BITS = 256
_UINT_MAX = (1 << _WORD_BITS) - 1
_INT_MIN = -(1 << (_WORD_BITS - 1))
_U32_MAX = (1 << 32) - 1

ADDRESS_SIZE = 20
WORD_SIZE = 32


def pad_u32(value: int) -> bytes:
    """Return ``value`` as a 32-byte big-endian word."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("pad_u32 expects an integer")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{value} does not fit in 32 bits")
    return value.to_bytes(WORD_SIZE, "big")


def _as_bytes(value: object, what: str) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{what} expects bytes, got {type(value).__name__}")


def _as_tokens(items: Iterable[Token], what: str) -> tuple[Token, ...]:
    result = tuple(items)
    for item in result:
        if not isinstance(item, Token):
            raise TypeError(f"{what} holds only tokens, got {type(item).__name__}")
    return result


def _as_int(value: object, what: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{what} expects an integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Token:
    """Base class of every ABI value."""

    def is_dynamic(self) -> bool:
        """Tell whether the value is encoded in the tail of its container."""
        return False


@dataclass(frozen=True)
class Address(Token):
    """A 20-byte account address."""

    value: bytes

    def __post_init__(self) -> None:
        data = _as_bytes(self.value, "Address")
        if len(data) != ADDRESS_SIZE:
            raise ValueError(f"an address is {ADDRESS_SIZE} bytes, got {len(data)}")
        object.__setattr__(self, "value", data)


@dataclass(frozen=True)
class Bytes(Token):
    """A byte string of any length."""

    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _as_bytes(self.value, "Bytes"))

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class FixedBytes(Token):
    """A byte string of a length fixed by its type."""

    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _as_bytes(self.value, "FixedBytes"))


@dataclass(frozen=True)
class String(Token):
    """A UTF-8 text string."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"String expects str, got {type(self.value).__name__}")

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class Int(Token):
    """A signed integer; negative values are stored in two's complement."""

    value: int

    def __post_init__(self) -> None:
        number = _as_int(self.value, "Int")
        if not _INT_MIN <= number <= _UINT_MAX:
            raise ValueError(f"{number} does not fit in {_WORD_BITS} bits")


@dataclass(frozen=True)
class Uint(Token):
    """An unsigned integer of up to 256 bits."""

    value: int

    def __post_init__(self) -> None:
        number = _as_int(self.value, "Uint")
        if not 0 <= number <= _UINT_MAX:
            raise ValueError(f"{number} does not fit in {_WORD_BITS} unsigned bits")


@dataclass(frozen=True)
class Bool(Token):
    """A boolean."""

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"Bool expects bool, got {type(self.value).__name__}")


@dataclass(frozen=True)
class Array(Token):
    """A variable-length sequence of tokens of one type."""

    items: tuple[Token, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _as_tokens(self.items, "Array"))

    def is_dynamic(self) -> bool:
        return True


@dataclass(frozen=True)
class FixedArray(Token):
    """A sequence of tokens whose length is fixed by its type."""

    items: tuple[Token, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _as_tokens(self.items, "FixedArray"))

    def is_dynamic(self) -> bool:
        return any(item.is_dynamic() for item in self.items)


@dataclass(frozen=True)
class Tuple(Token):
    """A sequence of tokens of possibly different types."""

    items: tuple[Token, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _as_tokens(self.items, "Tuple"))

    def is_dynamic(self) -> bool:
        return any(item.is_dynamic() for item in self.items)