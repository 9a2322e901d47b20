"""ABI encoding of token sequences into bytes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from abikit.tokens import (
    WORD_SIZE,
    Address,
    Array,
    Bool,
    Bytes,
    FixedArray,
    FixedBytes,
    Int,
    String,
    Token,
    Tuple,
    Uint,
    pad_u32,
)

_WORD_MODULUS = 1 << (8 * WORD_SIZE)


def _pad_fixed_bytes(data: bytes) -> list[bytes]:
    return [
        data[start : start + WORD_SIZE].ljust(WORD_SIZE, b"\x00")
        for start in range(0, len(data), WORD_SIZE)
    ]


def _pad_bytes(data: bytes) -> list[bytes]:
    return [pad_u32(len(data)), *_pad_fixed_bytes(data)]


class _Mediate:
    """An intermediate, partly laid out piece of an encoding."""

    def head_len(self) -> int:
        return WORD_SIZE

    def tail_len(self) -> int:
        return 0

    def head(self, suffix_offset: int) -> list[bytes]:
        return [pad_u32(suffix_offset)]

    def tail(self) -> list[bytes]:
        return []


@dataclass
class _Raw(_Mediate):
    words: list[bytes]

    def head_len(self) -> int:
        return WORD_SIZE * len(self.words)

    def head(self, suffix_offset: int) -> list[bytes]:
        return list(self.words)


@dataclass
class _RawTuple(_Mediate):
    parts: list[_Mediate]

    def head_len(self) -> int:
        return WORD_SIZE * len(self.parts)

    def head(self, suffix_offset: int) -> list[bytes]:
        return [word for part in self.parts for word in part.head(0)]


@dataclass
class _Prefixed(_Mediate):
    words: list[bytes]

    def tail_len(self) -> int:
        return WORD_SIZE * len(self.words)

    def tail(self) -> list[bytes]:
        return list(self.words)


@dataclass
class _PrefixedSequence(_Mediate):
    """A dynamic fixed-size array or a dynamic tuple."""

    parts: list[_Mediate]

    def tail_len(self) -> int:
        return sum(p.head_len() + p.tail_len() for p in self.parts)

    def tail(self) -> list[bytes]:
        return _encode_head_tail(self.parts)


@dataclass
class _PrefixedArrayWithLength(_Mediate):
    parts: list[_Mediate]

    def tail_len(self) -> int:
        return WORD_SIZE + sum(p.head_len() + p.tail_len() for p in self.parts)

    def tail(self) -> list[bytes]:
        return [pad_u32(len(self.parts)), *_encode_head_tail(self.parts)]


def _encode_head_tail(parts: Sequence[_Mediate]) -> list[bytes]:
    offset = sum(part.head_len() for part in parts)
    result: list[bytes] = []
    for part in parts:
        result.extend(part.head(offset))
        offset += part.tail_len()
    for part in parts:
        result.extend(part.tail())
    return result


def _encode_token(token: Token) -> _Mediate:
    if isinstance(token, Address):
        return _Raw([token.value.rjust(WORD_SIZE, b"\x00")])
    if isinstance(token, Bytes):
        return _Prefixed(_pad_bytes(token.value))
    if isinstance(token, String):
        return _Prefixed(_pad_bytes(token.value.encode("utf-8")))
    if isinstance(token, FixedBytes):
        return _Raw(_pad_fixed_bytes(token.value))
    if isinstance(token, (Int, Uint)):
        return _Raw([(token.value % _WORD_MODULUS).to_bytes(WORD_SIZE, "big")])
    if isinstance(token, Bool):
        return _Raw([int(token.value).to_bytes(WORD_SIZE, "big")])
    if isinstance(token, Array):
        return _PrefixedArrayWithLength([_encode_token(t) for t in token.items])
    if isinstance(token, FixedArray):
        parts = [_encode_token(t) for t in token.items]
        if token.is_dynamic():
            return _PrefixedSequence(parts)
        return _Raw(_encode_head_tail(parts))
    if isinstance(token, Tuple):
        parts = [_encode_token(t) for t in token.items]
        if token.is_dynamic():
            return _PrefixedSequence(parts)
        return _RawTuple(parts)
    raise TypeError(f"cannot encode {type(token).__name__}")


def encode(tokens: Iterable[Token]) -> bytes:
    """Encode a sequence of tokens into ABI-compliant bytes."""
    parts = [_encode_token(token) for token in tokens]
    return b"".join(_encode_head_tail(parts))