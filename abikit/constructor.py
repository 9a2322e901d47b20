"""Contract constructor specification and call encoding."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from abikit.encoder import encode
from abikit.errors import InvalidDataError
from abikit.event_param import Kind, ParamType
from abikit.tokens import (
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
)


@dataclass(frozen=True)
class Param:
    """A function or constructor parameter: its name and type."""

    name: str
    kind: ParamType


def type_check(token: Token, kind: ParamType) -> bool:
    """Tell whether ``token`` is a value of the parameter type ``kind``."""
    if isinstance(token, Address):
        return kind.kind is Kind.ADDRESS
    if isinstance(token, Bytes):
        return kind.kind is Kind.BYTES
    if isinstance(token, String):
        return kind.kind is Kind.STRING
    if isinstance(token, FixedBytes):
        return kind.kind is Kind.FIXED_BYTES and kind.size >= len(token.value)
    if isinstance(token, Int):
        return kind.kind is Kind.INT
    if isinstance(token, Uint):
        return kind.kind is Kind.UINT
    if isinstance(token, Bool):
        return kind.kind is Kind.BOOL
    if isinstance(token, Array):
        return kind.kind is Kind.ARRAY and all(
            type_check(item, kind.inner) for item in token.items
        )
    if isinstance(token, FixedArray):
        return (
            kind.kind is Kind.FIXED_ARRAY
            and kind.size == len(token.items)
            and all(type_check(item, kind.inner) for item in token.items)
        )
    if isinstance(token, Tuple):
        return (
            kind.kind is Kind.TUPLE
            and len(kind.components) == len(token.items)
            and all(type_check(t, k) for t, k in zip(token.items, kind.components))
        )
    return False


def types_check(tokens: Sequence[Token], kinds: Sequence[ParamType]) -> bool:
    """Tell whether ``tokens`` match ``kinds`` one to one."""
    tokens = list(tokens)
    kinds = list(kinds)
    return len(tokens) == len(kinds) and all(
        type_check(token, kind) for token, kind in zip(tokens, kinds)
    )


@dataclass(frozen=True)
class Constructor:
    """Contract constructor specification."""

    inputs: tuple[Param, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.inputs, tuple):
            object.__setattr__(self, "inputs", tuple(self.inputs))

    def _param_types(self) -> list[ParamType]:
        return [param.kind for param in self.inputs]

    def encode_input(self, code: bytes, tokens: Iterable[Token]) -> bytes:
        """Append the encoded constructor arguments to the contract code."""
        tokens = list(tokens)
        if not types_check(tokens, self._param_types()):
            raise InvalidDataError()
        return bytes(code) + encode(tokens)