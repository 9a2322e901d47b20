"""Contract events: signatures and topic filters."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Union

from Crypto.Hash import keccak

from abikit.constructor import type_check
from abikit.encoder import encode
from abikit.errors import InvalidDataError
from abikit.event_param import EventParam, ParamType
from abikit.tokens import WORD_SIZE, Token


def _keccak256(data: bytes) -> bytes:
    return keccak.new(digest_bits=256, data=data).digest()


def long_signature(name: str, kinds: Iterable[ParamType]) -> bytes:
    """Return the Keccak-256 hash of ``name(type1,type2,...)``."""
    text = f"{name}({','.join(kind.canonical() for kind in kinds)})"
    return _keccak256(text.encode("utf-8"))


@dataclass(frozen=True)
class AnyTopic:
    """A topic position that matches any value."""


@dataclass(frozen=True)
class OneOf:
    """A topic position that matches any of several values."""

    values: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))


@dataclass(frozen=True)
class This:
    """A topic position that matches exactly one value."""

    value: Any


Topic = Union[AnyTopic, OneOf, This]


@dataclass(frozen=True)
class RawTopicFilter:
    """Topic filter expressed with tokens for the indexed parameters."""

    topic0: Topic = AnyTopic()
    topic1: Topic = AnyTopic()
    topic2: Topic = AnyTopic()


@dataclass(frozen=True)
class TopicFilter:
    """Topic filter expressed with 32-byte topic hashes."""

    topic0: Topic = AnyTopic()
    topic1: Topic = AnyTopic()
    topic2: Topic = AnyTopic()
    topic3: Topic = AnyTopic()


def _convert_token(token: Token, kind: ParamType) -> bytes:
    if not type_check(token, kind):
        raise InvalidDataError()
    encoded = encode([token])
    if len(encoded) == WORD_SIZE:
        return encoded
    return _keccak256(encoded)


def _convert_topic(topic: Topic, kind: ParamType | None) -> Topic:
    if isinstance(topic, AnyTopic):
        return topic
    if kind is None:
        raise InvalidDataError()
    if isinstance(topic, OneOf):
        return OneOf(tuple(_convert_token(token, kind) for token in topic.values))
    if isinstance(topic, This):
        return This(_convert_token(topic.value, kind))
    raise TypeError(f"not a topic: {type(topic).__name__}")


@dataclass(frozen=True)
class Event:
    """Contract event specification."""

    name: str
    inputs: tuple[EventParam, ...] = ()
    anonymous: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.inputs, tuple):
            object.__setattr__(self, "inputs", tuple(self.inputs))

    def _indexed_kinds(self) -> list[ParamType]:
        return [param.kind for param in self.inputs if param.indexed]

    def signature(self) -> bytes:
        """Return the event signature hash."""
        return long_signature(self.name, (param.kind for param in self.inputs))

    def filter(self, raw: RawTopicFilter) -> TopicFilter:
        """Turn a token-based filter into a filter over topic hashes."""
        kinds: Sequence[ParamType] = self._indexed_kinds()

        def kind_at(index: int) -> ParamType | None:
            return kinds[index] if index < len(kinds) else None

        converted = [
            _convert_topic(topic, kind_at(index))
            for index, topic in enumerate((raw.topic0, raw.topic1, raw.topic2))
        ]
        if self.anonymous:
            return TopicFilter(*converted, AnyTopic())
        return TopicFilter(This(self.signature()), *converted)