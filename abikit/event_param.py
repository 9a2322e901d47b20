"""Parameter types and event parameter specifications."""

from __future__ import annotations

import enum
import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from typing import Any

from abikit.errors import InvalidNameError, SerializationError


class Kind(enum.Enum):
    """The family a parameter type belongs to."""

    ADDRESS = "address"
    BYTES = "bytes"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    STRING = "string"
    ARRAY = "array"
    FIXED_BYTES = "fixed_bytes"
    FIXED_ARRAY = "fixed_array"
    TUPLE = "tuple"


_SIZED = {Kind.INT, Kind.UINT, Kind.FIXED_BYTES, Kind.FIXED_ARRAY}
_NESTED = {Kind.ARRAY, Kind.FIXED_ARRAY}


@dataclass(frozen=True)
class ParamType:
    """A Solidity ABI parameter type."""

    kind: Kind
    size: int | None = None
    inner: ParamType | None = None
    components: tuple[ParamType, ...] = ()

    def __post_init__(self) -> None:
        if self.kind in _SIZED and self.size is None:
            raise ValueError(f"{self.kind.value} type needs a size")
        if self.kind in _NESTED and self.inner is None:
            raise ValueError(f"{self.kind.value} type needs an element type")
        if not isinstance(self.components, tuple):
            object.__setattr__(self, "components", tuple(self.components))

    def canonical(self) -> str:
        """Return the canonical type name used in signatures."""
        kind = self.kind
        if kind is Kind.INT:
            return f"int{self.size}"
        if kind is Kind.UINT:
            return f"uint{self.size}"
        if kind is Kind.FIXED_BYTES:
            return f"bytes{self.size}"
        if kind is Kind.ARRAY:
            return f"{self.inner.canonical()}[]"
        if kind is Kind.FIXED_ARRAY:
            return f"{self.inner.canonical()}[{self.size}]"
        if kind is Kind.TUPLE:
            return "(" + ",".join(c.canonical() for c in self.components) + ")"
        return kind.value

    def is_dynamic(self) -> bool:
        """Tell whether values of this type are encoded in the tail."""
        if self.kind in (Kind.BYTES, Kind.STRING, Kind.ARRAY):
            return True
        if self.kind is Kind.FIXED_ARRAY:
            return self.inner.is_dynamic()
        if self.kind is Kind.TUPLE:
            return any(c.is_dynamic() for c in self.components)
        return False

    def __str__(self) -> str:
        return self.canonical()


@dataclass(frozen=True)
class EventParam:
    """An event parameter: its name, type and whether it is indexed."""

    name: str
    kind: ParamType
    indexed: bool = False


_SIMPLE = {
    "address": ParamType(Kind.ADDRESS),
    "bytes": ParamType(Kind.BYTES),
    "bool": ParamType(Kind.BOOL),
    "string": ParamType(Kind.STRING),
    "int": ParamType(Kind.INT, size=256),
    "uint": ParamType(Kind.UINT, size=256),
    "tuple": ParamType(Kind.TUPLE),
}

_PREFIXED = (("uint", Kind.UINT), ("int", Kind.INT), ("bytes", Kind.FIXED_BYTES))


def _parse_size(digits: str, text: str) -> int:
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise InvalidNameError(text)
    return int(digits)


def _split_top_level(body: str, text: str) -> Iterator[str]:
    if not body:
        return
    depth = 0
    start = 0
    for pos, char in enumerate(body):
        if char in "([":
            depth += 1
        elif char in ")]":
            depth -= 1
            if depth < 0:
                raise InvalidNameError(text)
        elif char == "," and depth == 0:
            yield body[start:pos]
            start = pos + 1
    if depth != 0:
        raise InvalidNameError(text)
    yield body[start:]


def parse_param_type(text: str) -> ParamType:
    """Parse a type name such as ``uint256[]`` or ``(address,bytes)``."""
    if not isinstance(text, str) or not text:
        raise InvalidNameError(str(text))
    if text.endswith("]"):
        opening = text.rfind("[")
        if opening <= 0:
            raise InvalidNameError(text)
        inner = parse_param_type(text[:opening])
        size_text = text[opening + 1 : -1]
        if not size_text:
            return ParamType(Kind.ARRAY, inner=inner)
        return ParamType(Kind.FIXED_ARRAY, size=_parse_size(size_text, text), inner=inner)
    if text.startswith("(") and text.endswith(")"):
        parts = _split_top_level(text[1:-1], text)
        return ParamType(Kind.TUPLE, components=tuple(parse_param_type(p) for p in parts))
    simple = _SIMPLE.get(text)
    if simple is not None:
        return simple
    for prefix, kind in _PREFIXED:
        if text.startswith(prefix):
            return ParamType(kind, size=_parse_size(text[len(prefix) :], text))
    raise InvalidNameError(text)


def _set_tuple_components(
    kind: ParamType, components: list[ParamType] | None
) -> ParamType:
    if kind.kind is Kind.TUPLE:
        if components is not None:
            return replace(kind, components=tuple(components))
        if not kind.components:
            raise SerializationError("missing field `components`")
        return kind
    if kind.kind in _NESTED:
        return replace(kind, inner=_set_tuple_components(kind.inner, components))
    return kind


def _read_type(value: Any) -> ParamType:
    if not isinstance(value, str):
        raise SerializationError("invalid type: expected a type name string")
    try:
        return parse_param_type(value)
    except InvalidNameError as exc:
        raise SerializationError(str(exc)) from exc


def _read_components(value: Any) -> list[ParamType]:
    if not isinstance(value, list):
        raise SerializationError("invalid type: expected a list of components")
    return [_parse_tuple_param(item) for item in value]


def _parse_tuple_param(data: Any) -> ParamType:
    if not isinstance(data, Mapping):
        raise SerializationError("expected a valid tuple parameter spec")
    if "type" not in data:
        raise SerializationError("missing field `type`")
    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise SerializationError("invalid type: expected a string name")
    kind = _read_type(data["type"])
    components = _read_components(data["components"]) if "components" in data else None
    return _set_tuple_components(kind, components)


def parse_event_param(data: Mapping[str, Any]) -> EventParam:
    """Build an event parameter from a decoded JSON object."""
    if not isinstance(data, Mapping):
        raise SerializationError("expected a valid event parameter spec")
    if "name" not in data:
        raise SerializationError("missing field `name`")
    if "type" not in data:
        raise SerializationError("missing field `kind`")
    name = data["name"]
    if not isinstance(name, str):
        raise SerializationError("invalid type: expected a string name")
    kind = _read_type(data["type"])
    components = _read_components(data["components"]) if "components" in data else None
    kind = _set_tuple_components(kind, components)
    indexed = data.get("indexed", False)
    if not isinstance(indexed, bool):
        raise SerializationError("invalid type: expected a boolean `indexed`")
    return EventParam(name=name, kind=kind, indexed=indexed)


def _unique_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            field = "kind" if key == "type" else key
            raise SerializationError(f"duplicate field `{field}`")
        result[key] = value
    return result


def event_param_from_json(text: str | bytes) -> EventParam:
    """Read an event parameter from its JSON description."""
    try:
        data = json.loads(text, object_pairs_hook=_unique_keys)
    except json.JSONDecodeError as exc:
        raise SerializationError(exc) from exc
    return parse_event_param(data)