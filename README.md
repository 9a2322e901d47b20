# abikit

A library for working with contract ABI data. It can:

- parse ABI parameter type names and JSON event parameter specifications,
- build typed tokens and encode them into the ABI head/tail layout,
- encode constructor calls,
- compute event signatures and build topic filters for events.

## Installation

```
pip install abikit
```

## Parsing parameter types

```python
from abikit.event_param import parse_param_type, event_param_from_json

kind = parse_param_type("uint256[]")
print(kind.canonical())   # "uint256[]"
print(kind.is_dynamic())  # True

param = event_param_from_json('{"name": "foo", "type": "address", "indexed": true}')
print(param.name, param.kind.canonical(), param.indexed)
```

`parse_param_type` understands `address`, `bool`, `string`, `bytes`,
`bytesN`, `intN`, `uintN` (plain `int` and `uint` mean 256 bits), arrays such
as `T[]` and `T[N]`, and tuples written as `(T1,T2,...)`. A name it cannot read
raises `abikit.errors.InvalidNameError`.

`event_param_from_json` and `parse_event_param` (which takes an already decoded
mapping) fill tuple types from a `components` list, nested as deeply as needed,
including arrays of tuples such as `tuple[]`. `indexed` defaults to `False`.
Malformed JSON, duplicate keys, a missing `name` or `type`, a tuple without
components, or values of the wrong type raise
`abikit.errors.SerializationError`.

## Encoding tokens

```python
from abikit.tokens import Address, Array, String, Uint
from abikit.encoder import encode

data = encode([
    Uint(1),
    String("hello"),
    Array([Address(b"\x11" * 20), Address(b"\x22" * 20)]),
])
print(data.hex())
```

The token classes in `abikit.tokens` are `Address`, `Bytes`, `FixedBytes`,
`String`, `Int`, `Uint`, `Bool`, `Array`, `FixedArray` and `Tuple`, all
subclasses of `Token`. They check their values when built: an `Address` must
be 20 bytes, a `Uint` must fit in 256 unsigned bits, and an `Int` may be
negative (it is encoded in two's complement).

`encode` returns `bytes` laid out as 32-byte words. Dynamic values (bytes,
strings, arrays, and fixed arrays or tuples that contain dynamic values) are
placed in the tail and referenced by offsets in the head. `pad_u32(value)`
returns a 32-bit value as a 32-byte big-endian word.

## Constructors

```python
from abikit.constructor import Constructor, Param
from abikit.event_param import parse_param_type
from abikit.tokens import Uint

ctor = Constructor(inputs=[Param(name="supply", kind=parse_param_type("uint256"))])
payload = ctor.encode_input(b"\x60\x80", [Uint(1000)])
```

`encode_input` returns the code followed by the encoded arguments. If the
tokens do not match the declared input types it raises
`abikit.errors.InvalidDataError`. The checks it uses are available as
`type_check(token, kind)` and `types_check(tokens, kinds)`.

## Events

```python
from abikit.event import Event, RawTopicFilter, This
from abikit.event_param import EventParam, parse_param_type
from abikit.tokens import Address

event = Event(
    name="Transfer",
    inputs=[
        EventParam(name="from", kind=parse_param_type("address"), indexed=True),
        EventParam(name="to", kind=parse_param_type("address"), indexed=True),
        EventParam(name="value", kind=parse_param_type("uint256"), indexed=False),
    ],
    anonymous=False,
)

print(event.signature().hex())
topic_filter = event.filter(RawTopicFilter(topic0=This(Address(b"\x11" * 20))))
```

`long_signature(name, kinds)` computes the Keccak-256 hash of a canonical
signature such as `Transfer(address,address,uint256)`; `Event.signature()`
applies it to the event's own inputs.

`Event.filter` takes a `RawTopicFilter` whose three positions hold tokens for
the indexed parameters, each given as `AnyTopic()`, `This(token)` or
`OneOf([token, ...])`, and returns a `TopicFilter` of 32-byte topics. Tokens
that encode to a single word are used as they are; longer encodings are
hashed with Keccak-256. For a non-anonymous event the first topic is the
event signature; for an anonymous event the fourth topic is `AnyTopic()`.
A token of the wrong type, or a value for a position with no indexed
parameter, raises `abikit.errors.InvalidDataError`.

## What it does not do

The package only encodes. It does not decode ABI data, parse raw event logs,
encode or decode function calls, or load a whole contract description from
JSON.

## Errors

All errors derive from `abikit.errors.AbiError`:

- `InvalidNameError`: a type name could not be read.
- `InvalidDataError`: the data does not match the expected types.
- `SerializationError`: a JSON specification could not be read.

## Running the tests

```
pip install -e ".[test]"
pytest
```