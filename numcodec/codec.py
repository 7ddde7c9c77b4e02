# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
Single entry point over every numeric encoding, keyed by the kind of value.

>>> encode_to_bytes(NumericKind.VUINT32, 300).hex()
'ac02'
>>> decode_from_bytes(NumericKind.VSINT64, b'\x01')
-1
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0102ac02'))
>>> list(decode_all(de, NumericKind.VSINT32))
[-1, 1, 150]
"""

from enum import Enum, unique
from typing import Callable, Iterator, NamedTuple, Union

from typing_extensions import assert_never

from numcodec.serialization import Deserializer, Serializer
from numcodec.serialization.encoding import ieee754, varint

Number = Union[int, float]


@unique
class NumericKind(Enum):
    VUINT32 = 'vuint32'
    VSINT32 = 'vsint32'
    VUINT64 = 'vuint64'
    VSINT64 = 'vsint64'
    FLOAT = 'float'
    DOUBLE = 'double'

    def is_varint(self) -> bool:
        return self not in (NumericKind.FLOAT, NumericKind.DOUBLE)

    def parse(self, text: str) -> Number:
        """Parse a value of this kind from its textual form, ints accept any base prefix and floats accept hex."""
        if self.is_varint():
            return int(text, 0)
        try:
            return float(text)
        except ValueError:
            return float.fromhex(text)


class _VarintCodec(NamedTuple):
    encode: Callable[[Serializer, int], None]
    decode: Callable[..., int]


_VARINT_CODECS: dict[NumericKind, _VarintCodec] = {
    NumericKind.VUINT32: _VarintCodec(varint.encode_vuint32, varint.decode_vuint32),
    NumericKind.VSINT32: _VarintCodec(varint.encode_vsint32, varint.decode_vsint32),
    NumericKind.VUINT64: _VarintCodec(varint.encode_vuint64, varint.decode_vuint64),
    NumericKind.VSINT64: _VarintCodec(varint.encode_vsint64, varint.decode_vsint64),
}


def encode_value(serializer: Serializer, kind: NumericKind, value: Number) -> None:
    """Encode a single value of the given kind."""
    match kind:
        case NumericKind.FLOAT:
            ieee754.encode_float(serializer, value)
        case NumericKind.DOUBLE:
            ieee754.encode_double(serializer, value)
        case NumericKind.VUINT32 | NumericKind.VSINT32 | NumericKind.VUINT64 | NumericKind.VSINT64:
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f'expected int, got {type(value).__name__}')
            _VARINT_CODECS[kind].encode(serializer, value)
        case _:
            assert_never(kind)


def decode_value(deserializer: Deserializer, kind: NumericKind, *, strict: bool = True) -> Number:
    """Decode a single value of the given kind, `strict` only applies to varints."""
    match kind:
        case NumericKind.FLOAT:
            return ieee754.decode_float(deserializer)
        case NumericKind.DOUBLE:
            return ieee754.decode_double(deserializer)
        case NumericKind.VUINT32 | NumericKind.VSINT32 | NumericKind.VUINT64 | NumericKind.VSINT64:
            return _VARINT_CODECS[kind].decode(deserializer, strict=strict)
        case _:
            assert_never(kind)


def encode_to_bytes(kind: NumericKind, value: Number) -> bytes:
    serializer = Serializer.build_bytes_serializer()
    encode_value(serializer, kind, value)
    return bytes(serializer.finalize())


def decode_from_bytes(kind: NumericKind, data: bytes, *, strict: bool = True) -> Number:
    """Decode exactly one value, any byte left over raises `ValueError('trailing data')`."""
    deserializer = Deserializer.build_bytes_deserializer(data)
    value = decode_value(deserializer, kind, strict=strict)
    deserializer.finalize()
    return value


def decode_all(deserializer: Deserializer, kind: NumericKind, *, strict: bool = True) -> Iterator[Number]:
    """Decode consecutive values until the source is empty.

    A value cut short at the end of the source still raises `UnexpectedEndOfStream`.
    """
    while not deserializer.is_empty():
        yield decode_value(deserializer, kind, strict=strict)
