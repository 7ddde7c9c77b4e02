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
This module implements variable-length integers (varints) of 32 and 64 bits, unsigned and zigzag-signed.

Each byte carries 7 bits of the value, least significant group first, and its high bit is the continuation flag: set
means more bytes follow, clear means this is the last byte. A 32-bit value takes 1 to 5 bytes and a 64-bit value takes
1 to 10 bytes. Signed values go through the zigzag mapping first, see the `zigzag` module.

>>> se = Serializer.build_bytes_serializer()
>>> encode_vuint32(se, 0)  # writes 00
>>> encode_vuint32(se, 127)  # writes 7f
>>> encode_vuint32(se, 128)  # writes 8001
>>> encode_vuint32(se, 300)  # writes ac02
>>> encode_vsint32(se, -1)  # writes 01
>>> encode_vsint32(se, 1)  # writes 02
>>> bytes(se.finalize()).hex()
'007f8001ac020102'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('007f8001ac020102'))
>>> [decode_vuint32(de) for _ in range(4)]
[0, 127, 128, 300]
>>> decode_vsint32(de), decode_vsint32(de)
(-1, 1)
>>> de.finalize()

The widest values use every byte the width allows:

>>> se = Serializer.build_bytes_serializer()
>>> encode_vuint32(se, 2**32 - 1)
>>> encode_vuint64(se, 2**64 - 1)
>>> bytes(se.finalize()).hex()
'ffffffff0fffffffffffffffffff01'

A source that runs out in the middle of a value is an error:

>>> de = Deserializer.build_bytes_deserializer(b'\xac')
>>> try:
...     decode_vuint32(de)
... except UnexpectedEndOfStream as e:
...     print(*e.args)
not enough bytes to read

Decoding is strict by default, a varint that cannot belong to the requested width is rejected. With `strict=False`
there is no cap on the number of bytes and groups past the width wrap around: the shift is taken modulo the width and
bits pushed past the top are lost.

>>> data = bytes.fromhex('ffffffff1f')
>>> try:
...     decode_vuint32(Deserializer.build_bytes_deserializer(data))
... except MalformedVarint as e:
...     print(*e.args)
varint does not fit in 32 bits
>>> decode_vuint32(Deserializer.build_bytes_deserializer(data), strict=False)
4294967295

>>> data = bytes.fromhex('808080808000')
>>> try:
...     decode_vuint32(Deserializer.build_bytes_deserializer(data))
... except MalformedVarint as e:
...     print(*e.args)
varint longer than 5 bytes
>>> decode_vuint32(Deserializer.build_bytes_deserializer(data), strict=False)
0
>>> decode_vuint32(Deserializer.build_bytes_deserializer(bytes.fromhex('808080808001')), strict=False)
8
"""

from numcodec.serialization import Deserializer, MalformedVarint, Serializer, UnexpectedEndOfStream  # noqa: F401
from numcodec.serialization.encoding import check_width
from numcodec.serialization.encoding.zigzag import zigzag_decode, zigzag_encode

_CONTINUATION = 0b1000_0000
_PAYLOAD = 0b0111_1111


def max_varint_size(bits: int) -> int:
    """ Largest number of bytes a varint of the given width can take: 5 for 32 bits, 10 for 64 bits.
    """
    check_width(bits)
    return -(-bits // 7)


def varint_size(value: int, *, bits: int) -> int:
    """ Number of bytes the unsigned `value` encodes to.

    >>> varint_size(127, bits=32), varint_size(128, bits=32), varint_size(2**64 - 1, bits=64)
    (1, 2, 10)
    """
    _check_unsigned(value, bits)
    return max(1, -(-value.bit_length() // 7))


def _check_unsigned(value: int, bits: int) -> None:
    check_width(bits)
    if not 0 <= value < (1 << bits):
        raise ValueError(f'{value} does not fit in an unsigned {bits}-bit integer')


def _encode_unsigned(serializer: Serializer, value: int, *, bits: int) -> None:
    _check_unsigned(value, bits)
    while True:
        if value & ~_PAYLOAD == 0:
            serializer.write_byte(value)
            return
        serializer.write_byte((value & _PAYLOAD) | _CONTINUATION)
        value >>= 7


def _decode_unsigned(deserializer: Deserializer, *, bits: int, strict: bool) -> int:
    max_size = max_varint_size(bits)
    result = 0
    shift = 0
    size = 0
    while True:
        byte = deserializer.read_byte()
        size += 1
        # a shift past the width only happens when not strict, it wraps around
        result |= (byte & _PAYLOAD) << (shift % bits)
        shift += 7
        if strict:
            if result >> bits:
                raise MalformedVarint(f'varint does not fit in {bits} bits')
            if byte & _CONTINUATION and size == max_size:
                raise MalformedVarint(f'varint longer than {max_size} bytes')
        if not byte & _CONTINUATION:
            return result & ((1 << bits) - 1)


def encode_vuint32(serializer: Serializer, value: int) -> None:
    """ Encode an unsigned 32-bit integer as a varint of 1 to 5 bytes.
    """
    _encode_unsigned(serializer, value, bits=32)


def decode_vuint32(deserializer: Deserializer, *, strict: bool = True) -> int:
    """ Decode an unsigned 32-bit varint.

    This module's docstring has more details on `strict` and examples.
    """
    return _decode_unsigned(deserializer, bits=32, strict=strict)


def encode_vsint32(serializer: Serializer, value: int) -> None:
    """ Encode a signed 32-bit integer as the varint of its zigzag code.
    """
    _encode_unsigned(serializer, zigzag_encode(value, bits=32), bits=32)


def decode_vsint32(deserializer: Deserializer, *, strict: bool = True) -> int:
    return zigzag_decode(_decode_unsigned(deserializer, bits=32, strict=strict), bits=32)


def encode_vuint64(serializer: Serializer, value: int) -> None:
    """ Encode an unsigned 64-bit integer as a varint of 1 to 10 bytes.
    """
    _encode_unsigned(serializer, value, bits=64)


def decode_vuint64(deserializer: Deserializer, *, strict: bool = True) -> int:
    """ Decode an unsigned 64-bit varint.

    This module's docstring has more details on `strict` and examples.
    """
    return _decode_unsigned(deserializer, bits=64, strict=strict)


def encode_vsint64(serializer: Serializer, value: int) -> None:
    """ Encode a signed 64-bit integer as the varint of its zigzag code.
    """
    _encode_unsigned(serializer, zigzag_encode(value, bits=64), bits=64)


def decode_vsint64(deserializer: Deserializer, *, strict: bool = True) -> int:
    return zigzag_decode(_decode_unsigned(deserializer, bits=64, strict=strict), bits=64)
