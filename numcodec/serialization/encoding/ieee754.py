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

"""
This module implements fixed-width IEEE-754 floating point: single precision in 4 bytes and double precision in
8 bytes, always little-endian (least significant byte first).

The value's bit pattern is reinterpreted as an unsigned integer and written byte by byte, there's no continuation or
zigzag logic and the width never changes.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.0)  # writes 0000803f
>>> encode_double(se, -2.0)  # writes 00000000000000c0
>>> bytes(se.finalize()).hex()
'0000803f00000000000000c0'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000803f00000000000000c0'))
>>> decode_float(de)
1.0
>>> decode_double(de)
-2.0
>>> de.finalize()

Python floats are doubles, so `encode_float` rounds to the nearest single precision value:

>>> hex(float_to_bits(0.1)), bits_to_float(float_to_bits(0.1))
('0x3dcccccd', 0.10000000149011612)

A value beyond the single precision range can't be encoded:

>>> try:
...     encode_float(Serializer.build_bytes_serializer(), 1e300)
... except ValueError as e:
...     print(*e.args)
too big to encode

All 4 or 8 bytes must be available:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('000080'))
>>> try:
...     decode_float(de)
... except UnexpectedEndOfStream as e:
...     print(*e.args)
not enough bytes to read
"""

import math
import struct

from numcodec.serialization import Deserializer, Serializer, UnexpectedEndOfStream  # noqa: F401

_FLOAT_SIZE = 4
_DOUBLE_SIZE = 8

# single precision NaN payloads are carried in the top 23 mantissa bits of a double NaN
_FLOAT_EXPONENT = 0x7f800000
_FLOAT_MANTISSA = 0x007fffff
_FLOAT_QUIET = 0x00400000
_DOUBLE_EXPONENT = 0x7ff << 52
_MANTISSA_SHIFT = 52 - 23


def _is_float_nan_bits(bits: int) -> bool:
    return (bits & _FLOAT_EXPONENT) == _FLOAT_EXPONENT and bool(bits & _FLOAT_MANTISSA)


def float_to_bits(value: float) -> int:
    """ Reinterpret `value`, rounded to single precision, as an unsigned 32-bit integer.

    NaN skips the platform conversion, which would quiet a signaling NaN. Its sign and the top 23 bits of its payload
    are kept as they are, so a NaN decoded by `bits_to_float` encodes back to the same bits.
    """
    if isinstance(value, float) and math.isnan(value):
        bits = double_to_bits(value)
        mantissa = (bits >> _MANTISSA_SHIFT) & _FLOAT_MANTISSA
        return (bits >> 63) << 31 | _FLOAT_EXPONENT | (mantissa or _FLOAT_QUIET)
    try:
        data = struct.pack('<f', value)
    except OverflowError:
        raise ValueError('too big to encode')
    except struct.error as e:
        raise TypeError(f'expected float, got {type(value).__name__}') from e
    return int.from_bytes(data, byteorder='little')


def bits_to_float(bits: int) -> float:
    """ Reinterpret an unsigned 32-bit integer as a single precision float.

    >>> hex(float_to_bits(bits_to_float(0x7f800001)))
    '0x7f800001'
    """
    data = _to_bytes(bits, _FLOAT_SIZE)
    if _is_float_nan_bits(bits):
        sign = bits >> 31
        return bits_to_double(sign << 63 | _DOUBLE_EXPONENT | (bits & _FLOAT_MANTISSA) << _MANTISSA_SHIFT)
    value, = struct.unpack('<f', data)
    return value


def double_to_bits(value: float) -> int:
    """ Reinterpret `value` as an unsigned 64-bit integer.
    """
    try:
        data = struct.pack('<d', value)
    except struct.error as e:
        raise TypeError(f'expected float, got {type(value).__name__}') from e
    return int.from_bytes(data, byteorder='little')


def bits_to_double(bits: int) -> float:
    """ Reinterpret an unsigned 64-bit integer as a double precision float.
    """
    data = _to_bytes(bits, _DOUBLE_SIZE)
    value, = struct.unpack('<d', data)
    return value


def _to_bytes(bits: int, size: int) -> bytes:
    try:
        return int.to_bytes(bits, size, byteorder='little', signed=False)
    except OverflowError:
        raise ValueError(f'{bits} does not fit in {size * 8} bits')


def _write_le(serializer: Serializer, bits: int, size: int) -> None:
    for shift in range(0, size * 8, 8):
        serializer.write_byte((bits >> shift) & 0xff)


def _read_le(deserializer: Deserializer, size: int) -> int:
    bits = 0
    for shift in range(0, size * 8, 8):
        bits |= deserializer.read_byte() << shift
    return bits


def encode_float(serializer: Serializer, value: float) -> None:
    """ Encode a single precision float using exactly 4 bytes, little-endian.

    This modules's docstring has more details and examples.
    """
    _write_le(serializer, float_to_bits(value), _FLOAT_SIZE)


def decode_float(deserializer: Deserializer) -> float:
    """ Decode a single precision float from exactly 4 bytes, little-endian.
    """
    return bits_to_float(_read_le(deserializer, _FLOAT_SIZE))


def encode_double(serializer: Serializer, value: float) -> None:
    """ Encode a double precision float using exactly 8 bytes, little-endian.

    Every byte is written, covering bit offsets 0, 8, 16, ..., 56.
    """
    _write_le(serializer, double_to_bits(value), _DOUBLE_SIZE)


def decode_double(deserializer: Deserializer) -> float:
    """ Decode a double precision float from exactly 8 bytes, little-endian.
    """
    return bits_to_double(_read_le(deserializer, _DOUBLE_SIZE))
