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
This module implements the zigzag mapping between signed and unsigned integers of a fixed width.

Signed values are interleaved so that small magnitudes, positive or negative, map to small unsigned codes:

>>> [zigzag_encode(n, bits=32) for n in (0, -1, 1, -2, 2)]
[0, 1, 2, 3, 4]
>>> [zigzag_decode(n, bits=32) for n in (0, 1, 2, 3, 4)]
[0, -1, 1, -2, 2]

The extremes of the signed range map to the extremes of the unsigned range:

>>> zigzag_encode(2**31 - 1, bits=32), zigzag_encode(-2**31, bits=32)
(4294967294, 4294967295)
>>> zigzag_decode(2**64 - 1, bits=64)
-9223372036854775808
"""

from numcodec.serialization.encoding import check_width


def zigzag_encode(value: int, *, bits: int) -> int:
    """ Map a signed `bits`-wide integer to its unsigned zigzag code.

    Python's `>>` on a negative int is an arithmetic shift, which is exactly the sign mask the mapping needs.
    """
    check_width(bits)
    if not -(1 << (bits - 1)) <= value < (1 << (bits - 1)):
        raise ValueError(f'{value} does not fit in a signed {bits}-bit integer')
    return (value << 1) ^ (value >> (bits - 1))


def zigzag_decode(value: int, *, bits: int) -> int:
    """ Map an unsigned zigzag code back to the signed integer it represents.
    """
    check_width(bits)
    if not 0 <= value < (1 << bits):
        raise ValueError(f'{value} does not fit in an unsigned {bits}-bit integer')
    return (value >> 1) ^ -(value & 1)
