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
Byte sink and byte source abstractions used by the numeric encoders.

A `Serializer` accepts one byte at a time in the exact order presented, a `Deserializer` hands out one byte at a time
and raises `UnexpectedEndOfStream` once it is exhausted. Both come in an in-memory flavor and in a flavor that wraps a
caller-owned binary stream:

>>> se = Serializer.build_bytes_serializer()
>>> se.write_byte(0xac)
>>> se.write_bytes(b'\x02')
>>> se.cur_pos()
2
>>> bytes(se.finalize()).hex()
'ac02'

>>> de = Deserializer.build_bytes_deserializer(b'\xac\x02')
>>> de.read_byte()
172
>>> de.read_byte()
2
>>> try:
...     de.read_byte()
... except UnexpectedEndOfStream as e:
...     print(*e.args)
not enough bytes to read
"""

from .deserializer import Deserializer
from .exceptions import MalformedVarint, SerializationError, UnexpectedEndOfStream
from .serializer import Serializer

__all__ = [
    'Serializer',
    'Deserializer',
    'SerializationError',
    'UnexpectedEndOfStream',
    'MalformedVarint',
]
