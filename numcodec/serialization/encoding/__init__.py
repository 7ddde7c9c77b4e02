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
This module holds the numeric encodings: variable-length integers and fixed-width IEEE-754 floats.

Each submodule deals with a family of values and looks like this:

    def encode_x(serializer: Serializer, value: ValueType) -> None:
        ...

    def decode_x(deserializer: Deserializer, ...config params...) -> ValueType:
        ...

Encoders only push single bytes into the serializer, decoders only pull single bytes from the deserializer, and no
state is kept between calls, so every function here is reentrant. Sharing one serializer or deserializer between
threads needs external locking, otherwise the bytes of two values would interleave.
"""

SUPPORTED_WIDTHS = (32, 64)


def check_width(bits: int) -> None:
    """ Only 32-bit and 64-bit integers are supported.
    """
    if bits not in SUPPORTED_WIDTHS:
        raise ValueError(f'unsupported integer width: {bits} bits')
