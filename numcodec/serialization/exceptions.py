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


class SerializationError(Exception):
    """Base class for every error raised while encoding or decoding numeric values."""


class UnexpectedEndOfStream(SerializationError):
    """The byte source was exhausted before a value's encoding was fully consumed.

    This is raised for a varint that ends while its last read byte still has the continuation flag set, and for a
    float or double that has fewer than 4 or 8 bytes available. It is not recoverable by the codec itself, the caller
    decides whether to abort or to retry with more data.
    """


class MalformedVarint(SerializationError):
    """A varint has more continuation bytes, or more payload bits, than its width allows."""
