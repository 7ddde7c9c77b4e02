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

from typing import IO, Optional

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import UnexpectedEndOfStream


class StreamDeserializer(Deserializer):
    """Deserializer that pulls bytes one at a time from a caller-owned binary stream.

    A single byte of lookahead is kept so `is_empty` and `peek_byte` can be answered, which means at most one byte past
    the last value read may have been taken from the stream. An empty `read(1)` is the end of the source. The stream is
    expected to be blocking, and it is never closed here.
    """

    def __init__(self, stream: IO[bytes]) -> None:
        self._stream = stream
        self._pending: Optional[int] = None
        self._consumed = 0

    def consumed(self) -> int:
        """Number of bytes handed out to decoders so far."""
        return self._consumed

    def _fill(self) -> Optional[int]:
        if self._pending is None:
            chunk = self._stream.read(1)
            if chunk:
                self._pending = chunk[0]
        return self._pending

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise ValueError('trailing data')

    @override
    def is_empty(self) -> bool:
        return self._fill() is None

    @override
    def peek_byte(self) -> int:
        b = self._fill()
        if b is None:
            raise UnexpectedEndOfStream(f'stream ended after {self._consumed} bytes')
        return b

    @override
    def read_byte(self) -> int:
        b = self.peek_byte()
        self._pending = None
        self._consumed += 1
        return b

    @override
    def read_all(self) -> bytes:
        head = b'' if self.is_empty() else bytes((self.read_byte(),))
        rest = self._stream.read()
        if rest:
            self._consumed += len(rest)
        return head + (rest or b'')
