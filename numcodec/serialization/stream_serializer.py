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

from typing import IO

from typing_extensions import override

from .serializer import Serializer
from .types import Buffer


class StreamSerializer(Serializer):
    """Serializer that pushes bytes straight into a caller-owned binary stream.

    The stream is never flushed nor closed here, and any error raised by its `write` method propagates unchanged.
    There is nothing to finalize: the bytes already live in the stream.
    """

    def __init__(self, stream: IO[bytes]) -> None:
        self._stream = stream
        self._pos = 0

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        # bytes() checks for correct range
        self._stream.write(bytes((data,)))
        self._pos += 1

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data)
        self._stream.write(view)
        self._pos += view.nbytes
