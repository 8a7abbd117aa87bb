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

from typing import Optional

from typing_extensions import override

from .consts import DEFAULT_STREAM_CHUNK_SIZE
from .deserializer import Deserializer, Readable
from .exceptions import OutOfDataError, SourceReadError, TrailingDataError
from .types import ByteOrder


class StreamDeserializer(Deserializer):
    """Implementation of a Deserializer that pulls bytes from a binary stream as they are needed.

    The stream is only read forward and only as much as requested. Reads that return fewer bytes than requested are
    retried until the requested size is reached or the stream returns no bytes at all, the latter is reported as
    `OutOfDataError`. An `OSError` raised by the stream is reported as `SourceReadError`.

    Large reads are split in chunks of at most `chunk_size` bytes, so a huge length read from a broken input can only
    make this class allocate as much memory as the stream actually has.

    >>> import io
    >>> de = Deserializer.build_stream_deserializer(io.BytesIO(b'\\x01\\x02\\x03'))
    >>> de.read_byte()
    1
    >>> bytes(de.read_bytes(2))
    b'\\x02\\x03'
    >>> de.is_empty()
    True
    """

    def __init__(
        self,
        reader: Readable,
        *,
        byte_order: ByteOrder = ByteOrder.LITTLE,
        chunk_size: Optional[int] = None,
    ) -> None:
        if chunk_size is None:
            chunk_size = DEFAULT_STREAM_CHUNK_SIZE
        if chunk_size <= 0:
            raise ValueError('chunk_size must be positive')
        self._reader = reader
        self._byte_order = byte_order
        self._chunk_size = chunk_size
        # at most one byte read ahead by is_empty(), it is handed out first on the next read
        self._pending = b''

    @property
    @override
    def byte_order(self) -> ByteOrder:
        return self._byte_order

    def _read_once(self, n: int) -> bytes:
        try:
            data = self._reader.read(n)
        except OSError as e:
            raise SourceReadError(f'error while reading from source: {e}') from e
        # XXX: non-blocking raw streams return None when no data is available, there's no waiting for it here
        return data or b''

    def _read_up_to(self, n: int) -> bytes:
        parts: list[bytes] = []
        remaining = n
        if self._pending and remaining > 0:
            parts.append(self._pending)
            remaining -= len(self._pending)
            self._pending = b''
        while remaining > 0:
            chunk = self._read_once(min(remaining, self._chunk_size))
            if not chunk:
                break
            parts.append(chunk)
            remaining -= len(chunk)
        return b''.join(parts)

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise TrailingDataError('trailing data')

    @override
    def is_empty(self) -> bool:
        if self._pending:
            return False
        self._pending = self._read_once(1)
        return not self._pending

    @override
    def read_byte(self) -> int:
        data = self.read_bytes(1)
        return data[0]

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        data = self._read_up_to(n)
        if exact and len(data) < n:
            raise OutOfDataError('not enough bytes to read', expected=n, actual=len(data))
        return data

    @override
    def read_all(self) -> bytes:
        parts: list[bytes] = [self._pending]
        self._pending = b''
        while chunk := self._read_once(self._chunk_size):
            parts.append(chunk)
        return b''.join(parts)
