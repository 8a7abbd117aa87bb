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
Entry points for decoding values.

A decode session is one forward pass over one byte source, with one byte order and one size limit. `decode` and
`decode_from` run a session for a single value, `DecodeSession` can be used directly when a source holds more than one
value, like a header followed by a payload:

>>> from bindecode.types import u8, u16
>>> session = DecodeSession(b'MAGC\\x02\\x01\\x00\\x02\\x00', byte_order=ByteOrder.LITTLE)
>>> session.expect_magic(b'MAGC')
>>> session.decode(u8)
2
>>> session.decode(u16), session.decode(u16)
(1, 2)
>>> session.bytes_read
9
>>> session.finalize()
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional, TypeVar, Union

from structlog import get_logger

from bindecode.conf import DecoderSettings, get_global_settings
from bindecode.serialization import Buffer, ByteOrder, Deserializer, InvalidEncodingError, SerializationError, SizeLimit
from bindecode.serialization.adapters import SizeLimitDeserializer
from bindecode.serialization.deserializer import Readable
from bindecode.shapes import Shape, make_shape

logger = get_logger()

T = TypeVar('T')


def as_shape(shape_or_type: Union[Shape[T], type[T]], /) -> Shape[T]:
    """Use the given Shape as is, or make one from the given type annotation."""
    if isinstance(shape_or_type, Shape):
        return shape_or_type
    return make_shape(shape_or_type)


class DecodeSession:
    """ Holds the deserializer chain for one byte source.

    The source is either a bytes-like object or a binary stream (anything with a `read(n)` method, like an open file).
    When `limit` or `byte_order` are not given they come from the settings, which are the global settings unless a
    `settings` instance is passed.

    Every decode consumes bytes from the same source and counts towards the same limit. Any error leaves the session
    in an unspecified position, it should not be used afterwards.
    """

    def __init__(
        self,
        source: Union[Buffer, Readable],
        *,
        limit: Optional[SizeLimit] = None,
        byte_order: Optional[ByteOrder] = None,
        settings: Optional[DecoderSettings] = None,
    ) -> None:
        if settings is None:
            settings = get_global_settings()
        if limit is None:
            limit = settings.default_size_limit()
        if byte_order is None:
            byte_order = settings.BYTE_ORDER

        deserializer: Deserializer
        if hasattr(source, 'read'):
            deserializer = Deserializer.build_stream_deserializer(
                source,
                byte_order=byte_order,
                chunk_size=settings.STREAM_CHUNK_SIZE,
            )
        else:
            deserializer = Deserializer.build_bytes_deserializer(source, byte_order=byte_order)

        self._deserializer: SizeLimitDeserializer[Deserializer] = deserializer.with_size_limit(limit)
        self.log = logger.new(byte_order=byte_order.value, size_limit=limit.bound)

    @property
    def byte_order(self) -> ByteOrder:
        return self._deserializer.byte_order

    @property
    def bytes_read(self) -> int:
        """Amount of bytes consumed by this session so far."""
        return self._deserializer.bytes_read

    @contextmanager
    def _log_failure(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SerializationError as e:
            self.log.debug('decode failed', operation=operation, error=type(e).__name__, detail=str(e),
                           bytes_read=self.bytes_read)
            raise

    def decode(self, shape: Union[Shape[T], type[T]], /) -> T:
        """Decode the next value, `shape` can be a Shape instance or a type annotation (see `make_shape`)."""
        # XXX: build the shape before reading anything, an unsupported annotation is not a decode failure
        actual_shape = as_shape(shape)
        with self._log_failure('decode'):
            return actual_shape.deserialize(self._deserializer)

    def expect_magic(self, magic: bytes, /) -> None:
        """Consume `len(magic)` bytes and fail with InvalidEncodingError if they're not exactly `magic`."""
        with self._log_failure('expect_magic'):
            data = bytes(self._deserializer.read_bytes(len(magic)))
            if data != magic:
                raise InvalidEncodingError('invalid magic', f'expected {magic.hex()}, got {data.hex()}')

    def finalize(self) -> None:
        """Fail with TrailingDataError if the source still has bytes, the session cannot be used after this."""
        with self._log_failure('finalize'):
            self._deserializer.finalize()


def decode(
    shape: Union[Shape[T], type[T]],
    data: Buffer,
    /,
    *,
    limit: Optional[SizeLimit] = None,
    byte_order: Optional[ByteOrder] = None,
) -> T:
    """ Decode a single value that must take all of `data`.

    >>> decode(tuple[bool, str], b'\\x01\\x02hi', byte_order=ByteOrder.BIG)
    (True, 'hi')
    """
    session = DecodeSession(data, limit=limit, byte_order=byte_order)
    value = session.decode(shape)
    session.finalize()
    return value


def decode_from(
    shape: Union[Shape[T], type[T]],
    reader: Readable,
    /,
    *,
    limit: Optional[SizeLimit] = None,
    byte_order: Optional[ByteOrder] = None,
) -> T:
    """ Decode a single value from a binary stream, the stream is left right after the value.

    >>> import io
    >>> stream = io.BytesIO(b'\\x03abc\\xff')
    >>> decode_from(str, stream)
    'abc'
    >>> stream.read()
    b'\\xff'
    """
    session = DecodeSession(reader, limit=limit, byte_order=byte_order)
    return session.decode(shape)


__all__ = [
    'DecodeSession',
    'as_shape',
    'decode',
    'decode_from',
]
