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

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol

from typing_extensions import Self

from .types import Buffer, ByteOrder, SizeLimit

if TYPE_CHECKING:
    from .adapters import SizeLimitDeserializer
    from .bytes_deserializer import BytesDeserializer
    from .stream_deserializer import StreamDeserializer


class Readable(Protocol):
    """Anything that can be read from like a binary file, `read(n)` may return less than `n` bytes."""

    def read(self, n: int, /) -> bytes | None:
        ...


class Deserializer(ABC):
    """ Forward-only reader of bytes, every read consumes what it returns.

    Implementations never look ahead for the caller, there is no peeking, so a deserializer can be backed by a stream
    that is read only once.
    """

    def finalize(self) -> None:
        """Check that all bytes were consumed, the deserializer cannot be used after this."""
        raise TypeError('this deserializer does not support finalization')

    @staticmethod
    def build_bytes_deserializer(data: Buffer, *, byte_order: ByteOrder = ByteOrder.LITTLE) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data, byte_order=byte_order)

    @staticmethod
    def build_stream_deserializer(
        reader: Readable,
        *,
        byte_order: ByteOrder = ByteOrder.LITTLE,
        chunk_size: int | None = None,
    ) -> StreamDeserializer:
        from .stream_deserializer import StreamDeserializer
        return StreamDeserializer(reader, byte_order=byte_order, chunk_size=chunk_size)

    @property
    @abstractmethod
    def byte_order(self) -> ByteOrder:
        """Byte order applied to every multi-byte value read through this deserializer."""
        raise NotImplementedError

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def read_byte(self) -> int:
        """Read a single byte as unsigned int."""
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Read n bytes, when exact=True it errors if there isn't enough data"""
        raise NotImplementedError

    @abstractmethod
    def read_all(self) -> Buffer:
        """Read all bytes until the reader is empty."""
        raise NotImplementedError

    def read_struct(self, format: str) -> tuple[Any, ...]:
        """ Read a fixed-size `struct` format using the session byte order.

        The format must not carry its own byte order character, it is prefixed here.
        """
        full_format = self.byte_order.struct_prefix + format
        size = struct.calcsize(full_format)
        data = self.read_bytes(size)
        return struct.unpack(full_format, data)

    def with_size_limit(self, limit: SizeLimit) -> SizeLimitDeserializer[Self]:
        """Helper method to wrap the current deserializer with SizeLimitDeserializer."""
        from .adapters import SizeLimitDeserializer
        return SizeLimitDeserializer(self, limit)
