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

from typing import TypeVar

from structlog import get_logger
from typing_extensions import override

from bindecode.serialization.deserializer import Deserializer
from bindecode.serialization.exceptions import SizeLimitExceededError

from ..types import Buffer, SizeLimit
from .generic_adapter import GenericDeserializerAdapter

logger = get_logger()

D = TypeVar('D', bound=Deserializer)


class SizeLimitDeserializer(GenericDeserializerAdapter[D]):
    """ Counts every byte read through it and fails as soon as the count would go over the limit.

    The size of a read is charged before the read is made, so a declared length that is too big fails before any byte
    of it is pulled from the inner deserializer. Once the limit has been exceeded the adapter stays failed: every
    following read raises `SizeLimitExceededError` again, the caller is expected to abandon the session.

    >>> de = Deserializer.build_bytes_deserializer(bytes(16)).with_size_limit(SizeLimit.bounded(10))
    >>> bytes(de.read_bytes(8))
    b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x00'
    >>> de.bytes_read
    8
    >>> de.read_bytes(8)
    Traceback (most recent call last):
    ...
    bindecode.serialization.exceptions.SizeLimitExceededError: size limit exceeded: 16 > 10
    >>> de.bytes_read
    8
    """

    def __init__(self, deserializer: D, limit: SizeLimit) -> None:
        super().__init__(deserializer)
        self.limit = limit
        self._bytes_read = 0
        self._exceeded = False
        self.log = logger.new(size_limit=limit.bound)

    @property
    def bytes_read(self) -> int:
        """Amount of bytes consumed so far, it never goes over the limit."""
        return self._bytes_read

    def _charge(self, read_size: int) -> None:
        total = self._bytes_read + read_size
        if self._exceeded or not self.limit.check(total):
            self._exceeded = True
            assert self.limit.bound is not None
            self.log.debug('size limit exceeded', bytes_read=self._bytes_read, requested=read_size)
            raise SizeLimitExceededError(limit=self.limit.bound, bytes_read=total)
        self._bytes_read = total

    @override
    def read_byte(self) -> int:
        self._charge(1)
        return super().read_byte()

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        if n < 0:
            raise ValueError('value cannot be negative')
        self._charge(n)
        return super().read_bytes(n, exact=exact)

    @override
    def read_all(self) -> Buffer:
        self._charge(0)
        if self.limit.bound is None:
            result = super().read_all()
            self._charge(len(memoryview(result)))
            return result
        result = super().read_bytes(self.limit.bound - self._bytes_read, exact=False)
        self._charge(len(memoryview(result)))
        if not self.is_empty():
            self._charge(1)
        return result
