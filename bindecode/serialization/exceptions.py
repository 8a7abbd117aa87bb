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


class SerializationError(Exception):
    """Base class for every error raised while decoding."""
    pass


class SourceError(SerializationError):
    """The byte source could not deliver the requested bytes."""
    pass


class OutOfDataError(SourceError):
    """ Raised when the source ends before the requested amount of bytes could be read.

    `expected` is the amount of bytes that was requested and `actual` the amount that was available, when known.
    """

    def __init__(self, message: str = 'not enough bytes to read', *, expected: Optional[int] = None,
                 actual: Optional[int] = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class SourceReadError(SourceError):
    """Raised when reading from the underlying stream fails, the original `OSError` is the `__cause__`."""
    pass


class SizeLimitExceededError(SerializationError):
    """ Raised when a read would take the amount of bytes consumed over the configured limit.

    After this exception is raised the session cannot be used anymore, every following read will fail the same way.
    """

    def __init__(self, *, limit: int, bytes_read: int) -> None:
        super().__init__(f'size limit exceeded: {bytes_read} > {limit}')
        self.limit = limit
        self.bytes_read = bytes_read


class InvalidEncodingError(SerializationError):
    """ Raised when the right amount of bytes was read but their content is not valid for the decoded type.

    `description` is a short fixed text of what was being decoded, `detail` has the offending value when available.
    """

    def __init__(self, description: str, detail: Optional[str] = None) -> None:
        super().__init__(description if detail is None else f'{description}: {detail}')
        self.description = description
        self.detail = detail


class TrailingDataError(InvalidEncodingError):
    """Raised when a whole-buffer decode finishes but there are bytes left."""
    pass


class UnsupportedOperationError(SerializationError):
    """Raised when asked for a decode mode that a schema-driven format cannot provide."""
    pass
