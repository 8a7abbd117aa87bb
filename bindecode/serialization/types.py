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

from enum import Enum
from typing import NamedTuple, Optional, TypeAlias

from typing_extensions import Buffer as _Buffer

Buffer: TypeAlias = _Buffer


class ByteOrder(Enum):
    """Byte order used for every multi-byte read of a session."""

    BIG = 'big'
    LITTLE = 'little'

    @property
    def struct_prefix(self) -> str:
        """The `struct` module prefix for this byte order, it never adds padding or alignment."""
        return '>' if self is ByteOrder.BIG else '<'


class SizeLimit(NamedTuple):
    """ Maximum amount of bytes a decode session can consume, `bound=None` means there is no limit.

    >>> SizeLimit.infinite().check(2**64)
    True
    >>> SizeLimit.bounded(10).check(10)
    True
    >>> SizeLimit.bounded(10).check(11)
    False
    """

    bound: Optional[int]

    @classmethod
    def infinite(cls) -> SizeLimit:
        return cls(None)

    @classmethod
    def bounded(cls, bound: int) -> SizeLimit:
        if bound < 0:
            raise ValueError('size limit cannot be negative')
        return cls(bound)

    def is_infinite(self) -> bool:
        return self.bound is None

    def check(self, total: int) -> bool:
        """Whether a session that consumed `total` bytes is still within this limit."""
        return self.bound is None or total <= self.bound
