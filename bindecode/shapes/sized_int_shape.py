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

from typing import ClassVar

from typing_extensions import Self, override

from bindecode.serialization import Deserializer
from bindecode.serialization.encoding.int import decode_int
from bindecode.shapes.shape import Shape
from bindecode.utils.typing import is_subclass


class _SizedIntShape(Shape[int]):
    """ Base class for classes that represent builtin `int` values with a fixed size and signedness.

    >>> U16Shape().from_bytes(b'\\x01\\x02')
    513
    >>> from bindecode.serialization import ByteOrder
    >>> U16Shape().from_bytes(b'\\x01\\x02', byte_order=ByteOrder.BIG)
    258
    >>> I8Shape().from_bytes(b'\\xff')
    -1
    """

    _is_hashable = True
    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    @override
    @classmethod
    def _from_type(cls, type_: type[int], /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, int) or is_subclass(type_, bool):
            raise TypeError('expected int type')
        return cls()

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> int:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed)


class I8Shape(_SizedIntShape):
    _signed = True
    _byte_size = 1


class I16Shape(_SizedIntShape):
    _signed = True
    _byte_size = 2


class I32Shape(_SizedIntShape):
    _signed = True
    _byte_size = 4  # 4-bytes -> 32-bits


class I64Shape(_SizedIntShape):
    _signed = True
    _byte_size = 8


class U8Shape(_SizedIntShape):
    _signed = False
    _byte_size = 1


class U16Shape(_SizedIntShape):
    _signed = False
    _byte_size = 2


class U32Shape(_SizedIntShape):
    _signed = False
    _byte_size = 4  # 4-bytes -> 32-bits


class U64Shape(_SizedIntShape):
    _signed = False
    _byte_size = 8
