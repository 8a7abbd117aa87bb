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

from typing_extensions import Self, override

from bindecode.serialization import Deserializer
from bindecode.serialization.encoding.char import decode_char
from bindecode.shapes.shape import Shape
from bindecode.types import char


class CharShape(Shape[str]):
    """ Represents a single unicode scalar value, decoded as a `str` of length 1.

    >>> CharShape().from_bytes('é'.encode())
    'é'
    """

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: type[str], /, *, type_map: Shape.TypeMap) -> Self:
        if type_ is not char:
            raise TypeError('expected char type')
        return cls()

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> str:
        return decode_char(deserializer)
