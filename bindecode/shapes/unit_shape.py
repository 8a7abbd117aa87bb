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

from collections.abc import Hashable
from types import NoneType
from typing import Any

from typing_extensions import Self, override

from bindecode.serialization import Deserializer
from bindecode.shapes.shape import Shape


class UnitShape(Shape[Any]):
    """ Represents a value that takes no bytes at all, like `None` or a variant without data.

    >>> UnitShape().from_bytes(b'') is None
    True
    """

    __slots__ = ('_is_hashable', '_value')

    _is_zero_sized = True

    def __init__(self, value: Any = None) -> None:
        self._value = value
        self._is_hashable = isinstance(value, Hashable)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if type_ is not None and type_ is not NoneType:
            raise TypeError('expected None type')
        return cls()

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Any:
        return self._value
