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

from functools import reduce
from operator import or_
from types import NoneType
from typing import Optional, TypeVar, get_args

from typing_extensions import Self, override

from bindecode.serialization import Deserializer
from bindecode.serialization.compound_encoding.optional import decode_optional
from bindecode.shapes.shape import Shape
from bindecode.shapes.utils import is_union_type

V = TypeVar('V')


class OptionalShape(Shape[Optional[V]]):
    """ Represents a value that is either `V` or `None`.
    """

    __slots__ = ('_is_hashable', '_value')

    _value: Shape[V]

    def __init__(self, shape: Shape[V]) -> None:
        self._value = shape
        self._is_hashable = shape.is_hashable()

    @override
    @classmethod
    def _from_type(cls, type_: type[Optional[V]], /, *, type_map: Shape.TypeMap) -> Self:
        if not is_union_type(type_):
            raise TypeError('expected type union')
        args = get_args(type_)
        assert args, 'union always has args'
        if len(args) < 2 or NoneType not in args:
            raise TypeError('type must be an union with None: `T | None` or `None | T`')
        not_none_types = tuple(arg for arg in args if arg is not NoneType)
        # XXX: `A | B | None` is an optional of the union `A | B`
        not_none_type = reduce(or_, not_none_types)
        return cls(Shape.from_type(not_none_type, type_map=type_map))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Optional[V]:
        return decode_optional(deserializer, self._value.deserialize)
