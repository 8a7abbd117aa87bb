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

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import TypeVar, get_args, get_origin

from typing_extensions import Self, override

from bindecode.serialization import Deserializer
from bindecode.serialization.compound_encoding.mapping import decode_mapping
from bindecode.shapes.shape import Shape

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


class MapShape(Shape[Mapping[K, V]]):
    """ Represents a mapping, the entry count is followed by each key and its value.

    The same key appearing more than once is not an error, with the default `dict` builder the last value is kept.

    >>> from bindecode.shapes.str_shape import StrShape
    >>> from bindecode.shapes.sized_int_shape import U8Shape
    >>> MapShape(StrShape(), U8Shape()).from_bytes(bytes.fromhex('02 0161 01 0162 02'))
    {'a': 1, 'b': 2}
    """

    __slots__ = ('_key', '_value', '_builder')

    _is_hashable = False
    _key: Shape[K]
    _value: Shape[V]
    _builder: Callable[[Iterable[tuple[K, V]]], Mapping[K, V]]

    def __init__(
        self,
        key_shape: Shape[K],
        value_shape: Shape[V],
        /,
        builder: Callable[[Iterable[tuple[K, V]]], Mapping[K, V]] = dict,
    ) -> None:
        if not key_shape.is_hashable():
            raise TypeError('map keys must be hashable')
        if key_shape.is_zero_sized() and value_shape.is_zero_sized():
            raise TypeError('map entries cannot be zero sized')
        self._key = key_shape
        self._value = value_shape
        self._builder = builder

    @override
    @classmethod
    def _from_type(cls, type_: type[Mapping[K, V]], /, *, type_map: Shape.TypeMap) -> Self:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, Mapping):
            raise TypeError('expected Mapping type')
        args = get_args(type_)
        if not args or len(args) != 2:
            raise TypeError(f'expected {origin_type.__name__}[<key type>, <value type>]')
        key_type, value_type = args
        return cls(
            Shape.from_type(key_type, type_map=type_map),
            Shape.from_type(value_type, type_map=type_map),
        )

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Mapping[K, V]:
        return decode_mapping(
            deserializer,
            self._key.deserialize,
            self._value.deserialize,
            self._builder,
        )
