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

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Collection, Hashable, Iterable, Set
from typing import Any, TypeVar, get_args, get_origin

from typing_extensions import Self, override

from bindecode.serialization import Deserializer
from bindecode.serialization.compound_encoding.collection import decode_collection, decode_fixed_collection
from bindecode.shapes.shape import Shape

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


class _CollectionShape(Shape[Collection[T]], ABC):
    """ Used as base for Shape classes that represent variable size collections.

    The item count comes first, encoded as a length, followed by each item in order.
    """
    __slots__ = ('_item',)

    _is_hashable = False
    _item: Shape[T]

    def __init__(self, item_shape: Shape[T], /) -> None:
        if item_shape.is_zero_sized():
            raise TypeError('collection items cannot be zero sized')
        self._item = item_shape

    @abstractmethod
    def _build(self, items: Iterable[T]) -> Collection[T]:
        """ How to build the concrete collection from an iterable of items.
        """
        raise NotImplementedError

    @override
    @classmethod
    def _from_type(cls, type_: type[Collection[T]], /, *, type_map: Shape.TypeMap) -> Self:
        member_type = cls._get_member_type(type_)
        return cls(Shape.from_type(member_type, type_map=type_map))

    @classmethod
    def _get_member_type(cls, type_: type[Collection[T]]) -> type[T]:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, Collection):
            raise TypeError('expected Collection type')
        args = get_args(type_)
        if not args or len(args) != 1:
            raise TypeError(f'expected {origin_type.__name__}[<type>]')
        return args[0]

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Collection[T]:
        return decode_collection(
            deserializer,
            self._item.deserialize,
            self._build,
        )


class ListShape(_CollectionShape[T]):
    """ Represents builtin `list` values.

    >>> from bindecode.shapes.sized_int_shape import U8Shape
    >>> ListShape(U8Shape()).from_bytes(bytes([3, 1, 2, 3]))
    [1, 2, 3]
    """

    @override
    def _build(self, items: Iterable[T]) -> list[T]:
        return list(items)


class DequeShape(_CollectionShape[T]):
    """ Represents `collections.deque` values.
    """

    @override
    def _build(self, items: Iterable[T]) -> deque[T]:
        return deque(items)


class SetShape(_CollectionShape[H]):
    """ Represents builtin `set` values.

    Repeated items are not an error, they are merged like `set()` would do.
    """

    def __init__(self, item_shape: Shape[H], /) -> None:
        if not item_shape.is_hashable():
            raise TypeError('set items must be hashable')
        super().__init__(item_shape)

    @override
    def _build(self, items: Iterable[H]) -> Set[H]:
        return set(items)

    @override
    @classmethod
    def _get_member_type(cls, type_: type[Collection[T]]) -> type[T]:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, Set):
            raise TypeError('expected Set type')
        return super()._get_member_type(type_)


class FrozenSetShape(SetShape[H]):
    """ Represents builtin `frozenset` values.
    """

    # XXX: SetShape already enforces H to be hashable, but is not itself hashable, a frozenset, however, is hashable
    _is_hashable = True

    @override
    def _build(self, items: Iterable[H]) -> frozenset[H]:
        return frozenset(items)


class ArrayShape(Shape[Collection[T]]):
    """ Represents a sequence with a length that is known beforehand, so it is not in the stream.

    There is no annotation that maps to this class, it is meant to be built directly:

    >>> from bindecode.shapes.sized_int_shape import U16Shape
    >>> ArrayShape(U16Shape(), 2).from_bytes(bytes.fromhex('0100 0200'))
    (1, 2)
    """

    __slots__ = ('_is_hashable', '_is_zero_sized', '_item', '_length', '_builder')

    _item: Shape[T]
    _length: int
    _builder: Callable[[Iterable[T]], Collection[T]]

    def __init__(
        self,
        item_shape: Shape[T],
        length: int,
        /,
        builder: Callable[[Iterable[T]], Collection[T]] = tuple,
    ) -> None:
        if length < 0:
            raise ValueError('length cannot be negative')
        self._item = item_shape
        self._length = length
        self._builder = builder
        self._is_hashable = builder is tuple and item_shape.is_hashable()
        self._is_zero_sized = length == 0 or item_shape.is_zero_sized()

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Any:
        return decode_fixed_collection(deserializer, self._item.deserialize, self._length, self._builder)
