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

from collections.abc import Iterable
from typing import get_args, get_origin

from typing_extensions import Self, override

from bindecode.serialization import Deserializer
from bindecode.serialization.compound_encoding.collection import decode_collection
from bindecode.serialization.compound_encoding.tuple import decode_tuple
from bindecode.shapes.shape import Shape


# XXX: we can't usefully describe the tuple type
class TupleShape(Shape[tuple]):
    """ Represents tuple values, which can either be homogeneous-type variable size or heterogeneous-type fixed size.

    A variable size `tuple[T, ...]` is encoded like a list. A fixed size `tuple[A, B]` is just its items one after the
    other, with no length or tags, and `tuple[()]` takes no bytes at all.

    >>> from bindecode.shapes.sized_int_shape import U8Shape, U16Shape
    >>> TupleShape([U8Shape(), U16Shape()]).from_bytes(bytes.fromhex('01 0200'))
    (1, 2)
    >>> TupleShape(U8Shape()).from_bytes(bytes.fromhex('02 0102'))
    (1, 2)
    >>> TupleShape([]).from_bytes(b'')
    ()
    """

    __slots__ = ('_is_hashable', '_is_zero_sized', '_varsize', '_args')

    _varsize: bool
    # we can't parametrize Shape, lists are allowed in tuples and it's still hashable it just fails in runtime
    _args: tuple[Shape, ...]

    def __init__(self, args: Shape | Iterable[Shape]) -> None:
        if isinstance(args, Shape):
            if args.is_zero_sized():
                raise TypeError('tuple items cannot be zero sized')
            self._varsize = True
            self._args = (args,)
            self._is_hashable = args.is_hashable()
            self._is_zero_sized = False
        else:
            self._varsize = False
            self._args = tuple(args)
            for arg in self._args:
                assert isinstance(arg, Shape)
            self._is_hashable = all(arg_shape.is_hashable() for arg_shape in self._args)
            self._is_zero_sized = all(arg_shape.is_zero_sized() for arg_shape in self._args)

    @override
    @classmethod
    def _from_type(cls, type_: type[tuple], /, *, type_map: Shape.TypeMap) -> Self:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, tuple):
            raise TypeError('expected tuple type')
        if type_ is tuple:
            raise TypeError('expected tuple[<args...>]')
        args = list(get_args(type_))
        if args and args[-1] == Ellipsis:
            if len(args) != 2:
                raise TypeError('ellipsis only allowed with one type: tuple[T, ...]')
            arg, _ellipsis = args
            return cls(Shape.from_type(arg, type_map=type_map))
        else:
            return cls([Shape.from_type(arg, type_map=type_map) for arg in args])

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> tuple:
        if self._varsize:
            assert len(self._args) == 1
            return decode_collection(deserializer, self._args[0].deserialize, tuple)
        else:
            return decode_tuple(deserializer, tuple(i.deserialize for i in self._args))
