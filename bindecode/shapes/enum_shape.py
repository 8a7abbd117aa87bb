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

"""
An enum is a closed set of variants, the stream has the variant index (as a length) followed by the variant's data.

There are three ways of getting an EnumShape:

- from an `enum.Enum` subclass: every member is a variant without data, the index is the member's position;
- from a union without `None`, like `Circle | Square`: the index selects the union member, in declaration order, and
  the decoded member value is the result;
- built directly from a sequence of variant shapes, by default the result is an `(index, payload)` tuple.

>>> from bindecode.shapes.sized_int_shape import U8Shape
>>> from bindecode.shapes.tuple_shape import TupleShape
>>> from bindecode.shapes.unit_shape import UnitShape
>>> shape = EnumShape([UnitShape(), TupleShape([U8Shape(), U8Shape()])])
>>> shape.from_bytes(b'\\x00')
(0, None)
>>> shape.from_bytes(b'\\x01\\x05\\x06')
(1, (5, 6))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from types import NoneType
from typing import Any, Optional, TypeVar, get_args

from typing_extensions import Self, override

from bindecode.serialization import Deserializer
from bindecode.serialization.compound_encoding.enum import decode_enum
from bindecode.shapes.shape import Shape
from bindecode.shapes.unit_shape import UnitShape
from bindecode.shapes.utils import is_union_type
from bindecode.utils.typing import is_subclass

T = TypeVar('T')


def _take_payload(index: int, payload: Any) -> Any:
    return payload


class EnumShape(Shape[T]):
    """ Represents a value that is one of a fixed sequence of variants.

    `build` receives the variant index and its decoded payload and returns the value, when it's not given the result
    is the `(index, payload)` tuple.
    """

    __slots__ = ('_is_hashable', '_variants', '_build')

    _variants: tuple[Shape, ...]
    _build: Optional[Callable[[int, Any], T]]

    def __init__(self, variants: Iterable[Shape], /, build: Optional[Callable[[int, Any], T]] = None) -> None:
        self._variants = tuple(variants)
        self._build = build
        self._is_hashable = all(variant.is_hashable() for variant in self._variants)

    @override
    @classmethod
    def _from_type(cls, type_: type[T], /, *, type_map: Shape.TypeMap) -> Self:
        if is_union_type(type_):
            args = get_args(type_)
            if NoneType in args:
                raise TypeError('union with None must be an optional: `None | T` or `T | None`')
            return cls((Shape.from_type(arg, type_map=type_map) for arg in args), _take_payload)
        if is_subclass(type_, Enum):
            members = tuple(type_)  # type: ignore[var-annotated]
            return cls((UnitShape(member) for member in members), _take_payload)
        raise TypeError('expected Enum subclass or union type')

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        index, payload = decode_enum(deserializer, tuple(variant.deserialize for variant in self._variants))
        if self._build is None:
            return (index, payload)  # type: ignore[return-value]
        return self._build(index, payload)
