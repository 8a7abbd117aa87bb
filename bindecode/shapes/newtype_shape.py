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

from collections.abc import Callable
from typing import Any, NewType, Optional, TypeVar

from typing_extensions import Self, override

from bindecode.serialization import Deserializer
from bindecode.shapes.shape import Shape

T = TypeVar('T')


class NewtypeShape(Shape[T]):
    """ Represents a wrapper around a single value, the encoding is just the inner value.

    Any `typing.NewType` that isn't mapped to a more specific shape ends up here, its supertype is used for the inner
    shape. When built directly, `wrap` is called on the inner value, if given.

    >>> from bindecode.shapes.sized_int_shape import U8Shape
    >>> NewtypeShape(U8Shape(), str).from_bytes(b'\\x07')
    '7'
    """

    __slots__ = ('_is_hashable', '_is_zero_sized', '_inner', '_wrap')

    _inner: Shape[Any]
    _wrap: Optional[Callable[[Any], T]]

    def __init__(self, inner_shape: Shape[Any], wrap: Optional[Callable[[Any], T]] = None) -> None:
        self._inner = inner_shape
        self._wrap = wrap
        self._is_hashable = inner_shape.is_hashable()
        self._is_zero_sized = inner_shape.is_zero_sized()

    @override
    @classmethod
    def _from_type(cls, type_: type[T], /, *, type_map: Shape.TypeMap) -> Self:
        if not isinstance(type_, NewType):
            raise TypeError('expected NewType')
        # XXX: a NewType is an identity function at runtime, there is nothing to wrap
        return cls(Shape.from_type(type_.__supertype__, type_map=type_map))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        value = self._inner.deserialize(deserializer)
        if self._wrap is None:
            return value
        return self._wrap(value)
