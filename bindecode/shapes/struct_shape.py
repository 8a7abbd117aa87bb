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
A struct is a record with named fields, its encoding is each field in declaration order with nothing in between. The
field names are never in the stream, so a struct is decoded exactly like a tuple of its field types.

Dataclasses and `NamedTuple` classes are mapped to this shape, the class itself is then used to build the value. Only
dataclass fields that are part of `__init__` are decoded.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from dataclasses import fields, is_dataclass
from typing import Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from bindecode.serialization import Deserializer
from bindecode.serialization.compound_encoding.tuple import decode_tuple
from bindecode.shapes.shape import Shape
from bindecode.utils.typing import is_subclass

T = TypeVar('T')


class StructShape(Shape[T]):
    """ Represents records, the `builder` is called with each field as a keyword argument.

    >>> from bindecode.shapes.sized_int_shape import U8Shape
    >>> from bindecode.shapes.str_shape import StrShape
    >>> StructShape({'name': StrShape(), 'age': U8Shape()}).from_bytes(b'\\x03bob\\x2a')
    {'name': 'bob', 'age': 42}
    """

    __slots__ = ('_is_hashable', '_is_zero_sized', '_fields', '_builder')

    _fields: dict[str, Shape]
    _builder: Callable[..., T]

    def __init__(
        self,
        fields_: Mapping[str, Shape],
        builder: Callable[..., T] = dict,  # type: ignore[assignment]
    ) -> None:
        self._fields = dict(fields_)
        self._builder = builder
        # XXX: a dict builder is not hashable, neither is a dataclass with eq=True and frozen=False
        self._is_hashable = is_subclass(builder, Hashable) and all(
            field_shape.is_hashable() for field_shape in self._fields.values()
        )
        self._is_zero_sized = all(field_shape.is_zero_sized() for field_shape in self._fields.values())

    @override
    @classmethod
    def _from_type(cls, type_: type[T], /, *, type_map: Shape.TypeMap) -> Self:
        field_names: list[str]
        if isinstance(type_, type) and is_dataclass(type_):
            field_names = [field.name for field in fields(type_) if field.init]
        elif is_subclass(type_, tuple) and hasattr(type_, '_fields'):
            field_names = list(type_._fields)
        else:
            raise TypeError('expected a dataclass or NamedTuple type')
        # XXX: resolves annotations written as strings, like when `from __future__ import annotations` is used
        type_hints = get_type_hints(type_)
        # XXX: the order is important, it is the declaration order and `dict` keeps it
        values: dict[str, Shape] = {}
        for field_name in field_names:
            values[field_name] = Shape.from_type(type_hints[field_name], type_map=type_map)
        return cls(values, type_)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        values = decode_tuple(deserializer, tuple(field_shape.deserialize for field_shape in self._fields.values()))
        kwargs: dict[str, Any] = dict(zip(self._fields, values))
        return self._builder(**kwargs)
