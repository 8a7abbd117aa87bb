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

from typing import Any, NoReturn

from typing_extensions import Self, override

from bindecode.serialization import Deserializer, UnsupportedOperationError
from bindecode.shapes.shape import Shape


class UnsupportedShape(Shape[Any]):
    """ Stands for the decode requests that a format without type information cannot serve.

    Decoding "any value" needs the stream to say what comes next and probing a field name needs the names to be in the
    stream, neither is the case here. Building this shape is fine, decoding with it always fails without reading.

    >>> from bindecode.serialization import UnsupportedOperationError
    >>> try:
    ...     ANY_SHAPE.from_bytes(b"\\x00")
    ... except UnsupportedOperationError as e:
    ...     print(e)
    decoding any value is not supported, the format is not self-describing
    """

    __slots__ = ('_operation',)

    _is_hashable = False

    def __init__(self, operation: str) -> None:
        self._operation = operation

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if type_ is not Any and type_ is not object:
            raise TypeError('expected Any or object')
        return cls('decoding any value')

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> NoReturn:
        raise UnsupportedOperationError(f'{self._operation} is not supported, the format is not self-describing')


ANY_SHAPE: UnsupportedShape = UnsupportedShape('decoding any value')
FIELD_NAME_SHAPE: UnsupportedShape = UnsupportedShape('decoding a field identifier')
