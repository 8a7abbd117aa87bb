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
from typing import ClassVar

from typing_extensions import Self, override

from bindecode.serialization import Deserializer
from bindecode.serialization.encoding.float import decode_f32, decode_f64
from bindecode.shapes.shape import Shape
from bindecode.utils.typing import is_subclass


class _FloatShape(Shape[float]):
    """ Base class for IEEE 754 floating point values.

    Values are hashable, but NaN is never equal to itself, so it doesn't make a good key.
    """

    _is_hashable = True
    # XXX: subclass must define this value:
    _decode: ClassVar[Callable[[Deserializer], float]]

    @override
    @classmethod
    def _from_type(cls, type_: type[float], /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, float):
            raise TypeError('expected float type')
        return cls()

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> float:
        return type(self)._decode(deserializer)


class F32Shape(_FloatShape):
    _decode = staticmethod(decode_f32)


class F64Shape(_FloatShape):
    _decode = staticmethod(decode_f64)
