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
from typing import Generic, NamedTuple, TypeVar, final

from bindecode.serialization import ByteOrder, Deserializer, SizeLimit
from bindecode.shapes.utils import TypeAliasMap, TypeToShapeMap, get_aliased_type, get_usable_origin_type

T = TypeVar('T')


class Shape(ABC, Generic[T]):
    """ This class describes how a value of a known type is laid out in a byte stream and how to decode it.

    The format carries no type information besides lengths, option tags and variant indexes, so the decoder always has
    to be told what comes next. A shape is that description: primitive shapes read a fixed number of bytes or a
    length-prefixed run, while compound shapes hold the shapes of their parts and drive them in order.

    Shapes can be built directly (`ListShape(U8Shape())`) or from a type annotation with `Shape.from_type`, which is
    what `bindecode.shapes.make_shape` does with the default maps.

    Instances are immutable and hold no decoding state, the same shape can be used by any number of sessions.
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        shapes_map: TypeToShapeMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: subclasses must initialize this property
    _is_hashable: bool

    # XXX: subclasses that can decode without reading any byte must override this
    _is_zero_sized: bool = False

    @final
    @staticmethod
    def from_type(type_: type[T], /, *, type_map: TypeMap) -> Shape[T]:
        """ Instantiate a Shape instance from a type annotation using the given maps.

        A `shapes_map` associates concrete types to concrete Shape classes, while an `alias_map` associates types with
        substitute types to use instead. A `TypeError` is raised when any part of the annotation is not supported.
        """
        aliased_type = get_aliased_type(type_, type_map.alias_map)
        # XXX: aliases were already applied and logged, don't log them again
        usable_origin = get_usable_origin_type(aliased_type, type_map=type_map, _verbose=False)
        shape_class = type_map.shapes_map[usable_origin]
        return shape_class._from_type(aliased_type, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: type[T], /, *, type_map: TypeMap) -> Shape[T]:
        """ Instantiate a Shape instance from a type annotation.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        use `Shape.from_type`, forwarding the given `type_map`, for the inner types of compound shapes.
        """
        # XXX: a Shape that is only meant to be built by hand does not need to implement _from_type
        raise TypeError(f'{cls} is not compatible with use in a Shape.TypeMap')

    @final
    def is_hashable(self) -> bool:
        """ Indicates whether the decoded values are expected to be hashable.

        This is used to prevent unhashable values from being used as keys in dicts or members in sets."""
        return self._is_hashable

    @final
    def is_zero_sized(self) -> bool:
        """ Indicates whether decoding always consumes no bytes at all, like `None` or an empty tuple.

        Variable size collections of such items are rejected: nothing would be read for each item, so the size limit
        could not stop a huge item count."""
        return self._is_zero_sized

    @final
    def deserialize(self, deserializer: Deserializer, /) -> T:
        """ Decode one value, consuming exactly the bytes that this shape implies.

        This is the method to pass as a `Decoder` to the compound decoders.
        """
        # XXX: subclasses must implement Shape._deserialize, not Shape.deserialize
        return self._deserialize(deserializer)

    @final
    def from_bytes(
        self,
        data: bytes,
        /,
        *,
        byte_order: ByteOrder = ByteOrder.LITTLE,
        limit: SizeLimit = SizeLimit.infinite(),
    ) -> T:
        """ Shortcut to quickly parse a value T from `bytes`, the whole input must be consumed.
        """
        deserializer = Deserializer.build_bytes_deserializer(data, byte_order=byte_order).with_size_limit(limit)
        value = self.deserialize(deserializer)
        deserializer.finalize()
        return value

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        """ Inner implementation of `deserialize`.

        Compound shapes should pass the `deserialize` method of their inner shapes as decoders.
        """
        raise NotImplementedError
