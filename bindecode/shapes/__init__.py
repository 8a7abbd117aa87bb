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

from collections import OrderedDict, deque
from enum import Enum
from types import NoneType, UnionType
from typing import Any, NamedTuple, NewType, Optional, TypeVar, Union

from bindecode.shapes.bool_shape import BoolShape
from bindecode.shapes.bytes_shape import BytesShape
from bindecode.shapes.char_shape import CharShape
from bindecode.shapes.collection_shape import ArrayShape, DequeShape, FrozenSetShape, ListShape, SetShape
from bindecode.shapes.enum_shape import EnumShape
from bindecode.shapes.float_shape import F32Shape, F64Shape
from bindecode.shapes.map_shape import MapShape
from bindecode.shapes.newtype_shape import NewtypeShape
from bindecode.shapes.optional_shape import OptionalShape
from bindecode.shapes.shape import Shape
from bindecode.shapes.sized_int_shape import (
    I8Shape,
    I16Shape,
    I32Shape,
    I64Shape,
    U8Shape,
    U16Shape,
    U32Shape,
    U64Shape,
)
from bindecode.shapes.str_shape import StrShape
from bindecode.shapes.struct_shape import StructShape
from bindecode.shapes.tuple_shape import TupleShape
from bindecode.shapes.unit_shape import UnitShape
from bindecode.shapes.unsupported_shape import ANY_SHAPE, FIELD_NAME_SHAPE, UnsupportedShape
from bindecode.shapes.utils import Dataclass, TaggedUnion, TypeAliasMap, TypeToShapeMap
from bindecode.types import char, f32, f64, i8, i16, i32, i64, u8, u16, u32, u64

__all__ = [
    'ANY_SHAPE',
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'DEFAULT_TYPE_TO_SHAPE_MAP',
    'FIELD_NAME_SHAPE',
    'ArrayShape',
    'BoolShape',
    'BytesShape',
    'CharShape',
    'Dataclass',
    'DequeShape',
    'EnumShape',
    'F32Shape',
    'F64Shape',
    'FrozenSetShape',
    'I8Shape',
    'I16Shape',
    'I32Shape',
    'I64Shape',
    'ListShape',
    'MapShape',
    'NewtypeShape',
    'OptionalShape',
    'SetShape',
    'Shape',
    'StrShape',
    'StructShape',
    'TaggedUnion',
    'TupleShape',
    'TypeAliasMap',
    'TypeToShapeMap',
    'U8Shape',
    'U16Shape',
    'U32Shape',
    'U64Shape',
    'UnitShape',
    'UnsupportedShape',
    'make_shape',
]

T = TypeVar('T')

DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    # XXX: technically typing.Union is not a type, so mypy complains, but for our purposes it is a type
    Union: UnionType,  # type: ignore[dict-item]
    OrderedDict: dict,
    bytearray: bytes,
}

# Mapping between types and Shape classes.
DEFAULT_TYPE_TO_SHAPE_MAP: TypeToShapeMap = {
    # builtin types:
    bool: BoolShape,
    bytes: BytesShape,
    dict: MapShape,
    float: F64Shape,
    frozenset: FrozenSetShape,
    int: I64Shape,
    list: ListShape,
    set: SetShape,
    str: StrShape,
    tuple: TupleShape,
    # XXX: ignored dict-item because technically None is not a type, type[None]/NoneType is
    None: UnitShape,  # type: ignore[dict-item]
    NoneType: UnitShape,
    # sized types:
    i8: I8Shape,
    i16: I16Shape,
    i32: I32Shape,
    i64: I64Shape,
    u8: U8Shape,
    u16: U16Shape,
    u32: U32Shape,
    u64: U64Shape,
    f32: F32Shape,
    f64: F64Shape,
    char: CharShape,
    # other Python types:
    deque: DequeShape,
    UnionType: OptionalShape,
    TaggedUnion: EnumShape,
    Enum: EnumShape,
    Dataclass: StructShape,
    NamedTuple: StructShape,
    NewType: NewtypeShape,
    Any: UnsupportedShape,
    object: UnsupportedShape,
}

DEFAULT_TYPE_MAP = Shape.TypeMap(DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_SHAPE_MAP)


def make_shape(type_: type[T], /, *, extra_shapes_map: Optional[TypeToShapeMap] = None) -> Shape[T]:
    """ Like Shape.from_type, but with the default maps.

    Entries in `extra_shapes_map` take precedence over the default ones. If you need to customize the aliases use
    `Shape.from_type` instead.

    >>> make_shape(dict[str, list[u16]]).from_bytes(bytes.fromhex('01 0161 02 0100 0200'))
    {'a': [1, 2]}
    >>> make_shape(complex)
    Traceback (most recent call last):
    ...
    TypeError: type complex is not supported by any Shape class
    """
    if extra_shapes_map is None:
        type_map = DEFAULT_TYPE_MAP
    else:
        type_map = Shape.TypeMap(DEFAULT_TYPE_ALIAS_MAP, {**DEFAULT_TYPE_TO_SHAPE_MAP, **extra_shapes_map})
    return Shape.from_type(type_, type_map=type_map)
