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

from collections.abc import Mapping
from dataclasses import is_dataclass
from enum import Enum
from functools import reduce
from operator import or_
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, NamedTuple, NewType, TypeAlias, Union, get_args, get_origin

from structlog import get_logger

from bindecode.utils.typing import is_subclass

if TYPE_CHECKING:
    from bindecode.shapes import Shape


logger = get_logger()

TypeAliasMap: TypeAlias = Mapping[Any, type]
TypeToShapeMap: TypeAlias = Mapping[Any, type['Shape']]


class Dataclass:
    """Key used in a `TypeToShapeMap` for the entry that handles any dataclass."""


class TaggedUnion:
    """Key used in a `TypeToShapeMap` for the entry that handles unions without `None`, like `A | B | C`."""


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(None)
    'None'
    >>> pretty_type(int)
    'int'
    >>> pretty_type(dict[str, int])
    'dict[str, int]'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', str(type_))


# XXX: _verbose argument is used to help with doctest
def get_aliased_type(type_: Any, alias_map: TypeAliasMap, *, _verbose: bool = True) -> Any:
    """ Map a type to its usable alias including the type's arguments.

    For example, `bytearray` is mapped to `bytes` and `OrderedDict` to `dict` in the default alias map:

    >>> from collections import OrderedDict
    >>> orig_type = tuple[str, list[OrderedDict[int, bytearray]], bool]
    >>> from bindecode.shapes import DEFAULT_TYPE_ALIAS_MAP as alias_map
    >>> get_aliased_type(orig_type, alias_map, _verbose=False)
    tuple[str, list[dict[int, bytes]], bool]
    >>> get_aliased_type(tuple[()], alias_map, _verbose=False)
    tuple[()]
    """
    new_type, replaced = _get_aliased_type(type_, alias_map)
    if replaced and _verbose:
        logger.debug('type replaced', old=pretty_type(type_), new=pretty_type(new_type))
    return new_type


def _check_typing_union(type_: Any) -> None:
    """ Reject `typing.Union`/`typing.Optional` subscriptions with more than one member besides `None`.

    The typing module caches these subscriptions and union equality ignores order, so `Optional[A | B]` can come back
    as a `Union[B, A, None]` built earlier. The member order is the variant index of a tagged union, it can't be
    trusted in that case. Unions written with `|` between classes are not cached, but `|` with a NewType member
    gives a `typing.Union`, so `u8 | str` is rejected too. An EnumShape can be built directly for those.
    """
    # XXX: `A | B` is also an instance of types.UnionType in newer Python versions where get_origin returns Union
    if isinstance(type_, UnionType):
        return
    members = [arg for arg in get_args(type_) if arg is not NoneType]
    if len(members) > 1:
        raise TypeError(f'{type_}: a union with more than one member besides None must be written as `A | B | None`')


def _get_aliased_type(type_: Any, alias_map: TypeAliasMap) -> tuple[Any, bool]:
    """ Implementation of get_aliased_type with indication of whether there was a replacement.
    """
    origin_type = get_origin(type_) or type_
    aliased_origin: Any
    replaced = False

    # XXX: special case, replace typing.Union with types.UnionType
    if origin_type is Union:
        _check_typing_union(type_)
        aliased_origin = UnionType
    elif origin_type in alias_map:
        aliased_origin = alias_map[origin_type]
        replaced = True
    else:
        aliased_origin = origin_type

    if not hasattr(type_, '__args__'):
        return aliased_origin, replaced

    type_args = get_args(type_)
    assert isinstance(type_args, tuple)

    # XXX: special case, `tuple[()]` has no args to alias
    if not type_args:
        if aliased_origin is origin_type:
            return type_, replaced
        return aliased_origin[()], replaced

    # use _get_aliased_type for recursion so we don't log multiple times when a replacement happens
    aliased_args_replaced = [_get_aliased_type(arg, alias_map) for arg in type_args]
    aliased_args = tuple(arg for arg, _ in aliased_args_replaced)
    replaced |= any(arg_replaced for _, arg_replaced in aliased_args_replaced)

    # XXX: special case, UnionType can't be instantiated directly, this is the simplest way to do it
    if aliased_origin is UnionType:
        return reduce(or_, aliased_args), replaced

    # `tuple[T, ...]` keeps its ellipsis, it is passed through as an argument
    assert hasattr(aliased_origin, '__class_getitem__'), 'we must have an indexable class at this point'
    if len(aliased_args) == 1:
        return aliased_origin[aliased_args[0]], replaced
    return aliased_origin[aliased_args], replaced


def is_union_type(type_: Any) -> bool:
    """ Whether the type is either a `types.UnionType` or a `typing.Union`.

    >>> is_union_type(int | None)
    True
    >>> from typing import Optional
    >>> is_union_type(Optional[int])
    True
    >>> is_union_type(int)
    False
    """
    origin = get_origin(type_)
    return origin is UnionType or origin is Union


def get_usable_origin_type(type_: Any, /, *, type_map: 'Shape.TypeMap', _verbose: bool = True) -> Any:
    """ The purpose of this function is to map a given type into a key that is usable in a Shape.TypeMap

    It takes into account type-aliasing according to Shape.TypeMap.alias_map. If the given type cannot be used in the
    given type_map, a TypeError exception will be raised.

    The returned key is guaranteed to exist in `type_map.shapes_map`.

    Classes that are handled as a group (dataclasses, named tuples, enums) and unions that are not optional are mapped
    to the key of their group:

    >>> from bindecode.shapes import DEFAULT_TYPE_MAP as type_map
    >>> get_usable_origin_type(dict[str, int], type_map=type_map, _verbose=False)
    <class 'dict'>
    >>> get_usable_origin_type(int | None, type_map=type_map, _verbose=False)
    <class 'types.UnionType'>
    >>> get_usable_origin_type(int | str, type_map=type_map, _verbose=False)
    <class 'bindecode.shapes.utils.TaggedUnion'>
    >>> get_usable_origin_type(complex, type_map=type_map, _verbose=False)
    Traceback (most recent call last):
    ...
    TypeError: type complex is not supported by any Shape class
    """
    if isinstance(type_, str):
        raise TypeError(f'string annotations are not supported: {type_!r}')

    shapes_map = type_map.shapes_map
    aliased_type = get_aliased_type(type_, type_map.alias_map, _verbose=_verbose)
    origin_aliased_type = get_origin(aliased_type) or aliased_type

    # XXX: `NewType | T` results in typing.Union instead of types.UnionType, both are handled as UnionType
    if is_union_type(aliased_type):
        args = get_args(aliased_type)
        # When it's an union and None is not in it, it's not Optional, each member is an enum variant
        origin_aliased_type = UnionType if NoneType in args else TaggedUnion

    if origin_aliased_type in shapes_map:
        return origin_aliased_type

    if isinstance(origin_aliased_type, type):
        if Dataclass in shapes_map and is_dataclass(origin_aliased_type):
            return Dataclass
        if NamedTuple in shapes_map and NamedTuple in getattr(origin_aliased_type, '__orig_bases__', tuple()):
            return NamedTuple
        if Enum in shapes_map and is_subclass(origin_aliased_type, Enum):
            return Enum

    if NewType in shapes_map and isinstance(aliased_type, NewType):
        return NewType

    raise TypeError(f'type {pretty_type(type_)} is not supported by any Shape class')

