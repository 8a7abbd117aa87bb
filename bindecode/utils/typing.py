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

from types import UnionType
from typing import Any, NewType


def get_supertype(type_: Any, /) -> Any:
    """ Resolve a (possibly nested) NewType to the type it was created from, other types are returned as is.

    >>> N = NewType('N', int)
    >>> M = NewType('M', N)
    >>> get_supertype(M)
    <class 'int'>
    >>> get_supertype(str)
    <class 'str'>
    """
    while (super_type := getattr(type_, '__supertype__', None)) is not None:
        type_ = super_type
    return type_


def is_subclass(cls: Any, class_or_tuple: type | tuple[type, ...] | UnionType, /) -> bool:
    """ Reimplements issubclass() with support for recursive NewType classes.

    Unlike `issubclass`, anything that doesn't resolve to a class is simply not a subclass.

    >>> is_subclass(bool, int)
    True
    >>> is_subclass(bool, bytes | str)
    False
    >>> N = NewType('N', int)
    >>> is_subclass(N, int)
    True
    >>> is_subclass(NewType('M', N), str)
    False
    >>> is_subclass(list[int], list)
    False
    """
    cls = get_supertype(cls)
    return isinstance(cls, type) and issubclass(cls, class_or_tuple)
