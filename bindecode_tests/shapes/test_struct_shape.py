from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Optional

import pytest

from bindecode.serialization import OutOfDataError
from bindecode.shapes import StructShape, U8Shape, make_shape
from bindecode.types import f32, i32, u8, u16


@dataclass(frozen=True)
class Point:
    x: i32
    y: i32


@dataclass
class Header:
    version: u8
    name: str
    flags: list[bool]
    origin: Optional[Point]
    checksum: int = field(default=0, init=False)


class Color(NamedTuple):
    r: u8
    g: u8
    b: u8


class Pixel(NamedTuple):
    position: Point
    color: Color
    alpha: f32


@dataclass
class Empty:
    pass


def test_dataclass() -> None:
    shape = make_shape(Header)
    assert isinstance(shape, StructShape)
    data = bytes.fromhex('02 03666f6f 02 0100 01 ffffffff 02000000')
    header = shape.from_bytes(data)
    assert header == Header(version=2, name='foo', flags=[True, False], origin=Point(-1, 2))
    # fields that are not part of __init__ are not decoded
    assert header.checksum == 0


def test_dataclass_without_optional_value() -> None:
    header = make_shape(Header).from_bytes(bytes.fromhex('01 00 00 00'))
    assert header == Header(version=1, name='', flags=[], origin=None)


def test_named_tuple() -> None:
    data = bytes.fromhex('01000000 02000000 ff8000 0000803f')
    pixel = make_shape(Pixel).from_bytes(data)
    assert isinstance(pixel, Pixel)
    assert pixel == Pixel(Point(1, 2), Color(255, 128, 0), 1.0)


def test_empty_struct_takes_no_bytes() -> None:
    assert make_shape(Empty).from_bytes(b'') == Empty()


def test_field_names_are_not_in_the_stream() -> None:
    # a struct is decoded exactly like the tuple of its field types
    data = bytes.fromhex('0a 0b 0c')
    assert tuple(make_shape(Color).from_bytes(data)) == make_shape(tuple[u8, u8, u8]).from_bytes(data)


def test_struct_is_short() -> None:
    with pytest.raises(OutOfDataError):
        make_shape(Color).from_bytes(bytes.fromhex('0a 0b'))


def test_hashable() -> None:
    assert make_shape(Point).is_hashable()
    assert make_shape(Color).is_hashable()
    # eq=True without frozen=True makes instances unhashable
    assert not make_shape(Header).is_hashable()
    assert make_shape(set[Point]).from_bytes(bytes.fromhex('01 01000000 02000000')) == {Point(1, 2)}
    with pytest.raises(TypeError):
        make_shape(dict[Header, int])


def test_dict_builder() -> None:
    shape = StructShape({'a': U8Shape(), 'b': make_shape(u16)})
    assert shape.from_bytes(bytes.fromhex('01 0200')) == {'a': 1, 'b': 2}
    assert not shape.is_hashable()


def test_custom_builder() -> None:
    shape = StructShape({'r': U8Shape(), 'g': U8Shape(), 'b': U8Shape()}, Color)
    assert shape.from_bytes(bytes.fromhex('010203')) == Color(1, 2, 3)
