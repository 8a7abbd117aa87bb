from collections import OrderedDict
from typing import Any

import pytest

from bindecode.serialization import Deserializer, InvalidEncodingError, OutOfDataError
from bindecode.serialization.compound_encoding.collection import decode_collection, decode_fixed_collection
from bindecode.serialization.compound_encoding.enum import decode_enum
from bindecode.serialization.compound_encoding.mapping import decode_mapping
from bindecode.serialization.compound_encoding.optional import decode_optional
from bindecode.serialization.compound_encoding.tuple import decode_tuple
from bindecode.serialization.encoding.bool import decode_bool
from bindecode.serialization.encoding.int import decode_u8, decode_u16
from bindecode.serialization.encoding.utf8 import decode_utf8


def _unit(deserializer: Deserializer) -> None:
    return None


def _pair(deserializer: Deserializer) -> tuple[Any, ...]:
    return decode_tuple(deserializer, (decode_u8, decode_u8))


@pytest.mark.parametrize(['data_hex', 'value'], [
    ('00', None),
    ('01 2a', 42),
])
def test_optional(data_hex: str, value: Any) -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex(data_hex))
    assert decode_optional(de, decode_u8) == value
    de.finalize()


@pytest.mark.parametrize('tag', [2, 0xff])
def test_optional_invalid_tag(tag: int) -> None:
    de = Deserializer.build_bytes_deserializer(bytes([tag, 0]))
    with pytest.raises(InvalidEncodingError) as e:
        decode_optional(de, decode_u8)
    assert e.value.description == 'invalid tag when decoding optional'
    assert e.value.detail == f'expected 0 or 1, got {tag}'


def test_collection() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('03 0100 0200 0300'))
    assert decode_collection(de, decode_u16, list) == [1, 2, 3]
    de.finalize()


def test_empty_collection() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x00')
    assert decode_collection(de, decode_u16, tuple) == ()
    de.finalize()


def test_collection_is_short() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('03 01 02'))
    with pytest.raises(OutOfDataError):
        decode_collection(de, decode_u8, list)


def test_fixed_collection() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('01 02 03'))
    assert decode_fixed_collection(de, decode_u8, 3, tuple) == (1, 2, 3)
    de.finalize()


def test_tuple_has_no_framing() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02hi\x07')
    assert decode_tuple(de, (decode_bool, decode_utf8, decode_u8)) == (True, 'hi', 7)
    de.finalize()


def test_mapping() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x02\x01a\x01\x01b\x00')
    assert decode_mapping(de, decode_utf8, decode_bool, dict) == {'a': True, 'b': False}
    de.finalize()


def test_mapping_repeated_key() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x02\x01a\x01\x01a\x02')
    assert decode_mapping(de, decode_utf8, decode_u8, dict) == {'a': 2}


def test_mapping_keeps_order() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x03\x03\x00\x01\x01\x02\x02')
    value = decode_mapping(de, decode_u8, decode_u8, OrderedDict)
    assert list(value.items()) == [(3, 0), (1, 1), (2, 2)]


def test_enum_unit_and_pair() -> None:
    variants = (_unit, _pair)
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('00'))
    assert decode_enum(de, variants) == (0, None)
    de.finalize()

    de = Deserializer.build_bytes_deserializer(bytes.fromhex('01 05 06'))
    assert decode_enum(de, variants) == (1, (5, 6))
    de.finalize()


def test_enum_unknown_variant() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('02'))
    with pytest.raises(InvalidEncodingError) as e:
        decode_enum(de, (_unit, _pair))
    assert e.value.description == 'invalid variant index when decoding enum'
    assert e.value.detail == 'expected index below 2, got 2'


def test_enum_index_uses_length_encoding() -> None:
    variants = [_unit] * 300
    variants[299] = _pair
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('ff 2b010000 0809'))
    assert decode_enum(de, variants) == (299, (8, 9))
    de.finalize()
