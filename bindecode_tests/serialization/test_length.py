import pytest

from bindecode.serialization import ByteOrder, Deserializer, InvalidEncodingError, OutOfDataError
from bindecode.serialization.encoding.bytes import decode_bytes
from bindecode.serialization.encoding.length import decode_length
from bindecode.serialization.encoding.utf8 import decode_utf8


@pytest.mark.parametrize(['byte_order', 'data_hex', 'value'], [
    (ByteOrder.LITTLE, '00', 0),
    (ByteOrder.LITTLE, '7f', 127),
    (ByteOrder.BIG, 'fe', 254),
    (ByteOrder.BIG, 'ff000000ff', 255),
    (ByteOrder.LITTLE, 'ffff000000', 255),
    (ByteOrder.BIG, 'ff00010000', 65536),
    (ByteOrder.LITTLE, 'ffffffffff', 2**32 - 1),
    # a small value can still use the long form
    (ByteOrder.BIG, 'ff00000003', 3),
])
def test_length(byte_order: ByteOrder, data_hex: str, value: int) -> None:
    data = bytes.fromhex(data_hex)
    de = Deserializer.build_bytes_deserializer(data + b'\x99', byte_order=byte_order)
    assert decode_length(de) == value
    # exactly the length bytes were consumed
    assert bytes(de.read_all()) == b'\x99'


def test_length_254_is_single_byte() -> None:
    de = Deserializer.build_bytes_deserializer(bytes([254]) + bytes(254))
    assert len(decode_bytes(de)) == 254
    de.finalize()


@pytest.mark.parametrize('data_hex', ['', 'ff', 'ff0000'])
def test_length_truncated(data_hex: str) -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex(data_hex))
    with pytest.raises(OutOfDataError):
        decode_length(de)


def test_str_consumes_exactly_its_length() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x03abc\x02hi')
    assert decode_utf8(de) == 'abc'
    assert decode_utf8(de) == 'hi'
    de.finalize()


def test_long_str_uses_escape() -> None:
    text = 'x' * 300
    de = Deserializer.build_bytes_deserializer(b'\xff' + (300).to_bytes(4, 'big') + text.encode(),
                                               byte_order=ByteOrder.BIG)
    assert decode_utf8(de) == text
    de.finalize()


def test_str_truncated() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x05abc')
    with pytest.raises(OutOfDataError) as e:
        decode_utf8(de)
    assert e.value.expected == 5
    assert e.value.actual == 3


@pytest.mark.parametrize('data', [
    b'\x01\xff',
    b'\x01\x80',
    b'\x02\xc0\x80',  # overlong encoding of U+0000
    b'\x03\xed\xa0\x80',  # surrogate U+D800
    b'\x02\xe2\x82',  # truncated inside the string
])
def test_invalid_utf8_str(data: bytes) -> None:
    de = Deserializer.build_bytes_deserializer(data)
    with pytest.raises(InvalidEncodingError) as e:
        decode_utf8(de)
    assert e.value.description == 'error while decoding utf8 string'
