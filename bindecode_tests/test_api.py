import io
from dataclasses import dataclass
from typing import Any

import pytest
from structlog.testing import capture_logs

from bindecode import (
    ByteOrder,
    DecodeSession,
    InvalidEncodingError,
    OutOfDataError,
    SizeLimit,
    SizeLimitExceededError,
    TrailingDataError,
    UnsupportedOperationError,
    decode,
    decode_from,
)
from bindecode.conf import DecoderSettings, get_global_settings
from bindecode.shapes import ListShape, U8Shape
from bindecode.types import u8, u16, u32, u64

MAGIC = b'BDEC'


@dataclass
class Header:
    version: u8
    count: u16


@dataclass
class Entry:
    name: str
    size: u32


def test_decode_with_shape_or_type() -> None:
    assert decode(ListShape(U8Shape()), b'\x02\x01\x02') == [1, 2]
    assert decode(list[u8], b'\x02\x01\x02') == [1, 2]


def test_decode_byte_order() -> None:
    assert decode(u16, b'\x01\x02', byte_order=ByteOrder.BIG) == 0x0102
    assert decode(u16, b'\x01\x02', byte_order=ByteOrder.LITTLE) == 0x0201


def test_decode_default_byte_order() -> None:
    expected = int.from_bytes(b'\x01\x02', get_global_settings().BYTE_ORDER.value)
    assert decode(u16, b'\x01\x02') == expected


def test_decode_requires_all_data() -> None:
    with pytest.raises(TrailingDataError):
        decode(u8, b'\x01\x02')


def test_decode_short_data() -> None:
    with pytest.raises(OutOfDataError):
        decode(u32, b'\x01\x02')


def test_decode_limit() -> None:
    data = b'\xff' + (2**20).to_bytes(4, 'little') + b'abc'
    with pytest.raises(SizeLimitExceededError):
        decode(bytes, data, limit=SizeLimit.bounded(1024), byte_order=ByteOrder.LITTLE)
    with pytest.raises(OutOfDataError):
        decode(bytes, data, limit=SizeLimit.infinite(), byte_order=ByteOrder.LITTLE)


def test_decode_unsupported() -> None:
    with pytest.raises(UnsupportedOperationError):
        decode(Any, b'\x00')


def test_decode_invalid_annotation() -> None:
    with pytest.raises(TypeError):
        decode(complex, b'\x00')


def test_decode_from_stream() -> None:
    stream = io.BytesIO(b'\x03abc\x01\x02')
    assert decode_from(str, stream) == 'abc'
    assert decode_from(u8, stream) == 1
    assert stream.read() == b'\x02'


def test_session_with_header_and_payload() -> None:
    data = MAGIC + bytes.fromhex('01 0200') + bytes.fromhex('01 61 0a000000 02 6262 ffffffff')
    session = DecodeSession(data, byte_order=ByteOrder.LITTLE, limit=SizeLimit.bounded(len(data)))
    session.expect_magic(MAGIC)
    header = session.decode(Header)
    assert header == Header(version=1, count=2)
    assert session.bytes_read == 7
    entries = [session.decode(Entry) for _ in range(header.count)]
    assert entries == [Entry('a', 10), Entry('bb', 0xffffffff)]
    assert session.bytes_read == len(data)
    session.finalize()


def test_session_on_stream() -> None:
    stream = io.BytesIO(MAGIC + b'\x05\x00\x00\x00rest')
    session = DecodeSession(stream, byte_order=ByteOrder.LITTLE)
    session.expect_magic(MAGIC)
    assert session.decode(u32) == 5
    assert stream.read() == b'rest'


def test_session_trailing_data() -> None:
    session = DecodeSession(b'\x01\x02', byte_order=ByteOrder.LITTLE)
    session.decode(u8)
    with pytest.raises(TrailingDataError):
        session.finalize()


def test_wrong_magic() -> None:
    session = DecodeSession(b'BDEX\x00', byte_order=ByteOrder.LITTLE)
    with pytest.raises(InvalidEncodingError) as e:
        session.expect_magic(MAGIC)
    assert e.value.description == 'invalid magic'
    assert e.value.detail == 'expected 42444543, got 42444558'


def test_short_magic() -> None:
    session = DecodeSession(b'BD', byte_order=ByteOrder.LITTLE)
    with pytest.raises(OutOfDataError):
        session.expect_magic(MAGIC)


def test_limit_is_shared_by_the_session() -> None:
    session = DecodeSession(bytes(16), limit=SizeLimit.bounded(10))
    assert session.decode(u64) == 0
    with pytest.raises(SizeLimitExceededError):
        session.decode(u64)
    assert session.bytes_read == 8


def test_session_uses_given_settings() -> None:
    settings = DecoderSettings(BYTE_ORDER=ByteOrder.BIG, SIZE_LIMIT=2)
    session = DecodeSession(b'\x01\x02\x03', settings=settings)
    assert session.byte_order is ByteOrder.BIG
    assert session.decode(u16) == 0x0102
    with pytest.raises(SizeLimitExceededError):
        session.decode(u8)


def test_explicit_arguments_override_settings() -> None:
    settings = DecoderSettings(BYTE_ORDER=ByteOrder.BIG, SIZE_LIMIT=2)
    session = DecodeSession(b'\x01\x02\x03', settings=settings, byte_order=ByteOrder.LITTLE,
                            limit=SizeLimit.infinite())
    assert session.decode(u16) == 0x0201
    assert session.decode(u8) == 3


def test_failure_is_logged() -> None:
    with capture_logs() as cap_logs:
        session = DecodeSession(b'\x01\x05', byte_order=ByteOrder.LITTLE, limit=SizeLimit.bounded(100))
        assert session.decode(u8) == 1
        with pytest.raises(InvalidEncodingError):
            session.decode(bool)

    assert len(cap_logs) == 1
    log = cap_logs[0]
    assert log['event'] == 'decode failed'
    assert log['log_level'] == 'debug'
    assert log['operation'] == 'decode'
    assert log['error'] == 'InvalidEncodingError'
    assert log['bytes_read'] == 2
    assert log['byte_order'] == 'little'
    assert log['size_limit'] == 100


def test_invalid_annotation_is_not_a_decode_failure() -> None:
    with capture_logs() as cap_logs:
        session = DecodeSession(b'\x01', byte_order=ByteOrder.LITTLE)
        with pytest.raises(TypeError):
            session.decode(complex)
    assert cap_logs == []
    assert session.bytes_read == 0
