import io

import pytest

from bindecode.serialization import (
    ByteOrder,
    Deserializer,
    OutOfDataError,
    SizeLimit,
    SizeLimitExceededError,
    SourceError,
    SourceReadError,
    TrailingDataError,
)
from bindecode.serialization.encoding.bytes import decode_bytes
from bindecode.serialization.encoding.int import decode_u16, decode_u32
from bindecode.serialization.encoding.utf8 import decode_utf8


class RecordingReader:
    """Wraps a BytesIO and records the size of every read."""

    def __init__(self, data: bytes, *, max_read: int | None = None) -> None:
        self._stream = io.BytesIO(data)
        self._max_read = max_read
        self.reads: list[int] = []

    def read(self, n: int) -> bytes:
        self.reads.append(n)
        if self._max_read is not None:
            n = min(n, self._max_read)
        return self._stream.read(n)


class BrokenReader:
    def read(self, n: int) -> bytes:
        raise OSError('device not ready')


class NonBlockingReader:
    """Like a raw non-blocking stream that has no data available."""

    def read(self, n: int) -> None:
        return None


def test_partial_reads_are_retried() -> None:
    reader = RecordingReader(b'\x05hello\x34\x12', max_read=2)
    de = Deserializer.build_stream_deserializer(reader)
    assert decode_utf8(de) == 'hello'
    assert decode_u16(de) == 0x1234
    de.finalize()


def test_byte_order() -> None:
    de = Deserializer.build_stream_deserializer(io.BytesIO(b'\x00\x00\x01\x00'), byte_order=ByteOrder.BIG)
    assert de.byte_order is ByteOrder.BIG
    assert decode_u32(de) == 256


def test_stream_is_not_read_past_the_value() -> None:
    stream = io.BytesIO(b'\x02ab\x99\x98')
    de = Deserializer.build_stream_deserializer(stream)
    assert decode_bytes(de) == b'ab'
    assert stream.read() == b'\x99\x98'


def test_reads_are_split_in_chunks() -> None:
    payload = bytes(range(10)) * 10
    reader = RecordingReader(b'\x64' + payload)
    de = Deserializer.build_stream_deserializer(reader, chunk_size=16)
    assert decode_bytes(de) == payload
    assert max(reader.reads) == 16


def test_huge_length_on_short_stream() -> None:
    reader = RecordingReader(bytes.fromhex('ff ffffffff') + b'abc')
    de = Deserializer.build_stream_deserializer(reader, chunk_size=1024)
    with pytest.raises(OutOfDataError) as e:
        decode_bytes(de)
    assert e.value.expected == 0xffffffff
    assert e.value.actual == 3
    # the declared size was never requested from the stream in one go
    assert max(reader.reads) == 1024


def test_read_error_is_wrapped() -> None:
    de = Deserializer.build_stream_deserializer(BrokenReader())
    with pytest.raises(SourceReadError) as e:
        de.read_byte()
    assert isinstance(e.value, SourceError)
    assert isinstance(e.value.__cause__, OSError)


def test_none_from_reader_is_end_of_data() -> None:
    de = Deserializer.build_stream_deserializer(NonBlockingReader())
    assert de.is_empty()
    with pytest.raises(OutOfDataError):
        de.read_byte()


def test_is_empty_does_not_lose_data() -> None:
    de = Deserializer.build_stream_deserializer(io.BytesIO(b'\x01\x02\x03'))
    assert not de.is_empty()
    assert not de.is_empty()
    assert bytes(de.read_bytes(3)) == b'\x01\x02\x03'
    assert de.is_empty()


def test_read_all() -> None:
    de = Deserializer.build_stream_deserializer(io.BytesIO(bytes(100)), chunk_size=7)
    assert de.read_byte() == 0
    assert not de.is_empty()
    assert len(de.read_all()) == 99
    assert de.is_empty()


def test_trailing_data() -> None:
    de = Deserializer.build_stream_deserializer(io.BytesIO(b'\x01\x02'))
    de.read_byte()
    with pytest.raises(TrailingDataError):
        de.finalize()


def test_size_limit_on_stream() -> None:
    stream = io.BytesIO(b'\x0a' + bytes(10))
    de = Deserializer.build_stream_deserializer(stream).with_size_limit(SizeLimit.bounded(8))
    with pytest.raises(SizeLimitExceededError):
        decode_bytes(de)
    # the payload was not pulled from the stream
    assert stream.read() == bytes(10)


@pytest.mark.parametrize('chunk_size', [0, -1])
def test_invalid_chunk_size(chunk_size: int) -> None:
    with pytest.raises(ValueError):
        Deserializer.build_stream_deserializer(io.BytesIO(b''), chunk_size=chunk_size)
