import pytest

from bindecode.serialization import Deserializer, SizeLimit, SizeLimitExceededError
from bindecode.serialization.encoding.bytes import decode_bytes
from bindecode.serialization.encoding.int import decode_u8, decode_u64
from bindecode.serialization.encoding.utf8 import decode_utf8


def test_second_u64_goes_over_limit() -> None:
    de = Deserializer.build_bytes_deserializer(bytes(16)).with_size_limit(SizeLimit.bounded(10))
    assert decode_u64(de) == 0
    assert de.bytes_read == 8
    with pytest.raises(SizeLimitExceededError) as e:
        decode_u64(de)
    assert e.value.limit == 10
    assert e.value.bytes_read == 16
    # the failed read is not counted
    assert de.bytes_read == 8


def test_limit_stays_exceeded() -> None:
    de = Deserializer.build_bytes_deserializer(bytes(16)).with_size_limit(SizeLimit.bounded(10))
    decode_u64(de)
    with pytest.raises(SizeLimitExceededError):
        decode_u64(de)
    # a read that would fit on its own still fails after the limit was exceeded
    with pytest.raises(SizeLimitExceededError):
        decode_u8(de)
    with pytest.raises(SizeLimitExceededError):
        de.read_all()


@pytest.mark.parametrize('limit', [0, 1, 7, 8])
def test_limit_boundary(limit: int) -> None:
    de = Deserializer.build_bytes_deserializer(bytes(limit)).with_size_limit(SizeLimit.bounded(limit))
    assert bytes(de.read_bytes(limit)) == bytes(limit)
    assert de.bytes_read == limit
    with pytest.raises(SizeLimitExceededError):
        de.read_byte()


def test_infinite_limit() -> None:
    data = bytes(1024 * 1024)
    de = Deserializer.build_bytes_deserializer(data).with_size_limit(SizeLimit.infinite())
    assert len(de.read_bytes(len(data))) == len(data)
    assert de.bytes_read == len(data)
    de.finalize()


def test_length_prefix_is_charged_before_payload() -> None:
    inner = Deserializer.build_bytes_deserializer(b'\x05hello')
    de = inner.with_size_limit(SizeLimit.bounded(3))
    with pytest.raises(SizeLimitExceededError):
        decode_utf8(de)
    # only the length was consumed, the payload wasn't touched
    assert de.bytes_read == 1
    assert bytes(inner.read_all()) == b'hello'


def test_huge_declared_length_fails_on_limit() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('ff ffffffff 00')).with_size_limit(SizeLimit.bounded(100))
    with pytest.raises(SizeLimitExceededError) as e:
        decode_bytes(de)
    assert e.value.bytes_read == 5 + 0xffffffff
    assert de.bytes_read == 5


@pytest.mark.parametrize(['data', 'fits'], [
    (bytes(4), True),
    (bytes(5), False),
])
def test_read_all_with_limit(data: bytes, fits: bool) -> None:
    de = Deserializer.build_bytes_deserializer(data).with_size_limit(SizeLimit.bounded(4))
    if fits:
        assert bytes(de.read_all()) == data
        assert de.bytes_read == len(data)
    else:
        with pytest.raises(SizeLimitExceededError):
            de.read_all()


def test_negative_limit() -> None:
    with pytest.raises(ValueError):
        SizeLimit.bounded(-1)


def test_check() -> None:
    assert SizeLimit.bounded(0).check(0)
    assert not SizeLimit.bounded(0).check(1)
    assert SizeLimit.infinite().is_infinite()
    assert not SizeLimit.bounded(5).is_infinite()
