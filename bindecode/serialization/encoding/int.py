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

"""
This module implements decoding of integers with a fixed size, the size and signedness are parametrized.

The byte order is the one configured in the deserializer, there is no padding and no alignment.

>>> from bindecode.serialization import ByteOrder
>>> data = bytes.fromhex('00ff04d2fb2e')
>>> de = Deserializer.build_bytes_deserializer(data, byte_order=ByteOrder.BIG)
>>> decode_int(de, length=1, signed=True)  # reads 00
0
>>> decode_int(de, length=1, signed=False)  # reads ff
255
>>> decode_int(de, length=2, signed=True)  # reads 04d2
1234
>>> decode_int(de, length=2, signed=True)  # reads fb2e
-1234

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('d204 78563412'), byte_order=ByteOrder.LITTLE)
>>> decode_u16(de)
1234
>>> hex(decode_u32(de))
'0x12345678'
>>> de.finalize()
"""

from bindecode.serialization import Deserializer


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> int:
    """ Decode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder=deserializer.byte_order.value, signed=signed)


def decode_u8(deserializer: Deserializer) -> int:
    return deserializer.read_byte()


def decode_i8(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=1, signed=True)


def decode_u16(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=2, signed=False)


def decode_i16(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=2, signed=True)


def decode_u32(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=4, signed=False)


def decode_i32(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=4, signed=True)


def decode_u64(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=8, signed=False)


def decode_i64(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=8, signed=True)
