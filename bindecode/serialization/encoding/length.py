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

r"""
This module implements the length encoding used by strings, byte sequences, collections, maps and enum variants.

Lengths are usually small, so a single byte is used when possible:

- a first byte in `0x00..0xFE` is the length itself
- a first byte `0xFF` is followed by the length as a 4-byte unsigned integer in the deserializer's byte order

Only `0xFF` escapes, so `254` is still a single byte while `255` already takes 5 bytes.

>>> from bindecode.serialization import ByteOrder
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00 fe ff000000ff ff00010000'), byte_order=ByteOrder.BIG)
>>> decode_length(de)  # reads 00
0
>>> decode_length(de)  # reads fe
254
>>> decode_length(de)  # reads ff000000ff
255
>>> decode_length(de)  # reads ff00010000
65536
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffff000000'), byte_order=ByteOrder.LITTLE)
>>> decode_length(de)
255
"""

from bindecode.serialization import Deserializer
from bindecode.serialization.consts import LENGTH_ESCAPE

from .int import decode_u32


def decode_length(deserializer: Deserializer) -> int:
    """ Decodes a length using 1 byte, or 5 bytes when the first one is the escape byte.

    This modules's docstring has more details and examples.
    """
    first_byte = deserializer.read_byte()
    if first_byte < LENGTH_ESCAPE:
        return first_byte
    return decode_u32(deserializer)
