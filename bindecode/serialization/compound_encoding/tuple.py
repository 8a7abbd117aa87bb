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
In Python a tuple type can be used in annotations in 2 different ways:

1. `tuple[A, B, C]`: known fixed length and heterogeneous types
2. `tuple[X, ...]`: variable length and homogeneous type

This module only implements decoding of the first case, the second case can be decoded using the collection decoder.

There actually isn't a "format" per-se, the encoding of `tuple[A, B, C]` is just the encoding of A concatenated with B
concatenated with C. Records (structs) are decoded the same way, their field names are not part of the encoding, only
the order of the fields matters.

>>> from bindecode.serialization.encoding.utf8 import decode_utf8
>>> from bindecode.serialization.encoding.bool import decode_bool
>>> from bindecode.serialization.encoding.bytes import decode_bytes
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('06666f6f626172000474657374'))
>>> decode_tuple(de, (decode_utf8, decode_bool, decode_bytes))
('foobar', False, b'test')

Breakdown of the input:

    06666f6f626172: 'foobar'
    00: False
    0474657374: b'test'
"""

from typing import Any

from bindecode.serialization import Deserializer

from . import Decoder


def decode_tuple(deserializer: Deserializer, decoders: tuple[Decoder[Any], ...]) -> tuple[Any, ...]:
    return tuple(decoder(deserializer) for decoder in decoders)
