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
A collection is basically any value that has a known size and is iterable.

Layout: [N: length][value_0]...[value_N]

There are no separators or terminators, exactly N values are decoded after the length, in order.

>>> from bindecode.serialization.encoding.utf8 import decode_utf8
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0406666f6f62617202cf8004f09f988e0474657374'))
>>> decode_collection(de, decode_utf8, tuple)
('foobar', 'π', '😎', 'test')
>>> de.finalize()

Breakdown of the input:

    04: 4 as a length, the total length
    06666f6f626172: 'foobar' (with length prefix)
    02cf80: 'π' (with length prefix)
    04f09f988e: '😎' (with length prefix)
    0474657374: 'test' (with length prefix)

The builder can be any compatible collection, it only matters that it can be initialized with an `Iterable[T]`.

When the length is known beforehand (fixed-size arrays) there's no prefix at all:

>>> from bindecode.serialization.encoding.int import decode_u16
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('010002000300'))
>>> decode_fixed_collection(de, decode_u16, 3, list)
[1, 2, 3]
>>> de.finalize()
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from bindecode.serialization import Deserializer
from bindecode.serialization.encoding.length import decode_length

from . import Decoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
) -> R:
    length = decode_length(deserializer)
    return decode_fixed_collection(deserializer, decoder, length, builder)


def decode_fixed_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    length: int,
    builder: Callable[[Iterable[T]], R],
) -> R:
    return builder(decoder(deserializer) for _ in range(length))
