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
Decoding a mapping is equivalent to decoding a collection of 2-tuples.

Layout: [N: length][key_0][value_0]...[key_N][value_N]

>>> from bindecode.serialization.encoding.utf8 import decode_utf8
>>> from bindecode.serialization.encoding.bool import decode_bool
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0403666f6f00036261720106666f6f626172010362617a00'))
>>> decode_mapping(de, decode_utf8, decode_bool, dict)
{'foo': False, 'bar': True, 'foobar': True, 'baz': False}
>>> de.finalize()

Breakdown of the input:

    04: 4 as a length, the total length
    03666f6f: 'foo' with length prefix
    00: False
    03626172: 'bar' with length prefix
    01: True
    06666f6f626172: 'foobar' with length prefix
    01: True
    0362617a: 'baz' with length prefix
    00: False

Duplicate keys are not checked, what happens to them is up to the builder, with `dict` the last value wins:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02 03666f6f00 03666f6f01'))
>>> decode_mapping(de, decode_utf8, decode_bool, dict)
{'foo': True}
"""

from collections.abc import Iterable, Mapping
from typing import Callable, TypeVar

from bindecode.serialization import Deserializer
from bindecode.serialization.encoding.length import decode_length

from . import Decoder

KT = TypeVar('KT')
VT = TypeVar('VT')
R = TypeVar('R', bound=Mapping)


def decode_mapping(
    deserializer: Deserializer,
    key_decoder: Decoder[KT],
    value_decoder: Decoder[VT],
    mapping_builder: Callable[[Iterable[tuple[KT, VT]]], R],
) -> R:
    size = decode_length(deserializer)
    return mapping_builder(
        (key_decoder(deserializer), value_decoder(deserializer))
        for _ in range(size)
    )
