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
An enum value is encoded as the 0-based index of its variant followed by that variant's payload.

Layout: [index: length][payload of variant `index`]

The index uses the same encoding as lengths. Each variant has its own payload decoder: a unit variant reads nothing, a
newtype variant reads one value and tuple or record variants read their fields in order. An index without a variant is
invalid.

>>> from bindecode.serialization.encoding.int import decode_u8
>>> from bindecode.serialization.compound_encoding.tuple import decode_tuple
>>> variants = (
...     lambda de: None,
...     lambda de: decode_tuple(de, (decode_u8, decode_u8)),
... )
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00 01 0506'))
>>> decode_enum(de, variants)
(0, None)
>>> decode_enum(de, variants)
(1, (5, 6))
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02'))
>>> try:
...     decode_enum(de, variants)
... except InvalidEncodingError as e:
...     print(e)
invalid variant index when decoding enum: expected index below 2, got 2
"""

from collections.abc import Sequence
from typing import TypeVar

from bindecode.serialization import Deserializer, InvalidEncodingError
from bindecode.serialization.encoding.length import decode_length

from . import Decoder

T = TypeVar('T')


def decode_enum(deserializer: Deserializer, variant_decoders: Sequence[Decoder[T]]) -> tuple[int, T]:
    """ Decodes the variant index and then its payload, returns both.
    """
    index = decode_length(deserializer)
    if index >= len(variant_decoders):
        raise InvalidEncodingError(
            'invalid variant index when decoding enum',
            f'expected index below {len(variant_decoders)}, got {index}',
        )
    return index, variant_decoders[index](deserializer)
