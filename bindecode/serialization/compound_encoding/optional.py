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
An optional value is encoded with a 1-byte tag followed by the value when there is one.

Layout:

    [0x00] when None
    [0x01][value] when not None

Any other tag is invalid.

>>> from bindecode.serialization.encoding.utf8 import decode_utf8
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0106666f6f626172'))
>>> decode_optional(de, decode_utf8)
'foobar'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00'))
>>> str(decode_optional(de, decode_utf8))
'None'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('02'))
>>> try:
...     decode_optional(de, decode_utf8)
... except InvalidEncodingError as e:
...     print(e)
invalid tag when decoding optional: expected 0 or 1, got 2
"""

from typing import Optional, TypeVar

from bindecode.serialization import Deserializer, InvalidEncodingError

from . import Decoder

T = TypeVar('T')


def decode_optional(deserializer: Deserializer, decoder: Decoder[T]) -> Optional[T]:
    tag = deserializer.read_byte()
    if tag == 0:
        return None
    elif tag == 1:
        return decoder(deserializer)
    else:
        raise InvalidEncodingError('invalid tag when decoding optional', f'expected 0 or 1, got {tag}')
