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
This module implements decoding of a single unicode scalar value encoded with UTF-8.

There's no length prefix, the first byte tells the width (1 to 4 bytes) of the whole encoding, after reading the other
bytes the sequence is checked to be a well-formed UTF-8 encoding of exactly one character.

>>> de = Deserializer.build_bytes_deserializer('aπ😎'.encode('utf-8') + b'\xc2\x80')
>>> decode_char(de)
'a'
>>> decode_char(de)
'π'
>>> decode_char(de)
'😎'
>>> hex(ord(decode_char(de)))
'0x80'
>>> de.finalize()

A continuation byte cannot start a character:

>>> de = Deserializer.build_bytes_deserializer(b'\x80')
>>> try:
...     decode_char(de)
... except InvalidEncodingError as e:
...     print(e.description, '/', e.detail)
invalid char encoding / 0x80 is not a leading byte

A sequence with a correct leading byte can still be malformed, this one is an encoded surrogate:

>>> de = Deserializer.build_bytes_deserializer(b'\xed\xa0\x80')
>>> try:
...     decode_char(de)
... except InvalidEncodingError as e:
...     print(e.description)
invalid char encoding
"""

from bindecode.serialization import Deserializer, InvalidEncodingError

# Width of a UTF-8 encoded character indexed by its first byte, 0 means the byte can't start a character. This covers
# continuation bytes (0x80-0xBF), overlong leading bytes (0xC0, 0xC1) and bytes past U+10FFFF (0xF5-0xFF).
UTF8_CHAR_WIDTH: bytes = bytes(
    [1] * 0x80     # 0x00-0x7F
    + [0] * 0x42   # 0x80-0xC1
    + [2] * 0x1E   # 0xC2-0xDF
    + [3] * 0x10   # 0xE0-0xEF
    + [4] * 0x05   # 0xF0-0xF4
    + [0] * 0x0B   # 0xF5-0xFF
)
assert len(UTF8_CHAR_WIDTH) == 256


def utf8_char_width(first_byte: int) -> int:
    """ Number of bytes of a UTF-8 encoded character that starts with `first_byte`, 0 if it's not a leading byte.

    >>> [utf8_char_width(b) for b in (0x41, 0x80, 0xc1, 0xc2, 0xe2, 0xf0, 0xf4, 0xf5)]
    [1, 0, 0, 2, 3, 4, 4, 0]
    """
    return UTF8_CHAR_WIDTH[first_byte]


def decode_char(deserializer: Deserializer) -> str:
    """ Decodes one UTF-8 encoded character, returned as a string of length 1.

    This modules's docstring has more details and examples.
    """
    first_byte = deserializer.read_byte()
    width = utf8_char_width(first_byte)
    if width == 0:
        raise InvalidEncodingError('invalid char encoding', f'0x{first_byte:02x} is not a leading byte')
    if width == 1:
        return chr(first_byte)
    data = bytes([first_byte]) + bytes(deserializer.read_bytes(width - 1))
    try:
        char = data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidEncodingError('invalid char encoding', str(e)) from e
    # XXX: the width comes from the leading byte, a successful decode can only produce one character
    assert len(char) == 1
    return char
