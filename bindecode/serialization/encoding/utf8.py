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
This module implements decoding of utf-8 strings with a length prefix.

It works exactly like bytes-decoding but the byte-sequence must be valid utf-8 and a `str` is returned. The whole
byte-sequence is validated at once, which accepts the same inputs as decoding each character with the `char` module.

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('06666f6f6261720ce3838fe38388e3839be383ab04f09f988e'))
>>> decode_utf8(de)  # reads 06666f6f626172
'foobar'
>>> decode_utf8(de)  # reads 0ce3838fe38388e3839be383ab
'ハトホル'
>>> decode_utf8(de)  # reads 04f09f988e
'😎'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x02\xc3\x28')
>>> try:
...     decode_utf8(de)
... except InvalidEncodingError as e:
...     print(e.description)
error while decoding utf8 string
"""

from bindecode.serialization import Deserializer, InvalidEncodingError

from .bytes import decode_bytes


def decode_utf8(deserializer: Deserializer) -> str:
    """ Decodes a UTF-8 string with a length prefix.

    This modules's docstring has more details and examples.
    """
    data = decode_bytes(deserializer)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidEncodingError('error while decoding utf8 string', str(e)) from e
