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
This modules implements decoding of byte sequences prefixed with their length (see the `length` module).

It is the same as a collection of `u8` values, but the bytes are read all at once.

>>> from bindecode.serialization import OutOfDataError, TrailingDataError
>>> de = Deserializer.build_bytes_deserializer(b'\x04test')
>>> decode_bytes(de)
b'test'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x04testfoo')
>>> _ = decode_bytes(de)
>>> try:
...     de.finalize()
... except TrailingDataError as e:
...     print(e)
trailing data: 3 bytes left

>>> de = Deserializer.build_bytes_deserializer(b'\x04testfoo')
>>> _ = decode_bytes(de)
>>> bytes(de.read_all())
b'foo'

>>> de = Deserializer.build_bytes_deserializer(b'\x04tes')
>>> try:
...     decode_bytes(de)
... except OutOfDataError as e:
...     print(e.expected, e.actual)
4 3
"""

from bindecode.serialization import Deserializer

from .length import decode_length


def decode_bytes(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequence with a length prefix.

    This modules's docstring has more details and examples.
    """
    size = decode_length(deserializer)
    return bytes(deserializer.read_bytes(size))
