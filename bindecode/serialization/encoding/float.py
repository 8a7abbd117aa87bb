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
This module implements decoding of IEEE 754 floats, single (4 bytes) and double (8 bytes) precision.

>>> from bindecode.serialization import ByteOrder
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('3fc00000 400921fb54442d18'), byte_order=ByteOrder.BIG)
>>> decode_f32(de)
1.5
>>> decode_f64(de)
3.141592653589793
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000c03f'), byte_order=ByteOrder.LITTLE)
>>> decode_f32(de)
1.5
"""

from bindecode.serialization import Deserializer


def decode_f32(deserializer: Deserializer) -> float:
    """ Decodes a single precision float, the result is widened to a Python float.
    """
    value, = deserializer.read_struct('f')
    return value


def decode_f64(deserializer: Deserializer) -> float:
    """ Decodes a double precision float.
    """
    value, = deserializer.read_struct('d')
    return value
