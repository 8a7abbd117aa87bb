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
This module was made to hold compound decoding implementations.

Compound decoders are decoders that are generic in some way and will delegate the decoding of some portion to another
decoder. For example a `value: Optional[T]` decoder is prepared to decode the tag and delegate the rest to a decoder
that knows how to decode `T`.

The general organization should be that each submodule `x` deals with a single type and look like this:

    def decode_x(deserializer: Deserializer, ...config params...) -> ValueType:
        ...

The "config params" are optional and specific to each decoder. Submodules should not have to take into consideration
how types are mapped to decoders.
"""

from typing import Protocol, TypeVar

from bindecode.serialization.deserializer import Deserializer

T_co = TypeVar('T_co', covariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, deserializer: Deserializer, /) -> T_co:
        ...
