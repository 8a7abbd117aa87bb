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
Schema-driven decoder for a compact binary format with no type tags in the stream.

This module exports the types and functions needed to decode values, see `bindecode.api` and `bindecode.shapes`.
"""

from bindecode.api import DecodeSession, decode, decode_from
from bindecode.serialization import (
    ByteOrder,
    InvalidEncodingError,
    OutOfDataError,
    SerializationError,
    SizeLimit,
    SizeLimitExceededError,
    SourceError,
    SourceReadError,
    TrailingDataError,
    UnsupportedOperationError,
)
from bindecode.shapes import Shape, make_shape
from bindecode.version import __version__

__all__ = [
    'ByteOrder',
    'DecodeSession',
    'InvalidEncodingError',
    'OutOfDataError',
    'SerializationError',
    'Shape',
    'SizeLimit',
    'SizeLimitExceededError',
    'SourceError',
    'SourceReadError',
    'TrailingDataError',
    'UnsupportedOperationError',
    '__version__',
    'decode',
    'decode_from',
    'make_shape',
]
