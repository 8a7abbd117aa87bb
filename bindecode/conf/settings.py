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

from pathlib import Path
from typing import Any, Optional, Union

from pydantic import field_validator

from bindecode.serialization import ByteOrder, SizeLimit
from bindecode.serialization.consts import DEFAULT_STREAM_CHUNK_SIZE
from bindecode.utils import pydantic
from bindecode.utils.yaml import dict_from_extended_yaml


class DecoderSettings(pydantic.BaseModel):
    # Byte order used for every multi-byte value, "big" or "little"
    BYTE_ORDER: ByteOrder = ByteOrder.LITTLE

    # Maximum amount of bytes that a single decode session can consume, `None` disables the limit
    SIZE_LIMIT: Optional[int] = None

    # Amount of bytes requested at a time when decoding from a stream
    STREAM_CHUNK_SIZE: int = DEFAULT_STREAM_CHUNK_SIZE

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'DecoderSettings':
        """Takes a filepath to a yaml file and returns a validated DecoderSettings instance."""
        settings_dict = dict_from_extended_yaml(filepath=filepath)

        return cls.model_validate(settings_dict)

    def default_size_limit(self) -> SizeLimit:
        """The SizeLimit to use when a decode call doesn't give one."""
        if self.SIZE_LIMIT is None:
            return SizeLimit.infinite()
        return SizeLimit.bounded(self.SIZE_LIMIT)

    @field_validator('BYTE_ORDER', mode='before')
    @classmethod
    def _parse_byte_order(cls, byte_order: Any) -> Any:
        if isinstance(byte_order, str):
            return byte_order.lower()
        return byte_order

    @field_validator('SIZE_LIMIT')
    @classmethod
    def _validate_size_limit(cls, size_limit: Optional[int]) -> Optional[int]:
        if size_limit is not None and size_limit < 0:
            raise ValueError(f'SIZE_LIMIT cannot be negative, got {size_limit}')
        return size_limit

    @field_validator('STREAM_CHUNK_SIZE')
    @classmethod
    def _validate_stream_chunk_size(cls, chunk_size: int) -> int:
        if chunk_size <= 0:
            raise ValueError(f'STREAM_CHUNK_SIZE must be positive, got {chunk_size}')
        return chunk_size
