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

# single byte that announces a 4-byte length right after it, lengths up to 0xFE fit in the byte itself
LENGTH_ESCAPE = 0xFF

# how much is read from a stream at once when a large amount of bytes is requested
DEFAULT_STREAM_CHUNK_SIZE = 64 * 1024
