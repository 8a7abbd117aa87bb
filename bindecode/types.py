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
Types that can be used in annotations to pick the exact encoding of a value.

Builtin `int` and `float` carry no size, they're decoded as `i64` and `f64`. The other widths need one of these types,
for example a dataclass field `count: u16`. At runtime the values are plain `int`, `float` and `str` instances.
"""

from typing import NewType

u8 = NewType('u8', int)
u16 = NewType('u16', int)
u32 = NewType('u32', int)
u64 = NewType('u64', int)

i8 = NewType('i8', int)
i16 = NewType('i16', int)
i32 = NewType('i32', int)
i64 = NewType('i64', int)

f32 = NewType('f32', float)
f64 = NewType('f64', float)

# a single unicode scalar value, a `str` of length 1
char = NewType('char', str)
