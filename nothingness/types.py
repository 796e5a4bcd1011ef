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
Annotations for the primitive shapes that Python doesn't have a builtin type for.

A bare `int` or `float` uses the shape chosen in the settings, these are used to ask for a specific one instead:

>>> from dataclasses import dataclass
>>> @dataclass
... class Point:
...     x: I32
...     y: I32
"""

from typing import NewType

# signed integers
I8 = NewType('I8', int)
I16 = NewType('I16', int)
I32 = NewType('I32', int)
I64 = NewType('I64', int)
I128 = NewType('I128', int)

# unsigned integers
U8 = NewType('U8', int)
U16 = NewType('U16', int)
U32 = NewType('U32', int)
U64 = NewType('U64', int)
U128 = NewType('U128', int)

# floating point
F32 = NewType('F32', float)
F64 = NewType('F64', float)

# a single character, a `str` of length 1
Char = NewType('Char', str)

__all__ = [
    'Char',
    'F32',
    'F64',
    'I8',
    'I16',
    'I32',
    'I64',
    'I128',
    'U8',
    'U16',
    'U32',
    'U64',
    'U128',
]
