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

from typing import Literal

from nothingness.utils.pydantic import BaseModel

IntShapeName = Literal['i8', 'i16', 'i32', 'i64', 'i128', 'u8', 'u16', 'u32', 'u64', 'u128']
FloatShapeName = Literal['f32', 'f64']


class NothingnessSettings(BaseModel):
    # Shape used for annotations that are a bare `int`, sized annotations like `nothingness.types.U32` always use
    # their own shape
    INT_SHAPE: IntShapeName = 'i64'

    # Shape used for annotations that are a bare `float`
    FLOAT_SHAPE: FloatShapeName = 'f64'
