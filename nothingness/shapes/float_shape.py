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

from __future__ import annotations

from typing import Any, ClassVar

from typing_extensions import Self, override

from nothingness.serialization import Deserializer, Serializer, Visitor
from nothingness.shapes.shape import Shape
from nothingness.utils.typing import is_subclass


class _FloatVisitor(Visitor[float]):
    __slots__ = ()

    @override
    def expecting(self) -> str:
        return 'a floating point number'

    @override
    def visit_f64(self, value: float, /) -> float:
        return value

    @override
    def visit_i64(self, value: int, /) -> float:
        return float(value)

    @override
    def visit_u64(self, value: int, /) -> float:
        return float(value)


class _FloatShape(Shape[float]):
    """ Base class for builtin `float` values, an `int` is also accepted where a float is expected.
    """

    __slots__ = ()

    _is_hashable = True
    # XXX: subclass must define this value:
    _bit_size: ClassVar[int]

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, float):
            raise TypeError('expected float type')
        return cls()

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise TypeError('expected float')

    @override
    def _serialize(self, serializer: Serializer, value: float, /) -> None:
        getattr(serializer, f'serialize_f{self._bit_size}')(float(value))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> float:
        return getattr(deserializer, f'deserialize_f{self._bit_size}')(_FloatVisitor(deserializer))


class Float32Shape(_FloatShape):
    # XXX: Python floats are always double precision, only the protocol method changes
    _bit_size = 32


class Float64Shape(_FloatShape):
    _bit_size = 64


FLOAT_SHAPES: dict[str, type[_FloatShape]] = {
    'f32': Float32Shape,
    'f64': Float64Shape,
}
