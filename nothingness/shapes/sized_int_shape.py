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


class _IntVisitor(Visitor[int]):
    __slots__ = ('_shape',)

    def __init__(self, deserializer: Deserializer, shape: _SizedIntShape) -> None:
        super().__init__(deserializer)
        self._shape = shape

    @override
    def expecting(self) -> str:
        return f'{self._shape.tag()} integer'

    def _visit_int(self, value: int) -> int:
        if not self._shape._in_range(value):
            raise self._deserializer.invalid_value(f'integer `{value}`', self.expecting())
        return value

    @override
    def visit_i64(self, value: int, /) -> int:
        return self._visit_int(value)

    @override
    def visit_i128(self, value: int, /) -> int:
        return self._visit_int(value)

    @override
    def visit_u64(self, value: int, /) -> int:
        return self._visit_int(value)

    @override
    def visit_u128(self, value: int, /) -> int:
        return self._visit_int(value)


class _SizedIntShape(Shape[int]):
    """ Base class for classes that represent builtin `int` values with a fixed size and signedness.

    The protocol method that is used is picked from the size and signedness, `serialize_i32`/`deserialize_i32` for
    a signed 32-bit integer, and so on.
    """

    __slots__ = ()

    _is_hashable = True
    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _bit_size: ClassVar[int]

    @classmethod
    def _upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._bit_size - 1) - 1
        else:
            return 2**cls._bit_size - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._bit_size - 1))
        else:
            return 0

    @classmethod
    def _in_range(cls, value: int) -> bool:
        return cls._lower_bound_value() <= value <= cls._upper_bound_value()

    @classmethod
    def tag(cls) -> str:
        """The name of the width used in the protocol methods, like `i32` or `u8`."""
        return f'{"i" if cls._signed else "u"}{cls._bit_size}'

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, int) or is_subclass(type_, bool):
            raise TypeError('expected int type')
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected integer')
        self._check_range(value)

    def _check_range(self, value: int) -> None:
        if value > self._upper_bound_value():
            raise ValueError('above upper bound')
        if value < self._lower_bound_value():
            raise ValueError('below lower bound')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        getattr(serializer, f'serialize_{self.tag()}')(value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> int:
        return getattr(deserializer, f'deserialize_{self.tag()}')(_IntVisitor(deserializer, self))


class Int8Shape(_SizedIntShape):
    _signed = True
    _bit_size = 8


class Int16Shape(_SizedIntShape):
    _signed = True
    _bit_size = 16


class Int32Shape(_SizedIntShape):
    _signed = True
    _bit_size = 32


class Int64Shape(_SizedIntShape):
    _signed = True
    _bit_size = 64


class Int128Shape(_SizedIntShape):
    _signed = True
    _bit_size = 128


class Uint8Shape(_SizedIntShape):
    _signed = False
    _bit_size = 8


class Uint16Shape(_SizedIntShape):
    _signed = False
    _bit_size = 16


class Uint32Shape(_SizedIntShape):
    _signed = False
    _bit_size = 32


class Uint64Shape(_SizedIntShape):
    _signed = False
    _bit_size = 64


class Uint128Shape(_SizedIntShape):
    _signed = False
    _bit_size = 128


# all sized int shapes by their tag, so they can be picked from the settings
SIZED_INT_SHAPES: dict[str, type[_SizedIntShape]] = {
    shape.tag(): shape
    for shape in (
        Int8Shape, Int16Shape, Int32Shape, Int64Shape, Int128Shape,
        Uint8Shape, Uint16Shape, Uint32Shape, Uint64Shape, Uint128Shape,
    )
}
