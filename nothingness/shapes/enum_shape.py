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
An `enum.Enum` is an enum in the protocol where every member is a unit variant, named after the member.

A unit variant carries no payload, so writing any member into `Nothing` succeeds: every member is nothing, not just the
first one. Making up a member from nothing always gives the first member, so for the other members the value that
comes back from nothing is not the one that went in:

>>> from nothingness.nothing import from_nothing, is_nothing
>>> class Color(Enum):
...     RED = 'red'
...     GREEN = 'green'
>>> is_nothing(Color.RED), is_nothing(Color.GREEN)
(True, True)
>>> from_nothing(Color)
<Color.RED: 'red'>
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from typing_extensions import Self, override

from nothingness.serialization import Deserializer, EnumAccess, Serializer, Visitor
from nothingness.shapes.identifier import variant_identifier_decoder
from nothingness.shapes.shape import Shape
from nothingness.utils.typing import is_subclass

E = TypeVar('E', bound=Enum)


class _EnumVisitor(Visitor[E]):
    __slots__ = ('_shape',)

    def __init__(self, deserializer: Deserializer, shape: EnumShape[E]) -> None:
        super().__init__(deserializer)
        self._shape = shape

    @override
    def expecting(self) -> str:
        return f'enum {self._shape.name}'

    @override
    def visit_enum(self, data: EnumAccess, /) -> E:
        index, variant = data.variant(variant_identifier_decoder(self._shape.names))
        variant.unit_variant()
        return self._shape.members[index]


class EnumShape(Shape[E]):
    """ Represents members of an `enum.Enum` subclass, each member is an unit variant.

    Members are identified by their position in the enum, the member values are not used at all.
    """

    __slots__ = ('_enum_class', '_members')

    _is_hashable = True
    _enum_class: type[E]
    _members: tuple[E, ...]

    def __init__(self, enum_class: type[E]) -> None:
        self._enum_class = enum_class
        self._members = tuple(enum_class)

    @property
    def name(self) -> str:
        return self._enum_class.__name__

    @property
    def members(self) -> tuple[E, ...]:
        return self._members

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(member.name for member in self._members)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, Enum):
            raise TypeError('expected Enum subclass')
        return cls(type_)

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self._enum_class):
            raise TypeError(f'expected {self._enum_class.__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: E, /) -> None:
        serializer.serialize_unit_variant(self.name, self._members.index(value), value.name)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> E:
        return deserializer.deserialize_enum(self.name, self.names, _EnumVisitor(deserializer, self))
