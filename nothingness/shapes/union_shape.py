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
An union of dataclasses and `NamedTuple`s is a tagged union in the protocol: an enum where each member of the union
is a variant, named after its class, and the value is the variant's payload.

For example `Circle | Square` (both dataclasses) is written as a struct variant `Circle` or `Square` of an enum named
`Circle | Square`.
"""

from __future__ import annotations

from types import NoneType
from typing import Any, cast

from typing_extensions import Self, override

from nothingness.serialization import Deserializer, EnumAccess, Serializer, Visitor
from nothingness.shapes.identifier import variant_identifier_decoder
from nothingness.shapes.shape import Shape
from nothingness.shapes.utils import union_args
from nothingness.shapes.variant import VariantPayload


class _UnionVisitor(Visitor[Any]):
    __slots__ = ('_shape',)

    def __init__(self, deserializer: Deserializer, shape: UnionShape) -> None:
        super().__init__(deserializer)
        self._shape = shape

    @override
    def expecting(self) -> str:
        return f'one of {self._shape.name}'

    @override
    def visit_enum(self, data: EnumAccess, /) -> Any:
        index, access = data.variant(variant_identifier_decoder(self._shape.names))
        payload = self._shape.payloads[index]
        return payload.deserialize_variant(self._deserializer, access, self._shape.names[index])


class UnionShape(Shape[Any]):
    __slots__ = ('_classes', '_members')

    _is_hashable = False
    _classes: tuple[type, ...]
    _members: tuple[Shape, ...]

    def __init__(self, classes: tuple[type, ...], members: tuple[Shape, ...]) -> None:
        assert len(classes) == len(members)
        for member in members:
            assert isinstance(member, VariantPayload)
        self._classes = classes
        self._members = members

    @property
    def name(self) -> str:
        return ' | '.join(self.names)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(class_.__name__ for class_ in self._classes)

    @property
    def payloads(self) -> tuple[VariantPayload, ...]:
        return cast(tuple[VariantPayload, ...], self._members)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        args = union_args(type_)
        if NoneType in args:
            raise TypeError('an union with `None` is an optional')
        members = tuple(Shape.from_type(arg, type_map=type_map) for arg in args)
        for arg, member in zip(args, members):
            if not isinstance(arg, type) or not isinstance(member, VariantPayload):
                raise TypeError(f'{arg} cannot be a member of an union, only dataclasses and NamedTuples can')
        names = [arg.__name__ for arg in args]
        if len(set(names)) != len(names):
            raise TypeError('union members must have distinct names')
        return cls(tuple(args), members)

    def _index_of(self, value: Any) -> int:
        # an exact match wins over a subclass
        for i, class_ in enumerate(self._classes):
            if type(value) is class_:
                return i
        for i, class_ in enumerate(self._classes):
            if isinstance(value, class_):
                return i
        raise TypeError(f'expected one of {self.name}')

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        index = self._index_of(value)
        if deep:
            self._members[index]._check_value(value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: Any, /) -> None:
        index = self._index_of(value)
        self.payloads[index].serialize_variant(serializer, self.name, index, self.names[index], value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Any:
        return deserializer.deserialize_enum(self.name, self.names, _UnionVisitor(deserializer, self))
