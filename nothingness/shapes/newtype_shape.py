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

from typing import Any, TypeVar

from typing_extensions import Self, override

from nothingness.serialization import Deserializer, Serializer, Visitor
from nothingness.shapes.shape import Shape
from nothingness.utils.typing import is_newtype

T = TypeVar('T')


class _NewtypeVisitor(Visitor[T]):
    __slots__ = ('_shape',)

    def __init__(self, deserializer: Deserializer, shape: NewtypeShape[T]) -> None:
        super().__init__(deserializer)
        self._shape = shape

    @override
    def expecting(self) -> str:
        return f'newtype struct {self._shape.name}'

    @override
    def visit_newtype_struct(self, deserializer: Deserializer, /) -> T:
        return self._shape.inner.deserialize(deserializer)


class NewtypeShape(Shape[T]):
    """ Represents a `typing.NewType` that has no dedicated shape, it is a newtype struct wrapping its supertype.

    Values are not wrapped at runtime, so the value is just checked against the supertype.
    """

    __slots__ = ('_is_hashable', '_name', '_inner')

    _name: str
    _inner: Shape[T]

    def __init__(self, name: str, inner: Shape[T]) -> None:
        self._name = name
        self._inner = inner
        self._is_hashable = inner.is_hashable()

    @property
    def name(self) -> str:
        return self._name

    @property
    def inner(self) -> Shape[T]:
        return self._inner

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_newtype(type_):
            raise TypeError('expected NewType')
        return cls(type_.__name__, Shape.from_type(type_.__supertype__, type_map=type_map))

    @override
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        self._inner._check_value(value, deep=deep)

    @override
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        serializer.serialize_newtype_struct(self._name, value, self._inner.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        return deserializer.deserialize_newtype_struct(self._name, _NewtypeVisitor(deserializer, self))
