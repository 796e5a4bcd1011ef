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

from functools import reduce
from operator import or_
from types import NoneType
from typing import Any, TypeVar

from typing_extensions import Self, override

from nothingness.serialization import Deserializer, Serializer
from nothingness.serialization.compound_encoding.optional import decode_optional, encode_optional
from nothingness.shapes.shape import Shape
from nothingness.shapes.utils import union_args

V = TypeVar('V')


class OptionalShape(Shape[V | None]):
    """ Represents a shape that is either `V` or `None`.

    When there is more than one type besides `None`, like `A | B | None`, then `V` is the union `A | B`.
    """

    __slots__ = ('_is_hashable', '_value')

    _value: Shape[V]

    def __init__(self, shape: Shape[V]) -> None:
        self._value = shape
        self._is_hashable = shape.is_hashable()

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        args = union_args(type_)
        if NoneType not in args:
            raise TypeError('type must be an union with `None`')
        not_none_types = [arg for arg in args if arg is not NoneType]
        if not not_none_types:
            raise TypeError('type must have at least one type that is not `None`')
        not_none_type = reduce(or_, not_none_types)
        return cls(Shape.from_type(not_none_type, type_map=type_map))

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: V | None, /) -> None:
        encode_optional(serializer, value, self._value.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> V | None:
        return decode_optional(deserializer, self._value.deserialize)
