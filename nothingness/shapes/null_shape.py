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

from types import NoneType
from typing import Any

from typing_extensions import Self, override

from nothingness.serialization import Deserializer, Serializer, Visitor
from nothingness.shapes.shape import Shape


class _UnitVisitor(Visitor[None]):
    __slots__ = ()

    @override
    def expecting(self) -> str:
        return 'unit'

    @override
    def visit_unit(self) -> None:
        return None


class NullShape(Shape[None]):
    """ Represents `None` on its own (not as part of an optional), it is the unit shape.
    """

    __slots__ = ()

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        # XXX: usually we expect NoneType as type_, but in some cases it can come-in as None, and we take that too
        if type_ is None or type_ is NoneType:
            return cls()
        raise TypeError('expected None type')

    @override
    def _check_value(self, value: None, /, *, deep: bool) -> None:
        if value is not None:
            raise TypeError('expected None')

    @override
    def _serialize(self, serializer: Serializer, value: None, /) -> None:
        serializer.serialize_unit()

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> None:
        return deserializer.deserialize_unit(_UnitVisitor(deserializer))
