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
Types that have a canonical text form are written as strings, rendered with `str()` and parsed back with the type's
constructor. A value is never rendered to an intermediate string if the serializer doesn't need it, `collect_str`
lets the serializer decide.

Parsing failures are reported with the deserializer's own error, through `Deserializer.decode_error`.
"""

from __future__ import annotations

from decimal import Decimal
from ipaddress import IPv4Address, IPv6Address
from typing import Any, TypeVar
from uuid import UUID

from typing_extensions import Self, override

from nothingness.serialization import Deserializer, Serializer
from nothingness.shapes.shape import Shape
from nothingness.shapes.str_shape import StrVisitor

T = TypeVar('T')

# the types that can be used with DisplayShape, all of them are hashable
DISPLAY_TYPES: tuple[type, ...] = (Decimal, IPv4Address, IPv6Address, UUID)


class DisplayShape(Shape[T]):
    __slots__ = ('_class',)

    _is_hashable = True
    _class: type[T]

    def __init__(self, class_: type[T]) -> None:
        self._class = class_

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if type_ not in DISPLAY_TYPES:
            raise TypeError(f'expected one of {", ".join(t.__name__ for t in DISPLAY_TYPES)}')
        return cls(type_)

    @override
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__name__} instance')

    @override
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        serializer.collect_str(value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        text = deserializer.deserialize_str(StrVisitor(deserializer))
        try:
            return self._class(text)  # type: ignore[call-arg]
        # XXX: invalid decimals raise decimal.InvalidOperation, which is an ArithmeticError
        except (ValueError, ArithmeticError) as e:
            raise deserializer.decode_error(f'invalid {self._class.__name__}: {text!r}') from e
