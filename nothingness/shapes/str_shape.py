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

from typing import Any

from typing_extensions import Self, override

from nothingness.serialization import Deserializer, Serializer, Visitor
from nothingness.shapes.shape import Shape
from nothingness.utils.typing import is_subclass


class StrVisitor(Visitor[str]):
    """Accepts any string, owned or borrowed, and also a single character."""

    __slots__ = ()

    @override
    def expecting(self) -> str:
        return 'a string'

    @override
    def visit_str(self, value: str, /) -> str:
        return value

    @override
    def visit_bytes(self, value: bytes | memoryview, /) -> str:
        try:
            return bytes(value).decode('utf-8')
        except UnicodeDecodeError as e:
            raise self._deserializer.invalid_value('byte array', 'a UTF-8 string') from e


class _CharVisitor(StrVisitor):
    __slots__ = ()

    @override
    def expecting(self) -> str:
        return 'a character'

    @override
    def visit_str(self, value: str, /) -> str:
        if len(value) != 1:
            raise self._deserializer.invalid_length(len(value), self.expecting())
        return value


class StrShape(Shape[str]):
    """ Represents builtin `str` values.
    """

    __slots__ = ()

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, str):
            raise TypeError('expected str type')
        return cls()

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise TypeError('expected str instance')

    @override
    def _serialize(self, serializer: Serializer, value: str, /) -> None:
        serializer.serialize_str(value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> str:
        return deserializer.deserialize_str(StrVisitor(deserializer))


class CharShape(Shape[str]):
    """ Represents a single character, annotated with `nothingness.types.Char`.
    """

    __slots__ = ()

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, str):
            raise TypeError('expected str type')
        return cls()

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise TypeError('expected str instance')
        if len(value) != 1:
            raise ValueError('expected a single character')

    @override
    def _serialize(self, serializer: Serializer, value: str, /) -> None:
        serializer.serialize_char(value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> str:
        return deserializer.deserialize_char(_CharVisitor(deserializer))
