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


class _BytesVisitor(Visitor[bytes]):
    __slots__ = ()

    @override
    def expecting(self) -> str:
        return 'a byte array'

    @override
    def visit_bytes(self, value: bytes | memoryview, /) -> bytes:
        return bytes(value)

    @override
    def visit_str(self, value: str, /) -> bytes:
        return value.encode('utf-8')


class _ByteBufVisitor(Visitor[bytearray]):
    __slots__ = ()

    @override
    def expecting(self) -> str:
        return 'a byte buffer'

    @override
    def visit_bytes(self, value: bytes | memoryview, /) -> bytearray:
        return bytearray(value)

    @override
    def visit_byte_buf(self, value: bytearray, /) -> bytearray:
        return value


class BytesShape(Shape[bytes]):
    """ Represents builtin `bytes` values.
    """

    __slots__ = ()

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, bytes):
            raise TypeError('expected bytes type')
        return cls()

    @override
    def _check_value(self, value: bytes, /, *, deep: bool) -> None:
        if not isinstance(value, bytes):
            raise TypeError('expected bytes instance')

    @override
    def _serialize(self, serializer: Serializer, value: bytes, /) -> None:
        serializer.serialize_bytes(value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> bytes:
        return deserializer.deserialize_bytes(_BytesVisitor(deserializer))


class BytearrayShape(Shape[bytearray]):
    """ Represents builtin `bytearray` values, these are read as an owned byte buffer.
    """

    __slots__ = ()

    _is_hashable = False

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, bytearray):
            raise TypeError('expected bytearray type')
        return cls()

    @override
    def _check_value(self, value: bytearray, /, *, deep: bool) -> None:
        if not isinstance(value, bytearray):
            raise TypeError('expected bytearray instance')

    @override
    def _serialize(self, serializer: Serializer, value: bytearray, /) -> None:
        serializer.serialize_bytes(value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> bytearray:
        return deserializer.deserialize_byte_buf(_ByteBufVisitor(deserializer))
