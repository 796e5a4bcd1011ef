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

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from nothingness.serialization.access import EnumAccess, MapAccess, SeqAccess
    from nothingness.serialization.deserializer import Deserializer
    from nothingness.serialization.exceptions import DecodeError

T = TypeVar('T')


class Visitor(ABC, Generic[T]):
    """ Receives whatever shape a deserializer has (or makes up) and turns it into a value.

    Every method rejects its shape by default, a visitor only overrides what it accepts. Narrow numeric shapes forward
    to the wider ones (`visit_i8` to `visit_i64`, `visit_f32` to `visit_f64`, ...), borrowed strings and bytes forward
    to the plain ones and `visit_char` forwards to `visit_str`, so most visitors only need a handful of methods.

    A visitor is built for the deserializer that is going to drive it, its errors are built by that deserializer.
    """

    __slots__ = ('_deserializer',)

    def __init__(self, deserializer: Deserializer, /) -> None:
        self._deserializer = deserializer

    @abstractmethod
    def expecting(self) -> str:
        """Describe what this visitor expects, used in error messages."""
        raise NotImplementedError

    def _invalid_type(self, unexpected: str) -> DecodeError:
        return self._deserializer.invalid_type(unexpected, self.expecting())

    def visit_bool(self, value: bool, /) -> T:
        raise self._invalid_type(f'boolean `{value}`')

    def visit_i8(self, value: int, /) -> T:
        return self.visit_i64(value)

    def visit_i16(self, value: int, /) -> T:
        return self.visit_i64(value)

    def visit_i32(self, value: int, /) -> T:
        return self.visit_i64(value)

    def visit_i64(self, value: int, /) -> T:
        raise self._invalid_type(f'integer `{value}`')

    def visit_i128(self, value: int, /) -> T:
        raise self._invalid_type(f'integer `{value}` as i128')

    def visit_u8(self, value: int, /) -> T:
        return self.visit_u64(value)

    def visit_u16(self, value: int, /) -> T:
        return self.visit_u64(value)

    def visit_u32(self, value: int, /) -> T:
        return self.visit_u64(value)

    def visit_u64(self, value: int, /) -> T:
        raise self._invalid_type(f'integer `{value}`')

    def visit_u128(self, value: int, /) -> T:
        raise self._invalid_type(f'integer `{value}` as u128')

    def visit_f32(self, value: float, /) -> T:
        return self.visit_f64(value)

    def visit_f64(self, value: float, /) -> T:
        raise self._invalid_type(f'floating point `{value}`')

    def visit_char(self, value: str, /) -> T:
        return self.visit_str(value)

    def visit_str(self, value: str, /) -> T:
        raise self._invalid_type(f'string {value!r}')

    def visit_borrowed_str(self, value: str, /) -> T:
        """The string outlives the deserializer, a visitor may keep it without copying."""
        return self.visit_str(value)

    def visit_bytes(self, value: bytes | memoryview, /) -> T:
        raise self._invalid_type('byte array')

    def visit_borrowed_bytes(self, value: bytes | memoryview, /) -> T:
        """The bytes outlive the deserializer, a visitor may keep them without copying."""
        return self.visit_bytes(value)

    def visit_byte_buf(self, value: bytearray, /) -> T:
        """The buffer is handed over to the visitor."""
        return self.visit_bytes(bytes(value))

    def visit_none(self) -> T:
        raise self._invalid_type('Option value')

    def visit_some(self, deserializer: Deserializer, /) -> T:
        raise self._invalid_type('Option value')

    def visit_unit(self) -> T:
        raise self._invalid_type('unit value')

    def visit_newtype_struct(self, deserializer: Deserializer, /) -> T:
        raise self._invalid_type('newtype struct')

    def visit_seq(self, seq: SeqAccess, /) -> T:
        raise self._invalid_type('sequence')

    def visit_map(self, map_: MapAccess, /) -> T:
        raise self._invalid_type('map')

    def visit_enum(self, data: EnumAccess, /) -> T:
        raise self._invalid_type('enum')
