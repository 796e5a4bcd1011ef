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
from collections.abc import Iterable
from typing import TypeVar

from nothingness.serialization.exceptions import (
    DecodeError,
    DuplicateFieldError,
    InvalidLengthError,
    InvalidTypeError,
    InvalidValueError,
    MissingFieldError,
    UnknownVariantError,
)
from nothingness.serialization.visitor import Visitor

T = TypeVar('T')


class Deserializer(ABC):
    """ The read side of the structured-data protocol.

    The caller says which shape it wants by picking one of the `deserialize_*` methods and passes a `Visitor`, the
    deserializer then calls back into the visitor with the shape it actually has. Self-describing formats may call any
    `visit_*` method regardless of what was asked, other formats rely on the hint to know what to read.
    """

    __slots__ = ()

    # XXX: visitors and decoders build their errors through these methods instead of raising the exceptions directly,
    #      a deserializer with its own error type overrides all of them

    def decode_error(self, message: str, /) -> DecodeError:
        """Build the error this deserializer uses for failures that come from the decoders instead of the format."""
        return DecodeError(message)

    def invalid_type(self, unexpected: str, expected: str, /) -> DecodeError:
        return InvalidTypeError(unexpected, expected)

    def invalid_value(self, unexpected: str, expected: str, /) -> DecodeError:
        return InvalidValueError(unexpected, expected)

    def invalid_length(self, length: int, expected: str, /) -> DecodeError:
        return InvalidLengthError(length, expected)

    def unknown_variant(self, variant: str, expected: Iterable[str], /) -> DecodeError:
        return UnknownVariantError(variant, expected)

    def missing_field(self, field: str, /) -> DecodeError:
        return MissingFieldError(field)

    def duplicate_field(self, field: str, /) -> DecodeError:
        return DuplicateFieldError(field)

    @abstractmethod
    def deserialize_any(self, visitor: Visitor[T], /) -> T:
        """No particular shape is expected, the deserializer visits whatever it has."""
        raise NotImplementedError

    @abstractmethod
    def deserialize_bool(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_i8(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_i16(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_i32(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_i64(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_i128(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_u8(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_u16(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_u32(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_u64(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_u128(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_f32(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_f64(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_char(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_str(self, visitor: Visitor[T], /) -> T:
        """A string is expected, the deserializer may visit a borrowed one."""
        raise NotImplementedError

    @abstractmethod
    def deserialize_string(self, visitor: Visitor[T], /) -> T:
        """An owned string is expected."""
        raise NotImplementedError

    @abstractmethod
    def deserialize_bytes(self, visitor: Visitor[T], /) -> T:
        """A byte sequence is expected, the deserializer may visit a borrowed one."""
        raise NotImplementedError

    @abstractmethod
    def deserialize_byte_buf(self, visitor: Visitor[T], /) -> T:
        """An owned byte buffer is expected."""
        raise NotImplementedError

    @abstractmethod
    def deserialize_option(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_unit(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_unit_struct(self, name: str, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_newtype_struct(self, name: str, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_seq(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_tuple(self, length: int, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_tuple_struct(self, name: str, length: int, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_map(self, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_struct(self, name: str, fields: tuple[str, ...], visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_enum(self, name: str, variants: tuple[str, ...], visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def deserialize_identifier(self, visitor: Visitor[T], /) -> T:
        """The name or index of a struct field or of an enum variant is expected."""
        raise NotImplementedError

    @abstractmethod
    def deserialize_ignored_any(self, visitor: Visitor[T], /) -> T:
        """The value is going to be thrown away, the deserializer may skip it in the cheapest way possible."""
        raise NotImplementedError
