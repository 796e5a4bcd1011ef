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
from collections.abc import Iterable, Sized
from typing import TypeVar

from nothingness.serialization.codec import Encoder
from nothingness.serialization.exceptions import EncodeError

T = TypeVar('T')
K = TypeVar('K')
V = TypeVar('V')


class SerializeSeq(ABC):
    """Returned from `Serializer.serialize_seq`."""

    __slots__ = ()

    @abstractmethod
    def serialize_element(self, value: T, encoder: Encoder[T], /) -> None:
        raise NotImplementedError

    @abstractmethod
    def end(self) -> None:
        raise NotImplementedError


class SerializeTuple(ABC):
    """Returned from `Serializer.serialize_tuple`."""

    __slots__ = ()

    @abstractmethod
    def serialize_element(self, value: T, encoder: Encoder[T], /) -> None:
        raise NotImplementedError

    @abstractmethod
    def end(self) -> None:
        raise NotImplementedError


class SerializeTupleStruct(ABC):
    """Returned from `Serializer.serialize_tuple_struct`."""

    __slots__ = ()

    @abstractmethod
    def serialize_field(self, value: T, encoder: Encoder[T], /) -> None:
        raise NotImplementedError

    @abstractmethod
    def end(self) -> None:
        raise NotImplementedError


class SerializeTupleVariant(ABC):
    """Returned from `Serializer.serialize_tuple_variant`."""

    __slots__ = ()

    @abstractmethod
    def serialize_field(self, value: T, encoder: Encoder[T], /) -> None:
        raise NotImplementedError

    @abstractmethod
    def end(self) -> None:
        raise NotImplementedError


class SerializeMap(ABC):
    """Returned from `Serializer.serialize_map`.

    Every `serialize_key` must be followed by exactly one `serialize_value`.
    """

    __slots__ = ()

    @abstractmethod
    def serialize_key(self, key: K, encoder: Encoder[K], /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_value(self, value: V, encoder: Encoder[V], /) -> None:
        raise NotImplementedError

    def serialize_entry(self, key: K, value: V, key_encoder: Encoder[K], value_encoder: Encoder[V], /) -> None:
        self.serialize_key(key, key_encoder)
        self.serialize_value(value, value_encoder)

    @abstractmethod
    def end(self) -> None:
        raise NotImplementedError


class SerializeStruct(ABC):
    """Returned from `Serializer.serialize_struct`."""

    __slots__ = ()

    @abstractmethod
    def serialize_field(self, key: str, value: T, encoder: Encoder[T], /) -> None:
        raise NotImplementedError

    def skip_field(self, key: str, /) -> None:
        """Indicate that a field was skipped, formats that don't care about it don't have to do anything."""
        pass

    @abstractmethod
    def end(self) -> None:
        raise NotImplementedError


class SerializeStructVariant(ABC):
    """Returned from `Serializer.serialize_struct_variant`."""

    __slots__ = ()

    @abstractmethod
    def serialize_field(self, key: str, value: T, encoder: Encoder[T], /) -> None:
        raise NotImplementedError

    def skip_field(self, key: str, /) -> None:
        pass

    @abstractmethod
    def end(self) -> None:
        raise NotImplementedError


class Serializer(ABC):
    """ The write side of the structured-data protocol.

    A value is written by calling exactly one of the `serialize_*` methods, compound methods return a sub-serializer
    that must be given each member in order and then closed with `end()`. What is produced (if anything) is up to the
    implementation, failures are reported by raising `EncodeError` (or a subclass of it).
    """

    __slots__ = ()

    def encode_error(self, message: str, /) -> EncodeError:
        """Build the error this serializer uses for failures that come from the encoders instead of the format."""
        return EncodeError(message)

    @abstractmethod
    def serialize_bool(self, value: bool, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_i8(self, value: int, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_i16(self, value: int, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_i32(self, value: int, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_i64(self, value: int, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_i128(self, value: int, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_u8(self, value: int, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_u16(self, value: int, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_u32(self, value: int, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_u64(self, value: int, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_u128(self, value: int, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_f32(self, value: float, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_f64(self, value: float, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_char(self, value: str, /) -> None:
        """Write a single character, `value` is a `str` of length 1."""
        raise NotImplementedError

    @abstractmethod
    def serialize_str(self, value: str, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_bytes(self, value: bytes | bytearray | memoryview, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_none(self) -> None:
        """Write an absent optional."""
        raise NotImplementedError

    @abstractmethod
    def serialize_some(self, value: T, encoder: Encoder[T], /) -> None:
        """Write a present optional, the inner value is written with the given encoder."""
        raise NotImplementedError

    @abstractmethod
    def serialize_unit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_unit_struct(self, name: str, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_unit_variant(self, name: str, variant_index: int, variant: str, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_newtype_struct(self, name: str, value: T, encoder: Encoder[T], /) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_newtype_variant(
        self,
        name: str,
        variant_index: int,
        variant: str,
        value: T,
        encoder: Encoder[T],
        /,
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def serialize_seq(self, length: int | None, /) -> SerializeSeq:
        """Begin a dynamically sized sequence, the length may not be known in advance."""
        raise NotImplementedError

    @abstractmethod
    def serialize_tuple(self, length: int, /) -> SerializeTuple:
        """Begin a fixed size sequence, the length is part of the type."""
        raise NotImplementedError

    @abstractmethod
    def serialize_tuple_struct(self, name: str, length: int, /) -> SerializeTupleStruct:
        raise NotImplementedError

    @abstractmethod
    def serialize_tuple_variant(
        self,
        name: str,
        variant_index: int,
        variant: str,
        length: int,
        /,
    ) -> SerializeTupleVariant:
        raise NotImplementedError

    @abstractmethod
    def serialize_map(self, length: int | None, /) -> SerializeMap:
        raise NotImplementedError

    @abstractmethod
    def serialize_struct(self, name: str, length: int, /) -> SerializeStruct:
        raise NotImplementedError

    @abstractmethod
    def serialize_struct_variant(
        self,
        name: str,
        variant_index: int,
        variant: str,
        length: int,
        /,
    ) -> SerializeStructVariant:
        raise NotImplementedError

    def collect_seq(self, values: Iterable[T], encoder: Encoder[T], /) -> None:
        """Shortcut for writing any iterable as a sequence."""
        seq = self.serialize_seq(len(values) if isinstance(values, Sized) else None)
        for value in values:
            seq.serialize_element(value, encoder)
        seq.end()

    def collect_map(
        self,
        items: Iterable[tuple[K, V]],
        key_encoder: Encoder[K],
        value_encoder: Encoder[V],
        /,
    ) -> None:
        """Shortcut for writing any iterable of key-value pairs as a map."""
        map_ = self.serialize_map(len(items) if isinstance(items, Sized) else None)
        for key, value in items:
            map_.serialize_entry(key, value, key_encoder, value_encoder)
        map_.end()

    def collect_str(self, value: object, /) -> None:
        """Shortcut for writing the text rendering of any value as a string.

        The default implementation renders the whole text with `str()` first, serializers that can do better should
        override it.
        """
        self.serialize_str(str(value))
