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
Serializing into nothing succeeds only for values that are nothing, there is no output at all.

Sequences and maps are nothing only when empty, the first element fails even if it is itself nothing, while tuples,
structs and variants (which have a fixed number of members) are nothing when all of their members are nothing.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from typing_extensions import override

from nothingness.nothing.exceptions import NothingSerializeError
from nothingness.serialization import (
    Encoder,
    SerializeMap,
    SerializeSeq,
    SerializeStruct,
    SerializeStructVariant,
    SerializeTuple,
    SerializeTupleStruct,
    SerializeTupleVariant,
    Serializer,
)

T = TypeVar('T')
K = TypeVar('K')
V = TypeVar('V')


def _check_zero(value: int | float) -> None:
    if value != 0:
        raise NothingSerializeError()


class _NonEmptySeq(SerializeSeq):
    """Any element at all makes a sequence not nothing."""

    __slots__ = ()

    @override
    def serialize_element(self, value: T, encoder: Encoder[T], /) -> None:
        raise NothingSerializeError()

    @override
    def end(self) -> None:
        pass


class _NonEmptyMap(SerializeMap):
    """Any key or value at all makes a map not nothing."""

    __slots__ = ()

    @override
    def serialize_key(self, key: K, encoder: Encoder[K], /) -> None:
        raise NothingSerializeError()

    @override
    def serialize_value(self, value: V, encoder: Encoder[V], /) -> None:
        raise NothingSerializeError()

    @override
    def serialize_entry(self, key: K, value: V, key_encoder: Encoder[K], value_encoder: Encoder[V], /) -> None:
        raise NothingSerializeError()

    @override
    def end(self) -> None:
        pass


class _NothingTuple(SerializeTuple, SerializeTupleStruct, SerializeTupleVariant):
    """Each positional member must itself be nothing."""

    __slots__ = ('_serializer',)

    def __init__(self, serializer: NothingSerializer) -> None:
        self._serializer = serializer

    @override
    def serialize_element(self, value: T, encoder: Encoder[T], /) -> None:
        encoder(self._serializer, value)

    @override
    def serialize_field(self, value: T, encoder: Encoder[T], /) -> None:
        encoder(self._serializer, value)

    @override
    def end(self) -> None:
        pass


class _NothingStruct(SerializeStruct, SerializeStructVariant):
    """Each named member must itself be nothing, skipped members don't count."""

    __slots__ = ('_serializer',)

    def __init__(self, serializer: NothingSerializer) -> None:
        self._serializer = serializer

    @override
    def serialize_field(self, key: str, value: T, encoder: Encoder[T], /) -> None:
        encoder(self._serializer, value)

    @override
    def skip_field(self, key: str, /) -> None:
        pass

    @override
    def end(self) -> None:
        pass


class _WriteEmpty:
    """A text stream that refuses to be written anything but empty strings."""

    __slots__ = ()

    def write(self, text: str) -> int:
        if text:
            raise NothingSerializeError()
        return 0

    def flush(self) -> None:
        pass


class NothingSerializer(Serializer):
    """ Serializer that accepts only values that are nothing.

    Every method either returns normally, meaning that the value is nothing, or raises `NothingSerializeError`.
    """

    __slots__ = ()

    @override
    def encode_error(self, message: str, /) -> NothingSerializeError:
        return NothingSerializeError()

    @override
    def serialize_bool(self, value: bool, /) -> None:
        if value:
            raise NothingSerializeError()

    @override
    def serialize_i8(self, value: int, /) -> None:
        _check_zero(value)

    @override
    def serialize_i16(self, value: int, /) -> None:
        _check_zero(value)

    @override
    def serialize_i32(self, value: int, /) -> None:
        _check_zero(value)

    @override
    def serialize_i64(self, value: int, /) -> None:
        _check_zero(value)

    @override
    def serialize_i128(self, value: int, /) -> None:
        _check_zero(value)

    @override
    def serialize_u8(self, value: int, /) -> None:
        _check_zero(value)

    @override
    def serialize_u16(self, value: int, /) -> None:
        _check_zero(value)

    @override
    def serialize_u32(self, value: int, /) -> None:
        _check_zero(value)

    @override
    def serialize_u64(self, value: int, /) -> None:
        _check_zero(value)

    @override
    def serialize_u128(self, value: int, /) -> None:
        _check_zero(value)

    @override
    def serialize_f32(self, value: float, /) -> None:
        # XXX: -0.0 == 0.0 so it is nothing too, NaN never is
        _check_zero(value)

    @override
    def serialize_f64(self, value: float, /) -> None:
        _check_zero(value)

    @override
    def serialize_char(self, value: str, /) -> None:
        if value != '\0':
            raise NothingSerializeError()

    @override
    def serialize_str(self, value: str, /) -> None:
        if value:
            raise NothingSerializeError()

    @override
    def serialize_bytes(self, value: bytes | bytearray | memoryview, /) -> None:
        if len(value) != 0:
            raise NothingSerializeError()

    @override
    def serialize_none(self) -> None:
        pass

    @override
    def serialize_some(self, value: T, encoder: Encoder[T], /) -> None:
        # XXX: even `Some(nothing)` is something, the inner value is not looked at
        raise NothingSerializeError()

    @override
    def serialize_unit(self) -> None:
        pass

    @override
    def serialize_unit_struct(self, name: str, /) -> None:
        pass

    @override
    def serialize_unit_variant(self, name: str, variant_index: int, variant: str, /) -> None:
        pass

    @override
    def serialize_newtype_struct(self, name: str, value: T, encoder: Encoder[T], /) -> None:
        encoder(self, value)

    @override
    def serialize_newtype_variant(
        self,
        name: str,
        variant_index: int,
        variant: str,
        value: T,
        encoder: Encoder[T],
        /,
    ) -> None:
        encoder(self, value)

    @override
    def serialize_seq(self, length: int | None, /) -> SerializeSeq:
        return _NonEmptySeq()

    @override
    def serialize_tuple(self, length: int, /) -> SerializeTuple:
        return _NothingTuple(self)

    @override
    def serialize_tuple_struct(self, name: str, length: int, /) -> SerializeTupleStruct:
        return _NothingTuple(self)

    @override
    def serialize_tuple_variant(
        self,
        name: str,
        variant_index: int,
        variant: str,
        length: int,
        /,
    ) -> SerializeTupleVariant:
        return _NothingTuple(self)

    @override
    def serialize_map(self, length: int | None, /) -> SerializeMap:
        return _NonEmptyMap()

    @override
    def serialize_struct(self, name: str, length: int, /) -> SerializeStruct:
        return _NothingStruct(self)

    @override
    def serialize_struct_variant(
        self,
        name: str,
        variant_index: int,
        variant: str,
        length: int,
        /,
    ) -> SerializeStructVariant:
        return _NothingStruct(self)

    @override
    def collect_seq(self, values: Iterable[T], encoder: Encoder[T], /) -> None:
        for _ in values:
            raise NothingSerializeError()

    @override
    def collect_map(
        self,
        items: Iterable[tuple[K, V]],
        key_encoder: Encoder[K],
        value_encoder: Encoder[V],
        /,
    ) -> None:
        for _ in items:
            raise NothingSerializeError()

    @override
    def collect_str(self, value: object, /) -> None:
        # the rendering is aborted as soon as the first character is written
        print(value, end='', file=_WriteEmpty())
