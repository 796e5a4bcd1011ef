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
Deserializing from nothing makes up the most nothing-like value for whatever is asked: `False`, `0`, `''`, `b''`,
`None`, empty sequences and maps, and tuples or structs where every member is made up the same way.

Enums always get the first variant, which is identifier `0`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from typing_extensions import override

from nothingness.nothing.exceptions import NothingDeserializeError
from nothingness.serialization import (
    END,
    Decoder,
    Deserializer,
    End,
    EnumAccess,
    MapAccess,
    SeqAccess,
    VariantAccess,
    Visitor,
)

T = TypeVar('T')
K = TypeVar('K')
V = TypeVar('V')


class BoundedNothing(SeqAccess):
    """ A sequence of exactly `length` nothings.

    Used for shapes that have a fixed number of members, each member is made up from nothing before the sequence
    reports its end.
    """

    __slots__ = ('_nothing', '_remaining')

    def __init__(self, nothing: NothingDeserializer, length: int) -> None:
        self._nothing = nothing
        self._remaining = length

    @override
    def next_element(self, decoder: Decoder[T], /) -> T | End:
        if self._remaining <= 0:
            return END
        self._remaining -= 1
        return decoder(self._nothing)

    @override
    def size_hint(self) -> int:
        return self._remaining


class NothingDeserializer(Deserializer, SeqAccess, MapAccess, EnumAccess, VariantAccess):
    """ Deserializer that makes up nothing for every request, no data is ever read.

    It is its own empty `SeqAccess` and `MapAccess`, and its own `EnumAccess` and `VariantAccess` for the first
    variant of an enum.
    """

    __slots__ = ()

    # XXX: every failure is the same detail-less error, whatever the visitor or decoder had to say about it

    @override
    def decode_error(self, message: str, /) -> NothingDeserializeError:
        return NothingDeserializeError()

    @override
    def invalid_type(self, unexpected: str, expected: str, /) -> NothingDeserializeError:
        return NothingDeserializeError()

    @override
    def invalid_value(self, unexpected: str, expected: str, /) -> NothingDeserializeError:
        return NothingDeserializeError()

    @override
    def invalid_length(self, length: int, expected: str, /) -> NothingDeserializeError:
        return NothingDeserializeError()

    @override
    def unknown_variant(self, variant: str, expected: Iterable[str], /) -> NothingDeserializeError:
        return NothingDeserializeError()

    @override
    def missing_field(self, field: str, /) -> NothingDeserializeError:
        return NothingDeserializeError()

    @override
    def duplicate_field(self, field: str, /) -> NothingDeserializeError:
        return NothingDeserializeError()

    @override
    def deserialize_any(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_unit()

    @override
    def deserialize_bool(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_bool(False)

    @override
    def deserialize_i8(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_i8(0)

    @override
    def deserialize_i16(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_i16(0)

    @override
    def deserialize_i32(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_i32(0)

    @override
    def deserialize_i64(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_i64(0)

    @override
    def deserialize_i128(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_i128(0)

    @override
    def deserialize_u8(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_u8(0)

    @override
    def deserialize_u16(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_u16(0)

    @override
    def deserialize_u32(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_u32(0)

    @override
    def deserialize_u64(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_u64(0)

    @override
    def deserialize_u128(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_u128(0)

    @override
    def deserialize_f32(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_f32(0.0)

    @override
    def deserialize_f64(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_f64(0.0)

    @override
    def deserialize_char(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_char('\0')

    @override
    def deserialize_str(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_borrowed_str('')

    @override
    def deserialize_string(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_str('')

    @override
    def deserialize_bytes(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_borrowed_bytes(b'')

    @override
    def deserialize_byte_buf(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_bytes(b'')

    @override
    def deserialize_option(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_none()

    @override
    def deserialize_unit(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_unit()

    @override
    def deserialize_unit_struct(self, name: str, visitor: Visitor[T], /) -> T:
        return visitor.visit_unit()

    @override
    def deserialize_newtype_struct(self, name: str, visitor: Visitor[T], /) -> T:
        return visitor.visit_newtype_struct(self)

    @override
    def deserialize_seq(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_seq(self)

    @override
    def deserialize_tuple(self, length: int, visitor: Visitor[T], /) -> T:
        return visitor.visit_seq(BoundedNothing(self, length))

    @override
    def deserialize_tuple_struct(self, name: str, length: int, visitor: Visitor[T], /) -> T:
        return visitor.visit_seq(BoundedNothing(self, length))

    @override
    def deserialize_map(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_map(self)

    @override
    def deserialize_struct(self, name: str, fields: tuple[str, ...], visitor: Visitor[T], /) -> T:
        # XXX: structs are visited as sequences so no field identifiers have to be made up
        return visitor.visit_seq(BoundedNothing(self, len(fields)))

    @override
    def deserialize_enum(self, name: str, variants: tuple[str, ...], visitor: Visitor[T], /) -> T:
        return visitor.visit_enum(self)

    @override
    def deserialize_identifier(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_u8(0)

    @override
    def deserialize_ignored_any(self, visitor: Visitor[T], /) -> T:
        return visitor.visit_unit()

    # SeqAccess and MapAccess: always empty

    @override
    def next_element(self, decoder: Decoder[T], /) -> T | End:
        return END

    @override
    def next_key(self, decoder: Decoder[K], /) -> K | End:
        return END

    @override
    def next_value(self, decoder: Decoder[V], /) -> V:
        # there is never a key, so asking for a value breaks the MapAccess contract
        raise NothingDeserializeError()

    @override
    def next_entry(self, key_decoder: Decoder[K], value_decoder: Decoder[V], /) -> tuple[K, V] | End:
        return END

    @override
    def size_hint(self) -> int:
        return 0

    # EnumAccess and VariantAccess: the identifier and the payload are both made up from nothing

    @override
    def variant(self, decoder: Decoder[T], /) -> tuple[T, VariantAccess]:
        return decoder(self), self

    @override
    def unit_variant(self) -> None:
        pass

    @override
    def newtype_variant(self, decoder: Decoder[T], /) -> T:
        return decoder(self)

    @override
    def tuple_variant(self, length: int, visitor: Visitor[T], /) -> T:
        return visitor.visit_seq(BoundedNothing(self, length))

    @override
    def struct_variant(self, fields: tuple[str, ...], visitor: Visitor[T], /) -> T:
        return visitor.visit_seq(BoundedNothing(self, len(fields)))
