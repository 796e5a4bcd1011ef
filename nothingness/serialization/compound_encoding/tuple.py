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

r"""
In Python a tuple type can be used in annotations in 2 different ways:

1. `tuple[A, B, C]`: known fixed length and heterogeneous types
2. `tuple[X, ...]`: variable length and homogeneous type

This module only implements encoding of the first case, the second case can be encoded using the collection encoder.
A fixed length tuple is written with `serialize_tuple` (or `serialize_tuple_struct` when it has a name) and read back
from a sequence of exactly as many elements:

>>> from nothingness.nothing import Nothing
>>> def encode_int(serializer, value):
...     serializer.serialize_i64(value)
>>> def encode_str(serializer, value):
...     serializer.serialize_str(value)
>>> encode_tuple(Nothing(), (0, ''), (encode_int, encode_str))
>>> encode_tuple(Nothing(), (0, 'a'), (encode_int, encode_str))
Traceback (most recent call last):
...
nothingness.nothing.exceptions.NothingSerializeError: Not nothing
>>> decode_tuple(Nothing(), (lambda deserializer: 0, lambda deserializer: ''))
(0, '')
"""

from typing import Any, Optional

from typing_extensions import override

from nothingness.serialization.access import END, SeqAccess, VariantAccess
from nothingness.serialization.deserializer import Deserializer
from nothingness.serialization.serializer import Serializer
from nothingness.serialization.visitor import Visitor

from . import Decoder, Encoder


class _TupleVisitor(Visitor[tuple]):
    __slots__ = ('_decoders', '_name')

    def __init__(self, deserializer: Deserializer, decoders: tuple[Decoder[Any], ...], name: Optional[str]) -> None:
        super().__init__(deserializer)
        self._decoders = decoders
        self._name = name

    @override
    def expecting(self) -> str:
        if self._name is None:
            return f'a tuple of size {len(self._decoders)}'
        return f'{self._name} with {len(self._decoders)} elements'

    @override
    def visit_seq(self, seq: SeqAccess, /) -> tuple:
        values = []
        for i, decoder in enumerate(self._decoders):
            value = seq.next_element(decoder)
            if value is END:
                raise self._deserializer.invalid_length(i, self.expecting())
            values.append(value)
        return tuple(values)


def encode_tuple(serializer: Serializer, values: tuple, encoders: tuple[Encoder[Any], ...]) -> None:
    assert len(values) == len(encoders)
    tup = serializer.serialize_tuple(len(encoders))
    for value, encoder in zip(values, encoders):
        tup.serialize_element(value, encoder)
    tup.end()


def decode_tuple(deserializer: Deserializer, decoders: tuple[Decoder[Any], ...]) -> tuple:
    return deserializer.deserialize_tuple(len(decoders), _TupleVisitor(deserializer, decoders, None))


def encode_tuple_struct(serializer: Serializer, name: str, values: tuple, encoders: tuple[Encoder[Any], ...]) -> None:
    assert len(values) == len(encoders)
    tup = serializer.serialize_tuple_struct(name, len(encoders))
    for value, encoder in zip(values, encoders):
        tup.serialize_field(value, encoder)
    tup.end()


def decode_tuple_struct(deserializer: Deserializer, name: str, decoders: tuple[Decoder[Any], ...]) -> tuple:
    return deserializer.deserialize_tuple_struct(name, len(decoders), _TupleVisitor(deserializer, decoders, name))


def encode_tuple_variant(
    serializer: Serializer,
    name: str,
    variant_index: int,
    variant: str,
    values: tuple,
    encoders: tuple[Encoder[Any], ...],
) -> None:
    assert len(values) == len(encoders)
    tup = serializer.serialize_tuple_variant(name, variant_index, variant, len(encoders))
    for value, encoder in zip(values, encoders):
        tup.serialize_field(value, encoder)
    tup.end()


def decode_tuple_variant(
    deserializer: Deserializer,
    access: VariantAccess,
    variant: str,
    decoders: tuple[Decoder[Any], ...],
) -> tuple:
    return access.tuple_variant(len(decoders), _TupleVisitor(deserializer, decoders, variant))
