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
A mapping is written as a map of key-value entries, in the mapping's iteration order.

>>> from nothingness.nothing import Nothing
>>> encode_mapping(Nothing(), {}, None, None)
>>> encode_mapping(Nothing(), {'': ''}, None, None)
Traceback (most recent call last):
...
nothingness.nothing.exceptions.NothingSerializeError: Not nothing
>>> decode_mapping(Nothing(), None, None, dict)
{}
"""

from collections.abc import Hashable, Iterable, Mapping
from typing import Callable, TypeVar

from typing_extensions import override

from nothingness.serialization.access import MapAccess
from nothingness.serialization.deserializer import Deserializer
from nothingness.serialization.serializer import Serializer
from nothingness.serialization.visitor import Visitor

from . import Decoder, Encoder

KT = TypeVar('KT', bound=Hashable)
VT = TypeVar('VT')
R = TypeVar('R', bound=Mapping)


class _MapVisitor(Visitor[R]):
    __slots__ = ('_key_decoder', '_value_decoder', '_builder')

    def __init__(
        self,
        deserializer: Deserializer,
        key_decoder: Decoder[KT],
        value_decoder: Decoder[VT],
        builder: Callable[[Iterable[tuple[KT, VT]]], R],
    ) -> None:
        super().__init__(deserializer)
        self._key_decoder = key_decoder
        self._value_decoder = value_decoder
        self._builder = builder

    @override
    def expecting(self) -> str:
        return 'a map'

    @override
    def visit_map(self, map_: MapAccess, /) -> R:
        return self._builder(map_.iter_entries(self._key_decoder, self._value_decoder))


def encode_mapping(
    serializer: Serializer,
    values: Mapping[KT, VT],
    key_encoder: Encoder[KT],
    value_encoder: Encoder[VT],
) -> None:
    serializer.collect_map(values.items(), key_encoder, value_encoder)


def decode_mapping(
    deserializer: Deserializer,
    key_decoder: Decoder[KT],
    value_decoder: Decoder[VT],
    builder: Callable[[Iterable[tuple[KT, VT]]], R],
) -> R:
    return deserializer.deserialize_map(_MapVisitor(deserializer, key_decoder, value_decoder, builder))
