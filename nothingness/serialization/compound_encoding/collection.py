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
A collection is any iterable with a size that is not known from its type, it is written as a sequence.

When decoding, the builder can be any compatible collection, it only matters that it can be initialized with an
`Iterable[T]`:

>>> from nothingness.nothing import Nothing
>>> encode_collection(Nothing(), [], lambda serializer, value: None)
>>> decode_collection(Nothing(), lambda deserializer: None, frozenset)
frozenset()
"""

from collections.abc import Iterable
from typing import Callable, TypeVar

from typing_extensions import override

from nothingness.serialization.access import SeqAccess
from nothingness.serialization.deserializer import Deserializer
from nothingness.serialization.serializer import Serializer
from nothingness.serialization.visitor import Visitor

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Iterable)


class _SeqVisitor(Visitor[R]):
    __slots__ = ('_decoder', '_builder')

    def __init__(self, deserializer: Deserializer, decoder: Decoder[T], builder: Callable[[Iterable[T]], R]) -> None:
        super().__init__(deserializer)
        self._decoder = decoder
        self._builder = builder

    @override
    def expecting(self) -> str:
        return 'a sequence'

    @override
    def visit_seq(self, seq: SeqAccess, /) -> R:
        return self._builder(seq.iter_elements(self._decoder))


def encode_collection(serializer: Serializer, values: Iterable[T], encoder: Encoder[T]) -> None:
    serializer.collect_seq(values, encoder)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
) -> R:
    return deserializer.deserialize_seq(_SeqVisitor(deserializer, decoder, builder))
