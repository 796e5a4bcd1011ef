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
An optional value is written with `serialize_none` or `serialize_some`, and read with `deserialize_option`.

>>> from nothingness.nothing import Nothing
>>> def encode_str(serializer, value):
...     serializer.serialize_str(value)
>>> encode_optional(Nothing(), None, encode_str)
>>> encode_optional(Nothing(), '', encode_str)
Traceback (most recent call last):
...
nothingness.nothing.exceptions.NothingSerializeError: Not nothing
>>> print(decode_optional(Nothing(), lambda deserializer: 'never called'))
None
"""

from typing import Optional, TypeVar

from typing_extensions import override

from nothingness.serialization.deserializer import Deserializer
from nothingness.serialization.serializer import Serializer
from nothingness.serialization.visitor import Visitor

from . import Decoder, Encoder

T = TypeVar('T')


class _OptionVisitor(Visitor[Optional[T]]):
    __slots__ = ('_decoder',)

    def __init__(self, deserializer: Deserializer, decoder: Decoder[T]) -> None:
        super().__init__(deserializer)
        self._decoder = decoder

    @override
    def expecting(self) -> str:
        return 'option'

    @override
    def visit_none(self) -> Optional[T]:
        return None

    @override
    def visit_unit(self) -> Optional[T]:
        return None

    @override
    def visit_some(self, deserializer: Deserializer, /) -> Optional[T]:
        return self._decoder(deserializer)


def encode_optional(serializer: Serializer, value: Optional[T], encoder: Encoder[T]) -> None:
    if value is None:
        serializer.serialize_none()
    else:
        serializer.serialize_some(value, encoder)


def decode_optional(deserializer: Deserializer, decoder: Decoder[T]) -> Optional[T]:
    return deserializer.deserialize_option(_OptionVisitor(deserializer, decoder))
