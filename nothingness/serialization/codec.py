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
Encoders and decoders are how a value's shape is handed to the protocol.

An encoder knows how to drive a `Serializer` for one kind of value, and a decoder knows how to drive a `Deserializer`
to get one kind of value back. Compound methods of the protocol (optionals, sequences, struct fields, ...) take an
encoder or a decoder for their members, that way the serializer or deserializer never needs to know about concrete
Python types:

    def encode_x(serializer: Serializer, value: ValueType) -> None:
        ...

    def decode_x(deserializer: Deserializer) -> ValueType:
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from nothingness.serialization.deserializer import Deserializer
    from nothingness.serialization.serializer import Serializer

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, deserializer: Deserializer, /) -> T_co:
        ...


class Encoder(Protocol[T_contra]):
    def __call__(self, serializer: Serializer, value: T_contra, /) -> None:
        ...
