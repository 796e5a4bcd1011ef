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
The structured-data protocol: a value's shape drives calls into a `Serializer` when writing and a `Visitor` is
driven by a `Deserializer` when reading, neither side needs to know the other's representation.
"""

from nothingness.serialization.access import END, End, EnumAccess, MapAccess, SeqAccess, VariantAccess
from nothingness.serialization.codec import Decoder, Encoder
from nothingness.serialization.deserializer import Deserializer
from nothingness.serialization.exceptions import (
    DecodeError,
    DuplicateFieldError,
    EncodeError,
    InvalidLengthError,
    InvalidTypeError,
    InvalidValueError,
    MissingFieldError,
    SerializationError,
    UnknownVariantError,
)
from nothingness.serialization.serializer import (
    SerializeMap,
    SerializeSeq,
    SerializeStruct,
    SerializeStructVariant,
    SerializeTuple,
    SerializeTupleStruct,
    SerializeTupleVariant,
    Serializer,
)
from nothingness.serialization.visitor import Visitor

__all__ = [
    'END',
    'End',
    'Decoder',
    'DecodeError',
    'Deserializer',
    'DuplicateFieldError',
    'Encoder',
    'EncodeError',
    'EnumAccess',
    'InvalidLengthError',
    'InvalidTypeError',
    'InvalidValueError',
    'MapAccess',
    'MissingFieldError',
    'SeqAccess',
    'SerializationError',
    'SerializeMap',
    'SerializeSeq',
    'SerializeStruct',
    'SerializeStructVariant',
    'SerializeTuple',
    'SerializeTupleStruct',
    'SerializeTupleVariant',
    'Serializer',
    'UnknownVariantError',
    'VariantAccess',
    'Visitor',
]
