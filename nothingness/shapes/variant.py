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
from typing import Generic, TypeVar

from nothingness.serialization import Deserializer, Serializer, VariantAccess

T = TypeVar('T')


class VariantPayload(ABC, Generic[T]):
    """ Implemented by shapes that can be the payload of an enum variant.

    Members of an union are written as variants: a shape written as a struct is written as a struct variant, a tuple
    struct as a tuple variant, and so on.
    """

    __slots__ = ()

    @abstractmethod
    def serialize_variant(
        self,
        serializer: Serializer,
        name: str,
        variant_index: int,
        variant: str,
        value: T,
        /,
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def deserialize_variant(self, deserializer: Deserializer, access: VariantAccess, variant: str, /) -> T:
        raise NotImplementedError
