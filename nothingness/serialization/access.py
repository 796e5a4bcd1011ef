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
Access objects are what a deserializer hands to a visitor for compound shapes.

The visitor pulls members out of them with the decoder for each member, so the deserializer decides how many members
there are while the visitor decides what they are. Since `None` is a perfectly valid member, running out of members is
signaled with the `END` sentinel:

>>> class Three(SeqAccess):
...     def __init__(self):
...         self.items = [1, None, 3]
...     def next_element(self, decoder):
...         return self.items.pop(0) if self.items else END
>>> seq = Three()
>>> [seq.next_element(None) for _ in range(4)]
[1, None, 3, END]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Final, Iterator, Literal, TypeAlias, TypeVar

from nothingness.serialization.codec import Decoder

if TYPE_CHECKING:
    from nothingness.serialization.visitor import Visitor

T = TypeVar('T')
K = TypeVar('K')
V = TypeVar('V')


class _End(Enum):
    END = 'END'

    def __repr__(self) -> str:
        return self.value


END: Final = _End.END
End: TypeAlias = Literal[_End.END]


class SeqAccess(ABC):
    """Gives a visitor access to each element of a sequence."""

    __slots__ = ()

    @abstractmethod
    def next_element(self, decoder: Decoder[T], /) -> T | End:
        """Decode the next element, or return `END` when there are no more elements."""
        raise NotImplementedError

    def size_hint(self) -> int | None:
        """The number of remaining elements, if known."""
        return None

    def iter_elements(self, decoder: Decoder[T], /) -> Iterator[T]:
        """Decode every remaining element with the same decoder."""
        while (element := self.next_element(decoder)) is not END:
            yield element


class MapAccess(ABC):
    """Gives a visitor access to each entry of a map."""

    __slots__ = ()

    @abstractmethod
    def next_key(self, decoder: Decoder[K], /) -> K | End:
        """Decode the next key, or return `END` when there are no more entries."""
        raise NotImplementedError

    @abstractmethod
    def next_value(self, decoder: Decoder[V], /) -> V:
        """Decode the value for the key that was just returned by `next_key`."""
        raise NotImplementedError

    def next_entry(self, key_decoder: Decoder[K], value_decoder: Decoder[V], /) -> tuple[K, V] | End:
        key = self.next_key(key_decoder)
        if key is END:
            return END
        return key, self.next_value(value_decoder)

    def size_hint(self) -> int | None:
        """The number of remaining entries, if known."""
        return None

    def iter_entries(self, key_decoder: Decoder[K], value_decoder: Decoder[V], /) -> Iterator[tuple[K, V]]:
        while (entry := self.next_entry(key_decoder, value_decoder)) is not END:
            yield entry


class VariantAccess(ABC):
    """Gives a visitor access to the payload of the variant that was selected through `EnumAccess`."""

    __slots__ = ()

    @abstractmethod
    def unit_variant(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def newtype_variant(self, decoder: Decoder[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def tuple_variant(self, length: int, visitor: Visitor[T], /) -> T:
        raise NotImplementedError

    @abstractmethod
    def struct_variant(self, fields: tuple[str, ...], visitor: Visitor[T], /) -> T:
        raise NotImplementedError


class EnumAccess(ABC):
    """Gives a visitor access to the identifier of an enum variant and then to its payload."""

    __slots__ = ()

    @abstractmethod
    def variant(self, decoder: Decoder[T], /) -> tuple[T, VariantAccess]:
        """Decode the variant identifier, the returned `VariantAccess` is then used to decode its payload."""
        raise NotImplementedError
