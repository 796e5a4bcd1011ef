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
Values that are read only to be thrown away, like the values of unknown struct fields.

>>> from nothingness.nothing import Nothing
>>> print(decode_ignored(Nothing()))
None
"""

from __future__ import annotations

from typing import Any

from typing_extensions import override

from nothingness.serialization import Deserializer, EnumAccess, MapAccess, SeqAccess, Visitor


class IgnoredVisitor(Visitor[None]):
    """ Accepts anything at all, compound values are drained so the deserializer stays in sync.
    """

    __slots__ = ()

    @override
    def expecting(self) -> str:
        return 'anything at all'

    @override
    def visit_bool(self, value: bool, /) -> None:
        pass

    @override
    def visit_i64(self, value: int, /) -> None:
        pass

    @override
    def visit_i128(self, value: int, /) -> None:
        pass

    @override
    def visit_u64(self, value: int, /) -> None:
        pass

    @override
    def visit_u128(self, value: int, /) -> None:
        pass

    @override
    def visit_f64(self, value: float, /) -> None:
        pass

    @override
    def visit_str(self, value: str, /) -> None:
        pass

    @override
    def visit_bytes(self, value: Any, /) -> None:
        pass

    @override
    def visit_none(self) -> None:
        pass

    @override
    def visit_some(self, deserializer: Deserializer, /) -> None:
        decode_ignored(deserializer)

    @override
    def visit_unit(self) -> None:
        pass

    @override
    def visit_newtype_struct(self, deserializer: Deserializer, /) -> None:
        decode_ignored(deserializer)

    @override
    def visit_seq(self, seq: SeqAccess, /) -> None:
        for _ in seq.iter_elements(decode_ignored):
            pass

    @override
    def visit_map(self, map_: MapAccess, /) -> None:
        for _ in map_.iter_entries(decode_ignored, decode_ignored):
            pass

    @override
    def visit_enum(self, data: EnumAccess, /) -> None:
        _, variant = data.variant(decode_ignored)
        variant.newtype_variant(decode_ignored)


def decode_ignored(deserializer: Deserializer, /) -> None:
    deserializer.deserialize_ignored_any(IgnoredVisitor(deserializer))
