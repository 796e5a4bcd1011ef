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
Identifiers name struct fields and enum variants, a deserializer may give them either as an index or as a name.

Both are resolved to the index of the field or variant:

>>> from nothingness.nothing import Nothing
>>> decode_variant = variant_identifier_decoder(('Red', 'Green'))
>>> decode_variant(Nothing())
0
>>> FieldVisitor(Nothing(), ('x', 'y')).visit_str('y')
1
>>> print(FieldVisitor(Nothing(), ('x', 'y')).visit_str('z'))
None
"""

from __future__ import annotations

from typing import Optional

from typing_extensions import override

from nothingness.serialization import Decoder, Deserializer, Visitor


class FieldVisitor(Visitor[Optional[int]]):
    """ Resolves a struct field identifier, unknown fields resolve to `None` so they can be ignored.
    """

    __slots__ = ('_names',)

    def __init__(self, deserializer: Deserializer, names: tuple[str, ...]) -> None:
        super().__init__(deserializer)
        self._names = names

    @override
    def expecting(self) -> str:
        return 'field identifier'

    @override
    def visit_u64(self, value: int, /) -> Optional[int]:
        return value if value < len(self._names) else None

    @override
    def visit_str(self, value: str, /) -> Optional[int]:
        try:
            return self._names.index(value)
        except ValueError:
            return None

    @override
    def visit_bytes(self, value: bytes | memoryview, /) -> Optional[int]:
        return self.visit_str(bytes(value).decode('utf-8', errors='replace'))


class VariantVisitor(Visitor[int]):
    """ Resolves an enum variant identifier, unknown variants are an error.
    """

    __slots__ = ('_names',)

    def __init__(self, deserializer: Deserializer, names: tuple[str, ...]) -> None:
        super().__init__(deserializer)
        self._names = names

    @override
    def expecting(self) -> str:
        return 'variant identifier'

    @override
    def visit_u64(self, value: int, /) -> int:
        if value >= len(self._names):
            raise self._deserializer.invalid_value(f'integer `{value}`', f'variant index 0 <= i < {len(self._names)}')
        return value

    @override
    def visit_str(self, value: str, /) -> int:
        try:
            return self._names.index(value)
        except ValueError:
            raise self._deserializer.unknown_variant(value, self._names)

    @override
    def visit_bytes(self, value: bytes | memoryview, /) -> int:
        return self.visit_str(bytes(value).decode('utf-8', errors='replace'))


def field_identifier_decoder(names: tuple[str, ...]) -> Decoder[Optional[int]]:
    def decode_field_identifier(deserializer: Deserializer, /) -> Optional[int]:
        return deserializer.deserialize_identifier(FieldVisitor(deserializer, names))
    return decode_field_identifier


def variant_identifier_decoder(names: tuple[str, ...]) -> Decoder[int]:
    def decode_variant_identifier(deserializer: Deserializer, /) -> int:
        return deserializer.deserialize_identifier(VariantVisitor(deserializer, names))
    return decode_variant_identifier
