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
`typing.Any` (or `object`) doesn't say anything about a value, so the shape is picked from the value itself when
writing, and whatever the deserializer has is turned into plain Python values when reading:

- `None` is unit
- `bool`, `int`, `float`, `str` and bytes-like values are the matching primitives, integers use the narrowest of
  `i64`, `u64`, `i128` or `u128` that fits
- a plain `tuple` is a tuple, any other mapping is a map and any other collection is a sequence
- enums, dataclasses, `NamedTuple`s and every other supported type use the shape built from the value's type

Reading gives back `None`, `bool`, `int`, `float`, `str`, `bytes`, `list` and `dict` values only.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import is_dataclass
from enum import Enum
from typing import Any

from typing_extensions import Self, override

from nothingness.serialization import Deserializer, MapAccess, SeqAccess, Serializer, Visitor
from nothingness.shapes.shape import Shape
from nothingness.shapes.sized_int_shape import Int64Shape, Int128Shape, Uint64Shape, Uint128Shape

# tried in order, the first one that fits the integer is used
_ANY_INT_SHAPES = (Int64Shape, Uint64Shape, Int128Shape, Uint128Shape)


class _AnyVisitor(Visitor[Any]):
    __slots__ = ()

    @override
    def expecting(self) -> str:
        return 'any value'

    @override
    def visit_bool(self, value: bool, /) -> Any:
        return value

    @override
    def visit_i64(self, value: int, /) -> Any:
        return value

    @override
    def visit_i128(self, value: int, /) -> Any:
        return value

    @override
    def visit_u64(self, value: int, /) -> Any:
        return value

    @override
    def visit_u128(self, value: int, /) -> Any:
        return value

    @override
    def visit_f64(self, value: float, /) -> Any:
        return value

    @override
    def visit_str(self, value: str, /) -> Any:
        return value

    @override
    def visit_bytes(self, value: bytes | memoryview, /) -> Any:
        return bytes(value)

    @override
    def visit_none(self) -> Any:
        return None

    @override
    def visit_some(self, deserializer: Deserializer, /) -> Any:
        return decode_any(deserializer)

    @override
    def visit_unit(self) -> Any:
        return None

    @override
    def visit_newtype_struct(self, deserializer: Deserializer, /) -> Any:
        return decode_any(deserializer)

    @override
    def visit_seq(self, seq: SeqAccess, /) -> Any:
        return list(seq.iter_elements(decode_any))

    @override
    def visit_map(self, map_: MapAccess, /) -> Any:
        return dict(map_.iter_entries(decode_any, decode_any))


def decode_any(deserializer: Deserializer, /) -> Any:
    return deserializer.deserialize_any(_AnyVisitor(deserializer))


class AnyShape(Shape[Any]):
    """ Represents values of any type, see the module documentation for how the shape of each value is picked.
    """

    __slots__ = ('_type_map',)

    # XXX: there is no way to know in advance, but values that aren't hashable will fail when used anyway
    _is_hashable = True
    _type_map: Shape.TypeMap

    def __init__(self, type_map: Shape.TypeMap) -> None:
        self._type_map = type_map

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if type_ is not Any and type_ is not object:
            raise TypeError('expected Any or object')
        return cls(type_map)

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        # XXX: anything goes, values that can't be written fail when being serialized
        pass

    def _serialize_int(self, serializer: Serializer, value: int) -> None:
        for shape_class in _ANY_INT_SHAPES:
            if shape_class._in_range(value):
                shape_class().serialize(serializer, value)
                return
        raise serializer.encode_error(f'integer {value} does not fit in 128 bits')

    def _serialize_typed(self, serializer: Serializer, value: Any) -> None:
        shape = Shape.from_type(type(value), type_map=self._type_map)
        shape.serialize(serializer, value)

    @override
    def _serialize(self, serializer: Serializer, value: Any, /) -> None:
        if value is None:
            serializer.serialize_unit()
        elif isinstance(value, Enum):
            self._serialize_typed(serializer, value)
        elif isinstance(value, bool):
            serializer.serialize_bool(value)
        elif isinstance(value, int):
            self._serialize_int(serializer, value)
        elif isinstance(value, float):
            serializer.serialize_f64(value)
        elif isinstance(value, str):
            serializer.serialize_str(value)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            serializer.serialize_bytes(value)
        elif is_dataclass(value) or (isinstance(value, tuple) and hasattr(value, '_fields')):
            self._serialize_typed(serializer, value)
        elif isinstance(value, tuple):
            tup = serializer.serialize_tuple(len(value))
            for item in value:
                tup.serialize_element(item, self.serialize)
            tup.end()
        elif isinstance(value, Mapping):
            serializer.collect_map(value.items(), self.serialize, self.serialize)
        elif isinstance(value, Collection):
            serializer.collect_seq(value, self.serialize)
        else:
            self._serialize_typed(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Any:
        return decode_any(deserializer)
