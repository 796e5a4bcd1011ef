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
A dataclass is a struct in the protocol, its fields are written in declaration order.

When reading, a deserializer can give the fields either as a sequence (in declaration order) or as a map of field
identifiers to values, in any order. Unknown fields in a map are ignored, but every known field must be there exactly
once, default values are not used to fill in missing fields.
"""

from __future__ import annotations

from dataclasses import fields as dataclass_fields, is_dataclass
from typing import TYPE_CHECKING, Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from nothingness.serialization import (
    END,
    Deserializer,
    MapAccess,
    SeqAccess,
    Serializer,
    VariantAccess,
    Visitor,
)
from nothingness.shapes.identifier import field_identifier_decoder
from nothingness.shapes.ignored import decode_ignored
from nothingness.shapes.shape import Shape
from nothingness.shapes.variant import VariantPayload

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

D = TypeVar('D', bound='DataclassInstance')


class _StructVisitor(Visitor[D]):
    __slots__ = ('_shape',)

    def __init__(self, deserializer: Deserializer, shape: DataclassShape[D]) -> None:
        super().__init__(deserializer)
        self._shape = shape

    @override
    def expecting(self) -> str:
        return f'struct {self._shape.name}'

    @override
    def visit_seq(self, seq: SeqAccess, /) -> D:
        kwargs: dict[str, Any] = {}
        for i, (field_name, field_shape) in enumerate(self._shape.fields.items()):
            value = seq.next_element(field_shape.deserialize)
            if value is END:
                expected = f'struct {self._shape.name} with {len(self._shape.fields)} elements'
                raise self._deserializer.invalid_length(i, expected)
            kwargs[field_name] = value
        return self._shape.build(kwargs)

    @override
    def visit_map(self, map_: MapAccess, /) -> D:
        field_names = tuple(self._shape.fields)
        field_shapes = tuple(self._shape.fields.values())
        decode_field = field_identifier_decoder(field_names)
        kwargs: dict[str, Any] = {}
        while (field_index := map_.next_key(decode_field)) is not END:
            if field_index is None:
                map_.next_value(decode_ignored)
                continue
            field_name = field_names[field_index]
            if field_name in kwargs:
                raise self._deserializer.duplicate_field(field_name)
            kwargs[field_name] = map_.next_value(field_shapes[field_index].deserialize)
        for field_name in field_names:
            if field_name not in kwargs:
                raise self._deserializer.missing_field(field_name)
        return self._shape.build(kwargs)


class DataclassShape(Shape[D], VariantPayload[D]):
    """ Represents instances of a dataclass, every field must be part of `__init__`.
    """

    __slots__ = ('_fields', '_class')
    _is_hashable = False  # it might be possible to calculate _is_hashable, but we don't need it
    _fields: dict[str, Shape]
    _class: type[D]

    def __init__(self, fields_: dict[str, Shape], class_: type[D]) -> None:
        self._fields = fields_
        self._class = class_

    @property
    def name(self) -> str:
        return self._class.__name__

    @property
    def fields(self) -> dict[str, Shape]:
        return self._fields

    def build(self, kwargs: dict[str, Any]) -> D:
        return self._class(**kwargs)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not isinstance(type_, type) or not is_dataclass(type_):
            raise TypeError('expected a dataclass')
        type_hints = get_type_hints(type_)
        # XXX: the order is important, but `dict` and `fields` should have a stable order
        values: dict[str, Shape] = {}
        for field in dataclass_fields(type_):
            if not field.init:
                raise TypeError(f'field {field.name} of {type_.__name__} is not part of __init__')
            values[field.name] = Shape.from_type(type_hints[field.name], type_map=type_map)
        return cls(values, type_)

    @override
    def _check_value(self, value: D, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class} instance')
        if deep:
            for field_name, field_shape in self._fields.items():
                field_shape._check_value(getattr(value, field_name), deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: D, /) -> None:
        struct = serializer.serialize_struct(self.name, len(self._fields))
        for field_name, field_shape in self._fields.items():
            struct.serialize_field(field_name, getattr(value, field_name), field_shape.serialize)
        struct.end()

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> D:
        return deserializer.deserialize_struct(self.name, tuple(self._fields), _StructVisitor(deserializer, self))

    @override
    def serialize_variant(
        self,
        serializer: Serializer,
        name: str,
        variant_index: int,
        variant: str,
        value: D,
        /,
    ) -> None:
        struct = serializer.serialize_struct_variant(name, variant_index, variant, len(self._fields))
        for field_name, field_shape in self._fields.items():
            struct.serialize_field(field_name, getattr(value, field_name), field_shape.serialize)
        struct.end()

    @override
    def deserialize_variant(self, deserializer: Deserializer, access: VariantAccess, variant: str, /) -> D:
        return access.struct_variant(tuple(self._fields), _StructVisitor(deserializer, self))
