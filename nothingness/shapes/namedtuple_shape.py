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
A `NamedTuple` is a tuple struct in the protocol, except for the degenerate cases: without fields it is a unit struct
and with a single field it is a newtype struct (which is transparent for most formats).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from nothingness.serialization import (
    END,
    Deserializer,
    SeqAccess,
    Serializer,
    VariantAccess,
    Visitor,
)
from nothingness.serialization.compound_encoding.tuple import (
    decode_tuple_struct,
    decode_tuple_variant,
    encode_tuple_struct,
    encode_tuple_variant,
)
from nothingness.shapes.shape import Shape
from nothingness.shapes.variant import VariantPayload

N = TypeVar('N', bound=tuple)


class _UnitStructVisitor(Visitor[N]):
    __slots__ = ('_shape',)

    def __init__(self, deserializer: Deserializer, shape: NamedTupleShape[N]) -> None:
        super().__init__(deserializer)
        self._shape = shape

    @override
    def expecting(self) -> str:
        return f'unit struct {self._shape.name}'

    @override
    def visit_unit(self) -> N:
        return self._shape.build(())


class _NewtypeStructVisitor(Visitor[N]):
    __slots__ = ('_shape',)

    def __init__(self, deserializer: Deserializer, shape: NamedTupleShape[N]) -> None:
        super().__init__(deserializer)
        self._shape = shape

    @override
    def expecting(self) -> str:
        return f'tuple struct {self._shape.name}'

    @override
    def visit_newtype_struct(self, deserializer: Deserializer, /) -> N:
        arg_shape, = self._shape.args
        return self._shape.build((arg_shape.deserialize(deserializer),))

    @override
    def visit_seq(self, seq: SeqAccess, /) -> N:
        arg_shape, = self._shape.args
        value = seq.next_element(arg_shape.deserialize)
        if value is END:
            raise self._deserializer.invalid_length(0, f'tuple struct {self._shape.name} with 1 element')
        return self._shape.build((value,))


# XXX: we can't usefully describe the tuple type
class NamedTupleShape(Shape[N], VariantPayload[N]):
    __slots__ = ('_is_hashable', '_args', '_actual_type')

    _args: tuple[Shape, ...]
    _actual_type: type[N]

    def __init__(self, namedtuple: type[N], args: Iterable[Shape]) -> None:
        self._actual_type = namedtuple
        self._args = tuple(args)
        self._is_hashable = all(arg_shape.is_hashable() for arg_shape in self._args)

    @property
    def name(self) -> str:
        return self._actual_type.__name__

    @property
    def args(self) -> tuple[Shape, ...]:
        return self._args

    def build(self, values: Iterable[Any]) -> N:
        return self._actual_type(*values)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not isinstance(type_, type) or not issubclass(type_, tuple) or not hasattr(type_, '_fields'):
            raise TypeError('expected NamedTuple type')
        type_hints = get_type_hints(type_)
        args = [type_hints[field_name] for field_name in type_._fields]
        return cls(type_, (Shape.from_type(arg, type_map=type_map) for arg in args))

    @override
    def _check_value(self, value: N, /, *, deep: bool) -> None:
        if not isinstance(value, self._actual_type):
            raise TypeError(f'expected {self._actual_type} instance')
        if len(value) != len(self._args):
            raise TypeError('wrong number of arguments')
        if deep:
            for i, arg_shape in zip(value, self._args):
                arg_shape._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: N, /) -> None:
        match self._args:
            case ():
                serializer.serialize_unit_struct(self.name)
            case (arg_shape,):
                serializer.serialize_newtype_struct(self.name, value[0], arg_shape.serialize)
            case _:
                encode_tuple_struct(serializer, self.name, tuple(value), tuple(i.serialize for i in self._args))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> N:
        match self._args:
            case ():
                return deserializer.deserialize_unit_struct(self.name, _UnitStructVisitor(deserializer, self))
            case (_,):
                return deserializer.deserialize_newtype_struct(self.name, _NewtypeStructVisitor(deserializer, self))
            case _:
                decoders = tuple(i.deserialize for i in self._args)
                return self.build(decode_tuple_struct(deserializer, self.name, decoders))

    @override
    def serialize_variant(
        self,
        serializer: Serializer,
        name: str,
        variant_index: int,
        variant: str,
        value: N,
        /,
    ) -> None:
        match self._args:
            case ():
                serializer.serialize_unit_variant(name, variant_index, variant)
            case (arg_shape,):
                serializer.serialize_newtype_variant(name, variant_index, variant, value[0], arg_shape.serialize)
            case _:
                encoders = tuple(i.serialize for i in self._args)
                encode_tuple_variant(serializer, name, variant_index, variant, tuple(value), encoders)

    @override
    def deserialize_variant(self, deserializer: Deserializer, access: VariantAccess, variant: str, /) -> N:
        match self._args:
            case ():
                access.unit_variant()
                return self.build(())
            case (arg_shape,):
                return self.build((access.newtype_variant(arg_shape.deserialize),))
            case _:
                decoders = tuple(i.deserialize for i in self._args)
                return self.build(decode_tuple_variant(deserializer, access, variant, decoders))
