from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, NewType, Optional

import pytest

from nothingness.nothing import Nothing
from nothingness.serialization import (
    Deserializer,
    DuplicateFieldError,
    EnumAccess,
    InvalidLengthError,
    InvalidValueError,
    MissingFieldError,
    UnknownVariantError,
    VariantAccess,
)
from nothingness.shapes import make_shape
from nothingness.types import U32
from nothingness_tests.utils import ListSeq, PairsMap, RecordingSerializer, number, scripted, text


@dataclass
class Record:
    number: U32
    string: str


@dataclass
class Flag:
    enabled: bool


class Unit(NamedTuple):
    pass


class Wrapper(NamedTuple):
    value: str


class Pair(NamedTuple):
    left: str
    right: str


class Suit(Enum):
    HEARTS = 'h'
    SPADES = 's'


Label = NewType('Label', str)


class NamedVariant(EnumAccess, VariantAccess):
    """Selects a variant by name, the payload is read from the given deserializers."""

    def __init__(self, name: str, payload: list[Deserializer]) -> None:
        self.name = name
        self.payload = payload

    def variant(self, decoder, /):
        return decoder(text(self.name)), self

    def unit_variant(self):
        assert self.payload == []

    def newtype_variant(self, decoder, /):
        inner, = self.payload
        return decoder(inner)

    def tuple_variant(self, length, visitor, /):
        return visitor.visit_seq(ListSeq(self.payload))

    def struct_variant(self, fields, visitor, /):
        return visitor.visit_seq(ListSeq(self.payload))


def _struct_from_map(pairs: list[tuple[Deserializer, Deserializer]]) -> Deserializer:
    def deserialize_struct(name: str, fields: tuple[str, ...], visitor: Any) -> Any:
        assert name == 'Record'
        assert fields == ('number', 'string')
        return visitor.visit_map(PairsMap(pairs))
    return scripted(struct=deserialize_struct)


def _struct_from_seq(items: list[Deserializer]) -> Deserializer:
    return scripted(struct=lambda name, fields, visitor: visitor.visit_seq(ListSeq(items)))


def _enum(name: str, *payload: Deserializer) -> Deserializer:
    return scripted(enum=lambda name_, variants, visitor: visitor.visit_enum(NamedVariant(name, list(payload))))


class TestDataclassShape:
    def test_from_seq(self) -> None:
        shape = make_shape(Record)
        assert shape.deserialize(_struct_from_seq([number(7), text('seven')])) == Record(7, 'seven')

    def test_from_short_seq(self) -> None:
        shape = make_shape(Record)
        with pytest.raises(InvalidLengthError) as exc_info:
            shape.deserialize(_struct_from_seq([number(7)]))
        assert exc_info.value.length == 1
        assert exc_info.value.expected == 'struct Record with 2 elements'

    def test_from_map_any_order(self) -> None:
        shape = make_shape(Record)
        deserializer = _struct_from_map([(text('string'), text('x')), (text('number'), number(3))])
        assert shape.deserialize(deserializer) == Record(3, 'x')

    def test_from_map_by_index(self) -> None:
        shape = make_shape(Record)
        deserializer = _struct_from_map([(number(0), number(3)), (number(1), text('x'))])
        assert shape.deserialize(deserializer) == Record(3, 'x')

    def test_unknown_fields_are_ignored(self) -> None:
        shape = make_shape(Record)
        deserializer = _struct_from_map([
            (text('number'), number(3)),
            (text('color'), text('blue')),
            (number(9), number(9)),
            (text('string'), text('x')),
        ])
        assert shape.deserialize(deserializer) == Record(3, 'x')

    def test_duplicate_field(self) -> None:
        shape = make_shape(Record)
        deserializer = _struct_from_map([
            (text('number'), number(3)),
            (text('number'), number(4)),
            (text('string'), text('x')),
        ])
        with pytest.raises(DuplicateFieldError) as exc_info:
            shape.deserialize(deserializer)
        assert exc_info.value.field == 'number'

    def test_missing_field(self) -> None:
        shape = make_shape(Record)
        deserializer = _struct_from_map([(text('number'), number(3))])
        with pytest.raises(MissingFieldError) as exc_info:
            shape.deserialize(deserializer)
        assert exc_info.value.field == 'string'

    def test_field_out_of_range(self) -> None:
        shape = make_shape(Record)
        with pytest.raises(InvalidValueError):
            shape.deserialize(_struct_from_seq([number(2**32), text('')]))

    def test_serialize(self) -> None:
        serializer = RecordingSerializer()
        make_shape(Record).serialize(serializer, Record(1, 'a'))
        assert serializer.log == [
            ('serialize_struct', 'Record', 2),
            ('field', 'number', 1),
            ('field', 'string', 'a'),
            ('end',),
        ]


class TestNamedTupleShape:
    def test_unit(self) -> None:
        serializer = RecordingSerializer()
        make_shape(Unit).serialize(serializer, Unit())
        assert serializer.log == [('serialize_unit_struct', 'Unit')]
        deserializer = scripted(unit_struct=lambda name, visitor: visitor.visit_unit())
        assert make_shape(Unit).deserialize(deserializer) == Unit()

    def test_newtype(self) -> None:
        serializer = RecordingSerializer()
        make_shape(Wrapper).serialize(serializer, Wrapper('a'))
        assert serializer.log == [('serialize_newtype_struct', 'Wrapper', 'a'), ('serialize_str', 'a')]
        deserializer = scripted(newtype_struct=lambda name, visitor: visitor.visit_newtype_struct(text('b')))
        assert make_shape(Wrapper).deserialize(deserializer) == Wrapper('b')

    def test_newtype_from_seq(self) -> None:
        deserializer = scripted(newtype_struct=lambda name, visitor: visitor.visit_seq(ListSeq([text('c')])))
        assert make_shape(Wrapper).deserialize(deserializer) == Wrapper('c')
        deserializer = scripted(newtype_struct=lambda name, visitor: visitor.visit_seq(ListSeq([])))
        with pytest.raises(InvalidLengthError):
            make_shape(Wrapper).deserialize(deserializer)

    def test_tuple_struct(self) -> None:
        serializer = RecordingSerializer()
        make_shape(Pair).serialize(serializer, Pair('a', 'b'))
        assert serializer.log == [('serialize_tuple_struct', 'Pair', 2), ('field', 'a'), ('field', 'b'), ('end',)]

        def deserialize_tuple_struct(name: str, length: int, visitor: Any) -> Any:
            assert (name, length) == ('Pair', 2)
            return visitor.visit_seq(ListSeq([text('l'), text('r')]))
        value = make_shape(Pair).deserialize(scripted(tuple_struct=deserialize_tuple_struct))
        assert value == Pair('l', 'r')
        assert type(value) is Pair


class TestNewtypeShape:
    def test_transparent_value(self) -> None:
        shape = make_shape(Label)
        serializer = RecordingSerializer()
        shape.serialize(serializer, Label('x'))
        assert serializer.log == [('serialize_newtype_struct', 'Label', 'x'), ('serialize_str', 'x')]
        deserializer = scripted(newtype_struct=lambda name, visitor: visitor.visit_newtype_struct(text('y')))
        assert shape.deserialize(deserializer) == 'y'

    def test_inner_value_is_checked(self) -> None:
        with pytest.raises(TypeError):
            make_shape(Label).serialize(Nothing(), 0)


class TestEnumShape:
    def test_serialize_by_position(self) -> None:
        serializer = RecordingSerializer()
        make_shape(Suit).serialize(serializer, Suit.SPADES)
        assert serializer.log == [('serialize_unit_variant', 'Suit', 1, 'SPADES')]

    def test_deserialize_by_name(self) -> None:
        assert make_shape(Suit).deserialize(_enum('SPADES')) is Suit.SPADES

    def test_deserialize_by_index(self) -> None:
        access = NamedVariant('', [])
        access.variant = lambda decoder, /: (decoder(number(1)), access)  # type: ignore[method-assign]
        deserializer = scripted(enum=lambda name, variants, visitor: visitor.visit_enum(access))
        assert make_shape(Suit).deserialize(deserializer) is Suit.SPADES

    def test_unknown_variant(self) -> None:
        with pytest.raises(UnknownVariantError) as exc_info:
            make_shape(Suit).deserialize(_enum('CLUBS'))
        assert exc_info.value.variant == 'CLUBS'
        assert exc_info.value.expected == ('HEARTS', 'SPADES')


class TestUnionShape:
    def test_names(self) -> None:
        shape: Any = make_shape(Record | Flag | Pair)
        assert shape.names == ('Record', 'Flag', 'Pair')
        assert shape.name == 'Record | Flag | Pair'

    def test_serialize_variants(self) -> None:
        shape = make_shape(Record | Flag | Wrapper | Unit)
        serializer = RecordingSerializer()
        shape.serialize(serializer, Flag(True))
        shape.serialize(serializer, Wrapper('w'))
        shape.serialize(serializer, Unit())
        name = 'Record | Flag | Wrapper | Unit'
        assert serializer.log == [
            ('serialize_struct_variant', name, 1, 'Flag', 1), ('field', 'enabled', True), ('end',),
            ('serialize_newtype_variant', name, 2, 'Wrapper', 'w'), ('serialize_str', 'w'),
            ('serialize_unit_variant', name, 3, 'Unit'),
        ]

    def test_deserialize_variants(self) -> None:
        shape = make_shape(Record | Pair | Wrapper | Unit)
        assert shape.deserialize(_enum('Record', number(1), text('a'))) == Record(1, 'a')
        assert shape.deserialize(_enum('Pair', text('a'), text('b'))) == Pair('a', 'b')
        assert shape.deserialize(_enum('Wrapper', text('w'))) == Wrapper('w')
        assert shape.deserialize(_enum('Unit')) == Unit()

    def test_unknown_variant(self) -> None:
        with pytest.raises(UnknownVariantError):
            make_shape(Record | Pair).deserialize(_enum('Flag', scripted()))

    def test_optional_union(self) -> None:
        shape = make_shape(Optional[Record | Flag])
        assert shape.deserialize(Nothing()) is None
        deserializer = scripted(option=lambda visitor: visitor.visit_some(_enum('Flag', scripted(
            bool=lambda visitor: visitor.visit_bool(True),
        ))))
        assert shape.deserialize(deserializer) == Flag(True)

    def test_subclass_member(self) -> None:
        @dataclass
        class Special(Record):
            pass

        shape: Any = make_shape(Record | Flag)
        serializer = RecordingSerializer()
        shape.serialize(serializer, Special(0, ''))
        assert serializer.log[0] == ('serialize_struct_variant', 'Record | Flag', 0, 'Record', 2)

    def test_distinct_names(self) -> None:
        def make_other_record() -> type:
            @dataclass
            class Record:
                value: int
            return Record

        with pytest.raises(TypeError):
            make_shape(Record | make_other_record())
