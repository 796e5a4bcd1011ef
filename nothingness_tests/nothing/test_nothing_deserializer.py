import unittest
from typing import Any

import pytest

from nothingness.nothing import BoundedNothing, Nothing, NothingDeserializeError, NothingDeserializer
from nothingness.serialization import (
    END,
    Deserializer,
    EnumAccess,
    InvalidTypeError,
    MapAccess,
    SeqAccess,
    VariantAccess,
    Visitor,
)


class RecordingVisitor(Visitor[Any]):
    """Accepts everything and records which visit method was called and with what."""

    def __init__(self) -> None:
        super().__init__(Nothing())
        self.calls: list[tuple[str, Any]] = []

    def expecting(self) -> str:
        return 'anything'

    def _record(self, name: str, value: Any = None) -> Any:
        self.calls.append((name, value))
        return value

    def visit_bool(self, value, /):
        return self._record('bool', value)

    def visit_i8(self, value, /):
        return self._record('i8', value)

    def visit_i16(self, value, /):
        return self._record('i16', value)

    def visit_i32(self, value, /):
        return self._record('i32', value)

    def visit_i64(self, value, /):
        return self._record('i64', value)

    def visit_i128(self, value, /):
        return self._record('i128', value)

    def visit_u8(self, value, /):
        return self._record('u8', value)

    def visit_u16(self, value, /):
        return self._record('u16', value)

    def visit_u32(self, value, /):
        return self._record('u32', value)

    def visit_u64(self, value, /):
        return self._record('u64', value)

    def visit_u128(self, value, /):
        return self._record('u128', value)

    def visit_f32(self, value, /):
        return self._record('f32', value)

    def visit_f64(self, value, /):
        return self._record('f64', value)

    def visit_char(self, value, /):
        return self._record('char', value)

    def visit_str(self, value, /):
        return self._record('str', value)

    def visit_borrowed_str(self, value, /):
        return self._record('borrowed_str', value)

    def visit_bytes(self, value, /):
        return self._record('bytes', value)

    def visit_borrowed_bytes(self, value, /):
        return self._record('borrowed_bytes', value)

    def visit_none(self):
        return self._record('none')

    def visit_unit(self):
        return self._record('unit')

    def visit_newtype_struct(self, deserializer, /):
        return self._record('newtype_struct', deserializer)

    def visit_seq(self, seq, /):
        return self._record('seq', seq)

    def visit_map(self, map_, /):
        return self._record('map', map_)

    def visit_enum(self, data, /):
        return self._record('enum', data)


def _only_call(method: str, *args: Any) -> tuple[str, Any]:
    visitor = RecordingVisitor()
    getattr(Nothing(), f'deserialize_{method}')(*args, visitor)
    call, = visitor.calls
    return call


@pytest.mark.parametrize(
    ['method', 'expected'],
    [
        ('bool', ('bool', False)),
        ('i8', ('i8', 0)),
        ('i16', ('i16', 0)),
        ('i32', ('i32', 0)),
        ('i64', ('i64', 0)),
        ('i128', ('i128', 0)),
        ('u8', ('u8', 0)),
        ('u16', ('u16', 0)),
        ('u32', ('u32', 0)),
        ('u64', ('u64', 0)),
        ('u128', ('u128', 0)),
        ('f32', ('f32', 0.0)),
        ('f64', ('f64', 0.0)),
        ('char', ('char', '\0')),
        ('str', ('borrowed_str', '')),
        ('string', ('str', '')),
        ('bytes', ('borrowed_bytes', b'')),
        ('byte_buf', ('bytes', b'')),
        ('option', ('none', None)),
        ('unit', ('unit', None)),
        ('any', ('unit', None)),
        ('ignored_any', ('unit', None)),
        ('identifier', ('u8', 0)),
    ],
)
def test_primitive_requests(method: str, expected: tuple[str, Any]) -> None:
    assert _only_call(method) == expected


def test_unit_struct() -> None:
    assert _only_call('unit_struct', 'Unit') == ('unit', None)


def test_newtype_struct_gets_nothing() -> None:
    name, deserializer = _only_call('newtype_struct', 'Wrapper')
    assert name == 'newtype_struct'
    assert deserializer == Nothing()


def test_seq_and_map_are_empty() -> None:
    name, seq = _only_call('seq')
    assert name == 'seq'
    assert isinstance(seq, SeqAccess)
    assert seq.size_hint() == 0
    assert seq.next_element(lambda deserializer: 'never') is END
    assert list(seq.iter_elements(lambda deserializer: 'never')) == []

    name, map_ = _only_call('map')
    assert name == 'map'
    assert isinstance(map_, MapAccess)
    assert map_.size_hint() == 0
    assert map_.next_key(lambda deserializer: 'never') is END
    assert map_.next_entry(lambda deserializer: 'k', lambda deserializer: 'v') is END
    assert dict(map_.iter_entries(lambda deserializer: 'k', lambda deserializer: 'v')) == {}


def test_next_value_without_key() -> None:
    with pytest.raises(NothingDeserializeError):
        Nothing().next_value(lambda deserializer: 'never')


@pytest.mark.parametrize(
    ['method', 'args', 'length'],
    [
        ('tuple', (3,), 3),
        ('tuple', (0,), 0),
        ('tuple_struct', ('Pair', 2), 2),
        ('struct', ('Record', ('number', 'string')), 2),
        ('struct', ('Empty', ()), 0),
    ],
)
def test_fixed_size_requests(method: str, args: tuple[Any, ...], length: int) -> None:
    name, seq = _only_call(method, *args)
    assert name == 'seq'
    assert isinstance(seq, BoundedNothing)
    assert seq.size_hint() == length
    elements = list(seq.iter_elements(lambda deserializer: deserializer.deserialize_i32(RecordingVisitor())))
    assert elements == [0] * length
    assert seq.size_hint() == 0
    assert seq.next_element(lambda deserializer: 'never') is END


def test_enum_picks_first_variant() -> None:
    name, data = _only_call('enum', 'E', ('A', 'B'))
    assert name == 'enum'
    assert isinstance(data, EnumAccess)
    identifier, variant = data.variant(lambda deserializer: deserializer.deserialize_identifier(RecordingVisitor()))
    assert identifier == 0
    assert isinstance(variant, VariantAccess)


def test_variant_payloads() -> None:
    nothing = Nothing()
    assert nothing.unit_variant() is None
    assert nothing.newtype_variant(lambda deserializer: deserializer.deserialize_string(RecordingVisitor())) == ''

    visitor = RecordingVisitor()
    nothing.tuple_variant(2, visitor)
    (name, seq), = visitor.calls
    assert name == 'seq'
    assert seq.size_hint() == 2

    visitor = RecordingVisitor()
    nothing.struct_variant(('x', 'y', 'z'), visitor)
    (name, seq), = visitor.calls
    assert name == 'seq'
    assert seq.size_hint() == 3


def test_default_visitor_rejects() -> None:
    class OnlyStr(Visitor[str]):
        def expecting(self) -> str:
            return 'a string'

        def visit_str(self, value: str, /) -> str:
            return value

    nothing = Nothing()
    assert nothing.deserialize_str(OnlyStr(nothing)) == ''
    # char widens to str
    assert nothing.deserialize_char(OnlyStr(nothing)) == '\0'
    # rejections are built by Nothing, so they carry no details
    with pytest.raises(NothingDeserializeError) as exc_info:
        nothing.deserialize_bool(OnlyStr(nothing))
    assert not isinstance(exc_info.value, InvalidTypeError)
    with pytest.raises(NothingDeserializeError):
        nothing.deserialize_seq(OnlyStr(nothing))


class BoundedNothingTestCase(unittest.TestCase):
    def test_counts_down(self) -> None:
        seq = BoundedNothing(NothingDeserializer(), 2)
        self.assertEqual(seq.size_hint(), 2)
        self.assertIsInstance(seq.next_element(lambda deserializer: deserializer), Deserializer)
        self.assertEqual(seq.size_hint(), 1)
        seq.next_element(lambda deserializer: None)
        self.assertEqual(seq.size_hint(), 0)
        self.assertIs(seq.next_element(lambda deserializer: None), END)
        self.assertIs(seq.next_element(lambda deserializer: None), END)
        self.assertEqual(seq.size_hint(), 0)

    def test_decoders_see_nothing(self) -> None:
        seen = []
        seq = BoundedNothing(Nothing(), 3)
        for _ in seq.iter_elements(seen.append):
            pass
        self.assertEqual(seen, [Nothing(), Nothing(), Nothing()])

    def test_none_elements_are_not_the_end(self) -> None:
        seq = BoundedNothing(Nothing(), 2)
        self.assertEqual(list(seq.iter_elements(lambda deserializer: None)), [None, None])

    def test_decode_error(self) -> None:
        self.assertEqual(Nothing().decode_error('anything'), NothingDeserializeError())


@pytest.mark.parametrize(
    ['method', 'args'],
    [
        ('decode_error', ('bad',)),
        ('invalid_type', ('map', 'a string')),
        ('invalid_value', ('integer `300`', 'u8 integer')),
        ('invalid_length', (1, 'a tuple of size 2')),
        ('unknown_variant', ('C', ('A', 'B'))),
        ('missing_field', ('x',)),
        ('duplicate_field', ('x',)),
    ],
)
def test_errors_carry_no_details(method: str, args: tuple[Any, ...]) -> None:
    error = getattr(Nothing(), method)(*args)
    assert error == NothingDeserializeError()
    assert str(error) == 'Something expected'
