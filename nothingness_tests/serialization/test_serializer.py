from collections.abc import Iterator
from typing import Any

from nothingness.serialization import EncodeError, Serializer
from nothingness.serialization.compound_encoding.collection import encode_collection
from nothingness.serialization.compound_encoding.mapping import encode_mapping
from nothingness.serialization.compound_encoding.optional import encode_optional
from nothingness.serialization.compound_encoding.tuple import encode_tuple, encode_tuple_struct, encode_tuple_variant
from nothingness_tests.utils import RecordingCompound, RecordingSerializer


def _encode_str(serializer: Serializer, value: str) -> None:
    serializer.serialize_str(value)


def test_collect_seq_with_length() -> None:
    serializer = RecordingSerializer()
    serializer.collect_seq(['a', 'b'], _encode_str)
    assert serializer.log == [('serialize_seq', 2), ('element', 'a'), ('element', 'b'), ('end',)]


def test_collect_seq_without_length() -> None:
    def values() -> Iterator[str]:
        yield 'a'

    serializer = RecordingSerializer()
    serializer.collect_seq(values(), _encode_str)
    assert serializer.log == [('serialize_seq', None), ('element', 'a'), ('end',)]


def test_collect_map() -> None:
    serializer = RecordingSerializer()
    serializer.collect_map({'k': 'v'}.items(), _encode_str, _encode_str)
    assert serializer.log == [('serialize_map', 1), ('key', 'k'), ('value', 'v'), ('end',)]


def test_collect_str() -> None:
    serializer = RecordingSerializer()
    serializer.collect_str(12)
    assert serializer.log == [('serialize_str', '12')]


def test_skip_field_does_nothing_by_default() -> None:
    log: list[tuple[Any, ...]] = []
    RecordingCompound(log).skip_field('skipped')
    assert log == []


def test_encode_error() -> None:
    error = RecordingSerializer().encode_error('bad value')
    assert type(error) is EncodeError
    assert str(error) == 'bad value'


def test_encode_optional() -> None:
    serializer = RecordingSerializer()
    encode_optional(serializer, None, _encode_str)
    encode_optional(serializer, '', _encode_str)
    assert serializer.log == [('serialize_none',), ('serialize_some', ''), ('serialize_str', '')]


def test_encode_collection_and_mapping() -> None:
    serializer = RecordingSerializer()
    encode_collection(serializer, ('x',), _encode_str)
    encode_mapping(serializer, {}, _encode_str, _encode_str)
    assert serializer.log == [
        ('serialize_seq', 1), ('element', 'x'), ('end',),
        ('serialize_map', 0), ('end',),
    ]


def test_encode_tuples() -> None:
    serializer = RecordingSerializer()
    encode_tuple(serializer, ('a', 'b'), (_encode_str, _encode_str))
    encode_tuple_struct(serializer, 'Pair', ('a', 'b'), (_encode_str, _encode_str))
    encode_tuple_variant(serializer, 'E', 1, 'B', ('a',), (_encode_str,))
    assert serializer.log == [
        ('serialize_tuple', 2), ('element', 'a'), ('element', 'b'), ('end',),
        ('serialize_tuple_struct', 'Pair', 2), ('field', 'a'), ('field', 'b'), ('end',),
        ('serialize_tuple_variant', 'E', 1, 'B', 1), ('field', 'a'), ('end',),
    ]
