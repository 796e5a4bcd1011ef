from typing import Any

import pytest

from nothingness.serialization import InvalidLengthError, InvalidTypeError
from nothingness.serialization.compound_encoding.collection import decode_collection
from nothingness.serialization.compound_encoding.mapping import decode_mapping
from nothingness.serialization.compound_encoding.optional import decode_optional
from nothingness.serialization.compound_encoding.tuple import decode_tuple, decode_tuple_struct
from nothingness_tests.utils import ListSeq, PairsMap, decode_text, scripted, text


def test_decode_optional_some() -> None:
    deserializer = scripted(option=lambda visitor: visitor.visit_some(text('inner')))
    assert decode_optional(deserializer, decode_text) == 'inner'


def test_decode_optional_none_and_unit() -> None:
    assert decode_optional(scripted(option=lambda visitor: visitor.visit_none()), decode_text) is None
    assert decode_optional(scripted(option=lambda visitor: visitor.visit_unit()), decode_text) is None


def test_decode_optional_rejects_other_shapes() -> None:
    with pytest.raises(InvalidTypeError):
        decode_optional(scripted(option=lambda visitor: visitor.visit_bool(True)), decode_text)


def test_decode_collection() -> None:
    deserializer = scripted(seq=lambda visitor: visitor.visit_seq(ListSeq([text('a'), text('b')])))
    assert decode_collection(deserializer, decode_text, list) == ['a', 'b']
    deserializer = scripted(seq=lambda visitor: visitor.visit_seq(ListSeq([text('a'), text('a')])))
    assert decode_collection(deserializer, decode_text, frozenset) == frozenset({'a'})


def test_decode_mapping() -> None:
    pairs = [(text('x'), text('1')), (text('y'), text('2'))]
    deserializer = scripted(map=lambda visitor: visitor.visit_map(PairsMap(pairs)))
    assert decode_mapping(deserializer, decode_text, decode_text, dict) == {'x': '1', 'y': '2'}


def test_decode_tuple() -> None:
    deserializer = scripted(tuple=lambda length, visitor: visitor.visit_seq(ListSeq([text('a'), text('b')])))
    assert decode_tuple(deserializer, (decode_text, decode_text)) == ('a', 'b')


def test_decode_tuple_too_short() -> None:
    deserializer = scripted(tuple=lambda length, visitor: visitor.visit_seq(ListSeq([text('a')])))
    with pytest.raises(InvalidLengthError) as exc_info:
        decode_tuple(deserializer, (decode_text, decode_text))
    assert exc_info.value.length == 1
    assert exc_info.value.expected == 'a tuple of size 2'


def test_decode_tuple_struct_too_short() -> None:
    def tuple_struct(name: str, length: int, visitor: Any) -> Any:
        assert (name, length) == ('Pair', 2)
        return visitor.visit_seq(ListSeq([]))

    with pytest.raises(InvalidLengthError) as exc_info:
        decode_tuple_struct(scripted(tuple_struct=tuple_struct), 'Pair', (decode_text, decode_text))
    assert exc_info.value.length == 0
    assert exc_info.value.expected == 'Pair with 2 elements'


def test_decode_error_default() -> None:
    error = scripted().decode_error('bad data')
    assert str(error) == 'bad data'
