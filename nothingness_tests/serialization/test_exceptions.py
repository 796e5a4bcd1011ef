import pytest

from nothingness.exception import NothingnessError
from nothingness.serialization import (
    DecodeError,
    DuplicateFieldError,
    EncodeError,
    InvalidLengthError,
    InvalidTypeError,
    InvalidValueError,
    MissingFieldError,
    SerializationError,
    UnknownVariantError,
)
from nothingness_tests.utils import scripted


@pytest.mark.parametrize(
    ['error', 'message'],
    [
        (InvalidTypeError('boolean `true`', 'a string'), 'invalid type: boolean `true`, expected a string'),
        (InvalidValueError('integer `300`', 'u8 integer'), 'invalid value: integer `300`, expected u8 integer'),
        (InvalidLengthError(1, 'a tuple of size 2'), 'invalid length 1, expected a tuple of size 2'),
        (UnknownVariantError('C', ['A', 'B']), 'unknown variant `C`, expected one of A, B'),
        (MissingFieldError('x'), 'missing field `x`'),
        (DuplicateFieldError('x'), 'duplicate field `x`'),
    ],
)
def test_decode_errors(error: DecodeError, message: str) -> None:
    assert str(error) == message
    assert isinstance(error, DecodeError)


def test_hierarchy() -> None:
    assert issubclass(SerializationError, NothingnessError)
    assert issubclass(EncodeError, SerializationError)
    assert issubclass(DecodeError, SerializationError)
    assert not issubclass(EncodeError, DecodeError)


def test_unknown_variant_keeps_expected_as_tuple() -> None:
    error = UnknownVariantError('C', iter(['A', 'B']))
    assert error.variant == 'C'
    assert error.expected == ('A', 'B')


def test_deserializer_builds_standard_errors() -> None:
    deserializer = scripted()
    assert type(deserializer.decode_error('bad')) is DecodeError
    assert isinstance(deserializer.invalid_type('map', 'a string'), InvalidTypeError)
    assert isinstance(deserializer.invalid_value('integer `300`', 'u8 integer'), InvalidValueError)
    assert isinstance(deserializer.invalid_length(1, 'a tuple of size 2'), InvalidLengthError)
    assert isinstance(deserializer.unknown_variant('C', ('A', 'B')), UnknownVariantError)
    assert isinstance(deserializer.missing_field('x'), MissingFieldError)
    assert isinstance(deserializer.duplicate_field('x'), DuplicateFieldError)
