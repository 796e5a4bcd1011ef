import pytest

from nothingness.utils.result import Err, Ok, UnwrapError, as_result, is_err, is_ok


def test_ok() -> None:
    result = Ok(1)
    assert is_ok(result)
    assert not is_err(result)
    assert result.ok() == 1
    assert result.err() is None
    assert result.unwrap() == 1
    assert result.unwrap_or(2) == 1
    assert result.unwrap_or_raise() == 1
    assert repr(result) == 'Ok(1)'
    with pytest.raises(UnwrapError) as exc_info:
        result.unwrap_err()
    assert exc_info.value.result is result


def test_err() -> None:
    error = KeyError('k')
    result = Err(error)
    assert is_err(result)
    assert result.ok() is None
    assert result.err() is error
    assert result.unwrap_err() is error
    assert result.unwrap_or(2) == 2
    with pytest.raises(UnwrapError) as exc_info:
        result.unwrap()
    assert exc_info.value.__cause__ is error
    with pytest.raises(KeyError):
        result.unwrap_or_raise()


def test_equality_and_hash() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)
    assert len({Ok(None), Ok(None), Err(None)}) == 2


def test_match() -> None:
    match Err('bad'):
        case Ok(value):
            pytest.fail(f'unexpected {value}')
        case Err(error):
            assert error == 'bad'


def test_as_result() -> None:
    @as_result(ValueError)
    def parse(text: str) -> int:
        return int(text)

    assert parse('3') == Ok(3)
    assert isinstance(parse('x').err(), ValueError)


def test_as_result_other_exceptions_propagate() -> None:
    @as_result(ValueError)
    def fail() -> None:
        raise KeyError

    with pytest.raises(KeyError):
        fail()


def test_as_result_requires_exception_types() -> None:
    with pytest.raises(TypeError):
        as_result()
    with pytest.raises(TypeError):
        as_result(int)  # type: ignore[type-var]
