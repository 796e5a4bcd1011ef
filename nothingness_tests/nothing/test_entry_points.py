import math
from collections import OrderedDict, deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import Any, NamedTuple, NewType, Optional
from uuid import UUID

import pytest
from structlog.testing import capture_logs

from nothingness import Nothing, NothingDeserializeError, NothingSerializeError, check_nothing, from_nothing, is_nothing
from nothingness.conf import NothingnessSettings
from nothingness.serialization import InvalidValueError
from nothingness.shapes import Uint8Shape, make_shape
from nothingness.types import F32, I8, I128, U8, U32, U128, Char
from nothingness.utils.result import Err, Ok


@dataclass
class Record:
    number: U32
    string: str


class Color(Enum):
    RED = 'red'
    GREEN = 'green'


class NoColor(Enum):
    pass


class Unit(NamedTuple):
    pass


class Wrapper(NamedTuple):
    value: str


class Point(NamedTuple):
    x: I8
    y: I8


@dataclass
class Circle:
    radius: float


@dataclass
class Square:
    side: float
    label: Optional[str] = None


UserId = NewType('UserId', int)


@dataclass
class Everything:
    flag: bool
    count: int
    ratio: float
    letter: Char
    name: str
    payload: bytes
    maybe: Optional[Record]
    items: list[Record]
    tags: frozenset[str]
    scores: dict[str, U128]
    triple: tuple[int, str, bytes]
    color: Color
    point: Point
    shape: Circle | Square
    owner: UserId
    extra: Any = field(default=None)


EMPTY_VALUES: list[tuple[Any, Any]] = [
    (bool, False),
    (int, 0),
    (float, 0.0),
    (str, ''),
    (bytes, b''),
    (bytearray, bytearray()),
    (None, None),
    (Optional[int], None),
    (int | None, None),
    (list[int], []),
    (set[str], set()),
    (frozenset[int], frozenset()),
    (deque[int], deque()),
    (tuple[int, ...], ()),
    (tuple[()], ()),
    (tuple[int, int, int], (0, 0, 0)),
    (tuple[int, str], (0, '')),
    (dict[str, int], {}),
    (OrderedDict[str, int], OrderedDict()),
    (Sequence[int], []),
    (Mapping[str, list[int]], {}),
    (U8, 0),
    (I128, 0),
    (F32, 0.0),
    (Char, '\0'),
    (UserId, 0),
    (Any, None),
    (Record, Record(0, '')),
    (Color, Color.RED),
    (Unit, Unit()),
    (Wrapper, Wrapper('')),
    (Point, Point(0, 0)),
    (Circle | Square, Circle(0.0)),
    (Square | Circle, Square(0.0)),
    (Point | Circle, Point(0, 0)),
    (
        Everything,
        Everything(
            flag=False,
            count=0,
            ratio=0.0,
            letter='\0',
            name='',
            payload=b'',
            maybe=None,
            items=[],
            tags=frozenset(),
            scores={},
            triple=(0, '', b''),
            color=Color.RED,
            point=Point(0, 0),
            shape=Circle(0.0),
            owner=UserId(0),
            extra=None,
        ),
    ),
]


@pytest.mark.parametrize(['type_', 'expected'], EMPTY_VALUES)
def test_from_nothing(type_: Any, expected: Any) -> None:
    value = from_nothing(type_)
    assert value == expected
    assert type(value) is type(expected)


@pytest.mark.parametrize(['type_', 'expected'], EMPTY_VALUES)
def test_from_nothing_is_nothing(type_: Any, expected: Any) -> None:
    assert is_nothing(from_nothing(type_), type_)


@pytest.mark.parametrize(['type_', 'value'], EMPTY_VALUES)
def test_nothing_comes_back(type_: Any, value: Any) -> None:
    assert is_nothing(value, type_)
    assert from_nothing(type_) == value


@pytest.mark.parametrize(
    'value',
    [
        None,
        False,
        0,
        0.0,
        -0.0,
        '',
        b'',
        bytearray(),
        memoryview(b''),
        [],
        (),
        {},
        set(),
        frozenset(),
        deque(),
        (0, ''),
        ((0,), ('', b''), None),
        Color.GREEN,
        Record(0, ''),
        Unit(),
        Point(0, 0),
    ],
)
def test_is_nothing(value: Any) -> None:
    assert is_nothing(value)
    assert check_nothing(value) == Ok(None)


@pytest.mark.parametrize(
    'value',
    [
        True,
        1,
        -1,
        2**100,
        0.1,
        math.inf,
        math.nan,
        'a',
        '\0',
        b'\0',
        [0],
        [[]],
        [None],
        {'': 0},
        {0},
        (0, 0, 1),
        (0, 'a'),
        (1, ''),
        Record(1, ''),
        Record(0, 'a'),
        Point(0, 1),
        Decimal(0),
        UUID(int=0),
        IPv4Address(0),
    ],
)
def test_is_not_nothing(value: Any) -> None:
    assert not is_nothing(value)
    assert check_nothing(value) == Err(NothingSerializeError())


def test_shape_relative() -> None:
    # the same values can be nothing or not depending on the type they are looked at as
    assert is_nothing((0, 0, 0), tuple[int, int, int])
    assert not is_nothing((0, 0, 0), tuple[int, ...])
    assert is_nothing(None, Optional[int])
    assert not is_nothing(0, Optional[int])
    assert not is_nothing('', Optional[str])
    assert is_nothing('\0', Char)
    assert not is_nothing('\0', str)
    assert is_nothing(Color.GREEN, Color)
    assert is_nothing(Wrapper(''), Wrapper)
    assert not is_nothing(Wrapper('x'), Wrapper)


def test_union_members() -> None:
    assert is_nothing(Circle(0.0), Circle | Square)
    assert is_nothing(Square(0.0), Circle | Square)
    assert not is_nothing(Square(0.0, ''), Circle | Square)
    assert not is_nothing(Circle(1.0), Circle | Square)


def test_nested_record() -> None:
    empty = from_nothing(Everything)
    assert is_nothing(empty)
    empty.items.append(Record(0, ''))
    assert not is_nothing(empty)


def test_mismatched_values_raise() -> None:
    with pytest.raises(TypeError):
        is_nothing('a', int)
    with pytest.raises(TypeError):
        check_nothing(0, str)
    with pytest.raises(ValueError):
        is_nothing(256, U8)
    with pytest.raises(TypeError):
        is_nothing(Record(0, ''), Circle | Square)


def test_unsupported_types_raise() -> None:
    with pytest.raises(TypeError):
        from_nothing(list)
    with pytest.raises(TypeError):
        from_nothing(int | str)
    with pytest.raises(TypeError):
        is_nothing(0, complex)


@pytest.mark.parametrize('type_', [UUID, Decimal, IPv4Address, IPv6Address])
def test_nothing_cannot_parse(type_: Any) -> None:
    with pytest.raises(NothingDeserializeError):
        from_nothing(type_)


def test_from_nothing_logs_failure() -> None:
    with capture_logs() as log_list, pytest.raises(NothingDeserializeError):
        from_nothing(UUID)
    log, = log_list
    assert log['event'] == 'cannot make up value from nothing'
    assert log['log_level'] == 'debug'
    assert log['error'] == 'NothingDeserializeError()'


def test_empty_enum() -> None:
    # the first variant is always picked, so an enum without variants can't be made up
    with pytest.raises(NothingDeserializeError) as exc_info:
        from_nothing(NoColor)
    assert not isinstance(exc_info.value, InvalidValueError)


def test_every_enum_member_is_nothing() -> None:
    # members carry no payload, so each one is nothing, but only the first one is made up from nothing
    assert all(is_nothing(color) for color in Color)
    assert from_nothing(Color) is Color.RED
    assert from_nothing(Color) is not Color.GREEN


def test_integers_too_wide_are_not_nothing() -> None:
    assert not is_nothing(2**128)
    assert not is_nothing(-2**127 - 1)
    assert check_nothing(2**200) == Err(NothingSerializeError())


def test_record_example() -> None:
    assert from_nothing(Record) == Record(number=0, string='')
    assert check_nothing(Record(0, '')).is_ok()
    assert check_nothing(Record(1, '')).is_err()
    assert check_nothing(Record(1, '')).unwrap_err() == NothingSerializeError()


def test_prebuilt_shape() -> None:
    shape = make_shape(tuple[str, U8])
    assert from_nothing(shape) == ('', 0)
    assert is_nothing(('', 0), shape)
    assert not is_nothing(('', 1), shape)
    assert from_nothing(Uint8Shape()) == 0


def test_explicit_settings() -> None:
    settings = NothingnessSettings(INT_SHAPE='u8', FLOAT_SHAPE='f32')
    assert from_nothing(int, settings=settings) == 0
    assert from_nothing(float, settings=settings) == 0.0
    assert is_nothing(0, int, settings=settings)
    with pytest.raises(ValueError):
        is_nothing(256, int, settings=settings)
    with pytest.raises(ValueError):
        is_nothing(-1, int, settings=settings)


def test_marker_drives_shapes_directly() -> None:
    shape = make_shape(Record)
    assert shape.deserialize(Nothing()) == Record(0, '')
    shape.serialize(Nothing(), Record(0, ''))
    with pytest.raises(NothingSerializeError):
        shape.serialize(Nothing(), Record(0, 'a'))
