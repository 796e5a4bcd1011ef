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
`Nothing` is both a serializer and a deserializer, and these are the shortcuts for using it with Python types:

>>> from dataclasses import dataclass
>>> from nothingness.types import U32
>>> @dataclass
... class Record:
...     number: U32
...     string: str
>>> from_nothing(Record)
Record(number=0, string='')
>>> is_nothing(Record(0, '')), is_nothing(Record(1, ''))
(True, False)
>>> is_nothing([0])
False
>>> check_nothing((0, ''))
Ok(None)
>>> check_nothing((0, 'a'))
Err(NothingSerializeError())
"""

from typing import Any, Optional

from structlog import get_logger

from nothingness.conf import NothingnessSettings
from nothingness.nothing.de import BoundedNothing, NothingDeserializer
from nothingness.nothing.exceptions import NothingDeserializeError, NothingSerializeError
from nothingness.nothing.marker import Nothing
from nothingness.nothing.ser import NothingSerializer
from nothingness.serialization import DecodeError
from nothingness.shapes import Shape, make_shape
from nothingness.utils.result import Result, as_result

__all__ = [
    'BoundedNothing',
    'Nothing',
    'NothingDeserializeError',
    'NothingDeserializer',
    'NothingSerializeError',
    'NothingSerializer',
    'check_nothing',
    'from_nothing',
    'is_nothing',
]

logger = get_logger()


@as_result(NothingSerializeError)
def _serialize_into_nothing(shape: Shape[Any], value: Any) -> None:
    shape.serialize(Nothing(), value)


def check_nothing(
    value: Any,
    type_: Any = Any,
    /,
    *,
    settings: Optional[NothingnessSettings] = None,
) -> Result[None, NothingSerializeError]:
    """ Check whether the value is nothing, `Ok(None)` if it is, `Err(NothingSerializeError())` if it isn't.

    The value is looked at as the given type (or shape), by default its shape is picked from the value itself. Values
    that don't match the given type raise `TypeError` or `ValueError` instead.
    """
    shape = make_shape(type_, settings=settings)
    return _serialize_into_nothing(shape, value)


def is_nothing(value: Any, type_: Any = Any, /, *, settings: Optional[NothingnessSettings] = None) -> bool:
    """Like `check_nothing`, but just tells whether the value is nothing."""
    return check_nothing(value, type_, settings=settings).is_ok()


def from_nothing(type_: Any, /, *, settings: Optional[NothingnessSettings] = None) -> Any:
    """ Make up the value of the given type (or shape) that is nothing, `NothingDeserializeError` if there is none.

    Every decoding failure is a `NothingDeserializeError`, an enum without members included.
    """
    shape = make_shape(type_, settings=settings)
    try:
        return shape.deserialize(Nothing())
    except DecodeError as e:
        logger.debug('cannot make up value from nothing', type=str(type_), error=repr(e))
        raise
