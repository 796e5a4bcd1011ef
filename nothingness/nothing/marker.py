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

from __future__ import annotations

import functools
from typing import Any

from nothingness.nothing.de import NothingDeserializer
from nothingness.nothing.ser import NothingSerializer


@functools.total_ordering
class Nothing(NothingSerializer, NothingDeserializer):
    """ The value that is nothing, used both as a serializer and as a deserializer.

    It has no state at all, any two instances are equal, and copying or pickling just gives back an equal instance:

    >>> Nothing() == Nothing()
    True
    >>> Nothing() < Nothing(), Nothing() <= Nothing()
    (False, True)
    >>> len({Nothing(), Nothing()})
    1
    >>> Nothing()
    Nothing
    """

    __slots__ = ()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Nothing):
            return NotImplemented
        return True

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Nothing):
            return NotImplemented
        return False

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return 'Nothing'

    def __copy__(self) -> Nothing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Nothing:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return Nothing, ()
