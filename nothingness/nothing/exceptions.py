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

from typing import Any

from nothingness.serialization.exceptions import DecodeError, EncodeError


class NothingSerializeError(EncodeError):
    """ The value given to `Nothing` as a serializer is not nothing.

    It carries no details, every instance is interchangeable with any other.

    >>> NothingSerializeError() == NothingSerializeError()
    True
    >>> str(NothingSerializeError())
    'Not nothing'
    """

    def __init__(self) -> None:
        super().__init__('Not nothing')

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, NothingSerializeError)

    def __hash__(self) -> int:
        return hash(NothingSerializeError)

    def __repr__(self) -> str:
        return 'NothingSerializeError()'

    def __reduce__(self) -> tuple[Any, ...]:
        return NothingSerializeError, ()


class NothingDeserializeError(DecodeError):
    """ `Nothing` as a deserializer was asked for something it can't make up.

    It carries no details, every instance is interchangeable with any other.
    """

    def __init__(self) -> None:
        super().__init__('Something expected')

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, NothingDeserializeError)

    def __hash__(self) -> int:
        return hash(NothingDeserializeError)

    def __repr__(self) -> str:
        return 'NothingDeserializeError()'

    def __reduce__(self) -> tuple[Any, ...]:
        return NothingDeserializeError, ()
