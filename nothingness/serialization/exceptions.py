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

from collections.abc import Iterable

from nothingness.exception import NothingnessError


class SerializationError(NothingnessError):
    """Base class for errors raised while driving a serializer or a deserializer."""
    pass


class EncodeError(SerializationError):
    """Raised by a Serializer when a value cannot be written."""
    pass


class DecodeError(SerializationError):
    """Raised by a Deserializer or a Visitor when a value cannot be produced."""
    pass


class InvalidTypeError(DecodeError):
    """The deserializer offered a shape that the visitor does not accept."""

    def __init__(self, unexpected: str, expected: str) -> None:
        super().__init__(f'invalid type: {unexpected}, expected {expected}')
        self.unexpected = unexpected
        self.expected = expected


class InvalidValueError(DecodeError):
    """The shape was accepted, but the value itself is not valid for the visitor."""

    def __init__(self, unexpected: str, expected: str) -> None:
        super().__init__(f'invalid value: {unexpected}, expected {expected}')
        self.unexpected = unexpected
        self.expected = expected


class InvalidLengthError(DecodeError):
    """A sequence or map ended before the visitor got all the elements it needs."""

    def __init__(self, length: int, expected: str) -> None:
        super().__init__(f'invalid length {length}, expected {expected}')
        self.length = length
        self.expected = expected


class UnknownVariantError(DecodeError):
    def __init__(self, variant: str, expected: Iterable[str]) -> None:
        self.variant = variant
        self.expected = tuple(expected)
        super().__init__(f'unknown variant `{variant}`, expected one of {", ".join(self.expected)}')


class MissingFieldError(DecodeError):
    def __init__(self, field: str) -> None:
        super().__init__(f'missing field `{field}`')
        self.field = field


class DuplicateFieldError(DecodeError):
    def __init__(self, field: str) -> None:
        super().__init__(f'duplicate field `{field}`')
        self.field = field
