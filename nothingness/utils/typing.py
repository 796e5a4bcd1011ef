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

from types import UnionType
from typing import Any, NewType, get_args as _typing_get_args, get_origin as _typing_get_origin


def get_origin(t: Any, /) -> Any | None:
    """Like typing.get_origin, but a NewType never has an origin, it is resolved with `resolve_newtype` instead."""
    if isinstance(t, NewType):
        return None
    return _typing_get_origin(t)


def get_args(t: Any, /) -> tuple[Any, ...]:
    """Like typing.get_args, but always returns a tuple."""
    if isinstance(t, NewType):
        return ()
    return _typing_get_args(t)


def is_newtype(t: Any, /) -> bool:
    """ Whether the given annotation was created with `typing.NewType`.

    >>> from typing import NewType
    >>> is_newtype(NewType('N', int))
    True
    >>> is_newtype(int)
    False
    """
    return isinstance(t, NewType)


def resolve_newtype(t: Any, /) -> Any:
    """ Follow the chain of NewType supertypes until a non-NewType is reached.

    >>> from typing import NewType
    >>> N = NewType('N', int)
    >>> M = NewType('M', N)
    >>> resolve_newtype(M)
    <class 'int'>
    >>> resolve_newtype(str)
    <class 'str'>
    """
    while (super_type := getattr(t, '__supertype__', None)) is not None:
        t = super_type
    return t


def is_subclass(cls: Any, class_or_tuple: type | tuple[type, ...] | UnionType, /) -> bool:
    """ Reimplements issubclass() with support for NewType classes and non-class arguments.

    Normal behavior from `issubclass`:

    >>> is_subclass(int, int)
    True
    >>> is_subclass(bool, int)
    True
    >>> is_subclass(bool, int | str)
    True
    >>> is_subclass(str, int)
    False

    But `is_subclass` also works when a NewType is given as arg 1:

    >>> from typing import NewType
    >>> N = NewType('N', int)
    >>> is_subclass(N, int)
    True
    >>> is_subclass(N, str)
    False

    And anything that does not resolve to a class is simply not a subclass:

    >>> is_subclass(int | str, int)
    False
    >>> is_subclass(None, int)
    False
    >>> is_subclass(list[int], list)
    False
    """
    cls = resolve_newtype(cls)
    # XXX: generic aliases like `list[int]` pass as instances of `type` but `issubclass` rejects them
    if not isinstance(cls, type) or _typing_get_origin(cls) is not None:
        return False
    return issubclass(cls, class_or_tuple)
