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

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, is_dataclass
from enum import Enum
from functools import reduce
from operator import or_
from types import MappingProxyType as mappingproxy, NoneType, UnionType
from typing import TYPE_CHECKING, Any, Iterator, NamedTuple, NewType, TypeAlias, TypeVar, Union, cast

from structlog import get_logger

from nothingness.utils.typing import get_args, get_origin, is_newtype, is_subclass

if TYPE_CHECKING:
    from nothingness.shapes.shape import Shape


logger = get_logger()

T = TypeVar('T')
TypeAliasMap: TypeAlias = Mapping[Any, type]
TypeToShapeMap: TypeAlias = Mapping[Any, type['Shape']]


class TaggedUnion:
    """ Key of a `Shape.TypeMap` for unions without `None`, used when the union itself isn't in the map.

    It is never instantiated, it only exists to be used as a key.
    """


def get_origin_classes(type_: type) -> Iterator[type]:
    """ This util function is useful to generalize over a type T and unions A | B.

    A simple type T is yielded directly, and an union will yield each type in it. Only origin types are yielded,
    arguments are discarded, because normally that's what's needed when checking a property of the type.

    It is guaranteed that each yielded type is not an UnionType.

    >>> list(get_origin_classes(int))
    [<class 'int'>]
    >>> list(get_origin_classes(int | str))
    [<class 'int'>, <class 'str'>]
    >>> list(get_origin_classes(set[int] | dict[int, str]))
    [<class 'set'>, <class 'dict'>]
    """
    origin_type: type = get_origin(type_) or type_
    if origin_type is UnionType or origin_type is Union:
        for arg_type in get_args(type_):
            origin_arg_type: type = get_origin(arg_type) or arg_type
            yield origin_arg_type
    else:
        yield origin_type


def is_origin_hashable(type_: type) -> bool:
    """ Checks whether the given type signature satisfies `collections.abc.Hashable`.

    This check ignores type arguments, but takes into account all types of an union.

    >>> is_origin_hashable(int | str | bytes)
    True
    >>> is_origin_hashable(int | str | bytes | set)
    False
    >>> is_origin_hashable(frozenset[int])
    True
    >>> is_origin_hashable(dict)
    False
    >>> is_origin_hashable(mappingproxy)
    False
    >>> is_origin_hashable(tuple)
    True

    Even though list is not hashable, a frozenset[list] is, simply because arguments are ignored:
    >>> is_origin_hashable(frozenset[list])
    True

    A NewType is as hashable as the type it wraps:
    >>> from nothingness.types import U8
    >>> is_origin_hashable(U8)
    True
    """
    return all(_is_origin_hashable(origin_class) for origin_class in get_origin_classes(type_))


def _is_origin_hashable(origin_class: type) -> bool:
    """ Inner implementation of is_origin_hashable, only checks a single origin class. """
    # XXX: `hash(mapping_proxy_instance)` always fails, even on versions where it's registered as Hashable
    if origin_class is mappingproxy:
        return False
    if origin_class is NoneType or origin_class is None:
        return True
    return is_subclass(origin_class, Hashable)


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(None)
    'None'
    >>> pretty_type(int)
    'int'
    >>> pretty_type(dict[str, int])
    'dict[str, int]'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', str(type_))


# XXX: _verbose argument is used to help with doctest
def get_aliased_type(type_: Any, alias_map: TypeAliasMap, *, _verbose: bool = True) -> Any:
    """ Map a type to its usable alias including the type's arguments.

    For example, abstract collections are mapped to the builtin that implements them in the default alias map:

    >>> from collections.abc import Mapping, Sequence, Set
    >>> orig_type = tuple[str, Sequence[Set[int]], Mapping[str, bool]]
    >>> from nothingness.shapes import DEFAULT_TYPE_ALIAS_MAP as alias_map
    >>> get_aliased_type(orig_type, alias_map, _verbose=False)
    tuple[str, list[frozenset[int]], dict[str, bool]]
    """
    new_type, replaced = _get_aliased_type(type_, alias_map)
    if replaced and _verbose:
        logger.debug('type replaced', old=pretty_type(type_), new=pretty_type(new_type))
    return new_type


def _get_aliased_type(type_: Any, alias_map: TypeAliasMap) -> tuple[Any, bool]:
    """ Implementation of get_aliased_type with indication of whether there was a replacement.
    """
    origin_type = get_origin(type_) or type_
    aliased_origin: Any
    replaced = False

    # XXX: special case, typing.Union is replaced with types.UnionType but that doesn't count as a replacement
    if origin_type is Union:
        aliased_origin = UnionType
    elif origin_type in alias_map:
        aliased_origin = alias_map[origin_type]
        replaced = True
    else:
        aliased_origin = origin_type

    if get_origin(type_) is not None:
        type_args = get_args(type_)

        # use _get_aliased_type for recursion so we don't log multiple times when a replacement happens
        aliased_args_replaced = [_get_aliased_type(arg, alias_map) for arg in type_args]
        aliased_args: tuple[Any, ...] = tuple(arg for arg, _ in aliased_args_replaced)
        replaced |= any(arg_replaced for _, arg_replaced in aliased_args_replaced)

        # XXX: special case, UnionType can't be instantiated directly, this is the simplest way to do it
        if aliased_origin is UnionType:
            return reduce(or_, aliased_args), replaced

        # normal case when there are type arguments (even if the arguments are empty, like tuple[()])
        if not aliased_args:
            return aliased_origin[()], replaced
        return aliased_origin[aliased_args], replaced
    else:
        # normal case when there aren't type arguments
        return aliased_origin, replaced


def get_usable_origin_type(
    type_: Any,
    /,
    *,
    type_map: 'Shape.TypeMap',
    _verbose: bool = True,
) -> Any:
    """ The purpose of this function is to map a given type into a key that is usable in a Shape.TypeMap

    It takes into account type-aliasing according to Shape.TypeMap.alias_map. If the given type cannot be used in the
    given type_map, a TypeError exception will be raised.

    Besides concrete types, a few special keys stand for whole families of types:

    - `NamedTuple` for any class created with `typing.NamedTuple`
    - `dataclass` (the decorator) for any dataclass
    - `Enum` for any `enum.Enum` subclass
    - `NewType` for any `typing.NewType` that isn't itself in the map
    - `TaggedUnion` for any union without `None` that isn't itself (as a tuple of its members) in the map

    >>> from collections.abc import Sequence
    >>> from nothingness.shapes import DEFAULT_TYPE_MAP as type_map
    >>> get_usable_origin_type(Sequence[int], type_map=type_map, _verbose=False)
    <class 'list'>
    >>> from enum import Enum
    >>> class Color(Enum):
    ...     RED = 1
    >>> get_usable_origin_type(Color, type_map=type_map, _verbose=False)
    <enum 'Enum'>
    """
    if isinstance(type_, str):
        raise NotImplementedError('string annotations are not currently supported')

    shapes_map = type_map.shapes_map
    aliased_type = get_aliased_type(type_, type_map.alias_map, _verbose=_verbose)
    origin_aliased_type: Any = get_origin(aliased_type) or aliased_type

    if origin_aliased_type is UnionType or origin_aliased_type is Union:
        args = get_args(aliased_type)
        # when None is not in it, it's not Optional, so we must index by args which is a tuple of types
        if NoneType not in args:
            if args in shapes_map:
                return args
            if TaggedUnion in shapes_map:
                return TaggedUnion
            raise TypeError(f'type {pretty_type(type_)} is not supported by any Shape class')

    if origin_aliased_type in shapes_map:
        return origin_aliased_type

    if NamedTuple in shapes_map and NamedTuple in getattr(type_, '__orig_bases__', tuple()):
        return NamedTuple

    if NewType in shapes_map and is_newtype(type_):
        return NewType

    if Enum in shapes_map and is_subclass(type_, Enum):
        return Enum

    if dataclass in shapes_map and isinstance(type_, type) and is_dataclass(type_):
        return dataclass

    raise TypeError(f'type {pretty_type(type_)} is not supported by any Shape class')


def is_union_type(type_: Any) -> bool:
    """ Whether the type is an union, either made with `|` or with `typing.Union`/`typing.Optional`.

    >>> from typing import Optional
    >>> is_union_type(int | None), is_union_type(Optional[int]), is_union_type(int)
    (True, True, False)
    """
    origin = get_origin(type_)
    return origin is UnionType or origin is Union


def union_args(type_: Any) -> tuple[Any, ...]:
    """ The members of an union type, in declaration order. """
    if not is_union_type(type_):
        raise TypeError('expected type union')
    return cast(tuple[Any, ...], get_args(type_))
