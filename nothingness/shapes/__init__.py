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

import functools
from collections import OrderedDict, deque
from collections.abc import Mapping, MutableMapping, MutableSequence, MutableSet, Sequence, Set
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from types import NoneType, UnionType
from typing import Any, NamedTuple, NewType, Optional, TypeVar, Union
from uuid import UUID

from nothingness.conf import NothingnessSettings
from nothingness.shapes.any_shape import AnyShape
from nothingness.shapes.bool_shape import BoolShape
from nothingness.shapes.bytes_shape import BytearrayShape, BytesShape
from nothingness.shapes.collection_shape import DequeShape, FrozenSetShape, ListShape, SetShape
from nothingness.shapes.dataclass_shape import DataclassShape
from nothingness.shapes.display_shape import DisplayShape
from nothingness.shapes.enum_shape import EnumShape
from nothingness.shapes.float_shape import FLOAT_SHAPES, Float32Shape, Float64Shape
from nothingness.shapes.map_shape import DictShape, OrderedDictShape
from nothingness.shapes.namedtuple_shape import NamedTupleShape
from nothingness.shapes.newtype_shape import NewtypeShape
from nothingness.shapes.null_shape import NullShape
from nothingness.shapes.optional_shape import OptionalShape
from nothingness.shapes.shape import Shape
from nothingness.shapes.sized_int_shape import (
    SIZED_INT_SHAPES,
    Int8Shape,
    Int16Shape,
    Int32Shape,
    Int64Shape,
    Int128Shape,
    Uint8Shape,
    Uint16Shape,
    Uint32Shape,
    Uint64Shape,
    Uint128Shape,
)
from nothingness.shapes.str_shape import CharShape, StrShape
from nothingness.shapes.tuple_shape import TupleShape
from nothingness.shapes.union_shape import UnionShape
from nothingness.shapes.utils import TaggedUnion, TypeAliasMap, TypeToShapeMap
from nothingness.types import F32, F64, I8, I16, I32, I64, I128, U8, U16, U32, U64, U128, Char

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'ESSENTIAL_TYPE_ALIAS_MAP',
    'TYPE_TO_SHAPE_MAP',
    'AnyShape',
    'BoolShape',
    'BytearrayShape',
    'BytesShape',
    'CharShape',
    'DataclassShape',
    'DequeShape',
    'DictShape',
    'DisplayShape',
    'EnumShape',
    'Float32Shape',
    'Float64Shape',
    'FrozenSetShape',
    'Int8Shape',
    'Int16Shape',
    'Int32Shape',
    'Int64Shape',
    'Int128Shape',
    'ListShape',
    'NamedTupleShape',
    'NewtypeShape',
    'NullShape',
    'OptionalShape',
    'OrderedDictShape',
    'SetShape',
    'Shape',
    'StrShape',
    'TaggedUnion',
    'TupleShape',
    'TypeAliasMap',
    'TypeToShapeMap',
    'Uint8Shape',
    'Uint16Shape',
    'Uint32Shape',
    'Uint64Shape',
    'Uint128Shape',
    'UnionShape',
    'make_shape',
]

T = TypeVar('T')

# this is the minimum type-alias-map needed for everything to work as intended
ESSENTIAL_TYPE_ALIAS_MAP: TypeAliasMap = {
    Union: UnionType,
}

# abstract collections are replaced by the builtin that implements them, that's what is built when deserializing
DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    **ESSENTIAL_TYPE_ALIAS_MAP,
    Sequence: list,
    MutableSequence: list,
    Set: frozenset,
    MutableSet: set,
    Mapping: dict,
    MutableMapping: dict,
}

# Mapping between types and Shape classes, `int` and `float` are added from the settings.
TYPE_TO_SHAPE_MAP: TypeToShapeMap = {
    # builtin types:
    bool: BoolShape,
    bytearray: BytearrayShape,
    bytes: BytesShape,
    dict: DictShape,
    frozenset: FrozenSetShape,
    list: ListShape,
    set: SetShape,
    str: StrShape,
    tuple: TupleShape,
    None: NullShape,
    NoneType: NullShape,  # this can come up here as well as None
    # other Python types:
    OrderedDict: OrderedDictShape,
    deque: DequeShape,
    Decimal: DisplayShape,
    IPv4Address: DisplayShape,
    IPv6Address: DisplayShape,
    UUID: DisplayShape,
    # families of types, see `get_usable_origin_type`:
    UnionType: OptionalShape,
    TaggedUnion: UnionShape,
    NamedTuple: NamedTupleShape,
    NewType: NewtypeShape,
    Enum: EnumShape,
    dataclass: DataclassShape,
    # dynamic values:
    Any: AnyShape,
    object: AnyShape,
    # nothingness types:
    I8: Int8Shape,
    I16: Int16Shape,
    I32: Int32Shape,
    I64: Int64Shape,
    I128: Int128Shape,
    U8: Uint8Shape,
    U16: Uint16Shape,
    U32: Uint32Shape,
    U64: Uint64Shape,
    U128: Uint128Shape,
    F32: Float32Shape,
    F64: Float64Shape,
    Char: CharShape,
}


@functools.cache
def _type_map_for_settings(settings: NothingnessSettings) -> Shape.TypeMap:
    shapes_map: TypeToShapeMap = {
        **TYPE_TO_SHAPE_MAP,
        int: SIZED_INT_SHAPES[settings.INT_SHAPE],
        float: FLOAT_SHAPES[settings.FLOAT_SHAPE],
    }
    return Shape.TypeMap(DEFAULT_TYPE_ALIAS_MAP, shapes_map)


DEFAULT_TYPE_MAP = _type_map_for_settings(NothingnessSettings())


def make_shape(type_: Any, /, *, settings: Optional[NothingnessSettings] = None) -> Shape[Any]:
    """ Like Shape.from_type, but with the maps built from the settings, `NothingnessSettings()` by default.

    An instance of `Shape` is returned unchanged, so anything that takes a type also takes a prebuilt shape.

    If you need to customize the mapping use `Shape.from_type` instead.

    >>> make_shape(int)  # doctest: +ELLIPSIS
    <nothingness.shapes.sized_int_shape.Int64Shape object at 0x...>
    """
    if isinstance(type_, Shape):
        return type_
    type_map = DEFAULT_TYPE_MAP if settings is None else _type_map_for_settings(settings)
    return Shape.from_type(type_, type_map=type_map)
