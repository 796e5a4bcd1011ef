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

from collections.abc import Iterable
from typing import Any

from typing_extensions import Self, override

from nothingness.serialization import Deserializer, Serializer
from nothingness.serialization.compound_encoding.collection import decode_collection, encode_collection
from nothingness.serialization.compound_encoding.tuple import decode_tuple, encode_tuple
from nothingness.shapes.shape import Shape
from nothingness.utils.typing import get_args, get_origin


# XXX: we can't usefully describe the tuple type
class TupleShape(Shape[tuple]):
    """ Represents tuple values, which can either be homogeneous-type variable size or heterogeneous-type fixed size.

    A fixed size tuple is a tuple in the protocol (each member is checked on its own), while a variable size tuple is
    a sequence.
    """

    __slots__ = ('_is_hashable', '_varsize', '_args')

    _varsize: bool
    _args: tuple[Shape, ...]

    def __init__(self, args: Shape | Iterable[Shape]) -> None:
        if isinstance(args, Shape):
            self._varsize = True
            self._args = (args,)
            self._is_hashable = args.is_hashable()
        else:
            self._varsize = False
            self._args = tuple(args)
            for arg in self._args:
                assert isinstance(arg, Shape)
            self._is_hashable = all(arg_shape.is_hashable() for arg_shape in self._args)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        origin_type = get_origin(type_)
        if origin_type is None:
            raise TypeError('expected tuple[<args...>]')
        if not issubclass(origin_type, tuple):
            raise TypeError('expected tuple type')
        args = list(get_args(type_))
        if args and args[-1] is Ellipsis:
            if len(args) != 2:
                raise TypeError('ellipsis only allowed with one type: tuple[T, ...]')
            arg, _ellipsis = args
            return cls(Shape.from_type(arg, type_map=type_map))
        else:
            return cls(Shape.from_type(arg, type_map=type_map) for arg in args)

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, tuple):
            raise TypeError('expected tuple')
        if not self._varsize and len(value) != len(self._args):
            raise TypeError('wrong tuple size')
        if deep:
            if self._varsize:
                arg_shape, = self._args
                for i in value:
                    arg_shape._check_value(i, deep=True)
            else:
                for i, arg_shape in zip(value, self._args):
                    arg_shape._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: tuple, /) -> None:
        if self._varsize:
            encode_collection(serializer, value, self._args[0].serialize)
        else:
            encode_tuple(serializer, value, tuple(i.serialize for i in self._args))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> tuple:
        if self._varsize:
            return decode_collection(deserializer, self._args[0].deserialize, tuple)
        else:
            return decode_tuple(deserializer, tuple(i.deserialize for i in self._args))
