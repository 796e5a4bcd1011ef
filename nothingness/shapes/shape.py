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

from abc import ABC, abstractmethod
from typing import Any, Generic, NamedTuple, TypeVar, final

from typing_extensions import Self

from nothingness.serialization import Deserializer, Serializer
from nothingness.shapes.utils import TypeAliasMap, TypeToShapeMap, get_aliased_type, get_usable_origin_type

T = TypeVar('T')


class Shape(ABC, Generic[T]):
    """ This class is used to model a Python type and how its values drive the structured-data protocol.

    A `Shape` knows which `Serializer` methods to call for a value of its type and which `Deserializer` method to ask
    for (and which visitor to give it) to get a value back. Shapes are built from annotations with `Shape.from_type`,
    compound shapes (optionals, collections, dataclasses, ...) build the shapes of their members recursively.

    Both `Shape.serialize` and `Shape.deserialize` match the `Encoder`/`Decoder` signatures, so they can be passed
    directly to the compound methods of the protocol.
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        shapes_map: TypeToShapeMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: subclasses must initialize this property
    _is_hashable: bool

    @final
    @staticmethod
    def from_type(type_: Any, /, *, type_map: TypeMap) -> Shape[Any]:
        """ Instantiate a Shape instance from a type signature using the given maps.

        The `shapes_map` associates concrete types to concrete Shape classes, while the `alias_map` associates types
        with substitute types to use instead.
        """
        usable_origin = get_usable_origin_type(type_, type_map=type_map)
        shape = type_map.shapes_map[usable_origin]
        # XXX: first we try to create the shape without making an alias, this ensures that an invalid annotation
        #      would not be accepted
        _ = shape._from_type(type_, type_map=type_map)
        # XXX: then we create the actual shape with type-alias
        aliased_type = get_aliased_type(type_, type_map.alias_map)
        return shape._from_type(aliased_type, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeMap) -> Self:
        """ Instantiate a Shape instance from a type signature.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        use `Shape.from_type` with the given `type_map` for the types of its members.
        """
        # XXX: a Shape that is only meant for local use does not need to implement _from_type
        raise TypeError(f'{cls} is not compatible with use in a Shape.TypeMap')

    @final
    def is_hashable(self) -> bool:
        """ Indicates whether the type being abstracted over is expected to be hashable.

        This is used to prevent unhashable types from being used as keys in dicts or members in sets."""
        return self._is_hashable

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a TypeError (or ValueError) if the value is not compatible with this shape.

        Compound values are checked recursively, for example all of a dict's keys and values are checked.
        """
        # XXX: subclasses must implement Shape._check_value, not Shape.check_value
        self._check_value(value, deep=True)

    @final
    def serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Serialize a value according to the signature that was abstracted.

        The value is checked while it is being serialized, so calling check_value before calling serialize is not
        needed.
        """
        # XXX: subclasses must implement Shape._serialize, not Shape.serialize
        self._check_value(value, deep=False)
        self._serialize(serializer, value)

    @final
    def deserialize(self, deserializer: Deserializer, /) -> T:
        """ Deserialize a value according to the signature that was abstracted.

        Visitors are expected to only produce valid values, the shallow check made here is only a double check.
        """
        # XXX: subclasses must implement Shape._deserialize, not Shape.deserialize
        value = self._deserialize(deserializer)
        self._check_value(value, deep=False)
        return value

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `Shape.check_value`.

        Compound values should use `Shape._check_value` on the inner shape(s) and pass the appropriate deep argument.
        With `deep=False` the recursion is made externally (by `serialize`/`deserialize` of each member).
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `serialize`, you can assume that the given value has been "shallow checked".

        Members should be given `Shape.serialize` as their encoder (not `Shape._serialize`) so that each one of them
        is checked as well.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        """ Inner implementation of `deserialize`.

        Members should be given `Shape.deserialize` as their decoder.
        """
        raise NotImplementedError
