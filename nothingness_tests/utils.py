from typing import Any, Callable, Optional

from nothingness.serialization import (
    END,
    Deserializer,
    MapAccess,
    SeqAccess,
    SerializeMap,
    SerializeSeq,
    SerializeStruct,
    Serializer,
)
from nothingness.shapes.str_shape import StrVisitor


class ListSeq(SeqAccess):
    """A sequence where each element is read from its own deserializer."""

    def __init__(self, deserializers: list[Deserializer]) -> None:
        self.deserializers = deserializers

    def next_element(self, decoder, /):
        if not self.deserializers:
            return END
        return decoder(self.deserializers.pop(0))

    def size_hint(self) -> int:
        return len(self.deserializers)


class PairsMap(MapAccess):
    """A map where each key and each value is read from its own deserializer."""

    def __init__(self, pairs: list[tuple[Deserializer, Deserializer]]) -> None:
        self.pairs = pairs
        self.pending: Optional[Deserializer] = None

    def next_key(self, decoder, /):
        if not self.pairs:
            return END
        key, self.pending = self.pairs.pop(0)
        return decoder(key)

    def next_value(self, decoder, /):
        assert self.pending is not None
        value, self.pending = self.pending, None
        return decoder(value)


def scripted(**handlers: Callable[..., Any]) -> Deserializer:
    """ Build a deserializer where each `deserialize_<x>` is given by `handlers[x]`, anything else is unexpected.

    Handlers are called with the same arguments as the method, visitor included.
    """
    def unexpected(name: str) -> Callable[..., Any]:
        def method(self: Any, *args: Any) -> Any:
            raise AssertionError(f'unexpected call to {name}')
        return method

    namespace: dict[str, Any] = {name: unexpected(name) for name in Deserializer.__abstractmethods__}
    for shape, handler in handlers.items():
        namespace[f'deserialize_{shape}'] = staticmethod(handler)
    cls = type('ScriptedDeserializer', (Deserializer,), namespace)
    return cls()


def text(value: str) -> Deserializer:
    """A deserializer that has a single string, whatever is asked for."""
    def visit(*args: Any) -> Any:
        return args[-1].visit_str(value)
    return scripted(str=visit, string=visit, identifier=visit, any=visit, ignored_any=visit)


def number(value: int) -> Deserializer:
    """A deserializer that has a single unsigned integer, whatever is asked for."""
    def visit(*args: Any) -> Any:
        return args[-1].visit_u64(value)
    return scripted(
        u8=visit, u16=visit, u32=visit, u64=visit, i64=visit, identifier=visit, any=visit, ignored_any=visit,
    )


def decode_text(deserializer: Deserializer) -> str:
    return deserializer.deserialize_str(StrVisitor(deserializer))


class RecordingCompound(SerializeSeq, SerializeMap, SerializeStruct):
    """A sub-serializer for every compound shape, all it does is to log what it's given."""

    def __init__(self, log: list[tuple[Any, ...]]) -> None:
        self.log = log

    def serialize_element(self, value, encoder, /):
        self.log.append(('element', value))

    def serialize_key(self, key, encoder, /):
        self.log.append(('key', key))

    def serialize_value(self, value, encoder, /):
        self.log.append(('value', value))

    def serialize_field(self, *args):
        # XXX: struct fields have a key, tuple struct fields don't
        *key, value, _encoder = args
        self.log.append(('field', *key, value))

    def end(self):
        self.log.append(('end',))


_COMPOUND_METHODS = {
    'serialize_seq',
    'serialize_tuple',
    'serialize_tuple_struct',
    'serialize_tuple_variant',
    'serialize_map',
    'serialize_struct',
    'serialize_struct_variant',
}
_WRAPPER_METHODS = {'serialize_some', 'serialize_newtype_struct', 'serialize_newtype_variant'}


def _make_method(name: str) -> Any:
    def method(self: Any, *args: Any) -> Any:
        self.log.append((name, *(arg for arg in args if not callable(arg))))
        if name in _WRAPPER_METHODS:
            *_, value, encoder = args
            encoder(self, value)
        if name in _COMPOUND_METHODS:
            return RecordingCompound(self.log)
        return None
    return method


# every abstract method just logs its call, so the provided shortcuts can be checked
RecordingSerializer: Any = type(
    'RecordingSerializer',
    (Serializer,),
    {
        '__init__': lambda self: setattr(self, 'log', []),
        **{name: _make_method(name) for name in Serializer.__abstractmethods__},
    },
)
