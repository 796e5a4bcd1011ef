import copy
import pickle
import unittest

from nothingness.exception import NothingnessError
from nothingness.nothing import (
    Nothing,
    NothingDeserializeError,
    NothingDeserializer,
    NothingSerializeError,
    NothingSerializer,
)
from nothingness.serialization import DecodeError, Deserializer, EncodeError, Serializer


class NothingMarkerTestCase(unittest.TestCase):
    def test_is_both_sides(self) -> None:
        nothing = Nothing()
        self.assertIsInstance(nothing, Serializer)
        self.assertIsInstance(nothing, Deserializer)
        self.assertIsInstance(nothing, NothingSerializer)
        self.assertIsInstance(nothing, NothingDeserializer)

    def test_no_state(self) -> None:
        with self.assertRaises(AttributeError):
            Nothing().something = 1  # type: ignore[attr-defined]

    def test_equality(self) -> None:
        self.assertEqual(Nothing(), Nothing())
        self.assertFalse(Nothing() != Nothing())
        self.assertNotEqual(Nothing(), None)
        self.assertNotEqual(Nothing(), 0)
        self.assertNotEqual(Nothing(), ())

    def test_ordering(self) -> None:
        a, b = Nothing(), Nothing()
        self.assertFalse(a < b)
        self.assertFalse(a > b)
        self.assertTrue(a <= b)
        self.assertTrue(a >= b)
        self.assertEqual(sorted([a, b]), [Nothing(), Nothing()])
        self.assertEqual(max(a, b), Nothing())
        with self.assertRaises(TypeError):
            _ = a < 1  # type: ignore[operator]

    def test_hash(self) -> None:
        self.assertEqual(hash(Nothing()), hash(Nothing()))
        self.assertEqual(len({Nothing(), Nothing(), Nothing()}), 1)
        self.assertEqual({Nothing(): 1}[Nothing()], 1)

    def test_copy_and_pickle(self) -> None:
        nothing = Nothing()
        self.assertEqual(copy.copy(nothing), nothing)
        self.assertEqual(copy.deepcopy(nothing), nothing)
        self.assertEqual(copy.deepcopy([nothing, {'x': nothing}]), [Nothing(), {'x': Nothing()}])
        self.assertEqual(pickle.loads(pickle.dumps(nothing)), nothing)
        self.assertIsInstance(pickle.loads(pickle.dumps(nothing)), Nothing)

    def test_repr(self) -> None:
        self.assertEqual(repr(Nothing()), 'Nothing')
        self.assertEqual(str(Nothing()), 'Nothing')
        self.assertEqual(f'{[Nothing()]}', '[Nothing]')


class NothingErrorsTestCase(unittest.TestCase):
    def test_hierarchy(self) -> None:
        self.assertTrue(issubclass(NothingSerializeError, EncodeError))
        self.assertTrue(issubclass(NothingDeserializeError, DecodeError))
        self.assertTrue(issubclass(NothingSerializeError, NothingnessError))
        self.assertTrue(issubclass(NothingDeserializeError, NothingnessError))
        self.assertFalse(issubclass(NothingSerializeError, DecodeError))
        self.assertFalse(issubclass(NothingDeserializeError, EncodeError))

    def test_messages(self) -> None:
        self.assertEqual(str(NothingSerializeError()), 'Not nothing')
        self.assertEqual(str(NothingDeserializeError()), 'Something expected')
        self.assertEqual(repr(NothingSerializeError()), 'NothingSerializeError()')
        self.assertEqual(repr(NothingDeserializeError()), 'NothingDeserializeError()')

    def test_interchangeable(self) -> None:
        self.assertEqual(NothingSerializeError(), NothingSerializeError())
        self.assertEqual(NothingDeserializeError(), NothingDeserializeError())
        self.assertNotEqual(NothingSerializeError(), NothingDeserializeError())
        self.assertEqual(len({NothingSerializeError(), NothingSerializeError()}), 1)
        self.assertEqual(hash(NothingDeserializeError()), hash(NothingDeserializeError()))

    def test_pickle(self) -> None:
        for error in [NothingSerializeError(), NothingDeserializeError()]:
            restored = pickle.loads(pickle.dumps(error))
            self.assertEqual(restored, error)
            self.assertEqual(str(restored), str(error))
