import unittest
from scopelib.nothing import Nothing, nothing, is_defined, is_undefined


class TestNothing(unittest.TestCase):
	def test_singleton(self):
		self.assertIs(Nothing(), nothing)
		self.assertIs(Nothing.instance(), nothing)

	def test_falsy_and_distinct_from_none(self):
		self.assertFalse(nothing)
		self.assertIsNot(nothing, None)
		self.assertNotEqual(nothing, None)
		self.assertEqual(nothing, Nothing())

	def test_defined(self):
		self.assertTrue(is_undefined(nothing))
		self.assertTrue(is_undefined(None))
		self.assertFalse(is_undefined(0))
		self.assertTrue(is_defined(0))
		self.assertFalse(is_defined(nothing))

	def test_repr_and_hash(self):
		self.assertEqual(repr(nothing), 'nothing')
		self.assertEqual({nothing: 1}[Nothing()], 1)


if __name__ == '__main__':
	unittest.main()
