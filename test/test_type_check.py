import unittest
from collections import OrderedDict
from types import MappingProxyType

from scopelib.type_check import is_mapping, is_mutable_mapping


class TestTypeCheck(unittest.TestCase):
	def test_is_mapping(self):
		self.assertTrue(is_mapping({}))
		self.assertTrue(is_mapping(MappingProxyType({'a': 1})))
		self.assertFalse(is_mapping([('a', 1)]))
		self.assertFalse(is_mapping(None))

	def test_is_mutable_mapping(self):
		self.assertTrue(is_mutable_mapping({}))
		self.assertTrue(is_mutable_mapping(OrderedDict()))
		self.assertFalse(is_mutable_mapping(MappingProxyType({})))
		self.assertFalse(is_mutable_mapping([]))


if __name__ == '__main__':
	unittest.main()
