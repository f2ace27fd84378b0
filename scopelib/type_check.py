from collections.abc import Mapping, MutableMapping


def is_mapping(obj):
	return isinstance(obj, Mapping)


def is_mutable_mapping(obj):
	"""
	Check if the object can serve as a layer: a mapping that accepts item assignment and deletion.

	Args:
	obj (object): The object to be checked.

	Returns:
	bool: True if the object is a MutableMapping. False otherwise.
	"""
	return isinstance(obj, MutableMapping)
