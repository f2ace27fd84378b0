from scopelib.singleton import SingletonMeta


class Nothing(metaclass=SingletonMeta):
	'''
	'nothing' is an alternative None. Lookups answer 'nothing' when no layer holds the key,
	which keeps None available as a value that may be stored in a layer.
	'''
	@classmethod
	def instance(cls):
		return cls()

	def __eq__(self, other):
		if type(other) == Nothing:
			return True
		return False

	def __hash__(self):
		return hash(Nothing)

	def __bool__(self):
		return False

	def __repr__(self):
		return 'nothing'


nothing = Nothing.instance()


def is_undefined(obj):
	return obj is None or obj is nothing


def is_defined(obj):
	return obj is not None and obj is not nothing
