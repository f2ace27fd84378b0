class SingletonMeta(type):
	"""
	Metaclass that hands out one shared instance per class: every call to the class after the
	first returns the instance created by the first call.
	"""
	_instances = {}

	def __call__(cls, *args, **kwargs):
		if cls not in cls._instances:
			cls._instances[cls] = super().__call__(*args, **kwargs)
		return cls._instances[cls]
