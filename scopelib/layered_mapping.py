import sys

from scopelib.default import default_or_raise
from scopelib.nothing import nothing, is_undefined
from scopelib.type_check import is_mapping, is_mutable_mapping


class Binding:
    """
    Handle on one entry of one specific layer, as returned by LayeredMapping.get_mut().

    Reading and writing through a binding always addresses the layer that held the key when the
    binding was made, which may be a layer below the top one. A binding is only valid while its
    layer is on the stack: once the layer is popped, writes go to the detached layer and are no
    longer visible through the LayeredMapping.

    Attributes:
        layer (MutableMapping): The layer holding the entry.
        key: The key of the entry.
        depth (int): Index of the layer in the stack, 0 being the base layer.
    """

    def __init__(self, layer, key, depth):
        self.layer = layer
        self.key = key
        self.depth = depth

    @property
    def value(self):
        return self.layer[self.key]

    @value.setter
    def value(self, new_value):
        self.layer[self.key] = new_value

    def get(self):
        return self.value

    def set(self, new_value):
        """
        Replace the value in the binding's own layer and return the value it replaced.
        """
        previous = self.layer[self.key]
        self.layer[self.key] = new_value
        return previous

    def __repr__(self):
        return f"Binding[{self.depth}]({self.key!r}: {self.value!r})"


class LayeredMapping:
    """A stack of independent mappings (layers) that is read as one mapping.

    Keys are resolved by searching the layers from the most recent one (top) back to the base
    layer; the first layer holding the key provides the value. Writes go to the top layer, where
    they shadow same-named entries of the layers below. The stack is never empty: popping the last
    remaining layer clears the base layer instead of removing it.

    Keys follow the dict contract, so any key-equivalent object (equal, with equal hash) finds an
    entry stored under a different but equivalent key.

    Attributes:
        layers (list of MutableMapping): The layers, base layer first, top layer last.
        layer_factory (Callable[[], MutableMapping]): Creates the empty mapping for each new layer.
    """

    def __init__(self, base=None, layer_factory=dict):
        """
        Initialize the stack with a single base layer.

        Args:
            base (Mapping, optional): Entries of the base layer. They are copied into a new layer.
                Defaults to an empty base layer.
            layer_factory (callable, optional): Zero-argument callable creating an empty
                MutableMapping for each new layer. Defaults to dict.

        Raises:
            TypeError: If base is not a mapping, or layer_factory does not produce a MutableMapping.
        """
        self.layer_factory = layer_factory
        self.layers = [self._new_layer(nothing if base is None else base)]

    def _new_layer(self, entries=nothing):
        layer = self.layer_factory()
        if not is_mutable_mapping(layer):
            raise TypeError(f"layer_factory produced {type(layer).__name__}, not a MutableMapping.")
        if entries is not nothing:
            if not is_mapping(entries):
                raise TypeError(f"Layer entries must be a mapping, got {type(entries).__name__}.")
            layer.update(entries)
        return layer

    @property
    def depth(self):
        """Number of layers on the stack, never less than 1."""
        return len(self.layers)

    @property
    def top(self):
        """The layer that receives all writes."""
        return self.layers[-1]

    def insert(self, key, value):
        """
        Set a key-value pair in the top layer.

        Lower layers are left untouched: an entry for the same key below the top layer is shadowed,
        not replaced.

        Args:
            key: The key to set.
            value: The value to associate with the key.

        Returns:
            The value the top layer held for key before, or nothing if the top layer had no entry
            for it (even when a lower layer has one).
        """
        top = self.layers[-1]
        previous = top[key] if key in top else nothing
        top[key] = value
        return previous

    def get(self, key, default=nothing):
        """
        Retrieve the effective value of a key.

        Args:
            key: The key to look up.
            default (optional): Returned if no layer holds the key. If it is an exception instance,
                it is raised instead. Defaults to nothing.

        Returns:
            The value from the most recent layer holding the key, or default.
        """
        for layer in reversed(self.layers):
            if key in layer:
                return layer[key]
        return default_or_raise(default)

    def get_mut(self, key, default=nothing):
        """
        Find the entry providing the effective value of a key, for in-place modification.

        The search order is that of get(), but the result is a Binding onto the layer that holds
        the key, so writing through it changes that layer, even if it is below the top layer, and
        does not add a shadowing entry to the top layer.

        Args:
            key: The key to look up.
            default (optional): Returned if no layer holds the key. If it is an exception instance,
                it is raised instead. Defaults to nothing.

        Returns:
            Binding: The binding of the key, or default.
        """
        for depth in range(len(self.layers) - 1, -1, -1):
            layer = self.layers[depth]
            if key in layer:
                return Binding(layer, key, depth)
        return default_or_raise(default)

    def assign(self, key, value, default=nothing):
        """
        Rebind the effective entry of key in whichever layer holds it and return the value it had.
        If no layer holds the key, nothing is written and default is returned (or raised).
        """
        binding = self.get_mut(key, None)
        if is_undefined(binding):
            return default_or_raise(default, message='assignment needs an existing binding')
        return binding.set(value)

    def push_layer(self):
        """Append an empty layer; it becomes the target of all writes until it is popped."""
        self.layers.append(self._new_layer())

    def push_layer_with(self, mapping):
        """
        Append a layer holding a copy of the entries of mapping.

        Args:
            mapping (Mapping): The initial entries of the new layer.

        Raises:
            TypeError: If mapping is not a mapping.
        """
        self.layers.append(self._new_layer(mapping))

    def pop_layer(self):
        """
        Remove the top layer and return it.

        With more than one layer on the stack, the top layer is removed and the layer below
        becomes the top. The base layer is never removed: when it is the only layer, it is
        replaced by an empty layer and returned with its contents, leaving the depth at 1.

        Returns:
            MutableMapping: The layer that was on top, owned by the caller from now on.
        """
        if len(self.layers) == 1:
            base = self.layers[0]
            self.layers[0] = self._new_layer()
            return base
        return self.layers.pop()

    def __getitem__(self, key):
        """
        Retrieve the effective value of a key.

        Raises:
            KeyError: If the key is not found in any layer.
        """
        value = self.get(key)
        if value is nothing and key not in self:
            raise KeyError(f"Key '{key}' not found in any layer.")
        return value

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __delitem__(self, key):
        """
        Remove a key from the top layer.

        Raises:
            PermissionError: If the key exists only in lower layers.
            KeyError: If the key is not found.
        """
        top = self.layers[-1]
        if key in top:
            del top[key]
        elif key in self:
            raise PermissionError(f"Key '{key}' exists only in lower layers and cannot be removed.")
        else:
            raise KeyError(f"Key '{key}' not found.")

    def __contains__(self, key):
        return any(key in layer for layer in self.layers)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.layers!r})"

    def dump(self, stream=None):
        """
        Write the layers to the provided stream or stdout, one line per layer, top layer first.
        """
        if stream is None:
            stream = sys.stdout
        for depth in range(len(self.layers) - 1, -1, -1):
            print(f"[{depth}] {self.layers[depth]!r}", file=stream)
