class KVPair:
    """
    An immutable key/value record of two strings.

    @param key: The record's key
    @param value: The record's value
    """
    __slots__ = ('_key', '_value')

    def __init__(self, key: str, value: str):
        if key is None or value is None:
            raise ValueError("KVPair key and value cannot be None")
        assert isinstance(key, str) and isinstance(value, str), "KVPair fields must be strings"
        self._key = key
        self._value = value

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> str:
        return self._value

    def __eq__(self, other):
        if isinstance(other, KVPair):
            return self._key == other._key and self._value == other._value
        return NotImplemented

    def __hash__(self):
        return hash((self._key, self._value))

    def __iter__(self):
        yield self._key
        yield self._value

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._key!r}: {self._value!r}>"
