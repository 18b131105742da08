from typing import Optional


class Probes:
    """
    The outcome of a table operation: the value involved (or nothing, when the key was absent) and the number of slot
    inspections the operation took.

    @param value: The value found, placed or removed. None means absent; tables never store None values.
    @param probes: The number of probes performed.
    """
    def __init__(self, value: Optional[str], probes: int):
        assert probes >= 0, "Probe counts cannot be negative"
        self._value = value
        self._probes = probes

    @classmethod
    def absent(cls, probes: int = 0) -> 'Probes':
        """A not-found result carrying the probes spent finding out"""
        return cls(None, probes)

    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def probes(self) -> int:
        return self._probes

    @property
    def found(self) -> bool:
        return self._value is not None

    def __eq__(self, other):
        if isinstance(other, Probes):
            return self._value == other._value and self._probes == other._probes
        return NotImplemented

    def __hash__(self):
        return hash((self._value, self._probes))

    def __repr__(self):
        if not self.found:
            return f"<{self.__class__.__name__} absent, probes: {self._probes}>"
        return f"<{self.__class__.__name__} value: {self._value!r}, probes: {self._probes}>"
