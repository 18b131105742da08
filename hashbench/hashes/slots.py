from hashbench.utils.kvpair import KVPair


class Slot:
    """One position of an open-addressing table: empty, a tombstone, or occupied by a KVPair"""
    __slots__ = ()

    def is_empty(self) -> bool:
        return False

    def is_tombstone(self) -> bool:
        return False

    def is_occupied(self) -> bool:
        return False


class _EmptySlot(Slot):
    __slots__ = ()

    def is_empty(self) -> bool:
        return True

    def __repr__(self):
        return "<Empty>"


class _TombstoneSlot(Slot):
    __slots__ = ()

    def is_tombstone(self) -> bool:
        return True

    def __repr__(self):
        return "<Tombstone>"


class Occupied(Slot):
    """A slot holding a live KVPair"""
    __slots__ = ('_pair',)

    def __init__(self, pair: KVPair):
        self._pair = pair

    @property
    def pair(self) -> KVPair:
        return self._pair

    def is_occupied(self) -> bool:
        return True

    def __eq__(self, other):
        if isinstance(other, Occupied):
            return self._pair == other._pair
        return NotImplemented

    def __hash__(self):
        return hash(self._pair)

    def __repr__(self):
        return f"<Occupied {self._pair.key!r}: {self._pair.value!r}>"


# Stateless markers; every empty or tombstoned slot shares these instances
EMPTY = _EmptySlot()
TOMBSTONE = _TombstoneSlot()
