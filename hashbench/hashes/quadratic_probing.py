from typing import Iterator, List, Optional, Tuple

from hashbench.hashes.hash_table import hash_key
from hashbench.hashes.open_addressing import OpenAddressingHashTable
from hashbench.hashes.slots import Slot
from hashbench.utils.kvpair import KVPair


class QuadraticProbingHashTable(OpenAddressingHashTable):
    """
    Open addressing with quadratic probing. The n-th alternative after a collision at the home slot is
    (home + n^2 + n) mod capacity, which spreads colliding keys out and avoids primary clustering at the cost of
    locality. The sequence only reaches about half of a prime-sized table, so insertion gives up (without inserting)
    once it comes back around to the home slot.

    A hard deletion rebuilds the whole table at its current capacity; with a non-linear probe sequence there is no
    well defined cluster to repair locally.
    """

    def _probe_sequence(self, home: int, capacity: int) -> Iterator[int]:
        yield home
        n = 1
        while True:
            index = (home + n * n + n) % capacity
            if index == home:
                return
            yield index
            n += 1

    def _place(self, slots: List[Slot], pair: KVPair) -> Tuple[Optional[int], int]:
        capacity = len(slots)
        probes = 0
        for index in self._probe_sequence(hash_key(pair.key, capacity), capacity):
            probes += 1
            if not slots[index].is_occupied():
                self._occupy(slots, index, pair)
                return index, probes
        return None, probes

    def _repair_after_removal(self, index: int) -> int:
        probes = self._resize(len(self._slots))
        self.logger.debug(f"rebuilt {len(self._slots)} slots after removal in {probes} probes")
        return probes
