from typing import Iterator, List, Optional, Tuple

from hashbench.hashes.hash_table import hash_key
from hashbench.hashes.open_addressing import OpenAddressingHashTable
from hashbench.hashes.slots import EMPTY, Slot
from hashbench.utils.kvpair import KVPair


class LinearProbingHashTable(OpenAddressingHashTable):
    """
    Open addressing with linear probing: a collision moves on to the next slot, wrapping at the end of the table.
    Simple and cache friendly, but prone to primary clustering.

    Under hard deletion, removing a pair empties its slot and re-places every pair in the cluster that followed it,
    so no pair whose probe path crossed the freed slot becomes unreachable.
    """

    def _probe_sequence(self, home: int, capacity: int) -> Iterator[int]:
        for offset in range(capacity):
            yield (home + offset) % capacity

    def _place(self, slots: List[Slot], pair: KVPair) -> Tuple[Optional[int], int]:
        capacity = len(slots)
        probes = 0
        for index in self._probe_sequence(hash_key(pair.key, capacity), capacity):
            probes += 1
            if not slots[index].is_occupied():  # empty, or a tombstone that can be reused
                self._occupy(slots, index, pair)
                return index, probes
        return None, probes

    def _repair_after_removal(self, index: int) -> int:
        capacity = len(self._slots)
        probes = 0
        current = (index + 1) % capacity
        for _ in range(capacity):
            probes += 1
            slot = self._slots[current]
            if not slot.is_occupied():
                break
            # Lift the pair out and put it back; it lands at or before its old slot
            self._slots[current] = EMPTY
            self._count -= 1
            _, placement_probes = self._insert(slot.pair)
            probes += placement_probes
            current = (current + 1) % capacity
        return probes
