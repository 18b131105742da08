from typing import List, Optional, Tuple

from hashbench.hashes.hash_table import hash_key
from hashbench.hashes.linear_probing import LinearProbingHashTable
from hashbench.hashes.slots import Occupied, Slot
from hashbench.utils.kvpair import KVPair


class OrderedLinearProbingHashTable(LinearProbingHashTable):
    """
    Linear probing that keeps every cluster sorted by key along the probe direction. Insertion works like insertion
    sort into the chain: whenever the pair being carried meets a larger key, the two swap and the larger one is carried
    on. Tombstones are stepped over, never swapped against and never reused.

    The payoff is on misses: a search can stop as soon as it meets a key greater than the one sought.
    """

    def _place(self, slots: List[Slot], pair: KVPair) -> Tuple[Optional[int], int]:
        capacity = len(slots)
        carried = pair
        probes = 0
        for index in self._probe_sequence(hash_key(pair.key, capacity), capacity):
            probes += 1
            slot = slots[index]
            if slot.is_empty():
                self._occupy(slots, index, carried)
                return index, probes
            if slot.is_occupied() and slot.pair.key > carried.key:
                slots[index] = Occupied(carried)
                carried = slot.pair
        return None, probes

    def _stops_search(self, slot_key: str, key: str) -> bool:
        return slot_key > key
