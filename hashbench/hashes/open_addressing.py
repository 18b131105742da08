import logging

from typing import Iterator, List, Optional, Tuple

from hashbench.hashes.deletion import DeletionPolicy, deletion_policy
from hashbench.hashes.hash_table import HashTable, hash_key
from hashbench.hashes.slots import EMPTY, TOMBSTONE, Occupied, Slot
from hashbench.utils.kvpair import KVPair
from hashbench.utils.primes import PrimeGenerator
from hashbench.utils.probes import Probes

MAX_LOAD_FACTOR = 0.5


class OpenAddressingHashTable(HashTable):
    """
    Shared core of the open-addressing strategies. Owns the slot list, the live and tombstone counts, the capacity
    source and the deletion policy; subclasses supply the probe sequence, the placement algorithm and the repair that
    follows a hard deletion.

    @param soft: Use soft (tombstone) deletion instead of hard deletion. Ignored if a policy is given.
    @param prime_generator: The capacity source. Defaults to a fresh PrimeGenerator.
    @param deletion: An explicit deletion policy.
    """
    def __init__(
            self,
            soft: bool = False,
            prime_generator: PrimeGenerator = None,
            deletion: DeletionPolicy = None
            ):
        self.logger = logging.getLogger(self.__class__.__name__)
        self._primes = prime_generator or PrimeGenerator()
        self._deletion = deletion or deletion_policy(soft)
        self._slots = [EMPTY] * self._primes.get_current_prime()  # type: List[Slot]
        self._count = 0
        self._tombstones = 0

    # Strategy hooks

    def _probe_sequence(self, home: int, capacity: int) -> Iterator[int]:
        """Yield the slot indices a key with this home slot visits, in order, without repeating forever"""
        raise NotImplementedError

    def _place(self, slots: List[Slot], pair: KVPair) -> Tuple[Optional[int], int]:
        """
        Put a pair into a slot list using this strategy's insertion algorithm. Returns the index the placement ended at
        (None when no free slot was reachable) and the probes spent.
        """
        raise NotImplementedError

    def _repair_after_removal(self, index: int) -> int:
        """Restore reachability after the slot at index was hard-emptied; returns the probes spent"""
        raise NotImplementedError

    def _stops_search(self, slot_key: str, key: str) -> bool:
        """Whether meeting slot_key proves key is not further along the probe sequence"""
        return False

    # Public interface

    def put(self, key: str, value: str) -> Probes:
        """
        Insert a pair, growing first if the new entry would bring the load to the maximum load factor. Returns the value
        and the probes spent, resize probes included. If the probe sequence reaches no free slot nothing is inserted and
        the result is absent, still carrying the probes spent.
        """
        self._check_put_arguments(key, value)
        pair = KVPair(key, value)

        probes = 0
        if (self._deletion.load(self) + 1) / len(self._slots) >= MAX_LOAD_FACTOR:
            probes += self._grow()

        index, placement_probes = self._insert(pair)
        probes += placement_probes
        if index is None:
            self.logger.warning(f"no free slot reachable for {key!r} at capacity {len(self._slots)}, not inserted")
            return Probes.absent(probes)
        return Probes(value, probes)

    def get(self, key: str) -> Probes:
        if key is None:
            return Probes.absent(0)
        index, probes = self._search(key)
        if index is None:
            return Probes.absent(probes)
        return Probes(self._slots[index].pair.value, probes)

    def remove(self, key: str) -> Probes:
        if key is None:
            return Probes.absent(0)
        index, probes = self._search(key)
        if index is None:
            return Probes.absent(probes)
        value = self._slots[index].pair.value
        probes += self._deletion.vacate(self, index)
        return Probes(value, probes)

    def contains_key(self, key: str) -> bool:
        return any(slot.is_occupied() and slot.pair.key == key for slot in self._slots)

    def contains_value(self, value: str) -> bool:
        return any(slot.is_occupied() and slot.pair.value == value for slot in self._slots)

    def size(self) -> int:
        return self._count

    def capacity(self) -> int:
        return len(self._slots)

    def tombstones(self) -> int:
        return self._tombstones

    @property
    def soft(self) -> bool:
        return self._deletion.soft

    @property
    def load_factor(self) -> float:
        """The ratio the resize threshold is checked against, tombstones included under soft deletion"""
        return self._deletion.load(self) / len(self._slots)

    @property
    def slots(self) -> Tuple[Slot, ...]:
        """A snapshot of the slot list"""
        return tuple(self._slots)

    def items(self) -> Iterator[KVPair]:
        for slot in self._slots:
            if slot.is_occupied():
                yield slot.pair

    # Shared machinery

    def _hash(self, key: str) -> int:
        return hash_key(key, len(self._slots))

    def _search(self, key: str) -> Tuple[Optional[int], int]:
        """Walk the probe sequence for key; returns the index holding it (or None) and the probes spent"""
        probes = 0
        for index in self._probe_sequence(self._hash(key), len(self._slots)):
            slot = self._slots[index]
            probes += 1
            if slot.is_empty():
                break
            if slot.is_tombstone():
                continue
            if slot.pair.key == key:
                return index, probes
            if self._stops_search(slot.pair.key, key):
                break
        return None, probes

    def _insert(self, pair: KVPair) -> Tuple[Optional[int], int]:
        """Place a pair into the live slot list and count it"""
        index, probes = self._place(self._slots, pair)
        if index is not None:
            self._count += 1
        return index, probes

    def _occupy(self, slots: List[Slot], index: int, pair: KVPair):
        if slots is self._slots and slots[index].is_tombstone():
            self._tombstones -= 1
        slots[index] = Occupied(pair)

    def _mark_tombstone(self, index: int):
        assert self._slots[index].is_occupied(), "Only live slots can be tombstoned"
        self._slots[index] = TOMBSTONE
        self._count -= 1
        self._tombstones += 1

    def _mark_empty(self, index: int):
        assert self._slots[index].is_occupied(), "Only live slots can be emptied"
        self._slots[index] = EMPTY
        self._count -= 1

    def _grow(self) -> int:
        old_capacity = len(self._slots)
        probes = self._resize(self._primes.get_next_prime())
        self.logger.debug(f"resized from {old_capacity} to {len(self._slots)} slots in {probes} probes")
        return probes

    def _resize(self, capacity: int) -> int:
        """
        Replace the slot list with a fresh one of the given capacity and re-place every live pair into it with this
        strategy's placement algorithm. Tombstones are dropped. Every old slot scanned and every new slot visited is a
        probe.
        """
        new_slots = [EMPTY] * capacity  # type: List[Slot]
        probes = 0
        live = 0
        for slot in self._slots:
            probes += 1
            if not slot.is_occupied():
                continue
            index, placement_probes = self._place(new_slots, slot.pair)
            if index is None:
                raise RuntimeError(f"could not re-place {slot.pair} into {capacity} slots")
            probes += placement_probes
            live += 1

        self._slots = new_slots
        self._count = live
        self._tombstones = 0
        return probes

    def __repr__(self):
        return f"<{self.__class__.__name__} size: {self._count}, capacity: {len(self._slots)}, " \
               f"tombstones: {self._tombstones}, deletion: {self._deletion}>"
