import logging

from typing import Iterator, List

from hashbench.hashes.hash_table import HashTable, hash_key
from hashbench.utils.kvpair import KVPair
from hashbench.utils.kvpair_list import KVPairList
from hashbench.utils.primes import PrimeGenerator
from hashbench.utils.probes import Probes


class SeparateChainingHashTable(HashTable):
    """
    A bucket array of KVPairLists. Colliding pairs share a bucket, so there is no probing and no tombstones; the probe
    count of a lookup is the number of list nodes inspected. The table never resizes on its own; call enlarge() or
    shrink() to move to the next or previous prime.

    @param prime_generator: The capacity source. Defaults to a fresh PrimeGenerator.
    """
    def __init__(self, prime_generator: PrimeGenerator = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self._primes = prime_generator or PrimeGenerator()
        self._buckets = self._empty_buckets(self._primes.get_current_prime())
        self._count = 0

    @staticmethod
    def _empty_buckets(capacity: int) -> List[KVPairList]:
        return [KVPairList() for _ in range(capacity)]

    def put(self, key: str, value: str) -> Probes:
        self._check_put_arguments(key, value)
        self._buckets[self._hash(key)].add_back(key, value)
        self._count += 1
        return Probes(value, 1)

    def get(self, key: str) -> Probes:
        if key is None:
            return Probes.absent(0)
        return self._buckets[self._hash(key)].get_value(key)

    def remove(self, key: str) -> Probes:
        if key is None:
            return Probes.absent(0)
        result = self._buckets[self._hash(key)].remove_by_key(key)
        if result.found:
            self._count -= 1
        return result

    def contains_key(self, key: str) -> bool:
        if key is None:
            return False
        return self._buckets[self._hash(key)].contains_key(key)

    def contains_value(self, value: str) -> bool:
        return any(bucket.contains_value(value) for bucket in self._buckets)

    def size(self) -> int:
        return self._count

    def capacity(self) -> int:
        return len(self._buckets)

    def bucket(self, index: int) -> KVPairList:
        return self._buckets[index]

    def items(self) -> Iterator[KVPair]:
        for bucket in self._buckets:
            yield from bucket

    def enlarge(self):
        """Rehash every pair into a bucket array sized to the next prime"""
        self._rehash(self._primes.get_next_prime())

    def shrink(self):
        """Rehash every pair into a bucket array sized to the previous prime"""
        self._rehash(self._primes.get_previous_prime())

    def _hash(self, key: str) -> int:
        return hash_key(key, len(self._buckets))

    def _rehash(self, capacity: int):
        old_capacity = len(self._buckets)
        buckets = self._empty_buckets(capacity)
        for pair in self.items():
            buckets[hash_key(pair.key, capacity)].add_back(pair.key, pair.value)
        self._buckets = buckets
        self.logger.debug(f"rehashed {self._count} pairs from {old_capacity} to {capacity} buckets")

    def __repr__(self):
        return f"<{self.__class__.__name__} size: {self._count}, capacity: {len(self._buckets)}>"
