from typing import Iterator

from hashbench.utils.kvpair import KVPair
from hashbench.utils.probes import Probes


def string_hash(key: str) -> int:
    """
    A process-independent 32-bit string hash: the polynomial s[0]*31^(n-1) + ... + s[n-1] over UTF-16 code units,
    wrapped to a signed 32-bit integer. Python's builtin hash() is salted per interpreter, which would make probe counts
    unrepeatable between runs.
    """
    h = 0
    data = key.encode('utf-16-be', 'surrogatepass')
    for i in range(0, len(data), 2):
        h = (31 * h + ((data[i] << 8) | data[i + 1])) & 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h


def hash_key(key: str, capacity: int) -> int:
    """Map a key to its home slot; the top bit is masked so the index is never negative"""
    return (string_hash(key) & 0x7FFFFFFF) % capacity


class HashTable:
    """
    The interface every table strategy honours. Keys and values are strings, and every lookup or mutation reports how
    many probes it took so that strategies can be compared under identical workloads.
    """
    def put(self, key: str, value: str) -> Probes:
        """Insert a pair. Raises ValueError if either argument is None, without touching the table"""
        raise NotImplementedError

    def get(self, key: str) -> Probes:
        """Look a key up. A None key is absent and costs no probes"""
        raise NotImplementedError

    def remove(self, key: str) -> Probes:
        """Remove a key and return its value. A None key is absent and costs no probes"""
        raise NotImplementedError

    def contains_key(self, key: str) -> bool:
        raise NotImplementedError

    def contains_value(self, value: str) -> bool:
        raise NotImplementedError

    def size(self) -> int:
        """Number of live pairs"""
        raise NotImplementedError

    def capacity(self) -> int:
        """Current number of slots or buckets, always prime"""
        raise NotImplementedError

    def items(self) -> Iterator[KVPair]:
        """Iterate over the live pairs in storage order"""
        raise NotImplementedError

    def _hash(self, key: str) -> int:
        return hash_key(key, self.capacity())

    @staticmethod
    def _check_put_arguments(key: str, value: str):
        if key is None or value is None:
            raise ValueError("put() does not accept None keys or values")

    def __len__(self):
        return self.size()

    def __contains__(self, key):
        return self.contains_key(key)

    def __iter__(self) -> Iterator[str]:
        for pair in self.items():
            yield pair.key
