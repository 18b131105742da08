from typing import Iterator, Optional

from hashbench.utils.kvpair import KVPair
from hashbench.utils.probes import Probes


class _Node:
    __slots__ = ('pair', 'next')

    def __init__(self, pair: KVPair, next: Optional['_Node'] = None):
        self.pair = pair
        self.next = next


class KVPairList:
    """
    A singly-linked list of KVPairs, kept in insertion order. Lookups and removals report their cost the same way the
    hash tables do: one probe per node inspected, and one probe for looking into an empty list.
    """
    def __init__(self):
        self._head = None  # type: Optional[_Node]
        self._tail = None  # type: Optional[_Node]
        self._size = 0

    def add_back(self, key: str, value: str):
        """Append a pair to the end of the list"""
        node = _Node(KVPair(key, value))
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def add_front(self, key: str, value: str):
        """Prepend a pair to the front of the list"""
        node = _Node(KVPair(key, value), self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def get_value(self, key: str) -> Probes:
        """Find the first pair with the given key"""
        probes = 0
        node = self._head
        while node is not None:
            probes += 1
            if node.pair.key == key:
                return Probes(node.pair.value, probes)
            node = node.next
        return Probes.absent(max(probes, 1))

    def remove_by_key(self, key: str) -> Probes:
        """Unlink the first pair with the given key and return its value"""
        probes = 0
        previous = None
        node = self._head
        while node is not None:
            probes += 1
            if node.pair.key == key:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                return Probes(node.pair.value, probes)
            previous, node = node, node.next
        return Probes.absent(max(probes, 1))

    def contains_key(self, key: str) -> bool:
        return any(pair.key == key for pair in self)

    def contains_value(self, value: str) -> bool:
        return any(pair.value == value for pair in self)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self):
        return self._size

    def __iter__(self) -> Iterator[KVPair]:
        node = self._head
        while node is not None:
            yield node.pair
            node = node.next

    def __repr__(self):
        return f"<{self.__class__.__name__} [{', '.join(str(pair) for pair in self)}]>"
