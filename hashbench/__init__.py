from .hashes import HashTable, LinearProbingHashTable, OrderedLinearProbingHashTable, QuadraticProbingHashTable, \
    SeparateChainingHashTable
from .utils import KVPair, PrimeGenerator, Probes
