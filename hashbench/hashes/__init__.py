from .deletion import DeletionPolicy, HardDeletion, SoftDeletion, deletion_policy
from .hash_table import HashTable, hash_key, string_hash
from .linear_probing import LinearProbingHashTable
from .open_addressing import MAX_LOAD_FACTOR, OpenAddressingHashTable
from .ordered_linear_probing import OrderedLinearProbingHashTable
from .quadratic_probing import QuadraticProbingHashTable
from .separate_chaining import SeparateChainingHashTable
from .slots import EMPTY, TOMBSTONE, Occupied, Slot
