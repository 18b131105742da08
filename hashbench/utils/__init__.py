from .kvpair import KVPair
from .kvpair_list import KVPairList
from .primes import PrimeGenerator, is_prime
from .probes import Probes
