def is_prime(n: int) -> bool:
    """Trial division primality check, fine for table-sized numbers"""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    divisor = 5
    while divisor * divisor <= n:
        if n % divisor == 0 or n % (divisor + 2) == 0:
            return False
        divisor += 6
    return True


def next_prime_at_least(n: int) -> int:
    """Smallest prime greater than or equal to n"""
    candidate = max(n, 2)
    while not is_prime(candidate):
        candidate += 1
    return candidate


def previous_prime_at_most(n: int) -> int:
    """Largest prime less than or equal to n, bottoming out at 2"""
    candidate = n
    while candidate > 2 and not is_prime(candidate):
        candidate -= 1
    return max(candidate, 2)


class PrimeGenerator:
    """
    Supplies table capacities. Growing picks the first prime at or beyond double the current capacity, shrinking picks
    the largest prime whose double still fits in the current capacity, which undoes a growth step.

    @param initial: The starting capacity; rounded up to the nearest prime.
    """
    DEFAULT_INITIAL_PRIME = 7

    def __init__(self, initial: int = DEFAULT_INITIAL_PRIME):
        assert initial >= 1, "Initial capacity must be a positive integer"
        self._current_prime = next_prime_at_least(initial)

    def get_current_prime(self) -> int:
        return self._current_prime

    def get_next_prime(self) -> int:
        """Advance to, and return, the smallest prime >= 2 * current"""
        self._current_prime = next_prime_at_least(2 * self._current_prime)
        return self._current_prime

    def get_previous_prime(self) -> int:
        """Retreat to, and return, the largest prime p with 2 * p <= current"""
        self._current_prime = previous_prime_at_most(self._current_prime // 2)
        return self._current_prime

    def __repr__(self):
        return f"<{self.__class__.__name__} current: {self._current_prime}>"
