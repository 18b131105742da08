import pytest

from hashbench.hashes import hash_key


def _find_keys(count, accept, prefix="k", exclude=()):
    keys = []
    i = 0
    while len(keys) < count:
        key = f"{prefix}{i}"
        if key not in exclude and accept(key, keys):
            keys.append(key)
        i += 1
    return keys


@pytest.fixture
def keys_with_home():
    """Find keys whose home slot at the given capacity is home"""
    def find(home, capacity, count=1, prefix="k", exclude=()):
        return _find_keys(count, lambda key, _: hash_key(key, capacity) == home, prefix, exclude)
    return find


@pytest.fixture
def keys_with_distinct_homes():
    """Find keys whose home slots are pairwise distinct at every one of the given capacities"""
    def find(count, capacities, prefix="k"):
        def accept(key, found):
            return all(
                hash_key(key, capacity) not in {hash_key(other, capacity) for other in found}
                for capacity in capacities
            )
        return _find_keys(count, accept, prefix)
    return find
