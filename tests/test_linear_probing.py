from hashbench.hashes import LinearProbingHashTable, hash_key
from hashbench.utils import PrimeGenerator, Probes


def assert_reachable(table):
    """Every live pair sits at the end of an unbroken run starting at its home slot"""
    slots = table.slots
    capacity = len(slots)
    for index, slot in enumerate(slots):
        if not slot.is_occupied():
            continue
        current = hash_key(slot.pair.key, capacity)
        while current != index:
            assert not slots[current].is_empty()
            current = (current + 1) % capacity


def test_collision_lands_in_next_slot(keys_with_home):
    table = LinearProbingHashTable(soft=False)
    alice, bob = keys_with_home(3, 7, count=2)
    (carol,) = keys_with_home(5, 7)

    assert table.put(alice, "111") == Probes("111", 1)
    assert table.put(bob, "222") == Probes("222", 2)
    assert table.put(carol, "333") == Probes("333", 1)
    assert table.slots[3].pair.key == alice
    assert table.slots[4].pair.key == bob
    assert table.slots[5].pair.key == carol

    assert table.get(bob) == Probes("222", 2)


def test_miss_counts_path_to_empty_slot(keys_with_home):
    table = LinearProbingHashTable(soft=False)
    alice, bob, missing = keys_with_home(3, 7, count=3)
    (carol,) = keys_with_home(5, 7)
    for key in (alice, bob, carol):
        table.put(key, "v")

    # slots 3, 4, 5 are occupied and slot 6 ends the walk
    assert table.get(missing) == Probes.absent(4)

    (lonely,) = keys_with_home(1, 7)
    assert table.get(lonely) == Probes.absent(1)


def test_hard_remove_repairs_cluster(keys_with_home):
    table = LinearProbingHashTable(soft=False)
    alice, bob = keys_with_home(3, 7, count=2)
    (carol,) = keys_with_home(5, 7)
    table.put(alice, "111")
    table.put(bob, "222")
    table.put(carol, "333")

    # 1 probe to find alice; the repair scans slots 4, 5, 6 and re-places bob and carol with one probe each
    assert table.remove(alice) == Probes("111", 6)

    assert table.get(bob) == Probes("222", 1)
    assert table.get(carol) == Probes("333", 1)
    assert table.get(alice) == Probes.absent(2)
    assert not table.contains_key(alice)
    assert table.size() == 2
    assert table.tombstones() == 0
    assert_reachable(table)


def test_hard_remove_mid_cluster(keys_with_home):
    table = LinearProbingHashTable(soft=False)
    alice, bob = keys_with_home(3, 7, count=2)
    (carol,) = keys_with_home(4, 7)
    table.put(alice, "111")
    table.put(bob, "222")
    table.put(carol, "333")
    assert table.slots[5].pair.key == carol

    # 2 probes to find bob, then slot 5 (carol moves home with 1 probe) and slot 6
    assert table.remove(bob) == Probes("222", 5)
    assert table.slots[4].pair.key == carol
    assert table.get(carol) == Probes("333", 1)
    assert table.get(alice) == Probes("111", 1)


def test_cluster_wraps_around(keys_with_home):
    table = LinearProbingHashTable(soft=False)
    first, second = keys_with_home(6, 7, count=2)

    table.put(first, "1")
    assert table.put(second, "2") == Probes("2", 2)
    assert table.slots[0].pair.key == second

    table.remove(first)
    assert table.slots[6].pair.key == second
    assert table.get(second) == Probes("2", 1)


def test_soft_remove_leaves_tombstone(keys_with_home):
    table = LinearProbingHashTable(soft=True)
    alice, bob = keys_with_home(3, 7, count=2)
    table.put(alice, "111")
    table.put(bob, "222")

    assert table.remove(alice) == Probes("111", 1)
    assert table.slots[3].is_tombstone()
    assert table.tombstones() == 1
    assert table.size() == 1

    # the tombstone is stepped over, not treated as the end of the chain
    assert table.get(bob) == Probes("222", 2)
    assert table.get(alice) == Probes.absent(3)


def test_soft_put_reuses_tombstone(keys_with_home):
    table = LinearProbingHashTable(soft=True)
    alice, bob, dave = keys_with_home(3, 7, count=3)
    table.put(alice, "111")
    table.put(bob, "222")
    table.remove(alice)

    assert table.put(dave, "444") == Probes("444", 1)
    assert table.slots[3].pair.key == dave
    assert table.tombstones() == 0
    assert table.capacity() == 7


def test_soft_tombstones_count_towards_resize(keys_with_home):
    table = LinearProbingHashTable(soft=True, prime_generator=PrimeGenerator(7))
    (first,) = keys_with_home(0, 7)
    (second,) = keys_with_home(1, 7)
    (third,) = keys_with_home(4, 7)
    table.put(first, "1")
    table.put(second, "2")
    table.remove(first)
    table.remove(second)
    assert table.size() == 0
    assert table.load_factor == 2 / 7

    table.put(third, "3")
    assert table.tombstones() == 2
    assert table.capacity() == 7

    # one live pair and two tombstones: the next put would reach one half, so it resizes first
    table.put("fourth", "4")
    assert table.capacity() == 17
    assert table.tombstones() == 0
    assert table.size() == 2


def test_many_hard_removals_keep_everything_reachable():
    table = LinearProbingHashTable(soft=False)
    keys = [f"entry{i}" for i in range(200)]
    for key in keys:
        table.put(key, key[::-1])
    for key in keys[::2]:
        assert table.remove(key).value == key[::-1]
        assert_reachable(table)

    for key in keys[1::2]:
        assert table.get(key).value == key[::-1]
    assert table.size() == 100
