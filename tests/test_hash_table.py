import random

import pytest

from hashbench.hashes import LinearProbingHashTable, OrderedLinearProbingHashTable, QuadraticProbingHashTable, \
    SeparateChainingHashTable, hash_key, string_hash
from hashbench.utils import Probes

OPEN_ADDRESSING = [LinearProbingHashTable, OrderedLinearProbingHashTable, QuadraticProbingHashTable]


def all_tables():
    tables = [SeparateChainingHashTable()]
    for table_type in OPEN_ADDRESSING:
        tables.append(table_type(soft=False))
        tables.append(table_type(soft=True))
    return tables


def table_ids():
    return [f"{type(t).__name__}-{'soft' if getattr(t, 'soft', False) else 'hard'}" for t in all_tables()]


@pytest.fixture(params=range(7), ids=table_ids())
def table(request):
    return all_tables()[request.param]


def test_logs_under_class_name(table):
    assert table.logger.name == type(table).__name__


def test_string_hash_is_deterministic():
    assert string_hash("") == 0
    assert string_hash("a") == 97
    assert string_hash("hello") == 99162322
    # wraps around to a negative 32-bit value
    assert string_hash("polygenelubricants") == -2147483648


def test_hash_key_is_never_negative():
    assert hash_key("polygenelubricants", 7) == 0
    assert string_hash("Aa") == string_hash("BB")
    assert hash_key("Aa", 7) == hash_key("BB", 7) == 2112 % 7


def test_round_trip(table):
    for i in range(50):
        result = table.put(f"key{i}", f"value{i}")
        assert result.value == f"value{i}"
        assert result.probes >= 1

    for i in range(50):
        result = table.get(f"key{i}")
        assert result.found
        assert result.value == f"value{i}"

    assert table.size() == 50
    assert len(table) == 50
    assert sorted(table, key=lambda k: int(k[3:])) == [f"key{i}" for i in range(50)]


def test_none_contract(table):
    assert table.get(None) == Probes.absent(0)
    assert table.remove(None) == Probes.absent(0)

    for key, value in [("a", None), (None, "1"), (None, None)]:
        with pytest.raises(ValueError):
            table.put(key, value)

    # should not have mutated the table
    assert table.size() == 0
    assert table.capacity() == 7


def test_missing_key_is_absent_not_an_error(table):
    table.put("alice", "111")
    result = table.get("bob")
    assert not result.found
    assert result.value is None
    assert result.probes >= 1

    assert not table.remove("bob").found
    assert table.size() == 1


def test_deletion_visibility(table):
    keys = [f"name{i}" for i in range(40)]
    for key in keys:
        table.put(key, key.upper())

    for key in keys[::3]:
        assert table.remove(key).value == key.upper()

    removed = set(keys[::3])
    for key in keys:
        if key in removed:
            assert not table.get(key).found
            assert not table.contains_key(key)
            assert key not in table
        else:
            assert table.get(key).value == key.upper()
            assert table.contains_key(key)
    assert table.size() == len(keys) - len(removed)


def test_remove_returns_value(table):
    table.put("carol", "333")
    result = table.remove("carol")
    assert result.value == "333"
    assert result.probes >= 1
    assert table.size() == 0


def test_contains_value(table):
    table.put("alice", "111")
    table.put("bob", "222")
    assert table.contains_value("222")
    assert not table.contains_value("333")
    table.remove("bob")
    assert not table.contains_value("222")


def test_duplicate_keys_are_not_deduplicated(table):
    table.put("alice", "111")
    table.put("alice", "999")
    assert table.size() == 2

    first = table.remove("alice")
    assert first.found
    assert table.get("alice").found
    assert table.size() == 1


@pytest.mark.parametrize("table_type", OPEN_ADDRESSING)
@pytest.mark.parametrize("soft", [False, True])
def test_load_factor_and_capacity_invariants(table_type, soft):
    table = table_type(soft=soft)
    rng = random.Random(7)
    live = []
    previous_capacity = table.capacity()

    for step in range(600):
        if live and rng.random() < 0.35:
            key = live.pop(rng.randrange(len(live)))
            assert table.remove(key).found
        else:
            key = f"k{step}"
            assert table.put(key, f"v{step}").found
            live.append(key)
            # load never reaches one half once a put returns
            assert (table.size() + table.tombstones()) / table.capacity() < 0.5
            assert table.load_factor < 0.5

        # capacity only grows
        assert table.capacity() >= previous_capacity
        previous_capacity = table.capacity()

    for key in live:
        assert table.get(key).value == f"v{key[1:]}"
    assert table.size() == len(live)


@pytest.mark.parametrize("table_type", OPEN_ADDRESSING)
def test_resize_counts_scan_and_placement_probes(table_type, keys_with_distinct_homes):
    table = table_type(soft=False)
    keys = keys_with_distinct_homes(4, [7, 17])

    for key in keys[:3]:
        assert table.put(key, "v").probes == 1
    assert table.capacity() == 7

    # (3 + 1) / 7 reaches one half: resize to 17 first
    result = table.put(keys[3], "v")
    assert table.capacity() == 17
    # 7 old slots scanned, 3 pairs re-placed at their homes, then the new pair at its home
    assert result.probes == 7 + 3 + 1
    for key in keys:
        assert table.get(key).probes == 1


@pytest.mark.parametrize("table_type", OPEN_ADDRESSING)
def test_resize_drops_tombstones(table_type):
    table = table_type(soft=True)
    table.put("a", "1")
    table.put("b", "2")
    table.remove("a")
    assert table.tombstones() == 1
    assert table.size() == 1

    live = ["b"]
    while table.capacity() == 7:
        key = f"c{len(live)}"
        table.put(key, "3")
        live.append(key)

    assert table.capacity() == 17
    assert table.tombstones() == 0
    assert table.size() == len(live)
    assert not any(slot.is_tombstone() for slot in table.slots)
    assert sorted(pair.key for pair in table.items()) == sorted(live)
