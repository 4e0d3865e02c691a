import pytest

from dskit.searching import (
    ChainedHashTable,
    LinearProbingTable,
    binary_search,
    sequential_search,
)

SORTED = [1, 2, 3, 4, 5, 6, 9, 33, 40, 42]
UNSORTED = [1, 2, 3, 4, 5, 6, 0, -4, 9, 33]


@pytest.mark.parametrize("target", SORTED)
def test_binary_search_finds_each(target):
    index = binary_search(SORTED, target)
    assert index == SORTED.index(target)


@pytest.mark.parametrize("target", [-5, 7, 34, 100])
def test_binary_search_missing(target):
    assert binary_search(SORTED, target) == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


@pytest.mark.parametrize("target", UNSORTED)
def test_sequential_search_finds_each(target):
    assert sequential_search(UNSORTED, target) == UNSORTED.index(target)


def test_sequential_search_missing_and_first_match():
    assert sequential_search(UNSORTED, 77) == -1
    data = ["x", "y", "x"]
    assert sequential_search(data, "x") == data.index("x")
    assert sequential_search(iter(data), "y") == data.index("y")


def test_probing_table_insert_and_search():
    table = LinearProbingTable()
    for key in UNSORTED:
        if key >= 0:
            table.insert(key, f"v{key}")
    assert len(table) == sum(1 for k in UNSORTED if k >= 0)
    for key in UNSORTED:
        if key >= 0:
            assert table.search(key) == f"v{key}"


def test_probing_table_collision_path():
    table = LinearProbingTable(200, 199)
    table.insert(5, "a")
    table.insert(204, "b")
    assert table.probe(204) == (6, [5, 204])
    assert table.search(204) == "b"
    slot, path = table.probe(403)
    assert slot is None
    assert path == [5, 204]


def test_probing_table_wraps_around():
    table = LinearProbingTable(3, 3)
    table.insert(2)
    table.insert(5)
    slot, path = table.probe(5)
    assert slot == 0
    assert path == [2, 5]


def test_probing_table_full():
    table = LinearProbingTable(2, 2)
    table.insert(1)
    table.insert(2)
    with pytest.raises(OverflowError):
        table.insert(3)


def test_probing_table_missing_key():
    table = LinearProbingTable()
    table.insert(10, "ten")
    with pytest.raises(KeyError):
        table.search(11)


@pytest.mark.parametrize("size, modulus", [(0, 1), (10, 11), (10, 0)])
def test_probing_table_bad_arguments(size, modulus):
    with pytest.raises(ValueError):
        LinearProbingTable(size, modulus)


def test_chained_table_shared_bucket():
    table = ChainedHashTable(10)
    for key in (1, 11, 21):
        table.insert(key, key * 2)
    assert len(table) == 3
    for key in (1, 11, 21):
        assert table.search(key) == key * 2


def test_chained_table_latest_insert_wins():
    table = ChainedHashTable(10)
    table.insert(4, "old")
    table.insert(4, "new")
    assert table.search(4) == "new"
    assert len(table) == 2


def test_chained_table_missing_and_bad_size():
    table = ChainedHashTable(5)
    table.insert(3, "three")
    with pytest.raises(KeyError):
        table.search(8)
    with pytest.raises(ValueError):
        ChainedHashTable(0)