import pytest

from argtable.hashtable import HashTable, HashTableIterator


def hash_key(key):
    value = 5381
    for ch in key:
        value = (value * 33 + ord(ch)) & 0xFFFFFFFF
    return value


def equal_keys(k1, k2):
    return k1 == k2


def make(minsize=32):
    return HashTable(minsize, hash_key, equal_keys)


def test_basic_001_empty_table():
    h = make()
    assert len(h) == 0


def test_basic_002_iterator_on_single_entry():
    h = make()
    k1, v1 = "k1", "v1"
    h.insert(k1, v1)
    assert len(h) == 1
    itr = h.iterator()
    assert isinstance(itr, HashTableIterator)
    assert itr.key() is k1
    assert itr.key() == "k1"
    assert itr.value() is v1
    assert itr.value() == "v1"


def test_basic_003_advance_over_two_entries():
    h = make()
    h.insert("k1", "v1")
    assert len(h) == 1
    h.insert("k2", "v2")
    assert len(h) == 2
    itr = h.iterator()
    assert itr.advance() is True
    assert itr.advance() is False


def test_basic_004_iterator_remove_last_entry():
    h = make()
    h.insert("k1", "v1")
    assert len(h) == 1
    itr = h.iterator()
    assert itr.remove() is False
    assert len(h) == 0


def test_basic_005_remove_by_key():
    h = make(3)
    k1 = "k1"
    h.insert(k1, "v1")
    assert len(h) == 1
    assert h.remove(k1) == "v1"
    assert len(h) == 0


def test_basic_006_search():
    h = make()
    h.insert("k1", "v1")
    assert len(h) == 1
    assert h.search("k1") == "v1"


def test_basic_007_iterator_search():
    h = make()
    k1, v1 = "k1", "v1"
    h.insert(k1, v1)
    assert len(h) == 1
    h.insert("k2", "v2")
    assert len(h) == 2
    itr = HashTableIterator(h)
    assert itr.search(k1) is True
    assert itr.key() is k1
    assert itr.value() is v1
    assert itr.key() == "k1"
    assert itr.value() == "v1"


def test_search_missing_returns_none():
    h = make()
    h.insert("a", 1)
    assert h.search("b") is None


def test_remove_missing_returns_none_and_keeps_count():
    h = make()
    h.insert("a", 1)
    assert h.remove("zzz") is None
    assert len(h) == 1


def test_change_existing_and_missing():
    h = make()
    h.insert("a", 1)
    assert h.change("a", 2) is True
    assert h.search("a") == 2
    assert h.change("b", 3) is False
    assert h.search("b") is None
    assert len(h) == 1


def test_growth_keeps_all_entries():
    h = make(3)
    keys = [f"key{i}" for i in range(1000)]
    for i, key in enumerate(keys):
        h.insert(key, i)
    assert len(h) == 1000
    assert all(h.search(key) == i for i, key in enumerate(keys))
    assert sorted(h) == sorted(keys)


def test_iteration_visits_every_entry_once():
    h = make(3)
    expected = {f"k{i}": f"v{i}" for i in range(100)}
    for k, v in expected.items():
        h.insert(k, v)
    seen = {}
    itr = h.iterator()
    seen[itr.key()] = itr.value()
    while itr.advance():
        assert itr.key() not in seen
        seen[itr.key()] = itr.value()
    assert seen == expected
    assert dict(h.items()) == expected


def test_iterator_remove_all_entries():
    h = make()
    for i in range(20):
        h.insert(f"k{i}", i)
    itr = h.iterator()
    removed = 1
    while itr.remove():
        removed += 1
    assert removed == 20
    assert len(h) == 0
    assert list(h) == []


def test_iterator_on_empty_table():
    h = make()
    itr = h.iterator()
    assert itr.exhausted is True
    assert itr.advance() is False
    with pytest.raises(LookupError):
        itr.key()
    with pytest.raises(LookupError):
        itr.remove()


def test_iterator_search_missing():
    h = make()
    h.insert("a", 1)
    itr = h.iterator()
    assert itr.search("nope") is False


def test_duplicate_insert_finds_latest():
    h = make()
    h.insert("a", 1)
    h.insert("a", 2)
    assert len(h) == 2
    assert h.search("a") == 2
    assert h.remove("a") == 2
    assert h.search("a") == 1


def test_contains():
    h = make()
    h.insert("x", None)
    assert "x" in h
    assert "y" not in h


def test_default_hash_and_equality():
    h = HashTable()
    h.insert(10, "ten")
    h.insert((1, 2), "pair")
    assert h.search(10) == "ten"
    assert h.search((1, 2)) == "pair"


@pytest.mark.parametrize("minsize", [-1, (1 << 30) + 1])
def test_invalid_minsize(minsize):
    with pytest.raises(ValueError):
        HashTable(minsize, hash_key, equal_keys)