import pytest

from algoshelf.hashtable import DEFAULT_SIZE, LinearProbingTable, TableFullError


def test_default_size_is_128():
    assert LinearProbingTable().size == DEFAULT_SIZE == 128


def test_insert_and_search():
    table = LinearProbingTable()
    table.insert(5, 50)
    table.insert(7, 70)
    assert table.search(5) == 50
    assert table.search(7) == 70
    assert len(table) == 2


def test_insert_replaces_value():
    table = LinearProbingTable()
    table.insert(3, 1)
    table.insert(3, 2)
    assert table.search(3) == 2
    assert len(table) == 1


def test_search_missing_raises():
    table = LinearProbingTable()
    with pytest.raises(KeyError):
        table.search(42)


def test_colliding_keys_both_retrievable():
    table = LinearProbingTable()
    table.insert(1, "one")
    table.insert(1 + DEFAULT_SIZE, "collides")
    assert table.search(1) == "one"
    assert table.search(1 + DEFAULT_SIZE) == "collides"


def test_remove_keeps_probe_chain():
    table = LinearProbingTable()
    table.insert(1, "one")
    table.insert(1 + DEFAULT_SIZE, "collides")
    table.remove(1)
    assert 1 not in table
    assert table.search(1 + DEFAULT_SIZE) == "collides"
    assert len(table) == 1


def test_reinsert_after_remove_does_not_duplicate():
    table = LinearProbingTable()
    table.insert(1, "one")
    table.insert(1 + DEFAULT_SIZE, "collides")
    table.remove(1)
    table.insert(1 + DEFAULT_SIZE, "updated")
    assert table.search(1 + DEFAULT_SIZE) == "updated"
    assert len(table) == 1


def test_remove_missing_raises():
    table = LinearProbingTable()
    with pytest.raises(KeyError):
        table.remove(9)


def test_full_table_rejects_new_key():
    table = LinearProbingTable(size=2)
    table.insert(0, "a")
    table.insert(1, "b")
    with pytest.raises(TableFullError):
        table.insert(2, "c")


def test_full_table_still_updates_existing_key():
    table = LinearProbingTable(size=2)
    table.insert(0, "a")
    table.insert(1, "b")
    table.insert(1, "z")
    assert table.search(1) == "z"


def test_slot_freed_by_remove_is_reused():
    table = LinearProbingTable(size=2)
    table.insert(0, "a")
    table.insert(1, "b")
    table.remove(0)
    table.insert(2, "c")
    assert table.search(2) == "c"
    assert table.search(1) == "b"


def test_negative_keys_work():
    table = LinearProbingTable()
    table.insert(-3, "neg")
    assert table.search(-3) == "neg"


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        LinearProbingTable(size=0)