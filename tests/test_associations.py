"""
Unit tests for kubrai.associations
"""

import pytest

from kubrai.assocfile import load_assoc
from kubrai.associations import add_before_first_longer, remove_by_value


@pytest.mark.parametrize("value, seq, expected", [
    ("test", ["test1", "test2"], ["test", "test1", "test2"]),
    ("test11", ["test1", "test111"], ["test1", "test11", "test111"]),
    ("test", ["te", "t"], ["te", "t", "test"]),
    ("test1", ["test9", "test0"], ["test9", "test0", "test1"]),
    ("test1", [], ["test1"]),
    ("test1", ["test1", "test111"], ["test1", "test111"]),
    ("БУЛАВА", ["ГОДНОСТЬ", "ЛЕТО"], ["БУЛАВА", "ГОДНОСТЬ", "ЛЕТО"]),
], ids=["begin", "mid", "end", "same-length", "empty", "already-there", "cyrillic"])
def test_add_before_first_longer(value, seq, expected):
    assert add_before_first_longer(value, seq) == expected


def test_add_before_first_longer_does_not_mutate_input():
    seq = ["ab", "abcd"]
    add_before_first_longer("abc", seq)
    assert seq == ["ab", "abcd"]


@pytest.mark.parametrize("value, seq, expected", [
    ("b", ["a", "b", "c"], ["a", "c"]),
    ("a", ["a"], []),
    ("z", ["a", "b"], ["a", "b"]),
])
def test_remove_by_value(value, seq, expected):
    assert remove_by_value(value, seq) == expected


def test_insert_is_idempotent(make_store):
    store = make_store()
    store.insert("boy", "girl")
    store.dirty = False

    assert store.insert("boy", "girl") == ["girl"]
    assert store.dirty is False


def test_inserts_stay_sorted_by_length(make_store):
    store = make_store()
    for value in ["philosophy", "a", "science", "abc", "ab", "xyz", "b"]:
        store.insert("math", value)

    seq = store.get("math")
    assert seq == ["a", "b", "ab", "abc", "xyz", "science", "philosophy"]
    assert all(len(seq[i]) <= len(seq[i + 1]) for i in range(len(seq) - 1))


def test_self_association_needs_flag(make_store, make_config):
    store = make_store()
    assert store.insert("math", "math") == []
    assert "math" not in store

    allowed = make_store(cfg=make_config(allow_self_association=True))
    allowed.insert("math", "science")
    assert allowed.insert("math", "math") == ["math", "science"]


def test_remove(make_store):
    store = make_store({"boy": ["girl", "man", "child"], "girl": ["woman"]})

    assert store.remove("nonexistent", "anything") == []
    assert store.remove("boy", "magnet") == ["girl", "man", "child"]
    assert store.dirty is False
    assert store.remove("boy", "man") == ["girl", "child"]
    assert store.remove("boy", "girl") == ["child"]
    assert store.remove("boy", "child") == []
    assert "boy" not in store
    assert store.dirty is True


def test_remove_twice_is_noop(make_store):
    store = make_store({"girl": ["woman"]})
    assert store.remove("girl", "woman") == []
    assert store.remove("girl", "woman") == []
    assert len(store) == 0


def test_get_returns_copy(make_store):
    store = make_store({"boy": ["girl"]})
    store.get("boy").append("man")
    assert store.get("boy") == ["girl"]
    assert store.get("nobody") == []


def test_save_and_reload(make_store, config):
    store = make_store()
    store.insert("policeman", "thief")
    store.insert("policeman", "cop")
    store.save()

    assert store.dirty is False
    assert load_assoc(store.path) == {"policeman": ["cop", "thief"]}

    reopened = type(store).open(store.path, config)
    assert reopened.as_dict() == {"policeman": ["cop", "thief"]}
