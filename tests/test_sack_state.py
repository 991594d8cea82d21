# -*- coding: utf-8 -*-
import pytest

from multisack.planning import CanonicalSackState


def _occurrences(state):
    return [state.occurrence_value(k) for k in range(len(state))]


def test_key_is_sorted_multiset():
    state = CanonicalSackState([7, 3, 5, 3])
    assert state.key() == (3, 3, 5, 7)
    assert _occurrences(state) == [7, 3, 5, 3]
    assert len(state) == 4


def test_equality_ignores_sack_order():
    a = CanonicalSackState([3, 5])
    b = CanonicalSackState([5, 3])
    assert a == b
    assert hash(a) == hash(b)
    assert a != CanonicalSackState([3, 4])


def test_decrease_keeps_key_sorted():
    state = CanonicalSackState([7, 3, 5])
    state.decrease(0, 5)
    assert state.occurrence_value(0) == 2
    assert state.key() == (2, 3, 5)


def test_decrease_to_and_increase_to():
    state = CanonicalSackState([6, 4])
    state.decrease_to(0, 1)
    assert state.key() == (1, 4)
    state.increase_to(0, 6)
    assert _occurrences(state) == [6, 4]
    assert state.key() == (4, 6)


def test_decreased_restores_on_exit():
    state = CanonicalSackState([7, 3])
    with state.decreased(0, 4) as inner:
        assert inner.key() == (3, 3)
    assert _occurrences(state) == [7, 3]
    assert state.key() == (3, 7)


def test_decreased_restores_on_exception():
    state = CanonicalSackState([7, 3])
    with pytest.raises(RuntimeError):
        with state.decreased(1, 3):
            raise RuntimeError("boom")
    assert _occurrences(state) == [7, 3]
    assert state.key() == (3, 7)


def test_split_key():
    state = CanonicalSackState([5, 3, 9, 1])
    assert state.split_key(0) == ((), (1, 3, 5, 9))
    assert state.split_key(2) == ((3, 5), (1, 9))


def test_find():
    state = CanonicalSackState([4, 6, 6])
    assert state.find(6) == 1
    with pytest.raises(ValueError):
        state.find(5)
