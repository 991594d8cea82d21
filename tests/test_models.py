# -*- coding: utf-8 -*-
import pytest

from multisack.business_objects import Item, KnapsackSpec, StateValidationError
from multisack.planning import ProblemInstance, Solution


def test_item_defaults_value_to_weight():
    it = Item(id="a", weight=4)
    assert it.value == 4
    assert it.value_is_weight
    assert it.count == 1
    assert it.is_bound


def test_item_explicit_value():
    it = Item(id="a", weight=4, value=9, count=None)
    assert it.value == 9
    assert not it.value_is_weight
    assert not it.is_bound


@pytest.mark.parametrize(
    "kwargs",
    [
        {"id": "", "weight": 1},
        {"id": "a", "weight": 0},
        {"id": "a", "weight": 2.0},
        {"id": "a", "weight": True},
        {"id": "a", "weight": 1, "count": 0},
        {"id": "a", "weight": 1, "value": 0},
        {"id": "a", "weight": 1, "value": -1.5},
        {"id": "a", "weight": 1, "value": float("nan")},
        {"id": "a", "weight": 1, "value": float("inf")},
        {"id": "a", "weight": 1, "value": True},
        {"id": "a", "weight": 1, "value": "7"},
    ],
)
def test_item_rejects_invalid(kwargs):
    with pytest.raises(StateValidationError):
        Item(**kwargs)


def test_item_derived_copies_keep_value_origin():
    it = Item(id="a", weight=3, count=5)
    f = it.with_value_type(float)
    assert f.value == 3.0 and isinstance(f.value, float)
    assert f.value_is_weight

    u = it.as_unbound()
    assert u.count is None
    assert u.value_is_weight

    explicit = Item(id="b", weight=3, value=7).as_unbound()
    assert not explicit.value_is_weight


def test_knapsack_spec_validation():
    assert KnapsackSpec(id="s", capacity=3).capacity == 3
    for cap in (0, -1, 2.5, True):
        with pytest.raises(StateValidationError):
            KnapsackSpec(id="s", capacity=cap)


def test_instance_requires_a_sack():
    with pytest.raises(StateValidationError, match="no knapsack"):
        ProblemInstance(items=[Item(id="a", weight=1)], knapsacks=[])


def test_instance_rejects_duplicate_ids():
    with pytest.raises(StateValidationError):
        ProblemInstance(
            items=[Item(id="a", weight=1), Item(id="a", weight=2)],
            knapsacks=[KnapsackSpec(id="s", capacity=3)],
        )
    with pytest.raises(StateValidationError):
        ProblemInstance(
            items=[],
            knapsacks=[KnapsackSpec(id="s", capacity=3), KnapsackSpec(id="s", capacity=4)],
        )


def test_instance_from_lists():
    inst = ProblemInstance.from_lists([4, 6], [(2,), (3, 5), (1, None, None)])
    assert inst.capacities == [4, 6]
    assert isinstance(inst.items, tuple)
    assert [it.id for it in inst.items] == ["i0", "i1", "i2"]
    assert inst.items[2].value == 1 and not inst.items[2].is_bound
    assert [k.id for k in inst.knapsacks] == ["s0", "s1"]
    assert inst.items[0].is_bound and inst.items[1].value == 5


def test_solution_helpers():
    sol = Solution(total_value=11, placements=({1: 2, 0: 1}, {}, {1: 1}))
    assert sol.has_placement
    assert list(sol.iter_placements()) == [(0, 0, 1), (0, 1, 2), (2, 1, 1)]
    assert sol.item_totals() == {0: 1, 1: 3}
    assert sol.sack_contents(1) == {}

    bare = Solution(total_value=3)
    assert list(bare.iter_placements()) == []
    assert bare.item_totals() == {}
