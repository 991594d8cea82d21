# -*- coding: utf-8 -*-
from multisack.business_objects import Item, KnapsackSpec
from multisack.planning import ProblemInstance, Solution
from multisack.planning.report import format_number, format_sack, format_solution


def _instance():
    return ProblemInstance(
        items=(
            Item(id="a", weight=5, value=10),
            Item(id="b", weight=4),
            Item(id="c", weight=3, value=4, count=None),
        ),
        knapsacks=(KnapsackSpec(id="s0", capacity=10), KnapsackSpec(id="s1", capacity=8)),
    )


def test_format_number():
    assert format_number(17) == "17"
    assert format_number(2.5) == "2.5"
    assert format_number(3.0) == "3"


def test_sack_line_with_values():
    inst = _instance()
    sol = Solution(total_value=14, placements=({0: 1, 1: 1}, {}))
    assert format_sack(inst, sol, 0) == "9(14)|10: 5(10) 4"
    assert format_sack(inst, sol, 1) == ""


def test_sack_line_weights_only():
    inst = _instance()
    sol = Solution(total_value=4, placements=({}, {1: 2}))
    assert format_sack(inst, sol, 1) == "8|8: 2*4=8"


def test_sack_line_repeated_valued_item():
    inst = _instance()
    sol = Solution(total_value=8, placements=({}, {2: 2}))
    assert format_sack(inst, sol, 1) == "6(8)|8: 2*3=6(2*4=8)"


def test_format_solution_skips_empty_sacks():
    inst = _instance()
    sol = Solution(total_value=18, placements=({0: 1, 1: 1}, {1: 1}))
    assert format_solution(inst, sol) == "18\n9(14)|10: 5(10) 4\n4|8: 4\n"


def test_format_solution_value_only():
    assert format_solution(_instance(), Solution(total_value=18)) == "18\n"
