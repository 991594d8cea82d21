# -*- coding: utf-8 -*-
"""
Plain-text rendering of a Solution.

Layout:
    <optimal value>
    <used>|<capacity>: <contents>           (every item's value is its weight)
    <used>(<value>)|<capacity>: <contents>  (otherwise)

one line per non-empty sack, contents separated by a space:
    w                   one unit, value is weight
    w(v)                one unit with explicit value
    c*w=cw              c units, value is weight
    c*w=cw(c*v=cv)      c units with explicit value
"""

from __future__ import annotations
from numbers import Real
from typing import List

from multisack.planning.solution import Solution
from multisack.planning.state import ProblemInstance

SEPARATOR = " "


def format_number(x: Real) -> str:
    if isinstance(x, float):
        return format(x, "g")
    return str(x)


def format_sack(instance: ProblemInstance, solution: Solution, sack_index: int) -> str:
    """One report line for a sack (without the trailing newline); '' if empty."""
    content = solution.sack_contents(sack_index)
    if not content:
        return ""

    used_weight = 0
    achieved_value: Real = 0
    weight_value_equal = True
    parts: List[str] = []
    for i, count in sorted(content.items()):
        it = instance.items[i]
        w = it.weight
        used_weight += count * w
        achieved_value += count * it.value
        if it.value_is_weight:
            if count == 1:
                parts.append(f"{w}")
            else:
                parts.append(f"{count}*{w}={count * w}")
        else:
            weight_value_equal = False
            v = format_number(it.value)
            if count == 1:
                parts.append(f"{w}({v})")
            else:
                total = format_number(count * it.value)
                parts.append(f"{count}*{w}={count * w}({count}*{v}={total})")

    capacity = instance.knapsacks[sack_index].capacity
    body = SEPARATOR.join(parts)
    if weight_value_equal:
        return f"{used_weight}|{capacity}: {body}"
    return f"{used_weight}({format_number(achieved_value)})|{capacity}: {body}"


def format_solution(instance: ProblemInstance, solution: Solution) -> str:
    """Full report; value-only solutions render as the optimal value alone."""
    lines = [format_number(solution.total_value)]
    if solution.has_placement:
        for k in range(len(instance.knapsacks)):
            line = format_sack(instance, solution, k)
            if line:
                lines.append(line)
    return "\n".join(lines) + "\n"
