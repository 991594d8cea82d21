# -*- coding: utf-8 -*-
"""
Replay of the memo tables left behind by a finished search.

Starting from the initial sack multiset and the first bound decision point,
the replay alternates:
  1) drain unbound selections: while the unbound entry of the current multiset
     names an (item, capacity), place that unit into a sack of that capacity;
  2) drain bound selections: walk decision points exactly as the bound
     recurrence does, placing a unit wherever the entry is selected;
until a full round places nothing.

A memo entry may have been computed for another arrangement of the same
multiset. Unbound selections are therefore resolved by capacity, and a bound
entry whose occurrence held a different capacity is re-decided on the spot
(which may fill a few missing memo entries).

Occurrence k is sack index k, so the recorded counts are already per sack.
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, List, Optional, Tuple

from .recurrence import BoundPoint, SearchContext


def _drain_unbound(ctx: SearchContext, placed: List[Counter]) -> int:
    state = ctx.state
    n = 0
    while True:
        entry = ctx.unbound_memo.get(state.key())
        if entry is None or entry.selection is None:
            return n
        i, k = entry.selection
        if state.occurrence_value(k) != entry.capacity:
            k = state.find(entry.capacity)
        placed[k][i] += 1
        state.decrease(k, ctx.weights[i])
        n += 1


def _drain_bound(
    ctx: SearchContext,
    placed: List[Counter],
    point: Optional[BoundPoint],
) -> Tuple[Optional[BoundPoint], int]:
    state = ctx.state
    n = 0
    while point is not None:
        ctx.solve_bound(point)
        entry = ctx.bound_memo[ctx.bound_key(point)]
        i, _c, k = point
        if entry.capacity == state.occurrence_value(k):
            selected = entry.selected
        else:
            _value, selected = ctx.decide_bound(point)

        if not selected:
            point = ctx.after_skip(point)
            continue
        placed[k][i] += 1
        state.decrease(k, ctx.weights[i])
        n += 1
        point = ctx.after_place(point)
    return point, n


def reconstruct_placement(ctx: SearchContext) -> Tuple[Dict[int, int], ...]:
    """
    Return one {item_index: count} mapping per sack, in sack order.

    Must be called once, after ctx.solve_unbound() has filled the memo tables.
    The replay consumes ctx.state (the search restored it to the initial
    capacities); the context is not usable for another search afterwards.
    """
    placed: List[Counter] = [Counter() for _ in range(ctx.sack_count)]
    point = ctx.start

    while True:
        n = _drain_unbound(ctx, placed)
        point, m = _drain_bound(ctx, placed, point)
        if n == 0 and m == 0:
            break

    return tuple(dict(sorted(c.items())) for c in placed)
