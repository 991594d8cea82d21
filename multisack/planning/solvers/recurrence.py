# -*- coding: utf-8 -*-
"""
Memoized recurrences of the exact multi-sack solver.

Two mutually recursive searches share one CanonicalSackState:

  solve_unbound()          memo key: sack multiset
      Tries every unbound item in every sack it fits into. Its baseline
      ("place no further unbound item") is the bound search starting at the
      first bound item.

  solve_bound((i, c, k))   memo key: (i, c, k, multiset of occurrences < k,
                                      multiset of occurrences >= k)
      Decides one unit of bound item i (c units left) at occurrence k:
      skip it (move to occurrence k+1, or to the next bound item) or place it
      (same item and occurrence again with c-1, or the next bound item once
      c reaches 0).

Item i may only go to occurrences >= k while later items see every sack, so
the value of a bound point is a function of both multisets. The full multiset
alone is not enough: [3, 5] and [5, 3] at k=1 offer item i different sacks.

Tie-break: the first candidate found is kept unless a later one is strictly
better. Hence "skip" beats "place" on ties, and among unbound candidates the
lowest item index, then the lowest occurrence, wins.

The state is mutated in place and restored by `CanonicalSackState.decreased`,
never copied per call.
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import Dict, List, Optional, Tuple

from multisack.planning.state import ProblemInstance
from multisack.planning.sack_state import CanonicalSackState, SackKey

# (item_index, remaining_count, occurrence)
BoundPoint = Tuple[int, int, int]
BoundKey = Tuple[int, int, int, SackKey, SackKey]


@dataclass(frozen=True)
class UnboundEntry:
    """
    Cached optimum for a sack multiset.

    selection is (item_index, occurrence) of the unbound unit to place next,
    or None if the bound fallback is optimal. capacity is the value the chosen
    occurrence held when the entry was computed.
    """
    value: Real
    selection: Optional[Tuple[int, int]] = None
    capacity: Optional[int] = None


@dataclass(frozen=True)
class BoundEntry:
    """
    Cached optimum for a bound decision point.

    selected means "place one unit at the point's occurrence"; capacity is the
    value of that occurrence when the decision was taken.
    """
    value: Real
    selected: bool = False
    capacity: int = 0


class SearchContext:
    """
    All data needed only for the duration of one solve call.

    Attributes
    ----------
    state : CanonicalSackState
        Live sack multiset, mutated and restored during recursion.
    unbound_memo : dict[SackKey, UnboundEntry]
    bound_memo : dict[BoundKey, BoundEntry]
    start : BoundPoint | None
        Decision point of the first bound item (full count, occurrence 0).
    """

    def __init__(self, instance: ProblemInstance) -> None:
        items = instance.items
        self.weights: List[int] = [it.weight for it in items]
        self.values: List[Real] = [it.value for it in items]
        self.counts: List[Optional[int]] = [it.count for it in items]
        self.sack_count: int = len(instance.knapsacks)
        self.unbound_items: List[int] = [i for i, it in enumerate(items) if not it.is_bound]

        # next_bound[i] = first bound item index >= i (None past the end)
        self._next_bound: List[Optional[int]] = [None] * (len(items) + 1)
        for i in range(len(items) - 1, -1, -1):
            self._next_bound[i] = i if items[i].is_bound else self._next_bound[i + 1]

        self.state = CanonicalSackState(instance.capacities)
        self.unbound_memo: Dict[SackKey, UnboundEntry] = {}
        self.bound_memo: Dict[BoundKey, BoundEntry] = {}

        self.start: Optional[BoundPoint] = self._item_start(0)

    # -----------------------------
    # Decision point transitions
    # -----------------------------

    def _item_start(self, index: int) -> Optional[BoundPoint]:
        """Full-count point of the first bound item at or after `index`."""
        nxt = self._next_bound[index]
        if nxt is None:
            return None
        return nxt, self.counts[nxt], 0

    def after_skip(self, point: BoundPoint) -> Optional[BoundPoint]:
        """Next decision point when the unit at `point` is not placed."""
        i, c, k = point
        if k + 1 < self.sack_count:
            return i, c, k + 1
        return self._item_start(i + 1)

    def after_place(self, point: BoundPoint) -> Optional[BoundPoint]:
        """Next decision point after placing one unit at `point`."""
        i, c, k = point
        if c > 1:
            return i, c - 1, k
        return self._item_start(i + 1)

    def bound_key(self, point: BoundPoint) -> BoundKey:
        return point + self.state.split_key(point[2])

    # -----------------------------
    # Unbound recurrence
    # -----------------------------

    def solve_unbound(self) -> Real:
        """Optimum for the current sack multiset (bound search starts from scratch)."""
        state = self.state
        key = state.key()
        entry = self.unbound_memo.get(key)
        if entry is not None:
            return entry.value

        best = self.solve_bound(self.start) if self.start is not None else 0
        selection: Optional[Tuple[int, int]] = None
        capacity: Optional[int] = None

        weights, values = self.weights, self.values
        for i in self.unbound_items:
            weight = weights[i]
            tried: set = set()
            for k in range(self.sack_count):
                sackmax = state.occurrence_value(k)
                # Equal capacities lead to the same multiset, hence the same value.
                if weight > sackmax or sackmax in tried:
                    continue
                tried.add(sackmax)
                with state.decreased(k, weight):
                    candidate = self.solve_unbound() + values[i]
                if candidate > best:
                    best = candidate
                    selection = (i, k)
                    capacity = sackmax

        self.unbound_memo[key] = UnboundEntry(value=best, selection=selection, capacity=capacity)
        return best

    # -----------------------------
    # Bound recurrence
    # -----------------------------

    def decide_bound(self, point: BoundPoint) -> Tuple[Real, bool]:
        """
        Evaluate skip and place at `point` for the current state.

        Returns (best value, True if placing one unit is strictly better).
        """
        state = self.state
        i, _c, k = point

        skip = self.after_skip(point)
        best = self.solve_bound(skip) if skip is not None else 0

        weight = self.weights[i]
        if weight <= state.occurrence_value(k):
            candidate = self.values[i]
            nxt = self.after_place(point)
            if nxt is not None:
                with state.decreased(k, weight):
                    candidate += self.solve_bound(nxt)
            if candidate > best:
                return candidate, True
        return best, False

    def solve_bound(self, point: BoundPoint) -> Real:
        """
        Optimum using bound item i at most c more times from occurrence k on,
        followed by all later bound items. `point` = (i, c, k) with c > 0.
        """
        key = self.bound_key(point)
        entry = self.bound_memo.get(key)
        if entry is not None:
            return entry.value

        best, selected = self.decide_bound(point)
        capacity = self.state.occurrence_value(point[2])
        self.bound_memo[key] = BoundEntry(value=best, selected=selected, capacity=capacity)
        return best
