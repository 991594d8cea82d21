# -*- coding: utf-8 -*-
"""
Canonical sack state: the multiset of remaining sack capacities.

Two states compare equal (and hash equal) iff their capacity multisets are
equal, regardless of which sack holds which capacity. Memo tables of the exact
solver are keyed by `key()`, so symmetric assignments such as "item into sack 0"
and "item into sack 1" for two equal sacks collapse into one entry.

Occurrence k is a stable label for the sack at index k during one solve; its
*value* changes as capacity is consumed and restored. Since several
arrangements share one key, a decision cached under a key must be replayed in
terms of capacities, not occurrence labels.
"""

from __future__ import annotations
from bisect import bisect_left, insort
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Tuple

SackKey = Tuple[int, ...]


class CanonicalSackState:
    """
    Mutable multiset of remaining capacities with per-occurrence addressing.

    `_values[k]` is the current capacity of occurrence k, `_sorted` holds the
    same numbers in ascending order and is the canonical form.
    """

    __slots__ = ("_values", "_sorted")

    def __init__(self, capacities: Iterable[int]) -> None:
        self._values: List[int] = list(capacities)
        self._sorted: List[int] = sorted(self._values)

    # -----------------------------
    # Read access
    # -----------------------------

    def __len__(self) -> int:
        return len(self._values)

    def occurrence_value(self, k: int) -> int:
        """Current capacity of occurrence k."""
        return self._values[k]

    def key(self) -> SackKey:
        """Immutable snapshot of the multiset, usable as a dict key."""
        return tuple(self._sorted)

    def split_key(self, k: int) -> Tuple[SackKey, SackKey]:
        """Multisets of occurrences [0, k) and [k, n), each as a sorted tuple."""
        if k == 0:
            return (), tuple(self._sorted)
        return tuple(sorted(self._values[:k])), tuple(sorted(self._values[k:]))

    def find(self, value: int) -> int:
        """First occurrence currently holding `value` (ValueError if none)."""
        return self._values.index(value)

    # -----------------------------
    # Mutation
    # -----------------------------

    def _replace(self, k: int, new_value: int) -> None:
        old = self._values[k]
        del self._sorted[bisect_left(self._sorted, old)]
        insort(self._sorted, new_value)
        self._values[k] = new_value

    def decrease(self, k: int, amount: int) -> None:
        """Subtract `amount` from occurrence k; the caller guarantees no underflow."""
        self._replace(k, self._values[k] - amount)

    def decrease_to(self, k: int, new_value: int) -> None:
        self._replace(k, new_value)

    def increase_to(self, k: int, new_value: int) -> None:
        """Inverse of decrease_to: restore occurrence k to `new_value`."""
        self._replace(k, new_value)

    @contextmanager
    def decreased(self, k: int, amount: int) -> Iterator["CanonicalSackState"]:
        """
        Scoped mutation: occurrence k is lowered by `amount` inside the block
        and restored on every exit path, including exceptions.
        """
        old = self._values[k]
        self.decrease_to(k, old - amount)
        try:
            yield self
        finally:
            self.increase_to(k, old)

    # -----------------------------
    # Multiset identity
    # -----------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanonicalSackState):
            return NotImplemented
        return self._sorted == other._sorted

    def __hash__(self) -> int:
        return hash(self.key())

    def __repr__(self) -> str:
        return f"CanonicalSackState({self._values!r})"
