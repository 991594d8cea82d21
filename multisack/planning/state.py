# -*- coding: utf-8 -*-
"""
Problem instance container for the multi-sack planning pipeline.

This module defines:
  - ProblemInstance: immutable input snapshot (items + sack specs)

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.items.Item
  * business_objects.knapsacks.KnapsackSpec
- The per-solve mutable state (canonical sack multiset, memo tables) lives in
  `planning.sack_state` and `planning.solvers`; it is never stored here.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from multisack.business_objects.errors import StateValidationError
from multisack.business_objects.items import Item
from multisack.business_objects.knapsacks import KnapsackSpec


@dataclass(frozen=True)
class ProblemInstance:
    """
    Immutable, validated problem input for a solve.

    Attributes
    ----------
    items : tuple[Item, ...]
        All items; the index order is the order in which bound items are decided.
    knapsacks : tuple[KnapsackSpec, ...]
        Sack templates (id + capacity); sack index k is occurrence k of the
        canonical sack state.
    """
    items: Tuple[Item, ...]
    knapsacks: Tuple[KnapsackSpec, ...]

    def __post_init__(self) -> None:  # type: ignore[override]
        # Accept any sequence but store tuples so the instance stays immutable.
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "knapsacks", tuple(self.knapsacks))

        if not self.knapsacks:
            raise StateValidationError("no knapsack specified")

        seen_items: set[str] = set()
        for it in self.items:
            if it.id in seen_items:
                raise StateValidationError(f"Duplicate Item.id: {it.id}")
            seen_items.add(it.id)

        seen_knaps: set[str] = set()
        for ks in self.knapsacks:
            if ks.id in seen_knaps:
                raise StateValidationError(f"Duplicate KnapsackSpec.id: {ks.id}")
            seen_knaps.add(ks.id)

    @classmethod
    def from_lists(
        cls,
        capacities: List[int],
        items: List[Tuple],
    ) -> "ProblemInstance":
        """
        Convenience constructor with generated ids.

        `items` holds (weight,), (weight, value) or (weight, value, count) tuples;
        a value of None means "same as weight", a count of None means unbounded.
        """
        knaps = [KnapsackSpec(id=f"s{k}", capacity=cap) for k, cap in enumerate(capacities)]
        built: List[Item] = []
        for i, row in enumerate(items):
            weight = row[0]
            value = row[1] if len(row) > 1 else None
            count = row[2] if len(row) > 2 else 1
            built.append(Item(id=f"i{i}", weight=weight, value=value, count=count))
        return cls(items=tuple(built), knapsacks=tuple(knaps))

    @property
    def capacities(self) -> List[int]:
        return [k.capacity for k in self.knapsacks]
