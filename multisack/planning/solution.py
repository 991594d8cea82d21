# -*- coding: utf-8 -*-
"""
Solution model for exact multi-sack planning results.

The solver returns this pure data value; text and CSV reporting
(`planning.report`, `planning.tracker`) consume it without touching the engine.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from numbers import Real
from typing import Dict, Iterator, Optional, Tuple


@dataclass(frozen=True)
class Solution:
    """
    Optimal value plus (optionally) the placement that achieves it.

    Attributes
    ----------
    total_value : int | float | Fraction
        The optimal total value.
    placements : tuple[dict[item_index, count], ...] | None
        One mapping per sack, in the instance's sack order. None when the
        placement was not reconstructed (value-only solve).
    """
    total_value: Real
    placements: Optional[Tuple[Dict[int, int], ...]] = field(default=None)

    @property
    def has_placement(self) -> bool:
        return self.placements is not None

    def sack_contents(self, sack_index: int) -> Dict[int, int]:
        """Item index -> count for one sack (empty if nothing was placed)."""
        if self.placements is None:
            raise ValueError("Solution was computed without placement.")
        return self.placements[sack_index]

    def iter_placements(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (sack_index, item_index, count) triples in sack, then item order."""
        if self.placements is None:
            return
        for k, content in enumerate(self.placements):
            for i in sorted(content):
                yield k, i, content[i]

    def item_totals(self) -> Dict[int, int]:
        """Total placed count per item index, summed across all sacks."""
        totals: Dict[int, int] = {}
        for _k, i, c in self.iter_placements():
            totals[i] = totals.get(i, 0) + c
        return totals
