# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the multi-sack planning pipeline.

Input handling (applied by the collaborators before the engine runs):
  - float_values: item values are floating point numbers instead of integers
  - drop_unfit_items: ignore items heavier than every sack (with a warning)
  - promote_large_counts: treat a bounded item as unbounded when its count is at
    least the number of units that could ever fit (with a warning)

Engine:
  - reconstruct: build the per-sack placement, not only the optimal value
  - recursion_limit: minimum interpreter recursion limit while a solve runs
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Policy:
    """
    Planning knobs (pure data holder).

    Attributes
    ----------
    # Input handling
    float_values : bool
        Parse item values as floats (the values of items without an explicit
        value are the weights converted to float).
    drop_unfit_items : bool
        Remove items that fit into no sack before solving.
    promote_large_counts : bool
        Replace "enough" bounded counts by unbounded availability.

    # Engine
    reconstruct : bool
        If False only the optimal value is computed.
    recursion_limit : int
        The solver raises sys.getrecursionlimit() to at least this value for
        the duration of one solve and restores it afterwards.
    """
    # Input handling
    float_values: bool = False
    drop_unfit_items: bool = True
    promote_large_counts: bool = True

    # Engine
    reconstruct: bool = True
    recursion_limit: int = 100_000

    @property
    def value_type(self) -> type:
        return float if self.float_values else int
