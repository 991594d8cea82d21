# -*- coding: utf-8 -*-
"""
Item model for multi-sack knapsack problems.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Optional

from .errors import StateValidationError


@dataclass(frozen=True)
class Item:
    """
    An item that can be placed into sacks a bounded or unbounded number of times.

    Attributes
    ----------
    id : str
        Unique identifier.
    weight : int
        Positive integer weight (capacity consumption per unit).
    value : int | float | Fraction | None
        Positive objective contribution per unit. If omitted, the weight is
        used as the value and `value_is_weight` is set.
    count : int | None
        How many units are available in total across all sacks.
        None means unbounded (arbitrary reuse).
    """
    id: str
    weight: int
    value: Optional[Real] = None
    count: Optional[int] = 1
    value_is_weight: bool = field(default=False, init=False, compare=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.id:
            raise StateValidationError("Item.id must be non-empty.")
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise StateValidationError(f"Item[{self.id}] weight must be an integer.")
        if self.weight <= 0:
            raise StateValidationError(f"Item[{self.id}] weight must be > 0.")
        if self.count is not None and self.count <= 0:
            raise StateValidationError(
                f"Item[{self.id}] count must be > 0 (use None for unbounded)."
            )
        if self.value is None:
            # frozen dataclass: bypass __setattr__
            object.__setattr__(self, "value", self.weight)
            object.__setattr__(self, "value_is_weight", True)
        elif isinstance(self.value, bool) or not isinstance(self.value, Real):
            raise StateValidationError(f"Item[{self.id}] value must be a number.")
        elif not math.isfinite(self.value) or self.value <= 0:
            raise StateValidationError(f"Item[{self.id}] value must be finite and > 0.")

    @property
    def is_bound(self) -> bool:
        """True if the item has a finite availability."""
        return self.count is not None

    def _derive(self, value: Real, count: Optional[int]) -> "Item":
        derived = Item(id=self.id, weight=self.weight, value=value, count=count)
        if self.value_is_weight:
            object.__setattr__(derived, "value_is_weight", True)
        return derived

    def with_value_type(self, value_type: type) -> "Item":
        """Return a copy whose value is converted to `value_type` (e.g. float)."""
        return self._derive(value_type(self.value), self.count)

    def as_unbound(self) -> "Item":
        """Return a copy with unbounded availability."""
        return self._derive(self.value, None)
