# -*- coding: utf-8 -*-
"""
Knapsack (sack) models.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class KnapsackSpec:
    """
    Immutable sack template.

    Attributes
    ----------
    id : str
        Unique identifier.
    capacity : int
        Positive integer capacity limit.
    """
    id: str
    capacity: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.id:
            raise StateValidationError("KnapsackSpec.id must be non-empty.")
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise StateValidationError(f"KnapsackSpec[{self.id}] capacity must be an integer.")
        if self.capacity <= 0:
            raise StateValidationError(f"KnapsackSpec[{self.id}] capacity must be > 0.")
