# -*- coding: utf-8 -*-
"""
Advisory input transformations applied before the exact solver runs.

  - drop_unfit_items:     an item heavier than the largest sack can never be
                          placed; it is removed with a warning.
  - promote_large_counts: a bound item whose count reaches the number of units
                          that fit into all sacks together can never run out;
                          it becomes unbound (smaller memo keys) with a warning.
  - float_values:         all values are converted to float.

None of these change the optimal value.
"""

from __future__ import annotations
import logging
from typing import List

from multisack.business_objects.items import Item
from multisack.planning.policy import Policy
from multisack.planning.state import ProblemInstance

logger = logging.getLogger(__name__)


def max_units(item: Item, capacities: List[int]) -> int:
    """Number of units of `item` that fit into all sacks together."""
    return sum(cap // item.weight for cap in capacities)


def prepare_instance(instance: ProblemInstance, policy: Policy) -> ProblemInstance:
    """Return a new ProblemInstance with the transformations enabled in `policy`."""
    capacities = instance.capacities
    largest = max(capacities)

    kept: List[Item] = []
    for it in instance.items:
        if policy.drop_unfit_items and it.weight > largest:
            logger.warning(
                "item %s (weight %s) is too heavy for any sack, ignored", it.id, it.weight
            )
            continue

        if policy.promote_large_counts and it.is_bound and it.count > 1:
            limit = max_units(it, capacities)
            if it.count >= limit:
                logger.warning(
                    "item %s: count %s is large enough to be treated as unbounded",
                    it.id, it.count,
                )
                it = it.as_unbound()

        if policy.float_values and not isinstance(it.value, float):
            it = it.with_value_type(float)
        kept.append(it)

    return ProblemInstance(items=tuple(kept), knapsacks=instance.knapsacks)
