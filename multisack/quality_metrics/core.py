# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to compute KPIs for an exact multi-sack solution.
- No side effects
- No external dependencies
- Works off ProblemInstance and a Solution with a reconstructed placement

Public API:
  - per_knapsack_metrics(instance, solution) -> List[Dict]
  - compute_global_metrics(instance, solution) -> Dict[str, float]
  - feasibility_violations(instance, solution) -> List[str]
"""

from __future__ import annotations
from typing import Any, Dict, List

from multisack.planning import ProblemInstance, Solution

_REL_TOL: float = 1e-9


# ---------------------------------------------------------------------------
# 1) Per-knapsack metrics
# ---------------------------------------------------------------------------
def per_knapsack_metrics(
    instance: ProblemInstance,
    solution: Solution,
) -> List[Dict[str, Any]]:
    """
    Returns one dict per knapsack (instance order) with:
      knapsack_id, capacity, used, remaining, utilization_pct, units_placed, value_sum
    """
    rows: List[Dict[str, Any]] = []
    for k, ks in enumerate(instance.knapsacks):
        content = solution.sack_contents(k)
        used = sum(instance.items[i].weight * c for i, c in content.items())
        value_sum = sum(instance.items[i].value * c for i, c in content.items())
        cap = ks.capacity
        rows.append({
            "knapsack_id": ks.id,
            "capacity": cap,
            "used": used,
            "remaining": cap - used,
            "utilization_pct": (used / cap) * 100.0,
            "units_placed": int(sum(content.values())),
            "value_sum": value_sum,
        })
    return rows


# ---------------------------------------------------------------------------
# 2) Global metrics
# ---------------------------------------------------------------------------
def compute_global_metrics(instance: ProblemInstance, solution: Solution) -> Dict[str, float]:
    """
    Returns:
      {
        "Total Value": ...,
        "OU": ...,            # overall utilization, percent (0..100)
        "VWE": ...,           # value per used weight unit
        "Used Sum": ...,
        "Remaining Sum": ...,
        "Units Placed": ...,
        "Total Items": ...,
        "Bound Items": ...,
        "Unbound Items": ...,
        "Num Knapsacks": ...,
        "Capacity Sum": ...,
      }
    """
    rows = per_knapsack_metrics(instance, solution)
    capacity_sum = float(sum(k.capacity for k in instance.knapsacks))
    used_sum = float(sum(r["used"] for r in rows))
    total_value = float(solution.total_value)
    bound = sum(1 for it in instance.items if it.is_bound)

    return {
        "Total Value": total_value,
        "OU": 0.0 if capacity_sum == 0.0 else (used_sum / capacity_sum) * 100.0,
        "VWE": 0.0 if used_sum == 0.0 else total_value / used_sum,
        "Used Sum": used_sum,
        "Remaining Sum": capacity_sum - used_sum,
        "Units Placed": float(sum(r["units_placed"] for r in rows)),
        "Total Items": float(len(instance.items)),
        "Bound Items": float(bound),
        "Unbound Items": float(len(instance.items) - bound),
        "Num Knapsacks": float(len(instance.knapsacks)),
        "Capacity Sum": capacity_sum,
    }


# ---------------------------------------------------------------------------
# 3) Feasibility check
# ---------------------------------------------------------------------------
def feasibility_violations(instance: ProblemInstance, solution: Solution) -> List[str]:
    """
    Human-readable list of constraint violations (empty if the placement is valid):
      - a sack's placed weight exceeds its capacity
      - a bound item is used more often than its count
      - the placed value differs from solution.total_value
    """
    problems: List[str] = []
    for row in per_knapsack_metrics(instance, solution):
        if row["used"] > row["capacity"]:
            problems.append(
                f"knapsack {row['knapsack_id']}: used {row['used']} > capacity {row['capacity']}"
            )

    for i, total in solution.item_totals().items():
        it = instance.items[i]
        if it.is_bound and total > it.count:
            problems.append(f"item {it.id}: placed {total} times, count is {it.count}")

    placed_value = sum(instance.items[i].value * c for _k, i, c in solution.iter_placements())
    # float sums depend on the summation order
    if abs(placed_value - solution.total_value) > _REL_TOL * max(1, abs(solution.total_value)):
        problems.append(
            f"placed value {placed_value} differs from total value {solution.total_value}"
        )
    return problems
