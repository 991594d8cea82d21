# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for an exact multi-sack solve.

Files produced (when Tracker is used):
  - assignments.csv        (one row per (sack, item) with a positive count)
  - per_knapsack.csv       (per-knapsack KPIs)
  - problem_summary.csv    (global KPIs)

Notes
-----
- Callers decide when to invoke these writers; run_exact() calls all three
  after a solve that reconstructed the placement.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass

from multisack.planning import ProblemInstance, Solution
from multisack.quality_metrics.core import (
    compute_global_metrics,
    feasibility_violations,
    per_knapsack_metrics,
)


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def write_assignments_csv(
        self,
        instance: ProblemInstance,
        solution: Solution,
        filename: str = "assignments.csv",
    ) -> str:
        """
        Final per-sack placement.

        Columns:
          knapsack_id, item_id, count, weight, value, total_weight, total_value, bound
        """
        path = os.path.join(self.out_dir, filename)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "knapsack_id",
                "item_id",
                "count",
                "weight",
                "value",
                "total_weight",
                "total_value",
                "bound",
            ])
            for k, i, count in solution.iter_placements():
                it = instance.items[i]
                w.writerow([
                    instance.knapsacks[k].id,
                    it.id,
                    count,
                    it.weight,
                    it.value,
                    count * it.weight,
                    count * it.value,
                    1 if it.is_bound else 0,
                ])
        return path

    def write_per_knapsack_csv(
        self,
        instance: ProblemInstance,
        solution: Solution,
        filename: str = "per_knapsack.csv",
    ) -> str:
        """
        Per-knapsack KPIs.

        Columns:
          knapsack_id, capacity, used, remaining, utilization_pct, units_placed, value_sum
        """
        path = os.path.join(self.out_dir, filename)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "knapsack_id",
                "capacity",
                "used",
                "remaining",
                "utilization_pct",
                "units_placed",
                "value_sum",
            ])
            for row in per_knapsack_metrics(instance, solution):
                w.writerow([
                    row["knapsack_id"],
                    row["capacity"],
                    row["used"],
                    row["remaining"],
                    _fmt(row["utilization_pct"]),
                    row["units_placed"],
                    row["value_sum"],
                ])
        return path

    def write_problem_summary_csv(
            self,
            instance: ProblemInstance,
            solution: Solution,
            filename: str = "problem_summary.csv",
    ) -> str:
        """
        Global KPIs across all knapsacks.

        Columns (in order):
          1. Problem features: Total Items, Bound Items, Unbound Items, Num Knapsacks, Capacity Sum
          2. Quality metrics: Total Value, OU, VWE
          3. Other details: Units Placed, Used Sum, Remaining Sum, Feasible
        """
        path = os.path.join(self.out_dir, filename)
        m = compute_global_metrics(instance, solution)
        feasible = 0 if feasibility_violations(instance, solution) else 1

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            # Header row
            w.writerow([
                # 1. Problem Features
                "Total Items",
                "Bound Items",
                "Unbound Items",
                "Num Knapsacks",
                "Capacity Sum",
                # 2. Quality Metrics
                "Total Value",
                "OU",
                "VWE",
                # 3. Other Details
                "Units Placed",
                "Used Sum",
                "Remaining Sum",
                "Feasible",
            ])
            # Data row
            w.writerow([
                int(m["Total Items"]),
                int(m["Bound Items"]),
                int(m["Unbound Items"]),
                int(m["Num Knapsacks"]),
                int(m["Capacity Sum"]),
                _fmt(m["Total Value"]),
                _fmt(m["OU"]),
                _fmt(m["VWE"]),
                int(m["Units Placed"]),
                int(m["Used Sum"]),
                int(m["Remaining Sum"]),
                feasible,
            ])
        return path


def _fmt(x: float) -> str:
    return f"{float(x):.3f}"
