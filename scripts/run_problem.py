#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run the exact multi-sack solver on problems/problem_1 and export CSV artifacts.

This version does NOT use argparse (see `multisack` for the command line).
Just set the variables at the top of the file and run:

    python scripts/run_problem.py

Outputs under OUT_DIR:
  - assignments.csv        (per-sack placement)
  - per_knapsack.csv       (per-knapsack KPIs)
  - problem_summary.csv    (global KPIs)
"""

from __future__ import annotations
import logging
import os

# ====== CONFIGURATION ======
ITEMS_PATH = "../problems/problem_1/items.json"
KNAPS_PATH = "../problems/problem_1/knapsacks.json"
OUT_DIR = "reports/problem_1"

FLOAT_VALUES = False          # item values are floats
DROP_UNFIT_ITEMS = True       # ignore items that fit into no sack
PROMOTE_LARGE_COUNTS = True   # treat never-exhausted counts as unbounded
RECURSION_LIMIT = 100_000
LOG_LEVEL = logging.INFO
# ============================

from multisack.planning import Policy, Solution
from multisack.planning.preprocess import prepare_instance
from multisack.planning.report import format_solution
from multisack.planning.solvers.exact import run_exact
from multisack.planning.tracker import Tracker
from multisack.utils.read_jsons import read_problem


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    policy = Policy(
        float_values=FLOAT_VALUES,
        drop_unfit_items=DROP_UNFIT_ITEMS,
        promote_large_counts=PROMOTE_LARGE_COUNTS,
        reconstruct=True,
        recursion_limit=RECURSION_LIMIT,
    )

    # Load problem and apply the advisory transformations
    instance = read_problem(ITEMS_PATH, KNAPS_PATH, value_type=policy.value_type)
    instance = prepare_instance(instance, policy)

    # Set up output tracker
    tracker = Tracker(out_dir=OUT_DIR)

    solution: Solution = run_exact(instance, policy, tracker=tracker)

    print("\n=== Exact Solve Complete (problem_1) ===")
    print(format_solution(instance, solution), end="")

    print("\nArtifacts written under:")
    print(f"  - {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()
