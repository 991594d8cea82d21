# -*- coding: utf-8 -*-
import csv

from multisack.planning import Policy, ProblemInstance
from multisack.planning.solvers import run_exact
from multisack.planning.tracker import Tracker


def _rows(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


def test_run_exact_writes_artifacts(tmp_path):
    out = tmp_path / "results"
    inst = ProblemInstance.from_lists([10], [(5, 10), (4, 7), (6, 9)])
    sol = run_exact(inst, Policy(), tracker=Tracker(out_dir=str(out)))
    assert sol.total_value == 17

    assignments = _rows(out / "assignments.csv")
    assert [(r["knapsack_id"], r["item_id"], r["count"]) for r in assignments] == [
        ("s0", "i0", "1"),
        ("s0", "i1", "1"),
    ]
    assert assignments[0]["bound"] == "1"

    (sack,) = _rows(out / "per_knapsack.csv")
    assert sack["used"] == "9"
    assert sack["remaining"] == "1"
    assert sack["utilization_pct"] == "90.000"

    (summary,) = _rows(out / "problem_summary.csv")
    assert summary["Total Value"] == "17.000"
    assert summary["Units Placed"] == "2"
    assert summary["Feasible"] == "1"


def test_value_only_run_writes_nothing(tmp_path):
    out = tmp_path / "results"
    inst = ProblemInstance.from_lists([10], [(5, 10)])
    run_exact(inst, Policy(reconstruct=False), tracker=Tracker(out_dir=str(out)))
    assert out.is_dir()
    assert list(out.iterdir()) == []
