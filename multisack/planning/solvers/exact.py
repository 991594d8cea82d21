# -*- coding: utf-8 -*-
"""
Exact multi-sack knapsack solver (public entry points).

  solve(instance)                  -> optimal total value
  solve_with_placement(instance)   -> Solution (value + per-sack item counts)
  run_exact(instance, policy, tracker=None) -> Solution, honouring Policy and
                                     optionally writing CSV artifacts

Each call builds a fresh SearchContext (sack multiset + memo tables) and drops
it on return; nothing is shared between calls, so concurrent calls on the same
instance are safe while a single context must never be shared.

Memory is the limiting resource: the memo tables grow with the number of
distinct reachable sack multisets. MemoryError and RecursionError are not
caught here.
"""

from __future__ import annotations
import logging
import sys
from contextlib import contextmanager
from numbers import Real
from typing import Iterator, Optional

from multisack.planning.policy import Policy
from multisack.planning.solution import Solution
from multisack.planning.state import ProblemInstance
from multisack.planning.tracker import Tracker
from .reconstruct import reconstruct_placement
from .recurrence import SearchContext

logger = logging.getLogger(__name__)

DEFAULT_POLICY = Policy()


@contextmanager
def _recursion_limit(limit: int) -> Iterator[None]:
    """Raise the interpreter recursion limit to at least `limit` inside the block."""
    old = sys.getrecursionlimit()
    if limit > old:
        logger.debug("raising recursion limit from %d to %d", old, limit)
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        if limit > old:
            sys.setrecursionlimit(old)


def _search(instance: ProblemInstance, policy: Policy, reconstruct: bool) -> Solution:
    if not instance.items or not instance.knapsacks:
        placements = tuple({} for _ in instance.knapsacks) if reconstruct else None
        return Solution(total_value=0, placements=placements)

    ctx = SearchContext(instance)
    placements = None
    with _recursion_limit(policy.recursion_limit):
        value: Real = ctx.solve_unbound()
        logger.debug(
            "search finished: value=%s, unbound memo=%d entries, bound memo=%d entries",
            value, len(ctx.unbound_memo), len(ctx.bound_memo),
        )
        if reconstruct:
            # replay may re-decide entries cached for another sack arrangement
            placements = reconstruct_placement(ctx)
    return Solution(total_value=value, placements=placements)


def solve(instance: ProblemInstance, policy: Optional[Policy] = None) -> Real:
    """Optimal total value only; the memo tables are discarded without replay."""
    return _search(instance, policy or DEFAULT_POLICY, reconstruct=False).total_value


def solve_with_placement(
    instance: ProblemInstance,
    policy: Optional[Policy] = None,
) -> Solution:
    """Optimal total value plus, per sack index, the item index -> count mapping."""
    return _search(instance, policy or DEFAULT_POLICY, reconstruct=True)


def run_exact(
    instance: ProblemInstance,
    policy: Policy,
    tracker: Optional[Tracker] = None,
) -> Solution:
    """
    Solve `instance` as configured by `policy`.

    Parameters
    ----------
    instance : ProblemInstance
        Already prepared input (see planning.preprocess.prepare_instance).
    policy : Policy
        Uses policy.reconstruct and policy.recursion_limit.
    tracker : Tracker | None
        If provided (and a placement was built), writes assignments.csv,
        per_knapsack.csv and problem_summary.csv into tracker.out_dir.

    Returns
    -------
    Solution
    """
    sol = _search(instance, policy, reconstruct=policy.reconstruct)
    logger.info("optimal value: %s", sol.total_value)

    if tracker is not None and sol.has_placement:
        tracker.write_assignments_csv(instance=instance, solution=sol)
        tracker.write_per_knapsack_csv(instance=instance, solution=sol)
        tracker.write_problem_summary_csv(instance=instance, solution=sol)
    return sol
